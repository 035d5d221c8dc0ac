from typing import Optional

from gifts.domain.entities.event import EventOut
from gifts.domain.entities.gift_suggestion import GiftSuggestionOut
from gifts.domain.entities.wishlist import WishlistOut
from gifts.domain.exceptions import NotAMember
from gifts.services.event_service import EventService
from gifts.services.gift_suggestion_service import GiftSuggestionService
from gifts.services.wishlist_service import WishlistService


class AccessService:
    """
    Membership checks walking suggestion -> wishlist -> event.
    Returns None when any link in the chain is missing; raises NotAMember otherwise.
    """

    def __init__(
        self,
        events: EventService,
        wishlists: WishlistService,
        suggestions: GiftSuggestionService,
    ):
        self.events = events
        self.wishlists = wishlists
        self.suggestions = suggestions

    async def member_event(self, event_id: str, user_id: str) -> Optional[EventOut]:
        event = await self.events.get(event_id)
        if not event:
            return None
        if user_id not in event.member_ids:
            raise NotAMember(event_id)
        return event

    async def member_wishlist(self, wishlist_id: str, user_id: str) -> Optional[WishlistOut]:
        wishlist = await self.wishlists.get(wishlist_id)
        if not wishlist:
            return None
        if not await self.member_event(wishlist.event_id, user_id):
            return None
        return wishlist

    async def member_suggestion(self, suggestion_id: str, user_id: str) -> Optional[GiftSuggestionOut]:
        suggestion = await self.suggestions.get(suggestion_id)
        if not suggestion:
            return None
        if not await self.member_wishlist(suggestion.wishlist_id, user_id):
            return None
        return suggestion

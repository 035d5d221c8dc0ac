from fastapi import Depends, HTTPException, Path, status

from app.core.auth import get_current_user_id
from gifts.domain.entities.event import EventOut
from gifts.domain.entities.gift_suggestion import GiftSuggestionOut
from gifts.domain.entities.wishlist import WishlistOut
from gifts.domain.exceptions import NotAMember
from gifts.services.access_service import AccessService
from shared.wiring import get_access_service


def _not_found() -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="not found")


def _forbidden() -> HTTPException:
    return HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="forbidden")


async def member_event(
    event_id: str = Path(..., description="Event id"),
    user_id: str = Depends(get_current_user_id),
    access: AccessService = Depends(get_access_service),
) -> EventOut:
    try:
        event = await access.member_event(event_id, user_id)
    except NotAMember:
        raise _forbidden()
    if not event:
        raise _not_found()
    return event


async def member_wishlist(
    wishlist_id: str = Path(..., description="Wishlist id"),
    user_id: str = Depends(get_current_user_id),
    access: AccessService = Depends(get_access_service),
) -> WishlistOut:
    try:
        wishlist = await access.member_wishlist(wishlist_id, user_id)
    except NotAMember:
        raise _forbidden()
    if not wishlist:
        raise _not_found()
    return wishlist


async def member_suggestion(
    suggestion_id: str = Path(..., description="Gift suggestion id"),
    user_id: str = Depends(get_current_user_id),
    access: AccessService = Depends(get_access_service),
) -> GiftSuggestionOut:
    try:
        suggestion = await access.member_suggestion(suggestion_id, user_id)
    except NotAMember:
        raise _forbidden()
    if not suggestion:
        raise _not_found()
    return suggestion

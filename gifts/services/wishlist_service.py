from datetime import datetime, timezone
from typing import List, Optional

from gifts.domain.entities.wishlist import WishlistCreate, WishlistOut, WishlistUpdate
from gifts.ports.outbound.document_store_port import DocumentStorePort, FieldFilter
from gifts.services.gift_suggestion_service import SUGGESTIONS

WISHLISTS = "wishlists"


class WishlistService:
    def __init__(self, store: DocumentStorePort):
        self.store = store

    async def create(self, event_id: str, payload: WishlistCreate, user_id: str) -> WishlistOut:
        data = {
            "event_id": event_id,
            "name": payload.name,
            "created_by": user_id,
            "created_at": datetime.now(timezone.utc),
        }
        wishlist_id = await self.store.add(WISHLISTS, data)
        return WishlistOut(id=wishlist_id, **data)

    async def update(self, wishlist_id: str, payload: WishlistUpdate) -> Optional[WishlistOut]:
        if not await self.store.get(WISHLISTS, wishlist_id):
            return None
        changes = {k: v for k, v in payload.model_dump(exclude_unset=True).items() if v is not None}
        if changes:
            await self.store.set(WISHLISTS, wishlist_id, changes, merge=True)
        return await self.get(wishlist_id)

    async def delete(self, wishlist_id: str) -> bool:
        """Deletes the wishlist and every gift suggestion filed under it."""
        suggestions = await self.store.query(SUGGESTIONS, [FieldFilter("wishlist_id", "==", wishlist_id)])
        for doc in suggestions:
            await self.store.delete(SUGGESTIONS, doc["id"])
        return await self.store.delete(WISHLISTS, wishlist_id)

    async def get(self, wishlist_id: str) -> Optional[WishlistOut]:
        doc = await self.store.get(WISHLISTS, wishlist_id)
        return WishlistOut.model_validate(doc) if doc else None

    async def list_for_event(self, event_id: str) -> List[WishlistOut]:
        rows = await self.store.query(
            WISHLISTS,
            [FieldFilter("event_id", "==", event_id)],
            order_by="created_at",
            descending=True,
        )
        return [WishlistOut.model_validate(r) for r in rows]

import logging
from datetime import datetime, timezone
from typing import List, Optional

from pydantic import ValidationError

from gifts.domain.entities.gift_suggestion import (
    GiftSuggestionCreate,
    GiftSuggestionOut,
    GiftSuggestionUpdate,
)
from gifts.ports.outbound.document_store_port import (
    DELETE_FIELD,
    DocumentNotFound,
    DocumentStorePort,
    FieldFilter,
)

logger = logging.getLogger(__name__)

SUGGESTIONS = "giftSuggestions"


class GiftSuggestionService:
    def __init__(self, store: DocumentStorePort):
        self.store = store

    # ---------- Mutations ----------

    async def create(self, wishlist_id: str, payload: GiftSuggestionCreate, user_id: str) -> GiftSuggestionOut:
        data = {
            **payload.model_dump(),
            "wishlist_id": wishlist_id,
            "suggested_by": user_id,
            "created_at": datetime.now(timezone.utc),
            "is_favorited": False,
            "is_purchased": False,
        }
        suggestion_id = await self.store.add(SUGGESTIONS, data)
        logger.info("created gift suggestion %s in wishlist %s", suggestion_id, wishlist_id)
        return GiftSuggestionOut(id=suggestion_id, **data)

    async def update(self, suggestion_id: str, payload: GiftSuggestionUpdate) -> Optional[GiftSuggestionOut]:
        if not await self.store.get(SUGGESTIONS, suggestion_id):
            return None
        changes = payload.model_dump(exclude_unset=True)
        # title and sort_order are required on the document; description/link may be cleared
        for required in ("title", "sort_order"):
            if changes.get(required, 0) is None:
                changes.pop(required)
        if changes:
            await self.store.set(SUGGESTIONS, suggestion_id, changes, merge=True)
        return await self.get(suggestion_id)

    async def delete(self, suggestion_id: str) -> bool:
        return await self.store.delete(SUGGESTIONS, suggestion_id)

    async def set_favorite(self, suggestion_id: str, is_favorited: bool) -> Optional[GiftSuggestionOut]:
        return await self._update_fields(suggestion_id, {"is_favorited": is_favorited})

    async def mark_purchased(self, suggestion_id: str, user_id: str) -> Optional[GiftSuggestionOut]:
        return await self._update_fields(suggestion_id, {"is_purchased": True, "purchased_by": user_id})

    async def mark_not_purchased(self, suggestion_id: str) -> Optional[GiftSuggestionOut]:
        return await self._update_fields(suggestion_id, {"is_purchased": False, "purchased_by": DELETE_FIELD})

    # ---------- Queries ----------

    async def get(self, suggestion_id: str) -> Optional[GiftSuggestionOut]:
        doc = await self.store.get(SUGGESTIONS, suggestion_id)
        return GiftSuggestionOut.model_validate(doc) if doc else None

    async def list_for_wishlist(self, wishlist_id: str) -> List[GiftSuggestionOut]:
        rows = await self.store.query(
            SUGGESTIONS,
            [FieldFilter("wishlist_id", "==", wishlist_id)],
            order_by="created_at",
            descending=True,
        )
        out: List[GiftSuggestionOut] = []
        for row in rows:
            try:
                out.append(GiftSuggestionOut.model_validate(row))
            except ValidationError as e:
                # one malformed document should not hide the rest of the list
                logger.warning("skipping undecodable gift suggestion %s: %s", row.get("id"), e)
        return out

    # ---------- Internal helpers ----------

    async def _update_fields(self, suggestion_id: str, fields: dict) -> Optional[GiftSuggestionOut]:
        try:
            await self.store.update(SUGGESTIONS, suggestion_id, fields)
        except DocumentNotFound:
            return None
        return await self.get(suggestion_id)

from datetime import datetime, timezone
from typing import List, Optional

from gifts.domain.entities.event import EventCreate, EventOut, EventUpdate
from gifts.domain.exceptions import UserNotFound
from gifts.ports.outbound.document_store_port import DocumentNotFound, DocumentStorePort, FieldFilter
from gifts.services.user_service import UserService

EVENTS = "events"


class EventService:
    """
    Events and their membership.
    The creator is always the first member; membership has set semantics.
    """

    def __init__(self, store: DocumentStorePort, users: UserService):
        self.store = store
        self.users = users

    # ---------- Mutations ----------

    async def create(self, payload: EventCreate, user_id: str) -> EventOut:
        data = {
            "name": payload.name,
            "created_by": user_id,
            "created_at": datetime.now(timezone.utc),
            "event_date": payload.event_date,
            "member_ids": [user_id],
        }
        event_id = await self.store.add(EVENTS, data)
        return EventOut(id=event_id, **data)

    async def update(self, event_id: str, payload: EventUpdate) -> Optional[EventOut]:
        if not await self.store.get(EVENTS, event_id):
            return None
        changes = payload.model_dump(exclude_unset=True)
        # event_date may be cleared explicitly; name may not
        if changes.get("name", "") is None:
            changes.pop("name")
        if changes:
            await self.store.set(EVENTS, event_id, changes, merge=True)
        return await self.get(event_id)

    async def delete(self, event_id: str) -> bool:
        return await self.store.delete(EVENTS, event_id)

    async def add_member(self, event_id: str, user_id: str) -> Optional[EventOut]:
        try:
            await self.store.array_union(EVENTS, event_id, "member_ids", [user_id])
        except DocumentNotFound:
            return None
        return await self.get(event_id)

    async def invite_by_email(self, event_id: str, email: str) -> Optional[EventOut]:
        """Adds the registered user with this email; raises UserNotFound for unknown emails."""
        user = await self.users.get_by_email(email)
        if not user:
            raise UserNotFound(email)
        return await self.add_member(event_id, user.id)

    # ---------- Queries ----------

    async def get(self, event_id: str) -> Optional[EventOut]:
        doc = await self.store.get(EVENTS, event_id)
        return EventOut.model_validate(doc) if doc else None

    async def list_for_member(self, user_id: str) -> List[EventOut]:
        rows = await self.store.query(
            EVENTS,
            [FieldFilter("member_ids", "array_contains", user_id)],
            order_by="created_at",
            descending=True,
        )
        return [EventOut.model_validate(r) for r in rows]

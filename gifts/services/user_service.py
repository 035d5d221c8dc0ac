from datetime import datetime, timezone
from typing import Optional

from gifts.domain.entities.user import UserCreate, UserOut
from gifts.domain.exceptions import EmailAlreadyRegistered
from gifts.ports.outbound.document_store_port import DocumentStorePort, FieldFilter

USERS = "users"


class UserService:
    def __init__(self, store: DocumentStorePort):
        self.store = store

    async def create(self, user_id: str, payload: UserCreate) -> UserOut:
        """Profile document for an account the auth provider already created; the id is the auth uid."""
        existing = await self.get_by_email(payload.email)
        if existing and existing.id != user_id:
            raise EmailAlreadyRegistered(payload.email)

        data = {
            "email": payload.email,
            "display_name": payload.display_name,
            "created_at": datetime.now(timezone.utc),
        }
        await self.store.set(USERS, user_id, data)
        return UserOut(id=user_id, **data)

    async def get(self, user_id: str) -> Optional[UserOut]:
        doc = await self.store.get(USERS, user_id)
        return UserOut.model_validate(doc) if doc else None

    async def get_by_email(self, email: str) -> Optional[UserOut]:
        rows = await self.store.query(USERS, [FieldFilter("email", "==", email)], limit=1)
        return UserOut.model_validate(rows[0]) if rows else None

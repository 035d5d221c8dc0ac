from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field


class WishlistCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=200)


class WishlistUpdate(BaseModel):
    name: Optional[str] = Field(default=None, min_length=1, max_length=200)


class WishlistOut(BaseModel):
    id: str
    event_id: str
    name: str
    created_by: str
    created_at: datetime

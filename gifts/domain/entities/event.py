from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, EmailStr, Field


class EventCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=200)
    event_date: Optional[datetime] = None


class EventUpdate(BaseModel):
    name: Optional[str] = Field(default=None, min_length=1, max_length=200)
    event_date: Optional[datetime] = None


class EventOut(BaseModel):
    id: str
    name: str
    created_by: str
    created_at: datetime
    event_date: Optional[datetime] = None
    member_ids: List[str] = []


class InviteIn(BaseModel):
    email: EmailStr

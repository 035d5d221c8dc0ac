from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field


class GiftSuggestionBase(BaseModel):
    title: str = Field(..., min_length=1, max_length=200)
    description: Optional[str] = None
    link: Optional[str] = None  # free text as typed by the user; previews cope with bad values
    sort_order: int = 0


class GiftSuggestionCreate(GiftSuggestionBase):
    pass


class GiftSuggestionUpdate(BaseModel):
    title: Optional[str] = Field(default=None, min_length=1, max_length=200)
    description: Optional[str] = None
    link: Optional[str] = None
    sort_order: Optional[int] = None


class GiftSuggestionOut(GiftSuggestionBase):
    id: str
    wishlist_id: str
    suggested_by: str
    created_at: datetime
    is_favorited: bool = False
    is_purchased: bool = False
    purchased_by: Optional[str] = None


class FavoriteIn(BaseModel):
    is_favorited: bool

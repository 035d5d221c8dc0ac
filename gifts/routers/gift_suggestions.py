from typing import List

from fastapi import APIRouter, Body, Depends, HTTPException, status

from app.core.auth import get_current_user_id
from gifts.domain.entities.gift_suggestion import (
    FavoriteIn,
    GiftSuggestionCreate,
    GiftSuggestionOut,
    GiftSuggestionUpdate,
)
from gifts.domain.entities.wishlist import WishlistOut
from gifts.routers.deps import member_suggestion, member_wishlist
from gifts.services.gift_suggestion_service import GiftSuggestionService
from shared.wiring import get_gift_suggestion_service

router = APIRouter(
    prefix="/v1",
    tags=["gift suggestions"],
    responses={
        401: {"description": "Missing `X-User-Id` header."},
        403: {"description": "Caller is not a member of the owning event."},
        404: {"description": "Wishlist or suggestion not found."},
    },
)

_SUGGESTION_EXAMPLE = {
    "id": "c0ffee00c0ffee00c0ffee00c0ffee00",
    "wishlist_id": "4b6d1e0f3a2c4d5e9f8a7b6c5d4e3f2a",
    "title": "Espresso machine",
    "description": "The small one, not the plumbed-in one.",
    "link": "https://shop.example.com/products/espresso-machine",
    "suggested_by": "u_3Lm9xz",
    "created_at": "2025-11-02T18:30:00Z",
    "is_favorited": True,
    "is_purchased": False,
    "purchased_by": None,
    "sort_order": 0,
}


def _or_404(obj):
    if not obj:
        raise HTTPException(status_code=404, detail="not found")
    return obj


@router.post(
    "/wishlists/{wishlist_id}/suggestions",
    summary="Suggest a gift",
    description=(
        "Adds a gift suggestion to the wishlist. `link` is stored as typed; clients render its "
        "preview via `GET /v1/previews?url=...`."
    ),
    response_model=GiftSuggestionOut,
    status_code=status.HTTP_201_CREATED,
    responses={
        201: {
            "description": "Suggestion created.",
            "content": {"application/json": {"examples": {"created": {"value": _SUGGESTION_EXAMPLE}}}},
        },
    },
)
async def create_suggestion(
    payload: GiftSuggestionCreate,
    wishlist: WishlistOut = Depends(member_wishlist),
    user_id: str = Depends(get_current_user_id),
    svc: GiftSuggestionService = Depends(get_gift_suggestion_service),
):
    return await svc.create(wishlist.id, payload, user_id)


@router.get(
    "/wishlists/{wishlist_id}/suggestions",
    summary="List a wishlist's gift suggestions",
    description="Newest first.",
    response_model=List[GiftSuggestionOut],
)
async def list_suggestions(
    wishlist: WishlistOut = Depends(member_wishlist),
    svc: GiftSuggestionService = Depends(get_gift_suggestion_service),
):
    return await svc.list_for_wishlist(wishlist.id)


@router.get("/suggestions/{suggestion_id}", summary="Get a gift suggestion", response_model=GiftSuggestionOut)
async def get_suggestion(suggestion: GiftSuggestionOut = Depends(member_suggestion)):
    return suggestion


@router.patch("/suggestions/{suggestion_id}", summary="Edit a gift suggestion", response_model=GiftSuggestionOut)
async def update_suggestion(
    payload: GiftSuggestionUpdate = Body(..., description="Partial update payload"),
    suggestion: GiftSuggestionOut = Depends(member_suggestion),
    svc: GiftSuggestionService = Depends(get_gift_suggestion_service),
):
    return _or_404(await svc.update(suggestion.id, payload))


@router.delete(
    "/suggestions/{suggestion_id}",
    summary="Delete a gift suggestion",
    responses={
        200: {
            "description": "Deleted.",
            "content": {"application/json": {"examples": {"ok": {"value": {"ok": True}}}}},
        },
    },
)
async def delete_suggestion(
    suggestion: GiftSuggestionOut = Depends(member_suggestion),
    svc: GiftSuggestionService = Depends(get_gift_suggestion_service),
):
    _or_404(await svc.delete(suggestion.id))
    return {"ok": True}


@router.put(
    "/suggestions/{suggestion_id}/favorite",
    summary="Favorite or unfavorite a gift suggestion",
    response_model=GiftSuggestionOut,
)
async def set_favorite(
    body: FavoriteIn = Body(..., examples=[{"is_favorited": True}]),
    suggestion: GiftSuggestionOut = Depends(member_suggestion),
    svc: GiftSuggestionService = Depends(get_gift_suggestion_service),
):
    return _or_404(await svc.set_favorite(suggestion.id, body.is_favorited))


@router.put(
    "/suggestions/{suggestion_id}/purchase",
    summary="Mark a gift as purchased by the caller",
    response_model=GiftSuggestionOut,
)
async def mark_purchased(
    suggestion: GiftSuggestionOut = Depends(member_suggestion),
    user_id: str = Depends(get_current_user_id),
    svc: GiftSuggestionService = Depends(get_gift_suggestion_service),
):
    return _or_404(await svc.mark_purchased(suggestion.id, user_id))


@router.delete(
    "/suggestions/{suggestion_id}/purchase",
    summary="Mark a gift as not purchased",
    description="Clears `is_purchased` and removes `purchased_by`.",
    response_model=GiftSuggestionOut,
)
async def mark_not_purchased(
    suggestion: GiftSuggestionOut = Depends(member_suggestion),
    svc: GiftSuggestionService = Depends(get_gift_suggestion_service),
):
    return _or_404(await svc.mark_not_purchased(suggestion.id))

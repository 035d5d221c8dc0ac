from typing import List

from fastapi import APIRouter, Body, Depends, HTTPException, status

from app.core.auth import get_current_user_id
from gifts.domain.entities.event import EventOut
from gifts.domain.entities.wishlist import WishlistCreate, WishlistOut, WishlistUpdate
from gifts.routers.deps import member_event, member_wishlist
from gifts.services.wishlist_service import WishlistService
from shared.wiring import get_wishlist_service

router = APIRouter(
    prefix="/v1",
    tags=["wishlists"],
    responses={
        401: {"description": "Missing `X-User-Id` header."},
        403: {"description": "Caller is not a member of the owning event."},
        404: {"description": "Event or wishlist not found."},
    },
)


@router.post(
    "/events/{event_id}/wishlists",
    summary="Create a wishlist in an event",
    response_model=WishlistOut,
    status_code=status.HTTP_201_CREATED,
    responses={
        201: {
            "description": "Wishlist created.",
            "content": {
                "application/json": {
                    "examples": {
                        "created": {
                            "value": {
                                "id": "4b6d1e0f3a2c4d5e9f8a7b6c5d4e3f2a",
                                "event_id": "9f1c0e4b2a7d4c3e8b5a6f7d8e9c0b1a",
                                "name": "For Mum",
                                "created_by": "u_8Jt2kq",
                                "created_at": "2025-11-02T18:25:00Z",
                            }
                        }
                    }
                }
            },
        },
    },
)
async def create_wishlist(
    payload: WishlistCreate,
    event: EventOut = Depends(member_event),
    user_id: str = Depends(get_current_user_id),
    svc: WishlistService = Depends(get_wishlist_service),
):
    return await svc.create(event.id, payload, user_id)


@router.get(
    "/events/{event_id}/wishlists",
    summary="List an event's wishlists",
    description="Newest first.",
    response_model=List[WishlistOut],
)
async def list_wishlists(
    event: EventOut = Depends(member_event),
    svc: WishlistService = Depends(get_wishlist_service),
):
    return await svc.list_for_event(event.id)


@router.get("/wishlists/{wishlist_id}", summary="Get a wishlist", response_model=WishlistOut)
async def get_wishlist(wishlist: WishlistOut = Depends(member_wishlist)):
    return wishlist


@router.patch("/wishlists/{wishlist_id}", summary="Rename a wishlist", response_model=WishlistOut)
async def update_wishlist(
    payload: WishlistUpdate = Body(..., description="Partial update payload"),
    wishlist: WishlistOut = Depends(member_wishlist),
    svc: WishlistService = Depends(get_wishlist_service),
):
    obj = await svc.update(wishlist.id, payload)
    if not obj:
        raise HTTPException(status_code=404, detail="not found")
    return obj


@router.delete(
    "/wishlists/{wishlist_id}",
    summary="Delete a wishlist",
    description="Deletes the wishlist together with all of its gift suggestions.",
    responses={
        200: {
            "description": "Deleted.",
            "content": {"application/json": {"examples": {"ok": {"value": {"ok": True}}}}},
        },
    },
)
async def delete_wishlist(
    wishlist: WishlistOut = Depends(member_wishlist),
    svc: WishlistService = Depends(get_wishlist_service),
):
    ok = await svc.delete(wishlist.id)
    if not ok:
        raise HTTPException(status_code=404, detail="not found")
    return {"ok": True}

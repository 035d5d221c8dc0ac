from typing import List

from fastapi import APIRouter, Body, Depends, HTTPException, status

from app.core.auth import get_current_user_id
from gifts.domain.entities.event import EventCreate, EventOut, EventUpdate, InviteIn
from gifts.domain.entities.user import UserOut
from gifts.domain.exceptions import UserNotFound
from gifts.routers.deps import member_event
from gifts.services.event_service import EventService
from gifts.services.user_service import UserService
from shared.wiring import get_event_service, get_user_service

router = APIRouter(
    prefix="/v1/events",
    tags=["events"],
    responses={
        401: {"description": "Missing `X-User-Id` header."},
        403: {
            "description": "Caller is not a member of the event.",
            "content": {"application/json": {"examples": {"forbidden": {"value": {"detail": "forbidden"}}}}},
        },
    },
)

_EVENT_EXAMPLE = {
    "id": "9f1c0e4b2a7d4c3e8b5a6f7d8e9c0b1a",
    "name": "Mum's 60th",
    "created_by": "u_8Jt2kq",
    "created_at": "2025-11-02T18:20:00Z",
    "event_date": "2026-03-14T00:00:00Z",
    "member_ids": ["u_8Jt2kq", "u_3Lm9xz"],
}


@router.post(
    "",
    summary="Create an event",
    description="Creates an event owned by the caller. The creator is its first member.",
    response_model=EventOut,
    status_code=status.HTTP_201_CREATED,
    responses={
        201: {
            "description": "Event created.",
            "content": {"application/json": {"examples": {"created": {"value": _EVENT_EXAMPLE}}}},
        },
    },
)
async def create_event(
    payload: EventCreate,
    user_id: str = Depends(get_current_user_id),
    svc: EventService = Depends(get_event_service),
):
    return await svc.create(payload, user_id)


@router.get(
    "",
    summary="List the caller's events",
    description="Events the caller is a member of, newest first.",
    response_model=List[EventOut],
)
async def list_events(
    user_id: str = Depends(get_current_user_id),
    svc: EventService = Depends(get_event_service),
):
    return await svc.list_for_member(user_id)


@router.get(
    "/{event_id}",
    summary="Get an event",
    response_model=EventOut,
    responses={404: {"description": "Event not found."}},
)
async def get_event(event: EventOut = Depends(member_event)):
    return event


@router.patch(
    "/{event_id}",
    summary="Update an event",
    description="Partially updates name and/or date. Any member may edit.",
    response_model=EventOut,
    responses={404: {"description": "Event not found."}},
)
async def update_event(
    payload: EventUpdate = Body(..., description="Partial update payload"),
    event: EventOut = Depends(member_event),
    svc: EventService = Depends(get_event_service),
):
    obj = await svc.update(event.id, payload)
    if not obj:
        raise HTTPException(status_code=404, detail="not found")
    return obj


@router.delete(
    "/{event_id}",
    summary="Delete an event",
    description="Deletes the event document. Returns `{ \"ok\": true }` on success.",
    responses={
        200: {
            "description": "Deleted.",
            "content": {"application/json": {"examples": {"ok": {"value": {"ok": True}}}}},
        },
        404: {"description": "Event not found."},
    },
)
async def delete_event(
    event: EventOut = Depends(member_event),
    svc: EventService = Depends(get_event_service),
):
    ok = await svc.delete(event.id)
    if not ok:
        raise HTTPException(status_code=404, detail="not found")
    return {"ok": True}


@router.get(
    "/{event_id}/members",
    summary="List event members",
    description="Profiles of the event's members. Members without a profile document are skipped.",
    response_model=List[UserOut],
    responses={404: {"description": "Event not found."}},
)
async def list_members(
    event: EventOut = Depends(member_event),
    users: UserService = Depends(get_user_service),
):
    out: List[UserOut] = []
    for member_id in event.member_ids:
        user = await users.get(member_id)
        if user:
            out.append(user)
    return out


@router.post(
    "/{event_id}/invites",
    summary="Invite a user by email",
    description=(
        "Adds the registered user with this email to the event's members. "
        "Inviting an existing member is a no-op."
    ),
    response_model=EventOut,
    responses={
        404: {
            "description": "Event or user not found.",
            "content": {
                "application/json": {"examples": {"user_not_found": {"value": {"detail": "User not found"}}}}
            },
        },
    },
)
async def invite_user(
    body: InviteIn = Body(..., examples=[{"email": "alex@example.com"}]),
    event: EventOut = Depends(member_event),
    svc: EventService = Depends(get_event_service),
):
    try:
        obj = await svc.invite_by_email(event.id, body.email)
    except UserNotFound:
        raise HTTPException(status_code=404, detail="User not found")
    if not obj:
        raise HTTPException(status_code=404, detail="not found")
    return obj

from fastapi import APIRouter, Depends, HTTPException, Path, status

from app.core.auth import get_current_user_id
from gifts.domain.entities.user import UserCreate, UserOut
from gifts.domain.exceptions import EmailAlreadyRegistered
from gifts.services.user_service import UserService
from shared.wiring import get_user_service

router = APIRouter(prefix="/v1/users", tags=["users"])


@router.post(
    "",
    summary="Create the caller's profile",
    description=(
        "Stores the profile of the signed-in account. The document id is the caller's auth uid "
        "(`X-User-Id`), so signing up twice overwrites the same profile."
    ),
    response_model=UserOut,
    status_code=status.HTTP_201_CREATED,
    responses={
        201: {
            "description": "Profile created.",
            "content": {
                "application/json": {
                    "examples": {
                        "created": {
                            "summary": "Created profile",
                            "value": {
                                "id": "u_8Jt2kq",
                                "email": "sam@example.com",
                                "display_name": "Sam",
                                "created_at": "2025-11-02T18:20:00Z",
                            },
                        }
                    }
                }
            },
        },
        401: {"description": "Not authenticated."},
        409: {
            "description": "Email belongs to another account.",
            "content": {"application/json": {"examples": {"conflict": {"value": {"detail": "email_exists"}}}}},
        },
    },
)
async def create_user(
    payload: UserCreate,
    user_id: str = Depends(get_current_user_id),
    svc: UserService = Depends(get_user_service),
):
    try:
        return await svc.create(user_id, payload)
    except EmailAlreadyRegistered:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="email_exists")


@router.get(
    "/me",
    summary="Get the caller's profile",
    response_model=UserOut,
    responses={401: {"description": "Not authenticated."}, 404: {"description": "No profile yet."}},
)
async def get_me(
    user_id: str = Depends(get_current_user_id),
    svc: UserService = Depends(get_user_service),
):
    user = await svc.get(user_id)
    if not user:
        raise HTTPException(status_code=404, detail="not found")
    return user


@router.get(
    "/{user_id}",
    summary="Get a user by id",
    description="Used to render event member lists.",
    response_model=UserOut,
    dependencies=[Depends(get_current_user_id)],
    responses={401: {"description": "Not authenticated."}, 404: {"description": "User not found."}},
)
async def get_user(
    user_id: str = Path(..., description="User id"),
    svc: UserService = Depends(get_user_service),
):
    user = await svc.get(user_id)
    if not user:
        raise HTTPException(status_code=404, detail="not found")
    return user

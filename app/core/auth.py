# app/core/auth.py
from fastapi import Header, HTTPException, status

from app.core.config import settings


async def get_current_user_id(
    x_user_id: str | None = Header(None, alias=settings.user_id_header),
) -> str:
    """
    Returns the caller's user id as asserted by the hosted auth provider.
    Raises 401 when the header is missing or blank.
    """
    if not x_user_id or not x_user_id.strip():
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
            headers={"WWW-Authenticate": "UserId"},
        )
    return x_user_id.strip()

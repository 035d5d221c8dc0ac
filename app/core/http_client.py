# app/core/http_client.py
from __future__ import annotations

import httpx

from app.core.config import settings


def build_http_client() -> httpx.AsyncClient:
    """
    Shared outbound client, created in the app lifespan and closed on shutdown.
    Redirects are followed so the page we parse is the one a browser would show.
    """
    return httpx.AsyncClient(
        headers={"User-Agent": settings.preview_user_agent},
        timeout=httpx.Timeout(settings.preview_fetch_timeout_seconds),
        follow_redirects=True,
    )

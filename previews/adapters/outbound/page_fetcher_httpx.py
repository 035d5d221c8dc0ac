from __future__ import annotations

import asyncio
import logging
from typing import Optional

import httpx

from app.core.config import settings
from previews.domain.entities.preview import FetchedPage
from previews.ports.outbound.page_fetcher_port import PageFetchError, PageFetcherPort

logger = logging.getLogger(__name__)


def _ensure_http_url(url: str) -> None:
    try:
        parsed = httpx.URL(url)
    except (httpx.InvalidURL, TypeError, ValueError) as e:
        raise PageFetchError(f"invalid URL: {url!r}") from e
    if parsed.scheme not in ("http", "https") or not parsed.host:
        raise PageFetchError(f"unsupported URL: {url!r}")


class HttpxPageFetcher(PageFetcherPort):
    """
    Fetches a page with the shared httpx.AsyncClient.

    httpx timeouts are per phase (connect/read/...), so a slow-dripping server
    could outlive them; the whole request is additionally bounded by
    asyncio.wait_for.

    Only the first ``max_bytes`` of the body are read. og:image lives in
    ``<head>``, so a link to a large download never gets buffered whole.
    """

    def __init__(
        self,
        client: httpx.AsyncClient,
        timeout: Optional[float] = None,
        user_agent: Optional[str] = None,
        max_bytes: Optional[int] = None,
    ):
        self.client = client
        self.timeout = timeout if timeout is not None else settings.preview_fetch_timeout_seconds
        self.user_agent = user_agent or settings.preview_user_agent
        self.max_bytes = max_bytes if max_bytes is not None else settings.preview_max_body_bytes

    async def fetch(self, url: str) -> FetchedPage:
        _ensure_http_url(url)
        try:
            page = await asyncio.wait_for(self._get(url), timeout=self.timeout)
        except asyncio.TimeoutError as e:
            raise PageFetchError(f"timed out after {self.timeout}s") from e
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise PageFetchError(str(e) or e.__class__.__name__) from e

        logger.debug("fetched %s status=%s bytes=%d", url, page.status_code, len(page.body))
        return page

    async def _get(self, url: str) -> FetchedPage:
        body = bytearray()
        async with self.client.stream("GET", url, headers={"User-Agent": self.user_agent}) as r:
            async for chunk in r.aiter_bytes():
                body.extend(chunk)
                if len(body) >= self.max_bytes:
                    break
        return FetchedPage(
            url=str(r.url),
            status_code=r.status_code,
            charset=r.charset_encoding,
            body=bytes(body[: self.max_bytes]),
        )

from typing import Protocol

from previews.domain.entities.preview import FetchedPage


class PageFetchError(Exception):
    """The page could not be fetched at all (network, timeout, bad URL)."""


class PageFetcherPort(Protocol):
    """Single GET of a page. Any HTTP status is returned; transport failures raise PageFetchError."""

    async def fetch(self, url: str) -> FetchedPage: ...

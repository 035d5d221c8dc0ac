# conftest.py
from typing import AsyncGenerator, Dict, List, Union

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from app.main import app
from gifts.adapters.outbound.document_store_memory import InMemoryDocumentStore
from previews.adapters.outbound.cache_memory import InMemoryPreviewCache
from previews.domain.entities.preview import FetchedPage
from previews.ports.outbound.page_fetcher_port import PageFetcherPort
from previews.services.link_preview_service import LinkPreviewResolver
from shared.wiring import get_document_store, get_preview_resolver


# ---- Fakes ------------------------------------------------------------------

class FakePageFetcher(PageFetcherPort):
    """Serves canned pages (or raises canned errors) and records every fetch."""

    def __init__(self) -> None:
        self.pages: Dict[str, Union[FetchedPage, Exception]] = {}
        self.calls: List[str] = []

    def add_html(self, url: str, html: str, status_code: int = 200, charset: str | None = "utf-8") -> None:
        body = html.encode(charset or "utf-8")
        self.pages[url] = FetchedPage(url=url, status_code=status_code, charset=charset, body=body)

    def add_page(self, url: str, page: FetchedPage) -> None:
        self.pages[url] = page

    def add_error(self, url: str, exc: Exception) -> None:
        self.pages[url] = exc

    async def fetch(self, url: str) -> FetchedPage:
        self.calls.append(url)
        page = self.pages.get(url)
        if page is None:
            return FetchedPage(url=url, status_code=404)
        if isinstance(page, Exception):
            raise page
        return page


# ---- Previews ----------------------------------------------------------------

@pytest.fixture
def fake_fetcher() -> FakePageFetcher:
    return FakePageFetcher()


@pytest.fixture
def preview_cache() -> InMemoryPreviewCache:
    return InMemoryPreviewCache()


@pytest.fixture
def resolver(fake_fetcher, preview_cache) -> LinkPreviewResolver:
    return LinkPreviewResolver(fetcher=fake_fetcher, cache_port=preview_cache)


# ---- Gifts -------------------------------------------------------------------

@pytest.fixture
def document_store() -> InMemoryDocumentStore:
    return InMemoryDocumentStore()


# ---- HTTP client -------------------------------------------------------------

@pytest.fixture
def override_dependencies(document_store, resolver):
    """
    The ASGI test transport does not run the lifespan, so app.state is never populated;
    route the wiring providers to per-test instances instead.
    """
    app.dependency_overrides[get_document_store] = lambda: document_store
    app.dependency_overrides[get_preview_resolver] = lambda: resolver
    yield
    app.dependency_overrides.pop(get_document_store, None)
    app.dependency_overrides.pop(get_preview_resolver, None)


@pytest_asyncio.fixture(scope="function")
async def client(override_dependencies) -> AsyncGenerator[AsyncClient, None]:
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://testserver") as c:
        yield c
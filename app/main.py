import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from app.core.config import settings
from app.core.http_client import build_http_client
from app.core.logging import configure_logging
from gifts.adapters.outbound.document_store_memory import InMemoryDocumentStore
from previews.adapters.outbound.cache_memory import InMemoryPreviewCache
from previews.adapters.outbound.page_fetcher_httpx import HttpxPageFetcher
from previews.services.link_preview_service import LinkPreviewResolver

# Routers
from gifts.routers import events_router, gift_suggestions_router, users_router, wishlists_router
from previews.routers import previews_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup: session-scoped resources live on app.state for the process lifetime
    configure_logging()
    http_client = build_http_client()
    app.state.document_store = InMemoryDocumentStore()
    app.state.preview_cache = InMemoryPreviewCache()
    app.state.preview_resolver = LinkPreviewResolver(
        fetcher=HttpxPageFetcher(http_client),
        cache_port=app.state.preview_cache,
    )
    logger.info("%s started", settings.app_name)
    yield
    # Shutdown
    await http_client.aclose()


app = FastAPI(
    title=settings.app_name,
    version="0.1.0",
    debug=settings.debug,
    docs_url="/docs",
    openapi_url="/openapi.json",
    lifespan=lifespan,
)


@app.get("/health", tags=["system"])
async def health():
    return {"status": "ok", "app": settings.app_name}


# Users / Events
app.include_router(users_router)
app.include_router(events_router)

# Wishlists / Suggestions
app.include_router(wishlists_router)
app.include_router(gift_suggestions_router)

# Previews
app.include_router(previews_router)

import logging
from urllib.parse import urlsplit, urlunsplit

from previews.domain.entities.preview import PreviewResult
from previews.ports.outbound.cache_port import PreviewCachePort
from previews.ports.outbound.page_fetcher_port import PageFetchError, PageFetcherPort
from previews.services.extraction import decode_html, extract_image_url

logger = logging.getLogger(__name__)

SUCCESS_STATUS_RANGE = range(200, 400)


def cache_key(url: str) -> str:
    """Normalize a link for cache lookups: trim, lower-case scheme and host, drop the fragment."""
    url = url.strip()
    try:
        parts = urlsplit(url)
    except ValueError:
        return url
    return urlunsplit((parts.scheme.lower(), parts.netloc.lower(), parts.path, parts.query, ""))


class LinkPreviewResolver:
    """
    Resolves a link to its og:image with at most one fetch per URL per process.

    - Cache hit (positive or negative): returned without touching the network.
    - Miss: one fetch, classify, decode, extract; the outcome is cached either way.
    Failures never escape `resolve`; they all become `not_available`.
    Concurrent misses for the same URL may each fetch; the last write wins
    and both writes hold the same kind of answer.
    """

    def __init__(self, fetcher: PageFetcherPort, cache_port: PreviewCachePort):
        self.fetcher = fetcher
        self.cache = cache_port

    async def resolve(self, url: str) -> PreviewResult:
        key = cache_key(url)
        cached = await self.cache.get(key)
        if cached is not None:
            return cached

        result = await self._resolve_uncached(url.strip())
        await self.cache.set(key, result)
        return result

    # ---------- Internal helpers ----------

    async def _resolve_uncached(self, url: str) -> PreviewResult:
        try:
            page = await self.fetcher.fetch(url)
        except PageFetchError as e:
            logger.warning("preview fetch failed for %s: %s", url, e)
            return PreviewResult.not_available()
        except Exception:
            logger.exception("unexpected error fetching preview for %s", url)
            return PreviewResult.not_available()

        if page.status_code not in SUCCESS_STATUS_RANGE:
            logger.warning("invalid HTTP response for %s: status=%s", url, page.status_code)
            return PreviewResult.not_available()

        html = decode_html(page.body, page.charset)
        if html is None:
            logger.debug("unable to decode HTML for %s", url)
            return PreviewResult.not_available()

        image_url = extract_image_url(html, url)
        if not image_url:
            logger.debug("no Open Graph image found for %s", url)
            return PreviewResult.not_available()

        return PreviewResult.image(image_url)

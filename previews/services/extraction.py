"""
Text decoding and og:image extraction for fetched pages.

Extraction is a restricted regex match on ``<meta>`` tags rather than an HTML
parse, so broken markup that still carries a well-formed tag keeps working.
"""
import codecs
import re
from typing import Iterable, Optional
from urllib.parse import urljoin, urlsplit

# property/name before content, then content before property/name
_OG_IMAGE_PATTERNS = (
    re.compile(
        r"""<meta\s[^>]*(?:property|name)\s*=\s*["']og:image["'][^>]*content\s*=\s*["']([^"']+)["'][^>]*>""",
        re.IGNORECASE,
    ),
    re.compile(
        r"""<meta\s[^>]*content\s*=\s*["']([^"']+)["'][^>]*(?:property|name)\s*=\s*["']og:image["'][^>]*>""",
        re.IGNORECASE,
    ),
)

_FALLBACK_ENCODINGS = ("utf-8", "latin-1")


def _candidate_encodings(charset: Optional[str]) -> Iterable[str]:
    if charset:
        try:
            yield codecs.lookup(charset.strip().strip("\"'")).name
        except LookupError:
            pass
    yield from _FALLBACK_ENCODINGS


def decode_html(body: bytes, charset: Optional[str] = None) -> Optional[str]:
    """Declared charset first, then UTF-8, then Latin-1 (which accepts any byte string)."""
    for encoding in _candidate_encodings(charset):
        try:
            return body.decode(encoding)
        except (UnicodeDecodeError, LookupError):
            continue
    return None


def make_absolute_url(value: str, base_url: str) -> Optional[str]:
    """Keep values that carry a scheme; resolve the rest against ``base_url``."""
    try:
        if urlsplit(value).scheme:
            return value
        resolved = urljoin(base_url, value)
        parts = urlsplit(resolved)
    except ValueError:
        return None
    if not parts.scheme or not parts.netloc:
        return None
    return resolved


def extract_image_url(html: str, base_url: str) -> Optional[str]:
    for pattern in _OG_IMAGE_PATTERNS:
        m = pattern.search(html)
        if not m:
            continue
        value = m.group(1).strip()
        if not value:
            continue
        absolute = make_absolute_url(value, base_url)
        if absolute:
            return absolute
    return None

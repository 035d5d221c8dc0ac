from __future__ import annotations

import asyncio
from typing import Dict, List, Optional

from previews.domain.entities.preview import PreviewResult
from previews.ports.outbound.cache_port import PreviewCachePort


class InMemoryPreviewCache(PreviewCachePort):
    """
    Dict-backed preview cache owned by the application lifespan.
    No TTL and no eviction: entries live as long as the process.
    All access goes through one asyncio.Lock.
    """

    def __init__(self) -> None:
        self._store: Dict[str, PreviewResult] = {}
        self._lock = asyncio.Lock()

    async def get(self, key: str) -> Optional[PreviewResult]:
        async with self._lock:
            return self._store.get(key)

    async def set(self, key: str, value: PreviewResult) -> None:
        async with self._lock:
            self._store[key] = value

    async def keys(self) -> List[str]:
        async with self._lock:
            return list(self._store.keys())

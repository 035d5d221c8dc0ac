from typing import Optional, Protocol

from previews.domain.entities.preview import PreviewResult


class PreviewCachePort(Protocol):
    """Process-lifetime memo of resolved previews, negative results included."""

    async def get(self, key: str) -> Optional[PreviewResult]: ...

    async def set(self, key: str, value: PreviewResult) -> None: ...

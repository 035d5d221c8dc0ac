from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict

PreviewStatus = Literal["image", "not_available"]


class PreviewResult(BaseModel):
    """Outcome of resolving a link: an image reference or a definitive miss."""

    model_config = ConfigDict(frozen=True)

    status: PreviewStatus
    image_url: Optional[str] = None

    @classmethod
    def image(cls, image_url: str) -> "PreviewResult":
        return cls(status="image", image_url=image_url)

    @classmethod
    def not_available(cls) -> "PreviewResult":
        return cls(status="not_available")

    @property
    def available(self) -> bool:
        return self.status == "image"


class FetchedPage(BaseModel):
    """Raw response of a page fetch, before any classification."""

    url: str
    status_code: int
    charset: Optional[str] = None
    body: bytes = b""


class PreviewOut(BaseModel):
    url: str
    status: PreviewStatus
    image_url: Optional[str] = None

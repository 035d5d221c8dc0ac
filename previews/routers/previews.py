from fastapi import APIRouter, Depends, Query

from previews.domain.entities.preview import PreviewOut
from previews.services.link_preview_service import LinkPreviewResolver
from shared.wiring import get_preview_resolver

router = APIRouter(prefix="/v1/previews", tags=["previews"])


@router.get(
    "",
    summary="Resolve the preview image of a link",
    description=(
        "Fetches the page behind `url` (once per process) and returns the image referenced by its "
        "`og:image` meta tag.\n\n"
        "Failures are not errors: unreachable hosts, bad statuses, undecodable pages and pages "
        "without preview metadata all return `status: not_available` so the client can show its "
        "placeholder."
    ),
    response_model=PreviewOut,
    responses={
        200: {
            "description": "Resolved (or definitively unavailable) preview.",
            "content": {
                "application/json": {
                    "examples": {
                        "image": {
                            "summary": "Preview found",
                            "value": {
                                "url": "https://shop.example.com/products/espresso-machine",
                                "status": "image",
                                "image_url": "https://shop.example.com/media/espresso.jpg",
                            },
                        },
                        "not_available": {
                            "summary": "No preview",
                            "value": {
                                "url": "https://example.com/no-meta",
                                "status": "not_available",
                                "image_url": None,
                            },
                        },
                    }
                }
            },
        },
        422: {"description": "Missing `url` query parameter."},
    },
)
async def get_preview(
    url: str = Query(..., min_length=1, description="Absolute URL of the page to preview."),
    resolver: LinkPreviewResolver = Depends(get_preview_resolver),
):
    result = await resolver.resolve(url)
    return PreviewOut(url=url, status=result.status, image_url=result.image_url)

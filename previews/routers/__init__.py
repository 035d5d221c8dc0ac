from previews.routers.previews import router as previews_router

__all__ = ["previews_router"]

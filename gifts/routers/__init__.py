from gifts.routers.events import router as events_router
from gifts.routers.gift_suggestions import router as gift_suggestions_router
from gifts.routers.users import router as users_router
from gifts.routers.wishlists import router as wishlists_router

__all__ = ["users_router", "events_router", "wishlists_router", "gift_suggestions_router"]

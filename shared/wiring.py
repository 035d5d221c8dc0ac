from fastapi import Depends, Request

# Outbound ports (instances live on app.state, built in the app lifespan)
from gifts.ports.outbound.document_store_port import DocumentStorePort
from previews.services.link_preview_service import LinkPreviewResolver

# Gifts services
from gifts.services.access_service import AccessService
from gifts.services.event_service import EventService
from gifts.services.gift_suggestion_service import GiftSuggestionService
from gifts.services.user_service import UserService
from gifts.services.wishlist_service import WishlistService


def get_document_store(request: Request) -> DocumentStorePort:
    return request.app.state.document_store


def get_preview_resolver(request: Request) -> LinkPreviewResolver:
    return request.app.state.preview_resolver


def get_user_service(store: DocumentStorePort = Depends(get_document_store)) -> UserService:
    return UserService(store)


def get_event_service(
    store: DocumentStorePort = Depends(get_document_store),
    users: UserService = Depends(get_user_service),
) -> EventService:
    return EventService(store, users)


def get_wishlist_service(store: DocumentStorePort = Depends(get_document_store)) -> WishlistService:
    return WishlistService(store)


def get_gift_suggestion_service(store: DocumentStorePort = Depends(get_document_store)) -> GiftSuggestionService:
    return GiftSuggestionService(store)


def get_access_service(
    events: EventService = Depends(get_event_service),
    wishlists: WishlistService = Depends(get_wishlist_service),
    suggestions: GiftSuggestionService = Depends(get_gift_suggestion_service),
) -> AccessService:
    return AccessService(events, wishlists, suggestions)

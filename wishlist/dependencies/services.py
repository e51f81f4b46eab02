from typing import Optional

from fastapi import Header, Request

from wishlist.services.container import ServiceContainer
from wishlist.services.item_service import ItemService
from wishlist.services.ogp_extractor import OGPExtractorInterface
from wishlist.services.wishlist_service import WishlistService


def get_container(request: Request) -> ServiceContainer:
    """The container created at application startup"""
    return request.app.state.container


def get_wishlist_service(request: Request) -> WishlistService:
    return get_container(request).get_wishlist_service()


def get_item_service(request: Request) -> ItemService:
    return get_container(request).get_item_service()


def get_extractor(request: Request) -> OGPExtractorInterface:
    return get_container(request).get_extractor()


def get_capability_key(authorization: Optional[str] = Header(None)) -> str:
    """
    The caller's capability key, taken from ``Authorization: Bearer <key>`` or
    a bare ``Authorization: <key>``. Empty when the header is missing.
    """
    key = (authorization or "").strip()
    scheme, _, rest = key.partition(" ")
    if scheme.lower() == "bearer":
        key = rest.strip()
    return key

from typing import List

from wishlist.config.logging_config import get_logger
from wishlist.models.schemas import (
    ItemRead,
    PermissionedWishlistRead,
    UnlockedWishlistRead,
    WishlistCreate,
    WishlistRead,
)
from wishlist.services.wishlist_service import WishlistService

logger = get_logger(__name__)


class WishlistController:

    def __init__(self, service: WishlistService):
        self.service = service

    def create(self, key: str, payload: WishlistCreate) -> UnlockedWishlistRead:
        logger.info(f"Received request to create wishlist '{payload.name}'")
        wishlist = self.service.create_wishlist(key, payload.name, payload.id)
        return UnlockedWishlistRead.from_row(wishlist)

    def get(self, wishlist_id: str) -> WishlistRead:
        return WishlistRead.from_row(self.service.get_wishlist(wishlist_id))

    def update(self, wishlist_id: str, name: str) -> WishlistRead:
        logger.info(f"Received request to rename wishlist {wishlist_id}")
        return WishlistRead.from_row(self.service.update_wishlist(wishlist_id, name))

    def items(self, wishlist_id: str) -> List[ItemRead]:
        return [ItemRead.from_row(item) for item in self.service.get_items(wishlist_id)]

    def accessible(self, key: str) -> List[PermissionedWishlistRead]:
        return self.service.get_accessible_wishlists(key)

    def register_permission(self, wishlist_id: str, key: str, password: str = "") -> str:
        logger.info(f"Received request to register permission on wishlist {wishlist_id}")
        self.service.register_permission(wishlist_id, key, password)
        return "OK"

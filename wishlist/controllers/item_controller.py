from typing import List

from wishlist.config.logging_config import get_logger
from wishlist.models.schemas import ItemCreate, ItemRead, ItemUpdate
from wishlist.services.item_service import ItemService

logger = get_logger(__name__)


class ItemController:

    def __init__(self, service: ItemService):
        self.service = service

    def add(self, wishlist_id: str, payload: ItemCreate) -> ItemRead:
        logger.info(f"Received request to add {payload.url} to wishlist {wishlist_id}")
        item = self.service.add_item(wishlist_id, payload.url)
        logger.info(f"Item {item.id} created for: {payload.url}")
        return ItemRead.from_row(item)

    def get(self, item_id: str) -> ItemRead:
        return ItemRead.from_row(self.service.get_item(item_id))

    def list(self) -> List[ItemRead]:
        return [ItemRead.from_row(item) for item in self.service.list_items()]

    def update(self, item_id: str, payload: ItemUpdate) -> ItemRead:
        logger.info(f"Received request to update item {item_id}")
        return ItemRead.from_row(self.service.update_item(item_id, payload))

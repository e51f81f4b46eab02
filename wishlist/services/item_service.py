import logging
import uuid
from typing import List

from wishlist.core.models import Item
from wishlist.exceptions.wishlist import InvalidItemURLException, ItemNotFoundException
from wishlist.models.schemas import ItemUpdate
from .exceptions import ServiceError
from .ogp_extractor import OGPExtractorInterface
from .repository import RowNotFoundError, RowStoreInterface
from .wishlist_service import WishlistService

logger = logging.getLogger(__name__)


class ItemService:
    """
    Items of wishlists. New items are described by the metadata of the page
    they link to.
    """

    def __init__(
        self,
        items: RowStoreInterface[Item],
        wishlist_service: WishlistService,
        extractor: OGPExtractorInterface,
    ):
        self.items = items
        self.wishlist_service = wishlist_service
        self.extractor = extractor

    def add_item(self, wishlist_id: str, url: str) -> Item:
        """
        Create an item on ``wishlist_id`` from the page at ``url``.

        Partial metadata is accepted as is; a page that cannot be fetched or
        parsed rejects the item.

        Raises:
            WishlistNotFoundException: The wishlist does not exist
            InvalidItemURLException: No metadata could be extracted from ``url``
        """
        self.wishlist_service.get_wishlist(wishlist_id)

        try:
            metadata = self.extractor.extract_metadata(url)
        except ServiceError as e:
            logger.error(f"Rejecting item for URL {url}: {e.message}")
            raise InvalidItemURLException(url, e.message)

        item = Item(
            id=str(uuid.uuid4()),
            wishlist_id=wishlist_id,
            url=metadata.url,
            name=metadata.title,
            description=metadata.description,
            image=metadata.image,
        )
        created = self.items.insert(item)
        logger.info(f"Added item {created.id} to wishlist {wishlist_id}")
        return created

    def get_item(self, item_id: str) -> Item:
        try:
            return self.items.get(item_id)
        except RowNotFoundError:
            raise ItemNotFoundException(item_id)

    def list_items(self) -> List[Item]:
        return self.items.list()

    def update_item(self, item_id: str, changes: ItemUpdate) -> Item:
        """Apply the fields set in ``changes``; the others keep their value."""
        item = self.get_item(item_id)
        for field, value in changes.model_dump(exclude_none=True).items():
            setattr(item, field, value)
        return self.items.update(item_id, item)

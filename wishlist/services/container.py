from typing import Dict, Optional, Type

from sqlalchemy.orm import sessionmaker

from wishlist.core.config import settings
from wishlist.core.database import create_session_factory
from wishlist.core.models import Item, Wishlist, WishlistViewer
from wishlist.models.tables import ItemTable, WishlistTable, WishlistViewerTable
from .fetch_client import FetchClient
from .item_service import ItemService
from .ogp_extractor import OGPExtractor, OGPExtractorInterface
from .repository import InMemoryRowStore, RowStoreInterface, SQLRowStore
from .url_validator import URLValidator, URLValidatorInterface
from .wishlist_service import WishlistService


class ServiceContainer:
    """Container for managing service dependencies with dependency injection"""

    def __init__(self, fetch_client: FetchClient = None, database_url: Optional[str] = None):
        self._services: Dict[Type, object] = {}
        self._session_factory: Optional[sessionmaker] = None

        # Register services in dependency order
        self._register_services(
            fetch_client,
            settings.database_url if database_url is None else database_url,
        )

    def _create_store(self, table, row_type: Type) -> RowStoreInterface:
        if self._session_factory is None:
            return InMemoryRowStore(row_type.__name__)
        return SQLRowStore(self._session_factory, table, row_type)

    def _register_services(self, fetch_client: Optional[FetchClient], database_url: str) -> None:
        """Register all services with proper dependency injection"""
        self._services[URLValidatorInterface] = URLValidator(settings.fetch_block_private_hosts)

        # One long-lived client per process, built eagerly so its cookie jar
        # and default headers are shared by every extraction
        self._services[FetchClient] = fetch_client or FetchClient(
            self._services[URLValidatorInterface]
        )
        self._services[OGPExtractorInterface] = OGPExtractor(self._services[FetchClient])

        if database_url:
            self._session_factory = create_session_factory(database_url)

        items = self._create_store(ItemTable, Item)
        self._services[WishlistService] = WishlistService(
            wishlists=self._create_store(WishlistTable, Wishlist),
            viewers=self._create_store(WishlistViewerTable, WishlistViewer),
            items=items,
        )
        self._services[ItemService] = ItemService(
            items=items,
            wishlist_service=self._services[WishlistService],
            extractor=self._services[OGPExtractorInterface],
        )

    def get_wishlist_service(self) -> WishlistService:
        return self._services[WishlistService]  # type: ignore

    def get_item_service(self) -> ItemService:
        return self._services[ItemService]  # type: ignore

    def get_extractor(self) -> OGPExtractorInterface:
        return self._services[OGPExtractorInterface]  # type: ignore

    def close(self) -> None:
        self._services[FetchClient].close()  # type: ignore
        if self._session_factory is not None:
            self._session_factory.kw["bind"].dispose()

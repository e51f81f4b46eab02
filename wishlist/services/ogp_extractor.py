import logging
from abc import ABC, abstractmethod
from urllib.parse import urljoin

from wishlist.core.models import Metadata, OGPAttributes
from .attribute_binder import bind_element_attributes, bind_ogp_pair
from .exceptions import FaviconNotFoundError
from .favicon_selector import select_favicon
from .fetch_client import FetchClient
from .html_walker import find_all, find_head


logger = logging.getLogger(__name__)


class OGPExtractorInterface(ABC):
    """Interface for metadata extraction following the Dependency Inversion Principle"""

    @abstractmethod
    def extract_metadata(self, url: str) -> Metadata:
        pass


class OGPExtractor(OGPExtractorInterface):
    """
    Extracts the title, description and image of a page from its Open Graph
    meta tags, falling back to the page's best favicon for the image
    """

    def __init__(self, fetch_client: FetchClient):
        self.fetch_client = fetch_client

    def extract_metadata(self, url: str) -> Metadata:
        """
        Fetch ``url`` and build its metadata record.

        Meta tags are applied in document order, so a later tag overwrites an
        earlier one with the same property. A page without a ``<head>`` or
        without meta tags yields a record holding only the URL.

        Raises:
            FetchError: The page could not be fetched
            ParseError: The body could not be parsed as HTML
            BindingFailedError: A record declares a non-string bindable field
        """
        logger.info(f"Extracting metadata from URL: {url}")

        with self.fetch_client.fetch("GET", url) as response:
            document = response.html()

        head = find_head(document)
        if head is None:
            logger.debug(f"Page at {url} has no <head>")

        metadata = Metadata(url=url)
        for meta in find_all(head, "meta"):
            attributes = OGPAttributes()
            bind_element_attributes(meta, attributes)
            bind_ogp_pair(attributes, metadata)

        if not metadata.image:
            try:
                favicon = select_favicon(head)
            except FaviconNotFoundError:
                logger.debug(f"No Open Graph image or favicon found for URL: {url}")
            else:
                if favicon:
                    metadata.image = urljoin(url, favicon)

        logger.info(f"Successfully extracted metadata for URL: {url}")
        return metadata

from wishlist.config.logging_config import get_logger
from wishlist.exceptions.wishlist import InvalidItemURLException
from wishlist.models.schemas import MetadataRead
from wishlist.services.exceptions import ServiceError
from wishlist.services.ogp_extractor import OGPExtractorInterface

logger = get_logger(__name__)


class MetadataController:

    def __init__(self, extractor: OGPExtractorInterface):
        self.extractor = extractor

    def preview(self, url: str) -> MetadataRead:
        logger.info(f"Received request to preview metadata: {url}")
        try:
            metadata = self.extractor.extract_metadata(url)
        except ServiceError as e:
            logger.warning(f"Metadata preview failed for {url}: {e.message}")
            raise InvalidItemURLException(url, e.message)
        return MetadataRead(**metadata.to_dict())

from fastapi import APIRouter, Depends, Query

from wishlist.controllers.metadata_controller import MetadataController
from wishlist.dependencies.services import get_extractor
from wishlist.models.schemas import MetadataRead
from wishlist.services.ogp_extractor import OGPExtractorInterface

router = APIRouter()


# Plain def: extraction blocks on the network, so FastAPI runs it in its threadpool
@router.get("", response_model=MetadataRead)
def get_metadata(
    url: str = Query(...),
    extractor: OGPExtractorInterface = Depends(get_extractor),
):
    return MetadataController(extractor).preview(url)

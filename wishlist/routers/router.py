from fastapi import APIRouter
from . import root_routes, metadata_routes, wishlist_routes, item_routes

router = APIRouter()

router.include_router(root_routes.router, tags=["root"])
router.include_router(metadata_routes.router, prefix="/metadata", tags=["metadata"])
router.include_router(wishlist_routes.router, prefix="/wishlist", tags=["wishlist"])
router.include_router(item_routes.router, prefix="/item", tags=["item"])

__all__ = ["router"]

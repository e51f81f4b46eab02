from typing import List

from fastapi import APIRouter, Depends, status
from fastapi.responses import PlainTextResponse

from wishlist.controllers.wishlist_controller import WishlistController
from wishlist.dependencies.services import get_capability_key, get_wishlist_service
from wishlist.models.schemas import (
    ItemRead,
    PermissionedWishlistRead,
    UnlockedWishlistRead,
    WishlistCreate,
    WishlistRead,
    WishlistUpdate,
)
from wishlist.services.wishlist_service import WishlistService

router = APIRouter()


def get_controller(service: WishlistService = Depends(get_wishlist_service)) -> WishlistController:
    return WishlistController(service)


@router.post("", response_model=UnlockedWishlistRead, status_code=status.HTTP_201_CREATED)
def create_wishlist(
    payload: WishlistCreate,
    key: str = Depends(get_capability_key),
    controller: WishlistController = Depends(get_controller),
):
    return controller.create(key, payload)


@router.get("", response_model=List[PermissionedWishlistRead])
def get_accessible_wishlists(
    key: str = Depends(get_capability_key),
    controller: WishlistController = Depends(get_controller),
):
    return controller.accessible(key)


@router.get("/{wishlist_id}", response_model=WishlistRead)
def get_wishlist(wishlist_id: str, controller: WishlistController = Depends(get_controller)):
    return controller.get(wishlist_id)


@router.put("/{wishlist_id}", response_model=WishlistRead)
def update_wishlist(
    wishlist_id: str,
    payload: WishlistUpdate,
    controller: WishlistController = Depends(get_controller),
):
    return controller.update(wishlist_id, payload.name)


@router.get("/{wishlist_id}/items", response_model=List[ItemRead])
def get_wishlist_items(wishlist_id: str, controller: WishlistController = Depends(get_controller)):
    return controller.items(wishlist_id)


@router.post("/{wishlist_id}/permission", response_class=PlainTextResponse)
def register_view_permission(
    wishlist_id: str,
    key: str = Depends(get_capability_key),
    controller: WishlistController = Depends(get_controller),
):
    return controller.register_permission(wishlist_id, key)


@router.post("/{wishlist_id}/permission/{password}", response_class=PlainTextResponse)
def register_edit_permission(
    wishlist_id: str,
    password: str,
    key: str = Depends(get_capability_key),
    controller: WishlistController = Depends(get_controller),
):
    return controller.register_permission(wishlist_id, key, password)

from typing import List

from fastapi import APIRouter, Depends, status

from wishlist.controllers.item_controller import ItemController
from wishlist.dependencies.services import get_item_service
from wishlist.models.schemas import ItemCreate, ItemRead, ItemUpdate
from wishlist.services.item_service import ItemService

router = APIRouter()


def get_controller(service: ItemService = Depends(get_item_service)) -> ItemController:
    return ItemController(service)


@router.get("", response_model=List[ItemRead])
def list_items(controller: ItemController = Depends(get_controller)):
    return controller.list()


@router.get("/{item_id}", response_model=ItemRead)
def get_item(item_id: str, controller: ItemController = Depends(get_controller)):
    return controller.get(item_id)


@router.put("/{item_id}", response_model=ItemRead)
def update_item(item_id: str, payload: ItemUpdate, controller: ItemController = Depends(get_controller)):
    return controller.update(item_id, payload)


@router.post("/{wishlist_id}", response_model=ItemRead, status_code=status.HTTP_201_CREATED)
def add_item(wishlist_id: str, payload: ItemCreate, controller: ItemController = Depends(get_controller)):
    return controller.add(wishlist_id, payload)

from .base import AppException, ErrorCode


class WishlistNotFoundException(AppException):
    """Raised when a wishlist id does not exist"""

    def __init__(self, wishlist_id: str):
        super().__init__(
            code=ErrorCode.WISHLIST_NOT_FOUND,
            message=f"Wishlist not found: {wishlist_id}",
            status_code=404
        )


class WishlistExistsException(AppException):
    """Raised when creating a wishlist with an id that is already taken"""

    def __init__(self, wishlist_id: str):
        super().__init__(
            code=ErrorCode.WISHLIST_EXISTS,
            message=f"Wishlist already exists: {wishlist_id}",
            status_code=409
        )


class ItemNotFoundException(AppException):
    """Raised when an item id does not exist"""

    def __init__(self, item_id: str):
        super().__init__(
            code=ErrorCode.ITEM_NOT_FOUND,
            message=f"Item not found: {item_id}",
            status_code=404
        )


class InvalidItemURLException(AppException):
    """Raised when no metadata could be extracted from an item's URL"""

    def __init__(self, url: str = "", reason: str = ""):
        details = {"url": url}
        if reason:
            details["reason"] = reason

        super().__init__(
            code=ErrorCode.INVALID_ITEM_URL,
            message="Invalid URL was provided.",
            status_code=400,
            details=details
        )

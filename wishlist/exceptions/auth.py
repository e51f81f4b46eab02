from .base import AppException, ErrorCode


class MissingCapabilityKeyException(AppException):
    """Raised when a request carries no capability key in its Authorization header"""

    def __init__(self):
        super().__init__(
            code=ErrorCode.MISSING_CAPABILITY_KEY,
            message="You don't have a session key associated with your browser",
            status_code=400
        )


class InvalidPasswordException(AppException):
    """Raised when the edit password of a wishlist does not match"""

    def __init__(self, wishlist_id: str):
        super().__init__(
            code=ErrorCode.INVALID_PASSWORD,
            message=f"Invalid password for wishlist: {wishlist_id}",
            status_code=403
        )

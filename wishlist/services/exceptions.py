"""Custom exception hierarchy for the service layer"""

class ServiceError(Exception):
    """Base exception for all service-related errors"""
    def __init__(self, message: str, error_code: str = None):
        self.message = message
        self.error_code = error_code
        super().__init__(self.message)


class FetchError(ServiceError):
    """Raised when fetching content from URL fails"""
    def __init__(self, message: str = "Failed to fetch content from URL"):
        super().__init__(message, "FETCH_ERROR")


class FetchFailedError(FetchError):
    """Raised for malformed or unsafe URLs and transport failures"""
    def __init__(self, url: str, reason: str = None):
        message = f"Failed to fetch {url}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)
        self.url = url
        self.reason = reason


class FetchTimeoutError(FetchError):
    """Raised when the remote server does not answer in time"""
    def __init__(self, url: str, timeout: float):
        super().__init__(f"Request to {url} timed out after {timeout}s")
        self.url = url
        self.timeout = timeout


class ResponseConsumedError(FetchError):
    """Raised when a response body is read a second time"""
    def __init__(self, url: str = ""):
        super().__init__(f"Response body of {url} has already been consumed")
        self.url = url


class ParseError(ServiceError):
    """Raised when content parsing fails"""
    def __init__(self, message: str = "Error parsing content"):
        super().__init__(message, "PARSE_ERROR")


class ParseFailedError(ParseError):
    """Raised when a response body cannot be decoded into the requested format"""
    def __init__(self, fmt: str, reason: str = None):
        message = f"Could not parse response body as {fmt}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)
        self.format = fmt


class BindingFailedError(ServiceError):
    """Raised when a record field matched by name cannot hold a string value"""
    def __init__(self, message: str = "Cannot bind attribute to record"):
        super().__init__(message, "BINDING_ERROR")


class ContentError(ServiceError):
    """Raised when content processing fails"""
    def __init__(self, message: str = "Error processing content"):
        super().__init__(message, "CONTENT_ERROR")


class FaviconNotFoundError(ContentError):
    """Raised when a page declares no acceptable favicon"""
    def __init__(self, message: str = "Page has no favicon"):
        super().__init__(message)

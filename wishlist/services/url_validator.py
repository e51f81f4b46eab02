import re
from urllib.parse import urlparse
from abc import ABC, abstractmethod


PRIVATE_HOST_PATTERNS = [
    r"^127\.0\.0\.1",
    r"^localhost",
    r"^10\.",
    r"^172\.(1[6-9]|2[0-9]|3[0-1])\.",
    r"^192\.168\."
]


class URLValidatorInterface(ABC):
    """Interface for URL validation following the Dependency Inversion Principle"""

    @abstractmethod
    def validate(self, url: str) -> bool:
        """
        Validate a URL to check if it's safe and properly formatted.

        Args:
            url: The URL string to validate

        Returns:
            True if the URL is valid and safe, False otherwise
        """
        pass


class URLValidator(URLValidatorInterface):
    """
    Validates URLs before they are fetched.
    Private and loopback hosts are rejected unless ``block_private_hosts`` is off.
    """

    def __init__(self, block_private_hosts: bool = True):
        self.block_private_hosts = block_private_hosts

    def validate(self, url: str) -> bool:
        """
        Validate URL and check for potential SSRF attacks.

        Args:
            url: The URL string to validate

        Returns:
            True if the URL is valid and safe, False otherwise
        """
        if not isinstance(url, str):
            return False
        try:
            parsed = urlparse(url)
            if not parsed.scheme or parsed.scheme not in ["http", "https"]:
                return False
            if not parsed.netloc or not parsed.hostname:
                return False

            # Accessing .port raises ValueError when it is out of range
            if parsed.port is not None:
                if parsed.port < 1 or parsed.port > 65535:
                    return False
        except ValueError:
            return False

        if self.block_private_hosts:
            for pattern in PRIVATE_HOST_PATTERNS:
                if re.match(pattern, parsed.hostname):
                    return False

        return True

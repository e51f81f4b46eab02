from dataclasses import dataclass
from enum import Enum
from typing import Any, ClassVar, Dict, Tuple


@dataclass
class Metadata:
    """
    On-page metadata of a URL, populated from Open Graph meta tags with a
    favicon fallback for the image.
    """
    url: str = ""
    image: str = ""
    title: str = ""
    description: str = ""

    # Fields an Open Graph property may set. ``url`` is not among them:
    # the record always reports the URL it was extracted from.
    BINDABLE_FIELDS: ClassVar[Tuple[str, ...]] = ("image", "title", "description")

    def to_dict(self) -> Dict[str, Any]:
        """Convert the metadata to a dictionary representation"""
        return {
            "url": self.url,
            "image": self.image,
            "title": self.title,
            "description": self.description,
        }


@dataclass
class OGPAttributes:
    """The relevant attributes of a single ``<meta>`` element."""
    property: str = ""
    content: str = ""

    BINDABLE_FIELDS: ClassVar[Tuple[str, ...]] = ("property", "content")


@dataclass
class FaviconAttributes:
    """The relevant attributes of a single ``<link>`` element."""
    rel: str = ""
    type: str = ""
    sizes: str = ""
    href: str = ""

    BINDABLE_FIELDS: ClassVar[Tuple[str, ...]] = ("rel", "type", "sizes", "href")


class Permission(str, Enum):
    VIEW = "VIEW"
    EDIT = "EDIT"


@dataclass
class Wishlist:
    id: str
    name: str = ""
    password: str = ""
    ownership: str = ""


@dataclass
class WishlistViewer:
    """A capability key's saved access to somebody else's wishlist."""
    id: str
    wishlist_id: str
    ownership: str
    permission: Permission = Permission.VIEW

    @staticmethod
    def make_id(wishlist_id: str, ownership: str) -> str:
        return f"{wishlist_id}:{ownership}"


@dataclass
class Item:
    id: str
    wishlist_id: str
    url: str = ""
    name: str = ""
    description: str = ""
    image: str = ""

import logging
import re
from typing import List, Optional, Tuple

from bs4.element import Tag

from wishlist.core.models import FaviconAttributes
from .attribute_binder import bind_element_attributes
from .exceptions import FaviconNotFoundError
from .html_walker import find_all

logger = logging.getLogger(__name__)

ICON_RELATIONS = ("icon", "apple-touch-icon", "apple-touch-icon-precomposed", "mask-icon")

# Relation tiers, best first
MASK_ICON_TIER = 0
APPLE_ICON_TIER = 1
OTHER_ICON_TIER = 2

NO_SIZE = -1
SIZE_TOKEN = re.compile(r"(\d+)(?:[xX]\d*)?$")


def is_acceptable(candidate: FaviconAttributes) -> bool:
    """An icon relation, and either no declared type or a PNG one."""
    if candidate.type and "png" not in candidate.type:
        return False
    return any(relation in candidate.rel for relation in ICON_RELATIONS)


def relation_tier(rel: str) -> int:
    rel = rel.strip().lower()
    if rel == "mask-icon":
        return MASK_ICON_TIER
    if "apple" in rel:
        return APPLE_ICON_TIER
    return OTHER_ICON_TIER


def largest_width(sizes: str) -> int:
    """
    Width of the largest ``WxH`` token in a ``sizes`` attribute.

    Tokens without a numeric width (``any``, garbage) count as ``NO_SIZE``,
    as does an empty attribute.
    """
    widths = [NO_SIZE]
    for token in sizes.split():
        match = SIZE_TOKEN.match(token)
        if match:
            widths.append(int(match.group(1)))
    return max(widths)


def ranking_key(candidate: FaviconAttributes) -> Tuple[int, int]:
    # Each candidate is ranked by its own sizes; ties keep document order.
    return relation_tier(candidate.rel), -largest_width(candidate.sizes)


def collect_candidates(head: Optional[Tag]) -> List[FaviconAttributes]:
    candidates = []
    for link in find_all(head, "link"):
        candidate = FaviconAttributes()
        bind_element_attributes(link, candidate)
        candidates.append(candidate)
    return candidates


def select_favicon(head: Optional[Tag]) -> str:
    """
    Pick the best favicon declared in ``head`` and return its href.

    Mask icons win over apple touch icons, which win over plain icons. Within
    a tier the icon with the largest declared width wins. Icons with a
    non-PNG type are never picked.

    Raises:
        FaviconNotFoundError: No acceptable ``<link>`` is present
    """
    candidates = [c for c in collect_candidates(head) if is_acceptable(c)]
    if not candidates:
        raise FaviconNotFoundError()

    best = min(candidates, key=ranking_key)
    logger.debug(f"Selected favicon {best.href} (rel={best.rel!r}, sizes={best.sizes!r}) "
                 f"out of {len(candidates)} candidates")
    return best.href

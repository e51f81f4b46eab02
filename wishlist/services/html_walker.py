"""Depth-first searches over a parsed BeautifulSoup tree"""

from typing import Iterator, List, Optional

from bs4.element import PageElement, Tag


def iter_elements(root: Optional[PageElement], tag: str) -> Iterator[Tag]:
    """
    Yield every element named ``tag`` in the subtree rooted at ``root``, the
    root included, in document (pre-order) order.

    Text, comments and other non-element nodes never match.
    """
    if not isinstance(root, Tag):
        return
    if root.name == tag:
        yield root
    # .descendants walks the tree iteratively, so deeply nested markup
    # cannot exhaust the recursion limit.
    for node in root.descendants:
        if isinstance(node, Tag) and node.name == tag:
            yield node


def find_head(root: Optional[PageElement]) -> Optional[Tag]:
    """Return the first ``<head>`` element, or None when the document has none."""
    return next(iter_elements(root, "head"), None)


def find_all(root: Optional[PageElement], tag: str) -> List[Tag]:
    """Collect every element named ``tag`` under ``root``; empty when root is None."""
    return list(iter_elements(root, tag))

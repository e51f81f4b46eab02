"""
Binds HTML attributes onto typed records.

A record opts in by listing the names of its bindable string fields in a
``BINDABLE_FIELDS`` class attribute. Source keys are matched against those
names case-insensitively: unmatched keys are ignored and unmatched fields keep
their defaults.
"""

import logging
from functools import lru_cache
from typing import Any, Dict

from bs4.element import PageElement, Tag

from wishlist.core.models import OGPAttributes
from .exceptions import BindingFailedError

logger = logging.getLogger(__name__)

OGP_PREFIX = "og:"


@lru_cache(maxsize=None)
def _binding_table(record_type: type) -> Dict[str, str]:
    fields = getattr(record_type, "BINDABLE_FIELDS", None)
    if fields is None:
        raise BindingFailedError(f"{record_type.__name__} declares no bindable fields")
    return {name.lower(): name for name in fields}


def _assign(target: Any, field: str, value: Any) -> None:
    record = type(target).__name__
    if not hasattr(target, field):
        raise BindingFailedError(f"Cannot set field {record}.{field}")
    if not isinstance(getattr(target, field), str):
        raise BindingFailedError(f"Field {record}.{field} must be of type str")

    # Trees parsed with bs4's defaults split multi-valued attributes into lists
    if isinstance(value, list):
        value = " ".join(value)
    setattr(target, field, value)


def bind_element_attributes(node: PageElement, target: Any) -> None:
    """
    Copy the attributes of an element onto the matching fields of ``target``.

    Raises:
        BindingFailedError: ``node`` is not an element, or a matched field is
            not a string field
    """
    if not isinstance(node, Tag):
        raise BindingFailedError(f"Cannot bind attributes of a {type(node).__name__} node")

    table = _binding_table(type(target))
    for key, value in node.attrs.items():
        field = table.get(key.lower())
        if field is not None:
            _assign(target, field, value)


def strip_ogp_prefix(key: str) -> str:
    if key[:len(OGP_PREFIX)].lower() == OGP_PREFIX:
        return key[len(OGP_PREFIX):]
    return key


def bind_ogp_pair(pair: OGPAttributes, target: Any) -> None:
    """
    Set the field of ``target`` named by the pair's property to its content.

    ``og:title`` and ``title`` both address the ``title`` field.

    Raises:
        BindingFailedError: The matched field is not a string field
    """
    field = _binding_table(type(target)).get(strip_ogp_prefix(pair.property).lower())
    if field is None:
        return
    logger.debug(f"Binding '{pair.property}' to {type(target).__name__}.{field}")
    _assign(target, field, pair.content)

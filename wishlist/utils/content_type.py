"""Helpers for sniffing the format of outgoing request bodies"""

import json

from lxml import etree


def safe_xml_parser() -> etree.XMLParser:
    """An XML parser that never resolves entities or touches the network."""
    return etree.XMLParser(resolve_entities=False, no_network=True)


def is_json(data: str) -> bool:
    try:
        json.loads(data)
    except ValueError:
        return False
    return True


def is_xml(data: str) -> bool:
    try:
        etree.fromstring(data.encode("utf-8"), parser=safe_xml_parser())
    except etree.XMLSyntaxError:
        return False
    return True


def detect_content_type(body: str) -> str:
    """Pick the Content-Type header for a non-empty request body."""
    if is_json(body):
        return "application/json"
    if is_xml(body):
        return "application/xml"
    return "text/plain"

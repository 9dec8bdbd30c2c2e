"""Conversion of Game-Monitor XML documents into nested mappings."""

import xml.etree.ElementTree as ET
from typing import Any

from game_monitor.errors import ResponseFormatError


def parse_server_xml(body: bytes | str) -> dict[str, Any]:
    """Parse a server-xml.php body into nested dicts, lists and strings.

    Attributes and child elements both become keys of the element's mapping.
    A tag that repeats under one parent becomes a list; a tag that appears
    once stays a single value. Text-only elements become their stripped text
    and completely empty elements become ``None``. Byte bodies are decoded
    according to their own XML declaration.
    """
    try:
        root = ET.fromstring(body)
    except ET.ParseError as exc:
        raise ResponseFormatError(f"Malformed server XML: {exc}") from exc
    value = _convert(root)
    if not isinstance(value, dict):
        raise ResponseFormatError(f"Unexpected server XML root <{root.tag}>")
    return value


def _convert(element: ET.Element) -> Any:
    children = list(element)
    text = (element.text or "").strip()
    if not children and not element.attrib:
        return text or None

    data: dict[str, Any] = dict(element.attrib)
    grouped: dict[str, list[Any]] = {}
    for child in children:
        grouped.setdefault(child.tag, []).append(_convert(child))
    for tag, values in grouped.items():
        data[tag] = values if len(values) > 1 else values[0]
    if text:
        data["content"] = text
    return data

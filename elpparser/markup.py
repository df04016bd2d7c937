"""XML parsing helpers shared by the decoders."""

from __future__ import annotations

import xml.etree.ElementTree as ET
from typing import Iterator, Optional

from defusedxml import DefusedXmlException
from defusedxml import ElementTree as DefusedET

from .errors import ElpFormatError


def parse_markup(content: bytes, *, source: str = "content") -> ET.Element:
    """Parse raw XML bytes into an element tree root."""
    try:
        return DefusedET.fromstring(content)
    except ET.ParseError as exc:
        raise ElpFormatError(f"XML Parsing error in {source}: {exc}") from exc
    except DefusedXmlException as exc:
        raise ElpFormatError(f"Refusing unsafe XML in {source}: {exc}") from exc


def local_name(element: ET.Element) -> str:
    """Return the tag name without its XML namespace."""
    tag = element.tag
    if not isinstance(tag, str):
        return ""
    if tag.startswith("{"):
        return tag.split("}", 1)[1]
    return tag


def find_first(element: ET.Element, name: str) -> Optional[ET.Element]:
    """Return the first element (root included) whose local name matches."""
    for candidate in iter_named(element, name):
        return candidate
    return None


def iter_named(element: ET.Element, name: str) -> Iterator[ET.Element]:
    for candidate in element.iter():
        if local_name(candidate) == name:
            yield candidate


def child_text(element: ET.Element, name: str) -> str:
    """Return the text of the first direct child with the given local name."""
    for child in element:
        if local_name(child) == name:
            return (child.text or "").strip()
    return ""


__all__ = [
    "child_text",
    "find_first",
    "iter_named",
    "local_name",
    "parse_markup",
]

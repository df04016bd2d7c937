"""Schema-independent collection of every text leaf in a document."""

from __future__ import annotations

import xml.etree.ElementTree as ET
from typing import List

from .config import DEFAULT_MAX_DEPTH
from .errors import ElpFormatError


def collect_strings(element: ET.Element, *, max_depth: int = DEFAULT_MAX_DEPTH) -> List[str]:
    """Return trimmed, non-empty text content in document order."""
    strings: List[str] = []
    try:
        _collect(element, strings, 0, max_depth)
    except RecursionError as exc:
        raise ElpFormatError(f"Content nesting exceeds the maximum depth of {max_depth}") from exc
    return strings


def _collect(element: ET.Element, strings: List[str], depth: int, max_depth: int) -> None:
    if depth > max_depth:
        raise ElpFormatError(f"Content nesting exceeds the maximum depth of {max_depth}")
    _append(strings, element.text)
    for child in element:
        _collect(child, strings, depth + 1, max_depth)
        _append(strings, child.tail)


def _append(strings: List[str], text: str | None) -> None:
    if text is None:
        return
    stripped = text.strip()
    if stripped:
        strings.append(stripped)


__all__ = ["collect_strings"]

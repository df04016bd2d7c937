"""Schema generation detection from the archive entry set."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from .errors import ElpFormatError

# Entry names are historical: the newer generation stores content.xml.
CONTENT_V3_ENTRY = "content.xml"
CONTENT_V2_ENTRY = "contentv3.xml"


@dataclass(frozen=True)
class ContentFormat:
    """Detected schema generation and the entry that holds its content."""

    version: int
    entry: str


def detect_format(names: Iterable[str]) -> ContentFormat:
    """Pick the schema version and primary content entry for an archive."""
    available = set(names)
    if CONTENT_V3_ENTRY in available:
        return ContentFormat(version=3, entry=CONTENT_V3_ENTRY)
    if CONTENT_V2_ENTRY in available:
        return ContentFormat(version=2, entry=CONTENT_V2_ENTRY)
    raise ElpFormatError("Invalid ELP file: No content XML found")


__all__ = ["CONTENT_V2_ENTRY", "CONTENT_V3_ENTRY", "ContentFormat", "detect_format"]

"""Core data models produced by the package decoder and projections."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Tuple, Union


@dataclass(frozen=True)
class Reference:
    """Named back-pointer to another instance in the same content tree."""

    key: str


GenericValue = Union[str, int, bool, None, Reference, List[Any], Dict[str, Any]]


@dataclass(frozen=True)
class PackageRecord:
    """Flat metadata view of one parsed package."""

    version: int
    title: str = ""
    description: str = ""
    author: str = ""
    license: str = ""
    language: str = ""
    learning_resource_type: str = ""
    strings: Tuple[str, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "version": self.version,
            "title": self.title,
            "description": self.description,
            "author": self.author,
            "license": self.license,
            "language": self.language,
            "learningResourceType": self.learning_resource_type,
            "strings": list(self.strings),
        }


@dataclass
class SchemaEntry:
    """Metadata projected into one vocabulary (Package, Dublin core, LOM...)."""

    schema: str
    content: Dict[str, Any]


@dataclass
class IdeviceSummary:
    """Displayable summary of a content element attached to a page."""

    id: str
    type: str
    title: str
    text: str
    html: str


@dataclass
class PageNode:
    """One navigable page of the content tree."""

    filename: str
    pagename: str
    level: int
    idevices: List[IdeviceSummary] = field(default_factory=list)


@dataclass
class MetadataReport:
    """Schema entries plus the flattened page tree of a package."""

    schemas: List[SchemaEntry] = field(default_factory=list)
    pages: List[PageNode] = field(default_factory=list)

    def schema(self, name: str) -> SchemaEntry | None:
        for entry in self.schemas:
            if entry.schema == name:
                return entry
        return None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "metadata": [
                {"schema": entry.schema, "content": to_plain(entry.content)}
                for entry in self.schemas
            ],
            "pages": [
                {
                    "filename": page.filename,
                    "pagename": page.pagename,
                    "level": page.level,
                    "idevices": [
                        {
                            "id": idevice.id,
                            "type": idevice.type,
                            "title": idevice.title,
                            "text": idevice.text,
                            "html": idevice.html,
                        }
                        for idevice in page.idevices
                    ],
                }
                for page in self.pages
            ],
        }


def to_plain(value: Any) -> Any:
    """Convert a decoded value into JSON-compatible builtins."""
    if isinstance(value, Reference):
        return {"reference": value.key}
    if isinstance(value, dict):
        return {key: to_plain(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [to_plain(item) for item in value]
    return value


__all__ = [
    "GenericValue",
    "IdeviceSummary",
    "MetadataReport",
    "PackageRecord",
    "PageNode",
    "Reference",
    "SchemaEntry",
    "to_plain",
]

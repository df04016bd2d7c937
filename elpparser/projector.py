"""Multi-schema metadata report and page tree built from decoded content."""

from __future__ import annotations

import xml.etree.ElementTree as ET
from typing import Any, Dict, List, Optional, Sequence

from bs4 import BeautifulSoup

from .config import DEFAULT_MAX_DEPTH
from .decoder import ValueDecoder
from .errors import ElpFormatError
from .logging import get_logger
from .markup import find_first
from .models import GenericValue, IdeviceSummary, MetadataReport, PageNode, Reference, SchemaEntry
from .slug import slugify

PACKAGE_SCHEMA = "Package"
DUBLIN_CORE_SCHEMA = "Dublin core"
LOM_SCHEMA = "LOM v1.0"
LOM_ES_SCHEMA = "LOM-ES v1.0"

ROOT_NODE_ID = "0"
INDEX_FILENAME = "index.html"
HTML_FIELD_KEY = "content_w_resourcePaths"

_MISSING = object()


class SchemaProjector:
    """Projects a content document onto the Package, DC, LOM and LOM-ES schemas."""

    def __init__(self, *, locale: Optional[str] = None, max_depth: int = DEFAULT_MAX_DEPTH) -> None:
        self.locale = locale
        self.max_depth = max_depth
        self.logger = get_logger("projector")

    def project(self, root: ET.Element) -> MetadataReport:
        decoder = ValueDecoder(max_depth=self.max_depth)
        dictionary = find_first(root, "dictionary")
        data: Dict[str, Any] = decoder.decode_dictionary(dictionary) if dictionary is not None else {}

        report = MetadataReport()
        report.schemas.append(SchemaEntry(PACKAGE_SCHEMA, _package_content(data)))

        dublin_core = decoder.resolve(data.get("dublinCore"))
        if isinstance(dublin_core, dict):
            report.schemas.append(SchemaEntry(DUBLIN_CORE_SCHEMA, _dublin_core_content(dublin_core)))

        lom = decoder.resolve(data.get("lom"))
        if isinstance(lom, dict):
            report.schemas.append(SchemaEntry(LOM_SCHEMA, _lom_content(lom, es=False)))

        lom_es = decoder.resolve(data.get("lomEs"))
        if isinstance(lom_es, dict):
            report.schemas.append(SchemaEntry(LOM_ES_SCHEMA, _lom_content(lom_es, es=True)))

        page_root = _lookup(data, ("_nodeIdDict", ROOT_NODE_ID))
        if page_root is not _MISSING:
            report.pages = self.build_pages(page_root, decoder)

        self.logger.debug(
            "Projected %d schema entries and %d pages",
            len(report.schemas),
            len(report.pages),
        )
        return report

    def build_pages(self, root_node: GenericValue, decoder: ValueDecoder) -> List[PageNode]:
        """Flatten the node hierarchy in pre-order."""
        pages: List[PageNode] = []
        try:
            self._walk(root_node, 0, pages, decoder)
        except RecursionError as exc:
            raise ElpFormatError(
                f"Page tree exceeds the maximum depth of {self.max_depth}"
            ) from exc
        return pages

    def _walk(
        self,
        node: GenericValue,
        level: int,
        pages: List[PageNode],
        decoder: ValueDecoder,
    ) -> None:
        if level > self.max_depth:
            raise ElpFormatError(f"Page tree exceeds the maximum depth of {self.max_depth}")
        node = decoder.resolve(node)
        if not isinstance(node, dict):
            return

        title = _text(node.get("_title"))
        filename = INDEX_FILENAME if level == 0 else f"{slugify(title, self.locale)}.html"
        idevices = [
            _idevice_summary(idevice, decoder)
            for idevice in (decoder.resolve(item) for item in _as_list(node.get("idevices")))
            if isinstance(idevice, dict)
        ]
        pages.append(PageNode(filename=filename, pagename=title, level=level, idevices=idevices))

        for child in _as_list(node.get("children")):
            self._walk(child, level + 1, pages, decoder)


def _package_content(data: Dict[str, Any]) -> Dict[str, Any]:
    return {
        "title": _text(data.get("_title")),
        "author": _text(data.get("_author")),
        "language": _text(data.get("_lang")),
        "description": _text(data.get("_description")),
        "license": _text(data.get("license")),
        "classification": "",
    }


def _dublin_core_content(dublin_core: Dict[str, Any]) -> Dict[str, Any]:
    return {
        "title": _text(dublin_core.get("title")),
        "author": _text(dublin_core.get("creator")),
        "language": _text(dublin_core.get("language")),
        "description": _text(dublin_core.get("description")),
        "rights": {"rights": _text(dublin_core.get("rights"))},
        "classification": {"source": _text(dublin_core.get("source")), "taxon_path": []},
    }


def _lom_content(lom: Dict[str, Any], *, es: bool) -> Dict[str, Any]:
    author = _MISSING
    if es:
        author = _lookup(lom, ("lifeCycle", "contribute", "entity", "name"))
    if author is _MISSING or author == []:
        author = _lookup(lom, ("lifeCycle", "contribute", "entity"))
    return {
        "title": _default(_lookup(lom, ("general", "title", "string")), []),
        "author": _default(author, []),
        "language": _default(_lookup(lom, ("general", "language")), []),
        "description": _default(_lookup(lom, ("general", "description")), []),
        "rights": _default(_lookup(lom, ("rights",)), {}),
        "classification": _default(_lookup(lom, ("classification",)), {}),
    }


def _lookup(value: Any, path: Sequence[str]) -> Any:
    """Follow ``path`` through nested mappings.

    Lists met on the way apply the rest of the path to every item and
    collect the items where it resolves.
    """
    current = value
    for index, key in enumerate(path):
        if isinstance(current, list):
            rest = path[index:]
            found = [_lookup(item, rest) for item in current]
            return [item for item in found if item is not _MISSING]
        if not isinstance(current, dict) or key not in current:
            return _MISSING
        current = current[key]
    return current


def _default(value: Any, fallback: Any) -> Any:
    return fallback if value is _MISSING or value is None else value


def _idevice_summary(idevice: Dict[str, Any], decoder: ValueDecoder) -> IdeviceSummary:
    html = _first_field_html(idevice.get("fields"), decoder)
    return IdeviceSummary(
        id=_text(idevice.get("id")) or _text(idevice.get("_id")),
        type=_text(idevice.get("class_")) or _text(idevice.get("type")),
        title=_text(idevice.get("_title")) or _text(idevice.get("title")),
        text=strip_tags(html),
        html=html,
    )


def _first_field_html(fields: Any, decoder: ValueDecoder) -> str:
    for item in _as_list(fields):
        field = decoder.resolve(item)
        if isinstance(field, dict) and HTML_FIELD_KEY in field:
            return _text(field[HTML_FIELD_KEY])
    return ""


def strip_tags(html: str) -> str:
    if not html:
        return ""
    return BeautifulSoup(html, "html.parser").get_text()


def _as_list(value: Any) -> List[Any]:
    return value if isinstance(value, list) else []


def _text(value: Any) -> str:
    if isinstance(value, bool) or value is None or isinstance(value, Reference):
        return ""
    if isinstance(value, (str, int)):
        return str(value)
    return ""


__all__ = [
    "DUBLIN_CORE_SCHEMA",
    "LOM_ES_SCHEMA",
    "LOM_SCHEMA",
    "PACKAGE_SCHEMA",
    "SchemaProjector",
    "strip_tags",
]

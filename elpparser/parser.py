"""Public entry point for reading .elp packages."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, List

from .archive import PackageArchive
from .config import ParserConfig
from .errors import ElpWriteError
from .legacy import extract_legacy_metadata
from .logging import get_logger
from .markup import parse_markup
from .models import MetadataReport, PackageRecord
from .projector import SchemaProjector
from .strings import collect_strings
from .version import detect_format


class ElpParser:
    """Parsed view of one .elp package.

    Opening a package detects its schema generation, parses the content XML
    and extracts the flat metadata record plus every text string. The
    metadata report is computed on request from the stored content bytes.
    """

    def __init__(self, path: str | Path, config: ParserConfig | None = None) -> None:
        self.path = Path(path).expanduser()
        self.config = config or ParserConfig()
        self.logger = get_logger("parser")
        self._content_entry = ""
        self._content = b""
        self._record = self._parse()

    @classmethod
    def from_file(cls, path: str | Path, config: ParserConfig | None = None) -> "ElpParser":
        return cls(path, config)

    def _parse(self) -> PackageRecord:
        self.logger.debug("Opening package %s", self.path)
        with PackageArchive.open(self.path) as archive:
            content_format = detect_format(archive.names())
            self.logger.debug(
                "Detected version %d content in %s", content_format.version, content_format.entry
            )
            content = archive.read_entry(content_format.entry)

        root = parse_markup(content, source=f"{self.path.name}:{content_format.entry}")
        fields = extract_legacy_metadata(root)
        strings = collect_strings(root, max_depth=self.config.max_depth)
        self._content_entry = content_format.entry
        self._content = content
        self.logger.info(
            "Parsed %s (version %d, %d strings)", self.path.name, content_format.version, len(strings)
        )
        return PackageRecord(version=content_format.version, strings=tuple(strings), **fields)

    @property
    def version(self) -> int:
        return self._record.version

    @property
    def content_entry(self) -> str:
        return self._content_entry

    @property
    def strings(self) -> List[str]:
        return list(self._record.strings)

    @property
    def title(self) -> str:
        return self._record.title

    @property
    def description(self) -> str:
        return self._record.description

    @property
    def author(self) -> str:
        return self._record.author

    @property
    def license(self) -> str:
        return self._record.license

    @property
    def language(self) -> str:
        return self._record.language

    @property
    def learning_resource_type(self) -> str:
        return self._record.learning_resource_type

    def to_record(self) -> PackageRecord:
        return self._record

    def to_dict(self) -> Dict[str, Any]:
        return self._record.to_dict()

    def export_json(self, destination: str | Path | None = None) -> str:
        """Serialize the record as pretty printed JSON, optionally writing it."""
        payload = json.dumps(self.to_dict(), indent=self.config.json_indent, ensure_ascii=False)
        if destination is not None:
            target = Path(destination).expanduser()
            try:
                target.parent.mkdir(parents=True, exist_ok=True)
                target.write_text(payload, encoding="utf-8")
            except OSError as exc:
                raise ElpWriteError(f"Unable to write JSON export to {target}: {exc}") from exc
            self.logger.info("Exported %s to %s", self.path.name, target)
        return payload

    def get_metadata_report(self) -> MetadataReport:
        root = parse_markup(self._content, source=f"{self.path.name}:{self._content_entry}")
        projector = SchemaProjector(locale=self.config.locale, max_depth=self.config.max_depth)
        return projector.project(root)

    def extract(self, destination: str | Path) -> Path:
        with PackageArchive.open(self.path) as archive:
            return archive.extract_all(destination)


__all__ = ["ElpParser"]

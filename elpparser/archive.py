"""Thin accessor over the zip container that holds an .elp package."""

from __future__ import annotations

import zipfile
import zlib
from pathlib import Path
from typing import List

from .errors import ElpIOError, ElpNotFoundError, ElpWriteError
from .logging import get_logger

_logger = get_logger("archive")


class PackageArchive:
    """Opened package archive exposing entry lookups, reads and extraction."""

    def __init__(self, path: Path, zip_file: zipfile.ZipFile) -> None:
        self.path = path
        self._zip = zip_file

    @classmethod
    def open(cls, path: str | Path) -> "PackageArchive":
        archive_path = Path(path).expanduser()
        if not archive_path.is_file():
            raise ElpNotFoundError(f"ELP file not found: {archive_path}")
        try:
            zip_file = zipfile.ZipFile(archive_path)
        except zipfile.BadZipFile as exc:
            raise ElpIOError(
                f"Unable to open ELP file: {archive_path} is not a valid zip archive"
            ) from exc
        except OSError as exc:
            raise ElpIOError(f"Unable to open ELP file: {archive_path}: {exc}") from exc
        _logger.debug("Opened archive %s (%d entries)", archive_path, len(zip_file.namelist()))
        return cls(archive_path, zip_file)

    def names(self) -> List[str]:
        return self._zip.namelist()

    def has_entry(self, name: str) -> bool:
        try:
            self._zip.getinfo(name)
        except KeyError:
            return False
        return True

    def read_entry(self, name: str) -> bytes:
        try:
            return self._zip.read(name)
        except KeyError as exc:
            raise ElpIOError(f"Entry {name} not found in {self.path}") from exc
        except (zipfile.BadZipFile, zlib.error, OSError) as exc:
            raise ElpIOError(f"Failed to read {name} from {self.path}: {exc}") from exc

    def extract_all(self, destination: str | Path) -> Path:
        target = Path(destination).expanduser()
        try:
            target.mkdir(parents=True, exist_ok=True)
            self._zip.extractall(target)
        except (zipfile.BadZipFile, zlib.error) as exc:
            raise ElpIOError(f"Failed to extract {self.path}: {exc}") from exc
        except OSError as exc:
            raise ElpWriteError(f"Unable to extract ELP file to {target}: {exc}") from exc
        _logger.info("Extracted %s into %s", self.path, target)
        return target

    def close(self) -> None:
        self._zip.close()

    def __enter__(self) -> "PackageArchive":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


__all__ = ["PackageArchive"]

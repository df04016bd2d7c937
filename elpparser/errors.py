"""Exception hierarchy raised while reading .elp packages."""

from __future__ import annotations


class ElpError(RuntimeError):
    """Base class for every failure reported by elpparser."""


class ElpIOError(ElpError):
    """Raised when a package file or one of its entries cannot be read."""


class ElpNotFoundError(ElpIOError):
    """Raised when the package path does not exist."""


class ElpFormatError(ElpError):
    """Raised when a package does not contain readable content XML."""


class ElpWriteError(ElpError):
    """Raised when an export or extraction target cannot be written."""


__all__ = [
    "ElpError",
    "ElpFormatError",
    "ElpIOError",
    "ElpNotFoundError",
    "ElpWriteError",
]

"""Reader for eXeLearning .elp packages."""

from .config import ConfigError, ParserConfig, load_config
from .errors import ElpError, ElpFormatError, ElpIOError, ElpNotFoundError, ElpWriteError
from .models import IdeviceSummary, MetadataReport, PackageRecord, PageNode, Reference, SchemaEntry
from .parser import ElpParser

__all__ = [
    "ConfigError",
    "ElpError",
    "ElpFormatError",
    "ElpIOError",
    "ElpNotFoundError",
    "ElpParser",
    "ElpWriteError",
    "IdeviceSummary",
    "MetadataReport",
    "PackageRecord",
    "PageNode",
    "ParserConfig",
    "Reference",
    "SchemaEntry",
    "load_config",
]

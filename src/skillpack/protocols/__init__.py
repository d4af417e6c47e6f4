"""Protocol definitions for extensible components."""

from skillpack.protocols.blob import NamedBlob
from skillpack.protocols.decoder import GzipDecoder, ZipDecoder
from skillpack.protocols.entry import DirectoryReader, DropItem, FileSystemEntry
from skillpack.protocols.ingester import Ingester

__all__ = [
    "NamedBlob",
    "ZipDecoder",
    "GzipDecoder",
    "FileSystemEntry",
    "DirectoryReader",
    "DropItem",
    "Ingester",
]

"""Concrete blobs, filesystem entries and drop items."""

from skillpack.sources.drop import EntryItem, FileItem
from skillpack.sources.local import LocalDirectoryReader, LocalEntry, LocalFile
from skillpack.sources.memory import NamedFile, RenamedBlob

__all__ = [
    "EntryItem",
    "FileItem",
    "LocalDirectoryReader",
    "LocalEntry",
    "LocalFile",
    "NamedFile",
    "RenamedBlob",
]

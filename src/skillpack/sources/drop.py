"""Drag-and-drop items."""

from dataclasses import dataclass
from typing import Optional

from skillpack.protocols.blob import NamedBlob
from skillpack.protocols.entry import FileSystemEntry


@dataclass(frozen=True)
class FileItem:
    """A dropped item that only exposes a file."""

    file: NamedBlob

    def get_as_entry(self) -> Optional[FileSystemEntry]:
        return None

    def get_as_file(self) -> Optional[NamedBlob]:
        return self.file


@dataclass(frozen=True)
class EntryItem:
    """A dropped item that exposes a filesystem entry."""

    entry: FileSystemEntry

    def get_as_entry(self) -> Optional[FileSystemEntry]:
        return self.entry

    def get_as_file(self) -> Optional[NamedBlob]:
        return None

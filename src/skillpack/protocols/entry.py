"""Protocols for drag-and-drop items and hierarchical filesystem entries."""

from typing import Optional, Protocol, runtime_checkable

from skillpack.protocols.blob import NamedBlob


@runtime_checkable
class DirectoryReader(Protocol):
    """Enumerates the children of a directory entry.

    Children come back in bounded batches. Callers keep calling
    ``read_entries`` until it returns an empty list.
    """

    async def read_entries(self) -> list["FileSystemEntry"]:
        ...


@runtime_checkable
class FileSystemEntry(Protocol):
    """A file or directory inside a dropped tree."""

    @property
    def is_file(self) -> bool:
        ...

    @property
    def is_directory(self) -> bool:
        ...

    @property
    def name(self) -> str:
        ...

    @property
    def full_path(self) -> Optional[str]:
        """Path hint from the platform (may start with '/'), or None."""
        ...

    async def file(self) -> NamedBlob:
        """Resolve a file entry to its blob."""
        ...

    def create_reader(self) -> DirectoryReader:
        """Create a reader over a directory entry's children."""
        ...


@runtime_checkable
class DropItem(Protocol):
    """One item of a drag-and-drop payload."""

    def get_as_entry(self) -> Optional[FileSystemEntry]:
        ...

    def get_as_file(self) -> Optional[NamedBlob]:
        ...

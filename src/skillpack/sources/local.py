"""Blobs and directory entries backed by the local filesystem."""

import asyncio
from pathlib import Path
from typing import Optional


class LocalFile:
    """A file on disk, read on demand."""

    def __init__(self, path: Path | str, relative_path: str = ""):
        self.path = Path(path)
        self.relative_path = relative_path

    @property
    def name(self) -> str:
        return self.path.name

    @property
    def content_type(self) -> str:
        # Let the expander infer it from the extension
        return ""

    async def read(self) -> bytes:
        return await asyncio.to_thread(self.path.read_bytes)

    def __repr__(self) -> str:
        return f"LocalFile({str(self.path)!r})"


class LocalDirectoryReader:
    """Lists a directory's children in fixed-size batches.

    Children are sorted by name so traversal order is stable.
    """

    BATCH_SIZE = 100

    def __init__(self, path: Path, batch_size: int = BATCH_SIZE):
        self.path = path
        self.batch_size = batch_size
        self._pending: Optional[list[Path]] = None

    async def read_entries(self) -> list["LocalEntry"]:
        """Return the next batch of children, or [] once exhausted."""
        if self._pending is None:
            self._pending = await asyncio.to_thread(
                lambda: sorted(self.path.iterdir(), key=lambda p: p.name)
            )
        batch = self._pending[: self.batch_size]
        self._pending = self._pending[self.batch_size :]
        return [LocalEntry(child) for child in batch]


class LocalEntry:
    """A file or directory entry for a path on disk.

    Args:
        path: Location on disk
        full_path: Optional platform-style path hint (e.g., '/docs/a.md').
            When None, the collector builds paths from parent names.
    """

    def __init__(self, path: Path | str, full_path: Optional[str] = None):
        self.path = Path(path)
        self.full_path = full_path

    @property
    def is_file(self) -> bool:
        return self.path.is_file()

    @property
    def is_directory(self) -> bool:
        return self.path.is_dir()

    @property
    def name(self) -> str:
        return self.path.name

    async def file(self) -> LocalFile:
        return LocalFile(self.path)

    def create_reader(self) -> LocalDirectoryReader:
        return LocalDirectoryReader(self.path)

    def __repr__(self) -> str:
        return f"LocalEntry({str(self.path)!r})"

"""Flatten drag-and-drop payloads into named file blobs."""

import logging
from typing import Iterable, Optional

from skillpack.protocols import DirectoryReader, DropItem, FileSystemEntry, NamedBlob
from skillpack.sources import RenamedBlob

logger = logging.getLogger(__name__)


async def expand_dropped_items(
    items: Optional[Iterable[DropItem]],
) -> list[NamedBlob]:
    """Collect every file from a drop, walking dropped directories.

    Items exposing a filesystem entry are walked. When no item exposes one,
    the plain files are returned as they are.
    """
    dropped: list[NamedBlob] = []
    entries: list[FileSystemEntry] = []

    for item in items or ():
        entry = item.get_as_entry()
        if entry is not None:
            entries.append(entry)
            continue
        file = item.get_as_file()
        if file is not None:
            dropped.append(file)

    if not entries:
        return dropped

    # Plain files are dropped once any entry is present
    collected: list[NamedBlob] = []
    for entry in entries:
        await collect_entry(entry, "", collected)
    return collected


def _resolve_path(entry: FileSystemEntry, parent_path: str, name: str) -> str:
    full_path = (entry.full_path or "").lstrip("/")
    if full_path:
        return full_path
    return f"{parent_path}/{name}" if parent_path else name


async def collect_entry(
    entry: FileSystemEntry, parent_path: str, files: list[NamedBlob]
) -> None:
    """Append the files under an entry to ``files``, depth-first.

    Args:
        entry: File or directory entry to walk
        parent_path: Resolved path of the enclosing directory ('' at the root)
        files: Accumulator, extended in traversal order
    """
    if entry.is_file:
        blob = await entry.file()
        path = _resolve_path(entry, parent_path, blob.name)
        files.append(RenamedBlob(blob, path))
        return

    if not entry.is_directory:
        logger.debug(f"Skipping entry that is neither file nor directory: {entry.name}")
        return

    base_path = _resolve_path(entry, parent_path, entry.name)
    children = await read_all_entries(entry.create_reader())
    for child in children:
        await collect_entry(child, base_path, files)


async def read_all_entries(reader: DirectoryReader) -> list[FileSystemEntry]:
    """Drain a directory reader, which may return children in several batches."""
    entries: list[FileSystemEntry] = []
    while True:
        batch = await reader.read_entries()
        if not batch:
            break
        entries.extend(batch)
    return entries

"""Path canonicalization and archive entry policies."""

import dataclasses
from typing import AbstractSet, Sequence, TypeVar

from skillpack.utils.extensions import TEXT_FILE_EXTENSIONS, get_extension

T = TypeVar("T")


def normalize_path(path: str) -> str:
    """Canonicalize a raw archive or upload path.

    Removes NUL characters, converts backslashes to '/', trims whitespace,
    then strips any leading './' and '/' runs. Idempotent.
    """
    path = path.replace("\x00", "").replace("\\", "/")
    previous = None
    while path != previous:
        previous = path
        path = path.strip()
        if path.startswith("./"):
            path = path[2:]
        path = path.lstrip("/")
    return path


def _segments(path: str) -> list[str]:
    return [part for part in path.split("/") if part]


def is_mac_junk_path(path: str) -> bool:
    """Check if a path is operating-system metadata rather than content.

    Matches anything under __MACOSX/, .DS_Store files and AppleDouble
    '._*' resource-fork shadows, case-insensitively.
    """
    normalized = normalize_path(path).lower()
    if not normalized:
        return False
    segments = _segments(normalized)
    if "__macosx" in segments:
        return True
    basename = segments[-1] if segments else ""
    if basename == ".ds_store":
        return True
    return basename.startswith("._")


def is_text_path(
    path: str, text_extensions: AbstractSet[str] = TEXT_FILE_EXTENSIONS
) -> bool:
    """Check if an archive entry has a recognized text extension."""
    extension = get_extension(path)
    if not extension:
        return False
    return extension in text_extensions


def unwrap_single_top_level_folder(entries: Sequence[T]) -> list[T]:
    """Strip a root folder shared by every entry.

    Entries are dataclass instances with a ``path`` field. The unwrap is
    all-or-nothing: if any entry sits at the root, or the first segments
    differ, every path is left as is.
    """
    entries = list(entries)
    if not entries:
        return entries

    segments = [_segments(entry.path) for entry in entries]
    if any(len(parts) < 2 for parts in segments):
        return entries

    first = segments[0][0]
    if not all(parts[0] == first for parts in segments):
        return entries

    return [
        dataclasses.replace(entry, path=entry.path.split("/", 1)[1].lstrip("/"))
        for entry in entries
    ]

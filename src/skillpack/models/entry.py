"""Core data models for decoded entries and expanded files."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class RawEntry:
    """A single (path, bytes) pair produced by an archive decoder."""

    path: str
    data: bytes


@dataclass(frozen=True)
class ExpandedFile:
    """A file ready for the import pipeline."""

    path: str
    content: bytes
    mime_type: str

    @property
    def size_bytes(self) -> int:
        return len(self.content)


@dataclass
class ExpandFilesReport:
    """Result of expanding a selection of files.

    Both lists keep insertion order. Paths in ``files`` are not deduplicated.
    """

    files: list[ExpandedFile] = field(default_factory=list)
    ignored_mac_junk_paths: list[str] = field(default_factory=list)

    def extend(self, other: "ExpandFilesReport") -> None:
        """Append another report's files and junk paths, in order."""
        self.files.extend(other.files)
        self.ignored_mac_junk_paths.extend(other.ignored_mac_junk_paths)

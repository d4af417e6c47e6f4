"""Protocol for named, readable file blobs."""

from typing import Protocol, runtime_checkable


@runtime_checkable
class NamedBlob(Protocol):
    """A user-selected file: a name plus lazily readable bytes.

    ``relative_path`` carries the path inside a selected folder when the
    source knows it, and is empty otherwise.
    """

    @property
    def name(self) -> str:
        ...

    @property
    def relative_path(self) -> str:
        ...

    @property
    def content_type(self) -> str:
        """Declared MIME type, or an empty string when unknown."""
        ...

    async def read(self) -> bytes:
        """Read the whole blob into memory."""
        ...

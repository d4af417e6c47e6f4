"""In-memory blobs."""

from dataclasses import dataclass

from skillpack.protocols.blob import NamedBlob


@dataclass(frozen=True)
class NamedFile:
    """A blob whose bytes are already in memory."""

    name: str
    data: bytes
    content_type: str = ""
    relative_path: str = ""

    async def read(self) -> bytes:
        return self.data


class RenamedBlob:
    """Expose another blob under a new name, reading it lazily."""

    def __init__(self, blob: NamedBlob, name: str):
        self._blob = blob
        self._name = name

    @property
    def name(self) -> str:
        return self._name

    @property
    def relative_path(self) -> str:
        return ""

    @property
    def content_type(self) -> str:
        return self._blob.content_type

    async def read(self) -> bytes:
        return await self._blob.read()

    def __repr__(self) -> str:
        return f"RenamedBlob({self._name!r})"

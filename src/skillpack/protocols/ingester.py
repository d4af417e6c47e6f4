"""Protocol for archive format handlers."""

from typing import Protocol, runtime_checkable

from skillpack.models import ExpandFilesReport


@runtime_checkable
class Ingester(Protocol):
    """Protocol for archive format handlers.

    Implementations handle one input format (zip, tar.gz, gz) picked by the
    input's name. Uses structural subtyping - no inheritance required.
    """

    @property
    def source_type(self) -> str:
        """Return identifier for this format (e.g., 'zip', 'tar.gz')."""
        ...

    def can_handle(self, name: str) -> bool:
        """Check if this ingester can process an input with the given name."""
        ...

    def ingest(self, name: str, data: bytes) -> ExpandFilesReport:
        """Expand the raw bytes of one input into files and junk paths."""
        ...

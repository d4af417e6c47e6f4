"""Ingester for ZIP archive files."""

from typing import AbstractSet, Optional

from skillpack.decoders import StdlibZipDecoder
from skillpack.models import ExpandFilesReport, RawEntry
from skillpack.pipeline import expand_archive_entries
from skillpack.protocols.decoder import ZipDecoder
from skillpack.utils.extensions import TEXT_FILE_EXTENSIONS


class ZipIngester:
    """Ingester for ZIP archive files."""

    source_type = "zip"

    def __init__(
        self,
        decoder: Optional[ZipDecoder] = None,
        text_extensions: AbstractSet[str] = TEXT_FILE_EXTENSIONS,
    ):
        self.decoder = decoder or StdlibZipDecoder()
        self.text_extensions = text_extensions

    def can_handle(self, name: str) -> bool:
        """Check if this is a zip file."""
        return name.lower().endswith(".zip")

    def ingest(self, name: str, data: bytes) -> ExpandFilesReport:
        """Expand a ZIP archive's text entries.

        Args:
            name: Archive file name
            data: Raw archive bytes

        Returns:
            Report for the archive's entries
        """
        entries = self.decoder.decode(data)
        return expand_archive_entries(
            (RawEntry(path=path, data=content) for path, content in entries.items()),
            self.text_extensions,
        )

"""Ingester for gzip-compressed TAR archives."""

from typing import AbstractSet, Optional

from skillpack.decoders import StdlibGzipDecoder, TarDecoder
from skillpack.models import ExpandFilesReport
from skillpack.pipeline import expand_archive_entries
from skillpack.protocols.decoder import GzipDecoder
from skillpack.utils.extensions import TEXT_FILE_EXTENSIONS


class TarGzipIngester:
    """Ingester for .tar.gz and .tgz archives."""

    source_type = "tar.gz"

    def __init__(
        self,
        gzip_decoder: Optional[GzipDecoder] = None,
        tar_decoder: Optional[TarDecoder] = None,
        text_extensions: AbstractSet[str] = TEXT_FILE_EXTENSIONS,
    ):
        self.gzip_decoder = gzip_decoder or StdlibGzipDecoder()
        self.tar_decoder = tar_decoder or TarDecoder()
        self.text_extensions = text_extensions

    def can_handle(self, name: str) -> bool:
        """Check if this is a gzipped tarball."""
        lower = name.lower()
        return lower.endswith(".tar.gz") or lower.endswith(".tgz")

    def ingest(self, name: str, data: bytes) -> ExpandFilesReport:
        unpacked = self.gzip_decoder.decode(data)
        return expand_archive_entries(
            self.tar_decoder.decode(unpacked), self.text_extensions
        )

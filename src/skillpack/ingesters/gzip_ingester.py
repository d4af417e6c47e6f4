"""Ingester for single gzip-compressed files."""

import logging
import re
from typing import AbstractSet, Optional

from skillpack.decoders import StdlibGzipDecoder
from skillpack.models import ExpandedFile, ExpandFilesReport
from skillpack.protocols.decoder import GzipDecoder
from skillpack.utils.content_type import guess_content_type
from skillpack.utils.extensions import TEXT_FILE_EXTENSIONS
from skillpack.utils.paths import is_mac_junk_path, normalize_path

logger = logging.getLogger(__name__)

_GZ_SUFFIX = re.compile(r"\.gz\Z", re.IGNORECASE)


class GzipIngester:
    """Ingester for a bare .gz file holding one compressed file.

    The text allow-list does not apply here: the single output is kept
    whatever its extension, unless it is junk.
    """

    source_type = "gz"

    def __init__(
        self,
        decoder: Optional[GzipDecoder] = None,
        text_extensions: AbstractSet[str] = TEXT_FILE_EXTENSIONS,
    ):
        self.decoder = decoder or StdlibGzipDecoder()
        self.text_extensions = text_extensions

    def can_handle(self, name: str) -> bool:
        """Check if this is a gzip file."""
        return name.lower().endswith(".gz")

    def ingest(self, name: str, data: bytes) -> ExpandFilesReport:
        report = ExpandFilesReport()
        unpacked = self.decoder.decode(data)
        inner_name = _GZ_SUFFIX.sub("", name)
        path = normalize_path(inner_name)

        if is_mac_junk_path(path):
            report.ignored_mac_junk_paths.append(path or inner_name)
            return report

        logger.debug(f"Decompressed {name} -> {path} ({len(unpacked)} bytes)")
        report.files.append(
            ExpandedFile(
                path=path,
                content=unpacked,
                mime_type=guess_content_type(path, self.text_extensions),
            )
        )
        return report

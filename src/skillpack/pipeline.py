"""Normalization pipeline shared by every archive format."""

import logging
from typing import AbstractSet, Iterable

from skillpack.models import ExpandedFile, ExpandFilesReport, RawEntry
from skillpack.utils.content_type import guess_content_type
from skillpack.utils.extensions import TEXT_FILE_EXTENSIONS
from skillpack.utils.paths import (
    is_mac_junk_path,
    is_text_path,
    normalize_path,
    unwrap_single_top_level_folder,
)

logger = logging.getLogger(__name__)


def expand_archive_entries(
    entries: Iterable[RawEntry],
    text_extensions: AbstractSet[str] = TEXT_FILE_EXTENSIONS,
) -> ExpandFilesReport:
    """Turn decoded archive entries into expanded files.

    Each entry is normalized, then junk entries are reported and dropped,
    non-text entries are dropped silently, and a single shared root folder
    is unwrapped from what remains.

    Args:
        entries: Entries in archive order
        text_extensions: Allow-list of importable extensions

    Returns:
        Report with the kept files and the ignored junk paths
    """
    report = ExpandFilesReport()
    normalized: list[RawEntry] = []
    skipped = 0

    for entry in entries:
        path = normalize_path(entry.path)
        if not path or path.endswith("/"):
            continue
        if is_mac_junk_path(path):
            report.ignored_mac_junk_paths.append(path)
            continue
        if not is_text_path(path, text_extensions):
            skipped += 1
            continue
        normalized.append(RawEntry(path=path, data=entry.data))

    for entry in unwrap_single_top_level_folder(normalized):
        report.files.append(
            ExpandedFile(
                path=entry.path,
                content=entry.data,
                mime_type=guess_content_type(entry.path, text_extensions),
            )
        )

    logger.debug(
        f"Archive expanded: {len(report.files)} files, "
        f"{len(report.ignored_mac_junk_paths)} junk, {skipped} non-text skipped"
    )
    return report

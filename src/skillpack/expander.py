"""Expand user-selected files and archives into a flat file list."""

import logging
from typing import AbstractSet, Iterable, Optional, Sequence

from skillpack.ingesters import build_ingesters, get_ingester
from skillpack.models import ExpandedFile, ExpandFilesReport
from skillpack.protocols import Ingester, NamedBlob
from skillpack.utils.content_type import guess_content_type
from skillpack.utils.extensions import TEXT_FILE_EXTENSIONS
from skillpack.utils.paths import is_mac_junk_path, normalize_path

logger = logging.getLogger(__name__)


def get_file_path(blob: NamedBlob) -> str:
    """Resolve the path of a loose file: its relative path, else its name."""
    raw_path = blob.relative_path if blob.relative_path.strip() else blob.name
    return normalize_path(raw_path)


async def expand_files_with_report(
    selected: Iterable[NamedBlob],
    *,
    text_extensions: AbstractSet[str] = TEXT_FILE_EXTENSIONS,
    ingesters: Optional[Sequence[Ingester]] = None,
) -> ExpandFilesReport:
    """Expand archives and pass loose files through, in input order.

    ZIP, .tar.gz/.tgz and .gz inputs are decoded by their ingester. Any other
    input is a loose file: it is only normalized and junk-filtered, never
    subjected to the text allow-list.

    Args:
        selected: Files chosen or dropped by the user
        text_extensions: Allow-list for archive entries and MIME fallback
        ingesters: Format handlers to use instead of the registry

    Returns:
        Combined report for every input

    Raises:
        zipfile.BadZipFile, gzip.BadGzipFile, EOFError, zlib.error:
            If an archive cannot be decompressed
    """
    if ingesters is None and text_extensions is not TEXT_FILE_EXTENSIONS:
        ingesters = build_ingesters(text_extensions)

    report = ExpandFilesReport()
    for blob in selected:
        ingester = get_ingester(blob.name, ingesters)
        if ingester is not None:
            logger.debug(f"Expanding {blob.name} as {ingester.source_type}")
            report.extend(ingester.ingest(blob.name, await blob.read()))
            continue

        path = get_file_path(blob)
        if is_mac_junk_path(path):
            report.ignored_mac_junk_paths.append(path)
            continue

        report.files.append(
            ExpandedFile(
                path=path,
                content=await blob.read(),
                mime_type=blob.content_type
                or guess_content_type(path, text_extensions),
            )
        )

    return report


async def expand_files(
    selected: Iterable[NamedBlob], **kwargs
) -> list[ExpandedFile]:
    """Like expand_files_with_report, but return only the files."""
    report = await expand_files_with_report(selected, **kwargs)
    return report.files

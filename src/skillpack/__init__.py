"""SkillPack - expand uploaded file bundles into flat, importable files."""

from skillpack.expander import expand_files, expand_files_with_report
from skillpack.collector import expand_dropped_items
from skillpack.models import ExpandedFile, ExpandFilesReport, RawEntry

__all__ = [
    "expand_files",
    "expand_files_with_report",
    "expand_dropped_items",
    "ExpandedFile",
    "ExpandFilesReport",
    "RawEntry",
]

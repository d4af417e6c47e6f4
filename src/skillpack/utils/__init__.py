"""Utility functions for SkillPack."""

from skillpack.utils.content_type import guess_content_type
from skillpack.utils.extensions import TEXT_FILE_EXTENSIONS, get_extension
from skillpack.utils.formatting import format_size
from skillpack.utils.paths import (
    is_mac_junk_path,
    is_text_path,
    normalize_path,
    unwrap_single_top_level_folder,
)

__all__ = [
    "TEXT_FILE_EXTENSIONS",
    "format_size",
    "get_extension",
    "guess_content_type",
    "is_mac_junk_path",
    "is_text_path",
    "normalize_path",
    "unwrap_single_top_level_folder",
]

"""Extension-based MIME type inference."""

from types import MappingProxyType
from typing import AbstractSet

from skillpack.utils.extensions import TEXT_FILE_EXTENSIONS, get_extension

DEFAULT_CONTENT_TYPE = "application/octet-stream"

TEXT_TYPES = MappingProxyType({
    "md": "text/markdown",
    "markdown": "text/markdown",
    "txt": "text/plain",
    "json": "application/json",
    "yaml": "text/yaml",
    "yml": "text/yaml",
    "toml": "text/plain",
    "js": "text/javascript",
    "ts": "text/plain",
    "tsx": "text/plain",
    "jsx": "text/plain",
    "css": "text/css",
    "html": "text/html",
    "svg": "image/svg+xml",
})


def guess_content_type(
    path: str, text_extensions: AbstractSet[str] = TEXT_FILE_EXTENSIONS
) -> str:
    """Guess a MIME type from the path's extension alone.

    Args:
        path: File path (only the final extension is used)
        text_extensions: Extensions treated as generic text/plain

    Returns:
        A MIME type string, application/octet-stream when unknown
    """
    extension = get_extension(path)
    if not extension:
        return DEFAULT_CONTENT_TYPE
    known = TEXT_TYPES.get(extension)
    if known:
        return known
    if extension in text_extensions:
        return "text/plain"
    return DEFAULT_CONTENT_TYPE

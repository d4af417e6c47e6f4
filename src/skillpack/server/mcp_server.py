"""FastMCP server implementation for SkillPack."""

from mcp.server.fastmcp import FastMCP

from skillpack.models import ExpandFilesReport
from skillpack.utils.formatting import format_size

TEXT_LIKE_TYPES = {"application/json", "image/svg+xml"}


def is_text_mime(mime_type: str) -> bool:
    return mime_type.startswith("text/") or mime_type in TEXT_LIKE_TYPES


def list_files(report: ExpandFilesReport, path: str = "") -> str:
    files = [f for f in report.files if f.path.startswith(path)]

    if not files:
        return f"No files found matching '{path}'"

    return "\n".join(
        f"{f.path:<60} {format_size(f.size_bytes):>10} {f.mime_type}" for f in files
    )


def read_file(report: ExpandFilesReport, path: str) -> str:
    # Duplicates are possible; the first match wins
    match = next((f for f in report.files if f.path == path), None)

    if match is None:
        return f"Error: File not found: {path}"

    if not is_text_mime(match.mime_type):
        return (
            f"[Binary file]\n"
            f"  Path: {match.path}\n"
            f"  Size: {match.size_bytes} bytes\n"
            f"  Type: {match.mime_type}"
        )

    return match.content.decode("utf-8", errors="replace")


def list_ignored(report: ExpandFilesReport) -> str:
    if not report.ignored_mac_junk_paths:
        return "No junk paths were ignored."
    return "\n".join(report.ignored_mac_junk_paths)


def create_mcp_server(report: ExpandFilesReport) -> FastMCP:
    """Create an MCP server over one expanded bundle.

    Design: 1 process = 1 bundle. The report is held in memory for the
    lifetime of the server.

    Args:
        report: Result of expanding the user's inputs

    Returns:
        Configured FastMCP server instance
    """
    mcp = FastMCP(
        name="skillpack",
    )

    @mcp.tool()
    def ls(path: str = "") -> str:
        """List files in the expanded bundle.

        Args:
            path: Optional path prefix to filter results (e.g., "docs/")

        Returns:
            Formatted list of files with size and MIME type
        """
        return list_files(report, path)

    @mcp.tool()
    def read(path: str) -> str:
        """Read a file's content from the expanded bundle.

        Args:
            path: Full path to the file (as shown in ls output)

        Returns:
            File content for text files, or metadata for binary files
        """
        return read_file(report, path)

    @mcp.tool()
    def ignored() -> str:
        """List operating-system junk paths that were left out of the bundle."""
        return list_ignored(report)

    return mcp

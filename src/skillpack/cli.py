"""CLI entry point for SkillPack."""

import argparse
import asyncio
import json
import logging
import sys
import zipfile
import zlib
from pathlib import Path

from skillpack.collector import expand_dropped_items
from skillpack.expander import expand_files_with_report
from skillpack.models import ExpandFilesReport
from skillpack.protocols import NamedBlob
from skillpack.sources import EntryItem, LocalEntry, LocalFile
from skillpack.utils.formatting import format_size

logger = logging.getLogger(__name__)

# Errors raised by the decoders on corrupt archives
DECODE_ERRORS = (zipfile.BadZipFile, OSError, EOFError, zlib.error)


async def gather_inputs(sources: list[str]) -> list[NamedBlob]:
    """Turn command-line paths into blobs, walking directories like a drop.

    Args:
        sources: File or directory paths

    Returns:
        Blobs in argument order
    """
    blobs: list[NamedBlob] = []
    for source in sources:
        source_path = Path(source)
        if source_path.is_dir():
            blobs.extend(await expand_dropped_items([EntryItem(LocalEntry(source_path))]))
        else:
            blobs.append(LocalFile(source_path))
    return blobs


def load_report(sources: list[str]) -> ExpandFilesReport:
    """Expand the inputs, exiting with an error on a missing input or corrupt archive."""
    for source in sources:
        if not Path(source).exists():
            logger.error(f"Input not found: {source}")
            sys.exit(1)

    async def _expand() -> ExpandFilesReport:
        return await expand_files_with_report(await gather_inputs(sources))

    try:
        return asyncio.run(_expand())
    except DECODE_ERRORS as exc:
        logger.error(f"Cannot expand inputs: {exc}")
        sys.exit(1)


def report_to_dict(report: ExpandFilesReport) -> dict:
    return {
        "files": [
            {"path": f.path, "size_bytes": f.size_bytes, "mime_type": f.mime_type}
            for f in report.files
        ],
        "ignored_mac_junk_paths": list(report.ignored_mac_junk_paths),
    }


def expand(sources: list[str], as_json: bool = False) -> None:
    """Print what the inputs expand to.

    Args:
        sources: File or directory paths
        as_json: Print a JSON document instead of a listing
    """
    report = load_report(sources)

    if as_json:
        print(json.dumps(report_to_dict(report), indent=2))
        return

    for f in report.files:
        print(f"{f.path:<60} {format_size(f.size_bytes):>10} {f.mime_type}")
    if report.ignored_mac_junk_paths:
        print()
        print("Ignored junk:")
        for path in report.ignored_mac_junk_paths:
            print(f"  {path}")
    print()
    print(
        f"Expanded {len(report.files)} files, "
        f"ignored {len(report.ignored_mac_junk_paths)} junk paths"
    )


def safe_target(output_dir: Path, path: str) -> Path | None:
    """Resolve where an expanded path lands under output_dir, or None."""
    parts = [part for part in path.split("/") if part]
    if not parts or any(part in (".", "..") for part in parts):
        return None
    return output_dir.joinpath(*parts)


def extract(sources: list[str], output: str) -> None:
    """Write the expanded files under an output directory.

    Args:
        sources: File or directory paths
        output: Destination directory
    """
    output_dir = Path(output)
    report = load_report(sources)

    written = 0
    for f in report.files:
        target = safe_target(output_dir, f.path)
        if target is None:
            logger.warning(f"  skipped unsafe path: {f.path!r}")
            continue
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_bytes(f.content)
        written += 1
        logger.info(f"  {f.path}")

    logger.info(f"")
    logger.info(f"Extracted {written} files -> {output_dir}")


def serve(sources: list[str], transport: str = "stdio") -> None:
    """Expand the inputs and serve them over MCP.

    Args:
        sources: File or directory paths
        transport: Transport protocol (stdio or sse)
    """
    report = load_report(sources)

    # Import here to avoid loading MCP unless needed
    from skillpack.server import create_mcp_server

    from typing import cast, Literal

    logger.info(f"Serving {len(report.files)} files via {transport}")
    mcp = create_mcp_server(report)
    mcp.run(transport=cast(Literal["stdio", "sse", "streamable-http"], transport))


def main(argv: list[str] | None = None) -> None:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        prog="skillpack",
        description="SkillPack - expand uploaded bundles into importable files",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Show debug logging",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    # expand command
    expand_parser = subparsers.add_parser(
        "expand",
        help="List the files that inputs expand to",
    )
    expand_parser.add_argument("sources", nargs="+", help="Input files, archives or folders")
    expand_parser.add_argument(
        "--json",
        action="store_true",
        help="Print the report as JSON",
    )

    # extract command
    extract_parser = subparsers.add_parser(
        "extract",
        help="Write expanded files to a directory",
    )
    extract_parser.add_argument("sources", nargs="+", help="Input files, archives or folders")
    extract_parser.add_argument(
        "-o",
        "--output",
        default="expanded",
        help="Output directory (default: expanded)",
    )

    # serve command
    serve_parser = subparsers.add_parser(
        "serve",
        help="Start MCP server over the expanded inputs",
    )
    serve_parser.add_argument("sources", nargs="+", help="Input files, archives or folders")
    serve_parser.add_argument(
        "--transport",
        choices=["stdio", "sse"],
        default="stdio",
        help="Transport protocol (default: stdio)",
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(message)s",
    )

    if args.command == "expand":
        expand(args.sources, args.json)
    elif args.command == "extract":
        extract(args.sources, args.output)
    elif args.command == "serve":
        serve(args.sources, args.transport)


if __name__ == "__main__":
    main()

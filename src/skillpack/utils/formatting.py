"""Human-readable formatting helpers."""


def format_size(size: int) -> str:
    """Format a byte count for listings."""
    if size < 1024:
        return f"{size} B"
    if size < 1024 * 1024:
        return f"{size / 1024:.1f} KB"
    return f"{size / (1024 * 1024):.1f} MB"

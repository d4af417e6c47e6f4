"""Protocols for whole-buffer archive decoders."""

from typing import Protocol, runtime_checkable


@runtime_checkable
class ZipDecoder(Protocol):
    """Decode a complete ZIP archive held in memory.

    Raises on malformed archives; callers do not catch.
    """

    def decode(self, data: bytes) -> dict[str, bytes]:
        """Return a mapping of entry path to entry bytes."""
        ...


@runtime_checkable
class GzipDecoder(Protocol):
    """Decompress a complete GZIP stream held in memory."""

    def decode(self, data: bytes) -> bytes:
        ...

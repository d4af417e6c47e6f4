"""GZIP decompression backed by the gzip module."""

import gzip


class StdlibGzipDecoder:
    """Decompress an in-memory GZIP stream.

    Raises gzip.BadGzipFile, EOFError or zlib.error on malformed input.
    """

    def decode(self, data: bytes) -> bytes:
        return gzip.decompress(data)

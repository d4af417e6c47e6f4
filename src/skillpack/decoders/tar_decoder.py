"""Minimal POSIX TAR reader for decompressed tarballs."""

import logging

from skillpack.models import RawEntry

logger = logging.getLogger(__name__)


class TarDecoder:
    """Parse TAR blocks from an in-memory buffer.

    Only regular files and directories are told apart. Symlinks, hard
    links, GNU long names and PAX headers are emitted as ordinary files.
    Truncated input ends the archive quietly instead of raising.
    """

    BLOCK_SIZE = 512
    NAME_FIELD = slice(0, 100)
    SIZE_FIELD = slice(124, 136)
    TYPEFLAG_OFFSET = 156
    DIRECTORY_TYPE = ord("5")

    def decode(self, data: bytes) -> list[RawEntry]:
        """Split a TAR buffer into entries.

        Args:
            data: Uncompressed TAR bytes

        Returns:
            RawEntry objects for every named, non-directory member
        """
        entries: list[RawEntry] = []
        view = memoryview(data)
        offset = 0

        while offset + self.BLOCK_SIZE <= len(data):
            header = data[offset : offset + self.BLOCK_SIZE]
            if not any(header):
                logger.debug(f"End-of-archive block at offset {offset}")
                break

            name = self._read_string(header[self.NAME_FIELD])
            size = self._read_octal(header[self.SIZE_FIELD])
            if size is None:
                logger.debug(f"Unreadable size field at offset {offset}, stopping")
                break
            typeflag = header[self.TYPEFLAG_OFFSET]

            offset += self.BLOCK_SIZE
            content = bytes(view[offset : offset + size])
            # Data is padded to a whole number of blocks
            offset += -(-size // self.BLOCK_SIZE) * self.BLOCK_SIZE

            if not name or typeflag == self.DIRECTORY_TYPE:
                continue
            entries.append(RawEntry(path=name, data=content))
        else:
            if offset < len(data):
                logger.debug(
                    f"Ignoring {len(data) - offset} trailing bytes after offset {offset}"
                )

        return entries

    @staticmethod
    def _read_string(field: bytes) -> str:
        """Decode a NUL-terminated header field."""
        end = field.find(b"\x00")
        if end != -1:
            field = field[:end]
        return field.decode("utf-8", errors="replace").strip()

    @classmethod
    def _read_octal(cls, field: bytes) -> int | None:
        """Parse an ASCII octal number field; empty means zero."""
        raw = cls._read_string(field)
        if not raw:
            return 0
        try:
            size = int(raw, 8)
        except ValueError:
            return None
        return size if size >= 0 else None

"""ZIP decoding backed by the zipfile module."""

import io
import zipfile


class StdlibZipDecoder:
    """Decode an in-memory ZIP archive into a path -> bytes mapping."""

    def decode(self, data: bytes) -> dict[str, bytes]:
        """Read every file entry of the archive.

        Args:
            data: Complete ZIP archive bytes

        Returns:
            Mapping of entry name to content, in central directory order

        Raises:
            zipfile.BadZipFile: If the archive is malformed, uses an
                unsupported compression method or holds encrypted entries
        """
        entries: dict[str, bytes] = {}
        with zipfile.ZipFile(io.BytesIO(data), "r") as zf:
            for info in zf.infolist():
                # Skip directories
                if info.is_dir():
                    continue
                try:
                    entries[info.filename] = zf.read(info)
                except (NotImplementedError, RuntimeError) as exc:
                    raise zipfile.BadZipFile(f"{info.filename}: {exc}") from exc
        return entries

"""Builders for in-memory archives used across the tests."""

import gzip
import io
import tarfile
import zipfile


def make_zip(entries: dict[str, bytes]) -> bytes:
    buffer = io.BytesIO()
    with zipfile.ZipFile(buffer, "w") as zf:
        for name, data in entries.items():
            zf.writestr(name, data)
    return buffer.getvalue()


def make_tar(entries: dict[str, bytes], directories: tuple[str, ...] = ()) -> bytes:
    buffer = io.BytesIO()
    with tarfile.open(fileobj=buffer, mode="w", format=tarfile.USTAR_FORMAT) as tf:
        for name in directories:
            info = tarfile.TarInfo(name)
            info.type = tarfile.DIRTYPE
            tf.addfile(info)
        for name, data in entries.items():
            info = tarfile.TarInfo(name)
            info.size = len(data)
            tf.addfile(info, io.BytesIO(data))
    return buffer.getvalue()


def make_tar_gz(entries: dict[str, bytes], directories: tuple[str, ...] = ()) -> bytes:
    return gzip.compress(make_tar(entries, directories))


def tar_header(name: str, size: int, typeflag: bytes = b"0") -> bytes:
    """Hand-pack a 512-byte header carrying only the fields the decoder reads."""
    header = bytearray(512)
    encoded = name.encode("utf-8")
    header[0 : len(encoded)] = encoded
    header[124:136] = f"{size:011o}\x00".encode("ascii")
    header[156:157] = typeflag
    return bytes(header)


def tar_member(name: str, data: bytes, typeflag: bytes = b"0") -> bytes:
    padding = -len(data) % 512
    return tar_header(name, len(data), typeflag) + data + b"\x00" * padding


def with_compression_method(data: bytes, method: int) -> bytes:
    """Rewrite the compression method of every local and central header."""
    patched = bytearray(data)
    field = method.to_bytes(2, "little")
    for signature, offset in ((b"PK\x03\x04", 8), (b"PK\x01\x02", 10)):
        start = patched.find(signature)
        while start != -1:
            patched[start + offset : start + offset + 2] = field
            start = patched.find(signature, start + 4)
    return bytes(patched)

"""Whole-buffer archive decoders."""

from skillpack.decoders.gzip_decoder import StdlibGzipDecoder
from skillpack.decoders.tar_decoder import TarDecoder
from skillpack.decoders.zip_decoder import StdlibZipDecoder

__all__ = ["StdlibGzipDecoder", "StdlibZipDecoder", "TarDecoder"]

"""Archive format handlers (ingesters) for SkillPack."""

from typing import AbstractSet, Optional, Sequence

from skillpack.ingesters.gzip_ingester import GzipIngester
from skillpack.ingesters.tar_ingester import TarGzipIngester
from skillpack.ingesters.zip_ingester import ZipIngester
from skillpack.protocols import Ingester
from skillpack.utils.extensions import TEXT_FILE_EXTENSIONS


def build_ingesters(
    text_extensions: AbstractSet[str] = TEXT_FILE_EXTENSIONS,
) -> list[Ingester]:
    """Create the ingester list with a given text allow-list.

    Registered custom ingesters follow the built-ins. Order matters:
    .tar.gz must be tried before plain .gz.
    """
    return [
        ZipIngester(text_extensions=text_extensions),
        TarGzipIngester(text_extensions=text_extensions),
        GzipIngester(text_extensions=text_extensions),
        *_REGISTERED,
    ]


# Custom ingesters added through register_ingester
_REGISTERED: list[Ingester] = []

# Registry of available ingesters
_INGESTERS: list[Ingester] = build_ingesters()


def get_ingester(
    name: str, ingesters: Optional[Sequence[Ingester]] = None
) -> Optional[Ingester]:
    """Find an ingester that can handle an input with the given name.

    Args:
        name: File name of the input (only its suffix matters)
        ingesters: Candidates to try instead of the registry

    Returns:
        An Ingester instance that can handle the input, or None for loose files
    """
    for ingester in _INGESTERS if ingesters is None else ingesters:
        if ingester.can_handle(name):
            return ingester
    return None


def register_ingester(ingester: Ingester) -> None:
    """Register a custom ingester (for plugins/extensions).

    Built-in ingesters are tried first, so a custom one only sees names
    they do not claim.

    Args:
        ingester: An object implementing the Ingester protocol
    """
    _REGISTERED.append(ingester)
    _INGESTERS.append(ingester)


__all__ = [
    "build_ingesters",
    "get_ingester",
    "register_ingester",
    "ZipIngester",
    "TarGzipIngester",
    "GzipIngester",
]

"""
Download metadata for the distributable Sudachi dictionaries.

SudachiDict is published in three sizes. The functions here only build
URLs and descriptions; nothing is downloaded.

Example:
    >>> get_dictionary_download_url(DictionarySize.FULL, "20241021")
    'https://d2ej7fkh96fzlu.cloudfront.net/sudachidict/sudachi-dictionary-20241021-full.zip'
    >>> get_dictionary_info("core").dic_filename
    'system_core.dic'
"""

from enum import Enum
from typing import List, Optional, Union

from .exceptions import InvalidArgument
from .results import DictionaryInfo

DICTIONARY_BASE_URL = "https://d2ej7fkh96fzlu.cloudfront.net/sudachidict"

LATEST_VERSION = "latest"


class DictionarySize(Enum):
    """Size variant of a Sudachi dictionary. The value is its name token."""

    SMALL = "small"
    CORE = "core"
    FULL = "full"

    @classmethod
    def parse(cls, value: Union["DictionarySize", str]) -> "DictionarySize":
        """
        Coerce a size or size name into a DictionarySize.

        Raises:
            InvalidArgument: If the value names no dictionary size.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass
        raise InvalidArgument(f"unknown dictionary size: {value!r}")


# (approximate size in MB, description)
_DICTIONARY_DETAILS = {
    DictionarySize.SMALL: (50, "Minimum vocabulary dictionary"),
    DictionarySize.CORE: (70, "Basic vocabulary dictionary (recommended)"),
    DictionarySize.FULL: (1000, "Complete vocabulary dictionary"),
}


def get_dictionary_download_url(
    size: Union[DictionarySize, str], version: Optional[str] = None
) -> str:
    """
    Get the download URL of a dictionary archive.

    Args:
        size: Dictionary size (small, core, full).
        version: Release version such as "20241021". Defaults to "latest".

    Returns:
        str: URL of the zip archive.
    """
    size = DictionarySize.parse(size)
    version = version if version is not None else LATEST_VERSION
    return f"{DICTIONARY_BASE_URL}/sudachi-dictionary-{version}-{size.value}.zip"


def get_dictionary_info(
    size: Union[DictionarySize, str], version: Optional[str] = None
) -> DictionaryInfo:
    """
    Get metadata about one dictionary size.

    Args:
        size: Dictionary size (small, core, full).
        version: Release version used for the download URL.

    Returns:
        DictionaryInfo: Name, approximate size, description, download URL
        and the .dic filename inside the archive.
    """
    size = DictionarySize.parse(size)
    size_mb, description = _DICTIONARY_DETAILS[size]
    return DictionaryInfo(
        name=size.value,
        size_mb=size_mb,
        description=description,
        download_url=get_dictionary_download_url(size, version),
        dic_filename=f"system_{size.value}.dic",
    )


def get_all_dictionary_info(version: Optional[str] = None) -> List[DictionaryInfo]:
    """Get metadata for every dictionary size, ordered small, core, full."""
    return [get_dictionary_info(size, version) for size in DictionarySize]


__all__ = [
    "DICTIONARY_BASE_URL",
    "DictionarySize",
    "get_dictionary_download_url",
    "get_dictionary_info",
    "get_all_dictionary_info",
]

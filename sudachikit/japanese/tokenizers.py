"""
SudachiPy integration: segmentation modes, dictionary loading and
per-call analysis sessions.

SudachiPy does the actual work: it memory-maps the compiled dictionary,
builds the morpheme lattice and picks the lowest-cost path. This module
only adapts our configuration and mode types to SudachiPy's and converts
its failures into sudachikit exceptions.

A loaded ``sudachipy.Dictionary`` is treated as immutable and is shared by
every session created from it. Sessions (``sudachipy.Tokenizer``) keep
mutable internal buffers, so a new one is created for every call and never
shared.

Installation:
    pip install sudachipy sudachidict_core

Example:
    >>> from sudachikit.config import TokenizerConfig, resolve_config
    >>> from sudachikit.japanese.tokenizers import (
    ...     SegmentationMode, create_session, load_dictionary,
    ... )
    >>> handle = load_dictionary(resolve_config(TokenizerConfig("/path/to/system.dic")))
    >>> session = create_session(handle, SegmentationMode.A)
"""

import logging
from enum import Enum
from typing import Union

from sudachipy import dictionary as _sudachi_dictionary  # type: ignore
from sudachipy import tokenizer as _sudachi_tokenizer  # type: ignore

from ..config import AnalyzerConfig
from ..exceptions import DictionaryLoadError, InvalidArgument

logger = logging.getLogger(__name__)

SplitMode = _sudachi_tokenizer.Tokenizer.SplitMode


class SegmentationMode(Enum):
    """
    Tokenization granularity.

    SplitMode options:
      - A: Short unit, maximum segmentation (similar to UniDic short unit)
      - B: Middle unit, word-like segmentation
      - C: Long unit, minimal segmentation (named entities kept together)
    """

    A = "A"
    B = "B"
    C = "C"

    # Aliases
    SHORT = "A"
    MIDDLE = "B"
    LONG = "C"

    @classmethod
    def parse(cls, value: Union["SegmentationMode", str]) -> "SegmentationMode":
        """
        Coerce a mode or mode name into a SegmentationMode.

        Accepts a member, "A"/"B"/"C" or "short"/"middle"/"long" in any case.

        Raises:
            InvalidArgument: If the value names no mode.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            key = value.strip().upper()
            if key in cls.__members__:
                return cls.__members__[key]
        raise InvalidArgument(f"unknown segmentation mode: {value!r}")


_SPLIT_MODES = {
    SegmentationMode.A: SplitMode.A,
    SegmentationMode.B: SplitMode.B,
    SegmentationMode.C: SplitMode.C,
}


def to_split_mode(mode: Union[SegmentationMode, str]):
    """Return the SudachiPy SplitMode for a segmentation mode."""
    return _SPLIT_MODES[SegmentationMode.parse(mode)]


def from_split_mode(split_mode) -> SegmentationMode:
    """
    Return the segmentation mode for a SudachiPy SplitMode.

    Raises:
        InvalidArgument: If split_mode is not a SudachiPy SplitMode.
    """
    for mode, candidate in _SPLIT_MODES.items():
        if candidate == split_mode:
            return mode
    raise InvalidArgument(f"unknown SudachiPy split mode: {split_mode!r}")


def load_dictionary(config: AnalyzerConfig):
    """
    Load the system dictionary (and user dictionaries) described by config.

    Args:
        config: Resolved analyzer configuration.

    Returns:
        sudachipy.Dictionary: The loaded dictionary handle.

    Raises:
        DictionaryLoadError: If SudachiPy cannot open, map or parse any of
            the dictionaries. The SudachiPy message is kept verbatim.
    """
    logger.info(
        "Loading Sudachi dictionary %s (resources: %s)",
        config.dictionary_path,
        config.resource_path or "<sudachipy default>",
    )
    try:
        handle = _sudachi_dictionary.Dictionary(
            config_path=config.as_json(),
            resource_dir=config.resource_path,
            dict=config.dictionary_path,
        )
    except Exception as e:
        logger.warning("Failed to load dictionary %s: %s", config.dictionary_path, e)
        raise DictionaryLoadError(str(e)) from e
    return handle


def create_session(handle, mode: Union[SegmentationMode, str]):
    """
    Create a fresh SudachiPy tokenizer bound to handle and mode.

    SudachiPy 0.7 renamed Dictionary.create() to Dictionary.tokenizer();
    the older name is used only when the new one is missing. The returned
    session must not be shared between calls.
    """
    split_mode = to_split_mode(mode)
    if hasattr(handle, "tokenizer"):
        return handle.tokenizer(mode=split_mode)
    return handle.create(mode=split_mode)


def release_dictionary(handle) -> None:
    """Release the files and mappings held by a dictionary handle."""
    handle.close()


__all__ = [
    "SegmentationMode",
    "SplitMode",
    "to_split_mode",
    "from_split_mode",
    "load_dictionary",
    "create_session",
    "release_dictionary",
]

"""
SudachiPy-specific pieces of sudachikit.

Japanese text has no spaces between words and mixes hiragana, katakana
and kanji, so segmentation needs a dictionary-backed morphological
analyzer. This subpackage wraps SudachiPy for that.

Components:
    SegmentationMode: Granularity of segmentation (A, B, C)
    load_dictionary: Load a Sudachi dictionary from a resolved config
    create_session: Create a per-call SudachiPy tokenizer
    project_morphemes: Convert SudachiPy morphemes into Morpheme records
"""

from .projection import project_morphemes
from .tokenizers import (
    SegmentationMode,
    create_session,
    from_split_mode,
    load_dictionary,
    release_dictionary,
    to_split_mode,
)

__all__ = [
    "SegmentationMode",
    "to_split_mode",
    "from_split_mode",
    "load_dictionary",
    "create_session",
    "release_dictionary",
    "project_morphemes",
]

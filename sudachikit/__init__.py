"""
sudachikit: a small, stable facade over the SudachiPy Japanese
morphological analyzer.

sudachikit loads a compiled Sudachi dictionary, tokenizes text at a chosen
segmentation granularity and returns plain, serializable Morpheme records.
It also describes the downloadable SudachiDict archives.

Key Features:
    - Configuration from explicit paths, sudachi.json or SUDACHI_* variables
    - Thread-safe tokenization with one analysis session per call
    - Morpheme records with UTF-8 byte offsets and to_dict() serialization
    - Download URLs and metadata for the small, core and full dictionaries

Quick Start:
    >>> from sudachikit import Tokenizer, SegmentationMode
    >>>
    >>> tokenizer = Tokenizer.from_dictionary_path("/path/to/system_core.dic")
    >>> morphemes = tokenizer.tokenize("東京都に住んでいます", SegmentationMode.A)
    >>> print([m.surface for m in morphemes])
    ['東京', '都', 'に', '住ん', 'で', 'い', 'ます']

Dictionary Downloads:
    >>> from sudachikit import get_all_dictionary_info
    >>> for info in get_all_dictionary_info():
    ...     print(info.name, info.size_mb, info.download_url)

Installation Requirements:
    pip install sudachipy
    A system dictionary (.dic) is also needed, either from sudachidict_core
    or from an archive listed by get_all_dictionary_info().

Classes:
    Tokenizer: Loads a dictionary and tokenizes text.
    TokenizerConfig: Paths used to create a Tokenizer.
    SegmentationMode: Segmentation granularity (A, B, C).
    Morpheme: One tokenization result.
    DictionarySize: Dictionary size variant (small, core, full).
    DictionaryInfo: Download metadata for one dictionary.
"""

import logging

__version__ = "0.1.0"
__author__ = "Noyu Ritsuji"

logging.getLogger(__name__).addHandler(logging.NullHandler())

# Main tokenizer class and helpers
from .tokenizer import Tokenizer, tokenize_text, get_version

# Configuration
from .config import TokenizerConfig, AnalyzerConfig, resolve_config, has_required_resources

# Segmentation modes
from .japanese import SegmentationMode

# Result classes
from .results import Morpheme, DictionaryInfo

# Dictionary metadata
from .dictionaries import (
    DICTIONARY_BASE_URL,
    DictionarySize,
    get_dictionary_download_url,
    get_dictionary_info,
    get_all_dictionary_info,
)

# Exceptions
from .exceptions import (
    SudachiKitError,
    DictionaryLoadError,
    ConfigError,
    TokenizeError,
    InvalidArgument,
)

__all__ = [
    # Version info
    "__version__",
    "__author__",
    "get_version",
    # Tokenizer
    "Tokenizer",
    "tokenize_text",
    "SegmentationMode",
    # Configuration
    "TokenizerConfig",
    "AnalyzerConfig",
    "resolve_config",
    "has_required_resources",
    # Result classes
    "Morpheme",
    "DictionaryInfo",
    # Dictionary metadata
    "DICTIONARY_BASE_URL",
    "DictionarySize",
    "get_dictionary_download_url",
    "get_dictionary_info",
    "get_all_dictionary_info",
    # Exceptions
    "SudachiKitError",
    "DictionaryLoadError",
    "ConfigError",
    "TokenizeError",
    "InvalidArgument",
]

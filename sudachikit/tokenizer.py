"""
Japanese morphological analyzer facade over SudachiPy.

This module provides the Tokenizer class, which owns one loaded Sudachi
dictionary and turns text into lists of Morpheme records at a chosen
segmentation granularity.

Every tokenize call creates its own SudachiPy session from the shared
dictionary and discards it afterwards. Nothing is carried over between
calls, so one Tokenizer can be used from several threads without locking.

Example:
    >>> from sudachikit import Tokenizer, SegmentationMode
    >>>
    >>> tokenizer = Tokenizer.from_dictionary_path("/path/to/system_core.dic")
    >>> for m in tokenizer.tokenize("東京都に住んでいます", SegmentationMode.A):
    ...     print(m.surface, m.reading_form, m.pos)
    >>>
    >>> # Release the dictionary when done
    >>> tokenizer.close()
"""

import logging
from pathlib import Path
from typing import List, Mapping, Optional, Union

from .config import TokenizerConfig, resolve_config
from .exceptions import InvalidArgument, SudachiKitError, TokenizeError
from .japanese.projection import project_morphemes
from .japanese.tokenizers import (
    SegmentationMode,
    create_session,
    load_dictionary,
    release_dictionary,
)
from .results import Morpheme

logger = logging.getLogger(__name__)

DEFAULT_MODE = SegmentationMode.C


def get_version() -> str:
    """Return the sudachikit release version."""
    from . import __version__
    return __version__


def _check_text(text: str) -> None:
    if not isinstance(text, str):
        raise InvalidArgument(f"text must be a str, got {type(text).__name__}")
    try:
        text.encode("utf-8")
    except UnicodeEncodeError as e:
        raise InvalidArgument(f"text is not valid UTF-8: {e}") from e


class Tokenizer:
    """
    Japanese morphological analyzer powered by SudachiPy.

    A Tokenizer loads its dictionary once, on construction, and keeps it
    until close() is called or the object is discarded. Construction fails
    with a sudachikit exception and produces no object if the configuration
    cannot be resolved or the dictionary cannot be loaded.

    Attributes:
        dictionary_path: Path of the loaded system dictionary.
        resource_path: Resource directory handed to SudachiPy, if any.

    Example:
        >>> config = TokenizerConfig(
        ...     dictionary_path="/opt/sudachi/system_core.dic",
        ...     user_dictionary_path="/opt/sudachi/user.dic",
        ... )
        >>> with Tokenizer(config) as tokenizer:
        ...     morphemes = tokenizer.tokenize("医薬品安全管理責任者", "C")
    """

    def __init__(self, config: TokenizerConfig):
        """
        Create a tokenizer from a configuration.

        Args:
            config: Dictionary path plus optional settings file, resource
                directory and user dictionary.

        Raises:
            InvalidArgument: If the dictionary path is missing.
            ConfigError: If the settings file cannot be read or parsed.
            DictionaryLoadError: If SudachiPy cannot load a dictionary.
        """
        analyzer_config = resolve_config(config)
        self._dictionary = load_dictionary(analyzer_config)
        self.dictionary_path = analyzer_config.dictionary_path
        self.resource_path = analyzer_config.resource_path

    @classmethod
    def from_dictionary_path(
        cls,
        dictionary_path: Union[str, Path],
        user_dictionary_path: Optional[Union[str, Path]] = None,
    ) -> "Tokenizer":
        """
        Create a tokenizer with just a dictionary path (no settings file).

        Args:
            dictionary_path: Path to the system dictionary file (.dic).
            user_dictionary_path: Optional path to a user dictionary.

        Returns:
            Tokenizer: A tokenizer ready to use.
        """
        return cls(
            TokenizerConfig(
                dictionary_path=dictionary_path,
                user_dictionary_path=user_dictionary_path,
            )
        )

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Tokenizer":
        """
        Create a tokenizer from SUDACHI_DICT_PATH and the other
        SUDACHI_* environment variables.
        """
        return cls(TokenizerConfig.from_env(environ))

    @property
    def closed(self) -> bool:
        return self._dictionary is None

    def tokenize(
        self,
        text: str,
        mode: Union[SegmentationMode, str] = DEFAULT_MODE,
    ) -> List[Morpheme]:
        """
        Tokenize text and return morpheme information.

        Args:
            text: Text to analyze. An empty string gives an empty list.
            mode: Segmentation granularity (A, B or C).

        Returns:
            List[Morpheme]: Morphemes in input order, with UTF-8 byte
            offsets into text.

        Raises:
            InvalidArgument: If text is not a UTF-8 encodable str or mode
                is unknown.
            TokenizeError: If segmentation fails or the tokenizer is closed.
        """
        _check_text(text)
        mode = SegmentationMode.parse(mode)
        dictionary = self._dictionary
        if dictionary is None:
            raise TokenizeError("tokenizer is closed")

        if not text:
            return []

        logger.debug("Tokenizing %d characters in mode %s", len(text), mode.name)
        try:
            session = create_session(dictionary, mode)
            morphemes = session.tokenize(text)
            return project_morphemes(morphemes, text)
        except SudachiKitError:
            raise
        except Exception as e:
            logger.warning("Tokenization failed in mode %s: %s", mode.name, e)
            raise TokenizeError(str(e)) from e

    def split(
        self,
        text: str,
        mode: Union[SegmentationMode, str] = DEFAULT_MODE,
    ) -> List[str]:
        """
        Split text into surface strings.

        Example:
            >>> tokenizer.split("東京都に住んでいます", "A")
            ['東京', '都', 'に', '住ん', 'で', 'い', 'ます']
        """
        return [morpheme.surface for morpheme in self.tokenize(text, mode)]

    def version(self) -> str:
        """Get the sudachikit version."""
        return get_version()

    def close(self) -> None:
        """Release the dictionary. Further tokenize calls fail."""
        dictionary, self._dictionary = self._dictionary, None
        if dictionary is not None:
            release_dictionary(dictionary)

    def __enter__(self) -> "Tokenizer":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def __repr__(self) -> str:
        status = "closed" if self.closed else "open"
        return (
            f"Tokenizer("
            f"dictionary_path='{self.dictionary_path}', "
            f"status='{status}')"
        )


def tokenize_text(
    text: str,
    dictionary_path: Union[str, Path],
    mode: Union[SegmentationMode, str] = DEFAULT_MODE,
) -> List[Morpheme]:
    """
    Quick tokenization without keeping a Tokenizer around.

    The dictionary is loaded and released on every call, so this is much
    slower than reusing a Tokenizer for repeated tokenization.
    """
    with Tokenizer.from_dictionary_path(dictionary_path) as tokenizer:
        return tokenizer.tokenize(text, mode)


__all__ = ["Tokenizer", "tokenize_text", "get_version", "DEFAULT_MODE"]

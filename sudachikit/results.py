"""
Result classes for tokenization and dictionary metadata.

These records are plain values: they hold no reference to SudachiPy
objects and can be serialized with ``to_dict()`` for JSON APIs.

Classes:
    Morpheme: One recognized unit of text with its annotations.
    DictionaryInfo: Download metadata for a distributable dictionary.

Example:
    >>> morphemes = tokenizer.tokenize("東京都に住んでいます")
    >>> morphemes[0].surface
    '東京都'
    >>> morphemes[0].to_dict()["reading_form"]
    'トウキョウト'
"""

from dataclasses import dataclass, field
from typing import Dict, Tuple


@dataclass(frozen=True)
class Morpheme:
    """
    A single morpheme (token) produced by a tokenize call.

    Attributes:
        surface: Text exactly as it appeared in the input.
        part_of_speech: Hierarchical part-of-speech tags, outermost first
            (up to 6 levels).
        dictionary_form: Dictionary form (lemma).
        normalized_form: Normalized form.
        reading_form: Reading in katakana.
        is_oov: Whether the morpheme is out of vocabulary.
        word_id: Word id in the dictionary, -1 for OOV morphemes.
        begin: Start byte offset in the UTF-8 encoded input.
        end: End byte offset (exclusive) in the UTF-8 encoded input.
    """

    surface: str
    part_of_speech: Tuple[str, ...] = field(default_factory=tuple)
    dictionary_form: str = ""
    normalized_form: str = ""
    reading_form: str = ""
    is_oov: bool = False
    word_id: int = -1
    begin: int = 0
    end: int = 0

    @property
    def pos(self) -> str:
        """Part-of-speech tags joined with '/'."""
        return "/".join(self.part_of_speech)

    def to_dict(self) -> Dict:
        """
        Convert to a JSON-serializable dictionary.

        Returns:
            Dict: All morpheme fields, with part_of_speech as a list.
        """
        return {
            "surface": self.surface,
            "part_of_speech": list(self.part_of_speech),
            "dictionary_form": self.dictionary_form,
            "normalized_form": self.normalized_form,
            "reading_form": self.reading_form,
            "is_oov": self.is_oov,
            "word_id": self.word_id,
            "begin": self.begin,
            "end": self.end,
        }


@dataclass(frozen=True)
class DictionaryInfo:
    """
    Metadata describing one distributable Sudachi dictionary.

    Attributes:
        name: Size token ("small", "core" or "full").
        size_mb: Approximate size in megabytes.
        description: Human-readable description.
        download_url: URL of the zip archive.
        dic_filename: Name of the .dic file inside the archive.
    """

    name: str
    size_mb: int
    description: str
    download_url: str
    dic_filename: str

    def summary(self) -> str:
        return f"{self.name}: {self.size_mb}MB - {self.description}\n  URL: {self.download_url}"

    def to_dict(self) -> Dict:
        """Convert to a JSON-serializable dictionary."""
        return {
            "name": self.name,
            "size_mb": self.size_mb,
            "description": self.description,
            "download_url": self.download_url,
            "dic_filename": self.dic_filename,
        }


__all__ = ["Morpheme", "DictionaryInfo"]

"""
Conversion of SudachiPy morphemes into sudachikit Morpheme records.

The projection is a pure structural copy: order, surfaces and
part-of-speech tags are passed through unchanged. Two values are adjusted:

- Offsets: SudachiPy reports character offsets into the input string;
  records carry UTF-8 byte offsets instead.
- Word ids: OOV morphemes get -1. Other ids keep the word part only (the
  top 4 bits of a raw SudachiPy id hold the dictionary number) and must fit
  a signed 32-bit integer.

Example:
    >>> session = dictionary.create(mode=SplitMode.C)
    >>> project_morphemes(session.tokenize("東京都"), "東京都")
    [Morpheme(surface='東京都', ...)]
"""

from typing import Iterable, List

from ..exceptions import TokenizeError
from ..results import Morpheme

# Raw SudachiPy word ids are unsigned 32-bit values
UINT32_MAX = 2 ** 32 - 1

# Low 28 bits of a raw word id hold the word index
WORD_ID_MASK = 0x0FFFFFFF

OOV_WORD_ID = -1


def utf8_offsets(text: str) -> List[int]:
    """
    Map character offsets of text to UTF-8 byte offsets.

    Returns:
        List[int]: ``len(text) + 1`` entries; entry ``i`` is the byte offset
        of character ``i``, the last entry is the encoded length.
    """
    offsets = [0]
    total = 0
    for char in text:
        total += len(char.encode("utf-8"))
        offsets.append(total)
    return offsets


def coerce_word_id(raw_word_id: int, is_oov: bool) -> int:
    """
    Convert a SudachiPy word id into the signed id stored on records.

    The masked word index is at most 28 bits wide, so it always fits a
    signed 32-bit integer.

    Raises:
        TokenizeError: If the raw id is not an unsigned 32-bit value.
    """
    if is_oov:
        return OOV_WORD_ID
    raw_word_id = int(raw_word_id)
    if not 0 <= raw_word_id <= UINT32_MAX:
        raise TokenizeError(f"word id {raw_word_id} is outside the 32-bit range")
    return raw_word_id & WORD_ID_MASK


def project_morpheme(morpheme, offsets: List[int]) -> Morpheme:
    """Copy one SudachiPy morpheme into a Morpheme record."""
    is_oov = bool(morpheme.is_oov())
    return Morpheme(
        surface=morpheme.surface(),
        part_of_speech=tuple(morpheme.part_of_speech()),
        dictionary_form=morpheme.dictionary_form(),
        normalized_form=morpheme.normalized_form(),
        reading_form=morpheme.reading_form(),
        is_oov=is_oov,
        word_id=coerce_word_id(morpheme.word_id(), is_oov),
        begin=offsets[morpheme.begin()],
        end=offsets[morpheme.end()],
    )


def project_morphemes(morphemes: Iterable, text: str) -> List[Morpheme]:
    """
    Project a SudachiPy morpheme list in input order.

    Args:
        morphemes: SudachiPy MorphemeList (or any iterable of morphemes).
        text: The text the morphemes were produced from.

    Returns:
        List[Morpheme]: One record per morpheme, same order.
    """
    offsets = utf8_offsets(text)
    return [project_morpheme(morpheme, offsets) for morpheme in morphemes]


__all__ = [
    "utf8_offsets",
    "coerce_word_id",
    "project_morpheme",
    "project_morphemes",
    "OOV_WORD_ID",
]

"""
Pytest configuration and fixtures for sudachikit tests.
"""

import importlib.util
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest


class FakeMorpheme:
    """Stand-in for a sudachipy Morpheme; offsets are character offsets."""

    def __init__(self, surface, begin, pos=("名詞", "普通名詞", "一般", "*", "*", "*"),
                 reading=None, dictionary_form=None, normalized_form=None,
                 word_id=42, oov=False):
        self._surface = surface
        self._begin = begin
        self._pos = pos
        self._reading = reading if reading is not None else surface
        self._dictionary_form = dictionary_form or surface
        self._normalized_form = normalized_form or surface
        self._word_id = word_id
        self._oov = oov

    def surface(self):
        return self._surface

    def part_of_speech(self):
        return self._pos

    def dictionary_form(self):
        return self._dictionary_form

    def normalized_form(self):
        return self._normalized_form

    def reading_form(self):
        return self._reading

    def is_oov(self):
        return self._oov

    def word_id(self):
        return self._word_id

    def begin(self):
        return self._begin

    def end(self):
        return self._begin + len(self._surface)


def fake_morphemes(*surfaces, **kwargs):
    """Build consecutive FakeMorpheme objects covering the given surfaces."""
    morphemes = []
    begin = 0
    for surface in surfaces:
        morphemes.append(FakeMorpheme(surface, begin, **kwargs))
        begin += len(surface)
    return morphemes


@pytest.fixture
def sample_japanese_text():
    """Provide sample Japanese text for testing."""
    return "東京都に住んでいます"


@pytest.fixture
def mock_dictionary_cls():
    """
    Patch sudachipy's Dictionary class used by the loader.

    The patched class returns a MagicMock dictionary whose sessions split
    the sample text into fixed morphemes.
    """
    dictionary = MagicMock(name="Dictionary()")
    session = MagicMock(name="Tokenizer")
    session.tokenize.side_effect = lambda text: fake_morphemes(
        "東京都", "に", "住ん", "で", "い", "ます"
    ) if text == "東京都に住んでいます" else fake_morphemes(text)
    dictionary.tokenizer.return_value = session

    with patch("sudachikit.japanese.tokenizers._sudachi_dictionary.Dictionary",
               return_value=dictionary) as dictionary_cls:
        yield dictionary_cls


@pytest.fixture
def mock_tokenizer(mock_dictionary_cls):
    """Create a Tokenizer backed by the mocked sudachipy Dictionary."""
    from sudachikit import Tokenizer
    return Tokenizer.from_dictionary_path("/a/b/system_core.dic")


@pytest.fixture
def settings_file(tmp_path):
    """Write a sudachi.json settings file and return its path."""
    path = tmp_path / "conf" / "sudachi.json"
    path.parent.mkdir()
    path.write_text(
        '{"systemDict": "/elsewhere/system_full.dic", "userDict": ["a.dic"]}',
        encoding="utf-8",
    )
    return path


def _core_dictionary_path():
    if importlib.util.find_spec("sudachidict_core") is None:
        return None
    import sudachidict_core
    path = Path(sudachidict_core.__file__).parent / "resources" / "system.dic"
    return path if path.is_file() else None


@pytest.fixture(scope="session")
def core_dictionary_path():
    """Path to the sudachidict_core system dictionary, or skip."""
    path = _core_dictionary_path()
    if path is None:
        pytest.skip("sudachidict_core is not installed")
    return path


@pytest.fixture(scope="session")
def sudachipy_resource_dir():
    """Directory holding SudachiPy's bundled char.def and unk.def."""
    import sudachipy
    return Path(sudachipy.__file__).parent / "resources"


@pytest.fixture(scope="session")
def real_tokenizer(core_dictionary_path, sudachipy_resource_dir):
    """A Tokenizer loaded from the real sudachidict_core dictionary."""
    from sudachikit import Tokenizer, TokenizerConfig
    tokenizer = Tokenizer(TokenizerConfig(
        dictionary_path=core_dictionary_path,
        resource_path=sudachipy_resource_dir,
    ))
    yield tokenizer
    tokenizer.close()

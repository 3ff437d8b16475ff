"""
Test suite for the public surface of the sudachikit package.

This module tests:
- Package imports and version
- The exception hierarchy
- Dictionary download metadata
- Result records and their serialization

Run tests with: pytest tests/test_sudachikit.py -v
"""

import json

import pytest

BASE = "https://d2ej7fkh96fzlu.cloudfront.net/sudachidict"

# =============================================================================
# Test Imports
# =============================================================================

class TestImports:
    """Test that all modules can be imported correctly."""

    def test_import_main_package(self):
        """Test importing the main sudachikit package."""
        import sudachikit
        assert hasattr(sudachikit, '__version__')
        assert hasattr(sudachikit, 'Tokenizer')

    def test_import_exceptions(self):
        """Test importing custom exceptions."""
        from sudachikit import (
            SudachiKitError,
            DictionaryLoadError,
            ConfigError,
            TokenizeError,
            InvalidArgument,
        )
        for exc in (DictionaryLoadError, ConfigError, TokenizeError, InvalidArgument):
            assert issubclass(exc, SudachiKitError)

    def test_import_metadata_functions(self):
        """Test importing dictionary metadata functions."""
        from sudachikit import (
            get_dictionary_download_url,
            get_dictionary_info,
            get_all_dictionary_info,
        )
        assert callable(get_dictionary_download_url)
        assert callable(get_dictionary_info)
        assert callable(get_all_dictionary_info)

    def test_version_is_non_empty(self):
        """Test that get_version returns the package version."""
        import sudachikit
        assert sudachikit.get_version() == sudachikit.__version__
        assert sudachikit.get_version()


# =============================================================================
# Test Exceptions
# =============================================================================

class TestExceptions:
    """Test the error taxonomy."""

    @pytest.mark.parametrize("exc_name,prefix", [
        ("DictionaryLoadError", "Failed to load dictionary"),
        ("ConfigError", "Failed to load config"),
        ("TokenizeError", "Tokenization failed"),
        ("InvalidArgument", "Invalid argument"),
    ])
    def test_message_is_kept_verbatim(self, exc_name, prefix):
        """Test that the message attribute holds the original text."""
        import sudachikit
        exc = getattr(sudachikit, exc_name)("No such file: /x.dic")
        assert exc.message == "No such file: /x.dic"
        assert str(exc) == f"{prefix}: No such file: /x.dic"

    def test_kinds_are_distinct(self):
        """Test that the four kinds do not inherit from one another."""
        from sudachikit import DictionaryLoadError, ConfigError, TokenizeError, InvalidArgument
        kinds = [DictionaryLoadError, ConfigError, TokenizeError, InvalidArgument]
        for kind in kinds:
            others = [k for k in kinds if k is not kind]
            assert not any(issubclass(kind, other) for other in others)

    def test_repr(self):
        """Test the exception repr names the kind."""
        from sudachikit import TokenizeError
        assert repr(TokenizeError("boom")) == "TokenizeError(message='boom')"


# =============================================================================
# Test Dictionary Metadata
# =============================================================================

class TestDictionaryMetadata:
    """Test download URLs and dictionary info."""

    def test_base_url(self):
        """Test the base URL constant."""
        from sudachikit import DICTIONARY_BASE_URL
        assert DICTIONARY_BASE_URL == BASE

    def test_download_url_latest(self):
        """Test that a missing version means 'latest'."""
        from sudachikit import DictionarySize, get_dictionary_download_url
        url = get_dictionary_download_url(DictionarySize.CORE)
        assert url == f"{BASE}/sudachi-dictionary-latest-core.zip"

    def test_download_url_versioned(self):
        """Test a versioned download URL."""
        from sudachikit import DictionarySize, get_dictionary_download_url
        url = get_dictionary_download_url(DictionarySize.FULL, "20241021")
        assert url == f"{BASE}/sudachi-dictionary-20241021-full.zip"

    @pytest.mark.parametrize("version", [None, "20240409", "latest"])
    @pytest.mark.parametrize("token", ["small", "core", "full"])
    def test_download_url_pattern(self, token, version):
        """Test the URL pattern for every size."""
        from sudachikit import DictionarySize, get_dictionary_download_url
        url = get_dictionary_download_url(DictionarySize(token), version)
        assert url == f"{BASE}/sudachi-dictionary-{version or 'latest'}-{token}.zip"

    def test_core_info(self):
        """Test metadata for the core dictionary."""
        from sudachikit import DictionarySize, get_dictionary_info
        info = get_dictionary_info(DictionarySize.CORE)
        assert info.name == "core"
        assert info.size_mb == 70
        assert info.description == "Basic vocabulary dictionary (recommended)"
        assert info.dic_filename == "system_core.dic"
        assert info.download_url == f"{BASE}/sudachi-dictionary-latest-core.zip"

    def test_small_and_full_info(self):
        """Test sizes and descriptions of the other dictionaries."""
        from sudachikit import DictionarySize, get_dictionary_info
        small = get_dictionary_info(DictionarySize.SMALL)
        full = get_dictionary_info(DictionarySize.FULL)
        assert (small.size_mb, small.description) == (50, "Minimum vocabulary dictionary")
        assert (full.size_mb, full.description) == (1000, "Complete vocabulary dictionary")
        assert full.dic_filename == "system_full.dic"

    def test_all_info_order(self):
        """Test that all info is returned in small, core, full order."""
        from sudachikit import DictionarySize, get_all_dictionary_info, get_dictionary_info
        all_info = get_all_dictionary_info("20241021")
        assert [info.name for info in all_info] == ["small", "core", "full"]
        for info, size in zip(all_info, DictionarySize):
            assert info == get_dictionary_info(size, "20241021")

    def test_size_accepts_strings(self):
        """Test that size names are accepted in any case."""
        from sudachikit import get_dictionary_info
        assert get_dictionary_info("Small").name == "small"
        assert get_dictionary_info(" FULL ").name == "full"

    def test_unknown_size(self):
        """Test that an unknown size raises InvalidArgument."""
        from sudachikit import InvalidArgument, get_dictionary_download_url
        with pytest.raises(InvalidArgument, match="huge"):
            get_dictionary_download_url("huge")

    def test_info_to_dict(self):
        """Test that DictionaryInfo serializes to JSON."""
        from sudachikit import get_dictionary_info
        data = get_dictionary_info("core").to_dict()
        assert json.loads(json.dumps(data)) == {
            "name": "core",
            "size_mb": 70,
            "description": "Basic vocabulary dictionary (recommended)",
            "download_url": f"{BASE}/sudachi-dictionary-latest-core.zip",
            "dic_filename": "system_core.dic",
        }

    def test_info_summary(self):
        """Test the human-readable summary line."""
        from sudachikit import get_dictionary_info
        summary = get_dictionary_info("small").summary()
        assert summary.startswith("small: 50MB")
        assert "sudachi-dictionary-latest-small.zip" in summary


# =============================================================================
# Test Morpheme Records
# =============================================================================

class TestMorpheme:
    """Test the Morpheme result record."""

    def test_to_dict(self):
        """Test that a Morpheme serializes to JSON."""
        from sudachikit import Morpheme
        m = Morpheme(
            surface="東京",
            part_of_speech=("名詞", "固有名詞", "地名", "一般", "*", "*"),
            dictionary_form="東京",
            normalized_form="東京",
            reading_form="トウキョウ",
            is_oov=False,
            word_id=123,
            begin=0,
            end=6,
        )
        data = json.loads(json.dumps(m.to_dict(), ensure_ascii=False))
        assert data["part_of_speech"] == ["名詞", "固有名詞", "地名", "一般", "*", "*"]
        assert data["reading_form"] == "トウキョウ"
        assert data["end"] == 6

    def test_pos_string(self):
        """Test that pos joins tags with '/'."""
        from sudachikit import Morpheme
        m = Morpheme(surface="に", part_of_speech=("助詞", "格助詞"))
        assert m.pos == "助詞/格助詞"

    def test_is_immutable(self):
        """Test that Morpheme records cannot be modified."""
        from dataclasses import FrozenInstanceError
        from sudachikit import Morpheme
        m = Morpheme(surface="に")
        with pytest.raises(FrozenInstanceError):
            m.surface = "を"

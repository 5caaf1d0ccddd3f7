"""Tests for the corpus store."""

import gzip

import pytest

from wordpool.corpus import (
    CorpusIntegrityError,
    CorpusStore,
    asset_path,
    decompress_corpus,
    read_asset,
)
from wordpool.lang import Lang


class TestDecompressCorpus:
    """Tests for decompress_corpus."""

    def test_roundtrip(self):
        """Test gzip text decompresses to the original string."""
        data = gzip.compress("ähnlich\nÖl\n".encode("utf-8"))
        assert decompress_corpus(data, Lang.DE) == "ähnlich\nÖl\n"

    def test_corrupt_bytes(self):
        """Test garbage input is a fatal integrity error naming the language."""
        with pytest.raises(CorpusIntegrityError, match=r"\[fr\] Decompression failed"):
            decompress_corpus(b"not gzip at all", Lang.FR, source="fr.txt.gz")

    def test_truncated_stream(self):
        """Test a truncated archive is rejected."""
        data = gzip.compress(b"cat\ncar\ndog\n" * 100)
        with pytest.raises(CorpusIntegrityError):
            decompress_corpus(data[: len(data) // 2], Lang.EN)

    def test_invalid_utf8(self):
        """Test non-UTF-8 payloads are rejected."""
        data = gzip.compress(b"caf\xe9\n")
        with pytest.raises(CorpusIntegrityError, match="invalid UTF-8"):
            decompress_corpus(data, Lang.FR)

    def test_integrity_error_is_runtime_error(self):
        """Test the fatal error type is not a ValueError."""
        assert issubclass(CorpusIntegrityError, RuntimeError)
        assert not issubclass(CorpusIntegrityError, ValueError)


class TestCorpusStore:
    """Tests for CorpusStore."""

    def test_decompresses_once(self):
        """Test repeated access reuses the cached text."""
        reads = []

        def reader(lang):
            reads.append(lang)
            return gzip.compress(b"one\ntwo\n")

        store = CorpusStore(asset_reader=reader)
        first = store.get_corpus(Lang.EN)
        second = store.get_corpus(Lang.EN)

        assert first == "one\ntwo\n"
        assert first is second
        assert reads == [Lang.EN]
        assert store.is_loaded(Lang.EN)
        assert not store.is_loaded(Lang.DE)

    def test_rejects_non_lang(self):
        """Test plain strings are not accepted as languages."""
        store = CorpusStore(asset_reader=lambda lang: b"")
        with pytest.raises(TypeError):
            store.get_corpus("en")

    def test_corrupt_asset_is_fatal(self):
        """Test a corrupt asset raises on every access and is never cached."""
        store = CorpusStore(asset_reader=lambda lang: b"\x1f\x8b broken")
        for _ in range(2):
            with pytest.raises(CorpusIntegrityError):
                store.get_corpus(Lang.ES)
        assert not store.is_loaded(Lang.ES)


class TestPackagedAssets:
    """Tests for the shipped compressed word lists."""

    @pytest.mark.parametrize("lang", list(Lang))
    def test_asset_exists(self, lang):
        """Test every language ships an asset."""
        assert asset_path(lang).is_file()

    @pytest.mark.parametrize("lang", list(Lang))
    def test_asset_decompresses(self, lang):
        """Test every asset decompresses to newline-terminated text."""
        text = decompress_corpus(read_asset(lang), lang)
        assert text
        assert text.endswith("\n")
        assert "\n\n" not in text

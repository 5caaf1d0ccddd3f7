"""Corpus store: decompress each embedded word list exactly once.

The word lists ship inside the package as gzip files under ``data/``.
The first request for a language reads and decompresses its asset and
decodes it as UTF-8; the resulting text is cached for the lifetime of the
process.

A corrupt asset is a packaging defect, not a user error, so every failure
here raises ``CorpusIntegrityError``, which library code never catches.
"""

import gzip
import logging
import zlib
from pathlib import Path
from typing import Callable, Optional

from .cache import OnceCache
from .lang import Lang, require_lang

log = logging.getLogger(__name__)

DATA_DIR = Path(__file__).parent / "data"


class CorpusIntegrityError(RuntimeError):
    """Shipped word data is missing or corrupt."""


def asset_path(lang: Lang) -> Path:
    """Path of the compressed word list for ``lang``."""
    return DATA_DIR / lang.asset_name


def read_asset(lang: Lang) -> bytes:
    """Read the raw compressed bytes for ``lang`` from the package data."""
    path = asset_path(lang)
    try:
        return path.read_bytes()
    except OSError as e:
        raise CorpusIntegrityError(
            f"[{lang.code}] Missing word list asset {path}: {e}"
        ) from e


def decompress_corpus(data: bytes, lang: Lang, source: str = "<bytes>") -> str:
    """Decompress and decode one gzip-compressed word list.

    Args:
        data: gzip bytes.
        lang: Language the data belongs to (used in diagnostics).
        source: Where the bytes came from (used in diagnostics).

    Returns:
        The newline-delimited word list text.

    Raises:
        CorpusIntegrityError: If the bytes do not decompress or the result
            is not valid UTF-8.
    """
    try:
        raw = gzip.decompress(data)
    except (OSError, EOFError, zlib.error) as e:
        raise CorpusIntegrityError(
            f"[{lang.code}] Decompression failed for {source}: {e}"
        ) from e

    try:
        text = raw.decode("utf-8")
    except UnicodeDecodeError as e:
        raise CorpusIntegrityError(
            f"[{lang.code}] Decompression of {source} resulted in invalid UTF-8: {e}"
        ) from e

    log.debug(
        "Decompressed %s corpus from %s: %d -> %d bytes",
        lang.code, source, len(data), len(raw),
    )
    return text


class CorpusStore:
    """Per-language decompressed text, built once on first access."""

    def __init__(self, asset_reader: Optional[Callable[[Lang], bytes]] = None):
        """Initialize store.

        Args:
            asset_reader: Returns the compressed bytes for a language.
                Defaults to reading the packaged ``data/<code>.txt.gz``.
        """
        self._read = asset_reader or read_asset
        self._cache: OnceCache[Lang, str] = OnceCache(self._load)

    def _load(self, lang: Lang) -> str:
        return decompress_corpus(self._read(lang), lang, source=lang.asset_name)

    def get_corpus(self, lang: Lang) -> str:
        """Return the decompressed word list text for ``lang``."""
        return self._cache.get(require_lang(lang))

    def is_loaded(self, lang: Lang) -> bool:
        return self._cache.is_loaded(lang)

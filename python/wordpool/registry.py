"""Language registry: route a Lang to its corpus and lookup tables.

Both the decompressed text and the built index are cached per language
for the lifetime of the registry. The process-wide registry returned by
``default_registry()`` is the only global state in the package.
"""

import logging
import time
from typing import Optional

from .cache import OnceCache
from .corpus import CorpusIntegrityError, CorpusStore
from .index import WordIndex, build_indexes
from .lang import MAX_WORD_LENGTH, Lang, require_lang

log = logging.getLogger(__name__)


class LanguageRegistry:
    """Lazily built word indexes for every compiled-in language."""

    def __init__(
        self,
        store: Optional[CorpusStore] = None,
        max_length: int = MAX_WORD_LENGTH,
        check_alphabet: bool = True,
    ):
        """Initialize registry.

        Args:
            store: Source of decompressed corpora. Defaults to the packaged data.
            max_length: Longest allowed word, in characters.
            check_alphabet: Reject words with characters outside the
                language's alphabet while indexing.
        """
        self.store = store or CorpusStore()
        self.max_length = max_length
        self.check_alphabet = check_alphabet
        self._indexes: OnceCache[Lang, WordIndex] = OnceCache(self._build)

    def _build(self, lang: Lang) -> WordIndex:
        start = time.perf_counter()
        index = build_indexes(
            self.store.get_corpus(lang),
            lang=lang,
            max_length=self.max_length,
            check_alphabet=self.check_alphabet,
        )
        if not index.all_words:
            raise CorpusIntegrityError(f"[{lang.code}] Word list is empty")
        log.debug(
            "Built %s index in %.1f ms: %d words, %d lengths, %d start chars",
            lang.code,
            (time.perf_counter() - start) * 1000,
            len(index),
            len(index.by_length),
            len(index.by_start_char),
        )
        return index

    def languages(self) -> list[Lang]:
        """All compiled-in languages."""
        return list(Lang)

    def corpus(self, lang: Lang) -> str:
        return self.store.get_corpus(require_lang(lang))

    def index(self, lang: Lang) -> WordIndex:
        """Return the lookup tables for ``lang``, building them on first use."""
        return self._indexes.get(require_lang(lang))

    def is_loaded(self, lang: Lang) -> bool:
        return self._indexes.is_loaded(lang)


_DEFAULT_REGISTRY = LanguageRegistry()


def default_registry() -> LanguageRegistry:
    return _DEFAULT_REGISTRY

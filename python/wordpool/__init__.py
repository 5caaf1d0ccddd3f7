"""wordpool - random words from embedded word lists.

Ships one compressed word list per supported language and answers
lookups by length, by first character, or both, plus uniform random
picks from any of those views.

Core concepts:
    - Each word list is decompressed once, on first use
    - One pass partitions it into length / first-character indexes
    - Every lookup returns an immutable, case-insensitively sorted tuple,
      or None when nothing matches

Usage:
    import wordpool
    from wordpool import Lang, Words

    wordpool.gen(Lang.EN)                        # 'harbor'
    wordpool.all_len(Lang.EN, 4)                 # ('able', 'acid', ...)
    wordpool.gen_len_starts_with(Lang.FR, 5, "p")
    wordpool.all_len(Lang.EN, 1)                 # None

    words = Words.from_lang(Lang.DE)
    words.all_starts_with("a", fold_case=True)   # ('Abend', 'Abenteuer', 'aber', ...)
"""

from .lang import MAX_WORD_LENGTH, Lang
from .corpus import CorpusIntegrityError
from .index import IndexStats, WordIndex, build_indexes
from .query import (
    Words,
    all,
    all_len,
    all_len_starts_with,
    all_starts_with,
    gen,
    gen_len,
    gen_len_starts_with,
    gen_starts_with,
)

__version__ = "0.1.0"

__all__ = [
    "Lang",
    "MAX_WORD_LENGTH",
    "CorpusIntegrityError",
    "IndexStats",
    "WordIndex",
    "build_indexes",
    "Words",
    "all",
    "all_len",
    "all_len_starts_with",
    "all_starts_with",
    "gen",
    "gen_len",
    "gen_len_starts_with",
    "gen_starts_with",
]

"""Query facade: word lookups and random picks.

Every lookup returns an immutable tuple of words in corpus order (sorted
case-insensitively) or ``None`` when nothing matches. ``None`` is the
normal "no match" answer; it is never an empty tuple and never an error.
The ``gen*`` variants pick one word uniformly from the same tuple and are
``None`` exactly when their ``all*`` counterpart is.

Usage:
    from wordpool import Lang, Words
    import wordpool

    wordpool.gen(Lang.EN)                       # 'harbor'
    wordpool.all_len_starts_with(Lang.EN, 3, "c")

    words = Words.from_lang(Lang.DE)
    words.gen_starts_with("a", fold_case=True)  # 'Apfel' or 'aber' ...
"""

import heapq
from typing import Callable, Optional

from .index import Bucket, WordIndex, build_indexes
from .lang import MAX_WORD_LENGTH, Lang
from .prepare import prepare_words
from .registry import LanguageRegistry, default_registry
from .sampling import RandomSource, select_random


def _check_char(ch: str) -> str:
    if not isinstance(ch, str) or len(ch) != 1:
        raise ValueError(f"Expected a single character, got {ch!r}")
    return ch


def _in_range(length: int) -> bool:
    return 1 <= length <= MAX_WORD_LENGTH


class Words:
    """Lookups over one word list."""

    def __init__(
        self,
        index: WordIndex,
        lang: Optional[Lang] = None,
        rng: Optional[RandomSource] = None,
    ):
        self._index = index
        self.lang = lang
        self.rng = rng

    @classmethod
    def from_lang(
        cls,
        lang: Lang,
        rng: Optional[RandomSource] = None,
        registry: Optional[LanguageRegistry] = None,
    ) -> "Words":
        """Words for a compiled-in language (built on first use)."""
        registry = registry or default_registry()
        return cls(registry.index(lang), lang=lang, rng=rng)

    @classmethod
    def from_text(
        cls,
        text: str,
        lang: Optional[Lang] = None,
        rng: Optional[RandomSource] = None,
    ) -> "Words":
        """Words for an ad-hoc newline-delimited list.

        The text goes through the same preparation as packed word lists
        (blank lines and duplicates dropped, case-insensitive sort).

        Raises:
            ValueError: If any line is not a valid word.
        """
        prepared = prepare_words(text.split("\n"), lang=lang)
        if prepared.rejected:
            line_num, word, reason = prepared.rejected[0]
            raise ValueError(f"Invalid word {word!r} at line {line_num}: {reason}")
        return cls(build_indexes("\n".join(prepared.words), lang=lang), lang=lang, rng=rng)

    @property
    def index(self) -> WordIndex:
        return self._index

    def __len__(self) -> int:
        return len(self._index)

    def __repr__(self) -> str:
        name = self.lang.code if self.lang else "custom"
        return f"Words({name}: {len(self)} words)"

    def _starting_with(
        self, ch: str, fold_case: bool, lookup: Callable[[str], Optional[Bucket]]
    ) -> Optional[Bucket]:
        _check_char(ch)
        if not fold_case:
            return lookup(ch)

        # Variants like 'ß'.upper() == 'SS' are not single characters.
        variants = sorted({v for v in (ch, ch.lower(), ch.upper()) if len(v) == 1})
        buckets = [b for b in map(lookup, variants) if b]
        if not buckets:
            return None
        if len(buckets) == 1:
            return buckets[0]
        return tuple(heapq.merge(*buckets, key=str.casefold))

    def all(self) -> Bucket:
        """Every word in the list."""
        return self._index.all_words

    def all_len(self, length: int) -> Optional[Bucket]:
        """Words with exactly ``length`` characters."""
        if not _in_range(length):
            return None
        return self._index.by_length.get(length)

    def all_starts_with(self, ch: str, fold_case: bool = False) -> Optional[Bucket]:
        """Words whose first character is ``ch``.

        With ``fold_case``, upper- and lower-case ``ch`` both match.
        """
        return self._starting_with(ch, fold_case, self._index.by_start_char.get)

    def all_len_starts_with(
        self, length: int, ch: str, fold_case: bool = False
    ) -> Optional[Bucket]:
        """Words with ``length`` characters whose first character is ``ch``."""
        if not _in_range(length):
            _check_char(ch)
            return None
        table = self._index.by_length_start_char
        return self._starting_with(ch, fold_case, lambda c: table.get((length, c)))

    def gen(self) -> str:
        """One uniformly random word from the whole list."""
        return select_random(self.all(), self.rng)

    def gen_len(self, length: int) -> Optional[str]:
        return select_random(self.all_len(length), self.rng)

    def gen_starts_with(self, ch: str, fold_case: bool = False) -> Optional[str]:
        return select_random(self.all_starts_with(ch, fold_case), self.rng)

    def gen_len_starts_with(
        self, length: int, ch: str, fold_case: bool = False
    ) -> Optional[str]:
        return select_random(
            self.all_len_starts_with(length, ch, fold_case), self.rng
        )


# Module-level shortcuts over the process-wide registry.

def all(lang: Lang) -> Bucket:
    """Every word for ``lang``; never empty."""
    return Words.from_lang(lang).all()


def all_len(lang: Lang, length: int) -> Optional[Bucket]:
    return Words.from_lang(lang).all_len(length)


def all_starts_with(lang: Lang, ch: str, fold_case: bool = False) -> Optional[Bucket]:
    return Words.from_lang(lang).all_starts_with(ch, fold_case)


def all_len_starts_with(
    lang: Lang, length: int, ch: str, fold_case: bool = False
) -> Optional[Bucket]:
    return Words.from_lang(lang).all_len_starts_with(length, ch, fold_case)


def gen(lang: Lang) -> str:
    """One uniformly random word for ``lang``."""
    return Words.from_lang(lang).gen()


def gen_len(lang: Lang, length: int) -> Optional[str]:
    return Words.from_lang(lang).gen_len(length)


def gen_starts_with(lang: Lang, ch: str, fold_case: bool = False) -> Optional[str]:
    return Words.from_lang(lang).gen_starts_with(ch, fold_case)


def gen_len_starts_with(
    lang: Lang, length: int, ch: str, fold_case: bool = False
) -> Optional[str]:
    return Words.from_lang(lang).gen_len_starts_with(length, ch, fold_case)

"""Index builder: partition a corpus into lookup tables.

A single pass over the corpus lines produces four views that all share the
same word string objects:

    all_words              every word, in corpus order
    by_length              character count -> words of that length
    by_start_char          first character -> words starting with it
    by_length_start_char   (length, first character) -> words matching both

Each bucket keeps the relative corpus order (stable partition). The builder
never sorts: word lists are sorted case-insensitively when they are packed
(see ``prepare``), so buckets come out sorted only because the input is.

First-character keys are taken verbatim. "Apfel" and "aber" land in
different buckets; case folding is left to the query layer.
"""

from collections import defaultdict
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Optional

from .alphabet import invalid_chars, is_valid_word
from .corpus import CorpusIntegrityError
from .lang import MAX_WORD_LENGTH, Lang

Bucket = tuple[str, ...]


@dataclass
class IndexStats:
    """Counts derived from a built index."""

    total_words: int = 0
    by_length: dict[int, int] = field(default_factory=dict)
    by_start_char: dict[str, int] = field(default_factory=dict)

    @property
    def min_length(self) -> Optional[int]:
        return min(self.by_length) if self.by_length else None

    @property
    def max_length(self) -> Optional[int]:
        return max(self.by_length) if self.by_length else None


@dataclass(frozen=True)
class WordIndex:
    """Immutable lookup tables for one corpus."""

    all_words: Bucket
    by_length: Mapping[int, Bucket]
    by_start_char: Mapping[str, Bucket]
    by_length_start_char: Mapping[tuple[int, str], Bucket]

    def __len__(self) -> int:
        return len(self.all_words)

    def lengths(self) -> list[int]:
        """Word lengths present, ascending."""
        return sorted(self.by_length)

    def start_chars(self) -> list[str]:
        """First characters present, in code point order."""
        return sorted(self.by_start_char)

    def stats(self) -> IndexStats:
        return IndexStats(
            total_words=len(self.all_words),
            by_length={k: len(v) for k, v in sorted(self.by_length.items())},
            by_start_char={
                k: len(v) for k, v in sorted(self.by_start_char.items())
            },
        )


def iter_lines(corpus: str):
    """Yield ``(line_number, line)`` for each line of newline-delimited text.

    A single trailing newline is not a line, and a trailing ``\\r`` is
    stripped so CRLF data reads the same as LF data.
    """
    lines = corpus.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    for line_num, line in enumerate(lines, start=1):
        if line.endswith("\r"):
            line = line[:-1]
        yield line_num, line


def _freeze(buckets: dict) -> Mapping:
    return MappingProxyType({k: tuple(v) for k, v in buckets.items()})


def build_indexes(
    corpus: str,
    lang: Optional[Lang] = None,
    max_length: int = MAX_WORD_LENGTH,
    check_alphabet: bool = True,
) -> WordIndex:
    """Build all lookup tables from newline-delimited corpus text.

    Args:
        corpus: Decompressed word list, one word per line.
        lang: Language the corpus belongs to. Prefixes every diagnostic
            with its code.
        max_length: Longest allowed word, in characters.
        check_alphabet: With ``lang``, every word must use only that
            language's alphabet.

    Returns:
        WordIndex with the four views.

    Raises:
        CorpusIntegrityError: On an empty line, an over-long word, or
            a character outside the alphabet when checking it.
    """
    where = f"[{lang.code}] " if lang is not None else ""
    alphabet = lang if check_alphabet else None

    all_words: list[str] = []
    by_length: dict[int, list[str]] = defaultdict(list)
    by_start_char: dict[str, list[str]] = defaultdict(list)
    by_length_start_char: dict[tuple[int, str], list[str]] = defaultdict(list)

    for line_num, word in iter_lines(corpus):
        length = len(word)
        if length == 0:
            raise CorpusIntegrityError(f"{where}Empty word at line {line_num}")
        if length > max_length:
            raise CorpusIntegrityError(
                f"{where}Word at line {line_num} has {length} characters "
                f"(max {max_length}): {word[:20]!r}..."
            )
        if alphabet is not None and not is_valid_word(word, alphabet):
            raise CorpusIntegrityError(
                f"{where}Word {word!r} at line {line_num} has characters "
                f"outside the alphabet: {invalid_chars(word, alphabet)!r}"
            )

        first = word[0]
        all_words.append(word)
        by_length[length].append(word)
        by_start_char[first].append(word)
        by_length_start_char[(length, first)].append(word)

    return WordIndex(
        all_words=tuple(all_words),
        by_length=_freeze(by_length),
        by_start_char=_freeze(by_start_char),
        by_length_start_char=_freeze(by_length_start_char),
    )

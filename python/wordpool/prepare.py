"""Offline preparation of the embedded word lists.

Turns a plain-text word list into the compressed asset the corpus store
reads at runtime:

    wordlists/en.txt  ->  python/wordpool/data/en.txt.gz

Input format: one word per line. Blank lines and ``#`` comments are
skipped, as is anything after an inline ``#``.

Preparation:
    - drop exact duplicates (first occurrence wins)
    - reject words outside the language alphabet or over the length cap
    - sort case-insensitively (``str.casefold``, stable)
    - gzip with a zero timestamp so the output is reproducible

This runs when the data is packed, never at import time.
"""

import gzip
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, Iterator, Optional

from .alphabet import invalid_chars
from .corpus import DATA_DIR
from .lang import MAX_WORD_LENGTH, Lang

log = logging.getLogger(__name__)


@dataclass
class PreparedList:
    """Result of preparing a word list."""

    words: list[str]
    total_raw: int = 0          # Non-blank, non-comment lines seen
    total_duplicates: int = 0
    rejected: list[tuple[int, str, str]] = field(default_factory=list)  # (line, word, reason)

    def __repr__(self) -> str:
        return (
            f"PreparedList({len(self.words)}/{self.total_raw} kept, "
            f"{self.total_duplicates} dupes, {len(self.rejected)} rejected)"
        )


@dataclass
class PackStats:
    """Statistics from packing one word list."""

    language: str
    source_path: str
    output_path: str
    total_words: int = 0
    total_raw: int = 0
    total_duplicates: int = 0
    compressed_bytes: int = 0
    by_length: dict[int, int] = field(default_factory=dict)
    rejected: list[tuple[int, str, str]] = field(default_factory=list)


def parse_lines(
    lines: Iterable[str], comment_char: str = "#"
) -> Iterator[tuple[str, int]]:
    """Yield ``(word, line_number)`` for each word-bearing line.

    Everything from ``comment_char`` on is dropped, so whole-line and
    trailing comments are handled the same way.
    """
    for line_num, line in enumerate(lines, start=1):
        word = line.partition(comment_char)[0].strip()
        if word:
            yield word, line_num


def check_word(
    word: str, lang: Optional[Lang] = None, max_length: int = MAX_WORD_LENGTH
) -> Optional[str]:
    """Return why ``word`` cannot be packed, or None if it is fine."""
    if len(word) > max_length:
        return f"longer than {max_length} characters"
    if lang is not None:
        bad = invalid_chars(word, lang)
        if bad:
            return f"characters outside the {lang.code} alphabet: {bad}"
    elif any(c.isspace() for c in word):
        return "contains whitespace"
    return None


def prepare_words(
    lines: Iterable[str],
    lang: Optional[Lang] = None,
    max_length: int = MAX_WORD_LENGTH,
    comment_char: str = "#",
) -> PreparedList:
    """Clean, validate and sort a raw word list.

    Args:
        lines: Raw lines (trailing newlines are fine).
        lang: Alphabet to validate against; None skips alphabet checks.
        max_length: Longest allowed word, in characters.
        comment_char: Character that starts a comment.

    Returns:
        PreparedList with the sorted words and what was dropped.
    """
    seen: set[str] = set()
    words: list[str] = []
    result = PreparedList(words=words)

    for word, line_num in parse_lines(lines, comment_char):
        result.total_raw += 1

        reason = check_word(word, lang, max_length)
        if reason is not None:
            result.rejected.append((line_num, word, reason))
            continue

        if word in seen:
            result.total_duplicates += 1
            continue

        seen.add(word)
        words.append(word)

    words.sort(key=str.casefold)
    return result


def compress_words(words: Iterable[str]) -> bytes:
    """Encode words as newline-delimited UTF-8 and gzip them reproducibly."""
    text = "".join(f"{w}\n" for w in words)
    return gzip.compress(text.encode("utf-8"), compresslevel=9, mtime=0)


def pack_file(
    source: Path | str,
    lang: Lang,
    output: Optional[Path | str] = None,
    max_length: int = MAX_WORD_LENGTH,
) -> PackStats:
    """Prepare ``source`` and write the compressed asset for ``lang``.

    Args:
        source: Plain-text word list.
        lang: Language the list belongs to.
        output: Destination file; defaults to the packaged data directory.
        max_length: Longest allowed word, in characters.

    Returns:
        PackStats.
    """
    source = Path(source)
    output = Path(output) if output else DATA_DIR / lang.asset_name

    with open(source, "r", encoding="utf-8") as f:
        prepared = prepare_words(f, lang=lang, max_length=max_length)

    for line_num, word, reason in prepared.rejected:
        log.warning("[%s] %s:%d rejected %r: %s", lang.code, source, line_num, word, reason)

    data = compress_words(prepared.words)
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_bytes(data)

    stats = PackStats(
        language=lang.code,
        source_path=str(source),
        output_path=str(output),
        total_words=len(prepared.words),
        total_raw=prepared.total_raw,
        total_duplicates=prepared.total_duplicates,
        compressed_bytes=len(data),
        rejected=prepared.rejected,
    )
    for word in prepared.words:
        stats.by_length[len(word)] = stats.by_length.get(len(word), 0) + 1

    log.info("[%s] Packed %d words into %s", lang.code, stats.total_words, output)
    return stats


def pack_directory(
    source_dir: Path | str,
    output_dir: Optional[Path | str] = None,
    max_length: int = MAX_WORD_LENGTH,
) -> list[PackStats]:
    """Pack every ``<code>.txt`` in ``source_dir`` that names a known language."""
    source_dir = Path(source_dir)
    output_dir = Path(output_dir) if output_dir else DATA_DIR

    results = []
    for lang in Lang:
        source = source_dir / f"{lang.code}.txt"
        if not source.exists():
            log.info("[%s] No source list at %s, skipping", lang.code, source)
            continue
        results.append(
            pack_file(source, lang, output_dir / lang.asset_name, max_length)
        )
    return results

"""wordpool CLI - random words from embedded word lists.

Usage:
    python -m wordpool.main gen --language en --length 5 --count 3
    python -m wordpool.main all --language de --starts-with a --fold-case
    python -m wordpool.main stats
    python -m wordpool.main pack --source-dir wordlists
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional

from . import config as cfg
from .lang import Lang
from .prepare import pack_directory, pack_file
from .query import Words
from .registry import default_registry
from .sampling import select_random


def _lang(code: str) -> Lang:
    try:
        return Lang.from_code(code)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e)) from None


def _char(value: str) -> str:
    if len(value) != 1:
        raise argparse.ArgumentTypeError(f"expected a single character, got {value!r}")
    return value


def build_parser() -> argparse.ArgumentParser:
    default_lang = cfg.default_language()
    default_count = cfg.default_count()

    parser = argparse.ArgumentParser(
        prog="wordpool",
        description="wordpool - random words from embedded word lists",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        default=cfg.default_verbose(),
        help="Log corpus loading and index building",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    def add_filters(p: argparse.ArgumentParser) -> None:
        p.add_argument(
            "--language",
            "-l",
            type=_lang,
            default=default_lang,
            help=f"Language code (default: {default_lang.code}; "
                 f"available: {', '.join(l.code for l in Lang)})",
        )
        p.add_argument("--length", "-n", type=int, help="Exact word length in characters")
        p.add_argument("--starts-with", "-s", type=_char, help="First character")
        p.add_argument(
            "--fold-case",
            action="store_true",
            help="Match the first character in either case",
        )

    gen = sub.add_parser("gen", help="Print random words")
    add_filters(gen)
    gen.add_argument(
        "--count",
        "-c",
        type=int,
        default=default_count,
        help=f"Number of words (default: {default_count})",
    )

    all_ = sub.add_parser("all", help="Print every matching word")
    add_filters(all_)
    all_.add_argument("--total", action="store_true", help="Only print the match count")

    stats = sub.add_parser("stats", help="Show word list statistics")
    stats.add_argument(
        "--language",
        "-l",
        type=_lang,
        action="append",
        help="Language code (repeatable; default: all)",
    )

    pack = sub.add_parser("pack", help="Compress prepared word lists into package data")
    pack.add_argument(
        "--source-dir",
        type=Path,
        default=cfg.default_wordlist_dir(),
        help="Directory of <code>.txt word lists",
    )
    pack.add_argument("--source", type=Path, help="Single word list (needs --language)")
    pack.add_argument("--language", "-l", type=_lang, help="Language of --source")
    pack.add_argument("--output-dir", "-o", type=Path, help="Where to write <code>.txt.gz")

    return parser


def _select(words: Words, args: argparse.Namespace):
    if args.length is not None and args.starts_with is not None:
        return words.all_len_starts_with(args.length, args.starts_with, args.fold_case)
    if args.length is not None:
        return words.all_len(args.length)
    if args.starts_with is not None:
        return words.all_starts_with(args.starts_with, args.fold_case)
    return words.all()


def _describe(args: argparse.Namespace) -> str:
    parts = [args.language.code]
    if args.length is not None:
        parts.append(f"length={args.length}")
    if args.starts_with is not None:
        parts.append(f"starts-with={args.starts_with!r}")
    return ", ".join(parts)


def cmd_gen(args: argparse.Namespace) -> int:
    words = Words.from_lang(args.language)
    matches = _select(words, args)
    if matches is None:
        print(f"No words match ({_describe(args)})", file=sys.stderr)
        return 1

    for _ in range(max(args.count, 0)):
        print(select_random(matches, words.rng))
    return 0


def cmd_all(args: argparse.Namespace) -> int:
    matches = _select(Words.from_lang(args.language), args)
    if matches is None:
        print(f"No words match ({_describe(args)})", file=sys.stderr)
        return 1

    if args.total:
        print(len(matches))
    else:
        for word in matches:
            print(word)
    return 0


def cmd_stats(args: argparse.Namespace) -> int:
    registry = default_registry()
    languages = args.language or registry.languages()

    print("=" * 60)
    print("wordpool - Word List Statistics")
    print("=" * 60)

    for lang in languages:
        stats = registry.index(lang).stats()
        print(f"\n  [{lang.code}] {stats.total_words:,} words, "
              f"lengths {stats.min_length}-{stats.max_length}")
        for length, count in stats.by_length.items():
            print(f"    {length}-c: {count:,}")
        print(f"    start chars: {''.join(stats.by_start_char)}")

    print("\n" + "=" * 60)
    return 0


def cmd_pack(args: argparse.Namespace) -> int:
    if args.source:
        if args.language is None:
            print("--source requires --language", file=sys.stderr)
            return 2
        output = args.output_dir / args.language.asset_name if args.output_dir else None
        results = [pack_file(args.source, args.language, output)]
    else:
        results = pack_directory(args.source_dir, args.output_dir)

    if not results:
        print(f"No word lists found in {args.source_dir}", file=sys.stderr)
        return 1

    for stats in results:
        print(f"  [{stats.language}] {stats.total_words:,} words "
              f"({stats.total_duplicates} dupes, {len(stats.rejected)} rejected) "
              f"-> {stats.output_path} ({stats.compressed_bytes:,} bytes)")
        for line_num, word, reason in stats.rejected:
            print(f"      line {line_num}: {word!r} {reason}")
    return 0


COMMANDS = {
    "gen": cmd_gen,
    "all": cmd_all,
    "stats": cmd_stats,
    "pack": cmd_pack,
}


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)
    return COMMANDS[args.command](args)


if __name__ == "__main__":
    sys.exit(main())

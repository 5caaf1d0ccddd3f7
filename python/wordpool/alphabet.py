"""Per-language alphabets.

Each shipped word list may only contain characters from its language's
alphabet. German keeps upper-case letters because nouns are capitalized;
the other lists are lower-case only.
"""

import re
from typing import Optional

from .lang import Lang

_BASE = "a-z"

ALPHABETS: dict[Lang, str] = {
    Lang.DE: _BASE + "A-Z" + "äöüÄÖÜß",
    Lang.EN: _BASE,
    Lang.ES: _BASE + "ñáéíóúü",
    Lang.FR: _BASE + "àâæçéèêëîïôœùûüÿ",
}

_PATTERNS: dict[Lang, re.Pattern] = {
    lang: re.compile(f"[{chars}]+") for lang, chars in ALPHABETS.items()
}


def is_valid_word(word: str, lang: Lang) -> bool:
    """Check that ``word`` is non-empty and uses only ``lang``'s alphabet."""
    return bool(_PATTERNS[lang].fullmatch(word))


def invalid_chars(word: str, lang: Lang) -> Optional[str]:
    """Return the characters of ``word`` outside ``lang``'s alphabet, or None."""
    pattern = _PATTERNS[lang]
    bad = "".join(sorted({c for c in word if not pattern.fullmatch(c)}))
    return bad or None

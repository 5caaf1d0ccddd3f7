"""Supported languages.

The set of languages is fixed when the package is built: every member of
``Lang`` has a compressed word list shipped under ``wordpool/data/``.
There is no way to add a language at runtime.
"""

from enum import Enum

# Sanity cap on word length (in characters), enforced while indexing.
MAX_WORD_LENGTH = 50


class Lang(Enum):
    """ISO 639-1 language codes of the compiled-in word lists."""

    DE = "de"
    EN = "en"
    ES = "es"
    FR = "fr"

    @property
    def code(self) -> str:
        return self.value

    @property
    def asset_name(self) -> str:
        """File name of the compressed word list for this language."""
        return f"{self.value}.txt.gz"

    @classmethod
    def from_code(cls, code: str) -> "Lang":
        """Get Lang from an ISO 639-1 code (case-insensitive).

        Raises:
            ValueError: If no word list is shipped for ``code``.
        """
        try:
            return cls(code.strip().lower())
        except ValueError:
            available = ", ".join(lang.value for lang in cls)
            raise ValueError(
                f"Unsupported language: {code!r}. Available: {available}"
            ) from None


def require_lang(lang: object) -> Lang:
    """Return ``lang`` unchanged if it is a Lang member, else raise TypeError."""
    if not isinstance(lang, Lang):
        raise TypeError(
            f"Expected a Lang member, got {type(lang).__name__}: {lang!r}"
        )
    return lang

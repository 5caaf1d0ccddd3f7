"""Pytest configuration and fixtures."""

import gzip
import pytest
import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from wordpool.corpus import CorpusStore
from wordpool.lang import Lang
from wordpool.registry import LanguageRegistry


@pytest.fixture
def sample_corpus():
    """Small prepared corpus (sorted case-insensitively)."""
    return "bat\nbee\nbird\ncar\ncat\ncattle\ndog\ndove\n"


@pytest.fixture
def sample_german_corpus():
    """German-style corpus mixing capitalized nouns and lower-case words."""
    return "aber\nalt\nApfel\nArzt\nbald\nBaum\nÖl\nÜbung\n"


@pytest.fixture
def sample_wordlist_content():
    """Raw plain text word list, before preparation."""
    return """# Word list
dog
Cat
apple

banana  # fruit
apple
"""


@pytest.fixture
def make_registry():
    """Build a LanguageRegistry whose every language serves the given text.

    Returns a factory; the created registry exposes ``reads`` with the
    number of asset reads per language.
    """
    def factory(text: str, check_alphabet: bool = True) -> LanguageRegistry:
        data = gzip.compress(text.encode("utf-8"))
        reads: dict[Lang, int] = {}

        def reader(lang: Lang) -> bytes:
            reads[lang] = reads.get(lang, 0) + 1
            return data

        registry = LanguageRegistry(
            store=CorpusStore(asset_reader=reader),
            check_alphabet=check_alphabet,
        )
        registry.reads = reads
        return registry

    return factory

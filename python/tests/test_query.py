"""Tests for the query facade over fixture corpora."""

import pytest

from wordpool.index import build_indexes
from wordpool.lang import Lang
from wordpool.query import Words
from wordpool.sampling import select_random


class FirstChoice:
    """Deterministic random source: always the first element."""

    def choice(self, seq):
        return seq[0]


class TestScenario:
    """The three-word walkthrough."""

    @pytest.fixture
    def words(self):
        return Words.from_text("cat\ncar\ndog")

    def test_all(self, words):
        """Test prepared text comes back sorted."""
        assert words.all() == ("car", "cat", "dog")

    def test_all_len(self, words):
        """Test length lookup."""
        assert words.all_len(3) == ("car", "cat", "dog")

    def test_all_starts_with(self, words):
        """Test first-character lookup."""
        assert words.all_starts_with("c") == ("car", "cat")

    def test_all_len_starts_with(self, words):
        """Test combined lookup."""
        assert words.all_len_starts_with(3, "d") == ("dog",)

    def test_absent(self, words):
        """Test a character with no words is absent, not empty."""
        assert words.all_starts_with("z") is None


class TestWordsLookups:
    """Tests for Words lookups."""

    @pytest.fixture
    def words(self, sample_corpus):
        return Words(build_indexes(sample_corpus))

    def test_len(self, words):
        """Test the word count."""
        assert len(words) == 8
        assert repr(words) == "Words(custom: 8 words)"

    def test_length_out_of_range(self, words):
        """Test lengths outside 1..MAX are absent without error."""
        assert words.all_len(0) is None
        assert words.all_len(-3) is None
        assert words.all_len(1000) is None
        assert words.all_len_starts_with(1000, "c") is None

    def test_missing_length(self, words):
        """Test an in-range length with no words is absent."""
        assert words.all_len(5) is None
        assert words.all_len_starts_with(5, "c") is None

    def test_filter_is_intersection(self, words):
        """Test the combined filter equals the intersection of both filters."""
        for length in words.index.lengths():
            for ch in words.index.start_chars():
                combined = words.all_len_starts_with(length, ch) or ()
                expected = set(words.all_len(length) or ()) & set(words.all_starts_with(ch) or ())
                assert set(combined) == expected
                for word in combined:
                    assert len(word) == length
                    assert word[0] == ch

    def test_bad_character(self, words):
        """Test multi-character or empty prefixes are caller errors."""
        for bad in ("", "ca", None):
            with pytest.raises(ValueError):
                words.all_starts_with(bad)
        with pytest.raises(ValueError):
            words.all_len_starts_with(1000, "ca")


class TestFoldCase:
    """Tests for case-folded first-character lookups."""

    @pytest.fixture
    def words(self, sample_german_corpus):
        return Words(build_indexes(sample_german_corpus, lang=Lang.DE), lang=Lang.DE)

    def test_exact_by_default(self, words):
        """Test lookups are case-sensitive unless asked otherwise."""
        assert words.all_starts_with("a") == ("aber", "alt")
        assert words.all_starts_with("A") == ("Apfel", "Arzt")

    def test_fold_case_merges_sorted(self, words):
        """Test folded lookups merge both cases in case-insensitive order."""
        expected = ("aber", "alt", "Apfel", "Arzt")
        assert words.all_starts_with("a", fold_case=True) == expected
        assert words.all_starts_with("A", fold_case=True) == expected

    def test_fold_case_single_bucket(self, words):
        """Test folding when only one case has words."""
        assert words.all_starts_with("ö", fold_case=True) == ("Öl",)
        assert words.all_starts_with("ö") is None

    def test_fold_case_with_length(self, words):
        """Test folding combined with a length filter."""
        assert words.all_len_starts_with(4, "b", fold_case=True) == ("bald", "Baum")
        assert words.gen_len_starts_with(3, "x", fold_case=True) is None


class TestGen:
    """Tests for random picks."""

    @pytest.fixture
    def words(self, sample_corpus):
        return Words(build_indexes(sample_corpus), rng=FirstChoice())

    def test_uses_filtered_slice(self, words):
        """Test picks come from the filtered bucket."""
        assert words.gen() == "bat"
        assert words.gen_len(4) == "bird"
        assert words.gen_starts_with("c") == "car"
        assert words.gen_len_starts_with(6, "c") == "cattle"

    def test_absent_propagates(self, words):
        """Test gen is absent exactly when the lookup is."""
        assert words.gen_len(1) is None
        assert words.gen_len(1000) is None
        assert words.gen_starts_with("z") is None
        assert words.gen_len_starts_with(3, "z") is None

    def test_default_source_stays_in_bucket(self, sample_corpus):
        """Test the system random source only returns matching words."""
        words = Words(build_indexes(sample_corpus))
        for _ in range(200):
            assert words.gen_starts_with("d") in ("dog", "dove")


class TestSelectRandom:
    """Tests for select_random."""

    def test_empty(self):
        """Test empty or missing sequences give None."""
        assert select_random(()) is None
        assert select_random(None) is None

    def test_coverage(self):
        """Test 500,000 draws hit every element and nothing else."""
        items = ("1", "2", "3", "4", "5")
        seen = set()
        for _ in range(500_000):
            choice = select_random(items)
            assert choice in items
            seen.add(choice)
        assert seen == set(items)

    def test_custom_source(self):
        """Test an injected source is used."""
        assert select_random(("x", "y"), FirstChoice()) == "x"


class TestFromText:
    """Tests for Words.from_text."""

    def test_prepares_input(self, sample_wordlist_content):
        """Test comments, blanks and duplicates are dropped and the rest sorted."""
        words = Words.from_text(sample_wordlist_content)
        assert words.all() == ("apple", "banana", "Cat", "dog")

    def test_invalid_word(self):
        """Test words outside the alphabet are refused."""
        with pytest.raises(ValueError, match="line 2"):
            Words.from_text("cat\ncafé\n", lang=Lang.EN)

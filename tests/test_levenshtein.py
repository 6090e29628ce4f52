"""Tests for edit distance algorithms: Levenshtein and Damerau-Levenshtein.

This module tests the metric objects, their bounded variants and the
function-style wrappers built on them.
"""

import pytest

import fuzzymetric as fm
from fuzzymetric import DamerauLevenshtein, Exact, Exceeded, Levenshtein

LOREM_A = "The quick brown fox jumped over the angry dog."
LOREM_B = "Lorem ipsum dolor sit amet, dicta latine an eam."
LEHEM_B = "Lehem ipsum dolor sit amet, dicta latine an eam."


class TestLevenshtein:
    """Tests for the Levenshtein metric."""

    def test_classic_examples(self):
        assert Levenshtein().str_distance("kitten", "sitting") == Exact(3)
        assert Levenshtein().str_distance("sunday", "saturday") == Exact(3)

    def test_empty_strings(self):
        assert Levenshtein().str_distance("", "") == Exact(0)
        assert Levenshtein().str_distance("abc", "") == Exact(3)
        assert Levenshtein().str_distance("", "abc") == Exact(3)

    def test_long_strings(self):
        assert Levenshtein().str_distance(LOREM_A, LOREM_B) == Exact(37)

    def test_prefix_and_suffix_only(self):
        """One string being the other plus a head or tail skips the DP entirely."""
        assert Levenshtein().str_distance("kitten", "cute kitten") == Exact(5)
        assert Levenshtein().str_distance("hungry", "hungry hippo") == Exact(6)

    def test_unicode(self):
        assert Levenshtein().str_distance("café", "cafe") == Exact(1)
        assert Levenshtein().str_distance("日本語", "日本") == Exact(1)

    def test_generic_sequences(self):
        assert Levenshtein().distance([1, 2, 3, 4], [1, 3, 4]) == Exact(1)
        assert Levenshtein().distance((1, 2), [2, 1]) == Exact(2)
        # elements of different container types compare by value
        assert Levenshtein().distance("abc", ["a", "b", "c"]) == Exact(0)

    def test_generators_are_materialized(self):
        assert Levenshtein().distance(iter("kitten"), iter("sitting")) == Exact(3)

    def test_argument_order_does_not_matter(self):
        assert Levenshtein().distance("sitting", "kitten") == Exact(3)
        assert Levenshtein().str_distance("sitting", "kitten") == Exact(3)


class TestLevenshteinBounded:
    """Tests for Levenshtein with a maximum distance."""

    def test_within_bound(self):
        assert Levenshtein.with_max_distance(3).str_distance("kitten", "sitting") == Exact(3)

    def test_exceeded(self):
        result = Levenshtein.with_max_distance(2).str_distance("kitten", "sitting")
        assert result == Exceeded(2)
        assert not result.is_exact
        assert result.bound == 2

    def test_long_strings_exceeded(self):
        result = Levenshtein.with_max_distance(10).str_distance(LOREM_A, LOREM_B)
        assert result == Exceeded(10)
        assert int(result) == 10

    def test_length_difference_exceeds_bound(self):
        assert Levenshtein(max_distance=2).str_distance("abc", "abcdefgh") == Exceeded(2)
        assert Levenshtein(max_distance=2).str_distance("xbc", "abcdefgh") == Exceeded(2)

    def test_zero_bound(self):
        assert Levenshtein(max_distance=0).str_distance("same", "same") == Exact(0)
        assert Levenshtein(max_distance=0).str_distance("same", "sane") == Exceeded(0)

    def test_bound_equal_to_distance(self):
        assert Levenshtein(max_distance=1).str_distance("abc", "abd") == Exact(1)


class TestLevenshteinNormalized:
    """Tests for normalized Levenshtein."""

    def test_values(self):
        assert Levenshtein().str_normalized("kitten", "sitting") == pytest.approx(3 / 7)
        assert f"{Levenshtein().str_normalized('kitten', 'sitting'):.6f}" == "0.428571"

    def test_edge_cases(self):
        assert Levenshtein().str_normalized("", "") == 0.0
        assert Levenshtein().str_normalized("", "second") == 1.0
        assert Levenshtein().str_normalized("first", "") == 1.0
        assert Levenshtein().str_normalized("string", "string") == 0.0

    def test_exceeded_normalizes_to_one(self):
        assert Levenshtein(max_distance=1).str_normalized("kitten", "sitting") == 1.0

    def test_similarity(self):
        assert Levenshtein().str_similarity("hello", "hallo") == pytest.approx(0.8)
        assert Levenshtein().str_similarity("", "") == 1.0


class TestDamerauLevenshtein:
    """Tests for the restricted Damerau-Levenshtein metric."""

    def test_transposition(self):
        assert DamerauLevenshtein().str_distance("ab", "ba") == Exact(1)
        assert DamerauLevenshtein().str_distance("ca", "ac") == Exact(1)
        # Levenshtein counts a swap as two edits
        assert Levenshtein().str_distance("ab", "ba") == Exact(2)

    def test_reference_values(self):
        dl = DamerauLevenshtein()
        assert dl.str_distance("", "") == Exact(0)
        assert dl.str_distance("abc", "") == Exact(3)
        assert dl.str_distance("abc", "öঙ香") == Exact(3)
        assert dl.str_distance("damerau", "aderuaxyz") == Exact(6)
        assert dl.str_distance("jellyifhs", "jellyfish") == Exact(2)
        assert dl.str_distance("cape sand recycling ", "edith ann graham") == Exact(17)
        assert dl.str_distance(LOREM_A, LEHEM_B) == Exact(36)

    def test_restricted_edit_is_not_unrestricted(self):
        """"CA" -> "ABC" is 2 with unrestricted transpositions, 3 as optimal string alignment."""
        assert DamerauLevenshtein().str_distance("CA", "ABC") == Exact(3)

    def test_generic_sequences(self):
        assert DamerauLevenshtein().distance([1, 2, 3], [1, 3, 2]) == Exact(1)

    def test_bounded(self):
        assert DamerauLevenshtein.with_max_distance(10).str_distance(LOREM_A, LEHEM_B) == Exceeded(
            10
        )
        assert DamerauLevenshtein(max_distance=2).str_distance("jellyifhs", "jellyfish") == Exact(2)
        assert DamerauLevenshtein(max_distance=1).str_distance("jellyifhs", "jellyfish") == Exceeded(
            1
        )
        assert DamerauLevenshtein(max_distance=0).str_distance("ab", "ba") == Exceeded(0)

    def test_bounded_length_difference(self):
        assert DamerauLevenshtein(max_distance=1).str_distance("ab", "abcd") == Exceeded(1)

    def test_normalized(self):
        dl = DamerauLevenshtein()
        assert dl.str_normalized("", "") == 0.0
        assert dl.str_normalized("", "second") == 1.0
        assert f"{dl.str_normalized('kitten', 'sitting'):.6f}" == "0.428571"

    def test_similarity(self):
        assert DamerauLevenshtein().str_similarity("hello", "ehllo") == pytest.approx(0.8)


class TestEditDistanceFunctions:
    """Tests for the function-style edit distance API."""

    def test_levenshtein(self):
        assert fm.levenshtein("kitten", "sitting") == 3
        assert fm.edit_distance("kitten", "sitting") == 3

    def test_levenshtein_max_distance(self):
        # past the bound the function reports max_distance + 1
        assert fm.levenshtein("abcdef", "ghijkl", max_distance=3) == 4
        assert fm.levenshtein("abc", "abd", max_distance=2) == 1

    def test_levenshtein_bounded(self):
        assert fm.levenshtein_bounded("abc", "abd", max_distance=2) == 1
        assert fm.levenshtein_bounded("abcdef", "ghijkl", max_distance=3) is None

    def test_damerau_levenshtein(self):
        assert fm.damerau_levenshtein("ca", "ac") == 1
        assert fm.damerau_levenshtein("abcdef", "ghijkl", max_distance=3) == 4
        assert fm.damerau_levenshtein_bounded("ca", "ac", max_distance=1) == 1
        assert fm.damerau_levenshtein_bounded("abcdef", "ghijkl", max_distance=3) is None

    def test_similarities(self):
        assert fm.levenshtein_similarity("hello", "hello") == 1.0
        assert fm.levenshtein_similarity("hello", "") == 0.0
        assert fm.damerau_levenshtein_similarity("ab", "ba") == 0.5


if __name__ == "__main__":
    pytest.main([__file__, "-v"])

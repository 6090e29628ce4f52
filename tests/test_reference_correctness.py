"""Reference correctness tests comparing fuzzymetric against rapidfuzz.

These tests verify that fuzzymetric produces the same results as a
well-known reference implementation for the algorithms both provide.
"""

import hypothesis.strategies as st
import pytest
from hypothesis import HealthCheck, given, settings

import fuzzymetric as fm

rapidfuzz = pytest.importorskip("rapidfuzz")
from rapidfuzz.distance import OSA, Jaro, Levenshtein  # noqa: E402

# Strategy for ASCII strings
ascii_text = st.text(
    alphabet=st.characters(min_codepoint=32, max_codepoint=126), min_size=0, max_size=50
)

# Strategy for strings with many repeated characters and transpositions
small_alphabet = st.text(alphabet="abcde", min_size=0, max_size=20)

JARO_PAIRS = [
    ("martha", "marhta"),
    ("dwayne", "duane"),
    ("dixon", "dicksonx"),
    ("elephant", "hippo"),
    ("foo", "foo "),
    ("D N H Enterprises Inc", "D &amp; H Enterprises, Inc."),
    ("jellyfish", "smellyfish"),
    ("abc", "xyz"),
]


class TestLevenshteinReference:
    """Test Levenshtein distance against rapidfuzz."""

    @given(ascii_text, ascii_text)
    @settings(max_examples=200, suppress_health_check=[HealthCheck.too_slow])
    def test_levenshtein_matches_rapidfuzz(self, a: str, b: str):
        expected = Levenshtein.distance(a, b)
        actual = fm.levenshtein(a, b)
        assert actual == expected, f"Mismatch for ({a!r}, {b!r}): got {actual}, expected {expected}"

    @given(small_alphabet, small_alphabet, st.integers(min_value=0, max_value=10))
    @settings(max_examples=200)
    def test_bounded_levenshtein_matches_rapidfuzz(self, a: str, b: str, k: int):
        expected = Levenshtein.distance(a, b)
        actual = fm.levenshtein_bounded(a, b, max_distance=k)
        assert actual == (expected if expected <= k else None)

    @given(ascii_text, ascii_text)
    @settings(max_examples=200)
    def test_normalized_matches_rapidfuzz(self, a: str, b: str):
        expected = Levenshtein.normalized_distance(a, b)
        assert fm.Levenshtein().str_normalized(a, b) == pytest.approx(expected)


class TestOptimalStringAlignmentReference:
    """Test restricted Damerau-Levenshtein against rapidfuzz's OSA."""

    @given(small_alphabet, small_alphabet)
    @settings(max_examples=300)
    def test_damerau_matches_osa(self, a: str, b: str):
        expected = OSA.distance(a, b)
        actual = fm.damerau_levenshtein(a, b)
        assert actual == expected, f"Mismatch for ({a!r}, {b!r}): got {actual}, expected {expected}"

    @given(ascii_text, ascii_text)
    @settings(max_examples=200, suppress_health_check=[HealthCheck.too_slow])
    def test_damerau_matches_osa_ascii(self, a: str, b: str):
        assert fm.damerau_levenshtein(a, b) == OSA.distance(a, b)

    @given(small_alphabet, small_alphabet, st.integers(min_value=0, max_value=10))
    @settings(max_examples=200)
    def test_bounded_damerau_matches_osa(self, a: str, b: str, k: int):
        expected = OSA.distance(a, b)
        actual = fm.damerau_levenshtein_bounded(a, b, max_distance=k)
        assert actual == (expected if expected <= k else None)

    def test_restricted_case(self):
        assert fm.damerau_levenshtein("CA", "ABC") == OSA.distance("CA", "ABC") == 3


class TestJaroReference:
    """Test Jaro similarity against rapidfuzz on well-known pairs."""

    @pytest.mark.parametrize("a,b", JARO_PAIRS)
    def test_jaro_matches_rapidfuzz(self, a: str, b: str):
        assert fm.jaro_similarity(a, b) == pytest.approx(Jaro.similarity(a, b), abs=1e-9)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])

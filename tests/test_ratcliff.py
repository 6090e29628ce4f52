"""Tests for Ratcliff/Obershelp pattern matching."""

import pytest

import fuzzymetric as fm
from fuzzymetric import RatcliffObershelp
from fuzzymetric.ratcliff import CommonFragment, longest_common_fragment, matching_elements


class TestLongestCommonFragment:
    """Tests for the longest common contiguous fragment search."""

    def test_run_at_start_of_shorter_input(self):
        assert longest_common_fragment("aaabc", "axaxbcaaa") == CommonFragment(0, 6, 3)

    def test_indices_follow_argument_order(self):
        assert longest_common_fragment("axaxbcaaa", "aaabc") == CommonFragment(6, 0, 3)

    def test_first_found_wins_on_ties(self):
        found = longest_common_fragment("abxcd", "cdyab")
        assert found.length == 2
        assert (found.a_start, found.b_start) == (0, 3)

    def test_no_common_element(self):
        found = longest_common_fragment("abc", "xyz")
        assert found.is_empty
        assert found.length == 0

    def test_empty(self):
        assert longest_common_fragment("", "abc").is_empty

    def test_whole_sequence(self):
        assert longest_common_fragment("abc", "xabcx") == CommonFragment(0, 1, 3)

    def test_generic_sequences(self):
        assert longest_common_fragment([1, 2, 3], [0, 2, 3]) == CommonFragment(1, 1, 2)


class TestMatchingElements:
    """Tests for the recursive match count."""

    def test_identical(self):
        assert matching_elements("abc", "abc") == 3

    def test_wikimedia(self):
        # WIKIM, then IA on the right-hand side
        assert matching_elements("WIKIMEDIA", "WIKIMANIA") == 7

    def test_nothing_in_common(self):
        assert matching_elements("abc", "xyz") == 0
        assert matching_elements("", "xyz") == 0

    def test_shifted_alternating_inputs(self):
        a = "ab" * 200
        b = "ba" * 200
        assert matching_elements(a, b) == 399

    def test_argument_order_does_not_matter(self):
        assert matching_elements("aba", "bca") == matching_elements("bca", "aba") == 2
        assert matching_elements("aabc", "bacac") == matching_elements("bacac", "aabc")


class TestRatcliffObershelp:
    """Tests for the RatcliffObershelp metric."""

    def test_reference_values(self):
        ro = RatcliffObershelp()
        assert ro.str_distance("abandonned", "abandoned") == pytest.approx(0.052632, abs=1e-6)
        assert ro.str_distance("WIKIMEDIA", "WIKIMANIA") == pytest.approx(1 - 14 / 18)

    def test_empty_inputs(self):
        assert RatcliffObershelp().str_distance("", "") == 0.0
        assert RatcliffObershelp().str_distance("", "abc") == 1.0

    def test_identical_and_disjoint(self):
        assert RatcliffObershelp().str_distance("same", "same") == 0.0
        assert RatcliffObershelp().str_distance("abc", "xyz") == 1.0

    def test_symmetric_on_tied_runs(self):
        """Equal-length inputs with competing runs score the same either way round."""
        ro = RatcliffObershelp()
        assert ro.str_distance("aba", "bca") == pytest.approx(1 / 3)
        assert ro.str_distance("bca", "aba") == pytest.approx(1 / 3)

    def test_generic_sequences(self):
        assert RatcliffObershelp().distance([1, 2, 3], [1, 2, 3]) == 0.0
        assert RatcliffObershelp().distance([1, 2, 3, 4], [1, 2]) == pytest.approx(1 - 4 / 6)

    def test_similarity(self):
        assert fm.ratcliff_obershelp_similarity("abandonned", "abandoned") == pytest.approx(18 / 19)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])

"""Ratcliff/Obershelp pattern matching.

The matching elements of two sequences are those of their longest common
contiguous fragment plus, recursively, the matching elements of the regions
left and right of it. The distance is one minus twice the number of matching
elements divided by the total number of elements.

Example:
    >>> round(RatcliffObershelp().str_distance("abandonned", "abandoned"), 6)
    0.052632
"""

from typing import Any, Iterable, NamedTuple, Sequence

from fuzzymetric.metric import Metric
from fuzzymetric.utils import as_sequence


class CommonFragment(NamedTuple):
    """Longest run of equal elements shared by two sequences."""

    #: Start index of the fragment in the first sequence
    a_start: int
    #: Start index of the fragment in the second sequence
    b_start: int
    #: Length of the fragment; 0 means there is no common element
    length: int

    @property
    def is_empty(self) -> bool:
        return self.length == 0


def longest_common_fragment(a: Sequence[Any], b: Sequence[Any]) -> CommonFragment:
    """Find the longest contiguous run of elements shared by ``a`` and ``b``.

    The shorter sequence drives the outer loop (``a`` on equal lengths). Among
    runs of the same length, the first one completed in that scan wins.
    Indices in the result always refer to ``a`` and ``b`` as passed.
    """
    if len(a) > len(b):
        found = _longest_run(b, a)
        return CommonFragment(found.b_start, found.a_start, found.length)
    return _longest_run(a, b)


def _longest_run(outer: Sequence[Any], inner: Sequence[Any]) -> CommonFragment:
    # run[j] is the length of the common run ending at the current element of outer and inner[j]
    run = [0] * len(inner)
    a_start = b_start = best = 0
    for a_idx, c1 in enumerate(outer):
        diagonal = 0
        for b_idx, c2 in enumerate(inner):
            above = run[b_idx]
            if c1 == c2:
                length = diagonal + 1
                run[b_idx] = length
                if length > best:
                    best = length
                    a_start = a_idx + 1 - length
                    b_start = b_idx + 1 - length
            else:
                run[b_idx] = 0
            diagonal = above
    return CommonFragment(a_start, b_start, best)


def _count_matches(outer: Sequence[Any], inner: Sequence[Any]) -> int:
    total = 0
    # regions still to match, walked with an explicit stack instead of recursion
    pending = [(outer, inner)]
    while pending:
        left, right = pending.pop()
        if not left or not right:
            continue
        # sub-regions keep the scan orientation of the full inputs
        found = _longest_run(left, right)
        if found.is_empty:
            continue
        total += found.length
        pending.append((left[: found.a_start], right[: found.b_start]))
        pending.append(
            (left[found.a_start + found.length :], right[found.b_start + found.length :])
        )
    return total


def matching_elements(a: Sequence[Any], b: Sequence[Any]) -> int:
    """Number of elements matched by the Ratcliff/Obershelp decomposition.

    The shorter input is scanned in the outer loop at every level of the
    decomposition. For inputs of equal length both orientations are tried
    and the larger count wins, so the result does not depend on argument
    order.
    """
    a = as_sequence(a)
    b = as_sequence(b)
    if len(a) < len(b):
        return _count_matches(a, b)
    if len(a) > len(b):
        return _count_matches(b, a)
    return max(_count_matches(a, b), _count_matches(b, a))


class RatcliffObershelp(Metric[float]):
    """Ratcliff/Obershelp distance, 0.0 for two empty inputs."""

    __slots__ = ()

    def distance(self, a: Iterable[Any], b: Iterable[Any]) -> float:
        a = as_sequence(a)
        b = as_sequence(b)
        total_len = len(a) + len(b)
        if total_len == 0:
            return 0.0
        return 1.0 - 2.0 * matching_elements(a, b) / total_len

    def normalized(self, a: Iterable[Any], b: Iterable[Any]) -> float:
        return self.distance(a, b)


__all__ = [
    "CommonFragment",
    "longest_common_fragment",
    "matching_elements",
    "RatcliffObershelp",
]

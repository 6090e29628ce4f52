"""Edit distances: Levenshtein and restricted Damerau-Levenshtein.

Both metrics strip the common prefix and suffix first and then run a dynamic
program over the distinct middle parts, keeping only the rolling rows it needs
(memory proportional to the shorter input). Both accept an optional
``max_distance``: once the distance is known to exceed it, computation stops
and :class:`~fuzzymetric.results.Exceeded` is returned instead of
:class:`~fuzzymetric.results.Exact`.

Example:
    >>> Levenshtein().str_distance("kitten", "sitting")
    Exact(3)
    >>> Levenshtein.with_max_distance(2).str_distance("kitten", "sitting")
    Exceeded(2)
    >>> DamerauLevenshtein().str_distance("jellyifhs", "jellyfish")
    Exact(2)
"""

from typing import Any, Iterable, Optional

from fuzzymetric.exceptions import ValidationError
from fuzzymetric.metric import Metric
from fuzzymetric.results import DistanceValue, Exact, Exceeded
from fuzzymetric.utils import as_sequence, order_by_len_asc, trim_affix


def _validate_max_distance(max_distance: Optional[int]) -> Optional[int]:
    if max_distance is None:
        return None
    if isinstance(max_distance, bool) or not isinstance(max_distance, int):
        raise ValidationError(
            f"max_distance must be a non-negative integer or None, got {max_distance!r}"
        )
    if max_distance < 0:
        raise ValidationError(f"max_distance must be non-negative, got {max_distance}")
    return max_distance


class _EditDistance(Metric[DistanceValue]):
    """Shared configuration and normalization of the edit distances."""

    order_sensitive = True

    __slots__ = ("max_distance",)

    def __init__(self, max_distance: Optional[int] = None):
        """
        Args:
            max_distance: The maximum edit distance of interest. Distances
                above it are reported as ``Exceeded(max_distance)`` and their
                exact evaluation is cut short.

        Raises:
            ValidationError: If max_distance is negative or not an integer.
        """
        self._init(max_distance=_validate_max_distance(max_distance))

    @classmethod
    def with_max_distance(cls, max_distance: int):
        return cls(max_distance=max_distance)

    def _bounded(self, dist: int) -> DistanceValue:
        if self.max_distance is not None and dist > self.max_distance:
            return Exceeded(self.max_distance)
        return Exact(dist)

    def normalized(self, a: Iterable[Any], b: Iterable[Any]) -> float:
        return normalized_levenshtein(self, a, b)


class Levenshtein(_EditDistance):
    """Minimum number of insertions, deletions and substitutions."""

    __slots__ = ()

    def distance(self, a: Iterable[Any], b: Iterable[Any]) -> DistanceValue:
        trim = trim_affix(a, b)
        short, long = order_by_len_asc(trim.distinct_a, trim.distinct_b)

        if not short:
            # the longer one starts and/or ends with the shorter one
            return self._bounded(len(long))

        max_dist = self.max_distance
        if max_dist is not None and len(long) - len(short) > max_dist:
            return Exceeded(max_dist)

        # cache[j] holds the cost for short[:j + 1] against the processed part of long
        cache = list(range(1, len(short) + 1))
        result = 0
        for long_idx, c_long in enumerate(long):
            diagonal = long_idx
            result = long_idx + 1
            row_min = result
            for short_idx, c_short in enumerate(short):
                above = cache[short_idx]
                result = min(result + 1, above + 1, diagonal + (c_long != c_short))
                diagonal = above
                cache[short_idx] = result
                if result < row_min:
                    row_min = result
            if max_dist is not None and row_min > max_dist:
                return Exceeded(max_dist)

        return self._bounded(result)


class DamerauLevenshtein(_EditDistance):
    """Restricted Damerau-Levenshtein (optimal string alignment) distance.

    Adjacent transpositions count as a single edit, but no substring is edited
    more than once. This differs from unrestricted Damerau-Levenshtein: "CA"
    to "ABC" is 2 with unrestricted transpositions and 3 here.

    With a ``max_distance`` only a diagonal band of width ``2 * max_distance + 1``
    is evaluated; cells outside the band can never lead to a distance within
    the bound. See http://blog.softwx.net/2015/01/optimizing-damerau-levenshtein_15.html
    """

    __slots__ = ()

    def distance(self, a: Iterable[Any], b: Iterable[Any]) -> DistanceValue:
        trim = trim_affix(a, b)
        short, long = order_by_len_asc(trim.distinct_a, trim.distinct_b)
        short_len = len(short)
        long_len = len(long)

        if not short_len:
            return self._bounded(long_len)

        max_dist = self.max_distance
        if max_dist is not None and long_len - short_len > max_dist:
            return Exceeded(max_dist)

        # long_len is an upper bound of the distance, so capping there is exact
        cap = long_len if max_dist is None else min(max_dist, long_len)
        # every cell is stored as min(true cost, cap + 1)
        over = cap + 1

        # two rows back, one row back and the current row
        before_prev = [over] * (short_len + 1)
        prev = [min(j, over) for j in range(short_len + 1)]
        for i in range(1, long_len + 1):
            c_long = long[i - 1]
            current = [over] * (short_len + 1)
            current[0] = min(i, over)
            start = max(1, i - cap)
            end = min(short_len, i + cap)
            for j in range(start, end + 1):
                c_short = short[j - 1]
                if c_long == c_short:
                    cost = prev[j - 1]
                else:
                    cost = min(prev[j - 1], prev[j], current[j - 1]) + 1
                    if (
                        i > 1
                        and j > 1
                        and c_long == short[j - 2]
                        and long[i - 2] == c_short
                        and before_prev[j - 2] + 1 < cost
                    ):
                        # transposition
                        cost = before_prev[j - 2] + 1
                current[j] = cost if cost < over else over
            if max_dist is not None and min(current) > max_dist:
                return Exceeded(max_dist)
            before_prev, prev = prev, current

        return self._bounded(prev[short_len])


def normalized_levenshtein(metric: _EditDistance, a: Iterable[Any], b: Iterable[Any]) -> float:
    """``distance / max(len(a), len(b))``; 0.0 for two empty inputs.

    A distance that exceeded the metric's bound normalizes to 1.0.
    """
    a = as_sequence(a)
    b = as_sequence(b)
    longest = max(len(a), len(b))
    if longest == 0:
        return 0.0
    dist = metric.distance(a, b)
    if not dist.is_exact:
        return 1.0
    return dist.value / longest


__all__ = ["Levenshtein", "DamerauLevenshtein", "normalized_levenshtein"]

"""Jaro distance."""

from typing import Any, Iterable

from fuzzymetric.metric import Metric
from fuzzymetric.utils import as_sequence


class Jaro(Metric[float]):
    """Jaro distance, ``1 - jaro_similarity``.

    Elements match when they are equal and no further apart than half the
    longer length minus one. The generic :meth:`distance` expects the shorter
    sequence first; :meth:`str_distance` takes care of that.

    Example:
        >>> round(Jaro().str_distance("martha", "marhta"), 6)
        0.055556
    """

    order_sensitive = True

    __slots__ = ()

    def distance(self, a: Iterable[Any], b: Iterable[Any]) -> float:
        s1 = as_sequence(a)
        s2 = as_sequence(b)
        s1_len = len(s1)
        s2_len = len(s2)

        if s1_len + s2_len == 0:
            return 0.0
        if min(s1_len, s2_len) == 0:
            return 1.0
        if s1_len + s2_len == 2:
            return 0.0 if s1[0] == s2[0] else 1.0

        window = max(max(s1_len, s2_len) // 2 - 1, 0)
        s1_flags = [False] * s1_len
        s2_flags = [False] * s2_len
        matches = 0

        for i, c1 in enumerate(s1):
            start = max(0, i - window)
            end = min(i + window + 1, s2_len)
            for j in range(start, end):
                if not s2_flags[j] and c1 == s2[j]:
                    s1_flags[i] = True
                    s2_flags[j] = True
                    matches += 1
                    break

        if matches == 0:
            return 1.0

        transpositions = 0.0
        k = 0
        for i, c1 in enumerate(s1):
            if not s1_flags[i]:
                continue
            while not s2_flags[k]:
                k += 1
            if c1 != s2[k]:
                transpositions += 0.5
            k += 1

        m = float(matches)
        return 1.0 - (m / s1_len + m / s2_len + (m - transpositions) / m) / 3.0

    def normalized(self, a: Iterable[Any], b: Iterable[Any]) -> float:
        return self.distance(a, b)


__all__ = ["Jaro"]

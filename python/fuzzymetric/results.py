"""Result types returned by fuzzymetric metrics."""

from dataclasses import dataclass
from functools import total_ordering
from typing import List, Optional


@total_ordering
class DistanceValue:
    """Result of a bounded edit distance.

    Either :class:`Exact` (the distance is known) or :class:`Exceeded` (the
    distance is known to be larger than the carried bound). Both convert to
    the carried number with ``int()`` and ``float()``.

    Values are ordered by ``(value, exceeded)``, so ``Exceeded(k)`` sorts
    after ``Exact(k)`` and before ``Exact(k + 1)``. Plain integers compare like
    :class:`Exact` values, so ``Exact(3) == 3`` while ``Exceeded(3) != 3``.
    """

    __slots__ = ("_value",)

    is_exact: bool = True

    def __init__(self, value: int):
        self._value = int(value)

    @property
    def value(self) -> int:
        return self._value

    def _key(self):
        return (self._value, not self.is_exact)

    def __int__(self) -> int:
        return self._value

    def __index__(self) -> int:
        return self._value

    def __float__(self) -> float:
        return float(self._value)

    @staticmethod
    def _other_key(other: object):
        if isinstance(other, DistanceValue):
            return other._key()
        if isinstance(other, int):
            # a plain number stands for an exact distance
            return (other, False)
        return None

    def __eq__(self, other: object) -> bool:
        key = self._other_key(other)
        if key is None:
            return NotImplemented
        return self._key() == key

    def __lt__(self, other: object) -> bool:
        key = self._other_key(other)
        if key is None:
            return NotImplemented
        return self._key() < key

    def __hash__(self) -> int:
        if self.is_exact:
            return hash(self._value)
        return hash(self._key())

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._value})"


class Exact(DistanceValue):
    """The exact distance."""

    __slots__ = ()

    is_exact = True


class Exceeded(DistanceValue):
    """The distance is larger than ``bound``; the exact value is unknown."""

    __slots__ = ()

    is_exact = False

    @property
    def bound(self) -> int:
        return self._value


@dataclass(frozen=True)
class MatchResult:
    """Result from batch operations.

    Attributes:
        text: The compared text
        score: Similarity score (0.0-1.0)
        id: Index of ``text`` in the input list
    """

    text: str
    score: float
    id: Optional[int] = None


@dataclass(frozen=True)
class DeduplicationResult:
    """Duplicate groups found by :func:`fuzzymetric.batch.deduplicate`.

    Attributes:
        groups: Groups of similar strings, each in input order
        unique: Strings without any duplicate
        total_duplicates: Number of strings that belong to a group
    """

    groups: List[List[str]]
    unique: List[str]
    total_duplicates: int


__all__ = ["DistanceValue", "Exact", "Exceeded", "MatchResult", "DeduplicationResult"]

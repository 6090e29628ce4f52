"""Q-gram family: QGram, Cosine, Jaccard, Sorensen-Dice and Overlap.

All metrics in this module cut both inputs into overlapping fragments of
length ``q`` (a window advancing one element at a time), count how often every
distinct fragment occurs in each input, and derive their distance from those
paired counts.

Fragments are collected in a hash map, so construction is linear in the input
length. Sequence elements therefore have to be hashable (characters always
are).

Example:
    >>> list(qgrams("hello", 2))
    ['he', 'el', 'll', 'lo']
    >>> QGram(2).str_distance("abcd", "abce")
    2
    >>> SorensenDice(2).str_distance("nacht", "night")
    0.75
"""

import math
from collections import Counter
from collections.abc import Iterator
from typing import Any, Dict, Hashable, Iterable, Optional, Sequence, Tuple

from fuzzymetric.exceptions import ValidationError
from fuzzymetric.metric import Metric
from fuzzymetric.utils import as_sequence, sequences_equal

#: Paired occurrence counts of every distinct fragment: fragment -> (count in a, count in b)
FragmentCounts = Dict[Hashable, Tuple[int, int]]


def _validate_q(q: int) -> int:
    if isinstance(q, bool) or not isinstance(q, int):
        raise ValidationError(f"q must be a positive integer, got {q!r}")
    if q < 1:
        raise ValidationError(f"q must be at least 1, got {q}")
    return q


class QGramIter(Iterator):
    """Iterator over all fragments of length ``chunk_size``.

    Behaves like slicing into chunks, except that the start index only
    advances by one each step. A chunk size larger than the sequence yields
    nothing. String inputs produce string fragments, anything else produces
    tuples.

    Raises:
        ValidationError: If chunk_size is not a positive integer.
    """

    def __init__(self, items: Sequence[Any], chunk_size: int):
        self._items = as_sequence(items)
        self._chunk_size = _validate_q(chunk_size)
        self._index = 0
        self._as_tuple = not isinstance(self._items, str)

    def __iter__(self) -> "QGramIter":
        return self

    def __next__(self):
        end = self._index + self._chunk_size
        if end > len(self._items):
            raise StopIteration
        fragment = self._items[self._index : end]
        self._index += 1
        return tuple(fragment) if self._as_tuple else fragment

    def __len__(self) -> int:
        return max(0, len(self._items) + 1 - self._chunk_size - self._index)

    def __length_hint__(self) -> int:
        return len(self)


def qgrams(items: Sequence[Any], q: int) -> QGramIter:
    """All contiguous fragments of length ``q`` of ``items``, in order."""
    return QGramIter(items, q)


def fragment_counts(a: Sequence[Any], b: Sequence[Any], q: int) -> FragmentCounts:
    """Reconcile the q-gram multisets of ``a`` and ``b`` into paired counts.

    Fragments only present in ``a`` map to ``(count_a, 0)``, fragments only in
    ``b`` to ``(0, count_b)``.
    """
    counts_a = Counter(qgrams(a, q))
    counts_b = Counter(qgrams(b, q))
    paired = {fragment: (n, counts_b.get(fragment, 0)) for fragment, n in counts_a.items()}
    for fragment, n in counts_b.items():
        if fragment not in counts_a:
            paired[fragment] = (0, n)
    return paired


class _QGramMetric(Metric):
    __slots__ = ("q",)

    def __init__(self, q: int = 2):
        """
        Args:
            q: Length of a fragment.

        Raises:
            ValidationError: If q is not a positive integer.
        """
        self._init(q=_validate_q(q))

    def _short_circuit(self, a: Sequence[Any], b: Sequence[Any]) -> Optional[float]:
        """0.0 or 1.0 by plain equality when the shorter input has at most ``q`` elements."""
        if min(len(a), len(b)) <= self.q:
            return 0.0 if sequences_equal(a, b) else 1.0
        return None


class QGram(_QGramMetric):
    """Sum of absolute differences of the q-gram occurrence counts.

    The distance is the L1 norm ``||v(a, q) - v(b, q)||`` where ``v(s, q)``
    counts how often each fragment of length ``q`` appears in ``s``.
    """

    __slots__ = ()

    def distance(self, a: Iterable[Any], b: Iterable[Any]) -> int:
        counts = fragment_counts(as_sequence(a), as_sequence(b), self.q)
        return sum(abs(n_a - n_b) for n_a, n_b in counts.values())

    def normalized(self, a: Iterable[Any], b: Iterable[Any]) -> float:
        """Distance divided by the total number of fragments of both inputs."""
        a = as_sequence(a)
        b = as_sequence(b)
        shortcut = self._short_circuit(a, b)
        if shortcut is not None:
            return shortcut
        return self.distance(a, b) / (len(a) + len(b) - 2 * self.q + 2)


class _FragmentSetMetric(_QGramMetric):
    """Metrics that are already normalized and share the short-input rule."""

    __slots__ = ()

    def distance(self, a: Iterable[Any], b: Iterable[Any]) -> float:
        a = as_sequence(a)
        b = as_sequence(b)
        shortcut = self._short_circuit(a, b)
        if shortcut is not None:
            return shortcut
        return self._from_counts(fragment_counts(a, b, self.q))

    def normalized(self, a: Iterable[Any], b: Iterable[Any]) -> float:
        return self.distance(a, b)

    def _from_counts(self, counts: FragmentCounts) -> float:
        raise NotImplementedError

    @staticmethod
    def _sizes(counts: FragmentCounts) -> Tuple[int, int, int]:
        """Number of distinct fragments in a, in b, and in both."""
        distinct_a = distinct_b = shared = 0
        for n_a, n_b in counts.values():
            distinct_a += n_a > 0
            distinct_b += n_b > 0
            shared += n_a > 0 and n_b > 0
        return distinct_a, distinct_b, shared


class Cosine(_FragmentSetMetric):
    """``1 - cos`` of the angle between the q-gram count vectors."""

    __slots__ = ()

    def _from_counts(self, counts: FragmentCounts) -> float:
        dot = norm_a = norm_b = 0
        for n_a, n_b in counts.values():
            dot += n_a * n_b
            norm_a += n_a * n_a
            norm_b += n_b * n_b
        # integer product keeps sqrt exact for identical inputs
        return max(0.0, 1.0 - dot / math.sqrt(norm_a * norm_b))


class Jaccard(_FragmentSetMetric):
    """``1 - |A & B| / |A | B|`` over the sets of distinct fragments."""

    __slots__ = ()

    def _from_counts(self, counts: FragmentCounts) -> float:
        _, _, shared = self._sizes(counts)
        return 1.0 - shared / len(counts)


class SorensenDice(_FragmentSetMetric):
    """``1 - 2 |A & B| / (|A| + |B|)`` over the sets of distinct fragments."""

    __slots__ = ()

    def _from_counts(self, counts: FragmentCounts) -> float:
        distinct_a, distinct_b, shared = self._sizes(counts)
        return 1.0 - 2.0 * shared / (distinct_a + distinct_b)


class Overlap(_FragmentSetMetric):
    """``1 - |A & B| / min(|A|, |B|)`` over the sets of distinct fragments."""

    __slots__ = ()

    def _from_counts(self, counts: FragmentCounts) -> float:
        distinct_a, distinct_b, shared = self._sizes(counts)
        return 1.0 - shared / min(distinct_a, distinct_b)


__all__ = [
    "QGramIter",
    "qgrams",
    "fragment_counts",
    "FragmentCounts",
    "QGram",
    "Cosine",
    "Jaccard",
    "SorensenDice",
    "Overlap",
]

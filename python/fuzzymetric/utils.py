"""Sequence helpers shared by the metric engines.

The affix trimmer strips the leading and trailing elements two sequences have
in common. Edit distances only depend on the distinct middle parts, so the
engines run their dynamic programs over those.

Example:
    >>> trim = trim_affix("hungry kitten", "hungry hippo")
    >>> trim.prefix_len, trim.suffix_len
    (7, 0)
    >>> trim.distinct_a, trim.distinct_b
    ('kitten', 'hippo')
"""

from dataclasses import dataclass
from itertools import islice
from typing import Any, Iterable, Sequence, Tuple


def as_sequence(items: Iterable[Any]) -> Sequence[Any]:
    """Return ``items`` as a sequence that can be indexed and iterated again.

    Strings, lists and tuples are returned unchanged; any other iterable is
    materialized once into a tuple.
    """
    if isinstance(items, (str, list, tuple)):
        return items
    return tuple(items)


def order_by_len_asc(a: Sequence[Any], b: Sequence[Any]) -> Tuple[Sequence[Any], Sequence[Any]]:
    """Return the pair with the shorter sequence first.

    Equal lengths keep the original order.
    """
    if len(a) <= len(b):
        return a, b
    return b, a


def count_eq(a: Iterable[Any], b: Iterable[Any]) -> int:
    """Count equal leading elements of two iterables."""
    count = 0
    for x, y in zip(a, b):
        if x != y:
            break
        count += 1
    return count


def sequences_equal(a: Sequence[Any], b: Sequence[Any]) -> bool:
    """Element-wise equality, also across sequence types (``"ab"`` vs ``['a', 'b']``)."""
    return len(a) == len(b) and count_eq(a, b) == len(a)


@dataclass(frozen=True)
class AffixTrim:
    """Common prefix/suffix of two sequences and their distinct middle parts."""

    # Elements both sequences share at their beginning.
    prefix_len: int
    # Elements both sequences share at their end.
    suffix_len: int
    distinct_a: Sequence[Any]
    distinct_b: Sequence[Any]

    @property
    def len_a(self) -> int:
        return len(self.distinct_a)

    @property
    def len_b(self) -> int:
        return len(self.distinct_b)

    @property
    def common(self) -> int:
        return self.prefix_len + self.suffix_len

    @property
    def remaining(self) -> Tuple[int, int]:
        return self.len_a, self.len_b

    @property
    def is_eq(self) -> bool:
        """Whether both sequences are identical."""
        return self.remaining == (0, 0)


def trim_affix(a: Sequence[Any], b: Sequence[Any]) -> AffixTrim:
    """Split off the common suffix, then the common prefix of what is left.

    The suffix is measured first, over the full sequences. The prefix is
    measured on the sequences truncated by that suffix, so the two never
    overlap. If the common parts consume one side entirely, its distinct length
    is 0 and the other side's distinct length is the edit distance.
    """
    a = as_sequence(a)
    b = as_sequence(b)
    suffix_len = count_eq(reversed(a), reversed(b))
    end_a = len(a) - suffix_len
    end_b = len(b) - suffix_len
    prefix_len = count_eq(islice(a, end_a), islice(b, end_b))
    return AffixTrim(
        prefix_len=prefix_len,
        suffix_len=suffix_len,
        distinct_a=a[prefix_len:end_a],
        distinct_b=b[prefix_len:end_b],
    )


__all__ = [
    "AffixTrim",
    "as_sequence",
    "count_eq",
    "order_by_len_asc",
    "sequences_equal",
    "trim_affix",
]

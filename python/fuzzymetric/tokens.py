"""Word-level modifiers: TokenSet and TokenSort.

Both split their string inputs on whitespace and hand rearranged word lists,
joined by single spaces, to an inner metric. Inputs that are not strings
have no words, so they are passed to the inner metric unchanged.

See http://chairnerd.seatgeek.com/fuzzywuzzy-fuzzy-string-matching-in-python/

Example:
    >>> TokenSet(RatcliffObershelp()).str_distance(
    ...     "Real Madrid vs FC Barcelona", "Barcelona vs Real Madrid"
    ... )
    0.0
    >>> TokenSort(Levenshtein()).str_distance("new york mets", "mets new york")
    Exact(0)
"""

from typing import Any, Iterable, List

from fuzzymetric.metric import Metric


def _unique_words(text: str) -> List[str]:
    return sorted(set(text.split()))


class TokenSet(Metric):
    """Compares the shared words of two strings with each full word set.

    Each input is reduced to its sorted, deduplicated words. Without any
    shared word the inner metric sees the raw inputs. Otherwise the result is
    the smallest inner distance among (shared, words of a),
    (shared, words of b) and (words of a, words of b).
    """

    __slots__ = ("inner",)

    def __init__(self, inner: Metric):
        self._init(inner=inner)

    def _best(self, a, b, measure):
        if not isinstance(a, str) or not isinstance(b, str):
            return measure(a, b)

        words_a = _unique_words(a)
        words_b = _unique_words(b)
        in_a = set(words_a)
        shared = [word for word in words_b if word in in_a]
        if not shared:
            return measure(a, b)

        joined_shared = " ".join(shared)
        joined_a = " ".join(words_a)
        joined_b = " ".join(words_b)
        return min(
            measure(joined_shared, joined_a),
            measure(joined_shared, joined_b),
            measure(joined_a, joined_b),
        )

    def distance(self, a: Iterable[Any], b: Iterable[Any]):
        return self._best(a, b, self.inner.str_distance)

    def normalized(self, a: Iterable[Any], b: Iterable[Any]) -> float:
        return self._best(a, b, self.inner.str_normalized)


class TokenSort(Metric):
    """Sorts the words of both strings before comparing them."""

    __slots__ = ("inner",)

    def __init__(self, inner: Metric):
        self._init(inner=inner)

    def _sorted(self, a, b, measure):
        if not isinstance(a, str) or not isinstance(b, str):
            return measure(a, b)
        return measure(" ".join(sorted(a.split())), " ".join(sorted(b.split())))

    def distance(self, a: Iterable[Any], b: Iterable[Any]):
        return self._sorted(a, b, self.inner.str_distance)

    def normalized(self, a: Iterable[Any], b: Iterable[Any]) -> float:
        return self._sorted(a, b, self.inner.str_normalized)


__all__ = ["TokenSet", "TokenSort"]

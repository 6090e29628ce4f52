"""Function-style convenience API.

Every function builds the matching metric and applies its string form, so
order-sensitive metrics always see the shorter string first. Similarities are
``1 - normalized distance`` (1.0 = identical).

Example:
    >>> import fuzzymetric as fm
    >>> fm.levenshtein("kitten", "sitting")
    3
    >>> fm.levenshtein_bounded("kitten", "sitting", max_distance=2) is None
    True
    >>> round(fm.jaro_winkler_similarity("martha", "marhta"), 6)
    0.961111
"""

from typing import Optional, Union

from fuzzymetric.enums import Algorithm
from fuzzymetric.jaro import Jaro
from fuzzymetric.levenshtein import DamerauLevenshtein, Levenshtein
from fuzzymetric.metric import Metric
from fuzzymetric.modifiers import Partial, Winkler, WinklerConfig
from fuzzymetric.qgram import Cosine, Jaccard, Overlap, QGram, SorensenDice
from fuzzymetric.ratcliff import RatcliffObershelp
from fuzzymetric.tokens import TokenSet, TokenSort
from fuzzymetric._utils import get_metric


def strdistance(a: str, b: str, metric: Union[str, Algorithm, Metric]):
    """Distance between two strings under ``metric`` (an instance or an algorithm name)."""
    return get_metric(metric).str_distance(a, b)


def strcompare(a: str, b: str, metric: Union[str, Algorithm, Metric]) -> float:
    """Normalized similarity between two strings under ``metric``."""
    return get_metric(metric).str_similarity(a, b)


def _edit_distance(metric, a: str, b: str, max_distance: Optional[int]) -> int:
    dist = metric.str_distance(a, b)
    if dist.is_exact:
        return dist.value
    # past the bound only a lower limit is known
    return max_distance + 1


def levenshtein(a: str, b: str, max_distance: Optional[int] = None) -> int:
    """Levenshtein distance.

    Args:
        a: First string
        b: Second string
        max_distance: If given and exceeded, ``max_distance + 1`` is returned
            and the computation stops early.
    """
    return _edit_distance(Levenshtein(max_distance), a, b, max_distance)


def levenshtein_bounded(a: str, b: str, max_distance: int) -> Optional[int]:
    """Levenshtein distance, or None if it exceeds ``max_distance``."""
    dist = Levenshtein(max_distance).str_distance(a, b)
    return dist.value if dist.is_exact else None


def levenshtein_similarity(a: str, b: str) -> float:
    return Levenshtein().str_similarity(a, b)


def damerau_levenshtein(a: str, b: str, max_distance: Optional[int] = None) -> int:
    """Restricted Damerau-Levenshtein (optimal string alignment) distance.

    Args:
        a: First string
        b: Second string
        max_distance: If given and exceeded, ``max_distance + 1`` is returned
            and the computation stops early.
    """
    return _edit_distance(DamerauLevenshtein(max_distance), a, b, max_distance)


def damerau_levenshtein_bounded(a: str, b: str, max_distance: int) -> Optional[int]:
    """Restricted Damerau-Levenshtein distance, or None if it exceeds ``max_distance``."""
    dist = DamerauLevenshtein(max_distance).str_distance(a, b)
    return dist.value if dist.is_exact else None


def damerau_levenshtein_similarity(a: str, b: str) -> float:
    return DamerauLevenshtein().str_similarity(a, b)


def jaro_similarity(a: str, b: str) -> float:
    return Jaro().str_similarity(a, b)


def jaro_winkler_similarity(
    a: str,
    b: str,
    prefix_weight: float = 0.1,
    threshold: float = 0.7,
    max_prefix: int = 4,
) -> float:
    """Jaro-Winkler similarity.

    Args:
        a: First string
        b: Second string
        prefix_weight: Boost per common prefix character
        threshold: Jaro similarity needed before the boost applies
        max_prefix: Maximum number of prefix characters rewarded

    Raises:
        ValidationError: If ``prefix_weight * max_prefix > 1`` or threshold
            is outside [0, 1].
    """
    config = WinklerConfig(scaling=prefix_weight, threshold=threshold, max_prefix=max_prefix)
    return Winkler(Jaro(), config).str_similarity(a, b)


def qgram_distance(a: str, b: str, q: int = 2) -> int:
    """Sum of the differences of the q-gram occurrence counts."""
    return QGram(q).str_distance(a, b)


def cosine_similarity(a: str, b: str, q: int = 2) -> float:
    return Cosine(q).str_similarity(a, b)


def jaccard_similarity(a: str, b: str, q: int = 2) -> float:
    return Jaccard(q).str_similarity(a, b)


def sorensen_dice_similarity(a: str, b: str, q: int = 2) -> float:
    return SorensenDice(q).str_similarity(a, b)


def overlap_similarity(a: str, b: str, q: int = 2) -> float:
    return Overlap(q).str_similarity(a, b)


def ratcliff_obershelp_similarity(a: str, b: str) -> float:
    return RatcliffObershelp().str_similarity(a, b)


def token_set_ratio(a: str, b: str, metric: Union[str, Algorithm, Metric, None] = None) -> float:
    """Similarity of the word sets, Ratcliff/Obershelp based unless ``metric`` is given."""
    inner = RatcliffObershelp() if metric is None else get_metric(metric)
    return TokenSet(inner).str_similarity(a, b)


def token_sort_ratio(a: str, b: str, metric: Union[str, Algorithm, Metric, None] = None) -> float:
    """Similarity after sorting the words, Ratcliff/Obershelp based unless ``metric`` is given."""
    inner = RatcliffObershelp() if metric is None else get_metric(metric)
    return TokenSort(inner).str_similarity(a, b)


def partial_ratio(a: str, b: str, metric: Union[str, Algorithm, Metric, None] = None) -> float:
    """Similarity of the best aligned substring, Ratcliff/Obershelp based unless ``metric`` is given."""
    inner = RatcliffObershelp() if metric is None else get_metric(metric)
    return Partial(inner).str_similarity(a, b)


__all__ = [
    "strdistance",
    "strcompare",
    "levenshtein",
    "levenshtein_bounded",
    "levenshtein_similarity",
    "damerau_levenshtein",
    "damerau_levenshtein_bounded",
    "damerau_levenshtein_similarity",
    "jaro_similarity",
    "jaro_winkler_similarity",
    "qgram_distance",
    "cosine_similarity",
    "jaccard_similarity",
    "sorensen_dice_similarity",
    "overlap_similarity",
    "ratcliff_obershelp_similarity",
    "token_set_ratio",
    "token_sort_ratio",
    "partial_ratio",
]

"""Enums for fuzzymetric API."""

from enum import Enum


class Algorithm(str, Enum):
    """Built-in metrics selectable by name.

    This enum provides type-safe algorithm selection for the batch and Polars
    helpers. String values are accepted wherever an Algorithm is.

    Example:
        >>> from fuzzymetric import Algorithm, batch
        >>> matches = batch.best_matches(
        ...     ["apple", "apply", "banana"],
        ...     "appel",
        ...     algorithm=Algorithm.JARO_WINKLER,
        ...     limit=2
        ... )
    """

    LEVENSHTEIN = "levenshtein"
    """Classic edit distance (insertions, deletions, substitutions)"""

    DAMERAU_LEVENSHTEIN = "damerau_levenshtein"
    """Restricted edit distance including adjacent transpositions"""

    JARO = "jaro"
    """Jaro similarity, good for short strings"""

    JARO_WINKLER = "jaro_winkler"
    """Jaro with a bonus for a common prefix, excellent for names"""

    QGRAM = "qgram"
    """Difference of bigram occurrence counts"""

    COSINE = "cosine"
    """Cosine of the bigram count vectors"""

    JACCARD = "jaccard"
    """Jaccard index of the bigram sets"""

    SORENSEN_DICE = "sorensen_dice"
    """Sorensen-Dice coefficient of the bigram sets"""

    OVERLAP = "overlap"
    """Overlap coefficient of the bigram sets"""

    RATCLIFF_OBERSHELP = "ratcliff_obershelp"
    """Gestalt pattern matching (recursive longest common substrings)"""


__all__ = ["Algorithm"]

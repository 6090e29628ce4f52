"""
fuzzymetric - String and sequence similarity metrics

Edit distances, Jaro/Winkler, q-gram set metrics and Ratcliff/Obershelp,
plus modifiers that adapt any metric to word-level or substring-level
comparison. Metrics work on any sequences of comparable elements, not just
strings.

Example usage:
    >>> import fuzzymetric as fm

    # Metric objects
    >>> fm.Levenshtein().str_distance("kitten", "sitting")
    Exact(3)
    >>> fm.Levenshtein.with_max_distance(2).str_distance("kitten", "sitting")
    Exceeded(2)
    >>> fm.SorensenDice(q=2).str_distance("nacht", "night")
    0.75

    # Composition
    >>> fm.TokenSet(fm.RatcliffObershelp()).str_distance(
    ...     "Real Madrid vs FC Barcelona", "Barcelona vs Real Madrid"
    ... )
    0.0

    # Function API
    >>> fm.levenshtein("kitten", "sitting")
    3
    >>> round(fm.jaro_winkler_similarity("martha", "marhta"), 4)
    0.9611
"""

import logging
from importlib.metadata import version as _get_version

# Register the .strsim expression namespace
import fuzzymetric.expr  # noqa: F401
from fuzzymetric import batch
from fuzzymetric._utils import get_metric, normalize_algorithm
from fuzzymetric.enums import Algorithm
from fuzzymetric.exceptions import AlgorithmError, FuzzyMetricError, ValidationError
from fuzzymetric.functions import (
    cosine_similarity,
    damerau_levenshtein,
    damerau_levenshtein_bounded,
    damerau_levenshtein_similarity,
    jaccard_similarity,
    jaro_similarity,
    jaro_winkler_similarity,
    levenshtein,
    levenshtein_bounded,
    levenshtein_similarity,
    overlap_similarity,
    partial_ratio,
    qgram_distance,
    ratcliff_obershelp_similarity,
    sorensen_dice_similarity,
    strcompare,
    strdistance,
    token_set_ratio,
    token_sort_ratio,
)
from fuzzymetric.jaro import Jaro
from fuzzymetric.levenshtein import DamerauLevenshtein, Levenshtein
from fuzzymetric.metric import Metric
from fuzzymetric.modifiers import Partial, Winkler, WinklerConfig
from fuzzymetric.polars_api import batch_best_match, batch_similarity
from fuzzymetric.qgram import Cosine, Jaccard, Overlap, QGram, SorensenDice, qgrams
from fuzzymetric.ratcliff import RatcliffObershelp
from fuzzymetric.results import DeduplicationResult, DistanceValue, Exact, Exceeded, MatchResult
from fuzzymetric.tokens import TokenSet, TokenSort
from fuzzymetric.utils import trim_affix

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = _get_version("fuzzymetric")
__all__ = [
    # Version
    "__version__",
    # Custom exceptions
    "FuzzyMetricError",
    "ValidationError",
    "AlgorithmError",
    # Result types
    "DistanceValue",
    "Exact",
    "Exceeded",
    "MatchResult",
    "DeduplicationResult",
    # Enums
    "Algorithm",
    # Metrics
    "Metric",
    "Levenshtein",
    "DamerauLevenshtein",
    "Jaro",
    "Winkler",
    "WinklerConfig",
    "QGram",
    "Cosine",
    "Jaccard",
    "SorensenDice",
    "Overlap",
    "RatcliffObershelp",
    # Modifiers
    "TokenSet",
    "TokenSort",
    "Partial",
    # Helpers
    "trim_affix",
    "qgrams",
    "get_metric",
    "normalize_algorithm",
    # Distance/similarity functions
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
    # Batch processing
    "batch",
    # Polars integration
    "batch_similarity",
    "batch_best_match",
]


# Convenience aliases
edit_distance = levenshtein
similarity = jaro_winkler_similarity

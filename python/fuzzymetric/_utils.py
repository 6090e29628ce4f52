"""Internal utilities for fuzzymetric."""

import math
from typing import Callable, Dict, Union

from fuzzymetric.enums import Algorithm
from fuzzymetric.exceptions import AlgorithmError, ValidationError
from fuzzymetric.jaro import Jaro
from fuzzymetric.levenshtein import DamerauLevenshtein, Levenshtein
from fuzzymetric.metric import Metric
from fuzzymetric.modifiers import Winkler
from fuzzymetric.qgram import Cosine, Jaccard, Overlap, QGram, SorensenDice
from fuzzymetric.ratcliff import RatcliffObershelp

# Default-configured metric for every algorithm name
_FACTORIES: Dict[str, Callable[[], Metric]] = {
    Algorithm.LEVENSHTEIN.value: Levenshtein,
    Algorithm.DAMERAU_LEVENSHTEIN.value: DamerauLevenshtein,
    Algorithm.JARO.value: Jaro,
    Algorithm.JARO_WINKLER.value: Winkler,
    Algorithm.QGRAM.value: QGram,
    Algorithm.COSINE.value: Cosine,
    Algorithm.JACCARD.value: Jaccard,
    Algorithm.SORENSEN_DICE.value: SorensenDice,
    Algorithm.OVERLAP.value: Overlap,
    Algorithm.RATCLIFF_OBERSHELP.value: RatcliffObershelp,
}

# Valid algorithm names (lowercase)
VALID_ALGORITHMS = frozenset(_FACTORIES)


def normalize_algorithm(algorithm: Union[str, Algorithm]) -> str:
    """Convert Algorithm enum to string, or validate string algorithm name.

    Args:
        algorithm: Either an Algorithm enum value or a string algorithm name.

    Returns:
        Lowercase string algorithm name.

    Raises:
        AlgorithmError: If the algorithm name is not recognized.
        TypeError: If algorithm is not a string or Algorithm enum.

    Example:
        >>> normalize_algorithm(Algorithm.JARO_WINKLER)
        'jaro_winkler'
        >>> normalize_algorithm("Levenshtein")
        'levenshtein'
    """
    if isinstance(algorithm, Algorithm):
        return algorithm.value

    if isinstance(algorithm, str):
        algo_lower = algorithm.lower()
        if algo_lower in VALID_ALGORITHMS:
            return algo_lower
        raise AlgorithmError(
            f"Unknown algorithm: '{algorithm}'. Valid options: {sorted(VALID_ALGORITHMS)}"
        )

    raise TypeError(
        f"algorithm must be str or Algorithm enum, got {type(algorithm).__name__}"
    )


def get_metric(algorithm: Union[str, Algorithm, Metric]) -> Metric:
    """Resolve an algorithm name to a default-configured metric.

    Metric instances are returned unchanged, so callers can pass a custom
    configuration wherever an algorithm name is accepted.

    Example:
        >>> get_metric("jaro_winkler")
        Winkler(inner=Jaro(), config=WinklerConfig(scaling=0.1, threshold=0.7, max_prefix=4))
    """
    if isinstance(algorithm, Metric):
        return algorithm
    return _FACTORIES[normalize_algorithm(algorithm)]()


def validate_min_similarity(min_similarity: float) -> float:
    """Reject thresholds outside [0.0, 1.0], including NaN and infinities."""
    if not (isinstance(min_similarity, (int, float)) and math.isfinite(min_similarity)):
        raise ValidationError(f"min_similarity must be a finite number, got {min_similarity!r}")
    if not 0.0 <= min_similarity <= 1.0:
        raise ValidationError(f"min_similarity must be in range [0.0, 1.0], got {min_similarity}")
    return float(min_similarity)


__all__ = ["normalize_algorithm", "get_metric", "validate_min_similarity", "VALID_ALGORITHMS"]

"""Batch operations API for fuzzymetric.

List-based helpers that apply one metric to many strings. They run
sequentially in the calling thread; metrics are immutable, so callers who
want parallelism can split the input and fan out themselves.

Every ``algorithm`` argument accepts an :class:`~fuzzymetric.enums.Algorithm`,
its string value, or a configured :class:`~fuzzymetric.metric.Metric`.

Example usage:
    >>> import fuzzymetric.batch as batch

    # Compute similarity of query against all strings
    >>> results = batch.similarity(["hello", "hallo", "world"], "helo")
    >>> [r.text for r in results if r.score > 0.7]
    ['hello', 'hallo']

    # Find top N best matches
    >>> matches = batch.best_matches(["apple", "apply", "banana"], "appel", limit=2)
    >>> [m.text for m in matches]
    ['apple', 'apply']

    # Pairwise similarity between aligned lists
    >>> batch.pairwise(["hello", "world"], ["hallo", "word"], algorithm="levenshtein")
    [0.8, 0.8]
"""

from __future__ import annotations

import logging
import warnings
from typing import TYPE_CHECKING, Union

from fuzzymetric._utils import get_metric, validate_min_similarity
from fuzzymetric.exceptions import ValidationError
from fuzzymetric.results import DeduplicationResult, MatchResult

if TYPE_CHECKING:
    from fuzzymetric.enums import Algorithm
    from fuzzymetric.metric import Metric

logger = logging.getLogger(__name__)

AlgorithmLike = Union[str, "Algorithm", "Metric"]

__all__ = [
    "similarity",
    "best_matches",
    "deduplicate",
    "pairwise",
    "similarity_matrix",
    "distance_matrix",  # Deprecated alias for similarity_matrix
]


class UnionFind:
    """Union-Find data structure for clustering duplicates."""

    def __init__(self, n: int):
        self.parent = list(range(n))
        self.rank = [0] * n

    def find(self, x: int) -> int:
        if self.parent[x] != x:
            self.parent[x] = self.find(self.parent[x])
        return self.parent[x]

    def union(self, x: int, y: int) -> None:
        px, py = self.find(x), self.find(y)
        if px == py:
            return
        if self.rank[px] < self.rank[py]:
            px, py = py, px
        self.parent[py] = px
        if self.rank[px] == self.rank[py]:
            self.rank[px] += 1


def similarity(
    strings: list[str],
    query: str,
    algorithm: AlgorithmLike = "jaro_winkler",
) -> list[MatchResult]:
    """Compute similarity of a query against all strings.

    Args:
        strings: List of strings to compare against the query.
        query: The query string to match.
        algorithm: Similarity algorithm to use (default: "jaro_winkler").

    Returns:
        List of MatchResult objects in the same order as input strings.
        Each result has `text`, `score`, and `id` fields where `id` is
        the original index in the input list.
    """
    metric = get_metric(algorithm)
    logger.debug("scoring %d strings with %r", len(strings), metric)
    return [
        MatchResult(text=text, score=metric.str_similarity(query, text), id=idx)
        for idx, text in enumerate(strings)
    ]


def best_matches(
    strings: list[str],
    query: str,
    algorithm: AlgorithmLike = "jaro_winkler",
    limit: int = 5,
    min_similarity: float = 0.0,
) -> list[MatchResult]:
    """Find top N best matches for a query from a list of strings.

    Computes similarity scores for all strings against the query, filters
    by minimum similarity, sorts by score descending (ties keep input order),
    and returns the top matches up to the specified limit.

    Args:
        strings: List of strings to search.
        query: The query string to match.
        algorithm: Similarity algorithm to use (default: "jaro_winkler").
        limit: Maximum number of results to return (default: 5).
        min_similarity: Minimum similarity score to include in results
            (default: 0.0, meaning all results are included).

    Returns:
        List of MatchResult objects sorted by score descending.
    """
    min_similarity = validate_min_similarity(min_similarity)
    scored = [r for r in similarity(strings, query, algorithm) if r.score >= min_similarity]
    scored.sort(key=lambda r: -r.score)
    return scored[:limit]


def deduplicate(
    strings: list[str],
    algorithm: AlgorithmLike = "jaro_winkler",
    min_similarity: float = 0.8,
) -> DeduplicationResult:
    """Find duplicate groups in a list of strings.

    Strings with similarity >= min_similarity are grouped together using
    Union-Find clustering, so similarity is applied transitively. All pairs
    are compared (O(N^2)).

    Args:
        strings: List of strings to deduplicate.
        algorithm: Similarity algorithm to use (default: "jaro_winkler").
        min_similarity: Minimum similarity score to consider strings as
            duplicates (default: 0.8).

    Returns:
        DeduplicationResult with groups, unique strings and the number of
        strings that belong to a group.

    Example:
        >>> result = deduplicate(["hello", "helo", "world"], min_similarity=0.9)
        >>> result.groups
        [['hello', 'helo']]
        >>> result.unique
        ['world']
    """
    min_similarity = validate_min_similarity(min_similarity)
    metric = get_metric(algorithm)
    logger.debug("deduplicating %d strings with %r", len(strings), metric)
    uf = UnionFind(len(strings))
    for i in range(len(strings)):
        for j in range(i + 1, len(strings)):
            if metric.str_similarity(strings[i], strings[j]) >= min_similarity:
                uf.union(i, j)

    members: dict[int, list[int]] = {}
    for idx in range(len(strings)):
        members.setdefault(uf.find(idx), []).append(idx)

    groups = []
    unique = []
    for indices in members.values():
        if len(indices) > 1:
            groups.append([strings[i] for i in indices])
        else:
            unique.append(strings[indices[0]])
    return DeduplicationResult(
        groups=groups,
        unique=unique,
        total_duplicates=sum(len(g) for g in groups),
    )


def pairwise(
    left: list[str],
    right: list[str],
    algorithm: AlgorithmLike = "jaro_winkler",
) -> list[float]:
    """Compute pairwise similarity between two equal-length lists.

    Args:
        left: First list of strings.
        right: Second list of strings (must be same length as left).
        algorithm: Similarity algorithm to use (default: "jaro_winkler").

    Returns:
        List of similarity scores (0.0 to 1.0), one for each pair.

    Raises:
        ValidationError: If left and right have different lengths.
    """
    if len(left) != len(right):
        raise ValidationError(
            f"left and right must have equal length, got {len(left)} and {len(right)}"
        )
    metric = get_metric(algorithm)
    return [metric.str_similarity(a, b) for a, b in zip(left, right)]


def similarity_matrix(
    queries: list[str],
    choices: list[str],
    algorithm: AlgorithmLike = "levenshtein",
) -> list[list[float]]:
    """Compute similarity matrix between all queries and all choices.

    Args:
        queries: First list of strings (rows of output matrix).
        choices: Second list of strings (columns of output matrix).
        algorithm: Similarity algorithm to use (default: "levenshtein").

    Returns:
        2D list where result[i][j] is the similarity between queries[i]
        and choices[j].
    """
    metric = get_metric(algorithm)
    logger.debug("building %dx%d similarity matrix", len(queries), len(choices))
    return [[metric.str_similarity(q, c) for c in choices] for q in queries]


def distance_matrix(
    queries: list[str],
    choices: list[str],
    algorithm: AlgorithmLike = "levenshtein",
) -> list[list[float]]:
    """Deprecated: Use similarity_matrix() instead.

    The returned values are similarity scores (0.0-1.0), not distances.
    """
    warnings.warn(
        "distance_matrix() is deprecated and will be removed in a future version. "
        "Use similarity_matrix() instead.",
        DeprecationWarning,
        stacklevel=2,
    )
    return similarity_matrix(queries, choices, algorithm)

"""Polars expression namespace for string metrics.

This module registers a `.strsim` namespace on Polars expressions,
enabling chainable similarity operations directly in Polars expression
contexts. Values are scored row by row through ``map_elements``.

Null values produce null results.

Example:
    >>> import polars as pl
    >>> import fuzzymetric  # Registers the namespace
    >>>
    >>> df = pl.DataFrame({"name": ["John", "Jon", "Jane"]})
    >>> df.with_columns(
    ...     is_similar=pl.col("name").strsim.is_similar("John", min_similarity=0.8)
    ... )
"""

from typing import Any, Callable, Union

import polars as pl

from fuzzymetric._utils import get_metric, validate_min_similarity
from fuzzymetric.enums import Algorithm
from fuzzymetric.metric import Metric

AlgorithmLike = Union[str, Algorithm, Metric]


def _compare(
    expr: pl.Expr,
    other: Union[str, pl.Expr],
    func: Callable[[str, str], Any],
    return_dtype: pl.DataType,
) -> pl.Expr:
    if isinstance(other, str):
        # Compare against a literal string
        return expr.map_elements(
            lambda s: func(str(s), other),
            return_dtype=return_dtype,
            skip_nulls=True,
        )

    # Compare against another column
    def on_row(row: dict) -> Any:
        left, right = row["_left"], row["_right"]
        if left is None or right is None:
            return None
        return func(str(left), str(right))

    return pl.struct([expr.alias("_left"), other.alias("_right")]).map_elements(
        on_row, return_dtype=return_dtype
    )


@pl.api.register_expr_namespace("strsim")
class StrSimExprNamespace:
    """
    String metric namespace for Polars expressions.

    Provides chainable methods for similarity scoring directly on columns.
    Access via `.strsim` on any string expression.
    """

    def __init__(self, expr: pl.Expr):
        self._expr = expr

    def similarity(
        self,
        other: Union[str, pl.Expr],
        algorithm: AlgorithmLike = "jaro_winkler",
    ) -> pl.Expr:
        """
        Calculate similarity score between this column and another value/column.

        Args:
            other: String literal or column expression to compare against
            algorithm: Algorithm name, Algorithm enum, or configured metric

        Returns:
            Expression producing similarity scores (0.0 to 1.0)

        Example:
            >>> df.with_columns(
            ...     score=pl.col("name").strsim.similarity("John")
            ... )
            >>> df.with_columns(
            ...     score=pl.col("name1").strsim.similarity(pl.col("name2"))
            ... )
        """
        metric = get_metric(algorithm)
        return _compare(self._expr, other, metric.str_similarity, pl.Float64)

    def is_similar(
        self,
        other: Union[str, pl.Expr],
        min_similarity: float = 0.8,
        algorithm: AlgorithmLike = "jaro_winkler",
    ) -> pl.Expr:
        """
        Check if values are similar to another value/column above a threshold.

        Args:
            other: String literal or column expression to compare against
            min_similarity: Minimum similarity score to return True (0.0 to 1.0)
            algorithm: Algorithm name, Algorithm enum, or configured metric

        Returns:
            Boolean expression

        Example:
            >>> df.filter(pl.col("name").strsim.is_similar("John", min_similarity=0.85))
        """
        min_similarity = validate_min_similarity(min_similarity)
        return self.similarity(other, algorithm=algorithm) >= min_similarity

    def distance(
        self,
        other: Union[str, pl.Expr],
        algorithm: AlgorithmLike = "levenshtein",
    ) -> pl.Expr:
        """
        Calculate the raw metric distance between this column and another value/column.

        Edit distances are integers; a bounded metric whose bound is exceeded
        yields null. Other metrics produce floats.

        Args:
            other: String literal or column expression to compare against
            algorithm: Algorithm name, Algorithm enum, or configured metric

        Returns:
            Expression producing distances

        Example:
            >>> df.with_columns(
            ...     dist=pl.col("name").strsim.distance("John")
            ... )
        """
        metric = get_metric(algorithm)
        probe = metric.str_distance("", "")
        if hasattr(probe, "is_exact"):

            def edit_distance(a: str, b: str):
                dist = metric.str_distance(a, b)
                return dist.value if dist.is_exact else None

            return _compare(self._expr, other, edit_distance, pl.Int64)
        if isinstance(probe, int):
            return _compare(self._expr, other, metric.str_distance, pl.Int64)
        return _compare(
            self._expr, other, lambda a, b: float(metric.str_distance(a, b)), pl.Float64
        )

    def best_match(
        self,
        choices: list[str],
        algorithm: AlgorithmLike = "jaro_winkler",
        min_similarity: float = 0.0,
    ) -> pl.Expr:
        """
        Find the best matching string from a list of choices.

        Args:
            choices: List of strings to match against
            algorithm: Algorithm name, Algorithm enum, or configured metric
            min_similarity: Minimum score to return a match (otherwise null)

        Returns:
            Expression with the best matching string (or null)

        Example:
            >>> categories = ["Electronics", "Clothing", "Food"]
            >>> df.with_columns(
            ...     category=pl.col("raw_category").strsim.best_match(categories)
            ... )
        """
        min_similarity = validate_min_similarity(min_similarity)
        metric = get_metric(algorithm)

        def find_best(value):
            best, best_score = None, min_similarity
            for choice in choices:
                score = metric.str_similarity(str(value), choice)
                if score >= best_score and (best is None or score > best_score):
                    best, best_score = choice, score
            return best

        return self._expr.map_elements(find_best, return_dtype=pl.Utf8, skip_nulls=True)


__all__ = ["StrSimExprNamespace"]

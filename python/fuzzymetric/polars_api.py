"""Series-level Polars API for string metrics.

Functions in This Module
------------------------
- ``batch_similarity()``: Similarity between two aligned Series
- ``batch_best_match()``: Best choice for each query of a Series

Both convert the Series to Python lists once and score them in a single
loop, which avoids building per-row expressions. Nulls stay null.

Example Usage
-------------
>>> import polars as pl
>>> import fuzzymetric as fm
>>>
>>> df = pl.DataFrame({"a": ["hello", "world"], "b": ["hallo", "word"]})
>>> df = df.with_columns(score=fm.batch_similarity(df["a"], df["b"], "levenshtein"))
>>>
>>> categories = ["Electronics", "Clothing", "Food", "Home"]
>>> df = df.with_columns(
...     category=fm.batch_best_match(df["raw_category"], categories)
... )

See Also
--------
- ``fuzzymetric.expr``: Polars expression namespace for column operations
- ``fuzzymetric.batch``: The same operations on plain lists
"""

import logging
from typing import Optional, Union

import polars as pl

from fuzzymetric._utils import get_metric, validate_min_similarity
from fuzzymetric.enums import Algorithm
from fuzzymetric.exceptions import ValidationError
from fuzzymetric.metric import Metric

logger = logging.getLogger(__name__)


def batch_similarity(
    left: "pl.Series",
    right: "pl.Series",
    algorithm: Union[str, Algorithm, Metric] = "jaro_winkler",
) -> "pl.Series":
    """
    Compute similarity between two Series row by row.

    Args:
        left: First string Series
        right: Second string Series (must be same length as left)
        algorithm: Algorithm name, Algorithm enum, or configured metric

    Returns:
        Float64 Series named "similarity" with scores (0.0 to 1.0); null
        where either input is null

    Raises:
        ValidationError: If the Series have different lengths

    Example:
        >>> df = pl.DataFrame({"a": ["hello", "world"], "b": ["hallo", "word"]})
        >>> df = df.with_columns(score=fm.batch_similarity(df["a"], df["b"]))
    """
    if len(left) != len(right):
        raise ValidationError("Series must have equal length")

    metric = get_metric(algorithm)
    logger.debug("batch similarity over %d rows with %r", len(left), metric)

    scores = []
    for a, b in zip(left.to_list(), right.to_list()):
        if a is None or b is None:
            scores.append(None)
        else:
            scores.append(metric.str_similarity(str(a), str(b)))
    return pl.Series("similarity", scores, dtype=pl.Float64)


def batch_best_match(
    queries: "pl.Series",
    choices: list[str],
    algorithm: Union[str, Algorithm, Metric] = "jaro_winkler",
    min_similarity: float = 0.0,
    return_score: bool = False,
) -> "pl.Series":
    """
    Find the best matching choice for each query.

    Ties go to the choice listed first.

    Args:
        queries: Series of strings to look up
        choices: Candidate strings
        algorithm: Algorithm name, Algorithm enum, or configured metric
        min_similarity: Minimum score for a match; below it the row is null
        return_score: If True, return a struct Series with fields "match"
            and "score" instead of the matched strings

    Returns:
        Utf8 Series named "best_match" (or a struct Series if return_score)

    Example:
        >>> categories = ["Electronics", "Clothing", "Food"]
        >>> fm.batch_best_match(pl.Series(["electronic", "food!"]), categories)
    """
    min_similarity = validate_min_similarity(min_similarity)
    metric = get_metric(algorithm)
    logger.debug(
        "best match for %d queries against %d choices with %r", len(queries), len(choices), metric
    )

    matches: list[Optional[str]] = []
    scores: list[Optional[float]] = []
    for query in queries.to_list():
        best, best_score = None, None
        if query is not None:
            for choice in choices:
                score = metric.str_similarity(str(query), choice)
                if score >= min_similarity and (best_score is None or score > best_score):
                    best, best_score = choice, score
        matches.append(best)
        scores.append(best_score)

    if return_score:
        return pl.DataFrame(
            {"match": matches, "score": scores},
            schema={"match": pl.Utf8, "score": pl.Float64},
        ).to_struct("best_match")
    return pl.Series("best_match", matches, dtype=pl.Utf8)


__all__ = ["batch_similarity", "batch_best_match"]

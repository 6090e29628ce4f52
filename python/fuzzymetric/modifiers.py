"""Modifiers that wrap an arbitrary inner metric.

- :class:`Winkler` lowers the distance of sequences sharing a prefix.
- :class:`Partial` compares the shorter input against every same-length
  window of the longer one and keeps the best fit.

Example:
    >>> round(Winkler(Jaro()).str_distance("martha", "marhta"), 6)
    0.038889
    >>> Partial(Levenshtein()).str_distance("york", "new york mets")
    0.0
"""

import math
from dataclasses import dataclass
from typing import Any, Callable, Iterable, Optional

from fuzzymetric.exceptions import ValidationError
from fuzzymetric.jaro import Jaro
from fuzzymetric.metric import Metric
from fuzzymetric.qgram import qgrams
from fuzzymetric.utils import as_sequence, count_eq, order_by_len_asc


@dataclass(frozen=True)
class WinklerConfig:
    """Coefficients of the Winkler adjustment.

    Attributes:
        scaling: Boost per shared prefix element. Default 0.1.
        threshold: Minimum inner similarity (``1 - distance``) for a boost.
            Default 0.7.
        max_prefix: Maximum number of prefix elements rewarded. Default 4.

    Raises:
        ValidationError: If ``scaling * max_prefix > 1`` (the adjusted
            distance could turn negative), if scaling is negative or not a
            finite number, or if threshold is outside [0, 1].
    """

    scaling: float = 0.1
    threshold: float = 0.7
    max_prefix: int = 4

    def __post_init__(self):
        if not (isinstance(self.scaling, (int, float)) and math.isfinite(self.scaling)):
            raise ValidationError(f"scaling must be a finite number, got {self.scaling!r}")
        if self.scaling < 0:
            raise ValidationError(f"scaling must be non-negative, got {self.scaling}")
        if not 0.0 <= self.threshold <= 1.0:
            raise ValidationError(f"threshold must be in range [0.0, 1.0], got {self.threshold}")
        if isinstance(self.max_prefix, bool) or not isinstance(self.max_prefix, int):
            raise ValidationError(f"max_prefix must be an integer, got {self.max_prefix!r}")
        if self.max_prefix < 0:
            raise ValidationError(f"max_prefix must be non-negative, got {self.max_prefix}")
        if self.scaling * self.max_prefix > 1.0:
            raise ValidationError(
                f"scaling * max_prefix must not exceed 1.0, "
                f"got {self.scaling} * {self.max_prefix}"
            )


class Winkler(Metric[float]):
    """Decreases the inner distance of sequences with a common prefix.

    If the inner distance ``d`` is at most ``1 - threshold``, the result is
    ``d - min(prefix, max_prefix) * scaling * d``, otherwise ``d`` unchanged.
    Winkler was defined for :class:`~fuzzymetric.jaro.Jaro` (the default inner
    metric, reproducing classic Jaro-Winkler) but works with any metric whose
    result converts to ``float``.
    """

    order_sensitive = True

    __slots__ = ("inner", "config")

    def __init__(self, inner: Optional[Metric] = None, config: Optional[WinklerConfig] = None):
        self._init(
            inner=Jaro() if inner is None else inner,
            config=WinklerConfig() if config is None else config,
        )

    @classmethod
    def with_config(cls, inner: Metric, config: WinklerConfig) -> "Winkler":
        return cls(inner, config)

    def _boost(self, score: float, a, b) -> float:
        config = self.config
        if score <= 1.0 - config.threshold:
            prefix = count_eq(a, b)
            score -= min(prefix, config.max_prefix) * config.scaling * score
        return score

    def distance(self, a: Iterable[Any], b: Iterable[Any]) -> float:
        a = as_sequence(a)
        b = as_sequence(b)
        return self._boost(_to_float(self.inner.distance(a, b), self.inner), a, b)

    def normalized(self, a: Iterable[Any], b: Iterable[Any]) -> float:
        a = as_sequence(a)
        b = as_sequence(b)
        return self._boost(self.inner.normalized(a, b), a, b)


class Partial(Metric[float]):
    """Best fit of the shorter input inside the longer one.

    Every window of the longer sequence with the length of the shorter one is
    compared against the shorter sequence; the minimum inner result wins.
    Inputs of equal length are compared directly. If the shorter input is
    empty there are no windows, and the inner metric sees both inputs as they
    are.
    """

    order_sensitive = True

    __slots__ = ("inner",)

    def __init__(self, inner: Metric):
        self._init(inner=inner)

    def _best(self, a, b, measure: Callable[[Any, Any], Any]):
        short, long = order_by_len_asc(as_sequence(a), as_sequence(b))
        if len(short) == len(long) or not short:
            return measure(short, long)
        return min(measure(short, window) for window in qgrams(long, len(short)))

    def distance(self, a: Iterable[Any], b: Iterable[Any]) -> float:
        return _to_float(self._best(a, b, self.inner.distance), self.inner)

    def normalized(self, a: Iterable[Any], b: Iterable[Any]) -> float:
        return self._best(a, b, self.inner.normalized)


def _to_float(value: Any, inner: Metric) -> float:
    try:
        return float(value)
    except (TypeError, ValueError):
        raise TypeError(
            f"{type(inner).__name__} returns {type(value).__name__}, "
            f"which does not convert to float"
        ) from None


__all__ = ["WinklerConfig", "Winkler", "Partial"]

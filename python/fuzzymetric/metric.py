"""Base class shared by every fuzzymetric metric."""

from abc import ABC, abstractmethod
from typing import Any, Generic, Iterable, TypeVar

from fuzzymetric.utils import order_by_len_asc

D = TypeVar("D")


class Metric(ABC, Generic[D]):
    """A configured distance metric.

    Subclasses implement :meth:`distance` over generic element sequences and
    :meth:`normalized`. Instances are immutable once constructed and keep no
    state between calls, so a single instance can be shared between threads.

    Distances follow the convention 0 = identical. ``similarity`` is
    ``1 - normalized`` and is what the batch and Polars layers report.
    """

    #: Whether ``str_distance`` has to pass the shorter string first.
    order_sensitive: bool = False

    __slots__ = ()

    @abstractmethod
    def distance(self, a: Iterable[Any], b: Iterable[Any]) -> D:
        """Distance between two sequences of comparable elements."""

    @abstractmethod
    def normalized(self, a: Iterable[Any], b: Iterable[Any]) -> float:
        """Distance scaled into ``[0, 1]``."""

    def _ordered(self, a: str, b: str):
        if self.order_sensitive:
            return order_by_len_asc(a, b)
        return a, b

    def str_distance(self, a: str, b: str) -> D:
        """Distance between the characters of two strings."""
        return self.distance(*self._ordered(a, b))

    def str_normalized(self, a: str, b: str) -> float:
        return self.normalized(*self._ordered(a, b))

    def similarity(self, a: Iterable[Any], b: Iterable[Any]) -> float:
        return 1.0 - self.normalized(a, b)

    def str_similarity(self, a: str, b: str) -> float:
        return 1.0 - self.str_normalized(a, b)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def _init(self, **attrs: Any) -> None:
        for name, value in attrs.items():
            object.__setattr__(self, name, value)

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._config() == other._config()

    def __hash__(self) -> int:
        return hash((type(self), self._config()))

    def __repr__(self) -> str:
        args = ", ".join(f"{k}={v!r}" for k, v in self._config())
        return f"{type(self).__name__}({args})"

    def _config(self) -> tuple:
        names = [
            name for cls in reversed(type(self).__mro__) for name in cls.__dict__.get("__slots__", ())
        ]
        return tuple((name, getattr(self, name)) for name in names)


__all__ = ["Metric"]

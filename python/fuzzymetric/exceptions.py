"""Exception hierarchy for fuzzymetric."""


class FuzzyMetricError(Exception):
    """Base class for all fuzzymetric errors."""


class ValidationError(FuzzyMetricError, ValueError):
    """Invalid metric configuration or invalid input shape.

    Raised eagerly when a metric is constructed, never in the middle of a
    distance computation.
    """


class AlgorithmError(FuzzyMetricError, ValueError):
    """Unknown algorithm name."""


__all__ = ["FuzzyMetricError", "ValidationError", "AlgorithmError"]

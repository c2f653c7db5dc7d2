"""
disteval - the distance function of a numeric expression pipeline.

Example:
    >>> from disteval import DistanceEvaluator, Matrix
    >>>
    >>> evaluator = DistanceEvaluator({"type": "canberra"})
    >>> evaluator.evaluate([[0.0, 1.0], [0.0, 3.0]])
    0.5
    >>>
    >>> # Pairwise distances between the columns of a matrix
    >>> m = Matrix([[1.0, 2.0, 3.0], [4.0, 5.0, 6.0]])
    >>> evaluator.evaluate([m]).shape
    (3, 3)
"""

from .core import (
    Matrix,
    # Exceptions
    DistEvalError,
    ConfigurationError,
    InvalidOperandError,
    DimensionMismatchError,
)

from .distance import (
    euclidean,
    manhattan,
    canberra,
    earth_movers,
    DistanceMetric,
    DistanceCalculator,
    get_metric,
    get_metric_fn,
    list_metrics,
)

from .evaluator import (
    NamedParameter,
    ExpressionContext,
    DistanceEvaluator,
    resolve_distance_type,
)

__version__ = "0.1.0"

__all__ = [
    "Matrix",
    # Exceptions
    "DistEvalError",
    "ConfigurationError",
    "InvalidOperandError",
    "DimensionMismatchError",
    # Distance functions
    "euclidean",
    "manhattan",
    "canberra",
    "earth_movers",
    "DistanceMetric",
    "DistanceCalculator",
    "get_metric",
    "get_metric_fn",
    "list_metrics",
    # Evaluators
    "NamedParameter",
    "ExpressionContext",
    "DistanceEvaluator",
    "resolve_distance_type",
]

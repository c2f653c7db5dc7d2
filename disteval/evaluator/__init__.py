"""
Evaluators for the expression pipeline.
"""

from .base import (
    NamedParameter,
    ExpressionContext,
    ManyValueEvaluator,
    as_named_parameters,
)
from .distance import DistanceEvaluator, resolve_distance_type

__all__ = [
    "NamedParameter",
    "ExpressionContext",
    "ManyValueEvaluator",
    "as_named_parameters",
    "DistanceEvaluator",
    "resolve_distance_type",
]

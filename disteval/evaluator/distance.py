"""
The distance evaluator.

Computes the distance between two numeric vectors, or the pairwise
distance matrix between the columns of a single matrix, with one of
the metrics in DistanceMetric.

Example:
    >>> evaluator = DistanceEvaluator({"type": "manhattan"})
    >>> evaluator.evaluate([[1, 2, 3], [4, 6, 8]])
    12.0
"""

from __future__ import annotations

from typing import Any, Optional, Union

import numpy as np

from ..config import Settings, get_settings
from ..core.exceptions import ConfigurationError, InvalidOperandError
from ..core.matrix import Matrix
from ..distance.registry import (
    DistanceCalculator,
    DistanceMetric,
    list_metrics,
    metric_exists,
)
from ..utils.logging import get_logger
from ..utils.validation import validate_vector, validate_same_length, is_matrix
from .base import (
    ExpressionContext,
    ManyValueEvaluator,
    ParameterSource,
    as_named_parameters,
)


logger = get_logger(__name__)

FUNCTION_NAME = "distance"
TYPE_PARAMETER = "type"

_PARAMETER_ERROR = f"{FUNCTION_NAME} function expects only one named parameter '{TYPE_PARAMETER}'."
_SHAPE_ERROR = (
    f"{FUNCTION_NAME} function operates on either two numeric arrays "
    "or a single matrix as parameters."
)


def resolve_distance_type(parameters: ParameterSource) -> DistanceMetric:
    """
    Resolve the metric from an expression's named parameters.

    Args:
        parameters: Named parameters, as NamedParameter objects or a mapping

    Returns:
        The selected metric, euclidean when no parameter is given

    Raises:
        ConfigurationError: On more than one parameter, a parameter not
            named 'type' (case-insensitive), or an unknown metric name
    """
    named = as_named_parameters(parameters)

    if not named:
        return DistanceMetric.EUCLIDEAN

    if len(named) > 1:
        raise ConfigurationError(_PARAMETER_ERROR)

    parameter = named[0]
    if parameter.name.lower() != TYPE_PARAMETER:
        raise ConfigurationError(_PARAMETER_ERROR)

    value = str(parameter.value).strip()
    if not metric_exists(value):
        raise ConfigurationError(
            f"Unknown {TYPE_PARAMETER} '{value}' for {FUNCTION_NAME} function. "
            f"Expected one of: {list_metrics()}"
        )
    return DistanceMetric(value)


class DistanceEvaluator(ManyValueEvaluator):
    """
    Distance between two vectors, or between all columns of a matrix.

    The metric is resolved once from the named parameters and never
    changes afterwards; instances hold no other state and can be shared.
    """

    def __init__(
        self,
        parameters: ParameterSource = None,
        expression: Optional[str] = None,
        settings: Optional[Settings] = None,
    ):
        """
        Initialize the evaluator.

        Args:
            parameters: Named parameters of the expression
            expression: Expression text for error messages
            settings: Settings to use; defaults to the loaded settings
        """
        super().__init__(expression or FUNCTION_NAME)
        self._type = resolve_distance_type(parameters)
        self._settings = settings or get_settings()
        self._calculator: Optional[DistanceCalculator] = DistanceCalculator(self._type)
        logger.debug(f"{self.expression}: resolved metric '{self._type}'")

    @classmethod
    def from_context(
        cls,
        context: ExpressionContext,
        settings: Optional[Settings] = None,
    ) -> DistanceEvaluator:
        """Build an evaluator from the host's view of the expression."""
        return cls(
            parameters=context.get_named_parameters(),
            expression=context.to_expression(),
            settings=settings,
        )

    @property
    def type(self) -> DistanceMetric:
        """The resolved distance metric."""
        return self._type

    def do_work(self, *values: Any) -> Union[float, Matrix, None]:
        """
        Compute a distance or a pairwise distance matrix.

        Two values are read as vectors and give a float. One value must
        be a Matrix and gives the distance matrix between its columns.

        Raises:
            InvalidOperandError: If the operands do not fit either shape
        """
        if len(values) == 2:
            return self._vector_distance(values[0], values[1])
        if len(values) == 1:
            if not is_matrix(values[0]):
                raise InvalidOperandError(_SHAPE_ERROR)
            return self._matrix_distance(values[0])
        raise InvalidOperandError(_SHAPE_ERROR)

    def _vector_distance(self, first: Any, second: Any) -> Optional[float]:
        a = validate_vector(first, "first", self.expression)
        b = validate_vector(second, "second", self.expression)
        validate_same_length(a, b, self.expression)

        calculator = self._calculator
        if calculator is None:
            return None
        return float(calculator.distance(a, b))

    def _matrix_distance(self, matrix: Matrix) -> Optional[Matrix]:
        calculator = self._calculator
        if calculator is None:
            return None

        # Columns of the input are the points being compared
        points = matrix.transpose()
        logger.debug(
            f"{self.expression}: {self._type} distances between "
            f"{points.row_count} columns of dimension {points.column_count}"
        )
        if points.row_count == 0 or points.column_count == 0:
            # Every metric is 0 between empty points
            distances = np.zeros((points.row_count, points.row_count))
        else:
            distances = calculator.pairwise(points.data)

        labels = points.row_labels if self._settings.label_results else None
        return Matrix(distances, row_labels=labels, column_labels=labels)

    def __repr__(self) -> str:
        return f"DistanceEvaluator(type='{self._type}')"

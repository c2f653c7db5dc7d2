"""
Distance metric registry.

Maps the closed set of supported metrics to their single-pair and
pairwise implementations.
"""

from __future__ import annotations

from enum import Enum
from typing import Callable, Dict, List, Union
from dataclasses import dataclass
import numpy as np
from numpy.typing import NDArray

from .metrics import (
    euclidean,
    manhattan,
    canberra,
    earth_movers,
    pairwise_euclidean,
    pairwise_manhattan,
    pairwise_canberra,
    pairwise_earth_movers,
)


# Type aliases
Vector = NDArray[np.floating]
DistanceFunction = Callable[[Vector, Vector], float]
BatchDistanceFunction = Callable[[NDArray], NDArray]


class DistanceMetric(str, Enum):
    """Enumeration of supported distance metrics."""

    EUCLIDEAN = "euclidean"
    MANHATTAN = "manhattan"
    CANBERRA = "canberra"
    EARTH_MOVERS = "earthMovers"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class MetricInfo:
    """Information about a distance metric."""

    metric: DistanceMetric
    function: DistanceFunction
    batch_function: BatchDistanceFunction
    description: str

    @property
    def name(self) -> str:
        return self.metric.value

    def __repr__(self) -> str:
        return f"MetricInfo(name='{self.name}')"


# =============================================================================
# METRIC REGISTRY
# =============================================================================

_METRICS: Dict[DistanceMetric, MetricInfo] = {
    info.metric: info
    for info in (
        MetricInfo(
            metric=DistanceMetric.EUCLIDEAN,
            function=euclidean,
            batch_function=pairwise_euclidean,
            description="Euclidean (L2) distance",
        ),
        MetricInfo(
            metric=DistanceMetric.MANHATTAN,
            function=manhattan,
            batch_function=pairwise_manhattan,
            description="Manhattan (L1) distance",
        ),
        MetricInfo(
            metric=DistanceMetric.CANBERRA,
            function=canberra,
            batch_function=pairwise_canberra,
            description="Canberra distance (0/0 terms count as 0)",
        ),
        MetricInfo(
            metric=DistanceMetric.EARTH_MOVERS,
            function=earth_movers,
            batch_function=pairwise_earth_movers,
            description="1-D earth mover's distance over running sums",
        ),
    )
}


def get_metric(name: Union[str, DistanceMetric]) -> MetricInfo:
    """
    Get metric info by name.

    Names are matched exactly against the enumerated values.

    Args:
        name: Metric name or DistanceMetric member

    Returns:
        MetricInfo object

    Raises:
        KeyError: If metric not found

    Example:
        >>> get_metric("canberra").description
        'Canberra distance (0/0 terms count as 0)'
    """
    try:
        metric = DistanceMetric(name)
    except ValueError:
        raise KeyError(
            f"Unknown metric: '{name}'. Available: {list_metrics()}"
        ) from None
    return _METRICS[metric]


def get_metric_fn(name: Union[str, DistanceMetric]) -> DistanceFunction:
    """Get the single-pair distance function for a metric."""
    return get_metric(name).function


def list_metrics() -> List[str]:
    """
    List all available metric names.

    Returns:
        List of metric names
    """
    return [metric.value for metric in _METRICS]


def metric_exists(name: Union[str, DistanceMetric]) -> bool:
    """Check if a metric is registered."""
    try:
        return DistanceMetric(name) in _METRICS
    except ValueError:
        return False


# =============================================================================
# DISTANCE FUNCTION WRAPPER
# =============================================================================

class DistanceCalculator:
    """
    Wrapper class for distance calculations with a specific metric.

    Example:
        >>> calc = DistanceCalculator("manhattan")
        >>> calc.distance(np.array([1.0, 2.0]), np.array([3.0, 5.0]))
        5.0
    """

    def __init__(self, metric: Union[str, DistanceMetric] = DistanceMetric.EUCLIDEAN):
        """
        Initialize calculator with a specific metric.

        Args:
            metric: Name of the distance metric
        """
        self.info = get_metric(metric)
        self.metric = self.info.metric
        self._fn = self.info.function
        self._batch_fn = self.info.batch_function

    def distance(self, a: Vector, b: Vector) -> float:
        """Compute distance between two vectors."""
        return self._fn(a, b)

    def pairwise(self, X: NDArray) -> NDArray:
        """
        Compute distances between every pair of rows in X.

        Args:
            X: Array of shape (n, d)

        Returns:
            Distance matrix of shape (n, n)
        """
        return self._batch_fn(X)

    def __repr__(self) -> str:
        return f"DistanceCalculator(metric='{self.metric}')"

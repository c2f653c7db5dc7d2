"""
Distance metrics for numeric vectors.

Supported Metrics:
    - euclidean: L2 distance
    - manhattan: L1 distance
    - canberra: Canberra distance
    - earthMovers: 1-D earth mover's distance

Example:
    >>> from disteval.distance import manhattan, get_metric_fn
    >>> import numpy as np
    >>>
    >>> a = np.array([1.0, 2.0, 3.0])
    >>> b = np.array([4.0, 6.0, 8.0])
    >>>
    >>> # Direct function call
    >>> dist = manhattan(a, b)
    >>>
    >>> # Using registry
    >>> dist = get_metric_fn("earthMovers")(a, b)
"""

from .metrics import (
    # Single vector distances
    euclidean,
    manhattan,
    canberra,
    earth_movers,
    # Batch operations
    pairwise_euclidean,
    pairwise_manhattan,
    pairwise_canberra,
    pairwise_earth_movers,
)

from .registry import (
    DistanceMetric,
    MetricInfo,
    DistanceCalculator,
    get_metric,
    get_metric_fn,
    list_metrics,
    metric_exists,
)

__all__ = [
    # Single vector functions
    "euclidean",
    "manhattan",
    "canberra",
    "earth_movers",
    # Batch functions
    "pairwise_euclidean",
    "pairwise_manhattan",
    "pairwise_canberra",
    "pairwise_earth_movers",
    # Registry
    "DistanceMetric",
    "MetricInfo",
    "DistanceCalculator",
    "get_metric",
    "get_metric_fn",
    "list_metrics",
    "metric_exists",
]

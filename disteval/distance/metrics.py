"""
Core distance metric implementations.

All functions are pure and operate on NumPy float arrays. Single-pair
functions expect two equal-length 1-D vectors; pairwise functions take
a batch of shape (n, d) and return the full (n, n) distance matrix.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray
from scipy.spatial.distance import cdist


# Type aliases
Vector = NDArray[np.floating]
VectorBatch = NDArray[np.floating]


# =============================================================================
# SINGLE VECTOR DISTANCE FUNCTIONS
# =============================================================================

def euclidean(a: Vector, b: Vector) -> float:
    """
    Compute Euclidean (L2) distance between two vectors.

    Formula: sqrt(sum((a_i - b_i)^2))

    Args:
        a: First vector
        b: Second vector

    Returns:
        Euclidean distance (>= 0)

    Example:
        >>> euclidean(np.array([0.0, 0.0]), np.array([3.0, 4.0]))
        5.0
    """
    diff = a - b
    return float(np.sqrt(np.dot(diff, diff)))


def manhattan(a: Vector, b: Vector) -> float:
    """
    Compute Manhattan (L1) distance between two vectors.

    Formula: sum(|a_i - b_i|)

    Example:
        >>> manhattan(np.array([1.0, 2.0, 3.0]), np.array([4.0, 6.0, 8.0]))
        12.0
    """
    return float(np.sum(np.abs(a - b)))


def canberra(a: Vector, b: Vector) -> float:
    """
    Compute Canberra distance between two vectors.

    Formula: sum(|a_i - b_i| / (|a_i| + |b_i|))

    A term whose numerator and denominator are both zero contributes 0.
    NaN inputs propagate into the result.

    Args:
        a: First vector
        b: Second vector

    Returns:
        Canberra distance (>= 0, at most len(a))
    """
    return float(np.sum(_canberra_terms(a, b)))


def earth_movers(a: Vector, b: Vector) -> float:
    """
    Compute the 1-D earth mover's distance between two vectors.

    The vectors are read as weights over matching positions and the
    distance is the total discrepancy of their running sums.

    Formula: sum(|cumsum(a)_i - cumsum(b)_i|)

    Example:
        >>> earth_movers(np.array([1.0, 0.0, 0.0]), np.array([0.0, 0.0, 1.0]))
        2.0
    """
    return float(np.sum(np.abs(np.cumsum(a - b))))


def _canberra_terms(a: NDArray, b: NDArray) -> NDArray:
    """Element-wise Canberra terms with 0/0 mapped to 0."""
    numerator = np.abs(a - b)
    denominator = np.abs(a) + np.abs(b)
    zero = (numerator == 0.0) & (denominator == 0.0)
    with np.errstate(divide="ignore", invalid="ignore"):
        terms = numerator / denominator
    return np.where(zero, 0.0, terms)


# =============================================================================
# PAIRWISE DISTANCE FUNCTIONS (BATCH OPERATIONS)
# =============================================================================

def pairwise_euclidean(X: VectorBatch) -> NDArray:
    """
    Compute pairwise Euclidean distances between the rows of X.

    Args:
        X: Array of shape (n, d)

    Returns:
        Distance matrix of shape (n, n)
    """
    return cdist(X, X, metric="euclidean")


def pairwise_manhattan(X: VectorBatch) -> NDArray:
    """
    Compute pairwise Manhattan distances between the rows of X.

    SciPy names this metric "cityblock".
    """
    return cdist(X, X, metric="cityblock")


def pairwise_canberra(X: VectorBatch) -> NDArray:
    """
    Compute pairwise Canberra distances between the rows of X.

    SciPy's kernel also counts 0/0 terms as 0 and propagates NaN.
    """
    return cdist(X, X, metric="canberra")


def pairwise_earth_movers(X: VectorBatch) -> NDArray:
    """
    Compute pairwise 1-D earth mover's distances between the rows of X.

    Rows are filled one at a time so temporaries stay at (n, d).

    Args:
        X: Array of shape (n, d)

    Returns:
        Distance matrix of shape (n, n)
    """
    n = X.shape[0]
    result = np.empty((n, n), dtype=np.float64)

    for i in range(n):
        result[i] = np.sum(np.abs(np.cumsum(X[i] - X, axis=1)), axis=1)

    return result

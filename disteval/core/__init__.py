"""
Core components for disteval.
"""

from .matrix import Matrix
from .exceptions import (
    DistEvalError,
    ConfigurationError,
    InvalidOperandError,
    DimensionMismatchError,
)

__all__ = [
    "Matrix",
    "DistEvalError",
    "ConfigurationError",
    "InvalidOperandError",
    "DimensionMismatchError",
]

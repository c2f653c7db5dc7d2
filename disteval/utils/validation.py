"""
Operand validation utilities.

Turns raw runtime values into the arrays the distance functions expect,
raising InvalidOperandError with the offending expression when a value
does not fit.
"""

from __future__ import annotations

import numbers
from decimal import Decimal
from typing import Any

import numpy as np

from ..core.exceptions import InvalidOperandError, DimensionMismatchError
from ..core.matrix import Matrix


def _is_number(value: Any) -> bool:
    if isinstance(value, (bool, np.bool_)):
        return False
    return isinstance(value, (numbers.Real, Decimal))


def validate_vector(value: Any, position: str, expression: str) -> np.ndarray:
    """
    Validate a vector operand and convert it to a float64 array.

    Args:
        value: Runtime operand value
        position: "first" or "second", used in error messages
        expression: Expression text, used in error messages

    Returns:
        A new 1-D float64 array (never a view of the caller's data)

    Raises:
        InvalidOperandError: If the value is None, not a sequence, or
            contains non-numeric elements
    """
    if value is None:
        raise InvalidOperandError(
            f"Invalid expression {expression} - null found for the {position} value"
        )

    if isinstance(value, np.ndarray):
        numeric = (
            value.ndim == 1
            and np.issubdtype(value.dtype, np.number)
            and not np.issubdtype(value.dtype, np.bool_)
        )
        if not numeric:
            raise InvalidOperandError(
                f"Invalid expression {expression} - found array of dtype {value.dtype} "
                f"with {value.ndim} dimensions for the {position} value, "
                "expecting a list of numbers"
            )
        return np.array(value, dtype=np.float64)

    if not isinstance(value, (list, tuple)):
        raise InvalidOperandError(
            f"Invalid expression {expression} - found type {type(value).__name__} "
            f"for the {position} value, expecting a list of numbers"
        )

    for element in value:
        if not _is_number(element):
            raise InvalidOperandError(
                f"Invalid expression {expression} - found element of type "
                f"{type(element).__name__} in the {position} value, "
                "expecting a list of numbers"
            )

    try:
        return np.array([float(element) for element in value], dtype=np.float64)
    except (ValueError, TypeError, OverflowError) as e:
        raise InvalidOperandError(
            f"Invalid expression {expression} - {position} value cannot be "
            f"converted to floating point: {e}"
        ) from e


def validate_same_length(a: np.ndarray, b: np.ndarray, expression: str) -> None:
    """
    Check that two vectors have equal length.

    Raises:
        DimensionMismatchError: If the lengths differ
    """
    if len(a) != len(b):
        raise DimensionMismatchError(
            f"Invalid expression {expression} - vectors must have the same length, "
            f"got {len(a)} and {len(b)}"
        )


def is_matrix(value: Any) -> bool:
    """Check if a runtime value is a Matrix."""
    return isinstance(value, Matrix)

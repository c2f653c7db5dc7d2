"""
Utility functions for disteval.
"""

from .validation import (
    validate_vector,
    validate_same_length,
    is_matrix,
)
from .logging import setup_logger, get_logger

__all__ = [
    "validate_vector",
    "validate_same_length",
    "is_matrix",
    "setup_logger",
    "get_logger",
]

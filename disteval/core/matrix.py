"""
Matrix value passed between evaluators.
"""

from __future__ import annotations

import numpy as np
from dataclasses import dataclass, field
from typing import Dict, Any, Optional, List, Sequence


@dataclass(eq=False)
class Matrix:
    """
    A rectangular 2-D array of real numbers with optional labels.

    The data is copied into a read-only float64 array on construction,
    so a Matrix never shares mutable state with the caller.

    Attributes:
        data: Row-major numeric data of shape (rows, columns)
        row_labels: Optional label per row
        column_labels: Optional label per column
        attributes: Free-form attributes attached by upstream evaluators

    Example:
        >>> m = Matrix([[1.0, 2.0, 3.0], [4.0, 5.0, 6.0]],
        ...            column_labels=["a", "b", "c"])
        >>> m.shape
        (2, 3)
    """

    data: np.ndarray
    row_labels: Optional[List[str]] = None
    column_labels: Optional[List[str]] = None
    attributes: Dict[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        """Validate and freeze the underlying array."""
        try:
            data = np.array(self.data, dtype=np.float64)
        except (TypeError, ValueError) as e:
            raise ValueError(f"Matrix data must be a rectangular numeric array: {e}") from e

        if data.ndim != 2:
            raise ValueError(
                f"Matrix must be 2-dimensional, got {data.ndim} dimensions"
            )

        data.flags.writeable = False
        self.data = data

        if self.row_labels is not None:
            self.row_labels = self._check_labels(self.row_labels, data.shape[0], "row")
        if self.column_labels is not None:
            self.column_labels = self._check_labels(
                self.column_labels, data.shape[1], "column"
            )
        self.attributes = dict(self.attributes)

    @staticmethod
    def _check_labels(labels: Sequence[str], expected: int, axis: str) -> List[str]:
        labels = [str(label) for label in labels]
        if len(labels) != expected:
            raise ValueError(
                f"Expected {expected} {axis} labels, got {len(labels)}"
            )
        return labels

    @property
    def shape(self) -> tuple:
        """Return (rows, columns)."""
        return self.data.shape

    @property
    def row_count(self) -> int:
        return self.data.shape[0]

    @property
    def column_count(self) -> int:
        return self.data.shape[1]

    def transpose(self) -> Matrix:
        """Return a new matrix with rows and columns swapped, labels included."""
        return Matrix(
            data=self.data.T,
            row_labels=self.column_labels,
            column_labels=self.row_labels,
            attributes=self.attributes,
        )

    def to_list(self) -> List[List[float]]:
        """Return the data as nested Python lists."""
        return self.data.tolist()

    def to_dict(self) -> Dict[str, Any]:
        """Convert matrix to dictionary (for serialization)."""
        return {
            "data": self.to_list(),
            "row_labels": self.row_labels,
            "column_labels": self.column_labels,
            "attributes": self.attributes,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> Matrix:
        """Create matrix from dictionary."""
        return cls(
            data=data["data"],
            row_labels=data.get("row_labels"),
            column_labels=data.get("column_labels"),
            attributes=data.get("attributes", {}),
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return (
            self.shape == other.shape
            and np.array_equal(self.data, other.data, equal_nan=True)
            and self.row_labels == other.row_labels
            and self.column_labels == other.column_labels
        )

    __hash__ = None

    def __repr__(self) -> str:
        rows, cols = self.shape
        return f"Matrix(rows={rows}, columns={cols})"

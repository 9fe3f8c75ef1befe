"""Tensor error taxonomy."""
from enum import Enum


class ErrorKind(Enum):
    """Tag identifying which precondition a tensor operation violated."""

    INVALID_ARGUMENT = "invalid_argument"
    OUT_OF_RANGE = "out_of_range"
    SIZE_MISMATCH = "size_mismatch"
    DIMENSION_INCOMPATIBLE = "dimension_incompatible"


class TensorError(Exception):
    """Base class for every error raised by tensor operations."""

    kind: ErrorKind


class InvalidArgument(TensorError, ValueError):
    """Raised for a zero dimension, a non-numeric element type or an unconvertible value."""

    kind = ErrorKind.INVALID_ARGUMENT


class OutOfRange(TensorError, IndexError):
    """
    Raised when an element index falls outside the tensor.

    Attributes
    ----------
    index : tuple[int, int]
        The offending (i, j) pair.
    bound : tuple[int, int]
        The (rows, cols) shape the index was checked against.
    """

    kind = ErrorKind.OUT_OF_RANGE

    def __init__(self, index: tuple[int, int], bound: tuple[int, int]):
        self.index = index
        self.bound = bound
        super().__init__(
            f"Index {index} out of range for tensor of shape {bound}"
        )


class SizeMismatch(TensorError, ValueError):
    """Raised when an element-wise operation receives tensors of different shape."""

    kind = ErrorKind.SIZE_MISMATCH


class DimensionIncompatible(TensorError, ValueError):
    """Raised when a matrix product is requested with left.cols != right.rows."""

    kind = ErrorKind.DIMENSION_INCOMPATIBLE

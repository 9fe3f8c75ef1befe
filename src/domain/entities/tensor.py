"""Tensor entity - dense, row-major, rank-2 numeric container."""
import logging
import numbers
import operator
from typing import Any, Callable, Generic, Iterable, TypeVar

from src.domain.entities.errors import (
    DimensionIncompatible,
    InvalidArgument,
    OutOfRange,
    SizeMismatch,
)

logger = logging.getLogger(__name__)

Element = TypeVar("Element", int, float)

ELEMENT_TYPES = (int, float)


def _is_scalar(value: Any) -> bool:
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


def _check_dimension(name: str, value: Any) -> int:
    """
    Validate a constructor dimension.

    Raises:
        InvalidArgument: If `value` is not a positive integer.
    """
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise InvalidArgument(f"{name} must be an integer, got {value!r}")
    if value <= 0:
        raise InvalidArgument(f"{name} must be positive, got {value}")
    return int(value)


def _common_dtype(left: "Tensor", right: "Tensor") -> type:
    return left.dtype if left.dtype is right.dtype else float


class Tensor(Generic[Element]):
    """
    Dense rank-2 numeric container.

    Element (i, j) is stored at flat offset ``i * cols + j``. Every instance
    owns its buffer; arithmetic returns new instances, while `set`, `fill`
    and `transpose_in_place` mutate the receiver.

    Attributes
    ----------
    rows : int
        Number of rows, always >= 1.
    cols : int
        Number of columns, always >= 1.
    dtype : type
        Element type, `int` or `float`.
    """

    # Mutable, so unhashable.
    __hash__ = None

    # Make numpy scalars defer to __rmul__ instead of broadcasting over the tensor.
    __array_ufunc__ = None

    def __init__(self, rows: int, cols: int, dtype: type = float):
        """
        Allocate a zero-filled tensor.

        Parameters
        ----------
        rows : int
            Number of rows, must be positive.
        cols : int
            Number of columns, must be positive.
        dtype : type, optional
            Element type, `int` or `float`. Default is `float`.

        Raises
        ------
        InvalidArgument
            If a dimension is not a positive integer or `dtype` is not numeric.
        """
        if dtype not in ELEMENT_TYPES:
            raise InvalidArgument(
                f"dtype must be one of int, float; got {dtype!r}"
            )
        self._rows = _check_dimension("rows", rows)
        self._cols = _check_dimension("cols", cols)
        self._dtype = dtype
        self._data: list[Element] = [dtype(0)] * (self._rows * self._cols)

    @classmethod
    def from_rows(
        cls, values: Iterable[Iterable[Any]], dtype: type | None = None
    ) -> "Tensor":
        """
        Build a tensor from nested row sequences.

        Parameters
        ----------
        values : Iterable[Iterable[Any]]
            One iterable of numbers per row; all rows must have equal length.
        dtype : type | None, optional
            Element type. If None, `float` when any value is a float, else `int`.

        Returns
        -------
        Tensor
            A tensor of shape (len(values), len(values[0])).

        Raises
        ------
        InvalidArgument
            If `values` is empty, contains an empty or ragged row, or holds
            a value that cannot be stored as `dtype`.
        """
        table = [list(row) for row in values]
        if not table or not table[0]:
            raise InvalidArgument("from_rows needs at least one non-empty row")
        width = len(table[0])
        if any(len(row) != width for row in table):
            raise InvalidArgument("from_rows needs rows of equal length")

        if dtype is None:
            has_float = any(isinstance(v, float) for row in table for v in row)
            dtype = float if has_float else int

        tensor = cls(len(table), width, dtype)
        for i, row in enumerate(table):
            for j, value in enumerate(row):
                tensor.set(i, j, value)
        return tensor

    @classmethod
    def _with_data(cls, rows: int, cols: int, dtype: type, data: list) -> "Tensor":
        tensor = cls(rows, cols, dtype)
        tensor._data = data
        return tensor

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def cols(self) -> int:
        return self._cols

    @property
    def shape(self) -> tuple[int, int]:
        """
        Get the tensor's shape.

        Returns:
            shape (tuple[int, int]): The (rows, cols) pair.
        """
        return (self._rows, self._cols)

    @property
    def dtype(self) -> type:
        return self._dtype

    @property
    def size(self) -> int:
        return len(self._data)

    def _convert(self, value: Any) -> Element:
        if not _is_scalar(value):
            raise InvalidArgument(
                f"Cannot store {value!r} in a tensor of {self._dtype.__name__}"
            )
        try:
            return self._dtype(value)
        except (OverflowError, ValueError) as error:
            raise InvalidArgument(
                f"Cannot convert {value!r} to {self._dtype.__name__}"
            ) from error

    def _offset(self, i: int, j: int) -> int:
        try:
            i, j = operator.index(i), operator.index(j)
        except TypeError as error:
            raise InvalidArgument(
                f"Tensor indices must be integers, got ({i!r}, {j!r})"
            ) from error
        if not (0 <= i < self._rows and 0 <= j < self._cols):
            raise OutOfRange((i, j), self.shape)
        return i * self._cols + j

    def _row(self, i: int) -> list[Element]:
        start = i * self._cols
        return self._data[start:start + self._cols]

    def get(self, i: int, j: int) -> Element:
        """
        Read element (i, j).

        Raises:
            OutOfRange: If i is not in [0, rows) or j is not in [0, cols).
            InvalidArgument: If i or j is not an integer.
        """
        return self._data[self._offset(i, j)]

    def set(self, i: int, j: int, value: Any) -> None:
        """
        Write element (i, j), converting `value` to the tensor's dtype.

        Raises:
            OutOfRange: If i is not in [0, rows) or j is not in [0, cols).
            InvalidArgument: If `value` cannot be converted to the dtype.
        """
        offset = self._offset(i, j)
        self._data[offset] = self._convert(value)

    def __getitem__(self, key: tuple[int, int]) -> Element:
        return self.get(*self._unpack_key(key))

    def __setitem__(self, key: tuple[int, int], value: Any) -> None:
        self.set(*self._unpack_key(key), value)

    @staticmethod
    def _unpack_key(key: Any) -> tuple[int, int]:
        if not isinstance(key, tuple) or len(key) != 2:
            raise InvalidArgument(f"Tensor index must be an (i, j) pair, got {key!r}")
        return key

    def to_rows(self) -> list[list[Element]]:
        """Return the elements as a list of row lists (a copy)."""
        return [self._row(i) for i in range(self._rows)]

    def copy(self) -> "Tensor":
        return Tensor._with_data(self._rows, self._cols, self._dtype, list(self._data))

    def __copy__(self) -> "Tensor":
        return self.copy()

    def __deepcopy__(self, memo: dict) -> "Tensor":
        # Elements are immutable numbers, so a shallow buffer copy is a deep copy.
        return self.copy()

    def equals(self, other: Any) -> bool:
        """
        Compare shape and elements.

        Parameters
        ----------
        other : Any
            Object to compare against.

        Returns
        -------
        bool
            True iff `other` is a Tensor of the same shape whose elements all
            compare equal with ``==``. NaN never equals NaN, even within
            the same tensor. Tensors of different shape are never
            equal.
        """
        if not isinstance(other, Tensor):
            return False
        if self.shape != other.shape:
            return False
        return all(x == y for x, y in zip(self._data, other._data))

    def combine(self, other: "Tensor", op: Callable[[Any, Any], Any]) -> "Tensor":
        """
        Apply a binary operator position-wise.

        Parameters
        ----------
        other : Tensor
            Right-hand operand, same shape as this tensor.
        op : Callable[[Any, Any], Any]
            Operator applied as ``op(self[i, j], other[i, j])``.

        Returns
        -------
        Tensor
            New tensor of the same shape. Its dtype is the operands' dtype
            when they agree, otherwise `float`.

        Raises
        ------
        InvalidArgument
            If `other` is not a Tensor.
        SizeMismatch
            If the shapes differ.
        """
        if not isinstance(other, Tensor):
            raise InvalidArgument(f"Cannot combine a tensor with {type(other).__name__}")
        if self.shape != other.shape:
            raise SizeMismatch(
                f"Cannot combine tensors of shape {self.shape} and {other.shape}"
            )
        dtype = _common_dtype(self, other)
        data = [dtype(op(x, y)) for x, y in zip(self._data, other._data)]
        return Tensor._with_data(self._rows, self._cols, dtype, data)

    def scale(self, scalar: Any) -> "Tensor":
        """
        Multiply every element by `scalar`, keeping the tensor's dtype.

        Raises:
            InvalidArgument: If `scalar` is not a real number, or a product
                cannot be stored as the dtype (inf or NaN in an int tensor).
        """
        if not _is_scalar(scalar):
            raise InvalidArgument(f"Cannot scale a tensor by {scalar!r}")
        try:
            data = [self._dtype(x * scalar) for x in self._data]
        except (OverflowError, ValueError) as error:
            raise InvalidArgument(
                f"Cannot scale a {self._dtype.__name__} tensor by {scalar!r}"
            ) from error
        return Tensor._with_data(self._rows, self._cols, self._dtype, data)

    def matmul(self, other: "Tensor") -> "Tensor":
        """
        Algebraic matrix product ``self x other``.

        Each output cell accumulates ``sum(self[i, k] * other[k, j])`` from
        the additive identity, using the elements' native arithmetic.

        Parameters
        ----------
        other : Tensor
            Right-hand operand with ``other.rows == self.cols``.

        Returns
        -------
        Tensor
            Tensor of shape (self.rows, other.cols).

        Raises
        ------
        InvalidArgument
            If `other` is not a Tensor.
        DimensionIncompatible
            If ``self.cols != other.rows``.
        """
        if not isinstance(other, Tensor):
            raise InvalidArgument(f"Cannot multiply a tensor by {type(other).__name__}")
        if self._cols != other._rows:
            raise DimensionIncompatible(
                f"Cannot multiply {self.shape} by {other.shape}: "
                f"{self._cols} columns vs {other._rows} rows"
            )
        logger.debug(f"Multiplying {self.shape} by {other.shape}")

        dtype = _common_dtype(self, other)
        inner, width = self._cols, other._cols
        right = other._data
        data = []
        for i in range(self._rows):
            row = self._row(i)
            for j in range(width):
                total = dtype(0)
                for k in range(inner):
                    total += row[k] * right[k * width + j]
                data.append(dtype(total))
        return Tensor._with_data(self._rows, width, dtype, data)

    def transpose(self) -> "Tensor":
        """Return a new (cols, rows) tensor with result[j, i] == self[i, j]."""
        rows, cols = self._rows, self._cols
        data = [self._data[i * cols + j] for j in range(cols) for i in range(rows)]
        return Tensor._with_data(cols, rows, self._dtype, data)

    @property
    def T(self) -> "Tensor":
        return self.transpose()

    def transpose_in_place(self) -> None:
        """
        Transpose the receiver.

        The transposed buffer is built first, then shape and buffer are
        swapped in a single assignment.
        """
        flipped = self.transpose()
        logger.debug(f"Transposing {self.shape} in place")
        self._rows, self._cols, self._data = flipped._rows, flipped._cols, flipped._data

    def fill(self, value: Any) -> None:
        """
        Overwrite every element with `value` converted to the dtype.

        Raises:
            InvalidArgument: If `value` cannot be converted to the dtype.
        """
        converted = self._convert(value)
        self._data = [converted] * len(self._data)

    def render(self) -> str:
        """
        Render the tensor as text.

        Elements of a row are separated by a single space and rows by a
        newline. There is no trailing space and no trailing newline.
        """
        return "\n".join(
            " ".join(str(value) for value in self._row(i))
            for i in range(self._rows)
        )

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return (
            f"Tensor(rows={self._rows}, cols={self._cols}, "
            f"dtype={self._dtype.__name__})"
        )

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Tensor):
            return NotImplemented
        return equals(self, other)

    def __add__(self, other: Any) -> "Tensor":
        if not isinstance(other, Tensor):
            return NotImplemented
        return add(self, other)

    def __sub__(self, other: Any) -> "Tensor":
        if not isinstance(other, Tensor):
            return NotImplemented
        return subtract(self, other)

    def __mul__(self, other: Any) -> "Tensor":
        if isinstance(other, Tensor):
            return multiply(self, other)
        if _is_scalar(other):
            return scale(self, other)
        return NotImplemented

    def __rmul__(self, other: Any) -> "Tensor":
        if _is_scalar(other):
            return scale_scalar_first(other, self)
        return NotImplemented

    def __matmul__(self, other: Any) -> "Tensor":
        if not isinstance(other, Tensor):
            return NotImplemented
        return multiply(self, other)


def _require_tensor(value: Any, name: str) -> None:
    if not isinstance(value, Tensor):
        raise InvalidArgument(f"{name} must be a Tensor, got {type(value).__name__}")


def combine(a: Tensor, b: Tensor, op: Callable[[Any, Any], Any]) -> Tensor:
    """Apply `op` position-wise to two equally-shaped tensors."""
    _require_tensor(a, "a")
    return a.combine(b, op)


def add(a: Tensor, b: Tensor) -> Tensor:
    return combine(a, b, operator.add)


def subtract(a: Tensor, b: Tensor) -> Tensor:
    return combine(a, b, operator.sub)


def scale(t: Tensor, k: Any) -> Tensor:
    """Multiply every element of `t` by the scalar `k`."""
    _require_tensor(t, "t")
    return t.scale(k)


def scale_scalar_first(k: Any, t: Tensor) -> Tensor:
    """Reflected form of `scale`, for ``k * t``."""
    return scale(t, k)


def multiply(a: Tensor, b: Tensor) -> Tensor:
    """Matrix product of `a` (m x n) and `b` (n x p)."""
    _require_tensor(a, "a")
    return a.matmul(b)


def transposed(t: Tensor) -> Tensor:
    _require_tensor(t, "t")
    return t.transpose()


def transpose_in_place(t: Tensor) -> None:
    _require_tensor(t, "t")
    t.transpose_in_place()


def fill(t: Tensor, value: Any) -> None:
    _require_tensor(t, "t")
    t.fill(value)


def equals(a: Tensor, b: Tensor) -> bool:
    _require_tensor(a, "a")
    return a.equals(b)


def render(t: Tensor) -> str:
    _require_tensor(t, "t")
    return t.render()

import numpy as np

from src.domain.entities.errors import InvalidArgument
from src.domain.entities.tensor import Tensor

_NUMPY_DTYPES = {int: np.int64, float: np.float64}


def to_numpy(tensor: Tensor) -> np.ndarray:
    """
    Convert a domain Tensor to a NumPy array.

    Parameters
    ----------
    tensor : Tensor
        Tensor to convert.

    Returns
    -------
    np.ndarray
        Independent array of shape (rows, cols), `int64` for integer tensors
        and `float64` for floating-point ones.
    """
    return np.array(tensor.to_rows(), dtype=_NUMPY_DTYPES[tensor.dtype])


def from_numpy(array: np.ndarray) -> Tensor:
    """
    Convert a 2-D NumPy array to a domain Tensor.

    Signed and unsigned integer arrays become `int` tensors, floating-point
    arrays become `float` tensors.

    Parameters
    ----------
    array : np.ndarray
        Array with ndim == 2 and at least one row and one column.

    Returns
    -------
    Tensor
        Tensor holding a copy of the array's values.

    Raises
    ------
    InvalidArgument
        If the array is not 2-D, is empty, or has a non-numeric dtype.
    """
    array = np.asarray(array)
    if array.ndim != 2:
        raise InvalidArgument(f"Expected a 2-D array, got {array.ndim} dimensions")

    if array.dtype.kind in "iu":
        dtype = int
    elif array.dtype.kind == "f":
        dtype = float
    else:
        raise InvalidArgument(f"Unsupported array dtype {array.dtype}")

    return Tensor.from_rows(array.tolist(), dtype=dtype)

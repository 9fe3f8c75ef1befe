"""Pytest configuration and shared fixtures."""
import pytest
from fixtures.recording_writer import RecordingTensorWriter

from src.domain.entities.tensor import Tensor


@pytest.fixture
def recording_writer():
    """
    Provide a RecordingTensorWriter instance for tests.

    Returns:
        RecordingTensorWriter: A writer with no records.
    """
    return RecordingTensorWriter()


@pytest.fixture
def operands():
    """
    Provide three equally-shaped integer tensors.

    Returns:
        tuple[Tensor, Tensor, Tensor]: 2x3 tensors A, B and C.
    """
    a = Tensor.from_rows([[1, 2, 3], [4, 5, 6]])
    b = Tensor.from_rows([[7, -8, 9], [0, 11, -12]])
    c = Tensor.from_rows([[-1, 0, 2], [3, -5, 8]])
    return a, b, c


@pytest.fixture
def float_operands():
    """
    Provide three equally-shaped float tensors.

    Values are exact in binary floating point so sums compare exactly.
    """
    a = Tensor.from_rows([[0.5, 1.25], [2.0, -3.75]])
    b = Tensor.from_rows([[4.0, -0.25], [0.125, 8.5]])
    c = Tensor.from_rows([[-1.5, 2.25], [6.0, 0.0]])
    return a, b, c

"""
Scale and Render Use-Case.

This module provides a use-case that builds a filled tensor, multiplies it
by a scalar and hands both versions to a writer.
"""
import logging

from src.domain.entities.tensor import Tensor, scale, scale_scalar_first
from src.domain.interfaces.tensor_writer import TensorWriter

logger = logging.getLogger(__name__)


class ScaleAndRender:
    """
    Use-case for demonstrating scalar broadcast on a tensor.

    This use-case orchestrates the workflow of:
    1. Constructing a (rows, cols) tensor of the requested element type
    2. Filling it with a single value and writing it
    3. Scaling it by a scalar, either as ``tensor * scalar`` or, when
       `reflected` is set, as ``scalar * tensor``
    4. Writing the scaled tensor

    Attributes
    ----------
    rows : int
        Number of rows of the tensor.
    cols : int
        Number of columns of the tensor.
    element_type : type
        `int` or `float`.
    fill_value : float
        Value every element is set to before scaling.
    scalar : float
        Factor applied to every element.
    writer : TensorWriter
        Sink for the rendered tensors.
    reflected : bool
        Whether to put the scalar on the left-hand side.
    """

    def __init__(
        self,
        rows: int,
        cols: int,
        element_type: type,
        fill_value: float,
        scalar: float,
        writer: TensorWriter,
        reflected: bool = False,
    ) -> None:
        self.rows = rows
        self.cols = cols
        self.element_type = element_type
        self.fill_value = fill_value
        self.scalar = scalar
        self.writer = writer
        self.reflected = reflected

    def run(self) -> Tensor:
        """
        Execute the demonstration.

        Returns
        -------
        Tensor
            The scaled tensor.

        Raises
        ------
        InvalidArgument
            If the dimensions, element type, fill value or scalar are invalid.
        """
        logger.info(
            f"Building a {self.rows}x{self.cols} {self.element_type.__name__} "
            f"tensor filled with {self.fill_value}..."
        )
        tensor = Tensor(self.rows, self.cols, self.element_type)
        tensor.fill(self.fill_value)
        self.writer.write(tensor, label="original")

        if self.reflected:
            logger.info(f"Computing {self.scalar} * tensor...")
            scaled = scale_scalar_first(self.scalar, tensor)
        else:
            logger.info(f"Computing tensor * {self.scalar}...")
            scaled = scale(tensor, self.scalar)

        self.writer.write(scaled, label="scaled")
        return scaled

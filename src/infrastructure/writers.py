import sys
from typing import TextIO

from src.domain.entities.tensor import Tensor
from src.domain.interfaces.tensor_writer import TensorWriter


class StreamTensorWriter(TensorWriter):
    """
    Writes tensors to a text stream.

    Each rendering is followed by a single newline, so consecutive tensors
    appear one block after another.

    Attributes
    ----------
    stream : TextIO | None
        Destination stream. None means the current `sys.stdout`, looked up
        at write time.
    """

    def __init__(self, stream: TextIO | None = None) -> None:
        self.stream = stream

    def write(self, tensor: Tensor, label: str | None = None) -> None:
        """
        Write `label` (if given) and the tensor's rendering to the stream.

        Parameters
        ----------
        tensor : Tensor
            Tensor to render.
        label : str | None, optional
            Caption line written before the rendering.
        """
        stream = self.stream if self.stream is not None else sys.stdout
        if label:
            stream.write(f"{label}\n")
        stream.write(f"{tensor.render()}\n")
        stream.flush()


class SilentTensorWriter(TensorWriter):
    """
    Writer that produces no output.

    Useful for testing or when only the returned tensors matter.
    """

    def write(self, tensor: Tensor, label: str | None = None) -> None:
        """No-op implementation."""
        pass

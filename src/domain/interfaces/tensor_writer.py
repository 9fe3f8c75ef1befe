from abc import ABC, abstractmethod

from src.domain.entities.tensor import Tensor


class TensorWriter(ABC):
    """Abstract sink for rendered tensors."""

    @abstractmethod
    def write(self, tensor: Tensor, label: str | None = None) -> None:
        """
        Emit the textual rendering of a tensor.

        Parameters
        ----------
        tensor : Tensor
            Tensor to render.
        label : str | None, optional
            Caption written before the rendering, if any.
        """
        pass

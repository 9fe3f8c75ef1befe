"""Result entity - a value or the tagged error that prevented it."""
from dataclasses import dataclass
from typing import Any, Callable, Generic, TypeVar

from src.domain.entities.errors import ErrorKind, TensorError

V = TypeVar("V")


@dataclass(frozen=True)
class Result(Generic[V]):
    """
    Outcome of a tensor operation.

    Exactly one of `value` and `error` is meaningful: `error` is None on
    success.
    """

    value: V | None = None
    error: TensorError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def kind(self) -> ErrorKind | None:
        """Tag of the captured error, or None on success."""
        return None if self.error is None else self.error.kind

    def unwrap(self) -> V:
        """
        Return the value, or raise the captured error.

        Raises
        ------
        TensorError
            The error recorded when the operation failed.
        """
        if self.error is not None:
            raise self.error
        return self.value


def attempt(operation: Callable[..., V], *args: Any, **kwargs: Any) -> Result[V]:
    """
    Run a tensor operation and capture its outcome.

    Only TensorError subclasses are captured; anything else propagates.

    Parameters
    ----------
    operation : Callable[..., V]
        Any tensor function or bound method, e.g. `multiply` or `tensor.get`.
    *args, **kwargs
        Arguments forwarded to `operation`.

    Returns
    -------
    Result[V]
        The returned value, or the raised error.
    """
    try:
        return Result(value=operation(*args, **kwargs))
    except TensorError as error:
        return Result(error=error)

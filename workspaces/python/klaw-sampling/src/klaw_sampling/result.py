"""Result type: Ok[T] | Err[E], and the @checked decorator for sampling calls."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Any, NoReturn, TypeIs

import msgspec
import wrapt

from klaw_sampling.errors import (
    InvalidSize,
    InvalidSizeError,
    InvalidWeights,
    InvalidWeightsError,
    LengthMismatch,
    LengthMismatchError,
)

__all__ = ['Err', 'Ok', 'Result', 'SamplingFailure', 'checked', 'collect']


class Ok[T](msgspec.Struct, frozen=True, gc=False):
    """Success variant of Result containing a value of type T.

    Examples:
        >>> Ok(3).map(lambda i: i + 1)
        Ok(value=4)
    """

    value: T

    def is_ok(self) -> TypeIs[Ok[T]]:
        """Return True if the result is Ok."""
        return True

    def is_err(self) -> TypeIs[Err[object]]:
        """Return False since this is Ok."""
        return False

    def unwrap(self) -> T:
        """Return the contained Ok value."""
        return self.value

    def unwrap_or(self, default: T) -> T:  # noqa: ARG002
        """Return the contained Ok value, ignoring the default."""
        return self.value

    def expect(self, _msg: str) -> T:
        """Return the contained Ok value, ignoring the message."""
        return self.value

    def map[U](self, f: Callable[[T], U]) -> Ok[U]:
        """Apply a function to the contained value."""
        return Ok(f(self.value))

    def map_err[F](self, _f: Callable[[object], F]) -> Ok[T]:
        """Return self unchanged since this is Ok."""
        return self

    def and_then[U, E](self, f: Callable[[T], Ok[U] | Err[E]]) -> Ok[U] | Err[E]:
        """Apply a function that returns a Result to the contained value.

        Also known as flatmap or bind.
        """
        return f(self.value)


class Err[E](msgspec.Struct, frozen=True, gc=False):
    """Error variant of Result containing an error of type E.

    Examples:
        >>> Err('k > n').unwrap_or(0)
        0
    """

    error: E

    def is_ok(self) -> TypeIs[Ok[object]]:
        """Return False since this is Err."""
        return False

    def is_err(self) -> TypeIs[Err[E]]:
        """Return True if the result is Err."""
        return True

    def unwrap(self) -> NoReturn:
        """Raise the exception variant of the contained error.

        Sampling errors carry a ``to_exception()`` conversion; anything else
        is reported as a RuntimeError.
        """
        to_exception = getattr(self.error, 'to_exception', None)
        if to_exception is not None:
            raise to_exception()
        raise RuntimeError(f'Called unwrap on Err: {self.error!r}')

    def unwrap_or[T](self, default: T) -> T:
        """Return the default value since this is Err."""
        return default

    def expect(self, msg: str) -> NoReturn:
        """Raise a RuntimeError with a custom message."""
        raise RuntimeError(f'{msg}: {self.error!r}')

    def map[T, U](self, _f: Callable[[T], U]) -> Err[E]:
        """Return self unchanged since this is Err."""
        return self

    def map_err[F](self, f: Callable[[E], F]) -> Err[F]:
        """Apply a function to the contained error."""
        return Err(f(self.error))

    def and_then[T, U](self, _f: Callable[[T], Ok[U] | Err[E]]) -> Err[E]:
        """Return self unchanged since this is Err."""
        return self


type Result[T, E = Exception] = Ok[T] | Err[E]

type SamplingFailure = InvalidSize | InvalidWeights | LengthMismatch


def collect[T, E](results: Iterable[Ok[T] | Err[E]]) -> Ok[list[T]] | Err[E]:
    """Collect an iterable of Results into a Result of list.

    Short-circuits on the first Err encountered.
    """
    values: list[T] = []
    for result in results:
        if isinstance(result, Err):
            return result
        values.append(result.value)
    return Ok(values)


def checked(func: Callable[..., Any]) -> Callable[..., Ok[Any] | Err[SamplingFailure]]:
    """Decorator that turns raised sampling errors into Err values.

    The wrapped function returns ``Ok(value)`` on success and
    ``Err(struct)`` when it raises InvalidSizeError, InvalidWeightsError or
    LengthMismatchError, where ``struct`` is the msgspec variant of the
    error. Other exceptions, a bare SamplingError included, propagate
    unchanged.

    Example:
        ```python
        try_build = checked(build_table)
        try_build([0.0, 0.0])
        # Err(error=InvalidWeights(reason='total weight must be positive', index=None))
        ```
    """

    @wrapt.decorator
    def wrapper(
        wrapped: Callable[..., Any],
        instance: Any,
        args: tuple[Any, ...],
        kwargs: dict[str, Any],
    ) -> Ok[Any] | Err[SamplingFailure]:
        try:
            return Ok(wrapped(*args, **kwargs))
        except (InvalidSizeError, InvalidWeightsError, LengthMismatchError) as e:
            return Err(e.to_struct())

    return wrapper(func)

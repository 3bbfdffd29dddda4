"""Result type: Ok[T] | Err[E] for checks that report instead of raise."""

from __future__ import annotations

from collections.abc import Callable
from typing import NoReturn, TypeIs

import msgspec

__all__ = ['Err', 'Ok', 'Result']


class Ok[T](msgspec.Struct, frozen=True, gc=False):
    """Success variant of Result containing a value of type T.

    Examples:
        >>> Ok(42).unwrap()
        42
        >>> Ok(42).map(lambda x: x * 2)
        Ok(value=84)
    """

    value: T

    def is_ok(self) -> TypeIs[Ok[T]]:
        """Return True since this is Ok."""
        return True

    def is_err(self) -> TypeIs[Err[object]]:
        """Return False since this is Ok."""
        return False

    def unwrap(self) -> T:
        """Return the contained Ok value."""
        return self.value

    def unwrap_err(self) -> NoReturn:
        """Raise since Ok carries no error.

        Raises:
            RuntimeError: Always.
        """
        raise RuntimeError(f'Called unwrap_err on Ok: {self.value!r}')

    def unwrap_or(self, default: T) -> T:  # noqa: ARG002
        """Return the contained Ok value, ignoring the default."""
        return self.value

    def map[U](self, f: Callable[[T], U]) -> Ok[U]:
        """Apply a function to the contained value.

        Args:
            f: Function to apply to the Ok value.

        Returns:
            Ok containing the result of applying f to the value.
        """
        return Ok(f(self.value))

    def map_err[F](self, _f: Callable[[object], F]) -> Ok[T]:
        """Return self unchanged since this is Ok."""
        return self

    def and_then[U, E](self, f: Callable[[T], Ok[U] | Err[E]]) -> Ok[U] | Err[E]:
        """Apply a function that returns a Result to the contained value.

        Also known as flatmap or bind. Chaining guard checks through
        ``and_then`` stops at the first Err.
        """
        return f(self.value)


class Err[E](msgspec.Struct, frozen=True, gc=False):
    """Error variant of Result containing an error of type E.

    Examples:
        >>> Err('bad').is_err()
        True
        >>> Err('bad').unwrap_or(0)
        0
    """

    error: E

    def is_ok(self) -> TypeIs[Ok[object]]:
        """Return False since this is Err."""
        return False

    def is_err(self) -> TypeIs[Err[E]]:
        """Return True since this is Err."""
        return True

    def unwrap(self) -> NoReturn:
        """Raise since Err has no Ok value.

        Raises:
            RuntimeError: Always, naming the contained error.
        """
        raise RuntimeError(f'Called unwrap on Err: {self.error!r}')

    def unwrap_err(self) -> E:
        """Return the contained error."""
        return self.error

    def unwrap_or[T](self, default: T) -> T:
        """Return the default since this is Err."""
        return default

    def map[T, U](self, _f: Callable[[T], U]) -> Err[E]:
        """Return self unchanged since there is no value to map."""
        return self

    def map_err[F](self, f: Callable[[E], F]) -> Err[F]:
        """Apply a function to the contained error."""
        return Err(f(self.error))

    def and_then[T, U](self, _f: Callable[[T], Ok[U] | Err[E]]) -> Err[E]:
        """Return self unchanged; the chain stops here."""
        return self


type Result[T, E] = Ok[T] | Err[E]

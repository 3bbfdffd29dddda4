"""Adapters from raising guard chains to Result values."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import wrapt

from klaw_guard.errors import Invalid, ValidationError
from klaw_guard.guard import ValueGuard
from klaw_guard.result import Err, Ok

__all__ = ['attempt', 'guarded']


def attempt[T](build: Callable[[], ValueGuard[T]]) -> Ok[T | None] | Err[Invalid]:
    """Run a guard chain and return its value as a Result.

    Args:
        build: Zero-argument callable that builds and returns a guard chain.

    Returns:
        Ok(final value) if every check passed, else Err(Invalid) for the first failure.

    Example:
        ```python
        attempt(lambda: guard(form.get('age'), 'age').integer().range(0, 150))
        # Ok(value=42)
        attempt(lambda: guard(None, 'age').integer())
        # Err(error=Invalid(parameter_name='age', message='age is required.', ...))
        ```
    """
    try:
        chain = build()
    except ValidationError as e:
        return Err(e.to_struct())
    return Ok(chain.value)


def guarded[**P, T](func: Callable[P, T]) -> Callable[P, Ok[T] | Err[Invalid]]:
    """Decorator that turns a raised ValidationError into Err(Invalid).

    Any other exception propagates unchanged.

    Example:
        ```python
        @guarded
        def parse_signup(payload: dict) -> Signup:
            return Signup(
                email=guard(payload.get('email'), 'email').trim().lower().email().value,
                age=guard(payload.get('age'), 'age').optional().integer().min(13).value,
            )

        parse_signup({'email': 'nope'})
        # Err(error=Invalid(parameter_name='email', ...))
        ```
    """

    @wrapt.decorator
    def wrapper(
        wrapped: Callable[P, T],
        instance: Any,
        args: tuple[Any, ...],
        kwargs: dict[str, Any],
    ) -> Ok[T] | Err[Invalid]:
        try:
            result = wrapped(*args, **kwargs)
        except ValidationError as e:
            return Err(e.to_struct())
        return Ok(result)

    return wrapper(func)

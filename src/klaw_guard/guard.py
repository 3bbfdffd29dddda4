"""ValueGuard: fluent, fail-fast validation of a single value.

Example:
    ```python
    from klaw_guard import guard

    email = guard(payload.get('email'), 'email').trim().lower().email().value
    tags = guard(payload.get('tags'), 'tags').optional().array().max_length(10).make_unique().value

    def check_item(item, index):
        item.object().not_empty()

    guard(payload['items'], 'items').array().min_length(1).each(check_item)
    ```

A guard is immutable. Every operation returns either the same guard or a new
one carrying the derived value together with the parameter name and the
optional flag, so a chain can be read left to right as a pipeline.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Hashable, Iterable
from dataclasses import dataclass, field, replace
from typing import Any

import msgspec

from klaw_guard import predicates
from klaw_guard._config import get_config
from klaw_guard._logging import get_logger
from klaw_guard.errors import ErrorKind, Invalid
from klaw_guard.patterns import compile_pattern
from klaw_guard.result import Err, Ok

__all__ = ['ValueGuard', 'guard']

logger = get_logger(__name__)


def _default_parameter_name() -> str:
    return get_config().default_parameter_name


@dataclass(slots=True, frozen=True)
class ValueGuard[T]:
    """A value under validation.

    Attributes:
        value: The guarded value; never ``msgspec.UNSET``, absent values are None.
        parameter_name: Name used in error messages.
        is_optional: When True, checks on an absent value pass without running.
    """

    value: T | None
    parameter_name: str = field(default_factory=_default_parameter_name)
    is_optional: bool = False

    def __post_init__(self) -> None:
        if self.value is msgspec.UNSET:
            object.__setattr__(self, 'value', None)

    def _derive[U](self, value: U) -> ValueGuard[U]:
        return ValueGuard(value, self.parameter_name, self.is_optional)

    def _fail(self, invalid: Invalid) -> Err[Invalid]:
        if get_config().log_level is not None:
            logger.debug(
                'guard.check_failed',
                parameter_name=invalid.parameter_name,
                kind=invalid.kind.value,
                message=invalid.message,
            )
        return Err(invalid)

    # --- Core ---

    def has_value(self) -> bool:
        """Return True if the guarded value is neither None nor UNSET."""
        return not predicates.is_absent(self.value)

    def check(
        self,
        predicate: Callable[[T], bool],
        message: str | None = None,
    ) -> Ok[ValueGuard[T]] | Err[Invalid]:
        """Run a predicate against the value and report the outcome.

        This is the non-raising form of ``ensure``. An absent value fails with
        ``ErrorKind.MISSING_REQUIRED_VALUE`` unless the guard is optional, in
        which case the predicate is skipped and the check passes.

        Args:
            predicate: Called with the present value; only a return of ``True`` passes.
            message: Message for a failing predicate. Defaults to "<name> '<value>' is not valid.".

        Returns:
            Ok(self) if the check passed, else Err(Invalid).

        Example:
            ```python
            match guard(port, 'port').check(lambda p: p > 1024):
                case Ok(checked):
                    bind(checked.value)
                case Err(invalid):
                    reply(400, invalid.message)
            ```
        """
        if not self.has_value():
            if self.is_optional:
                return Ok(self)
            return self._fail(
                Invalid(
                    self.parameter_name,
                    f'{self.parameter_name} is required.',
                    ErrorKind.MISSING_REQUIRED_VALUE,
                )
            )
        if predicate(self.value) is not True:
            return self._fail(
                Invalid(
                    self.parameter_name,
                    message or f"{self.parameter_name} '{self.value}' is not valid.",
                )
            )
        return Ok(self)

    def ensure(self, predicate: Callable[[T], bool], message: str | None = None) -> ValueGuard[T]:
        """Run a predicate against the value, raising on failure.

        Every built-in check goes through here, and so can custom ones.

        Args:
            predicate: Called with the present value; only a return of ``True`` passes.
            message: Message for a failing predicate.

        Returns:
            This guard, for chaining.

        Raises:
            MissingValueError: The value is absent and the guard is not optional.
            ValidationError: The predicate did not return True.
        """
        match self.check(predicate, message):
            case Err(invalid):
                raise invalid.to_exception()
            case _:
                return self

    # --- Type checks ---

    def array(self, message: str | None = None) -> ValueGuard[T]:
        """Ensure the value is a list or tuple."""
        return self.ensure(predicates.is_array, message or f'{self.parameter_name} must be an array.')

    def object(self, message: str | None = None) -> ValueGuard[T]:
        """Ensure the value is a mapping."""
        return self.ensure(predicates.is_object, message or f'{self.parameter_name} must be an object.')

    def string(self, message: str | None = None) -> ValueGuard[T]:
        return self.ensure(predicates.is_string, message or f'{self.parameter_name} must be a string.')

    def number(self, message: str | None = None) -> ValueGuard[T]:
        """Ensure the value is an int or float (bools are rejected)."""
        return self.ensure(predicates.is_number, message or f'{self.parameter_name} must be a number.')

    def date(self, message: str | None = None) -> ValueGuard[T]:
        return self.ensure(predicates.is_date, message or f'{self.parameter_name} must be a date.')

    def integer(self, message: str | None = None) -> ValueGuard[T]:
        """Ensure the value is a whole number within the safe double range."""
        return self.ensure(
            predicates.is_safe_integer,
            message
            or (
                f'{self.parameter_name} must be an integer '
                f'(from {predicates.MIN_SAFE_INTEGER} to {predicates.MAX_SAFE_INTEGER}).'
            ),
        )

    def instance_of(self, class_type: type | tuple[type, ...], message: str | None = None) -> ValueGuard[T]:
        """Ensure ``isinstance(value, class_type)``."""
        name = class_type.__name__ if isinstance(class_type, type) else ' or '.join(c.__name__ for c in class_type)
        return self.ensure(
            lambda value: isinstance(value, class_type),
            message or f'{self.parameter_name} {self.value} must be an instance of {name}.',
        )

    # --- Comparisons ---

    def equal(self, other: Any, message: str | None = None) -> ValueGuard[T]:
        """Ensure the value strictly equals ``other`` (no deep comparison)."""
        return self.ensure(
            lambda value: predicates.strict_equals(value, other),
            message or f"{self.parameter_name} must be equal to '{other}'.",
        )

    def not_equal(self, other: Any, message: str | None = None) -> ValueGuard[T]:
        return self.ensure(
            lambda value: not predicates.strict_equals(value, other),
            message or f'{self.parameter_name} must not be equal to {other}.',
        )

    def in_(self, possible_values: Iterable[Any], message: str | None = None) -> ValueGuard[T]:
        """Ensure the value is one of ``possible_values``."""
        options = list(possible_values)
        return self.ensure(
            lambda value: predicates.contains(options, value),
            message or f'{self.parameter_name} must be one of the following: {", ".join(map(str, options))}.',
        )

    def not_in(self, unwanted_values: Iterable[Any], message: str | None = None) -> ValueGuard[T]:
        """Ensure the value is none of ``unwanted_values``."""
        options = list(unwanted_values)
        return self.ensure(
            lambda value: not predicates.contains(options, value),
            message or f'{self.parameter_name} must not be any of the following: {", ".join(map(str, options))}.',
        )

    def min(self, min_value: float, message: str | None = None) -> ValueGuard[T]:
        return self.ensure(
            lambda value: predicates.is_number(value) and value >= min_value,
            message or f'{self.parameter_name} must be greater than or equal to {min_value}.',
        )

    def max(self, max_value: float, message: str | None = None) -> ValueGuard[T]:
        return self.ensure(
            lambda value: predicates.is_number(value) and value <= max_value,
            message or f'{self.parameter_name} must be less than or equal to {max_value}.',
        )

    def range(self, min_value: float, max_value: float, message: str | None = None) -> ValueGuard[T]:
        """Ensure ``min_value <= value <= max_value``; both bounds share one message."""
        message = message or f'{self.parameter_name} must be between {min_value} and {max_value}.'
        return self.min(min_value, message).max(max_value, message)

    # --- Length and content ---

    def min_length(self, length: int, message: str | None = None) -> ValueGuard[T]:
        return self.ensure(
            lambda value: predicates.has_length(value) and len(value) >= length,
            message or f'{self.parameter_name} must have a minimum length of {length}.',
        )

    def max_length(self, length: int, message: str | None = None) -> ValueGuard[T]:
        return self.ensure(
            lambda value: predicates.has_length(value) and len(value) <= length,
            message or f'{self.parameter_name} must have a maximum length of {length}.',
        )

    def length(self, min_length: int, max_length: int, message: str | None = None) -> ValueGuard[T]:
        """Ensure a string or array length lies within ``[min_length, max_length]``."""
        return self.min_length(min_length, message).max_length(max_length, message)

    def not_empty(self, message: str | None = None) -> ValueGuard[T]:
        """Ensure strings and arrays have items and mappings have keys.

        Values of any other type pass.
        """
        return self.ensure(predicates.is_not_empty, message or f'{self.parameter_name} must not be empty.')

    def not_empty_or_whitespace(self, message: str | None = None) -> ValueGuard[T]:
        """Ensure the value is a string with at least one non-whitespace character."""
        return self.ensure(predicates.is_not_blank, message or f'{self.parameter_name} must not be empty.')

    def unique(self, key: Callable[[Any], Any] | None = None, message: str | None = None) -> ValueGuard[T]:
        """Ensure the value is an array without duplicate keys.

        Args:
            key: Maps an element to the key it is compared by. Defaults to the element.
            message: Message override.
        """
        return self.ensure(
            lambda value: predicates.is_array(value) and predicates.has_unique_entries(value, key),
            message or f'{self.parameter_name} must be an array with unique entries.',
        )

    # --- Patterns ---

    def pattern(self, regex: str | re.Pattern[str], message: str | None = None) -> ValueGuard[T]:
        """Ensure the value is a string in which ``regex`` finds a match."""
        compiled = compile_pattern(regex)
        return self.ensure(
            lambda value: predicates.is_string(value) and compiled.search(value) is not None,
            message or f'{self.parameter_name} must match the pattern {compiled.pattern}.',
        )

    def patterns(self, regexes: Iterable[str | re.Pattern[str]], message: str | None = None) -> ValueGuard[T]:
        """Ensure the value is a string matched by at least one of ``regexes``."""
        compiled = [compile_pattern(regex) for regex in regexes]
        return self.ensure(
            lambda value: predicates.is_string(value) and any(p.search(value) is not None for p in compiled),
            message
            or (
                f'{self.parameter_name} must match at least one of the patterns '
                f'{", ".join(p.pattern for p in compiled)}.'
            ),
        )

    def email(self, message: str | None = None) -> ValueGuard[T]:
        return self.pattern(
            get_config().patterns.email,
            message or f'{self.parameter_name} must be a valid email. Value was: {self.value}',
        )

    def url(self, message: str | None = None) -> ValueGuard[T]:
        return self.pattern(get_config().patterns.url, message or f'{self.parameter_name} must be a valid URL.')

    def hostname(self, message: str | None = None) -> ValueGuard[T]:
        return self.pattern(
            get_config().patterns.hostname,
            message or f'{self.parameter_name} must be a valid hostname (domain name).',
        )

    def iso_datetime(self, message: str | None = None) -> ValueGuard[T]:
        return self.ensure(
            predicates.is_iso_datetime,
            message or f'{self.parameter_name} must be a valid ISO datetime string.',
        )

    # --- Utilities ---

    def optional(self) -> ValueGuard[T]:
        """Return a guard on which an absent value satisfies every check.

        The flag is carried into every guard derived from the result.
        """
        return replace(self, is_optional=True)

    def default_to[U](self, default_value: U) -> ValueGuard[T] | ValueGuard[U]:
        """Substitute ``default_value`` when the value is absent."""
        if not self.has_value():
            return self._derive(default_value)
        return self

    def coerce_to_bool(self) -> ValueGuard[bool]:
        """Replace the value with its truthiness; an absent value becomes False."""
        return self._derive(bool(self.value))

    def transform[U](self, fn: Callable[[T], U]) -> ValueGuard[T] | ValueGuard[U]:
        """Replace a present value with ``fn(value)``.

        Absent values are passed through untouched and ``fn`` is not called.
        """
        if self.has_value():
            return self._derive(fn(self.value))
        return self

    def do(self, fn: Callable[[T], Any]) -> ValueGuard[T]:
        """Call ``fn(value)`` for its side effects when a value is present."""
        if self.has_value():
            fn(self.value)
        return self

    def lower(self) -> ValueGuard[str]:
        """Ensure a string and lower-case it."""
        checked = self.string()
        if not checked.has_value():
            return checked
        return self._derive(self.value.lower())

    def upper(self) -> ValueGuard[str]:
        """Ensure a string and upper-case it."""
        checked = self.string()
        if not checked.has_value():
            return checked
        return self._derive(self.value.upper())

    def trim(self) -> ValueGuard[str]:
        """Ensure a string and strip surrounding whitespace."""
        checked = self.string()
        if not checked.has_value():
            return checked
        return self._derive(self.value.strip())

    def make_unique(self, key: Callable[[Any], Hashable] | None = None) -> ValueGuard[list[Any]]:
        """Ensure an array and drop elements whose key was already seen.

        The first element for each key is kept, in its original position
        relative to the other kept elements.

        Args:
            key: Maps an element to the key it is compared by. Defaults to the element.

        Returns:
            A guard on a new list.
        """
        checked = self.array()
        if not checked.has_value():
            return checked
        return self._derive(predicates.distinct(self.value, key))

    def each(self, callback: Callable[[ValueGuard[Any], Any], Any]) -> ValueGuard[T]:
        """Hand each element of an array or mapping to ``callback``.

        Arrays call ``callback(element_guard, index)``; mappings call
        ``callback(element_guard, key)`` in key order. Element guards keep
        this guard's name and optional flag. Whatever the callback derives
        is discarded; this guard is returned unchanged.
        """
        if predicates.is_array(self.value):
            for index, item in enumerate(self.value):
                callback(self._derive(item), index)
        elif predicates.is_object(self.value):
            for key, item in self.value.items():
                callback(self._derive(item), key)
        return self


def guard[T](value: T | None, parameter_name: str | None = None) -> ValueGuard[T]:
    """Start a guard chain.

    Args:
        value: The value to validate. ``msgspec.UNSET`` is treated as None.
        parameter_name: Name used in error messages. Defaults to the configured
            default parameter name ("value").

    Returns:
        A non-optional ValueGuard.

    Example:
        ```python
        guard(None).value
        # None
        guard(' Ada ', 'name').trim().min_length(1).value
        # 'Ada'
        ```
    """
    if parameter_name is None:
        parameter_name = get_config().default_parameter_name
    return ValueGuard(value, parameter_name)

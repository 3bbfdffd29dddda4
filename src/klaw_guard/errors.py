"""Guard error types: dual struct+exception for Result and raise-based code."""

from __future__ import annotations

from enum import StrEnum

import msgspec

__all__ = [
    'ErrorKind',
    'Invalid',
    'MissingValueError',
    'ValidationError',
]


class ErrorKind(StrEnum):
    """Why a guard check failed."""

    MISSING_REQUIRED_VALUE = 'missing_required_value'
    VALIDATION_FAILED = 'validation_failed'


class Invalid(msgspec.Struct, frozen=True, gc=False):
    """A failed check - struct variant for Result[T, Invalid].

    Encodes cleanly with ``msgspec.json.encode`` so it can be handed back
    from an API boundary as a 4xx payload.
    """

    parameter_name: str
    message: str
    kind: ErrorKind = ErrorKind.VALIDATION_FAILED

    def to_exception(self) -> ValidationError:
        """Convert to exception for raise-based code."""
        if self.kind is ErrorKind.MISSING_REQUIRED_VALUE:
            return MissingValueError(self.parameter_name, self.message)
        return ValidationError(self.parameter_name, self.message, self.kind)


class ValidationError(Exception):
    """A failed check - exception variant."""

    def __init__(
        self,
        parameter_name: str,
        message: str,
        kind: ErrorKind = ErrorKind.VALIDATION_FAILED,
    ) -> None:
        self.parameter_name = parameter_name
        self.message = message
        self.kind = kind
        super().__init__(message)

    def to_struct(self) -> Invalid:
        """Convert to struct for Result-based code."""
        return Invalid(self.parameter_name, self.message, self.kind)


class MissingValueError(ValidationError):
    """A required value was absent - exception variant."""

    def __init__(self, parameter_name: str, message: str | None = None) -> None:
        super().__init__(
            parameter_name,
            message or f'{parameter_name} is required.',
            ErrorKind.MISSING_REQUIRED_VALUE,
        )

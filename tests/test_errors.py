"""Tests for Invalid / ValidationError conversions."""

import msgspec
import pytest
from hypothesis import given

from klaw_guard import ErrorKind, Invalid, MissingValueError, ValidationError
from tests.strategies import parameter_names, texts


class TestValidationError:
    """Exception variants."""

    def test_attributes(self):
        error = ValidationError('age', 'age must be a number.')
        assert error.parameter_name == 'age'
        assert error.message == 'age must be a number.'
        assert error.kind is ErrorKind.VALIDATION_FAILED
        assert str(error) == 'age must be a number.'

    def test_missing_is_a_validation_error(self):
        error = MissingValueError('token')
        assert isinstance(error, ValidationError)
        assert error.kind is ErrorKind.MISSING_REQUIRED_VALUE
        assert error.message == 'token is required.'

    def test_missing_custom_message(self):
        assert MissingValueError('token', 'need a token').message == 'need a token'

    def test_catchable_as_exception(self):
        with pytest.raises(Exception, match='bad'):
            raise ValidationError('x', 'bad')


class TestInvalid:
    """Struct variant."""

    def test_default_kind(self):
        assert Invalid('x', 'bad').kind is ErrorKind.VALIDATION_FAILED

    def test_frozen(self):
        invalid = Invalid('x', 'bad')
        with pytest.raises(AttributeError):
            invalid.message = 'other'  # type: ignore[misc]

    def test_to_exception_validation(self):
        error = Invalid('x', 'bad').to_exception()
        assert type(error) is ValidationError
        assert error.message == 'bad'

    def test_to_exception_missing(self):
        error = Invalid('x', 'x is required.', ErrorKind.MISSING_REQUIRED_VALUE).to_exception()
        assert type(error) is MissingValueError

    def test_json_encoding(self):
        """Invalid can be returned from an API boundary as JSON."""
        payload = msgspec.json.encode(Invalid('email', 'email must be a valid email. Value was: x'))
        assert msgspec.json.decode(payload) == {
            'parameter_name': 'email',
            'message': 'email must be a valid email. Value was: x',
            'kind': 'validation_failed',
        }

    def test_json_round_trip_typed(self):
        original = Invalid('n', 'n is required.', ErrorKind.MISSING_REQUIRED_VALUE)
        decoded = msgspec.json.decode(msgspec.json.encode(original), type=Invalid)
        assert decoded == original

    @given(parameter_names, texts)
    def test_struct_exception_round_trip(self, name, message):
        for kind in ErrorKind:
            invalid = Invalid(name, message or 'fallback', kind)
            assert invalid.to_exception().to_struct() == invalid

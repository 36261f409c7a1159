"""Tests for the osc94 exception hierarchy."""

import pytest

from osc94.domain.exceptions import (
    InvalidStateError,
    Osc94Error,
    PercentOutOfRangeError,
    UnknownTerminatorError,
    ValidationError,
)


class TestOsc94Error:
    """Tests for the base exception."""

    def test_message_and_hint_stored(self) -> None:
        error = Osc94Error("Something broke", hint="Try again")
        assert error.message == "Something broke"
        assert error.hint == "Try again"
        assert str(error) == "Something broke"

    def test_hint_defaults_to_none(self) -> None:
        assert Osc94Error("x").hint is None


class TestValidationErrors:
    """Tests for validation error subclasses."""

    def test_percent_error_identifies_value(self) -> None:
        error = PercentOutOfRangeError(101)
        assert error.percent == 101
        assert "101" in error.message
        assert error.hint is not None

    def test_invalid_state_identifies_value(self) -> None:
        error = InvalidStateError(99)
        assert error.state == 99
        assert "99" in error.message

    def test_validation_errors_are_value_errors(self) -> None:
        """Callers can catch plain ValueError."""
        with pytest.raises(ValueError):
            raise PercentOutOfRangeError(-1)
        with pytest.raises(ValidationError):
            raise InvalidStateError(7)

    def test_unknown_terminator_is_not_a_validation_error(self) -> None:
        error = UnknownTerminatorError("nope")
        assert isinstance(error, Osc94Error)
        assert not isinstance(error, ValidationError)

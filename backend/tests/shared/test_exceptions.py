"""Tests for shared/exceptions.py."""

import pytest

from shared.exceptions import (
    ScoreboardError,
    NotFoundError,
    ValidationError,
    ConflictError,
)


class TestScoreboardError:
    def test_message(self):
        """Should store the message and expose it through str()."""
        error = ScoreboardError("Something went wrong")
        assert str(error) == "Something went wrong"
        assert error.message == "Something went wrong"

    def test_default_code(self):
        """Code should default to the base category code."""
        assert ScoreboardError("Test").code == "SCOREBOARD_ERROR"

    def test_custom_code_and_details(self):
        """Should keep the given code and details."""
        error = ScoreboardError("Test", code="CUSTOM", details={"line": 3})
        assert error.code == "CUSTOM"
        assert error.details == {"line": 3}

    def test_details_default_to_empty_dict(self):
        """Details should never be None."""
        error = ScoreboardError("Test")
        assert error.details == {}

    def test_details_are_copied(self):
        """Mutating the caller's mapping should not change the error."""
        details = {"line": 3}
        error = ScoreboardError("Test", details=details)
        details["line"] = 4
        assert error.details == {"line": 3}

    def test_repr_shows_code(self):
        """repr() should name the class and the code."""
        error = ValidationError("Bad limit", code="INVALID_PROTOCOL_LIMIT")
        assert repr(error) == (
            "ValidationError(code='INVALID_PROTOCOL_LIMIT', message='Bad limit')"
        )


class TestSubclasses:
    @pytest.mark.parametrize("cls, code", [
        (NotFoundError, "NOT_FOUND"),
        (ValidationError, "INVALID_INPUT"),
        (ConflictError, "ALREADY_REGISTERED"),
    ])
    def test_category_default_codes(self, cls, code):
        """Each category should have its own default code."""
        error = cls("Test")
        assert isinstance(error, ScoreboardError)
        assert error.code == code

    def test_explicit_code_wins_over_default(self):
        """A module error's own code should replace the category default."""
        assert ConflictError("Taken", code="TEAM_ALREADY_REGISTERED").code == "TEAM_ALREADY_REGISTERED"

    def test_not_a_value_error(self):
        """Errors must not be swallowed by validators catching ValueError."""
        assert not issubclass(ScoreboardError, ValueError)

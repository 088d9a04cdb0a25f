"""Tests for text module exceptions."""

from modules.text.exceptions import InvalidSplitLengthError
from shared.exceptions import ValidationError


class TestInvalidSplitLengthError:
    def test_inherits_from_validation_error(self):
        """InvalidSplitLengthError should inherit from ValidationError."""
        error = InvalidSplitLengthError(0)
        assert isinstance(error, ValidationError)

    def test_error_message(self):
        """Should include the length in the message."""
        error = InvalidSplitLengthError(-3)
        assert "-3" in str(error)

    def test_error_code(self):
        """Should have correct error code."""
        error = InvalidSplitLengthError(0)
        assert error.code == "INVALID_SPLIT_LENGTH"

    def test_error_details(self):
        """Should include the length in details."""
        error = InvalidSplitLengthError(0)
        assert error.details == {"max_length": 0}

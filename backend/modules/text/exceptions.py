"""
Text module exceptions.
"""

from shared.exceptions import ValidationError


class InvalidSplitLengthError(ValidationError):
    """Raised when a split is requested with a non-positive maximum length."""

    def __init__(self, max_length: int):
        super().__init__(
            f"Split length must be positive, got {max_length}",
            code="INVALID_SPLIT_LENGTH",
            details={"max_length": max_length},
        )

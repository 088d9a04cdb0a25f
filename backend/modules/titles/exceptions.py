"""
Title module exceptions.
"""

from shared.exceptions import ValidationError


class EmptyTitlesError(ValidationError):
    """Raised when a title list is missing or empty."""

    def __init__(self):
        super().__init__(
            "Scoreboard titles list cannot be empty",
            code="EMPTY_TITLES",
        )


class MissingTitleError(ValidationError):
    """Raised when an entry of the title list is missing."""

    def __init__(self, index: int):
        super().__init__(
            f"Scoreboard title at index {index} cannot be null",
            code="MISSING_TITLE",
            details={"index": index},
        )


class TitleTooLongError(ValidationError):
    """Raised when a title exceeds the protocol's title limit."""

    def __init__(self, title: str, max_length: int):
        super().__init__(
            f"Scoreboard title cannot be longer than {max_length} characters",
            code="TITLE_TOO_LONG",
            details={"title": title, "length": len(title), "max_length": max_length},
        )


class InvalidTitlesError(ValidationError):
    """Raised when titles are given as a single string or a non-iterable value."""

    def __init__(self, value_type: str):
        super().__init__(
            f"Scoreboard titles must be a sequence of strings, not {value_type}",
            code="INVALID_TITLES",
            details={"type": value_type},
        )

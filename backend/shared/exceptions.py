"""
Base exception classes for the scoreboard panels package.

Errors carry a stable code and a details mapping, so callers can tell a bad
line write from a missing objective without parsing messages. Module
exceptions inherit from one of the three categories below.
"""

from typing import Any, ClassVar, Optional


class ScoreboardError(Exception):
    """
    Base exception for all scoreboard panel errors.

    When no code is given the category's default_code is used.
    """

    default_code: ClassVar[str] = "SCOREBOARD_ERROR"

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code
        self.details = dict(details or {})

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r})"


class NotFoundError(ScoreboardError):
    """A board resource, such as the panel objective, does not exist."""

    default_code = "NOT_FOUND"


class ValidationError(ScoreboardError):
    """A title list, split length, protocol limit or panel argument is invalid."""

    default_code = "INVALID_INPUT"


class ConflictError(ScoreboardError):
    """A team or objective is already registered on the backing board."""

    default_code = "ALREADY_REGISTERED"

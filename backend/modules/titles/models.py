"""
Title module data models.
"""

from collections.abc import Iterable
from typing import Any, Optional

from pydantic import BaseModel, Field, field_validator, model_validator

from shared.limits import get_protocol_limits

from .exceptions import (
    EmptyTitlesError,
    InvalidTitlesError,
    MissingTitleError,
    TitleTooLongError,
)

# Sentinel returned by update_ticks when rotation is disabled
NEVER = -1

MIN_UPDATE_TICKS = 5


class ScoreboardTitle(BaseModel):
    """
    An ordered, non-empty list of titles and the wait between rotations.

    With a single title the rotation is disabled for good. Otherwise the
    requested wait is clamped to at least MIN_UPDATE_TICKS protocol ticks.
    """

    titles: tuple[str, ...] = Field(..., description="Titles in display order")
    wait: int = Field(default=MIN_UPDATE_TICKS, description="Requested ticks between rotations")
    max_title_length: int = Field(
        default_factory=lambda: get_protocol_limits().title_length,
        gt=0,
        description="Protocol cap on the length of each title",
    )

    model_config = {"frozen": True}

    @field_validator("titles", mode="before")
    @classmethod
    def check_titles_present(cls, value: Any) -> Any:
        """Reject a missing or empty list, a bare string and missing entries."""
        if value is None:
            raise EmptyTitlesError()
        # A string is iterable but would become one title per character
        if isinstance(value, (str, bytes)) or not isinstance(value, Iterable):
            raise InvalidTitlesError(type(value).__name__)

        titles = list(value)
        if not titles:
            raise EmptyTitlesError()
        for index, title in enumerate(titles):
            if title is None:
                raise MissingTitleError(index)
        return titles

    @model_validator(mode="after")
    def check_title_lengths(self) -> "ScoreboardTitle":
        """Every title must fit within the protocol's title limit."""
        for title in self.titles:
            if len(title) > self.max_title_length:
                raise TitleTooLongError(title, self.max_title_length)
        return self

    @property
    def size(self) -> int:
        """Number of titles stored."""
        return len(self.titles)

    @property
    def update_ticks(self) -> int:
        """Ticks to wait between rotations, or NEVER with a single title."""
        if self.size > 1:
            return max(self.wait, MIN_UPDATE_TICKS)
        return NEVER

    def should_update(self) -> bool:
        """Whether the title rotates at all."""
        return self.update_ticks >= MIN_UPDATE_TICKS

    def get_title(self, index: int) -> Optional[str]:
        """Get the title at the index, or None if out of range."""
        if 0 <= index < self.size:
            return self.titles[index]
        return None

"""
Scoreboard title module.

Holds the rotating titles of a panel.

Public API:
- ScoreboardTitle: Immutable title list and rotation wait
- TitleRotation: Thread-safe rotation cursor
"""

from .models import ScoreboardTitle, NEVER, MIN_UPDATE_TICKS
from .exceptions import (
    EmptyTitlesError,
    InvalidTitlesError,
    MissingTitleError,
    TitleTooLongError,
)
from .rotation import TitleRotation

__all__ = [
    # Models
    "ScoreboardTitle",
    "NEVER",
    "MIN_UPDATE_TICKS",
    # Exceptions
    "EmptyTitlesError",
    "InvalidTitlesError",
    "MissingTitleError",
    "TitleTooLongError",
    # Rotation
    "TitleRotation",
]

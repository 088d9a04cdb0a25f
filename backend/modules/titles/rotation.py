"""
Title rotation.

Cycles through the titles of a ScoreboardTitle. The cursor may be advanced
by a periodic scheduler while other threads read panel state, so every
read-modify-write of the cursor happens under a lock.
"""

import logging
import threading

from .models import ScoreboardTitle

logger = logging.getLogger(__name__)


class TitleRotation:
    """
    Rotation cursor over a ScoreboardTitle.

    A single title never rotates: advance() always returns it. With several
    titles advance() returns the title under the cursor and moves on,
    wrapping back to the first title once the last one has been returned.
    """

    def __init__(self, title: ScoreboardTitle):
        self._title = title
        self._cursor = 0
        self._lock = threading.Lock()

    @property
    def title(self) -> ScoreboardTitle:
        return self._title

    def should_update(self) -> bool:
        """Whether the panel title should be rotated periodically."""
        return self._title.should_update()

    def update_interval(self) -> int:
        """Ticks between rotations, or NEVER for a single title."""
        return self._title.update_ticks

    def advance(self) -> str:
        """
        Return the title under the cursor and move the cursor on.

        The wrap is checked against the last index: once the final title
        has been handed out the cursor goes back to 0.
        """
        with self._lock:
            current = self._cursor
            self._cursor += 1
            if current >= self._title.size - 1:
                self._cursor = 0

        title = self._title.titles[current]
        logger.debug(f"Rotated to title {current}: {title!r}")
        return title

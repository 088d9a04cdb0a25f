"""
Panel implementation.

A panel is a 15-line scoreboard with a rotating title. Each line is carried
by its own team: the line text is split into the team's prefix and suffix,
and the team is bound to a fixed, invisible marker entry whose score orders
the line on screen.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from shared.config import get_settings
from shared.exceptions import ValidationError
from shared.limits import ProtocolLimits, get_protocol_limits
from modules.text.splitter import split_text
from modules.titles.models import ScoreboardTitle
from modules.titles.rotation import TitleRotation

from .exceptions import ObjectiveNotFoundError
from .interfaces import IBackingBoard, IBoardFactory, IObjective, ITeam, IViewer
from .memory import InMemoryBoardFactory
from .models import (
    LINE_COUNT,
    OBJECTIVE_CRITERIA,
    OBJECTIVE_NAME,
    DisplaySlot,
    is_valid_line,
    line_entry,
    team_name,
)

logger = logging.getLogger(__name__)


@dataclass
class _PanelLine:
    """A line slot; the team is created once and reused."""

    team: ITeam
    text: Optional[str] = None


class Panel:
    """
    Multi-line scoreboard panel with a rotating title.

    Owns exactly one backing board. Lines are created lazily on the first
    set_text() and keep their team for the lifetime of the panel.
    """

    def __init__(
        self,
        title: ScoreboardTitle,
        slot: Optional[DisplaySlot] = None,
        board_factory: Optional[IBoardFactory] = None,
        limits: Optional[ProtocolLimits] = None,
    ):
        """
        Create the panel and its backing board.

        Args:
            title: Titles to rotate through
            slot: Display slot; defaults to the configured default slot
            board_factory: Creates the backing board. If not provided,
                          an in-memory board is used.
            limits: Protocol limits. If not provided, the configured
                    limits are used.

        Raises:
            ValidationError: If the title is missing
        """
        if title is None:
            raise ValidationError(
                "Scoreboard title cannot be null",
                code="MISSING_PANEL_TITLE",
            )

        self._limits = limits or get_protocol_limits()
        self._slot = slot or DisplaySlot(get_settings().default_display_slot)
        self._rotation = TitleRotation(title)
        self._lines: list[Optional[_PanelLine]] = [None] * LINE_COUNT

        factory = board_factory or InMemoryBoardFactory()
        self._board = self._new_board(factory, title.titles[0])

    def _new_board(self, factory: IBoardFactory, initial_title: str) -> IBackingBoard:
        board = factory.new_board()
        objective = board.register_objective(OBJECTIVE_NAME, OBJECTIVE_CRITERIA)
        objective.set_display_name(self._cap_title(initial_title))
        objective.set_display_slot(self._slot)
        return board

    def _cap_title(self, title: str) -> str:
        return title[: self._limits.title_length]

    def _objective(self) -> IObjective:
        objective = self._board.get_objective(OBJECTIVE_NAME)
        if objective is None:
            raise ObjectiveNotFoundError(OBJECTIVE_NAME)
        return objective

    @property
    def board(self) -> IBackingBoard:
        return self._board

    @property
    def scoreboard_title(self) -> ScoreboardTitle:
        return self._rotation.title

    @property
    def rotation(self) -> TitleRotation:
        return self._rotation

    @property
    def limits(self) -> ProtocolLimits:
        return self._limits

    @property
    def display_slot(self) -> DisplaySlot:
        return self._slot

    def set_display_slot(self, slot: Optional[DisplaySlot]) -> None:
        """Move the panel to another display slot; None is ignored."""
        if slot is None:
            logger.debug("Ignoring missing display slot")
            return

        self._slot = slot
        self._objective().set_display_slot(slot)

    def get_current_title(self) -> str:
        """Get the title currently shown on the backing board."""
        return self._objective().get_display_name()

    def set_next_title(self) -> None:
        """Advance the title rotation and show the resulting title."""
        title = self._rotation.advance()
        self._objective().set_display_name(self._cap_title(title))

    def get_text(self, line: int) -> Optional[str]:
        """
        Get the raw text last set on a line.

        Returns:
            The text, or None if the line was never set or is out of range
        """
        if not is_valid_line(line):
            return None

        panel_line = self._lines[line - 1]
        return panel_line.text if panel_line is not None else None

    def set_text(self, line: int, text: Optional[str]) -> None:
        """
        Set the text of a line (1 to 15).

        Out-of-range lines and missing text are ignored.
        """
        if text is None or not is_valid_line(line):
            logger.debug(f"Ignoring text for line {line}")
            return

        # Split first so a bad limit leaves no half-registered line behind
        result = split_text(text, self._limits.team_text_length)

        panel_line = self._lines[line - 1]
        if panel_line is None:
            panel_line = _PanelLine(team=self._register_line(line))
            self._lines[line - 1] = panel_line

        panel_line.team.set_prefix(result.prefix)
        panel_line.team.set_suffix(result.suffix)
        panel_line.text = text

    def _register_line(self, line: int) -> ITeam:
        entry = line_entry(line)

        team = self._board.register_team(team_name(line))
        team.add_entry(entry)
        self._objective().set_score(entry, line)

        logger.debug(f"Registered team for line {line}")
        return team

    def bind_to(self, viewer: Optional[IViewer]) -> None:
        """Show this panel to the viewer; None is ignored."""
        if viewer is None:
            logger.debug("Ignoring missing viewer")
            return

        viewer.set_scoreboard(self._board)

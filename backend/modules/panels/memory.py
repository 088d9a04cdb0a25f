"""
In-memory backing display.

Implements the panel interfaces without a client connection. Used for
development, previews and tests; a protocol layer provides the real ones.
"""

from typing import Optional

from .exceptions import ObjectiveAlreadyRegisteredError, TeamAlreadyRegisteredError
from .models import DisplaySlot


class InMemoryTeam:
    """Team storing its entries, prefix and suffix."""

    def __init__(self, name: str):
        self._name = name
        self.entries: list[str] = []
        self.prefix = ""
        self.suffix = ""

    @property
    def name(self) -> str:
        return self._name

    def add_entry(self, entry: str) -> None:
        if entry not in self.entries:
            self.entries.append(entry)

    def set_prefix(self, prefix: str) -> None:
        self.prefix = prefix

    def set_suffix(self, suffix: str) -> None:
        self.suffix = suffix


class InMemoryObjective:
    """Objective storing its display name, slot and entry scores."""

    def __init__(self, name: str, criteria: str):
        self._name = name
        self.criteria = criteria
        self.display_name = name
        self.display_slot: Optional[DisplaySlot] = None
        self.scores: dict[str, int] = {}

    @property
    def name(self) -> str:
        return self._name

    def get_display_name(self) -> str:
        return self.display_name

    def set_display_name(self, display_name: str) -> None:
        self.display_name = display_name

    def set_display_slot(self, slot: DisplaySlot) -> None:
        self.display_slot = slot

    def set_score(self, entry: str, score: int) -> None:
        self.scores[entry] = score


class InMemoryBoard:
    """Backing board keeping objectives and teams in dictionaries."""

    def __init__(self):
        self._objectives: dict[str, InMemoryObjective] = {}
        self._teams: dict[str, InMemoryTeam] = {}

    def register_objective(self, name: str, criteria: str) -> InMemoryObjective:
        if name in self._objectives:
            raise ObjectiveAlreadyRegisteredError(name)
        objective = InMemoryObjective(name, criteria)
        self._objectives[name] = objective
        return objective

    def get_objective(self, name: str) -> Optional[InMemoryObjective]:
        return self._objectives.get(name)

    def register_team(self, name: str) -> InMemoryTeam:
        if name in self._teams:
            raise TeamAlreadyRegisteredError(name)
        team = InMemoryTeam(name)
        self._teams[name] = team
        return team

    def get_team(self, name: str) -> Optional[InMemoryTeam]:
        return self._teams.get(name)

    def get_entry_team(self, entry: str) -> Optional[InMemoryTeam]:
        """Get the team an entry is bound to, if any."""
        for team in self._teams.values():
            if entry in team.entries:
                return team
        return None

    @property
    def teams(self) -> list[InMemoryTeam]:
        return list(self._teams.values())


class InMemoryBoardFactory:
    """Creates in-memory boards and remembers them."""

    def __init__(self):
        self.boards: list[InMemoryBoard] = []

    def new_board(self) -> InMemoryBoard:
        board = InMemoryBoard()
        self.boards.append(board)
        return board


class InMemoryViewer:
    """Viewer that records the board it was shown."""

    def __init__(self, name: str = "viewer"):
        self.name = name
        self.scoreboard: Optional[InMemoryBoard] = None

    def set_scoreboard(self, board: InMemoryBoard) -> None:
        self.scoreboard = board

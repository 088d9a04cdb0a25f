"""
Panel module interfaces.

The panel writes to a backing display it does not own. These protocols
describe the primitives it needs from the client protocol layer; the
in-memory implementation in memory.py satisfies them for development and
testing.
"""

from typing import Optional, Protocol, runtime_checkable

from .models import DisplaySlot


@runtime_checkable
class ITeam(Protocol):
    """A named team bound to entries, carrying a prefix and a suffix."""

    @property
    def name(self) -> str:
        ...

    def add_entry(self, entry: str) -> None:
        """Bind an entry to this team."""
        ...

    def set_prefix(self, prefix: str) -> None:
        ...

    def set_suffix(self, suffix: str) -> None:
        ...


@runtime_checkable
class IObjective(Protocol):
    """A named objective with a display title and entry scores."""

    @property
    def name(self) -> str:
        ...

    def get_display_name(self) -> str:
        ...

    def set_display_name(self, display_name: str) -> None:
        ...

    def set_display_slot(self, slot: DisplaySlot) -> None:
        ...

    def set_score(self, entry: str, score: int) -> None:
        """
        Set the sort score of an entry.

        The client lists entries by descending score.
        """
        ...


@runtime_checkable
class IBackingBoard(Protocol):
    """The protocol-level scoreboard object a panel writes to."""

    def register_objective(self, name: str, criteria: str) -> IObjective:
        """
        Register a new objective.

        Raises:
            ConflictError: If an objective with the name already exists
        """
        ...

    def get_objective(self, name: str) -> Optional[IObjective]:
        ...

    def register_team(self, name: str) -> ITeam:
        """
        Register a new team.

        Raises:
            ConflictError: If a team with the name already exists
        """
        ...


@runtime_checkable
class IBoardFactory(Protocol):
    """Creates empty backing boards."""

    def new_board(self) -> IBackingBoard:
        ...


@runtime_checkable
class IViewer(Protocol):
    """A connected client that can be shown a backing board."""

    def set_scoreboard(self, board: IBackingBoard) -> None:
        """Make the board the viewer's active display."""
        ...

"""
Scoreboard panel module.

Renders 15 lines and a rotating title onto a backing board.

Public API:
- Panel: The panel itself
- IBackingBoard, IBoardFactory, IObjective, ITeam, IViewer: Backing display contracts
- DisplaySlot: Where a panel appears
- InMemoryBoard, InMemoryBoardFactory, InMemoryViewer: In-memory backing display
"""

from .interfaces import IBackingBoard, IBoardFactory, IObjective, ITeam, IViewer
from .models import (
    LINE_COUNT,
    OBJECTIVE_NAME,
    DisplaySlot,
    is_valid_line,
    line_entry,
    team_name,
)
from .exceptions import (
    ObjectiveNotFoundError,
    ObjectiveAlreadyRegisteredError,
    TeamAlreadyRegisteredError,
)
from .memory import (
    InMemoryBoard,
    InMemoryBoardFactory,
    InMemoryObjective,
    InMemoryTeam,
    InMemoryViewer,
)
from .service import Panel

__all__ = [
    # Interfaces
    "IBackingBoard",
    "IBoardFactory",
    "IObjective",
    "ITeam",
    "IViewer",
    # Models
    "LINE_COUNT",
    "OBJECTIVE_NAME",
    "DisplaySlot",
    "is_valid_line",
    "line_entry",
    "team_name",
    # Exceptions
    "ObjectiveNotFoundError",
    "ObjectiveAlreadyRegisteredError",
    "TeamAlreadyRegisteredError",
    # In-memory backing display
    "InMemoryBoard",
    "InMemoryBoardFactory",
    "InMemoryObjective",
    "InMemoryTeam",
    "InMemoryViewer",
    # Service
    "Panel",
]

"""
Panel module data models and constants.
"""

from enum import Enum

from modules.text.codes import StyleCode

LINE_COUNT = 15

OBJECTIVE_NAME = "Scoreboard"
OBJECTIVE_CRITERIA = "dummy"


class DisplaySlot(str, Enum):
    """Where on the client UI a panel is shown."""

    SIDEBAR = "sidebar"
    PLAYER_LIST = "player_list"
    BELOW_NAME = "below_name"


# One distinct color per line; the entry is the color followed by a reset so
# it renders as nothing between the prefix and the suffix.
LINE_ENTRY_COLORS: tuple[StyleCode, ...] = (
    StyleCode.WHITE,
    StyleCode.DARK_BLUE,
    StyleCode.DARK_GREEN,
    StyleCode.DARK_AQUA,
    StyleCode.DARK_RED,
    StyleCode.DARK_PURPLE,
    StyleCode.DARK_GRAY,
    StyleCode.GOLD,
    StyleCode.GRAY,
    StyleCode.BLUE,
    StyleCode.GREEN,
    StyleCode.AQUA,
    StyleCode.RED,
    StyleCode.YELLOW,
    StyleCode.BLACK,
)


def is_valid_line(line: int) -> bool:
    """Check if the number is a valid line (between 1 and 15)."""
    return 1 <= line <= LINE_COUNT


def line_entry(line: int) -> str:
    """
    Get the marker entry for a line.

    Example: line 1 -> "§f§r"
    """
    if not is_valid_line(line):
        return str(StyleCode.RESET)
    return f"{LINE_ENTRY_COLORS[line - 1]}{StyleCode.RESET}"


def team_name(line: int) -> str:
    """Name of the team that carries a line's prefix and suffix."""
    return f"Line {line}"

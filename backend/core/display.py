"""Rich terminal preview of in-memory panels."""

from typing import Optional

from rich.console import Console
from rich.panel import Panel
from rich.text import Text

from modules.panels.memory import InMemoryBoard
from modules.panels.models import OBJECTIVE_NAME
from modules.text.codes import COLOR_CHAR, StyleCode, get_by_char

console = Console()

# Client palette for the 16 color codes
COLOR_HEX: dict[StyleCode, str] = {
    StyleCode.BLACK: "#000000",
    StyleCode.DARK_BLUE: "#0000AA",
    StyleCode.DARK_GREEN: "#00AA00",
    StyleCode.DARK_AQUA: "#00AAAA",
    StyleCode.DARK_RED: "#AA0000",
    StyleCode.DARK_PURPLE: "#AA00AA",
    StyleCode.GOLD: "#FFAA00",
    StyleCode.GRAY: "#AAAAAA",
    StyleCode.DARK_GRAY: "#555555",
    StyleCode.BLUE: "#5555FF",
    StyleCode.GREEN: "#55FF55",
    StyleCode.AQUA: "#55FFFF",
    StyleCode.RED: "#FF5555",
    StyleCode.LIGHT_PURPLE: "#FF55FF",
    StyleCode.YELLOW: "#FFFF55",
    StyleCode.WHITE: "#FFFFFF",
}

FORMAT_STYLES: dict[StyleCode, str] = {
    StyleCode.MAGIC: "reverse",
    StyleCode.BOLD: "bold",
    StyleCode.STRIKETHROUGH: "strike",
    StyleCode.UNDERLINE: "underline",
    StyleCode.ITALIC: "italic",
}


def to_rich_text(text: str) -> Text:
    """Convert text with style sequences into a styled rich Text.

    Example: "§cRed §lbold" -> "Red " in red, "bold" in bold red
    """
    result = Text()
    color: Optional[str] = None
    formats: list[str] = []
    index = 0

    while index < len(text):
        char = text[index]
        code = get_by_char(text[index + 1]) if char == COLOR_CHAR and index + 1 < len(text) else None
        if code is None:
            result.append(char, style=" ".join(formats + ([color] if color else [])))
            index += 1
            continue

        if code.is_color:
            color = COLOR_HEX[code]
            formats = []
        elif code.is_format:
            if FORMAT_STYLES[code] not in formats:
                formats.append(FORMAT_STYLES[code])
        else:
            color = None
            formats = []
        index += 2

    return result


def render_line(board: InMemoryBoard, entry: str) -> Text:
    """Render one line as the client shows it: prefix, entry, suffix."""
    team = board.get_entry_team(entry)
    if team is None:
        return to_rich_text(entry)
    return to_rich_text(team.prefix + entry + team.suffix)


def render_board(board: InMemoryBoard) -> Panel:
    """Render an in-memory board as a rich panel.

    Lines are listed by descending score, the way the client sorts them.
    """
    objective = board.get_objective(OBJECTIVE_NAME)
    if objective is None:
        return Panel(Text(""), title="")

    entries = sorted(objective.scores.items(), key=lambda item: item[1], reverse=True)
    lines = [render_line(board, entry) for entry, _ in entries]

    return Panel(
        Text("\n").join(lines),
        title=to_rich_text(objective.get_display_name()),
        border_style="blue",
        expand=False,
    )


def print_board(board: InMemoryBoard) -> None:
    """Print a preview of the board to the terminal."""
    console.print(render_board(board))

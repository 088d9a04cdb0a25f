"""
Scoreboard preview - render a panel in the terminal.

Builds an in-memory panel from titles and line texts given on the command
line, then prints it the way a client would list it. Useful for checking how
a line is split into prefix and suffix on either protocol tier.
"""

import argparse
import logging
from typing import Optional, Sequence

from core.display import console, print_board
from modules.panels.memory import InMemoryBoardFactory
from modules.panels.models import LINE_COUNT, DisplaySlot
from modules.panels.service import Panel
from modules.text.codes import translate_alternate_codes
from modules.titles.models import ScoreboardTitle
from shared.exceptions import ScoreboardError
from shared.limits import ProtocolLimits, get_protocol_limits, resolve_limits

logger = logging.getLogger(__name__)

DEFAULT_TITLES = ["&6&lScoreboard", "&e&lScoreboard"]
DEFAULT_LINES = [
    "&7Welcome to the lobby",
    "",
    "&fCoins: &e120",
    "&fRank: &a&lVeteran",
    "&bA line long enough to spill over into the suffix",
]


def build_preview_panel(
    titles: Sequence[str],
    lines: Sequence[str],
    limits: ProtocolLimits,
    alt_char: str = "&",
) -> Panel:
    """Build an in-memory sidebar panel with the given titles and lines.

    Args:
        titles: Titles in rotation order, using alt_char as the introducer
        lines: Line texts, the first one goes to line 1
        limits: Protocol limits to split and cap with
        alt_char: Authoring introducer translated to the real one

    Returns:
        The populated panel
    """
    title = ScoreboardTitle(
        titles=[translate_alternate_codes(alt_char, t) for t in titles],
        max_title_length=limits.title_length,
    )
    panel = Panel(title, DisplaySlot.SIDEBAR, InMemoryBoardFactory(), limits)

    for line, text in enumerate(lines[:LINE_COUNT], start=1):
        panel.set_text(line, translate_alternate_codes(alt_char, text))

    if len(lines) > LINE_COUNT:
        logger.warning(f"Only the first {LINE_COUNT} of {len(lines)} lines are shown")
    return panel


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Command line entry point.

    Returns:
        Process exit code
    """
    parser = argparse.ArgumentParser(
        description="Preview a scoreboard panel in the terminal"
    )
    parser.add_argument(
        "lines",
        nargs="*",
        help="Line texts, first one is line 1 (default: a demo panel)",
    )
    parser.add_argument(
        "--title", "-t",
        action="append",
        dest="titles",
        help="Title to rotate through; repeat for more than one",
    )
    parser.add_argument(
        "--server-version",
        help="Runtime version string used to pick the protocol limits, e.g. v1_13_R1",
    )
    parser.add_argument(
        "--alt-char",
        default="&",
        help="Introducer used in the arguments instead of the section sign (default: &)",
    )
    parser.add_argument(
        "--rotations", "-r",
        type=int,
        default=0,
        help="Advance the title this many times, printing the panel each time",
    )
    args = parser.parse_args(argv)

    if args.server_version is not None:
        limits = resolve_limits(args.server_version)
    else:
        limits = get_protocol_limits()

    try:
        panel = build_preview_panel(
            args.titles or DEFAULT_TITLES,
            args.lines or DEFAULT_LINES,
            limits,
            args.alt_char,
        )
    except ScoreboardError as e:
        console.print(f"[red]Error:[/red] {e.message} [dim]({e.code})[/dim]")
        return 1

    console.print(
        f"[dim]Text limit: {limits.text_length} "
        f"({limits.team_text_length} per segment), title limit: {limits.title_length}[/dim]"
    )
    print_board(panel.board)

    for _ in range(max(args.rotations, 0)):
        panel.set_next_title()
        print_board(panel.board)

    return 0


if __name__ == "__main__":
    raise SystemExit(main())

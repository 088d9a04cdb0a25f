"""
Style codes for scoreboard text.

A style sequence is the introducer character followed by one code
character. Colors replace the active style, formats stack on top of the
current color, and reset clears everything.
"""

from enum import Enum
from typing import Optional

COLOR_CHAR = "§"


class StyleKind(str, Enum):
    COLOR = "color"
    FORMAT = "format"
    RESET = "reset"


class StyleCode(Enum):
    """The standard style codes, keyed by their code character."""

    BLACK = ("0", StyleKind.COLOR)
    DARK_BLUE = ("1", StyleKind.COLOR)
    DARK_GREEN = ("2", StyleKind.COLOR)
    DARK_AQUA = ("3", StyleKind.COLOR)
    DARK_RED = ("4", StyleKind.COLOR)
    DARK_PURPLE = ("5", StyleKind.COLOR)
    GOLD = ("6", StyleKind.COLOR)
    GRAY = ("7", StyleKind.COLOR)
    DARK_GRAY = ("8", StyleKind.COLOR)
    BLUE = ("9", StyleKind.COLOR)
    GREEN = ("a", StyleKind.COLOR)
    AQUA = ("b", StyleKind.COLOR)
    RED = ("c", StyleKind.COLOR)
    LIGHT_PURPLE = ("d", StyleKind.COLOR)
    YELLOW = ("e", StyleKind.COLOR)
    WHITE = ("f", StyleKind.COLOR)
    MAGIC = ("k", StyleKind.FORMAT)
    BOLD = ("l", StyleKind.FORMAT)
    STRIKETHROUGH = ("m", StyleKind.FORMAT)
    UNDERLINE = ("n", StyleKind.FORMAT)
    ITALIC = ("o", StyleKind.FORMAT)
    RESET = ("r", StyleKind.RESET)

    def __init__(self, char: str, kind: StyleKind):
        self.char = char
        self.kind = kind

    @property
    def is_color(self) -> bool:
        return self.kind is StyleKind.COLOR

    @property
    def is_format(self) -> bool:
        return self.kind is StyleKind.FORMAT

    def __str__(self) -> str:
        return COLOR_CHAR + self.char


_BY_CHAR: dict[str, StyleCode] = {code.char: code for code in StyleCode}


def get_by_char(char: str) -> Optional[StyleCode]:
    """Look up a style code by its code character (case-insensitive)."""
    if not char:
        return None
    return _BY_CHAR.get(char.lower())


def last_style(text: str) -> str:
    """
    Get the style sequences in effect at the end of the text.

    Scans the text pair by pair: a color replaces the active style, a format
    is appended to it, a reset clears it. Unknown codes are skipped and a
    trailing introducer without a code character is ignored.

    Args:
        text: Text that may contain style sequences

    Returns:
        The active style as a string of sequences, or "" if none
    """
    active = ""
    index = 0
    length = len(text)

    while index < length - 1:
        if text[index] != COLOR_CHAR:
            index += 1
            continue

        code = get_by_char(text[index + 1])
        if code is not None:
            if code.is_color:
                active = str(code)
            elif code.is_format:
                active += str(code)
            else:
                active = ""
        index += 2

    return active


def strip_styles(text: str) -> str:
    """Remove every complete style sequence from the text."""
    result = []
    index = 0
    length = len(text)

    while index < length:
        char = text[index]
        if char == COLOR_CHAR and index + 1 < length and get_by_char(text[index + 1]):
            index += 2
            continue
        result.append(char)
        index += 1

    return "".join(result)


def translate_alternate_codes(alt_char: str, text: str) -> str:
    """
    Replace an authoring-friendly introducer with the real one.

    Only occurrences followed by a valid code character are translated, so
    "&cRed & blue" becomes "§cRed & blue".
    """
    chars = list(text)
    for index in range(len(chars) - 1):
        if chars[index] == alt_char and get_by_char(chars[index + 1]):
            chars[index] = COLOR_CHAR
            chars[index + 1] = chars[index + 1].lower()
    return "".join(chars)

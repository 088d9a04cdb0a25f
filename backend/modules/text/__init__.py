"""
Styled text module.

Handles style codes and the prefix/suffix split of scoreboard line text.

Public API:
- split_text: Split styled text into two length-capped segments
- SplitResult: Result of a split
- StyleCode: The standard style codes
"""

from .codes import (
    COLOR_CHAR,
    StyleCode,
    StyleKind,
    get_by_char,
    last_style,
    strip_styles,
    translate_alternate_codes,
)
from .exceptions import InvalidSplitLengthError
from .splitter import SplitResult, split_text

__all__ = [
    # Codes
    "COLOR_CHAR",
    "StyleCode",
    "StyleKind",
    "get_by_char",
    "last_style",
    "strip_styles",
    "translate_alternate_codes",
    # Exceptions
    "InvalidSplitLengthError",
    # Splitting
    "SplitResult",
    "split_text",
]

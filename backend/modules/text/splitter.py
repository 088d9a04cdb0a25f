"""
Overflow-safe splitting of styled text into a prefix and a suffix.

A scoreboard line is rendered as team prefix + entry + team suffix, and each
of the two text fields has its own length cap. Splitting must never leave a
style introducer dangling at a field boundary, and the suffix has to start
with the style that was active where the cut happened.
"""

from dataclasses import dataclass

from .codes import COLOR_CHAR, last_style
from .exceptions import InvalidSplitLengthError


@dataclass(frozen=True)
class SplitResult:
    """The two segments of a split line."""

    prefix: str
    suffix: str = ""


def split_text(text: str, max_length: int) -> SplitResult:
    """
    Split text into a prefix and a suffix of at most max_length characters each.

    Text that fits is returned as the prefix, minus any trailing introducers.
    Longer text is cut at max_length: introducers at the end of the prefix
    move to the suffix, where the last one pairs with its code character,
    the style active at the cut is carried to the start of the suffix, and
    the suffix is truncated to max_length. Neither segment ever ends with an
    introducer, so a doubled introducer at the cut cannot leave one behind.

    Args:
        text: Raw text, possibly containing style sequences
        max_length: Maximum length of each segment

    Returns:
        SplitResult with the prefix and suffix

    Raises:
        InvalidSplitLengthError: If max_length is not positive
    """
    if max_length <= 0:
        raise InvalidSplitLengthError(max_length)

    if len(text) <= max_length:
        return SplitResult(prefix=_drop_dangling(text))

    cut = text[:max_length]
    rest = text[max_length:]

    # Introducers at the end of the prefix move to the suffix as a run
    prefix = _drop_dangling(cut)
    moved = cut[len(prefix):]
    remainder = moved + rest

    carried = last_style(text[: max_length + 1])
    if carried:
        # An odd run pairs its last introducer with the first character past
        # the cut; a color or format pair is already the tail of the carried style
        if len(moved) % 2 == 1 and carried.endswith((COLOR_CHAR + rest[:1]).lower()):
            remainder = moved[:-1] + rest[1:]
        remainder = carried + remainder

    suffix = _drop_dangling(remainder[:max_length])
    return SplitResult(prefix=prefix, suffix=suffix)


def _drop_dangling(text: str) -> str:
    """Remove the trailing run of introducers, paired or not."""
    return text.rstrip(COLOR_CHAR)

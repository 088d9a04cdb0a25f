"""
Protocol length limits.

The client protocol caps the objective title and the per-line text. Older
servers allow 32 characters, newer ones (1.13 and up) allow 128. The per-line
text is carried by a team's prefix and suffix, so each of the two segments
gets half of the text limit.
"""

import logging
import re
from typing import Optional

from pydantic import BaseModel, Field

from .config import Settings, get_settings
from .exceptions import ValidationError

logger = logging.getLogger(__name__)

LEGACY_LENGTH = 32
MODERN_LENGTH = 128

# Smallest text limit that leaves one character for each segment
MIN_TEXT_LENGTH = 2

# Digits of the first version with the extended limits ("v1_13_R1")
MODERN_VERSION_THRESHOLD = 1131


class ProtocolLimits(BaseModel):
    """Maximum lengths accepted by the client protocol."""

    title_length: int = Field(..., gt=0, description="Maximum objective title length")
    text_length: int = Field(
        ..., ge=MIN_TEXT_LENGTH, description="Maximum text length of one line"
    )

    model_config = {"frozen": True}

    @property
    def team_text_length(self) -> int:
        """Maximum length of each of the prefix and suffix segments."""
        return self.text_length // 2


def parse_version_number(server_version: str) -> int:
    """
    Reduce a runtime version string to a comparable number.

    Only the digits are kept, so "v1_8_R3" becomes 183 and "v1_13_R1"
    becomes 1131. A string without digits yields 0.
    """
    digits = re.sub(r"[^0-9]", "", server_version or "")
    return int(digits) if digits else 0


def resolve_limits(server_version: str) -> ProtocolLimits:
    """
    Pick the limit tier for a runtime version string.

    Args:
        server_version: Version string reported by the server

    Returns:
        ProtocolLimits for the matching tier
    """
    number = parse_version_number(server_version)
    length = MODERN_LENGTH if number >= MODERN_VERSION_THRESHOLD else LEGACY_LENGTH
    logger.info(f"Resolved protocol limits for version {server_version!r}: {length}")
    return ProtocolLimits(title_length=length, text_length=length)


def limits_from_settings(settings: Settings) -> ProtocolLimits:
    """
    Build the protocol limits for the given settings.

    Explicit overrides win over the version probe.

    Raises:
        ValidationError: If a title override is not positive or a text
            override is smaller than MIN_TEXT_LENGTH
    """
    limits = resolve_limits(settings.server_version)

    overrides = {
        "title_length": settings.title_length_override,
        "text_length": settings.text_length_override,
    }
    minimums = {"title_length": 1, "text_length": MIN_TEXT_LENGTH}
    for name, value in overrides.items():
        if value is not None and value < minimums[name]:
            raise ValidationError(
                f"Protocol {name.replace('_', ' ')} must be at least {minimums[name]}, got {value}",
                code="INVALID_PROTOCOL_LIMIT",
                details={name: value},
            )

    return ProtocolLimits(
        title_length=overrides["title_length"] or limits.title_length,
        text_length=overrides["text_length"] or limits.text_length,
    )


_limits_instance: Optional[ProtocolLimits] = None


def get_protocol_limits() -> ProtocolLimits:
    """Get the protocol limits for the configured settings (cached)."""
    global _limits_instance
    if _limits_instance is None:
        _limits_instance = limits_from_settings(get_settings())
    return _limits_instance


def reset_protocol_limits() -> None:
    """Reset the cached protocol limits (for testing)."""
    global _limits_instance
    _limits_instance = None

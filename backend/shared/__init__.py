"""
Shared infrastructure for the scoreboard panels package.

This package contains cross-cutting concerns that are used by multiple modules:
- config: Centralized settings management
- limits: Protocol length limits and the version probe
- exceptions: Base exception classes

Note: Business logic should NOT go here. This is for infrastructure only.
"""

from .config import Settings, get_settings
from .exceptions import (
    ScoreboardError,
    NotFoundError,
    ValidationError,
    ConflictError,
)
from .limits import (
    ProtocolLimits,
    MIN_TEXT_LENGTH,
    resolve_limits,
    limits_from_settings,
    get_protocol_limits,
    reset_protocol_limits,
)

__all__ = [
    "Settings",
    "get_settings",
    "ScoreboardError",
    "NotFoundError",
    "ValidationError",
    "ConflictError",
    "ProtocolLimits",
    "MIN_TEXT_LENGTH",
    "resolve_limits",
    "limits_from_settings",
    "get_protocol_limits",
    "reset_protocol_limits",
]

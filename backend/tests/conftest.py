"""
Shared test fixtures and utilities.

This module provides common test infrastructure used across all test modules.
"""

import pytest

from shared.config import get_settings
from shared.limits import ProtocolLimits, reset_protocol_limits
from modules.panels.memory import InMemoryBoardFactory, InMemoryViewer
from modules.titles.models import ScoreboardTitle


@pytest.fixture(autouse=True)
def reset_cached_config():
    """Reset cached settings and protocol limits before and after each test."""
    get_settings.cache_clear()
    reset_protocol_limits()
    yield
    get_settings.cache_clear()
    reset_protocol_limits()


@pytest.fixture
def legacy_limits() -> ProtocolLimits:
    """Limits of the 32-character protocol tier."""
    return ProtocolLimits(title_length=32, text_length=32)


@pytest.fixture
def modern_limits() -> ProtocolLimits:
    """Limits of the 128-character protocol tier."""
    return ProtocolLimits(title_length=128, text_length=128)


@pytest.fixture
def board_factory() -> InMemoryBoardFactory:
    """Factory producing in-memory backing boards."""
    return InMemoryBoardFactory()


@pytest.fixture
def viewer() -> InMemoryViewer:
    """A viewer recording the board it is shown."""
    return InMemoryViewer("Steve")


@pytest.fixture
def rotating_title() -> ScoreboardTitle:
    """Three titles rotating every 20 ticks."""
    return ScoreboardTitle(titles=["Alpha", "Bravo", "Charlie"], wait=20, max_title_length=32)


@pytest.fixture
def single_title() -> ScoreboardTitle:
    """A title that never rotates."""
    return ScoreboardTitle(titles=["Lobby"], wait=20, max_title_length=32)

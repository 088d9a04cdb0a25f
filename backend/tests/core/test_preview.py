"""Tests for the scoreboard preview command."""

from unittest.mock import patch

import pytest
from rich.console import Console

from core.preview import build_preview_panel, main
from modules.panels.models import LINE_COUNT
from modules.titles.exceptions import TitleTooLongError


@pytest.fixture
def recording_console():
    """A plain-text console swapped in for both preview modules."""
    console = Console(record=True, width=80, color_system=None)
    with patch("core.display.console", console), patch("core.preview.console", console):
        yield console


class TestBuildPreviewPanel:
    def test_translates_alternate_codes(self, legacy_limits):
        """Authoring codes become real style sequences."""
        panel = build_preview_panel(["&cTitle"], ["&aGreen"], legacy_limits)
        assert panel.get_current_title() == "§cTitle"
        assert panel.get_text(1) == "§aGreen"

    def test_lines_are_split_on_the_board(self, legacy_limits):
        """Long lines are written as prefix and suffix."""
        panel = build_preview_panel(["Title"], ["&c" + "x" * 20], legacy_limits)
        team = panel.board.get_team("Line 1")
        assert team.prefix == "§c" + "x" * 14
        assert team.suffix == "§c" + "x" * 6

    def test_extra_lines_are_dropped(self, legacy_limits):
        """Only the first fifteen lines are written."""
        lines = [f"line {n}" for n in range(1, LINE_COUNT + 3)]
        panel = build_preview_panel(["Title"], lines, legacy_limits)
        assert panel.get_text(LINE_COUNT) == f"line {LINE_COUNT}"
        assert len(panel.board.teams) == LINE_COUNT

    def test_custom_alt_char(self, legacy_limits):
        """Another authoring introducer can be chosen."""
        panel = build_preview_panel(["Title"], ["#eGold"], legacy_limits, alt_char="#")
        assert panel.get_text(1) == "§eGold"

    def test_title_over_limit_raises(self, legacy_limits):
        """Titles are validated against the title limit."""
        with pytest.raises(TitleTooLongError):
            build_preview_panel(["x" * 33], [], legacy_limits)


class TestMain:
    def test_prints_demo_panel(self, recording_console):
        """Without arguments a demo panel is printed."""
        assert main([]) == 0
        output = recording_console.export_text()
        assert "Scoreboard" in output
        assert "Coins: 120" in output

    def test_prints_given_lines_and_title(self, recording_console):
        """Lines and titles come from the arguments."""
        assert main(["--title", "&bLobby", "&fPlayers: &a12"]) == 0
        output = recording_console.export_text()
        assert "Lobby" in output
        assert "Players: 12" in output

    def test_server_version_selects_limits(self, recording_console):
        """A modern version string selects the long tier."""
        assert main(["--server-version", "v1_13_R1", "text"]) == 0
        assert "Text limit: 128 (64 per segment)" in recording_console.export_text()

    def test_default_limits_follow_settings(self, recording_console):
        """Without a version the configured limits apply."""
        assert main(["text"]) == 0
        assert "Text limit: 32 (16 per segment)" in recording_console.export_text()

    def test_rotations_print_each_title(self, recording_console):
        """Each rotation prints the panel again with the rotated title."""
        assert main(["-t", "First", "-t", "Second", "-r", "2", "a line wider than both titles"]) == 0
        output = recording_console.export_text()
        assert output.index("First") < output.index("Second")

    def test_error_exit_code(self, recording_console):
        """Invalid input is reported and gives a non-zero exit code."""
        assert main(["--title", "x" * 40]) == 1
        output = recording_console.export_text()
        assert "TITLE_TOO_LONG" in output

"""Unit tests for dialog frames."""

from __future__ import annotations

import pytest

from golazo.ui.dialog import render_dialog_frame, render_dialog_frame_with_help, render_key_table
from golazo.ui.theme import build_theme

pytestmark = pytest.mark.unit


@pytest.fixture
def plain_theme():
    return build_theme(dark_mode=True, color_system=None)


def test_dialog_frame_has_requested_outer_size(plain_theme) -> None:
    lines = render_dialog_frame("Settings", "Body text", 40, 10, plain_theme).split("\n")
    assert len(lines) == 10
    assert all(len(line) == 40 for line in lines)
    assert lines[0].startswith("╭") and lines[-1].startswith("╰")
    assert "Settings" in lines[2]
    assert "Body text" in "\n".join(lines)


def test_dialog_frame_with_help_shows_help_after_content(plain_theme) -> None:
    frame = render_dialog_frame_with_help("Help", "Content", "esc to close", 40, 12, plain_theme)
    assert frame.index("Content") < frame.index("esc to close")
    assert len(frame.split("\n")) == 12


def test_dialog_frame_clamps_tiny_sizes(plain_theme) -> None:
    lines = render_dialog_frame("T", "", 2, 1, plain_theme).split("\n")
    assert len(lines) == 5
    assert all(len(line) == 7 for line in lines)


def test_key_table_rows(plain_theme) -> None:
    table = render_key_table([("q", "Quit"), ("r", "Reload")], plain_theme, heading="Keys")
    lines = table.plain.split("\n")
    assert lines[0] == "Keys"
    assert lines[2].startswith("q") and lines[2].endswith("Quit")
    assert lines[3].startswith("r") and lines[3].endswith("Reload")

"""Unit tests for dashboard geometry and frame composition."""

from __future__ import annotations

import random

import pytest

from golazo.constants import EMPTY_NO_FINISHED_MATCHES, EMPTY_SELECT_MATCH, PANEL_LIVE_MATCHES
from golazo.data import FixtureMatchSource
from golazo.ui.layout import compute_layout, render_live_view, render_stats_view
from golazo.ui.match_list import MatchListModel
from golazo.ui.spinner import RandomCharSpinner
from golazo.ui.theme import build_theme

pytestmark = pytest.mark.unit

LIVE_MATCH_ID = 4813371


@pytest.fixture
def plain_theme():
    return build_theme(dark_mode=True, color_system=None)


@pytest.fixture
def source() -> FixtureMatchSource:
    return FixtureMatchSource()


def _assert_dimensions(frame: str, width: int, rows: int) -> list[str]:
    lines = frame.split("\n")
    assert len(lines) == rows
    assert all(len(line) == width for line in lines)
    return lines


def test_standard_terminal_split() -> None:
    layout = compute_layout(80, 24)
    assert layout.spinner_height == 3
    assert layout.available_height == 21
    assert layout.panel_height == 19
    assert layout.left_width == 28
    assert layout.separator_width == 1
    assert layout.right_width == 51


def test_right_floor_wins_on_narrow_terminal() -> None:
    layout = compute_layout(50, 24)
    assert layout.right_width == 35
    assert layout.left_width == 14
    assert layout.left_width + layout.separator_width + layout.right_width == 50


def test_left_floor_applies_when_right_has_room() -> None:
    layout = compute_layout(70, 24)
    assert layout.left_width == 25
    assert layout.right_width == 44


def test_non_positive_size_uses_defaults() -> None:
    layout = compute_layout(0, -5)
    assert (layout.width, layout.height) == (80, 24)
    assert layout.left_width == 28


def test_short_terminal_keeps_minimum_available_height() -> None:
    layout = compute_layout(100, 5)
    assert layout.available_height == 10
    assert layout.panel_height == 8


def test_regions_tile_the_panel_row() -> None:
    layout = compute_layout(120, 40)
    assert layout.left_region.x == 0
    assert layout.separator_region.x == layout.left_width
    assert layout.right_region.x == layout.left_width + 1
    assert layout.right_region.x + layout.right_region.width == 120
    assert layout.left_region.y == layout.spinner_height


def test_live_frame_has_exact_dimensions(plain_theme, source) -> None:
    list_model = MatchListModel(None, plain_theme, source.live_matches())
    frame = render_live_view(80, 24, list_model, None, [], plain_theme)
    lines = _assert_dimensions(frame, 80, 22)
    assert lines[0].strip() == ""
    assert PANEL_LIVE_MATCHES in frame
    assert "LIV 2-1 ARS" in frame


def test_narrow_frame_has_exact_dimensions(plain_theme, source) -> None:
    list_model = MatchListModel(None, plain_theme, source.live_matches())
    frame = render_live_view(50, 24, list_model, None, [], plain_theme)
    _assert_dimensions(frame, 50, 22)


def test_frame_without_room_for_left_panel_renders_right_only(plain_theme, source) -> None:
    list_model = MatchListModel(None, plain_theme, source.live_matches())
    frame = render_live_view(30, 24, list_model, None, [], plain_theme)
    _assert_dimensions(frame, 35, 22)
    assert "┃" not in frame


def test_missing_details_show_placeholder(plain_theme) -> None:
    empty = MatchListModel(None, plain_theme)
    frame = render_live_view(80, 24, empty, None, [], plain_theme)
    assert EMPTY_SELECT_MATCH in frame


def test_missing_details_while_loading(plain_theme) -> None:
    empty = MatchListModel(None, plain_theme)
    frame = render_live_view(80, 24, empty, None, [], plain_theme, details_loading=True)
    assert "Loading match details..." in frame


def test_live_details_list_updates_newest_first(plain_theme, source) -> None:
    list_model = MatchListModel(None, plain_theme, source.live_matches())
    details = source.match_details(LIVE_MATCH_ID)
    updates = source.live_updates(LIVE_MATCH_ID)
    frame = render_live_view(100, 60, list_model, details, updates, plain_theme)
    assert "Match Info" in frame
    assert "LIV  2 - 1  ARS" in frame
    assert frame.index("Mac Allister from outside") < frame.index("Saka finishes")


def test_spinner_row_shows_glyphs_while_loading(plain_theme) -> None:
    spinner = RandomCharSpinner(20, rng=random.Random(4))
    empty = MatchListModel(None, plain_theme)
    frame = render_live_view(80, 24, empty, None, [], plain_theme, spinner=spinner, view_loading=True)
    lines = frame.split("\n")
    assert "".join(spinner.display) in lines[1]
    assert lines[0].strip() == ""
    assert lines[2].strip() == ""


def test_spinner_row_is_blank_when_idle(plain_theme) -> None:
    spinner = RandomCharSpinner(20, rng=random.Random(4))
    empty = MatchListModel(None, plain_theme)
    frame = render_live_view(80, 24, empty, None, [], plain_theme, spinner=spinner, view_loading=False)
    assert all(line.strip() == "" for line in frame.split("\n")[:3])


def test_stats_frame_one_day_stacks_finished_and_upcoming(plain_theme, source) -> None:
    finished = MatchListModel("Finished Matches", plain_theme, source.finished_matches(1))
    upcoming = MatchListModel("Upcoming Matches", plain_theme, source.upcoming_matches())
    frame = render_stats_view(80, 30, finished, upcoming, None, 1, plain_theme)
    _assert_dimensions(frame, 80, 28)
    assert "Today" in frame and "3d" in frame
    assert "INT 3-2 MIL" in frame
    assert "20:45 PSG vs OM" in frame


def test_stats_frame_empty_finished_list_shows_message(plain_theme) -> None:
    finished = MatchListModel("Finished Matches", plain_theme)
    upcoming = MatchListModel("Upcoming Matches", plain_theme)
    frame = render_stats_view(120, 30, finished, upcoming, None, 3, plain_theme)
    assert EMPTY_NO_FINISHED_MATCHES in frame
    assert "Upcoming Matches" not in frame


def test_colored_frame_contains_ansi_sequences(source) -> None:
    theme = build_theme(dark_mode=True)
    list_model = MatchListModel(None, theme, source.live_matches())
    frame = render_live_view(80, 24, list_model, None, [], theme)
    assert "\x1b[" in frame


def test_frame_width_follows_dropped_left_panel() -> None:
    assert compute_layout(80, 24).frame_width == 80
    narrow = compute_layout(30, 24)
    assert narrow.frame_width == 35
    assert narrow.spinner_region.width == 35


def test_narrow_frame_with_spinner_keeps_uniform_width(plain_theme) -> None:
    spinner = RandomCharSpinner(20, rng=random.Random(8))
    empty = MatchListModel(None, plain_theme)
    frame = render_live_view(30, 24, empty, None, [], plain_theme, spinner=spinner, view_loading=True)
    lines = _assert_dimensions(frame, 35, 22)
    assert "".join(spinner.display) in lines[1]

"""Dashboard frame composition.

A frame is the spinner region stacked above a row of
[left panel | separator | right panel]. Geometry depends only on the
terminal size, so frames have deterministic dimensions.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional, Sequence

from rich.align import Align
from rich.text import Text

from golazo.constants import (
    DEFAULT_HEIGHT,
    DEFAULT_WIDTH,
    LEFT_PANEL_PERCENT,
    MIN_AVAILABLE_HEIGHT,
    MIN_LEFT_WIDTH,
    MIN_RIGHT_WIDTH,
    PANEL_FRAME_ROWS,
    SEPARATOR_WIDTH,
    SPINNER_FALLBACK_TEXT,
    SPINNER_HEIGHT,
)
from golazo.models import MatchDetails
from golazo.ui.match_list import ListModel
from golazo.ui.panels import (
    PANEL_CHROME_WIDTH,
    render_live_matches_list_panel,
    render_match_details_panel,
    render_stats_list_panel,
    render_stats_match_details_panel,
)
from golazo.ui.render import blank_block, join_horizontal, join_vertical, render_block
from golazo.ui.spinner import RandomCharSpinner
from golazo.ui.theme import Theme
from golazo.ui.types import LayoutRegion

Frame = str

SEPARATOR_GLYPH = "┃"

# Narrower left panels cannot hold a border plus padding; they render blank.
MIN_FRAMED_WIDTH = PANEL_CHROME_WIDTH + 1


@dataclass(frozen=True)
class DashboardLayout:
    """Panel geometry for one terminal size.

    left_width follows the right-floor-wins rule and can end up below its own
    floor (or below zero) on very narrow terminals.
    """

    width: int
    height: int
    spinner_height: int
    available_height: int
    left_width: int
    right_width: int
    separator_width: int
    panel_height: int

    @property
    def frame_width(self) -> int:
        """Columns actually drawn: the right panel alone once the left panel is dropped."""
        if self.left_width > 0:
            return self.width
        return self.right_width

    @property
    def spinner_region(self) -> LayoutRegion:
        return LayoutRegion(0, 0, self.frame_width, self.spinner_height)

    @property
    def left_region(self) -> LayoutRegion:
        return LayoutRegion(0, self.spinner_height, max(self.left_width, 0), self.panel_height)

    @property
    def separator_region(self) -> LayoutRegion:
        return LayoutRegion(max(self.left_width, 0), self.spinner_height, self.separator_width, self.panel_height)

    @property
    def right_region(self) -> LayoutRegion:
        x = max(self.left_width, 0) + self.separator_width
        return LayoutRegion(x, self.spinner_height, self.right_width, self.panel_height)


def compute_layout(width: int, height: int) -> DashboardLayout:
    """Split the terminal into spinner, list and detail regions.

    Args:
        width: Terminal columns; <= 0 falls back to 80.
        height: Terminal rows; <= 0 falls back to 24.
    """
    if width <= 0:
        width = DEFAULT_WIDTH
    if height <= 0:
        height = DEFAULT_HEIGHT

    available_height = max(height - SPINNER_HEIGHT, MIN_AVAILABLE_HEIGHT)

    left_width = max(width * LEFT_PANEL_PERCENT // 100, MIN_LEFT_WIDTH)
    right_width = width - left_width - SEPARATOR_WIDTH
    if right_width < MIN_RIGHT_WIDTH:
        right_width = MIN_RIGHT_WIDTH
        left_width = width - right_width - SEPARATOR_WIDTH

    return DashboardLayout(
        width=width,
        height=height,
        spinner_height=SPINNER_HEIGHT,
        available_height=available_height,
        left_width=left_width,
        right_width=right_width,
        separator_width=SEPARATOR_WIDTH,
        panel_height=available_height - PANEL_FRAME_ROWS,
    )


def render_spinner_area(
    layout: DashboardLayout,
    spinner: Optional[RandomCharSpinner],
    animating: bool,
    theme: Theme,
) -> list[str]:
    """Spinner centered in the reserved rows, or blank rows when idle."""
    if not animating or spinner is None:
        return blank_block(layout.frame_width, layout.spinner_height)

    view = spinner.render(theme.gradient_colors())
    if not view.plain:
        view = Text(SPINNER_FALLBACK_TEXT, style=theme.dim_text)
    centered = Align.center(view, vertical="middle", height=layout.spinner_height)
    return render_block(centered, layout.frame_width, layout.spinner_height, theme.color_system)


def render_separator(layout: DashboardLayout, theme: Theme) -> list[str]:
    column = Text("\n".join([SEPARATOR_GLYPH] * layout.panel_height), style=theme.separator)
    return render_block(column, layout.separator_width, layout.panel_height, theme.color_system)


def _left_panel(layout: DashboardLayout, render: Callable[[], list[str]]) -> list[str] | None:
    """Left panel block, None when no columns remain for it."""
    if layout.left_width <= 0:
        return None
    if layout.left_width < MIN_FRAMED_WIDTH:
        return blank_block(layout.left_width, layout.panel_height)
    return render()


def _assemble(
    layout: DashboardLayout,
    spinner_area: list[str],
    left_panel: list[str] | None,
    right_panel: list[str],
    theme: Theme,
) -> Frame:
    blocks = [right_panel]
    if left_panel is not None:
        blocks = [left_panel, render_separator(layout, theme), right_panel]
    panels = join_horizontal(*blocks)
    return "\n".join(join_vertical(spinner_area, panels))


def render_live_view(
    width: int,
    height: int,
    list_model: ListModel,
    details: Optional[MatchDetails],
    live_updates: Sequence[str],
    theme: Theme,
    spinner: Optional[RandomCharSpinner] = None,
    view_loading: bool = False,
    details_loading: bool = False,
) -> Frame:
    """Live matches view: match list on the left, details and live updates on the right."""
    layout = compute_layout(width, height)
    spinner_area = render_spinner_area(layout, spinner, view_loading, theme)
    left_panel = _left_panel(
        layout,
        lambda: render_live_matches_list_panel(layout.left_width, layout.panel_height, list_model, theme),
    )
    right_panel = render_match_details_panel(
        layout.right_width, layout.panel_height, details, live_updates, theme, loading=details_loading
    )
    return _assemble(layout, spinner_area, left_panel, right_panel, theme)


def render_stats_view(
    width: int,
    height: int,
    finished_list: ListModel,
    upcoming_list: ListModel,
    details: Optional[MatchDetails],
    date_range: int,
    theme: Theme,
    spinner: Optional[RandomCharSpinner] = None,
    view_loading: bool = False,
) -> Frame:
    """Stats view: finished (and upcoming) lists on the left, match details on the right."""
    layout = compute_layout(width, height)
    spinner_area = render_spinner_area(layout, spinner, view_loading, theme)
    left_panel = _left_panel(
        layout,
        lambda: render_stats_list_panel(
            layout.left_width, layout.panel_height, finished_list, upcoming_list, date_range, theme
        ),
    )
    right_panel = render_stats_match_details_panel(layout.right_width, layout.panel_height, details, theme)
    return _assemble(layout, spinner_area, left_panel, right_panel, theme)

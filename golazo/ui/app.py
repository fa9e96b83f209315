"""Textual host application: owns the views, the spinner and the tick chain."""

from __future__ import annotations

import logging
import random
from typing import Callable, Optional

from rich.text import Text
from textual import events
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.screen import ModalScreen
from textual.timer import Timer
from textual.widget import Widget
from textual.widgets import Static

from golazo.config import GolazoConfig
from golazo.constants import DATE_RANGES, MAIN_VIEW_CHECK_DELAY, PANEL_FINISHED_MATCHES, PANEL_UPCOMING_MATCHES
from golazo.data import FixtureError, FixtureMatchSource
from golazo.models import MatchDetails
from golazo.ui import theme as theme_mod
from golazo.ui.dialog import render_dialog_frame_with_help, render_key_table
from golazo.ui.layout import Frame, render_live_view, render_stats_view
from golazo.ui.match_list import MatchListModel
from golazo.ui.scheduler import SpinnerTick, TickScheduler
from golazo.ui.spinner import RandomCharSpinner
from golazo.ui.theme import Theme, build_theme
from golazo.ui.types import ViewKind

logger = logging.getLogger(__name__)

HELP_KEYS: tuple[tuple[str, str], ...] = (
    ("1 / 2", "Live / Stats view"),
    ("j k ↑ ↓", "Move selection"),
    ("h / l", "Date range (stats)"),
    ("r", "Reload matches"),
    ("c", "Re-detect colors"),
    ("?", "This help"),
    ("q", "Quit"),
)

HELP_DIALOG_WIDTH = 48
HELP_DIALOG_HEIGHT = 17


class GolazoMixin:
    """Mixin for widgets that render controlled content.

    Suppresses Textual's default link processing.
    """

    auto_links = False


class DashboardFrame(GolazoMixin, Widget):
    """Full-screen widget showing the composed dashboard frame."""

    DEFAULT_CSS = """
    DashboardFrame {
        width: 100%;
        height: 100%;
    }
    """

    def __init__(self, compose_frame: Callable[[int, int], Frame], **kwargs: object) -> None:
        super().__init__(**kwargs)  # type: ignore[arg-type]
        self._compose_frame = compose_frame

    def render(self) -> Text:
        try:
            return Text.from_ansi(self._compose_frame(self.size.width, self.size.height))
        except Exception:
            logger.exception("Dashboard render crashed")
            return Text("golazo")


class HelpScreen(ModalScreen[None]):
    """Key binding reference in a dialog frame."""

    BINDINGS = [
        Binding("escape", "dismiss", "Close"),
        Binding("question_mark", "dismiss", "Close"),
    ]

    DEFAULT_CSS = """
    HelpScreen {
        align: center middle;
    }
    HelpScreen > Static {
        width: auto;
        height: auto;
    }
    """

    def __init__(self, ui_theme: Theme, **kwargs: object) -> None:
        super().__init__(**kwargs)  # type: ignore[arg-type]
        self._ui_theme = ui_theme

    def compose(self) -> ComposeResult:
        body = render_key_table(HELP_KEYS, self._ui_theme, heading="Keys")
        frame = render_dialog_frame_with_help(
            "golazo",
            body,
            "esc to close",
            HELP_DIALOG_WIDTH,
            HELP_DIALOG_HEIGHT,
            self._ui_theme,
        )
        yield Static(Text.from_ansi(frame), id="help-dialog")


class GolazoApp(App[None]):
    """Live match dashboard with a live view and a stats view.

    The app is the only owner of a TickScheduler: ticks run while a view is
    loading and each delivered tick is re-armed from on_spinner_tick.
    """

    BINDINGS = [
        Binding("1", "show_view('live')", "Live"),
        Binding("2", "show_view('stats')", "Stats"),
        Binding("j,down", "move(1)", "Down", show=False),
        Binding("k,up", "move(-1)", "Up", show=False),
        Binding("h", "date_range(-1)", "Fewer days", show=False),
        Binding("l", "date_range(1)", "More days", show=False),
        Binding("r", "reload", "Reload"),
        Binding("c", "refresh_appearance", "Colors", show=False),
        Binding("question_mark", "help", "Help"),
        Binding("q", "quit", "Quit"),
    ]

    def __init__(
        self,
        source: FixtureMatchSource,
        *,
        config: Optional[GolazoConfig] = None,
        start_view: Optional[ViewKind] = None,
        rng: Optional[random.Random] = None,
        color_system: Optional[str] = "truecolor",
        **kwargs: object,
    ) -> None:
        super().__init__(**kwargs)  # type: ignore[arg-type]
        self.source = source
        self.config = config or GolazoConfig()
        self.current_view = start_view or ViewKind(self.config.ui.start_view)
        self.date_range: int = self.config.ui.date_range
        self._color_system = color_system
        self._rng = rng or random.Random()
        self.ui_theme: Theme = build_theme(color_system=color_system)

        self.spinner = RandomCharSpinner(self.config.ui.spinner_width, rng=self._rng)
        self.view_loading = False
        self._loading_timer: Optional[Timer] = None
        self._ticks = TickScheduler(self.set_timer, self.post_message)
        self._frame: Optional[DashboardFrame] = None

        self.live_list = MatchListModel(None, self.ui_theme)
        self.finished_list = MatchListModel(PANEL_FINISHED_MATCHES, self.ui_theme)
        self.upcoming_list = MatchListModel(PANEL_UPCOMING_MATCHES, self.ui_theme)
        self._focus_stats_list(False)

    @property
    def ticks(self) -> TickScheduler:
        return self._ticks

    def compose(self) -> ComposeResult:
        self._frame = DashboardFrame(self.compose_frame, id="dashboard")
        yield self._frame

    def on_mount(self) -> None:
        self.enter_view(self.current_view)

    # --- Frame composition ---

    def compose_frame(self, width: int, height: int) -> Frame:
        if self.current_view is ViewKind.LIVE:
            selected = self.live_list.selected()
            details = self.source.match_details(selected.id) if selected else None
            updates = self.source.live_updates(selected.id) if selected else []
            return render_live_view(
                width,
                height,
                self.live_list,
                details,
                updates,
                self.ui_theme,
                spinner=self.spinner,
                view_loading=self.view_loading,
                details_loading=self.view_loading,
            )
        return render_stats_view(
            width,
            height,
            self.finished_list,
            self.upcoming_list,
            self._selected_stats_match(),
            self.date_range,
            self.ui_theme,
            spinner=self.spinner,
            view_loading=self.view_loading,
        )

    def _selected_stats_match(self) -> Optional[MatchDetails]:
        selected = self._stats_focus().selected()
        if selected is None:
            return None
        return self.source.match_details(selected.id)

    def _stats_focus(self) -> MatchListModel:
        return self.upcoming_list if self.upcoming_list.active else self.finished_list

    def _focus_stats_list(self, upcoming: bool) -> None:
        self.upcoming_list.active = upcoming
        self.finished_list.active = not upcoming

    def _refresh_frame(self) -> None:
        if self._frame is not None:
            self._frame.refresh()

    # --- View lifecycle ---

    def enter_view(self, view: ViewKind) -> None:
        """Switch views: fresh spinner, new tick chain, loading phase, then data."""
        logger.debug("Entering %s view", view.value)
        self.current_view = view
        self.spinner = RandomCharSpinner(self._spinner_width(), rng=self._rng)
        self.view_loading = True
        if self._loading_timer is not None:
            self._loading_timer.stop()
        self._loading_timer = self.set_timer(MAIN_VIEW_CHECK_DELAY, self._finish_loading)
        self._ticks.start()
        self._refresh_frame()

    def _finish_loading(self) -> None:
        self._loading_timer = None
        self._load_matches()
        self.view_loading = False
        self._ticks.stop()
        self._refresh_frame()

    def _load_matches(self) -> None:
        if self.current_view is ViewKind.LIVE:
            self.live_list.set_items(self.source.live_matches())
            logger.debug("Loaded %d live matches", len(self.live_list.items()))
            return
        self.finished_list.set_items(self.source.finished_matches(self.date_range))
        self.upcoming_list.set_items(self.source.upcoming_matches() if self.date_range == 1 else [])
        self._focus_stats_list(not self.finished_list.items() and bool(self.upcoming_list.items()))
        logger.debug(
            "Loaded %d finished / %d upcoming matches (range=%dd)",
            len(self.finished_list.items()),
            len(self.upcoming_list.items()),
            self.date_range,
        )

    def _spinner_width(self) -> int:
        terminal_width = self.size.width
        if terminal_width <= 0:
            return self.config.ui.spinner_width
        return min(self.config.ui.spinner_width, terminal_width)

    # --- Events ---

    def on_spinner_tick(self, _message: SpinnerTick) -> None:
        if not self.view_loading:
            return
        self.spinner.tick()
        self._refresh_frame()
        self._ticks.schedule_tick()

    def on_resize(self, _event: events.Resize) -> None:
        self.spinner.set_width(self._spinner_width())
        self._refresh_frame()

    # --- Actions ---

    def action_show_view(self, view: str) -> None:
        target = ViewKind(view)
        if target is self.current_view and not self.view_loading:
            return
        self.enter_view(target)

    def action_move(self, delta: int) -> None:
        if self.current_view is ViewKind.LIVE:
            self.live_list.move(delta)
        else:
            self._move_stats(delta)
        self._refresh_frame()

    def _move_stats(self, delta: int) -> None:
        """Move through finished then upcoming matches as one sequence."""
        finished, upcoming = self.finished_list, self.upcoming_list
        if upcoming.active:
            if delta < 0 and upcoming.selected_index == 0 and finished.items():
                self._focus_stats_list(False)
                finished.move(len(finished.items()))
            else:
                upcoming.move(delta)
            return
        at_end = finished.selected_index >= len(finished.items()) - 1
        if delta > 0 and at_end and upcoming.items():
            self._focus_stats_list(True)
            upcoming.move(-len(upcoming.items()))
        else:
            finished.move(delta)

    def action_date_range(self, step: int) -> None:
        if self.current_view is not ViewKind.STATS:
            return
        index = DATE_RANGES.index(self.date_range) + step
        if not 0 <= index < len(DATE_RANGES):
            return
        self.date_range = DATE_RANGES[index]
        self.enter_view(ViewKind.STATS)

    def action_reload(self) -> None:
        try:
            self.source.reload()
        except FixtureError as e:
            logger.warning("Reload failed: %s", e)
            self.notify(f"Reload failed: {e}", severity="error")
            return
        self.enter_view(self.current_view)

    def action_refresh_appearance(self) -> None:
        theme_mod.refresh_mode()
        self.ui_theme = build_theme(color_system=self._color_system)
        for list_model in (self.live_list, self.finished_list, self.upcoming_list):
            list_model.theme = self.ui_theme
        self._refresh_frame()

    def action_help(self) -> None:
        self.push_screen(HelpScreen(self.ui_theme))

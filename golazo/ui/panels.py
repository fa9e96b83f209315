"""Panel renderers for the dashboard: match lists and match details."""

from __future__ import annotations

from typing import Sequence, assert_never

from rich.console import Group, RenderableType
from rich.padding import Padding
from rich.panel import Panel as RichPanel
from rich.text import Text

from golazo.constants import (
    DATE_RANGE_HINT,
    EMPTY_NO_FINISHED_MATCHES,
    EMPTY_NO_LIVE_MATCHES,
    EMPTY_NO_LIVE_UPDATES,
    EMPTY_NO_UPCOMING_MATCHES,
    EMPTY_SELECT_MATCH,
    PANEL_LIVE_MATCHES,
    PANEL_LIVE_UPDATES,
    PANEL_MATCH_INFO,
)
from golazo.models import EventType, MatchDetails, MatchEvent, MatchStatus
from golazo.ui.match_list import ListModel, MatchListModel
from golazo.ui.render import render_block
from golazo.ui.theme import Theme
from golazo.ui.types import Panel, PanelStyle

# Border (2) plus horizontal padding (2 each side)
PANEL_CHROME_WIDTH = 6
PANEL_BORDER_ROWS = 2

_LABEL_WIDTH = 13


def content_width(width: int) -> int:
    return max(width - PANEL_CHROME_WIDTH, 1)


def content_height(height: int) -> int:
    return max(height - PANEL_BORDER_ROWS, 1)


def panel_renderable(panel: Panel, width: int, height: int, theme: Theme) -> RichPanel:
    """Bordered panel of exactly width x height with the title inside the frame."""
    body = Text.from_ansi(panel.body) if isinstance(panel.body, str) else panel.body
    parts: list[RenderableType] = []
    if panel.title:
        parts.append(Text(panel.title, style=theme.panel_title, no_wrap=True, overflow="ellipsis"))
        parts.append(Text(""))
    parts.append(body)
    return RichPanel(
        Group(*parts),
        box=theme.panel_box,
        border_style=theme.border_for(panel.style_class),
        width=width,
        height=height,
        padding=(0, 2),
    )


def render_panel(panel: Panel, width: int, height: int, theme: Theme) -> list[str]:
    return render_block(panel_renderable(panel, width, height, theme), width, height, theme.color_system)


def _sized_view(list_model: ListModel, width: int, height: int) -> str:
    if isinstance(list_model, MatchListModel):
        list_model.set_size(width, height)
    return list_model.view()


def render_live_matches_list_panel(width: int, height: int, list_model: ListModel, theme: Theme) -> list[str]:
    """Left panel of the live view."""
    inner_height = max(content_height(height) - 2, 1)
    if list_model.items():
        body: RenderableType = _sized_view(list_model, content_width(width), inner_height)
    else:
        body = Text(EMPTY_NO_LIVE_MATCHES, style=theme.empty)
    return render_panel(Panel(PANEL_LIVE_MATCHES, body, PanelStyle.LIST), width, height, theme)


def render_date_range_selector(selected: int, theme: Theme) -> Text:
    """Horizontal, centered date range selector (Today, 3d)."""
    options = ((1, "Today"), (3, "3d"))
    selector = Text(justify="center", no_wrap=True, overflow="ellipsis")
    for i, (days, label) in enumerate(options):
        if i > 0:
            selector.append("  ")
        selector.append(label, style=theme.date_selected if days == selected else theme.date_unselected)
    return selector


def render_stats_list_panel(
    width: int,
    height: int,
    finished_list: ListModel,
    upcoming_list: ListModel,
    date_range: int,
    theme: Theme,
) -> list[str]:
    """Left panel of the stats view.

    List titles only appear when a list has items; empty lists show dim
    messages instead. The one-day range stacks finished and upcoming lists.
    """
    inner_width = content_width(width)
    remaining = max(content_height(height) - 2, 1)

    if date_range == 1:
        finished_height = max((remaining - 1) // 2, 1)
        upcoming_height = max(remaining - 1 - finished_height, 1)
    else:
        finished_height = remaining
        upcoming_height = 0

    parts: list[RenderableType] = [render_date_range_selector(date_range, theme), Text("")]

    if finished_list.items():
        parts.append(Text.from_ansi(_sized_view(finished_list, inner_width, finished_height)))
    else:
        parts.append(Text(f"{EMPTY_NO_FINISHED_MATCHES}\n\n{DATE_RANGE_HINT}", style=theme.empty))

    if date_range == 1:
        parts.append(Text(""))
        if upcoming_list.items():
            parts.append(Text.from_ansi(_sized_view(upcoming_list, inner_width, upcoming_height)))
        else:
            parts.append(Text(EMPTY_NO_UPCOMING_MATCHES, style=theme.empty))

    return render_panel(Panel("", Group(*parts), PanelStyle.LIST), width, height, theme)


def render_status(details: MatchDetails, theme: Theme) -> Text:
    match details.status:
        case MatchStatus.FINISHED:
            return Text("FT", style=theme.finished)
        case MatchStatus.LIVE:
            return Text(details.live_time or "LIVE", style=theme.live)
        case MatchStatus.SCHEDULED:
            if details.match_time is not None:
                return Text(f"KO {details.match_time:%H:%M}", style=theme.dim_text)
            return Text("Scheduled", style=theme.dim_text)
        case _:
            assert_never(details.status)


def _labeled(label: str, value: Text | str, theme: Theme) -> Text:
    line = Text(f"{label}:".ljust(_LABEL_WIDTH), style=theme.label)
    line.append(value if isinstance(value, Text) else Text(value, style=theme.value))
    return line


def _score_line(details: MatchDetails, theme: Theme) -> Text:
    home = details.home_team.display_name
    away = details.away_team.display_name
    line = Text(justify="center")
    line.append(home, style=theme.team)
    if details.has_score:
        line.append(f"  {details.home_score} - {details.away_score}  ")
    else:
        line.append("  vs  ")
    line.append(away, style=theme.team)
    return line


def _goal_lines(team_name: str, goals: Sequence[MatchEvent], theme: Theme) -> list[Text]:
    lines = [Text(team_name, style=theme.team)]
    for goal in goals:
        line = Text("  ")
        line.append(f"{goal.minute}'", style=theme.score)
        line.append(" ")
        line.append(goal.player or "Unknown", style=theme.value)
        lines.append(line)
    return lines


def match_info_lines(details: MatchDetails, theme: Theme) -> list[Text]:
    """Header, score, metadata, goals and cards for one match."""
    lines: list[Text] = [Text(PANEL_MATCH_INFO, style=theme.header), Text(""), _score_line(details, theme), Text("")]

    lines.append(_labeled("Status", render_status(details, theme), theme))
    if details.league.name:
        lines.append(_labeled("League", details.league.name, theme))
    if details.venue:
        lines.append(_labeled("Venue", details.venue, theme))
    if details.match_time is not None:
        lines.append(_labeled("Date", details.match_time.strftime("%d %b %Y"), theme))
    half_time = details.half_time_score
    if half_time is not None and half_time.home is not None and half_time.away is not None:
        lines.append(_labeled("Half-Time", f"{half_time.home} - {half_time.away}", theme))

    home_goals, away_goals = details.split_goals()
    if home_goals or away_goals:
        lines.extend([Text(""), Text("Goals", style=theme.header)])
        if home_goals:
            lines.extend(_goal_lines(details.home_team.display_name, home_goals, theme))
        if away_goals:
            lines.extend(_goal_lines(details.away_team.display_name, away_goals, theme))

    yellow_cards = details.count_events(EventType.YELLOW_CARD)
    red_cards = details.count_events(EventType.RED_CARD)
    if yellow_cards or red_cards:
        lines.extend([Text(""), Text("Cards", style=theme.header)])
        if yellow_cards:
            lines.append(Text.assemble("  ", ("Yellow:", theme.team), " ", (str(yellow_cards), theme.value)))
        if red_cards:
            lines.append(Text.assemble("  ", ("Red:", theme.live), " ", (str(red_cards), theme.value)))

    return lines


def _placeholder(height: int, message: str, theme: Theme) -> RenderableType:
    text = Text(message, style=theme.empty, justify="center")
    return Padding(text, (content_height(height) // 4, 0, 0, 0))


def _details_block(width: int, height: int, body: RenderableType, theme: Theme) -> list[str]:
    return render_panel(Panel("", body, PanelStyle.DETAIL), width, height, theme)


def render_stats_match_details_panel(width: int, height: int, details: MatchDetails | None, theme: Theme) -> list[str]:
    """Right panel of the stats view."""
    if details is None:
        return _details_block(width, height, _placeholder(height, EMPTY_SELECT_MATCH, theme), theme)
    return _details_block(width, height, Group(*match_info_lines(details, theme)), theme)


def render_match_details_panel(
    width: int,
    height: int,
    details: MatchDetails | None,
    live_updates: Sequence[str],
    theme: Theme,
    loading: bool = False,
) -> list[str]:
    """Right panel of the live view: match info followed by live updates, newest first."""
    if details is None:
        message = "Loading match details..." if loading else EMPTY_SELECT_MATCH
        return _details_block(width, height, _placeholder(height, message, theme), theme)

    lines = match_info_lines(details, theme)
    lines.extend([Text(""), Text(PANEL_LIVE_UPDATES, style=theme.header)])
    if loading:
        lines.append(Text("Refreshing...", style=theme.dim_text))
    if live_updates:
        for update in reversed(live_updates):
            lines.append(Text(f"  {update}", style=theme.value, no_wrap=True, overflow="ellipsis"))
    else:
        lines.append(Text(f"  {EMPTY_NO_LIVE_UPDATES}", style=theme.dim_text))
    return _details_block(width, height, Group(*lines), theme)

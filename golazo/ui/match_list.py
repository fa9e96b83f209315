"""Minimal selectable match list used by the dashboard panels."""

from __future__ import annotations

from typing import Protocol, Sequence

from rich.text import Text

from golazo.models import MatchDetails, MatchStatus
from golazo.ui.render import render_block
from golazo.ui.theme import Theme


class ListModel(Protocol):
    """What the layout composer needs from a list widget."""

    def items(self) -> Sequence[MatchDetails]: ...

    def view(self) -> str: ...


def format_match_row(match: MatchDetails) -> str:
    home = match.home_team.display_name
    away = match.away_team.display_name
    if match.has_score:
        line = f"{home} {match.home_score}-{match.away_score} {away}"
    else:
        line = f"{home} vs {away}"
    if match.status is MatchStatus.LIVE and match.live_time:
        line = f"{match.live_time} {line}"
    elif match.status is MatchStatus.SCHEDULED and match.match_time:
        line = f"{match.match_time:%H:%M} {line}"
    return line


class MatchListModel:
    """Selectable list with an optional title. Callers must set_size() before view()."""

    def __init__(self, title: str | None, theme: Theme, matches: Sequence[MatchDetails] = ()) -> None:
        self.title = title
        self.theme = theme
        self._items: list[MatchDetails] = list(matches)
        self.selected_index = 0
        # Only the focused list draws its selection marker.
        self.active = True
        self.width = 0
        self.height = 0

    def items(self) -> Sequence[MatchDetails]:
        return self._items

    def set_items(self, matches: Sequence[MatchDetails]) -> None:
        self._items = list(matches)
        self.selected_index = min(self.selected_index, max(len(self._items) - 1, 0))

    def set_size(self, width: int, height: int) -> None:
        self.width = max(width, 1)
        self.height = max(height, 1)

    def selected(self) -> MatchDetails | None:
        if not self._items:
            return None
        return self._items[self.selected_index]

    def move(self, delta: int) -> MatchDetails | None:
        if self._items:
            self.selected_index = max(0, min(len(self._items) - 1, self.selected_index + delta))
        return self.selected()

    def view(self) -> str:
        """Optional title row plus the window of rows around the selection."""
        visible = max(self.height - (1 if self.title else 0), 0)
        start = 0
        if visible and self.selected_index >= visible:
            start = self.selected_index - visible + 1

        rows: list[Text] = []
        if self.title:
            rows.append(Text(self.title, style=self.theme.header))
        for index in range(start, min(start + visible, len(self._items))):
            selected = self.active and index == self.selected_index
            marker = "› " if selected else "  "
            style = self.theme.item_selected if selected else self.theme.item
            rows.append(Text(marker + format_match_row(self._items[index]), style=style))

        text = Text("\n").join(rows)
        text.no_wrap = True
        text.overflow = "ellipsis"
        return "\n".join(render_block(text, self.width, self.height, self.theme.color_system))

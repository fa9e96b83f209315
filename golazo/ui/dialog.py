"""Bordered, titled dialog frames, independent of the dashboard geometry."""

from __future__ import annotations

from typing import Sequence

from rich.console import Group, RenderableType
from rich.panel import Panel as RichPanel
from rich.text import Text

from golazo.ui.render import render_block
from golazo.ui.theme import Theme

# Rounded border (1 each side) plus padding (1 vertical, 2 horizontal)
DIALOG_CHROME_WIDTH = 6
DIALOG_CHROME_HEIGHT = 4


def _content(content: RenderableType | str, theme: Theme) -> RenderableType:
    return Text.from_ansi(content, style=theme.dialog_content) if isinstance(content, str) else content


def _frame(parts: list[RenderableType], width: int, height: int, theme: Theme) -> str:
    width = max(width, DIALOG_CHROME_WIDTH + 1)
    height = max(height, DIALOG_CHROME_HEIGHT + 1)
    panel = RichPanel(
        Group(*parts),
        box=theme.dialog_box,
        border_style=theme.dialog_border,
        width=width,
        height=height,
        padding=(1, 2),
    )
    return "\n".join(render_block(panel, width, height, theme.color_system))


def render_dialog_frame(title: str, content: RenderableType | str, width: int, height: int, theme: Theme) -> str:
    """Wrap content in a dialog frame with a title.

    width and height are the outer size of the box, border included.
    """
    parts: list[RenderableType] = [
        Text(title, style=theme.dialog_title),
        Text(""),
        _content(content, theme),
    ]
    return _frame(parts, width, height, theme)


def render_dialog_frame_with_help(
    title: str,
    content: RenderableType | str,
    help_text: str,
    width: int,
    height: int,
    theme: Theme,
) -> str:
    """Wrap content in a dialog frame with a title and a trailing help line."""
    parts: list[RenderableType] = [
        Text(title, style=theme.dialog_title),
        Text(""),
        _content(content, theme),
        Text(""),
        Text(help_text, style=theme.dialog_help),
    ]
    return _frame(parts, width, height, theme)


def render_key_table(rows: Sequence[tuple[str, str]], theme: Theme, heading: str | None = None) -> Text:
    """Two-column table of key bindings for dialog bodies."""
    table = Text()
    if heading:
        table.append(heading, style=theme.dialog_header)
        table.append("\n")
        table.append("─" * 24, style=theme.dialog_separator)
    for i, (key, description) in enumerate(rows):
        if heading or i > 0:
            table.append("\n")
        table.append(key.ljust(12), style=theme.dialog_label)
        table.append(description, style=theme.dialog_value)
    return table

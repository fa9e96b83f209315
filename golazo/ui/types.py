"""Shared UI types."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from rich.console import RenderableType


class ThemeMode(str, Enum):
    """Theme mode identifiers."""

    DARK = "dark"
    LIGHT = "light"


class ViewKind(str, Enum):
    """Dashboard views."""

    LIVE = "live"
    STATS = "stats"


class PanelStyle(str, Enum):
    """Visual class of a panel."""

    LIST = "list"
    DETAIL = "detail"
    DIALOG = "dialog"


@dataclass(frozen=True)
class LayoutRegion:
    """Rectangle within a frame, in terminal cells."""

    x: int
    y: int
    width: int
    height: int


@dataclass(frozen=True)
class Panel:
    """Renderable titled unit; stateless beyond its content.

    A str body is treated as ANSI-styled text (e.g. a pre-rendered list view).
    """

    title: str
    body: RenderableType
    style_class: PanelStyle

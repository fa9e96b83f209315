"""Render Rich renderables into fixed-size blocks of text lines."""

from __future__ import annotations

import io
from typing import Optional

from rich.color import ColorSystem
from rich.console import Console, RenderableType
from rich.segment import Segment

_COLOR_SYSTEMS: dict[str, ColorSystem] = {
    "standard": ColorSystem.STANDARD,
    "256": ColorSystem.EIGHT_BIT,
    "truecolor": ColorSystem.TRUECOLOR,
}


def _line_to_str(line: list[Segment], color_system: Optional[ColorSystem]) -> str:
    if color_system is None:
        return "".join(segment.text for segment in line)
    return "".join(
        segment.style.render(segment.text, color_system=color_system) if segment.style else segment.text
        for segment in line
    )


def render_block(
    renderable: RenderableType,
    width: int,
    height: Optional[int] = None,
    color_system: Optional[str] = "truecolor",
) -> list[str]:
    """Render to exactly `height` lines (when given), each padded to `width` cells.

    Args:
        renderable: Any Rich renderable.
        width: Block width in cells (at least 1).
        height: Block height in lines, or None for natural height.
        color_system: "standard", "256", "truecolor", or None for plain text.
    """
    width = max(width, 1)
    console = Console(
        width=width,
        file=io.StringIO(),
        force_terminal=color_system is not None,
        color_system=color_system,
        highlight=False,
        emoji=False,
        legacy_windows=False,
    )
    options = console.options.update(width=width, height=height)
    lines = console.render_lines(renderable, options, pad=True)
    system = _COLOR_SYSTEMS.get(color_system) if color_system else None
    return [_line_to_str(line, system) for line in lines]


def blank_block(width: int, height: int) -> list[str]:
    return [" " * max(width, 0)] * max(height, 0)


def join_horizontal(*blocks: list[str]) -> list[str]:
    """Place blocks side by side, top aligned. Blocks are expected to be padded."""
    height = max((len(block) for block in blocks), default=0)
    rows: list[str] = []
    for y in range(height):
        rows.append("".join(block[y] if y < len(block) else "" for block in blocks))
    return rows


def join_vertical(*blocks: list[str]) -> list[str]:
    rows: list[str] = []
    for block in blocks:
        rows.extend(block)
    return rows

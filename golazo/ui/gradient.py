"""Perceptual (Lab) color gradients applied to text."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from rich.style import Style
from rich.text import Text
from textual.color import Color, ColorParseError, Lab, lab_to_rgb, rgb_to_lab

from golazo.ui.theme import adaptive_gradient_colors

logger = logging.getLogger(__name__)


def blend_ratio(index: int, count: int) -> float:
    """Position of item index in a sequence of count, in [0.0, 1.0].

    The first item is 0.0, the last is 1.0; a single item is 0.0.
    """
    return index / max(count - 1, 1)


def _clamp_channel(value: int) -> int:
    return max(0, min(255, value))


@dataclass(frozen=True)
class GradientPalette:
    """Two gradient endpoints, parsed."""

    start: Color
    end: Color

    @classmethod
    def from_hex(cls, start_hex: str, end_hex: str) -> Optional["GradientPalette"]:
        """Parse both endpoints. Returns None if either is not a valid color."""
        try:
            return cls(Color.parse(start_hex), Color.parse(end_hex))
        except ColorParseError:
            logger.debug("Invalid gradient endpoints %r, %r", start_hex, end_hex)
            return None

    def blend(self, ratio: float) -> str:
        """Lab-space blend at ratio, as #RRGGBB.

        Endpoints are returned exactly; intermediate colors are clamped to sRGB.
        """
        if ratio <= 0.0:
            return self.start.hex
        if ratio >= 1.0:
            return self.end.hex
        lab_start = rgb_to_lab(self.start)
        lab_end = rgb_to_lab(self.end)
        mixed = Lab(
            lab_start.L + (lab_end.L - lab_start.L) * ratio,
            lab_start.a + (lab_end.a - lab_start.a) * ratio,
            lab_start.b + (lab_end.b - lab_start.b) * ratio,
        )
        rgb = lab_to_rgb(mixed)
        return Color(_clamp_channel(rgb.r), _clamp_channel(rgb.g), _clamp_channel(rgb.b)).hex


def _resolve_palette(colors: Optional[tuple[str, str]]) -> Optional[GradientPalette]:
    start_hex, end_hex = colors if colors is not None else adaptive_gradient_colors()
    return GradientPalette.from_hex(start_hex, end_hex)


def render_gradient_chars(text: str, colors: Optional[tuple[str, str]] = None) -> Text:
    """Color text character by character from the start to the end color.

    Args:
        text: Text to color.
        colors: (start, end) hex endpoints; None uses the adaptive palette.

    Returns:
        Text with one bold span per character, or the unstyled text when the
        input is empty or an endpoint does not parse.
    """
    if not text:
        return Text(text)
    palette = _resolve_palette(colors)
    if palette is None:
        return Text(text)

    result = Text()
    count = len(text)
    for i, char in enumerate(text):
        color = palette.blend(blend_ratio(i, count))
        result.append(char, style=Style(color=color, bold=True))
    return result


def render_gradient_lines(text: str, colors: Optional[tuple[str, str]] = None) -> Text:
    """Color multi-line text line by line (each line one color).

    Blank lines stay unstyled; no newline is added after the last line.
    """
    palette = _resolve_palette(colors)
    if palette is None:
        return Text(text)

    lines = text.split("\n")
    count = len(lines)
    result = Text()
    for i, line in enumerate(lines):
        if i > 0:
            result.append("\n")
        if not line:
            continue
        color = palette.blend(blend_ratio(i, count))
        result.append(line, style=Style(color=color))
    return result

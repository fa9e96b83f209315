"""Glyph-wave spinner: a fixed-width strip of random glyphs under a gradient."""

from __future__ import annotations

import random
from typing import Optional, Sequence

from rich.text import Text

from golazo.constants import DEFAULT_SPINNER_WIDTH
from golazo.ui.gradient import render_gradient_chars

# Extended Latin with subtle symbols. Order is irrelevant.
GLYPH_POOL: tuple[str, ...] = tuple(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz"
    "ÀÁÂÃÄÅÆÇÈÉÊËÌÍÎÏÐÑÒÓÔÕÖØÙÚÛÜÝÞßàáâãäåæçèéêëìíîïðñòóôõöøùúûüýþÿ"
    "0123456789"
    "×÷±≈∞≠√"
    "→←↑↓↔"
    "€£¥$"
    "·•°§"
)


class RandomCharSpinner:
    """Spinner that re-draws every glyph on each tick.

    The wave comes from the gradient across positions, not from shifting
    content. Spinners do not tick themselves; the app delivers ticks.
    """

    def __init__(
        self,
        width: int = DEFAULT_SPINNER_WIDTH,
        rng: Optional[random.Random] = None,
        char_pool: Sequence[str] = GLYPH_POOL,
    ) -> None:
        if not char_pool:
            raise ValueError("RandomCharSpinner requires a non-empty glyph pool.")
        self._rng = rng or random.Random()
        self.char_pool: tuple[str, ...] = tuple(char_pool)
        self.width = max(width, 0)
        self.display: list[str] = self._fresh_buffer(self.width)

    def _fresh_buffer(self, width: int) -> list[str]:
        return [self._rng.choice(self.char_pool) for _ in range(width)]

    def tick(self) -> None:
        """Advance the animation by randomizing every position."""
        if len(self.display) != self.width:
            self.display = self._fresh_buffer(self.width)
            return
        for i in range(self.width):
            self.display[i] = self._rng.choice(self.char_pool)

    def set_width(self, width: int) -> None:
        """Resize; the old glyphs are discarded, not truncated."""
        width = max(width, 0)
        if width == self.width:
            return
        self.width = width
        self.display = self._fresh_buffer(width)

    def render(self, colors: Optional[tuple[str, str]] = None) -> Text:
        """Gradient-colored view of the buffer, repairing inconsistent state first."""
        if self.width <= 0:
            self.width = DEFAULT_SPINNER_WIDTH
        if len(self.display) != self.width:
            self.display = self._fresh_buffer(self.width)
        return render_gradient_chars("".join(self.display), colors)

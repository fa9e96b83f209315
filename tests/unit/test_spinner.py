"""Unit tests for the glyph-wave spinner."""

from __future__ import annotations

import random

import pytest

from golazo.constants import DEFAULT_SPINNER_WIDTH
from golazo.ui.spinner import GLYPH_POOL, RandomCharSpinner

pytestmark = pytest.mark.unit

COLORS = ("#ff005f", "#00d7ff")


def test_new_spinner_fills_buffer_from_pool() -> None:
    spinner = RandomCharSpinner(12, rng=random.Random(7))
    assert len(spinner.display) == 12
    assert all(glyph in GLYPH_POOL for glyph in spinner.display)


def test_seeded_spinners_are_deterministic() -> None:
    first = RandomCharSpinner(16, rng=random.Random(42))
    second = RandomCharSpinner(16, rng=random.Random(42))
    first.tick()
    second.tick()
    assert first.display == second.display


def test_tick_randomizes_every_position_and_keeps_width() -> None:
    spinner = RandomCharSpinner(20, rng=random.Random(3))
    before = list(spinner.display)
    spinner.tick()
    assert len(spinner.display) == 20
    assert spinner.display != before


def test_tick_reallocates_after_drift() -> None:
    spinner = RandomCharSpinner(10, rng=random.Random(1))
    spinner.display = ["x"]
    spinner.tick()
    assert len(spinner.display) == 10


def test_set_width_discards_old_buffer() -> None:
    spinner = RandomCharSpinner(8, rng=random.Random(5))
    spinner.set_width(3)
    assert spinner.width == 3
    assert len(spinner.display) == 3


def test_set_width_same_value_keeps_buffer() -> None:
    spinner = RandomCharSpinner(8, rng=random.Random(5))
    buffer = spinner.display
    spinner.set_width(8)
    assert spinner.display is buffer


def test_set_width_clamps_negative_to_zero() -> None:
    spinner = RandomCharSpinner(8, rng=random.Random(5))
    spinner.set_width(-4)
    assert spinner.width == 0
    assert spinner.display == []


def test_render_restores_default_width_when_zero() -> None:
    spinner = RandomCharSpinner(0, rng=random.Random(9))
    text = spinner.render(COLORS)
    assert spinner.width == DEFAULT_SPINNER_WIDTH
    assert len(text.plain) == DEFAULT_SPINNER_WIDTH


def test_render_matches_buffer_with_one_span_per_glyph() -> None:
    spinner = RandomCharSpinner(6, rng=random.Random(11))
    text = spinner.render(COLORS)
    assert text.plain == "".join(spinner.display)
    assert len(text.spans) == 6


def test_custom_pool_is_respected() -> None:
    spinner = RandomCharSpinner(5, rng=random.Random(2), char_pool="ab")
    spinner.tick()
    assert set(spinner.display) <= {"a", "b"}


def test_empty_pool_is_rejected() -> None:
    with pytest.raises(ValueError):
        RandomCharSpinner(5, char_pool="")

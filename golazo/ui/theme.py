"""Neon colors and styling for the dashboard.

Detects dark/light terminal backgrounds and builds an immutable Theme that
render functions receive explicitly. Styles are computed once per
(mode, color system) pair.
"""

from __future__ import annotations

import logging
import os
import subprocess
import sys
from dataclasses import dataclass
from functools import lru_cache
from typing import Optional

from rich import box
from rich.box import Box
from rich.style import Style

from golazo.ui.types import PanelStyle, ThemeMode

logger = logging.getLogger(__name__)

# Neon palette per mode: red accent, cyan accent, text tones.
_NEON_DARK: dict[str, str] = {
    "red": "#ff005f",
    "cyan": "#00d7ff",
    "white": "#eeeeee",
    "white_alt": "#c6c6c6",
    "dim": "#6c6c6c",
    "dark_dim": "#3a3a3a",
}

_NEON_LIGHT: dict[str, str] = {
    "red": "#d7005f",
    "cyan": "#0087af",
    "white": "#1c1c1c",
    "white_alt": "#444444",
    "dim": "#8a8a8a",
    "dark_dim": "#bcbcbc",
}

# Gradient endpoints: high contrast on the matching background.
GRADIENT_DARK = ("#ff005f", "#00d7ff")
GRADIENT_LIGHT = ("#d7005f", "#005f87")
# Returned whenever mode detection is inconclusive.
DEFAULT_GRADIENT = GRADIENT_DARK

_APPLE_DARK_LABEL = "Dark"

# Explicit mode from configuration (ui.appearance_mode); env still wins.
_appearance_override: Optional[str] = None


def _get_tmux_socket_path() -> Optional[str]:
    tmux_env = os.environ.get("TMUX")
    if not tmux_env:
        return None
    return tmux_env.split(",", 1)[0] or None


def _get_tmux_appearance_mode() -> Optional[str]:
    """Return tmux @appearance_mode if available (dark/light)."""
    socket_path = _get_tmux_socket_path()
    if not socket_path:
        return None
    cmd = ["tmux", "-S", socket_path, "show", "-gv", "@appearance_mode"]
    try:
        result = subprocess.run(cmd, capture_output=True, text=True, timeout=1)
    except (subprocess.TimeoutExpired, FileNotFoundError, OSError):
        return None
    mode = (result.stdout or "").strip().lower()
    if mode in {ThemeMode.DARK.value, ThemeMode.LIGHT.value}:
        return mode
    return None


def _get_env_appearance_mode() -> Optional[str]:
    """Return APPEARANCE_MODE if explicitly provided."""
    mode = (os.environ.get("APPEARANCE_MODE") or "").strip().lower()
    if mode in {ThemeMode.DARK.value, ThemeMode.LIGHT.value}:
        return mode
    return None


def _get_system_appearance_mode() -> Optional[str]:
    """Return host OS appearance mode when detectable."""
    if sys.platform != "darwin":
        return None
    try:
        result = subprocess.run(
            ["defaults", "read", "-g", "AppleInterfaceStyle"],
            capture_output=True,
            text=True,
            timeout=1,
        )
    except (subprocess.TimeoutExpired, FileNotFoundError, OSError):
        return None

    stdout = (result.stdout or "").strip()
    stderr = (result.stderr or "").strip().lower()

    if _APPLE_DARK_LABEL in stdout:
        return ThemeMode.DARK.value

    # Light mode has no AppleInterfaceStyle key; other failures are unknown.
    if result.returncode != 0:
        if "does not exist" in stderr or "could not be found" in stderr:
            return ThemeMode.LIGHT.value
        return None

    return ThemeMode.LIGHT.value


def set_appearance_override(mode: Optional[str]) -> None:
    """Pin the mode from configuration. None restores detection."""
    global _appearance_override  # noqa: PLW0603
    normalized = (mode or "").strip().lower() or None
    if normalized is not None and normalized not in {ThemeMode.DARK.value, ThemeMode.LIGHT.value}:
        logger.warning("Ignoring unknown appearance mode: %s", mode)
        normalized = None
    _appearance_override = normalized


def _detect_dark_mode() -> bool:
    """Resolve dark mode with stable precedence.

    Precedence:
    1) APPEARANCE_MODE env (explicit override)
    2) ui.appearance_mode from configuration
    3) Host system mode (macOS)
    4) tmux @appearance_mode (non-macOS fallback)
    5) dark mode default
    """
    env_mode = _get_env_appearance_mode()
    if env_mode:
        return env_mode == ThemeMode.DARK.value

    if _appearance_override:
        return _appearance_override == ThemeMode.DARK.value

    system_mode = _get_system_appearance_mode()
    if system_mode:
        return system_mode == ThemeMode.DARK.value

    if sys.platform != "darwin":
        tmux_mode = _get_tmux_appearance_mode()
        if tmux_mode:
            return tmux_mode == ThemeMode.DARK.value

    return True


_is_dark_mode: Optional[bool] = None


def refresh_mode() -> bool:
    """Re-probe the background mode and update the cached value."""
    global _is_dark_mode  # noqa: PLW0603
    _is_dark_mode = _detect_dark_mode()
    logger.debug("Appearance mode resolved to %s", "dark" if _is_dark_mode else "light")
    return _is_dark_mode


def is_dark_mode() -> bool:
    """Return the cached mode, probing once on first use."""
    if _is_dark_mode is None:
        return refresh_mode()
    return _is_dark_mode


def adaptive_gradient_colors(dark_mode: Optional[bool] = None) -> tuple[str, str]:
    """Gradient endpoints (start, end) for the current background.

    Args:
        dark_mode: Force a mode; None uses the detected mode.

    Returns:
        Two #RRGGBB strings. Falls back to DEFAULT_GRADIENT if detection fails.
    """
    if dark_mode is None:
        try:
            dark_mode = is_dark_mode()
        except Exception:  # noqa: BLE001 - detection must never break rendering
            logger.debug("Appearance detection failed, using default gradient", exc_info=True)
            return DEFAULT_GRADIENT
    return GRADIENT_DARK if dark_mode else GRADIENT_LIGHT


@dataclass(frozen=True)
class Theme:
    """Immutable style set for one background mode."""

    dark_mode: bool
    color_system: Optional[str]
    # Panels
    panel_box: Box
    panel_border: Style
    panel_cyan_border: Style
    panel_title: Style
    separator: Style
    empty: Style
    # Detail content
    header: Style
    team: Style
    score: Style
    label: Style
    value: Style
    live: Style
    finished: Style
    dim_text: Style
    # List rows
    item: Style
    item_selected: Style
    date_selected: Style
    date_unselected: Style
    # Dialog
    dialog_box: Box
    dialog_border: Style
    dialog_title: Style
    dialog_content: Style
    dialog_header: Style
    dialog_label: Style
    dialog_value: Style
    dialog_separator: Style
    dialog_help: Style

    def gradient_colors(self) -> tuple[str, str]:
        """Gradient endpoints for this theme's mode; recomputed per call."""
        return adaptive_gradient_colors(self.dark_mode)

    def border_for(self, style_class: PanelStyle) -> Style:
        if style_class is PanelStyle.LIST:
            return self.panel_border
        if style_class is PanelStyle.DETAIL:
            return self.panel_cyan_border
        return self.dialog_border


@lru_cache(maxsize=8)
def _build_theme(dark_mode: bool, color_system: Optional[str]) -> Theme:
    neon = _NEON_DARK if dark_mode else _NEON_LIGHT
    red, cyan = neon["red"], neon["cyan"]
    white, white_alt = neon["white"], neon["white_alt"]
    dim, dark_dim = neon["dim"], neon["dark_dim"]
    return Theme(
        dark_mode=dark_mode,
        color_system=color_system,
        panel_box=box.ROUNDED,
        panel_border=Style(color=red),
        panel_cyan_border=Style(color=cyan),
        panel_title=Style(color=red, bold=True),
        separator=Style(color=red),
        empty=Style(color=dim),
        header=Style(color=cyan, bold=True),
        team=Style(color=cyan, bold=True),
        score=Style(color=red, bold=True),
        label=Style(color=dim),
        value=Style(color=white_alt),
        live=Style(color=red, bold=True),
        finished=Style(color=cyan),
        dim_text=Style(color=dim),
        item=Style(color=white),
        item_selected=Style(color=red, bold=True),
        date_selected=Style(color=red, bold=True),
        date_unselected=Style(color=dim),
        dialog_box=box.ROUNDED,
        dialog_border=Style(color=cyan),
        dialog_title=Style(color=red, bold=True),
        dialog_content=Style(color=white),
        dialog_header=Style(color=cyan, bold=True),
        dialog_label=Style(color=dim),
        dialog_value=Style(color=white_alt),
        dialog_separator=Style(color=dark_dim),
        dialog_help=Style(color=dim, italic=True),
    )


def build_theme(dark_mode: Optional[bool] = None, color_system: Optional[str] = "truecolor") -> Theme:
    """Return the Theme for a mode.

    Args:
        dark_mode: Force a mode; None uses the detected mode.
        color_system: Rich color system for frame output, or None for plain text.
    """
    if dark_mode is None:
        dark_mode = is_dark_mode()
    return _build_theme(dark_mode, color_system)

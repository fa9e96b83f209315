"""Pytest configuration for golazo tests."""

import logging

import pytest

from golazo.ui import theme


@pytest.fixture(autouse=True)
def _isolate_appearance(monkeypatch):
    """Pin the appearance probes so tests never shell out to tmux or defaults."""
    monkeypatch.delenv("APPEARANCE_MODE", raising=False)
    monkeypatch.setattr(theme, "_appearance_override", None)
    monkeypatch.setattr(theme, "_is_dark_mode", True)
    monkeypatch.setattr(theme, "_get_system_appearance_mode", lambda: None)
    monkeypatch.setattr(theme, "_get_tmux_appearance_mode", lambda: None)
    yield
    logging.getLogger("golazo").handlers.clear()
    logging.getLogger("golazo").propagate = True


def pytest_collection_modifyitems(config, items):
    """Set per-marker timeouts: unit=1s, integration=5s."""
    for item in items:
        if item.get_closest_marker("unit"):
            item.add_marker(pytest.mark.timeout(1))
        elif item.get_closest_marker("integration"):
            item.add_marker(pytest.mark.timeout(5))

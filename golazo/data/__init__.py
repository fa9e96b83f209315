"""Match data source backed by a YAML fixture file.

Stands in for the remote API so the dashboard can run offline.
"""

from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path
from typing import Any, Optional

import yaml

from golazo.models import EventType, HalfTimeScore, League, MatchDetails, MatchEvent, MatchStatus, Team

logger = logging.getLogger(__name__)

DEMO_FIXTURES_PATH = Path(__file__).parent / "demo.yml"


class FixtureError(ValueError):
    """Raised when a fixture file cannot be read or holds malformed matches."""


def _parse_team(raw: dict[str, Any]) -> Team:
    return Team(id=int(raw["id"]), name=str(raw["name"]), short_name=raw.get("short_name"))


def _parse_time(raw: object) -> Optional[datetime]:
    if raw is None:
        return None
    if isinstance(raw, datetime):
        return raw
    return datetime.fromisoformat(str(raw))


def _parse_match(raw: dict[str, Any]) -> MatchDetails:
    home = _parse_team(raw["home"])
    away = _parse_team(raw["away"])
    sides = {"home": home, "away": away}

    events = tuple(
        MatchEvent(
            type=EventType(event["type"]),
            team=sides[event["team"]],
            minute=int(event["minute"]),
            player=event.get("player"),
        )
        for event in raw.get("events") or []
    )

    half_time = None
    if raw.get("half_time") is not None:
        ht_home, ht_away = raw["half_time"]
        half_time = HalfTimeScore(home=ht_home, away=ht_away)

    league = raw.get("league") or {}
    return MatchDetails(
        id=int(raw["id"]),
        home_team=home,
        away_team=away,
        status=MatchStatus(raw["status"]),
        league=League(id=int(league.get("id", 0)), name=str(league.get("name", ""))),
        home_score=raw.get("home_score"),
        away_score=raw.get("away_score"),
        live_time=raw.get("live_time"),
        venue=str(raw.get("venue") or ""),
        match_time=_parse_time(raw.get("kickoff")),
        half_time_score=half_time,
        events=events,
    )


class FixtureMatchSource:
    """Serves live, finished and upcoming matches from a fixture file."""

    def __init__(self, path: Path = DEMO_FIXTURES_PATH) -> None:
        self.path = path
        self._matches: dict[int, MatchDetails] = {}
        self._days_ago: dict[int, int] = {}
        self._updates: dict[int, list[str]] = {}
        self.reload()

    def reload(self) -> None:
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                raw = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            raise FixtureError(f"Cannot read fixtures {self.path}: {e}") from e
        if not isinstance(raw, dict):
            raise FixtureError(f"Fixtures {self.path} must be a mapping with a matches list")

        matches: dict[int, MatchDetails] = {}
        days_ago: dict[int, int] = {}
        updates: dict[int, list[str]] = {}
        entries = raw.get("matches") or []
        if not isinstance(entries, list):
            raise FixtureError(f"Fixtures {self.path}: matches must be a list")
        for entry in entries:
            try:
                match = _parse_match(entry)
                days_ago[match.id] = int(entry.get("days_ago", 0))
                updates[match.id] = [str(u) for u in entry.get("updates") or []]
            except (AttributeError, KeyError, TypeError, ValueError) as e:
                raise FixtureError(f"Malformed match in {self.path}: {e}") from e
            matches[match.id] = match

        self._matches, self._days_ago, self._updates = matches, days_ago, updates
        logger.debug("Loaded %d fixture matches from %s", len(matches), self.path)

    def live_matches(self) -> list[MatchDetails]:
        return [m for m in self._matches.values() if m.status is MatchStatus.LIVE]

    def finished_matches(self, days: int) -> list[MatchDetails]:
        """Finished matches from the last `days` days (1 = today only)."""
        return [
            m for m in self._matches.values() if m.status is MatchStatus.FINISHED and self._days_ago[m.id] < days
        ]

    def upcoming_matches(self) -> list[MatchDetails]:
        return [m for m in self._matches.values() if m.status is MatchStatus.SCHEDULED]

    def match_details(self, match_id: int) -> Optional[MatchDetails]:
        return self._matches.get(match_id)

    def live_updates(self, match_id: int) -> list[str]:
        return list(self._updates.get(match_id, []))

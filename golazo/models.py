"""Typed match models consumed by the golazo UI."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum


class MatchStatus(str, Enum):
    """Match status classification."""

    LIVE = "live"
    FINISHED = "finished"
    SCHEDULED = "scheduled"


class EventType(str, Enum):
    """Timeline event tags."""

    GOAL = "goal"
    YELLOW_CARD = "yellowCard"
    RED_CARD = "redCard"


@dataclass(frozen=True)
class Team:
    id: int
    name: str
    short_name: str | None = None

    @property
    def display_name(self) -> str:
        """Short name override when present, otherwise the full name."""
        return self.short_name or self.name


@dataclass(frozen=True)
class League:
    id: int
    name: str


@dataclass(frozen=True)
class HalfTimeScore:
    home: int | None = None
    away: int | None = None


@dataclass(frozen=True)
class MatchEvent:
    type: EventType
    team: Team
    minute: int
    player: str | None = None


@dataclass(frozen=True)
class MatchDetails:
    id: int
    home_team: Team
    away_team: Team
    status: MatchStatus
    league: League
    home_score: int | None = None
    away_score: int | None = None
    live_time: str | None = None
    venue: str = ""
    match_time: datetime | None = None
    half_time_score: HalfTimeScore | None = None
    events: tuple[MatchEvent, ...] = field(default_factory=tuple)

    @property
    def has_score(self) -> bool:
        return self.home_score is not None and self.away_score is not None

    def split_goals(self) -> tuple[list[MatchEvent], list[MatchEvent]]:
        """Goal events as (home, away); anything not credited to the home side counts as away."""
        home: list[MatchEvent] = []
        away: list[MatchEvent] = []
        for event in self.events:
            if event.type is not EventType.GOAL:
                continue
            if event.team.id == self.home_team.id:
                home.append(event)
            else:
                away.append(event)
        return home, away

    def count_events(self, event_type: EventType) -> int:
        return sum(1 for e in self.events if e.type is event_type)

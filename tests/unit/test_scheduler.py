"""Unit tests for the one-shot tick chain."""

from __future__ import annotations

from typing import Callable

import pytest

from golazo.constants import SPINNER_TICK_INTERVAL
from golazo.ui.scheduler import SpinnerTick, TickScheduler

pytestmark = pytest.mark.unit


class FakeTimer:
    def __init__(self, delay: float, callback: Callable[[], None]) -> None:
        self.delay = delay
        self.callback = callback
        self.stopped = False

    def stop(self) -> None:
        self.stopped = True

    def fire(self) -> None:
        if not self.stopped:
            self.callback()


class FakeClock:
    def __init__(self) -> None:
        self.timers: list[FakeTimer] = []

    def set_timer(self, delay: float, callback: Callable[[], None]) -> FakeTimer:
        timer = FakeTimer(delay, callback)
        self.timers.append(timer)
        return timer


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def delivered() -> list[SpinnerTick]:
    return []


@pytest.fixture
def scheduler(clock: FakeClock, delivered: list[SpinnerTick]) -> TickScheduler:
    return TickScheduler(clock.set_timer, delivered.append)


def test_start_arms_one_timer_at_tick_interval(scheduler: TickScheduler, clock: FakeClock) -> None:
    scheduler.start()
    assert len(clock.timers) == 1
    assert clock.timers[0].delay == SPINNER_TICK_INTERVAL
    assert scheduler.running
    assert scheduler.pending is clock.timers[0]


def test_fire_delivers_tick_and_clears_pending(
    scheduler: TickScheduler, clock: FakeClock, delivered: list[SpinnerTick]
) -> None:
    scheduler.start()
    clock.timers[0].fire()
    assert len(delivered) == 1
    assert isinstance(delivered[0], SpinnerTick)
    assert scheduler.pending is None


def test_schedule_tick_rearms_after_delivery(scheduler: TickScheduler, clock: FakeClock) -> None:
    scheduler.start()
    clock.timers[0].fire()
    handle = scheduler.schedule_tick()
    assert handle is clock.timers[1]
    assert len(clock.timers) == 2


def test_schedule_tick_never_arms_a_second_outstanding_timer(scheduler: TickScheduler, clock: FakeClock) -> None:
    first = scheduler.start()
    assert scheduler.schedule_tick() is first
    assert scheduler.schedule_tick() is first
    assert len(clock.timers) == 1


def test_schedule_tick_before_start_is_a_noop(scheduler: TickScheduler, clock: FakeClock) -> None:
    assert scheduler.schedule_tick() is None
    assert clock.timers == []


def test_restart_supersedes_outstanding_timer(scheduler: TickScheduler, clock: FakeClock) -> None:
    scheduler.start()
    scheduler.start()
    assert clock.timers[0].stopped
    assert not clock.timers[1].stopped
    assert scheduler.pending is clock.timers[1]


def test_stop_lets_in_flight_tick_fire_once_then_ends_chain(
    scheduler: TickScheduler, clock: FakeClock, delivered: list[SpinnerTick]
) -> None:
    scheduler.start()
    scheduler.stop()
    assert not scheduler.running
    clock.timers[0].fire()
    assert len(delivered) == 1
    assert scheduler.schedule_tick() is None
    assert len(clock.timers) == 1


def test_chain_runs_one_tick_per_delivery(
    scheduler: TickScheduler, clock: FakeClock, delivered: list[SpinnerTick]
) -> None:
    scheduler.start()
    for _ in range(5):
        clock.timers[-1].fire()
        scheduler.schedule_tick()
    assert len(delivered) == 5
    assert len(clock.timers) == 6
    assert sum(1 for t in clock.timers if t is scheduler.pending) == 1


def test_spinner_tick_records_fire_time() -> None:
    assert SpinnerTick(fired_at=12.5).fired_at == 12.5
    assert SpinnerTick().fired_at > 0

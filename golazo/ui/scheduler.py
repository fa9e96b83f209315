"""One-shot animation clock.

A tick chain is a sequence of one-shot timers: each delivered SpinnerTick is
handled by the app, which then re-arms. Only the app constructs a
TickScheduler, so at most one chain exists per running app.

Stopping is a liveness property: stop() only prevents re-arming; a tick
already in flight may still be delivered once and is ignored by the app.
"""

from __future__ import annotations

import logging
import time
from typing import Callable, Optional, Protocol

from textual.message import Message

from golazo.constants import SPINNER_TICK_INTERVAL

logger = logging.getLogger(__name__)


class SpinnerTick(Message):
    """Zero-payload animation tick, stamped with its monotonic fire time."""

    def __init__(self, fired_at: float | None = None) -> None:
        super().__init__()
        self.fired_at = time.monotonic() if fired_at is None else fired_at


class TimerHandle(Protocol):
    def stop(self) -> None: ...


SetTimer = Callable[[float, Callable[[], None]], TimerHandle]


class TickScheduler:
    """Arms one-shot tick timers, never more than one outstanding."""

    def __init__(
        self,
        set_timer: SetTimer,
        deliver: Callable[[SpinnerTick], object],
        interval: float = SPINNER_TICK_INTERVAL,
    ) -> None:
        self._set_timer = set_timer
        self._deliver = deliver
        self.interval = interval
        self._pending: Optional[TimerHandle] = None
        self._running = False

    @property
    def running(self) -> bool:
        return self._running

    @property
    def pending(self) -> Optional[TimerHandle]:
        """Outstanding timer, if a tick has been armed but not yet fired."""
        return self._pending

    def start(self) -> TimerHandle:
        """Begin a chain, superseding any outstanding timer."""
        if self._pending is not None:
            self._pending.stop()
            self._pending = None
        self._running = True
        logger.debug("Tick chain started (interval=%.3fs)", self.interval)
        return self._arm()

    def schedule_tick(self) -> Optional[TimerHandle]:
        """Re-arm after a delivered tick.

        Returns the outstanding handle instead of arming a second timer, and
        None once the chain has been stopped.
        """
        if not self._running:
            return None
        if self._pending is not None:
            return self._pending
        return self._arm()

    def stop(self) -> None:
        """Stop re-arming. The in-flight tick, if any, still fires."""
        if self._running:
            logger.debug("Tick chain stopped")
        self._running = False

    def _arm(self) -> TimerHandle:
        self._pending = self._set_timer(self.interval, self._fire)
        return self._pending

    def _fire(self) -> None:
        self._pending = None
        self._deliver(SpinnerTick())

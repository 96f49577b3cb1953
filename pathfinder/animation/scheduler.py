"""
Timer back-ends for the animation controller.

The controller never sleeps or spawns threads; it asks a Scheduler to
call it back later and keeps the returned handle so it can cancel it.
"""

from __future__ import annotations

import asyncio
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Callable

logger = logging.getLogger(__name__)


class Scheduler(ABC):
    """Schedules one-shot callbacks on a single cooperative thread."""

    @abstractmethod
    def call_later(self, delay_ms: float, callback: Callable[[], None]) -> Any:
        """
        Run callback once after delay_ms milliseconds.

        Returns:
            Opaque handle accepted by cancel()
        """
        ...

    @abstractmethod
    def cancel(self, handle: Any) -> None:
        """Cancel a pending callback. Cancelling a fired handle is a no-op."""
        ...


class AsyncioScheduler(Scheduler):
    """
    Scheduler backed by an asyncio event loop.

    Callbacks run on the loop thread between other tasks, never
    concurrently with each other.
    """

    def __init__(self, loop: asyncio.AbstractEventLoop | None = None) -> None:
        """
        Initialize the scheduler.

        Args:
            loop: Event loop to schedule on (default: the running loop at call time)
        """
        self._loop = loop

    def call_later(self, delay_ms: float, callback: Callable[[], None]) -> asyncio.TimerHandle:
        loop = self._loop or asyncio.get_running_loop()
        return loop.call_later(delay_ms / 1000, callback)

    def cancel(self, handle: asyncio.TimerHandle) -> None:
        handle.cancel()


@dataclass(order=True)
class ScheduledCall:
    """A pending ManualScheduler callback, ordered by due time then insertion."""

    due_ms: float
    seq: int
    callback: Callable[[], None] = field(compare=False)
    cancelled: bool = field(default=False, compare=False)


class ManualScheduler(Scheduler):
    """
    Virtual-clock scheduler advanced explicitly.

    Nothing runs until advance() or run_all() is called, which makes a
    replay exactly reproducible regardless of wall-clock speed.
    """

    def __init__(self) -> None:
        self._now_ms: float = 0.0
        self._seq = 0
        self._pending: list[ScheduledCall] = []

    @property
    def now_ms(self) -> float:
        return self._now_ms

    @property
    def pending(self) -> int:
        """Number of callbacks still waiting to fire."""
        return sum(1 for call in self._pending if not call.cancelled)

    def call_later(self, delay_ms: float, callback: Callable[[], None]) -> ScheduledCall:
        self._seq += 1
        call = ScheduledCall(self._now_ms + max(delay_ms, 0), self._seq, callback)
        self._pending.append(call)
        return call

    def cancel(self, handle: ScheduledCall) -> None:
        handle.cancelled = True

    def _next_due(self) -> ScheduledCall | None:
        self._pending = [call for call in self._pending if not call.cancelled]
        return min(self._pending, default=None)

    def _fire(self, call: ScheduledCall) -> None:
        self._pending.remove(call)
        self._now_ms = max(self._now_ms, call.due_ms)
        call.callback()

    def advance(self, delta_ms: float) -> int:
        """
        Move the clock forward, firing every callback that comes due.

        Returns:
            Number of callbacks fired
        """
        target = self._now_ms + delta_ms
        fired = 0
        while True:
            call = self._next_due()
            if call is None or call.due_ms > target:
                break
            self._fire(call)
            fired += 1
        self._now_ms = target
        return fired

    def run_all(self, max_calls: int = 100_000) -> int:
        """
        Fire callbacks in due order until none are pending.

        Raises:
            RuntimeError: If more than max_calls callbacks fire (runaway rescheduling)
        """
        fired = 0
        while True:
            call = self._next_due()
            if call is None:
                return fired
            if fired >= max_calls:
                raise RuntimeError(f"Scheduler still busy after {max_calls} callbacks")
            self._fire(call)
            fired += 1

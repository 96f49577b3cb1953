"""
Step-trace replay controller.

Replays a completed search's steps one per timer tick so a renderer can
animate the exploration. State machine:

    IDLE --start--> RUNNING --pause--> PAUSED --resume--> RUNNING
    RUNNING --last step--> COMPLETE
    any --reset--> IDLE

All replay state lives in an AnimationSession owned by the controller:
created by start() (or by step() when nothing is loaded) and discarded
by reset(). Each scheduled tick carries the generation it was scheduled
for. Pause, manual step, reset and restart all move the generation on,
so a tick that fires after any of them does nothing.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from functools import partial
from typing import Any, Callable, Sequence

from pathfinder.animation.scheduler import Scheduler
from pathfinder.config import DEFAULT_SPEED_MS, START_DELAY_MS
from pathfinder.graph.model import NodeId
from pathfinder.search.result import SearchResult, Step

logger = logging.getLogger(__name__)


class AnimationState(str, Enum):
    IDLE = "idle"
    RUNNING = "running"
    PAUSED = "paused"
    COMPLETE = "complete"


def revealed_through(steps: Sequence[Step], cursor: int) -> frozenset:
    """Union of the endpoints of the first cursor steps."""
    revealed: set[NodeId] = set()
    for step in steps[:cursor]:
        revealed.add(step.from_id)
        revealed.add(step.to_id)
    return frozenset(revealed)


@dataclass(frozen=True)
class AnimationFrame:
    """
    What the renderer draws.

    Attributes:
        cursor: Number of steps revealed so far
        revealed_nodes: Endpoints of every revealed step
        state: Controller state
        total_steps: Length of the trace being replayed
    """

    cursor: int
    revealed_nodes: frozenset
    state: AnimationState
    total_steps: int = 0

    @property
    def progress(self) -> float:
        """Fraction of the trace revealed (1.0 for an empty trace)."""
        if self.total_steps == 0:
            return 1.0 if self.state == AnimationState.COMPLETE else 0.0
        return self.cursor / self.total_steps


IDLE_FRAME = AnimationFrame(cursor=0, revealed_nodes=frozenset(), state=AnimationState.IDLE)


@dataclass
class AnimationSession:
    """
    Mutable state of one replay.

    Attributes:
        steps: Trace being replayed
        result: Search the trace came from, if known
        generation: Id checked by every scheduled tick
        state: RUNNING, PAUSED or COMPLETE
        cursor: Steps revealed so far
        revealed: Endpoints of revealed steps
        pending: Handle of the scheduled tick, if any
    """

    steps: list[Step]
    result: SearchResult | None
    generation: int
    state: AnimationState = AnimationState.RUNNING
    cursor: int = 0
    revealed: frozenset = field(default_factory=frozenset)
    pending: Any = None

    @property
    def exhausted(self) -> bool:
        return self.cursor >= len(self.steps)

    def advance(self) -> None:
        """Reveal exactly one more step."""
        self.cursor += 1
        self.revealed = revealed_through(self.steps, self.cursor)

    def frame(self) -> AnimationFrame:
        return AnimationFrame(
            cursor=self.cursor,
            revealed_nodes=self.revealed,
            state=self.state,
            total_steps=len(self.steps),
        )


class AnimationController:
    """
    Plays a step trace to subscribers, one step per tick.

    Single-threaded: every method and every tick must run on the thread
    that drives the scheduler.
    """

    def __init__(
        self,
        scheduler: Scheduler,
        speed_ms: int = DEFAULT_SPEED_MS,
        start_delay_ms: int = START_DELAY_MS,
        trace_provider: Callable[[], SearchResult | None] | None = None,
    ) -> None:
        """
        Initialize the controller.

        Args:
            scheduler: Timer back-end
            speed_ms: Delay between steps
            start_delay_ms: Delay before the first step after start()
            trace_provider: Runs a search on demand when step() is used
                before anything was started
        """
        self._scheduler = scheduler
        self._speed_ms = self._checked_speed(speed_ms)
        self._start_delay_ms = start_delay_ms
        self._trace_provider = trace_provider
        self._session: AnimationSession | None = None
        self._generation = 0
        self._subscribers: list[Callable[[AnimationFrame], None]] = []

    # -------------------------------------------------------------------------
    # Observable state
    # -------------------------------------------------------------------------

    @property
    def state(self) -> AnimationState:
        return self._session.state if self._session else AnimationState.IDLE

    @property
    def cursor(self) -> int:
        return self._session.cursor if self._session else 0

    @property
    def revealed_nodes(self) -> frozenset:
        return self._session.revealed if self._session else frozenset()

    @property
    def result(self) -> SearchResult | None:
        return self._session.result if self._session else None

    @property
    def steps(self) -> list[Step]:
        return list(self._session.steps) if self._session else []

    @property
    def speed_ms(self) -> int:
        return self._speed_ms

    @property
    def frame(self) -> AnimationFrame:
        return self._session.frame() if self._session else IDLE_FRAME

    def subscribe(self, callback: Callable[[AnimationFrame], None]) -> Callable[[], None]:
        """
        Call callback with a new frame after every state change.

        Returns:
            Function that removes the subscription
        """
        self._subscribers.append(callback)

        def unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    def _notify(self) -> None:
        frame = self.frame
        for callback in list(self._subscribers):
            callback(frame)

    # -------------------------------------------------------------------------
    # Scheduling
    # -------------------------------------------------------------------------

    @staticmethod
    def _checked_speed(speed_ms: int) -> int:
        if speed_ms <= 0:
            raise ValueError(f"Speed must be positive, got {speed_ms}")
        return speed_ms

    def _schedule(self, session: AnimationSession, delay_ms: int) -> None:
        session.pending = self._scheduler.call_later(
            delay_ms, partial(self._tick, session.generation)
        )

    def _cancel_pending(self, session: AnimationSession) -> None:
        """Cancel the scheduled tick and make any in-flight one stale."""
        if session.pending is not None:
            self._scheduler.cancel(session.pending)
            session.pending = None
        self._generation += 1
        session.generation = self._generation

    def _new_session(
        self,
        steps: Sequence[Step],
        result: SearchResult | None,
        state: AnimationState,
    ) -> AnimationSession:
        if self._session is not None:
            self._cancel_pending(self._session)
        self._generation += 1
        self._session = AnimationSession(
            steps=list(steps),
            result=result,
            generation=self._generation,
            state=state,
        )
        return self._session

    def _tick(self, generation: int) -> None:
        session = self._session
        if (
            session is None
            or session.generation != generation
            or session.state != AnimationState.RUNNING
        ):
            logger.debug(f"Ignoring stale tick for generation {generation}")
            return

        session.pending = None
        if not session.exhausted:
            session.advance()

        if session.exhausted:
            session.state = AnimationState.COMPLETE
            logger.info(f"Replay complete after {session.cursor} steps")
        else:
            self._schedule(session, self._speed_ms)

        self._notify()

    # -------------------------------------------------------------------------
    # Commands
    # -------------------------------------------------------------------------

    def start(
        self,
        trace: SearchResult | Sequence[Step],
        speed_ms: int | None = None,
    ) -> None:
        """
        Replay a trace from the beginning, discarding any current replay.

        Args:
            trace: SearchResult (its steps are replayed) or a step sequence
            speed_ms: New delay between steps (default: keep current)
        """
        if speed_ms is not None:
            self.set_speed(speed_ms)

        if isinstance(trace, SearchResult):
            result, steps = trace, trace.steps
        else:
            result, steps = None, trace

        session = self._new_session(steps, result, AnimationState.RUNNING)
        logger.info(f"Replaying {len(session.steps)} steps at {self._speed_ms}ms")
        self._schedule(session, self._start_delay_ms)
        self._notify()

    def pause(self) -> None:
        """Stop advancing, keeping cursor and revealed nodes."""
        session = self._session
        if session is None or session.state != AnimationState.RUNNING:
            logger.debug(f"pause() ignored in state {self.state.value}")
            return
        self._cancel_pending(session)
        session.state = AnimationState.PAUSED
        self._notify()

    def resume(self) -> None:
        """Continue a paused replay at the current speed."""
        session = self._session
        if session is None or session.state != AnimationState.PAUSED:
            logger.debug(f"resume() ignored in state {self.state.value}")
            return
        session.state = AnimationState.RUNNING
        self._schedule(session, self._speed_ms)
        self._notify()

    def step(self) -> bool:
        """
        Reveal one step by hand and leave the replay paused.

        If nothing has been loaded yet, the trace provider is asked for a
        search result first.

        Returns:
            True if a step was revealed
        """
        session = self._session
        if session is None:
            if self._trace_provider is None:
                logger.debug("step() ignored: no trace and no trace provider")
                return False
            result = self._trace_provider()
            if result is None:
                logger.debug("step() ignored: trace provider returned nothing")
                return False
            session = self._new_session(result.steps, result, AnimationState.PAUSED)

        self._cancel_pending(session)
        advanced = not session.exhausted
        if advanced:
            session.advance()

        session.state = AnimationState.COMPLETE if session.exhausted else AnimationState.PAUSED
        self._notify()
        return advanced

    def reset(self) -> None:
        """Cancel any pending tick and drop the session."""
        if self._session is not None:
            self._cancel_pending(self._session)
        self._session = None
        self._generation += 1
        self._notify()

    def set_speed(self, speed_ms: int) -> None:
        """
        Change the delay between steps.

        An already scheduled tick keeps its delay; the new speed applies
        from the next one.

        Raises:
            ValueError: If speed_ms is not positive
        """
        self._speed_ms = self._checked_speed(speed_ms)

    def __repr__(self) -> str:
        return f"AnimationController(state={self.state.value}, cursor={self.cursor})"

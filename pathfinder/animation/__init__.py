"""
Animation module.

Replays a search's step trace for rendering:
- AnimationController: start / pause / resume / step / reset state machine
- AnimationFrame: (cursor, revealed nodes, state) snapshot for renderers
- AsyncioScheduler / ManualScheduler: Timer back-ends
"""

from pathfinder.animation.controller import (
    AnimationController,
    AnimationFrame,
    AnimationSession,
    AnimationState,
    revealed_through,
)
from pathfinder.animation.scheduler import AsyncioScheduler, ManualScheduler, Scheduler

__all__ = [
    "AnimationController",
    "AnimationFrame",
    "AnimationSession",
    "AnimationState",
    "AsyncioScheduler",
    "ManualScheduler",
    "Scheduler",
    "revealed_through",
]

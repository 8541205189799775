"""Idle session guard and its timing primitives."""

from rollcall.session.activity import ActivityKind, ActivitySource
from rollcall.session.clock import SessionState
from rollcall.session.config import SessionConfig
from rollcall.session.guard import IdleSessionGuard
from rollcall.session.timers import Scheduler, TimerQueue

__all__ = [
    "ActivityKind",
    "ActivitySource",
    "IdleSessionGuard",
    "Scheduler",
    "SessionConfig",
    "SessionState",
    "TimerQueue",
]

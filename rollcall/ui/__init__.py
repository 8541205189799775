"""Pygame host for the session guard."""

from rollcall.ui.input import activity_kind_for
from rollcall.ui.window import SessionWindow

__all__ = ["SessionWindow", "activity_kind_for"]

"""Translate pygame input events into activity signals."""

import pygame

from rollcall.session.activity import ActivityKind

_ACTIVITY_EVENTS = {
    pygame.MOUSEBUTTONDOWN: ActivityKind.POINTER_DOWN,
    pygame.MOUSEBUTTONUP: ActivityKind.CLICK,
    pygame.MOUSEMOTION: ActivityKind.POINTER_MOVE,
    pygame.KEYDOWN: ActivityKind.KEY_PRESS,
    pygame.MOUSEWHEEL: ActivityKind.SCROLL,
    pygame.FINGERDOWN: ActivityKind.TOUCH_START,
}


def activity_kind_for(event: pygame.event.Event) -> ActivityKind | None:
    """Return the activity an event represents, or None if it is not user input."""
    return _ACTIVITY_EVENTS.get(event.type)

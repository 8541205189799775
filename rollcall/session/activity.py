"""User-presence signals."""

from collections.abc import Callable
from enum import Enum, auto


class ActivityKind(Enum):
    """Interactions that count as evidence the user is present."""

    POINTER_DOWN = auto()
    POINTER_MOVE = auto()
    KEY_PRESS = auto()
    SCROLL = auto()
    TOUCH_START = auto()
    CLICK = auto()


ActivityListener = Callable[[ActivityKind], None]


class ActivitySource:
    """Fan-out of activity signals from the host UI to subscribers."""

    def __init__(self) -> None:
        self._listeners: list[ActivityListener] = []

    @property
    def listener_count(self) -> int:
        return len(self._listeners)

    def subscribe(self, listener: ActivityListener) -> None:
        if listener not in self._listeners:
            self._listeners.append(listener)

    def unsubscribe(self, listener: ActivityListener) -> None:
        # Unknown listeners are ignored so teardown can be repeated
        if listener in self._listeners:
            self._listeners.remove(listener)

    def emit(self, kind: ActivityKind) -> None:
        """Deliver a signal to every current listener.

        Args:
            kind: The interaction that occurred.
        """
        for listener in list(self._listeners):
            listener(kind)

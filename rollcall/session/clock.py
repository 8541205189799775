"""Session clock state and the countdown step."""

from dataclasses import dataclass
from enum import Enum, auto


class SessionState(Enum):
    """Idle session guard states."""

    INACTIVE = auto()  # Logged out or torn down
    ACTIVE = auto()  # Authenticated, deadlines armed
    WARNING = auto()  # Countdown showing, passive activity ignored


@dataclass
class SessionClock:
    """Mutable state owned by a single guard."""

    state: SessionState = SessionState.INACTIVE
    remaining_ms: int = 0  # Only meaningful in WARNING

    def activate(self) -> None:
        self.state = SessionState.ACTIVE
        self.remaining_ms = 0

    def begin_warning(self, remaining_ms: int) -> None:
        self.state = SessionState.WARNING
        self.remaining_ms = remaining_ms

    def deactivate(self) -> None:
        self.state = SessionState.INACTIVE
        self.remaining_ms = 0


@dataclass(frozen=True)
class CountdownStep:
    """Result of advancing the warning countdown by one tick."""

    state: SessionState
    remaining_ms: int

    @property
    def expired(self) -> bool:
        return self.state == SessionState.INACTIVE


def countdown_step(remaining_ms: int, tick_interval_ms: int) -> CountdownStep:
    """Advance the countdown by one tick.

    Args:
        remaining_ms: Time left before forced logout.
        tick_interval_ms: Amount to subtract.

    Returns:
        A WARNING step with the decremented time, or an INACTIVE step with
        zero remaining when the decrement would reach zero or below.
    """
    remaining = remaining_ms - tick_interval_ms
    if remaining <= 0:
        return CountdownStep(SessionState.INACTIVE, 0)
    return CountdownStep(SessionState.WARNING, remaining)

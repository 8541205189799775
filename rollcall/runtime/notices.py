"""Short-lived user notices (toasts)."""

from collections import deque
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import Any


class NoticeLevel(Enum):
    SUCCESS = "success"
    ERROR = "error"
    INFO = "info"


@dataclass(frozen=True)
class Notice:
    """A message shown to the user for a limited time."""

    level: NoticeLevel
    message: str
    created_at: float  # Scheduler time in seconds


@dataclass
class NoticeConfig:
    """Configuration for the notice board."""

    display_ms: int = 4000  # How long a notice stays visible
    max_notices: int = 3  # Older notices are dropped beyond this

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "NoticeConfig":
        """Create from dictionary."""
        return cls(
            display_ms=int(data.get("display_ms", 4000)),
            max_notices=int(data.get("max_notices", 3)),
        )


class NoticeBoard:
    """Bounded list of recent notices."""

    def __init__(self, config: NoticeConfig, clock: Callable[[], float]) -> None:
        self.config = config
        self._clock = clock
        self._notices: deque[Notice] = deque(maxlen=max(config.max_notices, 1))

    def post(self, level: NoticeLevel, message: str) -> Notice:
        notice = Notice(level=level, message=message, created_at=self._clock())
        self._notices.append(notice)
        print(f"[Notice] {level.value}: {message}")
        return notice

    def success(self, message: str) -> Notice:
        return self.post(NoticeLevel.SUCCESS, message)

    def error(self, message: str) -> Notice:
        return self.post(NoticeLevel.ERROR, message)

    def info(self, message: str) -> Notice:
        return self.post(NoticeLevel.INFO, message)

    def visible(self) -> list[Notice]:
        """Return notices still within their display window, oldest first."""
        cutoff = self._clock() - self.config.display_ms / 1000
        while self._notices and self._notices[0].created_at < cutoff:
            self._notices.popleft()
        return list(self._notices)

    def latest(self) -> Notice | None:
        return self._notices[-1] if self._notices else None

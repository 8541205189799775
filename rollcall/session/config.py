"""Idle session configuration."""

from dataclasses import dataclass
from typing import Any


@dataclass
class SessionConfig:
    """Timing configuration for the idle session guard."""

    session_timeout_ms: int = 30 * 60 * 1000  # Idle budget before forced logout
    warning_lead_time_ms: int = 5 * 60 * 1000  # Warning shown this long before expiry
    tick_interval_ms: int = 1000  # Countdown granularity

    def __post_init__(self) -> None:
        for name in ("session_timeout_ms", "warning_lead_time_ms", "tick_interval_ms"):
            if getattr(self, name) <= 0:
                raise ValueError(f"{name} must be positive, got {getattr(self, name)}")
        if self.warning_lead_time_ms >= self.session_timeout_ms:
            raise ValueError(
                "warning_lead_time_ms must be shorter than session_timeout_ms "
                f"({self.warning_lead_time_ms} >= {self.session_timeout_ms})"
            )

    @property
    def warning_delay_ms(self) -> int:
        """Idle time after which the warning appears."""
        return self.session_timeout_ms - self.warning_lead_time_ms

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "SessionConfig":
        """Create config from dictionary.

        Args:
            data: Configuration dictionary.

        Returns:
            SessionConfig instance.

        Raises:
            ValueError: If the timings are not positive or the warning lead
                time does not fit inside the session timeout.
        """
        return cls(
            session_timeout_ms=int(data.get("session_timeout_ms", 30 * 60 * 1000)),
            warning_lead_time_ms=int(data.get("warning_lead_time_ms", 5 * 60 * 1000)),
            tick_interval_ms=int(data.get("tick_interval_ms", 1000)),
        )

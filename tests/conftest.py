"""Shared test fixtures."""

from pathlib import Path

import pytest

from rollcall.runtime.controller import SessionController
from rollcall.session.activity import ActivitySource
from rollcall.session.config import SessionConfig
from rollcall.session.guard import IdleSessionGuard
from rollcall.session.timers import TimerQueue


class VirtualTime:
    """Manual clock driving a TimerQueue in whole milliseconds."""

    def __init__(self) -> None:
        self.now = 0.0
        self._target_ms = 0
        self.queue = TimerQueue(clock=lambda: self.now)

    @property
    def now_ms(self) -> int:
        return round(self.now * 1000)

    def advance_ms(self, ms: int) -> None:
        """Move time forward, running each timer at its own deadline."""
        self._target_ms += ms
        target = self._target_ms / 1000
        while True:
            deadline = self.queue.next_deadline
            if deadline is None or deadline > target:
                break
            self.now = max(self.now, deadline)
            self.queue.run_due()
        self.now = target


class CallbackRecorder:
    """Records guard callbacks with the virtual time they fired at."""

    def __init__(self, virtual_time: VirtualTime) -> None:
        self._time = virtual_time
        self.events: list[tuple[int, str, int | None]] = []

    def on_expire(self) -> None:
        self.events.append((self._time.now_ms, "expire", None))

    def on_warning(self, remaining_ms: int) -> None:
        self.events.append((self._time.now_ms, "warning", remaining_ms))

    def on_warning_cleared(self) -> None:
        self.events.append((self._time.now_ms, "cleared", None))

    def warnings(self) -> list[tuple[int, int | None]]:
        return [(t, value) for t, name, value in self.events if name == "warning"]

    def expiries(self) -> list[int]:
        return [t for t, name, _ in self.events if name == "expire"]

    def cleared(self) -> list[int]:
        return [t for t, name, _ in self.events if name == "cleared"]


@pytest.fixture
def session_config() -> SessionConfig:
    """Short session: warning at 20s, expiry at 30s, 1s ticks."""
    return SessionConfig(
        session_timeout_ms=30000,
        warning_lead_time_ms=10000,
        tick_interval_ms=1000,
    )


@pytest.fixture
def virtual_time() -> VirtualTime:
    return VirtualTime()


@pytest.fixture
def activity_source() -> ActivitySource:
    return ActivitySource()


@pytest.fixture
def recorder(virtual_time: VirtualTime) -> CallbackRecorder:
    return CallbackRecorder(virtual_time)


@pytest.fixture
def guard(
    session_config: SessionConfig,
    virtual_time: VirtualTime,
    activity_source: ActivitySource,
    recorder: CallbackRecorder,
) -> IdleSessionGuard:
    """Create a guard wired to the virtual clock and the recorder."""
    return IdleSessionGuard(
        session_config,
        virtual_time.queue,
        activity_source,
        on_expire=recorder.on_expire,
        on_warning=recorder.on_warning,
        on_warning_cleared=recorder.on_warning_cleared,
    )


@pytest.fixture
def config_file(tmp_path: Path) -> Path:
    """Write a test configuration with the short session timings."""
    path = tmp_path / "rollcall.yaml"
    path.write_text(
        """
session:
  session_timeout_ms: 30000
  warning_lead_time_ms: 10000
  tick_interval_ms: 1000
notices:
  display_ms: 4000
  max_notices: 3
window:
  resolution: [320, 240]
  fps: 30
"""
    )
    return path


@pytest.fixture
def controller(
    tmp_path: Path,
    monkeypatch: pytest.MonkeyPatch,
    config_file: Path,
    virtual_time: VirtualTime,
    activity_source: ActivitySource,
) -> SessionController:
    """Create a session controller storing its data under tmp_path."""
    monkeypatch.setenv("ROLLCALL_DATA_DIR", str(tmp_path / "data"))
    return SessionController(
        config_path=config_file,
        scheduler=virtual_time.queue,
        activity_source=activity_source,
    )

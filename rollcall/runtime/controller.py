"""Session controller that wires login, logout and the idle guard together."""

import math
import os
from pathlib import Path
from typing import Any

import yaml
from dotenv import load_dotenv

from rollcall.auth.staff import StaffDirectory
from rollcall.auth.storage import CURRENT_USER_KEY, LocalStorage
from rollcall.runtime.notices import NoticeBoard, NoticeConfig
from rollcall.session.activity import ActivitySource
from rollcall.session.clock import SessionState
from rollcall.session.config import SessionConfig
from rollcall.session.guard import IdleSessionGuard
from rollcall.session.timers import Scheduler, TimerQueue

SESSION_EXPIRED_MESSAGE = "Session expired. Please login again."
SESSION_EXTENDED_MESSAGE = "Session extended successfully"
INVALID_LOGIN_MESSAGE = "Invalid username or password"


class SessionController:
    """Owns the authenticated-user state and one idle guard per login."""

    def __init__(
        self,
        config_path: Path | None = None,
        scheduler: Scheduler | None = None,
        activity_source: ActivitySource | None = None,
    ) -> None:
        """Initialize the session controller.

        Args:
            config_path: Path to configuration YAML file.
            scheduler: Timer scheduler. Defaults to a monotonic ``TimerQueue``
                that the host loop must poll.
            activity_source: Source of user-presence signals.
        """
        # Load environment variables
        load_dotenv()

        self.config = self._load_config(config_path)
        self.session_config = SessionConfig.from_dict(self.config.get("session", {}))

        self.scheduler: Scheduler = scheduler if scheduler is not None else TimerQueue()
        self.activity_source = activity_source if activity_source is not None else ActivitySource()

        self.staff = StaffDirectory.from_config(self.config.get("staff"))
        self.storage = LocalStorage(self._data_dir() / "local_storage.json")
        self.notices = NoticeBoard(
            NoticeConfig.from_dict(self.config.get("notices", {})),
            clock=self.scheduler.time,
        )

        self._guard: IdleSessionGuard | None = None
        self._current_user: str | None = None
        self._warning_remaining_ms: int | None = None

    def _load_config(self, config_path: Path | None) -> dict[str, Any]:
        """Load configuration from YAML file.

        Args:
            config_path: Path to config file.

        Returns:
            Configuration dictionary.
        """
        if config_path is None:
            config_path = Path("config/default.yaml")

        if config_path.exists():
            with open(config_path) as f:
                loaded: dict[str, Any] | None = yaml.safe_load(f)
                return loaded or {}

        # Return minimal default config
        return {
            "session": {},
            "storage": {"data_dir": "data"},
            "notices": {},
            "window": {"resolution": [800, 600], "fps": 30},
        }

    def _data_dir(self) -> Path:
        override = os.environ.get("ROLLCALL_DATA_DIR")
        if override:
            return Path(override)
        return Path(self.config.get("storage", {}).get("data_dir", "data"))

    @property
    def is_authenticated(self) -> bool:
        return self._current_user is not None

    @property
    def current_user(self) -> str | None:
        return self._current_user

    @property
    def guard(self) -> IdleSessionGuard | None:
        return self._guard

    @property
    def session_state(self) -> SessionState:
        if self._guard is None:
            return SessionState.INACTIVE
        return self._guard.state

    @property
    def warning_remaining_ms(self) -> int | None:
        """Countdown value while the warning is showing, otherwise None."""
        return self._warning_remaining_ms

    @property
    def warning_message(self) -> str | None:
        if self._warning_remaining_ms is None:
            return None
        seconds = math.ceil(self._warning_remaining_ms / 1000)
        return f"Your session will expire in {seconds} seconds"

    def restore(self) -> bool:
        """Resume the session recorded on this device, if any.

        Returns:
            True if a stored user was found and the session resumed.
        """
        user = self.storage.get_item(CURRENT_USER_KEY)
        if not user:
            return False
        print(f"[Auth] Resuming session for {user}")
        self._begin_session(user)
        return True

    def login(self, username: str, password: str) -> bool:
        """Check credentials and start a guarded session.

        Args:
            username: Staff login name.
            password: Staff password.

        Returns:
            True on success. On failure an error notice is posted.
        """
        member = self.staff.authenticate(username, password)
        if member is None:
            print(f"[Auth] Login failed for {username!r}")
            self.notices.error(INVALID_LOGIN_MESSAGE)
            return False

        self.storage.set_item(CURRENT_USER_KEY, member.name)
        print(f"[Auth] {member.name} logged in ({member.role.value})")
        self._begin_session(member.name)
        return True

    def logout(self) -> None:
        """Explicit logout. Ends the session without the expiry notice."""
        if self._guard is not None:
            self._guard.stop()
        if self._current_user is not None:
            print(f"[Auth] {self._current_user} logged out")
        self._end_session()

    def continue_session(self) -> bool:
        """Dismiss the idle warning and restore the full session budget.

        Returns:
            True if a warning was showing and has been dismissed.
        """
        if self._guard is None or not self._guard.continue_session():
            return False
        self.notices.success(SESSION_EXTENDED_MESSAGE)
        return True

    def shutdown(self) -> None:
        """Tear down the guard on exit. The stored user marker is kept."""
        if self._guard is not None:
            self._guard.stop()
            self._guard = None
        self._warning_remaining_ms = None

    def _begin_session(self, user: str) -> None:
        if self._guard is not None:
            self._guard.stop()
        self._current_user = user
        self._warning_remaining_ms = None
        self._guard = IdleSessionGuard(
            self.session_config,
            self.scheduler,
            self.activity_source,
            on_expire=self._on_expire,
            on_warning=self._on_warning,
            on_warning_cleared=self._on_warning_cleared,
        )
        self._guard.start()

    def _end_session(self) -> None:
        self._guard = None
        self._current_user = None
        self._warning_remaining_ms = None
        self.storage.remove_item(CURRENT_USER_KEY)

    def _on_expire(self) -> None:
        self._end_session()
        self.notices.error(SESSION_EXPIRED_MESSAGE)

    def _on_warning(self, remaining_ms: int) -> None:
        self._warning_remaining_ms = remaining_ms

    def _on_warning_cleared(self) -> None:
        self._warning_remaining_ms = None

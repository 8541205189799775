"""Idle session guard — warns, then forces logout after inactivity."""

from collections.abc import Callable

from rollcall.session.activity import ActivityKind, ActivitySource
from rollcall.session.clock import SessionClock, SessionState, countdown_step
from rollcall.session.config import SessionConfig
from rollcall.session.timers import Cancellable, Scheduler


class IdleSessionGuard:
    """Idle timeout with an advance warning and a cancelable grace period.

    The guard arms two deadlines whenever it is (re)armed: the warning, fired
    ``warning_delay_ms`` after arming, and the absolute expiry, fired
    ``session_timeout_ms`` after arming. Once the warning is showing, the
    countdown ticks every ``tick_interval_ms`` and passive activity no longer
    re-arms the guard; only ``continue_session()`` or ``stop()`` do.

    All callbacks run on the scheduler's thread. Application callbacks are
    invoked after the guard's own state and timers are consistent, so they
    may call back into the guard.
    """

    def __init__(
        self,
        config: SessionConfig,
        scheduler: Scheduler,
        activity_source: ActivitySource,
        on_expire: Callable[[], None],
        on_warning: Callable[[int], None] | None = None,
        on_warning_cleared: Callable[[], None] | None = None,
    ) -> None:
        """Initialize the guard.

        Args:
            config: Session timing configuration.
            scheduler: Deferred-call scheduler (``TimerQueue`` or an asyncio loop).
            activity_source: Source of user-presence signals.
            on_expire: Called exactly once per forced logout.
            on_warning: Called with the remaining milliseconds on warning
                entry and on every countdown tick.
            on_warning_cleared: Called when the warning is dismissed through
                ``continue_session()``.
        """
        self.config = config
        self._scheduler = scheduler
        self._activity_source = activity_source
        self._on_expire = on_expire
        self._on_warning = on_warning
        self._on_warning_cleared = on_warning_cleared
        self._clock = SessionClock()

        self._warning_handle: Cancellable | None = None
        self._expiry_handle: Cancellable | None = None
        self._tick_handle: Cancellable | None = None
        # Scheduler time of the last re-arm and ticks issued since the warning
        self._armed_at = 0.0
        self._ticks = 0

    @property
    def state(self) -> SessionState:
        """Get current guard state."""
        return self._clock.state

    @property
    def remaining_ms(self) -> int:
        """Milliseconds left in the warning countdown, 0 outside WARNING."""
        return self._clock.remaining_ms

    @property
    def is_active(self) -> bool:
        return self._clock.state != SessionState.INACTIVE

    def start(self) -> None:
        """Attach to the activity source and arm the full session budget."""
        if self.is_active:
            self.reset()
            return
        self._activity_source.subscribe(self.on_activity)
        self._arm()
        print(
            f"[Session] Guard started (timeout {self.config.session_timeout_ms} ms, "
            f"warning {self.config.warning_lead_time_ms} ms before)"
        )

    def reset(self) -> None:
        """Re-arm both deadlines from now. No-op while inactive."""
        if not self.is_active:
            return
        self._arm()

    def on_activity(self, kind: ActivityKind | None = None) -> None:
        """Handle a user-presence signal.

        Args:
            kind: The interaction that occurred. Only ACTIVE re-arms; a
                showing warning must be dismissed explicitly.
        """
        if self._clock.state == SessionState.ACTIVE:
            self._arm()

    def continue_session(self) -> bool:
        """Dismiss the warning and restore the full session budget.

        Returns:
            True if a warning was dismissed, False if none was showing.
        """
        if self._clock.state != SessionState.WARNING:
            return False
        self._arm()
        print("[Session] Session extended")
        if self._on_warning_cleared is not None:
            self._on_warning_cleared()
        return True

    def stop(self) -> None:
        """Tear down for an explicit logout. Does not call ``on_expire``."""
        if not self.is_active:
            return
        self._teardown()
        print("[Session] Guard stopped")

    def _arm(self) -> None:
        self._cancel_timers()
        self._clock.activate()
        self._armed_at = self._scheduler.time()
        self._ticks = 0
        delay_s = self.config.warning_delay_ms / 1000
        timeout_s = self.config.session_timeout_ms / 1000
        self._expiry_handle = self._scheduler.call_later(timeout_s, self._expire)
        self._warning_handle = self._scheduler.call_later(delay_s, self._enter_warning)

    def _enter_warning(self) -> None:
        self._warning_handle = None
        if self._clock.state != SessionState.ACTIVE:
            return
        self._clock.begin_warning(self.config.warning_lead_time_ms)
        self._schedule_tick()
        print(f"[Session] Idle warning, {self._clock.remaining_ms} ms remaining")
        if self._on_warning is not None:
            self._on_warning(self._clock.remaining_ms)

    def _tick(self) -> None:
        self._tick_handle = None
        if self._clock.state != SessionState.WARNING:
            return
        step = countdown_step(self._clock.remaining_ms, self.config.tick_interval_ms)
        if step.expired:
            self._expire()
            return
        self._clock.remaining_ms = step.remaining_ms
        self._schedule_tick()
        if self._on_warning is not None:
            self._on_warning(step.remaining_ms)

    def _schedule_tick(self) -> None:
        if self._tick_handle is not None:
            self._tick_handle.cancel()
        # Tick n is due n intervals after the warning deadline
        self._ticks += 1
        offset_ms = self.config.warning_delay_ms + self._ticks * self.config.tick_interval_ms
        deadline = self._armed_at + offset_ms / 1000
        self._tick_handle = self._scheduler.call_later(
            deadline - self._scheduler.time(), self._tick
        )

    def _expire(self) -> None:
        # Expiry timer and final tick may both be due in the same turn
        if not self.is_active:
            return
        self._teardown()
        print("[Session] Session expired after inactivity")
        self._on_expire()

    def _teardown(self) -> None:
        self._cancel_timers()
        self._clock.deactivate()
        self._activity_source.unsubscribe(self.on_activity)

    def _cancel_timers(self) -> None:
        for handle in (self._warning_handle, self._expiry_handle, self._tick_handle):
            if handle is not None:
                handle.cancel()
        self._warning_handle = None
        self._expiry_handle = None
        self._tick_handle = None

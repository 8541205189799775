"""Tests for session configuration and the countdown step."""

from pathlib import Path

import pytest
import yaml

from rollcall.session.clock import CountdownStep, SessionClock, SessionState, countdown_step
from rollcall.session.config import SessionConfig


class TestSessionConfig:
    """Tests for SessionConfig."""

    def test_default_values(self):
        """Test defaults are 30 minutes, 5 minutes and 1 second."""
        config = SessionConfig()
        assert config.session_timeout_ms == 1800000
        assert config.warning_lead_time_ms == 300000
        assert config.tick_interval_ms == 1000
        assert config.warning_delay_ms == 1500000

    def test_from_dict(self):
        """Test creating config from dictionary."""
        config = SessionConfig.from_dict(
            {"session_timeout_ms": 30000, "warning_lead_time_ms": "10000"}
        )
        assert config.session_timeout_ms == 30000
        assert config.warning_lead_time_ms == 10000
        # Should use default for missing
        assert config.tick_interval_ms == 1000
        assert config.warning_delay_ms == 20000

    def test_lead_time_must_fit_timeout(self):
        """Test a warning lead time equal to the timeout is rejected."""
        with pytest.raises(ValueError, match="shorter than session_timeout_ms"):
            SessionConfig(session_timeout_ms=10000, warning_lead_time_ms=10000)

    @pytest.mark.parametrize(
        "field", ["session_timeout_ms", "warning_lead_time_ms", "tick_interval_ms"]
    )
    def test_non_positive_rejected(self, field):
        """Test zero timings are rejected."""
        with pytest.raises(ValueError, match=field):
            SessionConfig.from_dict({field: 0})

    def test_shipped_config_loads(self):
        """Test the repository default config produces the standard timings."""
        path = Path(__file__).parents[2] / "config" / "default.yaml"
        with open(path) as f:
            data = yaml.safe_load(f)
        config = SessionConfig.from_dict(data["session"])
        assert config == SessionConfig()


class TestCountdownStep:
    """Tests for the pure countdown decrement."""

    def test_decrements(self):
        assert countdown_step(10000, 1000) == CountdownStep(SessionState.WARNING, 9000)

    def test_last_step_expires(self):
        """Test reaching exactly zero expires instead of reporting 0."""
        step = countdown_step(1000, 1000)
        assert step.expired
        assert step == CountdownStep(SessionState.INACTIVE, 0)

    def test_never_negative(self):
        step = countdown_step(500, 1000)
        assert step.expired
        assert step.remaining_ms == 0

    def test_not_expired_while_positive(self):
        assert not countdown_step(1001, 1000).expired


class TestSessionClock:
    """Tests for SessionClock transitions."""

    def test_transitions(self):
        clock = SessionClock()
        assert clock.state == SessionState.INACTIVE

        clock.activate()
        assert clock.state == SessionState.ACTIVE
        assert clock.remaining_ms == 0

        clock.begin_warning(5000)
        assert clock.state == SessionState.WARNING
        assert clock.remaining_ms == 5000

        clock.deactivate()
        assert clock.state == SessionState.INACTIVE
        assert clock.remaining_ms == 0

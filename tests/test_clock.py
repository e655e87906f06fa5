"""
Test suite for SimulationClock.

Tests cover:
- Advancing, pausing and reversing time
- Jumping to the current wall-clock time
- Stepping through speed presets
- Input validation
"""

import logging
from datetime import datetime, timedelta, timezone

import pytest

from orrery import SimulationClock, ClockState, SPEED_PRESETS, temp_config
from orrery.utils import days_since_j2000


START = datetime(2024, 1, 1, tzinfo=timezone.utc)
NOW = datetime(2031, 7, 15, 8, 30, tzinfo=timezone.utc)


@pytest.fixture
def clock():
    return SimulationClock(START, time_scale=1.0, now=lambda: NOW)


# =============================================================================
# Time Advance
# =============================================================================

class TestTick:

    def test_tick_advances(self, clock):
        assert clock.tick(2.0) == days_since_j2000(START) + 2.0
        assert clock.current_instant == START + timedelta(days=2)

    def test_tick_accumulates(self, clock):
        clock.time_scale = 0.5
        for _ in range(4):
            clock.tick(1.0)
        assert clock.current_instant == START + timedelta(days=2)

    def test_paused_does_not_advance(self, clock):
        clock.pause()
        clock.tick(10.0)
        assert clock.current_instant == START

    def test_negative_scale_rewinds(self, clock):
        clock.time_scale = -7.0
        clock.tick(1.0)
        assert clock.current_instant == START - timedelta(days=7)

    def test_zero_elapsed(self, clock):
        clock.tick(0.0)
        assert clock.current_instant == START

    def test_negative_elapsed_rejected(self, clock):
        with pytest.raises(ValueError):
            clock.tick(-0.1)

    def test_nonfinite_elapsed_rejected(self, clock):
        with pytest.raises(ValueError):
            clock.tick(float('nan'))

    def test_set_instant(self, clock):
        clock.set_instant(datetime(1986, 2, 9))
        assert clock.current_instant == datetime(1986, 2, 9, tzinfo=timezone.utc)


# =============================================================================
# State
# =============================================================================

class TestState:

    def test_starts_running(self, clock):
        assert clock.state is ClockState.RUNNING
        assert not clock.paused

    def test_start_paused(self):
        assert SimulationClock(START, paused=True).paused

    def test_toggle(self, clock):
        assert clock.toggle() is ClockState.PAUSED
        assert clock.toggle() is ClockState.RUNNING

    def test_default_instant_is_now(self):
        assert SimulationClock(now=lambda: NOW).current_instant == NOW

    def test_default_time_scale(self):
        with temp_config(DEFAULT_TIME_SCALE=7.0):
            assert SimulationClock(START).time_scale == 7.0

    def test_infinite_scale_rejected(self, clock):
        with pytest.raises(ValueError):
            clock.time_scale = float('inf')

    def test_scale_change_logged(self, clock, caplog):
        with caplog.at_level(logging.DEBUG, logger='orrery.clock'):
            clock.time_scale = 30.0
        assert "30.0" in caplog.text

    def test_repr(self, clock):
        assert repr(clock).startswith("SimulationClock(")


# =============================================================================
# Jump to Now
# =============================================================================

class TestJumpToNow:

    def test_jump_resets_instant_and_scale(self, clock):
        clock.time_scale = -365.0
        clock.tick(3.0)
        assert clock.jump_to_now() == NOW
        assert clock.current_instant == NOW
        assert clock.time_scale == 1.0

    def test_jump_keeps_pause_state(self, clock):
        clock.pause()
        clock.jump_to_now()
        assert clock.paused


# =============================================================================
# Speed Presets
# =============================================================================

class TestSpeedPresets:

    def test_presets_sorted(self):
        assert list(SPEED_PRESETS) == sorted(SPEED_PRESETS)

    def test_step_faster(self, clock):
        assert clock.step_faster() == 7.0
        assert clock.step_faster() == 30.0

    def test_step_slower(self, clock):
        assert clock.step_slower() == 0.0007
        assert clock.step_slower() == -1.0

    def test_fastest_is_noop(self, clock):
        clock.time_scale = 365.0
        assert clock.step_faster() == 365.0

    def test_slowest_is_noop(self, clock):
        clock.time_scale = -365.0
        assert clock.step_slower() == -365.0

    def test_between_presets(self, clock):
        clock.time_scale = 2.5
        assert clock.step_faster() == 7.0
        clock.time_scale = 2.5
        assert clock.step_slower() == 1.0

    def test_from_stopped(self, clock):
        clock.time_scale = 0.0
        assert clock.step_faster() == 0.0007


# =============================================================================
# Long Runs
# =============================================================================

class TestLongRuns:
    """Simulated time is not bounded by the datetime range."""

    def test_rewind_past_year_one(self, clock):
        """An hour at -365 days/s reaches about 1500 BC without failing."""
        clock.time_scale = -365.0
        for _ in range(3600):
            clock.tick(1.0)
        expected = days_since_j2000(START) - 365.0 * 3600
        assert clock.current_days == pytest.approx(expected)
        assert clock.current_instant is None
        assert "J2000" in repr(clock)

    def test_forward_past_year_9999(self, clock):
        """Three hours at +365 days/s is past the year 9999."""
        clock.time_scale = 365.0
        clock.tick(3 * 3600)
        assert clock.current_days > 3_000_000
        assert clock.current_instant is None

    def test_many_small_ticks_both_ways(self, clock):
        """Frame-sized ticks over many centuries come back to the start."""
        clock.time_scale = -365.0
        for _ in range(126000):
            clock.tick(1 / 60)
        assert clock.current_instant is None  # about 75 BC
        clock.time_scale = 365.0
        for _ in range(126000):
            clock.tick(1 / 60)
        assert clock.current_days == pytest.approx(days_since_j2000(START),
                                                   abs=1e-3)
        assert abs(clock.current_instant - START) < timedelta(minutes=2)

    def test_returns_to_datetime_range(self, clock):
        clock.set_days(-5_000_000.0)
        assert clock.current_instant is None
        clock.set_instant(START)
        assert clock.current_instant == START

    def test_set_days_rejects_nonfinite(self, clock):
        with pytest.raises(ValueError):
            clock.set_days(float('inf'))

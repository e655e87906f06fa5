"""
SimulationClock class definition.

The clock owns the simulated instant. The host application calls
``tick`` once per frame with the real seconds elapsed since the last
frame; engine functions read ``current_days``.

Simulated time is kept as float days since J2000.0 rather than as a
``datetime``, so the clock can run for millennia in either direction.
``current_instant`` is derived from it while it lies within the years
1 to 9999.
"""

import logging
import math
from datetime import datetime, timezone
from enum import Enum
from typing import Callable, Optional

from .config import config
from .utils import days_since_j2000, instant_from_days

logger = logging.getLogger(__name__)


class ClockState(Enum):
    RUNNING = 'running'
    PAUSED = 'paused'


# simulated days per real second, ordered slowest to fastest
SPEED_PRESETS = (-365.0, -30.0, -7.0, -1.0, 0.0007, 1.0, 7.0, 30.0, 365.0)


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class SimulationClock:
    """
    Continuous, scrubbable simulation time.

    Parameters
    ----------
    current_instant : datetime, optional
        Starting instant. Defaults to the current wall-clock time.
    time_scale : float, optional
        Simulated days per real second; negative runs time backwards.
        Defaults to config.DEFAULT_TIME_SCALE.
    paused : bool, optional
        Start in the paused state (default False)
    now : callable, optional
        Source of the actual current time, used at construction and by
        ``jump_to_now``. Defaults to ``datetime.now(timezone.utc)``.
    """

    # ========== CONSTRUCTION ==========
    def __init__(self, current_instant: Optional[datetime] = None,
                 time_scale: Optional[float] = None, paused: bool = False,
                 now: Callable[[], datetime] = _utc_now):
        self._now = now
        self._days = days_since_j2000(current_instant if current_instant
                                      is not None else now())
        self._time_scale = 0.0
        self.time_scale = (config.DEFAULT_TIME_SCALE if time_scale is None
                           else time_scale)
        self._state = ClockState.PAUSED if paused else ClockState.RUNNING

    # ========== PROPERTY ACCESS ==========
    @property
    def current_days(self) -> float:
        """Current simulated instant as days since J2000.0"""
        return self._days

    @property
    def current_instant(self) -> Optional[datetime]:
        """
        Current simulated instant (UTC), or None once the clock has left
        the range a datetime can represent (years 1 to 9999).
        """
        try:
            return instant_from_days(self._days)
        except OverflowError:
            return None

    @property
    def time_scale(self) -> float:
        """Simulated days per real second"""
        return self._time_scale

    @time_scale.setter
    def time_scale(self, value: float):
        value = float(value)
        if not math.isfinite(value):
            raise ValueError(f"Time scale must be finite, got {value}")
        if value != self._time_scale:
            logger.debug("Time scale %s -> %s days/s", self._time_scale, value)
        self._time_scale = value

    @property
    def state(self) -> ClockState:
        return self._state

    @property
    def paused(self) -> bool:
        return self._state == ClockState.PAUSED

    # ========== STATE TRANSITIONS ==========
    def toggle(self) -> ClockState:
        """Flip between running and paused; returns the new state."""
        if self._state == ClockState.RUNNING:
            self._state = ClockState.PAUSED
        else:
            self._state = ClockState.RUNNING
        return self._state

    def pause(self):
        self._state = ClockState.PAUSED

    def resume(self):
        self._state = ClockState.RUNNING

    # ========== TIME ADVANCE ==========
    def tick(self, elapsed_real_seconds: float) -> float:
        """
        Advance by elapsed_real_seconds * time_scale days while running.

        Parameters
        ----------
        elapsed_real_seconds : float
            Wall-clock seconds since the previous tick, >= 0

        Returns
        -------
        float
            The (possibly unchanged) current instant in days since J2000.0

        Raises
        ------
        ValueError
            If the elapsed time is negative or not finite
        """
        elapsed_real_seconds = float(elapsed_real_seconds)
        if not math.isfinite(elapsed_real_seconds) or elapsed_real_seconds < 0:
            raise ValueError(
                f"Elapsed real time must be finite and non-negative, "
                f"got {elapsed_real_seconds}")
        if self._state == ClockState.RUNNING:
            self._days += elapsed_real_seconds * self._time_scale
        return self._days

    def set_instant(self, instant: datetime):
        """Scrub directly to an instant."""
        self._days = days_since_j2000(instant)

    def set_days(self, days: float):
        """Scrub directly to ``days`` since J2000.0, any finite value."""
        days = float(days)
        if not math.isfinite(days):
            raise ValueError(f"Simulated time must be finite, got {days}")
        self._days = days

    def jump_to_now(self) -> datetime:
        """
        Reset to the actual current time and the default forward rate.

        This is a discontinuous jump; any animated transition belongs to
        the caller.
        """
        now = self._now()
        self._days = days_since_j2000(now)
        self.time_scale = config.DEFAULT_TIME_SCALE
        logger.debug("Clock jumped to %s", now.isoformat())
        return self.current_instant

    # ========== SPEED PRESETS ==========
    def step_faster(self) -> float:
        """Move to the next faster preset (no-op at the fastest)."""
        larger = [p for p in SPEED_PRESETS if p > self._time_scale]
        if larger:
            self.time_scale = larger[0]
        return self._time_scale

    def step_slower(self) -> float:
        """Move to the next slower preset (no-op at the slowest)."""
        smaller = [p for p in SPEED_PRESETS if p < self._time_scale]
        if smaller:
            self.time_scale = smaller[-1]
        return self._time_scale

    # ========== SPECIAL METHODS ==========
    def __repr__(self):
        instant = self.current_instant
        when = (instant.isoformat() if instant is not None
                else f"J2000{self._days:+.1f}d")
        return (f"SimulationClock(instant={when}, "
                f"time_scale={self._time_scale}, state={self._state.value})")

"""
Test suite for axial rotation angles.
"""

from datetime import datetime, timedelta, timezone

import pytest
import numpy as np

from orrery import rotation_angle
from orrery.constants import UNIX_EPOCH
from orrery.defaults import EARTH, VENUS


class TestRotationAngle:
    """Spin angle as a fraction of the sidereal period."""

    def test_zero_at_reference(self):
        assert rotation_angle(24.0, UNIX_EPOCH) == 0.0

    def test_prograde_advances(self):
        angle = rotation_angle(24.0, UNIX_EPOCH + timedelta(hours=1))
        assert angle == pytest.approx(2 * np.pi / 24)

    def test_retrograde_runs_backwards(self):
        angle = rotation_angle(-24.0, UNIX_EPOCH + timedelta(hours=1))
        assert angle == pytest.approx(2 * np.pi * 23 / 24)

    def test_full_turn_wraps(self):
        angle = rotation_angle(10.0, UNIX_EPOCH + timedelta(hours=25))
        assert angle == pytest.approx(2 * np.pi * 0.5)

    def test_range(self):
        base = datetime(2024, 5, 17, 3, 21, tzinfo=timezone.utc)
        for k in range(50):
            for period in (23.934, -5832.5, -17.24, 9.925):
                angle = rotation_angle(period, base + timedelta(hours=7.3 * k))
                assert 0.0 <= angle < 2 * np.pi

    def test_before_reference(self):
        """Instants before the reference still land in range."""
        angle = rotation_angle(24.0, UNIX_EPOCH - timedelta(hours=6))
        assert angle == pytest.approx(2 * np.pi * 0.75)

    def test_custom_reference(self):
        ref = datetime(2024, 1, 1, tzinfo=timezone.utc)
        assert rotation_angle(24.0, ref + timedelta(hours=12), ref) == pytest.approx(np.pi)

    def test_zero_period_rejected(self):
        with pytest.raises(ValueError):
            rotation_angle(0.0, UNIX_EPOCH)

    def test_planet_rotation(self):
        t = datetime(2024, 1, 1, 6, tzinfo=timezone.utc)
        assert EARTH.rotation_angle(t) == rotation_angle(23.934, t)
        assert VENUS.is_retrograde_rotator
        assert not EARTH.is_retrograde_rotator

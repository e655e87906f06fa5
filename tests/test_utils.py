"""
Test suite for time conversion and validation helpers.
"""

from datetime import datetime, timedelta, timezone

import pytest
import numpy as np

from orrery import temp_config
from orrery.constants import J2000
from orrery.utils import (validation_error, normalize_degrees, as_utc,
                          julian_day, days_since, days_since_j2000,
                          elapsed_days, j2000_days, instant_from_days)


# =============================================================================
# Time Conversion
# =============================================================================

class TestTimeConversion:

    def test_julian_day_at_j2000(self):
        assert julian_day(J2000) == pytest.approx(2451545.0, abs=1e-9)

    def test_julian_day_at_unix_epoch(self):
        assert julian_day(datetime(1970, 1, 1, tzinfo=timezone.utc)) == 2440587.5

    def test_days_since_j2000(self):
        assert days_since_j2000(J2000 + timedelta(days=1.5)) == pytest.approx(1.5)
        assert days_since_j2000(J2000 - timedelta(days=10)) == pytest.approx(-10.0)

    def test_naive_datetime_is_utc(self):
        naive = datetime(2000, 1, 1, 12)
        assert days_since_j2000(naive) == 0.0

    def test_offset_timezone_converted(self):
        """An aware instant in another zone is the same moment in UTC."""
        plus_two = timezone(timedelta(hours=2))
        instant = datetime(2000, 1, 1, 14, tzinfo=plus_two)
        assert days_since_j2000(instant) == pytest.approx(0.0)
        assert as_utc(instant).tzinfo == timezone.utc

    def test_custom_epoch(self):
        epoch = datetime(2020, 1, 1)
        assert days_since(datetime(2020, 1, 11), epoch) == pytest.approx(10.0)

    def test_non_datetime_rejected(self):
        with pytest.raises(TypeError):
            as_utc("2000-01-01")

    def test_elapsed_days_scalar(self):
        assert isinstance(elapsed_days(J2000 + timedelta(days=2)), float)

    def test_elapsed_days_sequence(self):
        instants = [J2000 + timedelta(days=d) for d in (0, 1, 2.5)]
        days = elapsed_days(instants)
        assert isinstance(days, np.ndarray)
        assert np.allclose(days, [0.0, 1.0, 2.5])

    def test_datetime64_array(self):
        """numpy datetime64 values convert without going through datetime."""
        instants = np.array(['2000-01-01T12:00', '2000-01-03T00:00'],
                            dtype='datetime64[m]')
        assert np.allclose(elapsed_days(instants), [0.0, 1.5])

    def test_datetime64_scalar(self):
        assert j2000_days(np.datetime64('2000-01-02T12:00')) == 1.0

    def test_numbers_are_j2000_days(self):
        assert j2000_days(12.5) == 12.5
        assert np.allclose(j2000_days(np.array([-1.0, 3.0])), [-1.0, 3.0])
        epoch = J2000 + timedelta(days=10)
        assert elapsed_days(12.5, epoch) == pytest.approx(2.5)

    def test_instant_from_days(self):
        assert instant_from_days(1.5) == J2000 + timedelta(days=1.5)

    def test_instant_from_days_out_of_range(self):
        with pytest.raises(OverflowError):
            instant_from_days(-1_000_000.0)


# =============================================================================
# Angles
# =============================================================================

class TestNormalizeDegrees:

    def test_negative_angle(self):
        assert normalize_degrees(-30.0) == pytest.approx(330.0)

    def test_full_turn(self):
        assert normalize_degrees(360.0) == 0.0
        assert normalize_degrees(725.0) == pytest.approx(5.0)

    def test_tiny_negative_stays_in_range(self):
        assert 0.0 <= normalize_degrees(-1e-17) < 360.0

    def test_array(self):
        wrapped = normalize_degrees(np.array([-90.0, 0.0, 450.0]))
        assert np.allclose(wrapped, [270.0, 0.0, 90.0])

    def test_scalar_returns_float(self):
        assert isinstance(normalize_degrees(10.0), float)


# =============================================================================
# Validation Reporting
# =============================================================================

class TestValidationError:

    def test_strict_raises(self):
        with pytest.raises(ValueError, match="bad value"):
            validation_error("bad value")

    def test_custom_error_class(self):
        with pytest.raises(TypeError):
            validation_error("wrong type", TypeError)

    def test_non_strict_warns(self):
        with temp_config(STRICT_VALIDATION=False):
            with pytest.warns(UserWarning, match="bad value"):
                validation_error("bad value")

"""
Physical constants and unit conversions used throughout the engine.

Lengths are in astronomical units, times in days, angles in degrees at
the public interface and radians inside the solver.
"""

from datetime import datetime, timezone
import numpy as np

DEG_TO_RAD = np.pi / 180.0
RAD_TO_DEG = 180.0 / np.pi
TWO_PI = 2.0 * np.pi

SECONDS_PER_DAY = 86400.0
HOURS_PER_DAY = 24.0

# IAU 2012 astronomical unit [km]
AU_KM = 149597870.7
# speed of light in vacuum [km/s]
SPEED_OF_LIGHT_KM_S = 299792.458

# Gaussian gravitational constant [rad/day]; k**2 is GM_sun in AU^3/day^2
GAUSSIAN_GRAVITATIONAL_CONSTANT = 0.01720209895
MU_SUN_AU3_DAY2 = GAUSSIAN_GRAVITATIONAL_CONSTANT ** 2

# 1 AU/day expressed in km/s
AU_PER_DAY_TO_KM_S = AU_KM / SECONDS_PER_DAY

# Julian day number of the Unix epoch (1970-01-01T00:00:00 UTC)
UNIX_EPOCH_JD = 2440587.5
UNIX_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)

# J2000.0 reference epoch (2000-01-01 12:00 UTC)
J2000 = datetime(2000, 1, 1, 12, 0, 0, tzinfo=timezone.utc)
J2000_JD = 2451545.0

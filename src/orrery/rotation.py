"""
Axial rotation angle of a body about its own spin axis.
"""

import numpy as np

from .constants import HOURS_PER_DAY, TWO_PI, UNIX_EPOCH
from .utils import Instant, j2000_days


def rotation_angle(rotation_period: float, instant: Instant,
                   reference: Instant = UNIX_EPOCH) -> float:
    """
    Spin angle of a body at an instant.

    The fraction of a turn completed is (elapsed_hours / |period|) mod 1,
    scaled to radians. A negative period marks retrograde rotation and
    the angle then runs backwards.

    Parameters
    ----------
    rotation_period : float
        Sidereal rotation period [hours]; negative for retrograde
    instant : datetime or float
        Simulated instant, as a datetime or as days since J2000.0
    reference : datetime or float, optional
        Instant at which the angle is zero (default: Unix epoch)

    Returns
    -------
    float
        Angle in [0, 2*pi) [rad]

    Raises
    ------
    ValueError
        If the period is zero
    """
    if rotation_period == 0:
        raise ValueError("Rotation period must be nonzero")
    hours = (j2000_days(instant) - j2000_days(reference)) * HOURS_PER_DAY
    turns = np.mod(hours / abs(rotation_period), 1.0)
    angle = turns * TWO_PI
    if rotation_period < 0:
        angle = -angle
    angle = float(np.mod(angle, TWO_PI))
    # mod can round up to exactly 2*pi for tiny negative angles
    return 0.0 if angle >= TWO_PI else angle

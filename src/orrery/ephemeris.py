"""
Time-dependent position, velocity and display summaries for a body on a
Keplerian orbit.

Every function here is a pure function of (elements, instant). Instants
are datetimes, numpy datetime64 values or plain numbers of days since
J2000.0; passing a sequence evaluates all of them in one vectorized pass
and returns arrays with a leading time axis.
"""

from dataclasses import dataclass
from typing import NamedTuple, Optional

import numpy as np

from .config import config
from .constants import (DEG_TO_RAD, RAD_TO_DEG, AU_KM, SPEED_OF_LIGHT_KM_S,
                        MU_SUN_AU3_DAY2, AU_PER_DAY_TO_KM_S)
from .frames import perifocal_to_ecliptic
from .kepler import solve_kepler, eccentric_to_true_anomaly, heliocentric_distance
from .orbital_elements import OrbitalElements
from .utils import Instant, elapsed_days, normalize_degrees


class Anomalies(NamedTuple):
    """Intermediate quantities of one position evaluation."""
    mean_anomaly: float       # [deg], in [0, 360)
    eccentric_anomaly: float  # [rad]
    true_anomaly: float       # [rad], in (-pi, pi]
    distance: float           # [AU]


# ========== POSITION ==========
def mean_anomaly_at(elements: OrbitalElements, days):
    """
    Mean anomaly [deg] in [0, 360) after ``days`` since the elements' epoch.

    M = (M0 + n*days) mod 360 with n = 360/P.
    """
    return normalize_degrees(elements.M0 + elements.mean_motion * np.asarray(days))


def anomalies_at_days(elements: OrbitalElements, days) -> Anomalies:
    """
    Solve the orbit at ``days`` since epoch (scalar or array).

    Returns
    -------
    Anomalies
        Mean anomaly [deg], eccentric and true anomaly [rad], distance [AU].
        Fields are arrays when ``days`` is an array.
    """
    M = mean_anomaly_at(elements, days)
    E = solve_kepler(M * DEG_TO_RAD, elements.e)
    nu = eccentric_to_true_anomaly(E, elements.e)
    r = heliocentric_distance(elements.a, elements.e, nu)
    return Anomalies(M, E, nu, r)


def anomalies_at(elements: OrbitalElements, instant: Instant) -> Anomalies:
    """Solve the orbit at an instant (or sequence of instants)."""
    return anomalies_at_days(elements, elapsed_days(instant, elements.epoch))


def position_at_days(elements: OrbitalElements, days) -> np.ndarray:
    """
    Heliocentric ecliptic position [AU] after ``days`` since epoch.

    Returns
    -------
    np.ndarray
        Shape (3,) for scalar ``days``, (n, 3) for an array of length n
    """
    _, _, nu, r = anomalies_at_days(elements, days)
    return perifocal_to_ecliptic(r * np.cos(nu), r * np.sin(nu),
                                 elements.rotation_matrix)


def position_at(elements: OrbitalElements, instant: Instant) -> np.ndarray:
    """
    Heliocentric ecliptic position of a body at an instant.

    Parameters
    ----------
    elements : OrbitalElements
        Orbit of the body
    instant : datetime, float or sequence of them
        Evaluation instant(s); naive datetimes are treated as UTC and
        numbers are days since J2000.0

    Returns
    -------
    np.ndarray
        [x, y, z] in AU, shape (3,) or (n, 3)
    """
    return position_at_days(elements, elapsed_days(instant, elements.epoch))


def distance_at(elements: OrbitalElements, instant: Instant):
    """Heliocentric distance [AU] at an instant."""
    return anomalies_at(elements, instant).distance


# ========== VELOCITY ==========
def velocity_at_days(elements: OrbitalElements, days,
                     delta_days: Optional[float] = None) -> np.ndarray:
    """
    Central-difference velocity [AU/day] after ``days`` since epoch.

    v = (r(t + delta) - r(t - delta)) / (2*delta)

    Raises
    ------
    ValueError
        If ``delta_days`` is zero or not finite.
    """
    if delta_days is None:
        delta_days = config.VELOCITY_DELTA_DAYS
    if delta_days == 0 or not np.isfinite(delta_days):
        raise ValueError(
            f"Velocity window must be a nonzero finite number of days, "
            f"got {delta_days}")

    days = np.asarray(days, dtype=float)
    ahead = position_at_days(elements, days + delta_days)
    behind = position_at_days(elements, days - delta_days)
    return (ahead - behind) / (2.0 * delta_days)


def velocity_at(elements: OrbitalElements, instant: Instant,
                delta_days: Optional[float] = None) -> np.ndarray:
    """
    Heliocentric ecliptic velocity [AU/day] of a body at an instant.

    Parameters
    ----------
    elements : OrbitalElements
    instant : datetime, float or sequence of them
    delta_days : float, optional
        Half-width of the difference window. Defaults to
        config.VELOCITY_DELTA_DAYS. Must be nonzero.

    Returns
    -------
    np.ndarray
        [vx, vy, vz] in AU/day, shape (3,) or (n, 3)
    """
    return velocity_at_days(elements, elapsed_days(instant, elements.epoch),
                            delta_days)


def state_at(elements: OrbitalElements, instant: Instant,
             delta_days: Optional[float] = None) -> np.ndarray:
    """Position and velocity stacked as [x, y, z, vx, vy, vz] (AU, AU/day)."""
    days = elapsed_days(instant, elements.epoch)
    return np.concatenate([position_at_days(elements, days),
                           velocity_at_days(elements, days, delta_days)],
                          axis=-1)


# ========== SUMMARIES ==========
def orbital_speed(a: float, r):
    """
    Vis-viva speed v = sqrt(mu*(2/r - 1/a)) converted to km/s.

    mu is the solar gravitational parameter in AU^3/day^2.
    """
    return np.sqrt(MU_SUN_AU3_DAY2 * (2.0 / r - 1.0 / a)) * AU_PER_DAY_TO_KM_S


def light_travel_time(distance_au):
    """Light travel time from the Sun [minutes] for a distance in AU."""
    return distance_au * AU_KM / SPEED_OF_LIGHT_KM_S / 60.0


def format_distance(au: float) -> str:
    """
    Human-readable distance.

    Below 0.01 AU the value is given in km; otherwise in AU together
    with millions of km (two decimals under 1 AU, one decimal above).
    """
    km = au * AU_KM
    if au < 0.01:
        return f"{km:.0f} km"
    elif au < 1:
        return f"{au:.4f} AU ({km / 1e6:.2f} million km)"
    else:
        return f"{au:.4f} AU ({km / 1e6:.1f} million km)"


@dataclass(frozen=True)
class OrbitalInfo:
    """
    Display summary of a body's orbital state at one instant.

    Attributes
    ----------
    mean_anomaly, eccentric_anomaly, true_anomaly : float
        Anomalies [deg], each in [0, 360)
    distance : float
        Heliocentric distance [AU]
    speed : float
        Orbital speed from vis-viva [km/s]
    perihelion, aphelion : float
        Apsidal distances [AU]
    light_time : float
        Light travel time from the Sun [minutes]
    """
    mean_anomaly: float
    eccentric_anomaly: float
    true_anomaly: float
    distance: float
    speed: float
    perihelion: float
    aphelion: float
    light_time: float

    def __str__(self):
        return (f"Orbital State:\n"
                f"  M        = {self.mean_anomaly:10.4f}°\n"
                f"  E        = {self.eccentric_anomaly:10.4f}°\n"
                f"  ν        = {self.true_anomaly:10.4f}°\n"
                f"  r        = {format_distance(self.distance)}\n"
                f"  v        = {self.speed:10.3f} km/s\n"
                f"  q        = {format_distance(self.perihelion)}\n"
                f"  Q        = {format_distance(self.aphelion)}\n"
                f"  light    = {self.light_time:10.2f} min")


def orbital_info(elements: OrbitalElements, instant: Instant) -> OrbitalInfo:
    """
    Summarize a body's orbit at an instant for display.

    Reuses the anomalies of a single position solve; no extra iteration.

    Parameters
    ----------
    elements : OrbitalElements
    instant : datetime or float

    Returns
    -------
    OrbitalInfo
    """
    M, E, nu, r = anomalies_at(elements, instant)
    return OrbitalInfo(
        mean_anomaly=float(M),
        eccentric_anomaly=normalize_degrees(E * RAD_TO_DEG),
        true_anomaly=normalize_degrees(nu * RAD_TO_DEG),
        distance=float(r),
        speed=float(orbital_speed(elements.a, r)),
        perihelion=elements.perihelion,
        aphelion=elements.aphelion,
        light_time=float(light_travel_time(r)),
    )


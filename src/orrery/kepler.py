"""
Kepler's equation and anomaly conversions for elliptical orbits.

All functions accept scalars or NumPy arrays and return the same kind.
Angles are in radians.
"""

import warnings

import numpy as np

from .config import config


class KeplerConvergenceWarning(UserWarning):
    """Newton iteration hit its cap; the returned anomaly has degraded precision."""


class PrecisionWarning(UserWarning):
    """Eccentricity is high enough that solver precision is not guaranteed."""


def solve_kepler(M, e, tol=None, max_iter=None):
    """
    Solve Kepler's equation E - e*sin(E) = M for the eccentric anomaly.

    Newton-Raphson seeded with E0 = M + e*sin(M). Iteration stops when
    every step magnitude is below ``tol`` or after ``max_iter`` steps.

    Parameters
    ----------
    M : float or np.ndarray
        Mean anomaly [rad]. Any real value; callers normally wrap it
        into [0, 2*pi) first.
    e : float or np.ndarray
        Eccentricity, 0 <= e < 1. Not checked here.
    tol : float, optional
        Absolute step tolerance [rad]. Defaults to config.KEPLER_TOLERANCE.
    max_iter : int, optional
        Iteration cap. Defaults to config.KEPLER_MAX_ITER.

    Returns
    -------
    float or np.ndarray
        Eccentric anomaly E [rad]

    Warns
    -----
    KeplerConvergenceWarning
        If the cap is reached. The last estimate is still returned;
        this only happens for eccentricities very close to 1.
    """
    if tol is None:
        tol = config.KEPLER_TOLERANCE
    if max_iter is None:
        max_iter = config.KEPLER_MAX_ITER

    scalar = np.ndim(M) == 0 and np.ndim(e) == 0
    M = np.asarray(M, dtype=float)
    e = np.asarray(e, dtype=float)

    E = M + e * np.sin(M)
    converged = False
    for _ in range(max_iter):
        dE = (E - e * np.sin(E) - M) / (1.0 - e * np.cos(E))
        E = E - dE
        if np.all(np.abs(dE) < tol):
            converged = True
            break

    if not converged:
        warnings.warn(
            f"Kepler solver did not converge in {max_iter} iterations "
            f"(max eccentricity {float(np.max(e)):.6f}); returning best estimate",
            KeplerConvergenceWarning,
            stacklevel=2,
        )

    return float(E) if scalar else E


def eccentric_to_true_anomaly(E, e):
    """True anomaly [rad] in (-pi, pi] from eccentric anomaly."""
    return np.arctan2(np.sqrt(1.0 - e * e) * np.sin(E), np.cos(E) - e)


def heliocentric_distance(a, e, nu):
    """Orbit equation r = a(1 - e^2) / (1 + e*cos(nu))."""
    return a * (1.0 - e * e) / (1.0 + e * np.cos(nu))


def mean_to_true_anomaly(M, e):
    """Mean anomaly [rad] straight to true anomaly [rad]."""
    return eccentric_to_true_anomaly(solve_kepler(M, e), e)

"""
Global Configuration for Orrery Package
=======================================

This module provides package-wide configuration settings that users can modify
to control solver tolerances, validation behavior, and default presentation
parameters.

Examples
--------
View current configuration:

>>> import orrery
>>> print(orrery.config)

Modify settings:

>>> orrery.config.KEPLER_TOLERANCE = 1e-12  # Stricter Newton stopping rule
>>> orrery.config.DEFAULT_PATH_SEGMENTS = 720  # Smoother orbit lines

Reset to defaults:

>>> orrery.config.reset()

Temporarily modify settings:

>>> with orrery.temp_config(DISPLAY_DISTANCE_CAP=20.0):
...     # Shorter comet arcs for this block only
...     path = sample_path(halley.elements, 500)

Notes
-----
Engine functions read these values only when a caller omits the
corresponding argument. Presentation parameters (segment count, distance
cap) can always be passed explicitly.
"""

from dataclasses import dataclass
from contextlib import contextmanager


@dataclass
class OrreryConfig:
    """
    Global configuration for Orrery package.

    Attributes
    ----------
    KEPLER_TOLERANCE : float
        Absolute tolerance on the Newton-Raphson step [rad].
        Default: 1e-10
    KEPLER_MAX_ITER : int
        Iteration cap for the Kepler solver. When reached, the last
        estimate is returned with a warning.
        Default: 100
    SAFE_ECCENTRICITY : float
        Eccentricities above this value are accepted but flagged as
        degraded precision when elements are constructed.
        Default: 0.98
    VELOCITY_DELTA_DAYS : float
        Half-width of the central-difference window for velocity [days].
        Default: 0.001
    DEFAULT_PATH_SEGMENTS : int
        Orbit path resolution used for planets.
        Default: 360
    COMET_PATH_SEGMENTS : int
        Orbit path resolution used for comets.
        Default: 500
    DISPLAY_DISTANCE_CAP : float
        Heliocentric distance [AU] beyond which comet path points are
        omitted and comets are reported as not visible.
        Default: 50.0
    DEFAULT_TIME_SCALE : float
        Simulated days per real second restored by ``jump_to_now``.
        Default: 1.0
    EQUALITY_RTOL : float
        Relative tolerance for floating-point equality comparisons.
        Default: 1e-12
    EQUALITY_ATOL : float
        Absolute tolerance for floating-point equality comparisons.
        Default: 1e-14
    STRICT_VALIDATION : bool
        If True, validation failures raise exceptions.
        If False, validation failures issue warnings.
        Default: True
    """

    # Kepler solver
    KEPLER_TOLERANCE: float = 1e-10
    KEPLER_MAX_ITER: int = 100
    SAFE_ECCENTRICITY: float = 0.98

    # Velocity estimation
    VELOCITY_DELTA_DAYS: float = 0.001

    # Presentation defaults
    DEFAULT_PATH_SEGMENTS: int = 360
    COMET_PATH_SEGMENTS: int = 500
    DISPLAY_DISTANCE_CAP: float = 50.0

    # Clock
    DEFAULT_TIME_SCALE: float = 1.0

    # Numerical tolerance for equality comparisons
    EQUALITY_RTOL: float = 1e-12
    EQUALITY_ATOL: float = 1e-14

    # Validation behavior
    STRICT_VALIDATION: bool = True

    @property
    def HASH_DECIMALS(self) -> int:
        """
        Compute hash rounding decimals from equality tolerance.

        The hash rounding must be coarse enough that if two values
        are equal (within EQUALITY_ATOL), they hash to the same value.

        Returns
        -------
        int
            Number of decimal places for hash rounding
        """
        import math
        magnitude = -math.floor(math.log10(self.EQUALITY_ATOL))
        return max(magnitude - 4, 0)

    def reset(self):
        """
        Reset all configuration values to package defaults.

        Examples
        --------
        >>> import orrery
        >>> orrery.config.KEPLER_MAX_ITER = 5  # Modify
        >>> orrery.config.reset()  # Back to defaults
        >>> orrery.config.KEPLER_MAX_ITER
        100
        """
        defaults = OrreryConfig()
        for key in self.__dataclass_fields__:
            setattr(self, key, getattr(defaults, key))

    def __repr__(self):
        """Return formatted string showing all configuration values."""
        lines = ["OrreryConfig:"]
        lines.append("  Kepler Solver:")
        lines.append(f"    KEPLER_TOLERANCE = {self.KEPLER_TOLERANCE}")
        lines.append(f"    KEPLER_MAX_ITER = {self.KEPLER_MAX_ITER}")
        lines.append(f"    SAFE_ECCENTRICITY = {self.SAFE_ECCENTRICITY}")
        lines.append("  Velocity:")
        lines.append(f"    VELOCITY_DELTA_DAYS = {self.VELOCITY_DELTA_DAYS}")
        lines.append("  Presentation:")
        lines.append(f"    DEFAULT_PATH_SEGMENTS = {self.DEFAULT_PATH_SEGMENTS}")
        lines.append(f"    COMET_PATH_SEGMENTS = {self.COMET_PATH_SEGMENTS}")
        lines.append(f"    DISPLAY_DISTANCE_CAP = {self.DISPLAY_DISTANCE_CAP}")
        lines.append("  Clock:")
        lines.append(f"    DEFAULT_TIME_SCALE = {self.DEFAULT_TIME_SCALE}")
        lines.append("  Numerical Tolerances:")
        lines.append(f"    EQUALITY_RTOL = {self.EQUALITY_RTOL}")
        lines.append(f"    EQUALITY_ATOL = {self.EQUALITY_ATOL}")
        lines.append(f"    HASH_DECIMALS = {self.HASH_DECIMALS}")
        lines.append("  Behavior:")
        lines.append(f"    STRICT_VALIDATION = {self.STRICT_VALIDATION}")
        return "\n".join(lines)


# Global configuration instance
config = OrreryConfig()


@contextmanager
def temp_config(**kwargs):
    """
    Context manager for temporarily modifying configuration values.

    Configuration is automatically restored when the context exits,
    even if an exception occurs.

    Parameters
    ----------
    **kwargs
        Configuration attributes to temporarily modify.

    Examples
    --------
    >>> import orrery
    >>> with orrery.temp_config(STRICT_VALIDATION=False):
    ...     # Invalid elements only warn inside this block
    ...     oe = orrery.OrbitalElements(a=1.0, e=1.2, i=0, raan=0, argp=0,
    ...                                 M0=0, period=365.25)
    >>> orrery.config.STRICT_VALIDATION
    True

    Raises
    ------
    AttributeError
        If an invalid configuration attribute is specified.
    """
    old_values = {}
    for key, value in kwargs.items():
        if not hasattr(config, key):
            raise AttributeError(
                f"OrreryConfig has no attribute '{key}'. "
                f"Valid attributes: {list(config.__dataclass_fields__.keys())}"
            )
        old_values[key] = getattr(config, key)
        setattr(config, key, value)

    try:
        yield config
    finally:
        for key, value in old_values.items():
            setattr(config, key, value)

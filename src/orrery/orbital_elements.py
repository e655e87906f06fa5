"""
OrbitalElements class definition.

Classical heliocentric Keplerian elements referenced to an epoch.
"""

import warnings
from datetime import datetime

import numpy as np

from .config import config
from .constants import J2000
from .frames import rotation_matrix
from .kepler import PrecisionWarning
from .utils import validation_error, as_utc


class OrbitalElements:
    """
    Represents the Keplerian elements of a heliocentric elliptical orbit.

    Element order in the underlying array is
    ``[a, e, i, raan, argp, M0, period]``:

    - a : semi-major axis [AU]
    - e : eccentricity, 0 <= e < 1
    - i : inclination [deg]
    - raan : longitude of the ascending node [deg]
    - argp : argument of perihelion [deg]
    - M0 : mean anomaly at epoch [deg]
    - period : orbital period [days]

    OrbitalElements is immutable. The perifocal -> ecliptic rotation
    matrix is computed once at construction and shared by every
    position evaluation and path sample.
    """
    # ========== CLASS CONSTANTS ==========
    _NAMES = ('a', 'e', 'i', 'raan', 'argp', 'M0', 'period')

    # ========== CONSTRUCTION ==========
    def __init__(self, elements=None, validate=True, epoch: datetime = J2000,
                 **kwargs):
        """
        Create orbital elements.

        Can be called in two ways:

        1. Array-based:
        OrbitalElements([1.0, 0.0167, 0.0, -11.26, 102.95, 357.53, 365.256])

        2. Named parameters:
        OrbitalElements(a=1.0, e=0.0167, i=0.0, raan=-11.26, argp=102.95,
                        M0=357.53, period=365.256)

        Parameters
        ----------
        elements : array-like, optional
            7-element array [a, e, i, raan, argp, M0, period]
        validate : bool, optional
            Whether to validate elements (default True). Validation is
            meant to run once at data-load time, never per evaluation.
        epoch : datetime, optional
            Instant at which M0 applies (default J2000.0)
        **kwargs : dict
            Named parameters a, e, i, raan, argp, M0, period
        """
        if elements is not None:
            self._elements = np.array(elements, dtype=float)
        elif kwargs:
            self._elements = self._from_named_params(kwargs)
        else:
            raise ValueError(
                "Must provide either an elements array "
                "[a, e, i, raan, argp, M0, period] or named parameters "
                f"{list(self._NAMES)}"
            )
        self._epoch = as_utc(epoch)
        # run validation checks on input parameters (if not flagged otherwise)
        if validate:
            self._validate()
        # Ensure immutability of elements array
        self._elements.flags.writeable = False

        self._dcm = rotation_matrix(self.i, self.raan, self.argp)
        self._dcm.flags.writeable = False

    @classmethod
    def unchecked(cls, elements, epoch: datetime = J2000):
        """
        Create orbital elements without validation (for automated processes)

        Args:
            elements: 7-element array [a, e, i, raan, argp, M0, period]
            epoch: reference epoch (optional, defaults to J2000.0)

        Returns:
            OrbitalElements instance
        """
        return cls(elements, validate=False, epoch=epoch)

    # ========== VALIDATION ==========
    def _validate(self):
        """Check the elements describe a bound elliptical orbit.
        If validation fails inappropriately, set validate=False for constructor
        """
        if self._elements.shape != (7,):
            raise ValueError(
                f"Orbital elements must be a 7-element vector, "
                f"got shape {self._elements.shape}")
        if not np.all(np.isfinite(self._elements)):
            validation_error("Elements contain NaN or Inf")
            return
        a, e, i, raan, argp, M0, period = self._elements
        if e < 0 or e >= 1:
            validation_error(
                f"Only elliptical orbits are supported (0 <= e < 1), got e={e}")
        if a <= 0:
            validation_error(f"Semi-major axis must be positive, got a={a}")
        if period <= 0:
            validation_error(f"Orbital period must be positive, got P={period}")
        if i < 0 or i > 180:
            validation_error(f"Inclination out of range [0, 180] deg, got i={i}")
        if config.SAFE_ECCENTRICITY < e < 1:
            warnings.warn(
                f"Eccentricity {e} exceeds {config.SAFE_ECCENTRICITY}; "
                "Kepler solutions may have degraded precision",
                PrecisionWarning,
                stacklevel=3,
            )

    # ========== FACTORY METHODS ==========
    @classmethod
    def from_numpy(cls, array, validate=True, epoch: datetime = J2000):
        """
        Create list of OrbitalElements from NumPy array.

        Parameters
        ----------
        array : np.ndarray
            Array of shape (n_orbits, 7)
        validate : bool, optional, defaults to True
        epoch : datetime, optional

        Returns
        -------
        list of OrbitalElements
        """
        array = np.asarray(array, dtype=float)
        if array.ndim != 2 or array.shape[1] != 7:
            raise ValueError(f"Array must have shape (n, 7), got {array.shape}")

        return [cls(row, validate=validate, epoch=epoch) for row in array]

    @classmethod
    def from_dataframe(cls, df, validate=True, epoch: datetime = J2000):
        """
        Create list of OrbitalElements from pandas DataFrame.

        Parameters
        ----------
        df : pd.DataFrame
            DataFrame with columns a, e, i, raan, argp, M0, period
            (extra columns are ignored)
        validate : bool, optional, defaults to True
        epoch : datetime, optional

        Returns
        -------
        list of OrbitalElements
        """
        missing = [name for name in cls._NAMES if name not in df.columns]
        if missing:
            raise ValueError(f"DataFrame is missing element columns {missing}")

        values = df[list(cls._NAMES)].to_numpy(dtype=float)
        return [cls(row, validate=validate, epoch=epoch) for row in values]

    # ========== PROPERTY ACCESS ==========
    @property
    def elements(self) -> np.ndarray:
        """Read-only element vector [a, e, i, raan, argp, M0, period]"""
        return self._elements

    @property
    def epoch(self) -> datetime:
        """Reference epoch for M0 (UTC)"""
        return self._epoch

    @property
    def a(self) -> float:
        """Semi-major axis [AU]"""
        return float(self._elements[0])

    @property
    def e(self) -> float:
        """Eccentricity"""
        return float(self._elements[1])

    @property
    def i(self) -> float:
        """Inclination [deg]"""
        return float(self._elements[2])

    @property
    def raan(self) -> float:
        """Longitude of the ascending node [deg]"""
        return float(self._elements[3])

    @property
    def argp(self) -> float:
        """Argument of perihelion [deg]"""
        return float(self._elements[4])

    @property
    def M0(self) -> float:
        """Mean anomaly at epoch [deg]"""
        return float(self._elements[5])

    @property
    def period(self) -> float:
        """Orbital period [days]"""
        return float(self._elements[6])

    @property
    def rotation_matrix(self) -> np.ndarray:
        """Cached perifocal -> ecliptic DCM (read-only)"""
        return self._dcm

    # ========== ORBITAL PROPERTIES ==========
    @property
    def mean_motion(self) -> float:
        """Mean motion n = 360/P [deg/day]"""
        return 360.0 / self.period

    @property
    def perihelion(self) -> float:
        """Perihelion distance a(1 - e) [AU]"""
        return self.a * (1.0 - self.e)

    @property
    def aphelion(self) -> float:
        """Aphelion distance a(1 + e) [AU]"""
        return self.a * (1.0 + self.e)

    @property
    def semi_latus_rectum(self) -> float:
        """p = a(1 - e^2) [AU]"""
        return self.a * (1.0 - self.e ** 2)

    @property
    def is_retrograde(self) -> bool:
        """True for inclinations above 90 deg"""
        return self.i > 90.0

    # ========== BATCH OPERATIONS ==========
    class Batch:
        """
        Batch operations on collections of OrbitalElements.
        """
        @staticmethod
        def to_numpy(orbits):
            """Stack element vectors into an array of shape (n_orbits, 7)"""
            return np.array([o.elements for o in orbits])

        @staticmethod
        def perihelion(orbits):
            """Get perihelion distances for multiple orbits"""
            return np.array([o.perihelion for o in orbits])

        @staticmethod
        def aphelion(orbits):
            """Get aphelion distances for multiple orbits"""
            return np.array([o.aphelion for o in orbits])

        @staticmethod
        def to_dataframe(orbits, index=None):
            """
            Convert list of OrbitalElements to pandas DataFrame.

            Parameters
            ----------
            orbits : list of OrbitalElements
            index : array-like, optional
                Index for the DataFrame (e.g., body ids).
                If None, uses integer index.

            Returns
            -------
            pd.DataFrame
                Columns a, e, i, raan, argp, M0, period

            Raises
            ------
            ValueError
                If index length doesn't match number of orbits
            """
            import pandas as pd

            if not orbits:
                return pd.DataFrame(columns=list(OrbitalElements._NAMES))

            if index is not None and len(index) != len(orbits):
                raise ValueError(
                    f"Index length ({len(index)}) must match "
                    f"number of orbits ({len(orbits)})"
                )

            data = np.array([o.elements for o in orbits])
            return pd.DataFrame(data, columns=list(OrbitalElements._NAMES),
                                index=index)

    # ========== SPECIAL METHODS ==========
    def __len__(self):
        return 7

    def __getitem__(self, key):
        return self._elements[key]

    def __iter__(self):
        return iter(self._elements)

    def __repr__(self):
        return (f"OrbitalElements({self._elements.tolist()}, "
                f"epoch={self._epoch.isoformat()})")

    def __str__(self):
        a, e, i, raan, argp, M0, period = self._elements
        return (f"Keplerian Elements (epoch {self._epoch:%Y-%m-%d %H:%M} UTC):\n"
                f"  a     = {a:12.6f} AU\n"
                f"  e     = {e:12.6f}\n"
                f"  i     = {i:12.4f}°\n"
                f"  Ω     = {raan:12.4f}°\n"
                f"  ω     = {argp:12.4f}°\n"
                f"  M0    = {M0:12.4f}°\n"
                f"  P     = {period:12.3f} d")

    def __eq__(self, other):
        if not isinstance(other, OrbitalElements):
            return NotImplemented
        return (self._epoch == other._epoch and
                np.allclose(self._elements, other._elements,
                            rtol=config.EQUALITY_RTOL,
                            atol=config.EQUALITY_ATOL))

    def __hash__(self):
        rounded = tuple(round(float(x), config.HASH_DECIMALS)
                        for x in self._elements)
        return hash((self._epoch, rounded))

    # ========== STATIC METHODS ==========
    @classmethod
    def _from_named_params(cls, kwargs):
        """Convert named parameters to the element array."""
        missing = [name for name in cls._NAMES if name not in kwargs]
        unknown = [name for name in kwargs if name not in cls._NAMES]
        if missing or unknown:
            raise ValueError(
                f"Could not build elements from parameters {list(kwargs)}\n"
                f"Required: {list(cls._NAMES)}"
            )
        return np.array([kwargs[name] for name in cls._NAMES], dtype=float)

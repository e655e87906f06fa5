"""
Celestial body definitions.

Immutable reference records built once at start-up. Every orbiting
body carries OrbitalElements and evaluates through the same shared
engine, whatever its variant.
"""

from dataclasses import dataclass, field
from typing import Optional, Tuple

import numpy as np

from .config import config
from .ephemeris import position_at, distance_at, velocity_at, orbital_info, OrbitalInfo
from .orbit_path import OrbitPath
from .orbital_elements import OrbitalElements
from .rotation import rotation_angle
from .utils import Instant

# stands in for config.DISPLAY_DISTANCE_CAP; None means no cap
DEFAULT_CAP = object()


@dataclass(frozen=True, kw_only=True)
class Star:
    """
    The central body. Fixed at the origin, no orbit.

    Attributes
    ----------
    radius : float
        Radius relative to Earth
    mass : float
        Mass relative to Earth
    temperature : float
        Surface temperature [K]
    """
    id: str
    name: str
    radius: float
    mass: float
    temperature: float
    spectral_type: str = ''
    color: str = '#FFFFFF'
    description: str = ''
    facts: Tuple[str, ...] = ()


@dataclass(frozen=True, kw_only=True)
class CelestialBody:
    """
    Any body on a heliocentric Keplerian orbit.

    Attributes
    ----------
    id : str
        Unique lowercase identifier (e.g. 'earth', 'halley')
    name : str
        Display name
    elements : OrbitalElements
        Orbit at the J2000.0 epoch
    color : str
        Hex display color
    description : str
        One-line description for info panels
    """
    id: str
    name: str
    elements: OrbitalElements
    color: str = '#FFFFFF'
    description: str = ''

    @property
    def default_segments(self) -> int:
        """Orbit path resolution for this kind of body"""
        return config.DEFAULT_PATH_SEGMENTS

    def position(self, instant: Instant) -> np.ndarray:
        """Heliocentric ecliptic position [AU]"""
        return position_at(self.elements, instant)

    def velocity(self, instant: Instant) -> np.ndarray:
        """Heliocentric ecliptic velocity [AU/day]"""
        return velocity_at(self.elements, instant)

    def distance(self, instant: Instant) -> float:
        """Heliocentric distance [AU]"""
        return float(distance_at(self.elements, instant))

    def info(self, instant: Instant) -> OrbitalInfo:
        """Display summary of the orbital state"""
        return orbital_info(self.elements, instant)

    def orbit_path(self, segments: Optional[int] = None,
                   max_distance: Optional[float] = None) -> OrbitPath:
        """Sample the full orbit (uncached; see OrbitPathCache)"""
        if segments is None:
            segments = self.default_segments
        return OrbitPath(self.elements, segments, max_distance)


@dataclass(frozen=True, kw_only=True)
class Planet(CelestialBody):
    """
    A planet with spin and physical descriptors.

    Attributes
    ----------
    radius : float
        Radius relative to Earth
    mass : float
        Mass relative to Earth
    rotation_period : float
        Sidereal rotation period [hours]; negative for retrograde spin
    axial_tilt : float
        Obliquity [deg]
    density : float, optional
        Mean density [g/cm^3]
    gravity : float, optional
        Surface gravity relative to Earth
    """
    radius: float
    mass: float
    rotation_period: float
    axial_tilt: float
    density: Optional[float] = None
    gravity: Optional[float] = None
    moons: int = 0
    glow_color: str = '#FFFFFF'
    has_rings: bool = False
    ring_color: Optional[str] = None
    discovery_year: Optional[int] = None
    discoverer: Optional[str] = None
    atmosphere: Tuple[str, ...] = ()
    facts: Tuple[str, ...] = field(default=(), repr=False)

    def __post_init__(self):
        if self.radius <= 0:
            raise ValueError(f"Radius must be positive, got {self.radius}")
        if self.mass <= 0:
            raise ValueError(f"Mass must be positive, got {self.mass}")
        if self.rotation_period == 0:
            raise ValueError("Rotation period must be nonzero")

    @property
    def is_retrograde_rotator(self) -> bool:
        return self.rotation_period < 0

    def rotation_angle(self, instant: Instant) -> float:
        """Spin angle [rad] in [0, 2*pi)"""
        return rotation_angle(self.rotation_period, instant)


@dataclass(frozen=True, kw_only=True)
class DwarfPlanet(Planet):
    """A dwarf planet; same descriptors as a planet."""


@dataclass(frozen=True, kw_only=True)
class Comet(CelestialBody):
    """
    A comet with tail and nucleus display attributes.

    Attributes
    ----------
    tail_color : str
        Hex color of the tail
    core_size : float
        Display size of the nucleus (scene units)
    last_perihelion, next_perihelion : str, optional
        Informational perihelion passage dates
    """
    tail_color: str = '#FFFFFF'
    core_size: float = 0.05
    discovery_year: Optional[int] = None
    discoverer: Optional[str] = None
    last_perihelion: Optional[str] = None
    next_perihelion: Optional[str] = None

    def __post_init__(self):
        if self.core_size <= 0:
            raise ValueError(f"Core size must be positive, got {self.core_size}")

    @property
    def default_segments(self) -> int:
        return config.COMET_PATH_SEGMENTS

    def is_visible(self, instant: Instant,
                   max_distance: Optional[float] = None) -> bool:
        """True while the comet is within the display distance cap."""
        if max_distance is None:
            max_distance = config.DISPLAY_DISTANCE_CAP
        return self.distance(instant) <= max_distance

    def orbit_path(self, segments: Optional[int] = None,
                   max_distance=DEFAULT_CAP) -> OrbitPath:
        """
        Sample the orbit, capped at the display distance by default.

        Pass ``max_distance=None`` for the full, uncapped ellipse.
        """
        if max_distance is DEFAULT_CAP:
            max_distance = config.DISPLAY_DISTANCE_CAP
        return super().orbit_path(segments, max_distance)

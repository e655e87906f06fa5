"""
SolarSystem class definition.

Explicit simulation context: the body catalogue, the clock, the orbit
path cache and the current selection, passed to whoever needs them
instead of living in global state.
"""

from typing import Dict, Iterable, Optional, Sequence

import numpy as np

from .bodies import CelestialBody, Comet, Planet, Star, DEFAULT_CAP
from .clock import SimulationClock
from .config import config
from .ephemeris import OrbitalInfo
from .orbit_path import OrbitPath, OrbitPathCache


class SolarSystem:
    """
    A set of bodies evaluated against one simulation clock.

    Parameters
    ----------
    planets : sequence of Planet
        Bodies cycled through by ``select_next`` / ``select_previous``,
        in display order
    others : iterable of CelestialBody, optional
        Further orbiting bodies (dwarf planets, comets)
    star : Star, optional
        Central body; selecting its id clears the selection
    clock : SimulationClock, optional
        Defaults to a new clock starting now

    Raises
    ------
    ValueError
        If two bodies share an id
    """

    # ========== CONSTRUCTION ==========
    def __init__(self, planets: Sequence[Planet],
                 others: Iterable[CelestialBody] = (),
                 star: Optional[Star] = None,
                 clock: Optional[SimulationClock] = None):
        self._planets = tuple(planets)
        self._star = star
        self._clock = clock if clock is not None else SimulationClock()
        self._paths = OrbitPathCache()
        self._selected: Optional[CelestialBody] = None

        self._bodies: Dict[str, CelestialBody] = {}
        for body in (*self._planets, *others):
            if body.id in self._bodies or (star is not None and body.id == star.id):
                raise ValueError(f"Duplicate body id '{body.id}'")
            self._bodies[body.id] = body

    @classmethod
    def default(cls, clock: Optional[SimulationClock] = None) -> "SolarSystem":
        """The built-in catalogue: Sun, eight planets, Pluto, five comets."""
        from . import defaults
        return cls(defaults.PLANETS,
                   others=(*defaults.DWARF_PLANETS, *defaults.COMETS),
                   star=defaults.SUN, clock=clock)

    # ========== PROPERTY ACCESS ==========
    @property
    def clock(self) -> SimulationClock:
        return self._clock

    @property
    def star(self) -> Optional[Star]:
        return self._star

    @property
    def planets(self) -> tuple:
        return self._planets

    @property
    def bodies(self) -> tuple:
        """Every orbiting body, planets first"""
        return tuple(self._bodies.values())

    @property
    def comets(self) -> tuple:
        return tuple(b for b in self._bodies.values() if isinstance(b, Comet))

    @property
    def selected(self) -> Optional[CelestialBody]:
        return self._selected

    @property
    def path_cache(self) -> OrbitPathCache:
        return self._paths

    def __getitem__(self, body_id: str) -> CelestialBody:
        return self._bodies[body_id]

    def __contains__(self, body_id: str) -> bool:
        return body_id in self._bodies

    def __len__(self):
        return len(self._bodies)

    # ========== SELECTION ==========
    def select(self, body_id: Optional[str]) -> Optional[CelestialBody]:
        """
        Select a body by id.

        ``None`` or the star's id clears the selection.

        Raises
        ------
        KeyError
            If no body has that id
        """
        if body_id is None or (self._star is not None and body_id == self._star.id):
            self._selected = None
        else:
            try:
                self._selected = self._bodies[body_id]
            except KeyError:
                raise KeyError(f"Unknown body id '{body_id}'") from None
        return self._selected

    def select_next(self) -> Optional[CelestialBody]:
        """Cycle forward through the planets (first when nothing is selected)."""
        return self._step_selection(+1)

    def select_previous(self) -> Optional[CelestialBody]:
        """Cycle backward through the planets (last when nothing is selected)."""
        return self._step_selection(-1)

    def _step_selection(self, step: int) -> Optional[CelestialBody]:
        if not self._planets:
            return self._selected
        if self._selected not in self._planets:
            self._selected = self._planets[0 if step > 0 else -1]
        else:
            index = self._planets.index(self._selected)
            self._selected = self._planets[(index + step) % len(self._planets)]
        return self._selected

    # ========== EVALUATION ==========
    def snapshot(self) -> Dict[str, np.ndarray]:
        """Position [AU] of every orbiting body at the clock instant."""
        days = self._clock.current_days
        return {body_id: body.position(days)
                for body_id, body in self._bodies.items()}

    def rotation_angles(self) -> Dict[str, float]:
        """Spin angle [rad] of every body with a rotation period."""
        days = self._clock.current_days
        return {body_id: body.rotation_angle(days)
                for body_id, body in self._bodies.items()
                if isinstance(body, Planet)}

    def info(self, body_id: str) -> OrbitalInfo:
        """Orbital summary of a body at the clock instant."""
        return self[body_id].info(self._clock.current_days)

    def selected_info(self) -> Optional[OrbitalInfo]:
        """Orbital summary of the selected body, or None."""
        if self._selected is None:
            return None
        return self._selected.info(self._clock.current_days)

    def visible_comets(self, max_distance: Optional[float] = None) -> tuple:
        """Comets currently within the display distance cap."""
        days = self._clock.current_days
        return tuple(c for c in self.comets
                     if c.is_visible(days, max_distance))

    def orbit_path(self, body_id: str, segments: Optional[int] = None,
                   max_distance=DEFAULT_CAP) -> OrbitPath:
        """
        Cached orbit path of a body.

        Comets default to the display distance cap; other bodies default
        to no cap. An explicit ``max_distance=None`` never caps.
        """
        body = self[body_id]
        if segments is None:
            segments = body.default_segments
        if max_distance is DEFAULT_CAP:
            max_distance = (config.DISPLAY_DISTANCE_CAP
                            if isinstance(body, Comet) else None)
        return self._paths.get(body_id, body.elements, segments, max_distance)

    # ========== SPECIAL METHODS ==========
    def __repr__(self):
        return f"SolarSystem(bodies={len(self._bodies)}, clock={self._clock!r})"

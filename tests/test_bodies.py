"""
Test suite for body records and the default catalogue.
"""

import dataclasses
from datetime import datetime, timezone

import pytest
import numpy as np

from orrery import OrbitalElements, Planet, DwarfPlanet, Comet, config
from orrery.bodies import CelestialBody
from orrery.defaults import (SUN, PLANETS, DWARF_PLANETS, COMETS, EARTH,
                             SATURN, HALLEY, PLUTO)
from orrery.ephemeris import position_at


T = datetime(2024, 1, 1, tzinfo=timezone.utc)

SIMPLE = OrbitalElements(a=1.5, e=0.1, i=2.0, raan=10.0, argp=20.0, M0=0.0,
                         period=671.0)


def make_planet(**overrides):
    fields = dict(id='test', name='Test', elements=SIMPLE, radius=1.0,
                  mass=1.0, rotation_period=24.0, axial_tilt=0.0)
    fields.update(overrides)
    return Planet(**fields)


# =============================================================================
# Catalogue
# =============================================================================

class TestCatalogue:

    def test_counts(self):
        assert len(PLANETS) == 8
        assert len(DWARF_PLANETS) == 1
        assert len(COMETS) == 5

    def test_planets_ordered_outward(self):
        a = [p.elements.a for p in PLANETS]
        assert a == sorted(a)

    def test_unique_ids(self):
        ids = [b.id for b in (SUN, *PLANETS, *DWARF_PLANETS, *COMETS)]
        assert len(ids) == len(set(ids))

    def test_sun(self):
        assert SUN.id == 'sun'
        assert SUN.temperature == 5778.0

    def test_saturn_has_rings(self):
        assert SATURN.has_rings
        assert not EARTH.has_rings

    def test_halley_retrograde(self):
        assert HALLEY.elements.is_retrograde

    def test_pluto_is_dwarf(self):
        assert isinstance(PLUTO, DwarfPlanet)
        assert isinstance(PLUTO, Planet)


# =============================================================================
# Body Behavior
# =============================================================================

class TestCelestialBody:

    def test_position_delegates_to_engine(self):
        assert np.array_equal(EARTH.position(T), position_at(EARTH.elements, T))

    def test_distance(self):
        d = EARTH.distance(T)
        assert isinstance(d, float)
        assert EARTH.elements.perihelion <= d <= EARTH.elements.aphelion

    def test_velocity(self):
        assert EARTH.velocity(T).shape == (3,)

    def test_info(self):
        assert EARTH.info(T).distance == pytest.approx(EARTH.distance(T))

    def test_frozen(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            EARTH.name = 'Terra'

    def test_plain_body(self):
        body = CelestialBody(id='rock', name='Rock', elements=SIMPLE)
        assert body.default_segments == config.DEFAULT_PATH_SEGMENTS
        assert len(body.orbit_path(12)) == 13


class TestPlanet:

    def test_physical_validation(self):
        with pytest.raises(ValueError):
            make_planet(radius=0.0)
        with pytest.raises(ValueError):
            make_planet(mass=-1.0)
        with pytest.raises(ValueError):
            make_planet(rotation_period=0.0)

    def test_default_path(self):
        path = make_planet().orbit_path()
        assert path.segments == 360
        assert not path.is_truncated


class TestComet:

    def test_default_segments(self):
        assert HALLEY.default_segments == 500

    def test_path_capped_by_default(self):
        path = HALLEY.orbit_path()
        assert path.max_distance == config.DISPLAY_DISTANCE_CAP

    def test_path_uncapped_on_request(self):
        path = HALLEY.orbit_path(max_distance=None)
        assert path.max_distance is None
        assert not path.is_truncated

    def test_visibility_follows_cap(self):
        """Halley is near aphelion (~35 AU) in 2024."""
        assert HALLEY.distance(T) > 30.0
        assert HALLEY.is_visible(T)
        assert not HALLEY.is_visible(T, max_distance=20.0)

    def test_core_size_validated(self):
        with pytest.raises(ValueError):
            Comet(id='x', name='X', elements=SIMPLE, core_size=0.0)

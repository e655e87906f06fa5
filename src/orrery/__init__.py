"""
Orrery: Keplerian Ephemerides for Solar-System Visualization

A Python package that computes time-dependent positions, velocities and
orbital summaries of planets and comets from classical orbital elements,
driven by a continuous, scrubbable simulation clock.
"""

# Configuration
from .config import config, temp_config

# Core classes
from .orbital_elements import OrbitalElements, OrbitalElements as OE
from .bodies import Star, CelestialBody, Planet, DwarfPlanet, Comet
from .clock import SimulationClock, ClockState, SPEED_PRESETS
from .orbit_path import OrbitPath, OrbitPathCache, sample_path
from .system import SolarSystem

# Engine functions
from .kepler import (solve_kepler, eccentric_to_true_anomaly,
                     heliocentric_distance, KeplerConvergenceWarning,
                     PrecisionWarning)
from .ephemeris import (position_at, velocity_at, state_at, orbital_info,
                        OrbitalInfo, light_travel_time, format_distance)
from .rotation import rotation_angle
from .utils import julian_day, days_since_j2000, j2000_days, instant_from_days

# Package metadata
__version__ = "0.1.0"

# Define what gets imported with "from orrery import *"
__all__ = [
    # Configuration
    "config",
    "temp_config",
    # Classes
    "OrbitalElements",
    "Star",
    "CelestialBody",
    "Planet",
    "DwarfPlanet",
    "Comet",
    "SimulationClock",
    "ClockState",
    "OrbitPath",
    "OrbitPathCache",
    "SolarSystem",
    "OrbitalInfo",
    # Abbreviations
    "OE",
    # Functions
    "solve_kepler",
    "eccentric_to_true_anomaly",
    "heliocentric_distance",
    "position_at",
    "velocity_at",
    "state_at",
    "orbital_info",
    "sample_path",
    "rotation_angle",
    "light_travel_time",
    "format_distance",
    "julian_day",
    "days_since_j2000",
    "j2000_days",
    "instant_from_days",
    # Warnings
    "KeplerConvergenceWarning",
    "PrecisionWarning",
    # Constants
    "SPEED_PRESETS",
]

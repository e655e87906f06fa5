"""
Default Solar System Catalogue
==============================

Reference data for the Sun, the eight planets, Pluto and five
well-known comets. Planetary elements follow the JPL approximate
Keplerian elements at J2000.0; physical values are relative to Earth.

Examples
--------
>>> from orrery.defaults import EARTH, HALLEY
>>> EARTH.elements.perihelion
0.98328...
"""

from .bodies import Star, Planet, DwarfPlanet, Comet
from .orbital_elements import OrbitalElements

"""
Central body
"""
SUN = Star(
    id='sun',
    name='Sun',
    radius=109.2,
    mass=332946.0,
    temperature=5778.0,
    spectral_type='G2V',
    color='#FDB813',
    description='The star at the centre of the Solar System, holding 99.86% of its mass.',
    facts=(
        'Converts about four million tonnes of matter into energy every second',
        'Core temperature is around 15 million degrees Celsius',
        'Sunlight takes about 8 minutes 20 seconds to reach Earth',
        'The equator rotates once every 25 days',
    ),
)

"""
Planets, ordered outward from the Sun
"""
MERCURY = Planet(
    id='mercury',
    name='Mercury',
    description='The smallest planet and the closest to the Sun, with the most eccentric planetary orbit.',
    radius=0.383, mass=0.055, density=5.427, gravity=0.378,
    elements=OrbitalElements(
        a=0.38709927, e=0.20563593, i=7.00497902,
        raan=48.33076593, argp=29.12703035, M0=174.796, period=87.969),
    rotation_period=1407.6, axial_tilt=0.034,
    color='#B7B8B9', glow_color='#8C8C8C',
    moons=0,
    facts=(
        'One solar day lasts 176 Earth days',
        'Surface temperatures swing by about 600 degrees Celsius',
        'Has no atmosphere to speak of',
        'The surface is covered in impact craters',
    ),
)

VENUS = Planet(
    id='venus',
    name='Venus',
    description='The hottest planet, wrapped in a dense atmosphere with a runaway greenhouse effect.',
    radius=0.949, mass=0.815, density=5.243, gravity=0.907,
    elements=OrbitalElements(
        a=0.72333566, e=0.00677672, i=3.39467605,
        raan=76.67984255, argp=54.85229058, M0=50.115, period=224.701),
    rotation_period=-5832.5, axial_tilt=177.36,
    color='#E6C87A', glow_color='#FFA500',
    moons=0,
    atmosphere=('CO2 (96.5%)', 'N2 (3.5%)'),
    facts=(
        'Rotates in the opposite direction to most planets',
        'Surface temperature is about 465 degrees Celsius',
        'Surface pressure is 92 times that of Earth',
    ),
)

EARTH = Planet(
    id='earth',
    name='Earth',
    description='The only planet known to host life, with liquid surface water and a breathable atmosphere.',
    radius=1.0, mass=1.0, density=5.514, gravity=1.0,
    elements=OrbitalElements(
        a=1.00000261, e=0.01671123, i=0.00005,
        raan=-11.26064, argp=102.94719, M0=357.529, period=365.256),
    rotation_period=23.934, axial_tilt=23.44,
    color='#6B93D6', glow_color='#4169E1',
    moons=1,
    atmosphere=('N2 (78%)', 'O2 (21%)', 'Ar (0.9%)'),
    facts=(
        'The densest planet in the Solar System',
        '71% of the surface is covered by water',
        'A magnetic field shields the surface from the solar wind',
    ),
)

MARS = Planet(
    id='mars',
    name='Mars',
    description='The red planet, which may once have held liquid water.',
    radius=0.532, mass=0.107, density=3.934, gravity=0.377,
    elements=OrbitalElements(
        a=1.52371034, e=0.09339410, i=1.84969142,
        raan=49.55953891, argp=286.5016, M0=19.373, period=686.980),
    rotation_period=24.623, axial_tilt=25.19,
    color='#E27B58', glow_color='#CD5C5C',
    moons=2,
    atmosphere=('CO2 (95.3%)', 'N2 (2.7%)', 'Ar (1.6%)'),
    facts=(
        'Home to Olympus Mons, the tallest volcano in the Solar System',
        'A day lasts about 24 hours 37 minutes',
        'Has two small moons, Phobos and Deimos',
    ),
)

JUPITER = Planet(
    id='jupiter',
    name='Jupiter',
    description='The largest planet, two and a half times as massive as all the others combined.',
    radius=11.209, mass=317.8, density=1.326, gravity=2.528,
    elements=OrbitalElements(
        a=5.20288700, e=0.04838624, i=1.30439695,
        raan=100.47390909, argp=273.867, M0=20.020, period=4332.59),
    rotation_period=9.925, axial_tilt=3.13,
    color='#D8CA9D', glow_color='#DAA520',
    moons=95,
    atmosphere=('H2 (89.8%)', 'He (10.2%)'),
    facts=(
        'The Great Red Spot is a storm that has raged for centuries',
        'Has the shortest day of any planet',
    ),
)

SATURN = Planet(
    id='saturn',
    name='Saturn',
    description='Famous for its ring system; less dense than water.',
    radius=9.449, mass=95.16, density=0.687, gravity=1.065,
    elements=OrbitalElements(
        a=9.53667594, e=0.05386179, i=2.48599187,
        raan=113.66242448, argp=339.392, M0=317.020, period=10759.22),
    rotation_period=10.656, axial_tilt=26.73,
    color='#F4D59E', glow_color='#F0E68C',
    has_rings=True, ring_color='#C9B896',
    moons=146,
    atmosphere=('H2 (96.3%)', 'He (3.25%)'),
)

URANUS = Planet(
    id='uranus',
    name='Uranus',
    description='An ice giant whose spin axis lies almost in its orbital plane.',
    radius=4.007, mass=14.54, density=1.270, gravity=0.886,
    elements=OrbitalElements(
        a=19.18916464, e=0.04725744, i=0.77263783,
        raan=74.01692503, argp=96.998857, M0=142.238, period=30688.5),
    rotation_period=-17.24, axial_tilt=97.77,
    color='#B5E3E3', glow_color='#40E0D0',
    has_rings=True, ring_color='#87CEEB',
    moons=28,
    discovery_year=1781, discoverer='William Herschel',
    atmosphere=('H2 (82.5%)', 'He (15.2%)', 'CH4 (2.3%)'),
)

NEPTUNE = Planet(
    id='neptune',
    name='Neptune',
    description='The outermost planet, with the fastest winds in the Solar System.',
    radius=3.883, mass=17.15, density=1.638, gravity=1.137,
    elements=OrbitalElements(
        a=30.06992276, e=0.00859048, i=1.77004347,
        raan=131.78422574, argp=276.336, M0=256.228, period=60182.0),
    rotation_period=16.11, axial_tilt=28.32,
    color='#5B5DDF', glow_color='#4169E1',
    has_rings=True, ring_color='#6495ED',
    moons=16,
    discovery_year=1846, discoverer='Johann Galle',
    atmosphere=('H2 (80%)', 'He (19%)', 'CH4 (1%)'),
)

PLANETS = (MERCURY, VENUS, EARTH, MARS, JUPITER, SATURN, URANUS, NEPTUNE)

"""
Dwarf planets
"""
PLUTO = DwarfPlanet(
    id='pluto',
    name='Pluto',
    description='Once counted as the ninth planet, reclassified as a dwarf planet in 2006.',
    radius=0.186, mass=0.0022,
    elements=OrbitalElements(
        a=39.48211675, e=0.24882730, i=17.14001206,
        raan=110.30393684, argp=113.834, M0=14.53, period=90560.0),
    rotation_period=-153.3, axial_tilt=122.53,
    color='#D2B48C', glow_color='#C4A574',
    moons=5,
    discovery_year=1930, discoverer='Clyde Tombaugh',
)

DWARF_PLANETS = (PLUTO,)

"""
Comets
"""
HALLEY = Comet(
    id='halley',
    name="Halley's Comet",
    description='The best known short-period comet, returning roughly every 76 years.',
    elements=OrbitalElements(
        a=17.834, e=0.96714, i=162.26,
        raan=58.42, argp=111.33, M0=38.38, period=27510.0),
    color='#E8E8E8', tail_color='#87CEEB', core_size=0.08,
    discovery_year=-240, discoverer='Ancient astronomers',
    last_perihelion='1986-02-09', next_perihelion='2061-07-28',
)

HALE_BOPP = Comet(
    id='hale-bopp',
    name='Hale-Bopp',
    description='One of the brightest comets of the 20th century, visible to the naked eye for 18 months.',
    elements=OrbitalElements(
        a=186.0, e=0.995, i=89.4,
        raan=282.47, argp=130.59, M0=180.0, period=926000.0),
    color='#FFFACD', tail_color='#FFD700', core_size=0.1,
    discovery_year=1995, discoverer='Alan Hale, Thomas Bopp',
    last_perihelion='1997-04-01', next_perihelion='4530',
)

ENCKE = Comet(
    id='encke',
    name="Encke's Comet",
    description='The known comet with the shortest period, about 3.3 years.',
    elements=OrbitalElements(
        a=2.215, e=0.847, i=11.76,
        raan=334.57, argp=186.54, M0=190.0, period=1204.0),
    color='#D3D3D3', tail_color='#98FB98', core_size=0.05,
    discovery_year=1786, discoverer='Pierre Méchain',
    last_perihelion='2023-10-22', next_perihelion='2027-02-21',
)

SWIFT_TUTTLE = Comet(
    id='swift-tuttle',
    name='Swift-Tuttle',
    description='Parent body of the Perseid meteor shower, period about 133 years.',
    elements=OrbitalElements(
        a=26.092, e=0.9632, i=113.45,
        raan=139.38, argp=152.98, M0=100.0, period=48650.0),
    color='#F5F5DC', tail_color='#FF6347', core_size=0.07,
    discovery_year=1862, discoverer='Lewis Swift, Horace Tuttle',
    last_perihelion='1992-12-12', next_perihelion='2126-07-12',
)

TEMPEL_1 = Comet(
    id='tempel-1',
    name='Tempel 1',
    description='Target of the Deep Impact mission, period about 5.5 years.',
    elements=OrbitalElements(
        a=3.138, e=0.5175, i=10.53,
        raan=68.93, argp=178.93, M0=150.0, period=2030.0),
    color='#C0C0C0', tail_color='#ADD8E6', core_size=0.04,
    discovery_year=1867, discoverer='Wilhelm Tempel',
    last_perihelion='2022-03-04', next_perihelion='2027-09-01',
)

COMETS = (HALLEY, HALE_BOPP, ENCKE, SWIFT_TUTTLE, TEMPEL_1)

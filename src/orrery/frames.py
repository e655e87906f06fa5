"""
Rotation from the orbital (perifocal) plane into the ecliptic frame.

The perifocal frame has +x toward perihelion and +z along the orbit
normal. The ecliptic frame is right-handed with +z toward the ecliptic
north pole. Any remapping to a display convention (e.g. y-up) is the
caller's business.
"""

import numpy as np

from .constants import DEG_TO_RAD


def rotation_matrix(i, raan, argp):
    """
    Build the 3-1-3 direction cosine matrix perifocal -> ecliptic.

    DCM = R3(raan) @ R1(i) @ R3(argp)

    Parameters
    ----------
    i : float
        Inclination [deg]
    raan : float
        Longitude of the ascending node [deg]
    argp : float
        Argument of perihelion [deg]

    Returns
    -------
    np.ndarray
        3x3 rotation matrix
    """
    i = i * DEG_TO_RAD
    raan = raan * DEG_TO_RAD
    argp = argp * DEG_TO_RAD
    # rotation about z-axis by RAAN
    R3_raan = np.array([
        [np.cos(raan), -np.sin(raan), 0],
        [np.sin(raan),  np.cos(raan), 0],
        [0,             0,            1]
    ])
    # rotation about x-axis by inclination
    R1_i = np.array([
        [1,  0,          0         ],
        [0,  np.cos(i), -np.sin(i) ],
        [0,  np.sin(i),  np.cos(i) ]
    ])
    # rotation about z-axis by argument of perihelion
    R3_argp = np.array([
        [np.cos(argp), -np.sin(argp), 0],
        [np.sin(argp),  np.cos(argp), 0],
        [0,             0,            1]
    ])
    return R3_raan @ R1_i @ R3_argp


def perifocal_to_ecliptic(x_orbit, y_orbit, dcm):
    """
    Rotate in-plane coordinates into the ecliptic frame.

    Only the first two columns of ``dcm`` contribute since the
    perifocal z coordinate is zero.

    Parameters
    ----------
    x_orbit, y_orbit : float or np.ndarray
        Perifocal coordinates (r*cos(nu), r*sin(nu)) [AU]
    dcm : np.ndarray
        3x3 matrix from ``rotation_matrix``

    Returns
    -------
    np.ndarray
        Shape (3,) for scalar input, (n, 3) for arrays of length n
    """
    x_orbit = np.asarray(x_orbit, dtype=float)
    y_orbit = np.asarray(y_orbit, dtype=float)
    xyz = (np.multiply.outer(x_orbit, dcm[:, 0])
           + np.multiply.outer(y_orbit, dcm[:, 1]))
    return xyz


def orbit_normal(dcm):
    """Unit angular-momentum direction of the orbit in the ecliptic frame."""
    return dcm[:, 2].copy()

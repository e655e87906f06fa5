"""
Closed orbit polylines sampled uniformly in true anomaly.

Path shape depends only on the elements, so samples are cached by
(body id, segment count, distance cap) and never invalidated.
"""

import logging
from typing import Dict, Hashable, List, Optional, Tuple

import numpy as np
import pandas as pd
import plotly.graph_objects as go

from .constants import TWO_PI
from .frames import perifocal_to_ecliptic
from .kepler import heliocentric_distance
from .orbital_elements import OrbitalElements

logger = logging.getLogger(__name__)


class OrbitPath:
    """
    One sampled orbit.

    Attributes:
        elements: Orbit the path was sampled from
        segments: Number of true-anomaly steps
        max_distance: Display cap [AU] used to drop far points, or None
    """
    # ========== CONSTRUCTION ==========
    def __init__(self, elements: OrbitalElements, segments: int,
                 max_distance: Optional[float] = None):
        if segments < 1:
            raise ValueError(f"segments must be at least 1, got {segments}")
        self._elements = elements
        self._segments = int(segments)
        self._max_distance = max_distance

        nu = np.linspace(0.0, TWO_PI, self._segments + 1)
        r = heliocentric_distance(elements.a, elements.e, nu)
        self._true_anomaly = nu
        self._all_points = perifocal_to_ecliptic(r * np.cos(nu), r * np.sin(nu),
                                                 elements.rotation_matrix)
        if max_distance is None:
            self._mask = np.ones(nu.shape, dtype=bool)
        else:
            self._mask = r <= max_distance
        self._all_points.flags.writeable = False
        self._mask.flags.writeable = False

    # ========== PROPERTY ACCESS ==========
    @property
    def elements(self) -> OrbitalElements:
        return self._elements

    @property
    def segments(self) -> int:
        return self._segments

    @property
    def max_distance(self) -> Optional[float]:
        return self._max_distance

    @property
    def points(self) -> np.ndarray:
        """Kept points in sampling order, shape (k, 3) [AU]"""
        return self._all_points[self._mask]

    @property
    def true_anomaly(self) -> np.ndarray:
        """True anomaly [rad] of each kept point"""
        return self._true_anomaly[self._mask]

    @property
    def is_truncated(self) -> bool:
        """True if the distance cap dropped any point"""
        return not bool(np.all(self._mask))

    # ========== UTILITY METHODS ==========
    def arcs(self) -> List[np.ndarray]:
        """
        Split the kept points into contiguous arcs.

        An uncapped path is a single closed arc. For a capped path the
        run ending at nu = 2*pi and the run starting at nu = 0 describe
        the same stretch of orbit and are joined into one arc.

        Returns:
            List of arrays of shape (m, 3), possibly empty
        """
        kept = np.flatnonzero(self._mask)
        if kept.size == 0:
            return []
        if kept.size == self._mask.size:
            return [self._all_points.copy()]

        breaks = np.flatnonzero(np.diff(kept) > 1) + 1
        runs = np.split(kept, breaks)
        last = self._mask.size - 1
        if len(runs) > 1 and runs[0][0] == 0 and runs[-1][-1] == last:
            # index `last` repeats index 0, keep only one copy
            runs = [np.concatenate([runs[-1], runs[0][1:]])] + runs[1:-1]
        return [self._all_points[run] for run in runs]

    def to_dataframe(self) -> pd.DataFrame:
        """
        Export kept path points to pandas DataFrame.

        Returns:
            DataFrame with columns nu (deg), x, y, z (AU) and r (AU)
        """
        points = self.points
        return pd.DataFrame({
            'nu': np.degrees(self.true_anomaly),
            'x': points[:, 0],
            'y': points[:, 1],
            'z': points[:, 2],
            'r': np.linalg.norm(points, axis=1),
        })

    # ========== SPECIAL METHODS ==========
    def __len__(self):
        return int(np.count_nonzero(self._mask))

    def __repr__(self):
        return (f"OrbitPath(segments={self._segments}, "
                f"max_distance={self._max_distance}, points={len(self)})")

    # ========== PLOTTING ==========
    # quick-look figures for inspecting orbits outside the renderer
    def plot_3d(self, color: str = 'red', name: str = 'Orbit',
                show_sun: bool = True) -> go.Figure:
        """
        Create 3D plot of the orbit with the Sun at the origin.

        Parameters:
            color: Color of orbit line (default: 'red')
            name: Legend name for the orbit (default: 'Orbit')
            show_sun: Whether to mark the Sun (default: True)

        Returns:
            Plotly Figure object
        """
        fig = go.Figure()
        if show_sun:
            fig.add_trace(go.Scatter3d(
                x=[0.0], y=[0.0], z=[0.0],
                mode='markers',
                marker=dict(color='gold', size=6),
                name='Sun',
                hoverinfo='name'
            ))
        self.add_to_plot(fig, color=color, name=name)
        fig.update_layout(
            scene=dict(
                xaxis_title='X [AU]',
                yaxis_title='Y [AU]',
                zaxis_title='Z [AU]',
                aspectmode='data'
            ),
            title='Heliocentric Orbit',
            showlegend=True
        )
        return fig

    def add_to_plot(self, fig: go.Figure, color: str = 'blue',
                    name: Optional[str] = None, **kwargs) -> go.Figure:
        """
        Add this orbit to an existing Plotly figure, one trace per arc.

        Parameters:
            fig: Existing Plotly Figure object
            color: Color of orbit line (default: 'blue')
            name: Legend name for this orbit (default: 'Orbit N')
            **kwargs: Additional arguments passed to Scatter3d

        Returns:
            Updated Plotly Figure object (same object, modified in place)
        """
        if name is None:
            n_existing = sum(1 for trace in fig.data
                             if isinstance(trace, go.Scatter3d))
            name = f'Orbit {n_existing + 1}'

        for k, arc in enumerate(self.arcs()):
            fig.add_trace(go.Scatter3d(
                x=arc[:, 0],
                y=arc[:, 1],
                z=arc[:, 2],
                mode='lines',
                line=dict(color=color, width=3),
                name=name,
                legendgroup=name,
                showlegend=(k == 0),
                hovertemplate='x: %{x:.4f}<br>y: %{y:.4f}<br>z: %{z:.4f}<extra></extra>',
                **kwargs
            ))
        return fig


def sample_path(elements: OrbitalElements, segments: int,
                max_distance: Optional[float] = None) -> np.ndarray:
    """
    Sample an orbit at evenly spaced true anomalies.

    Walks nu from 0 to 2*pi in ``segments`` steps, so an uncapped path
    has ``segments + 1`` points with the last one closing the loop.

    Parameters
    ----------
    elements : OrbitalElements
    segments : int
        Number of steps, at least 1
    max_distance : float, optional
        Points farther than this from the Sun [AU] are omitted, which
        may leave several disjoint arcs. None keeps every point.

    Returns
    -------
    np.ndarray
        Shape (k, 3) with k <= segments + 1
    """
    return OrbitPath(elements, segments, max_distance).points


class OrbitPathCache:
    """
    Memo of sampled paths keyed by (body id, segments, distance cap).

    Elements are immutable so an entry never goes stale. Callers must
    not reuse a body id for different elements.
    """

    def __init__(self):
        self._paths: Dict[Tuple[Hashable, int, Optional[float]], OrbitPath] = {}

    def get(self, body_id: Hashable, elements: OrbitalElements, segments: int,
            max_distance: Optional[float] = None) -> OrbitPath:
        """Return the cached path, sampling it on first request."""
        key = (body_id, int(segments), max_distance)
        path = self._paths.get(key)
        if path is None:
            logger.debug("Sampling orbit path for %r (segments=%d, cap=%s)",
                         body_id, segments, max_distance)
            path = OrbitPath(elements, segments, max_distance)
            self._paths[key] = path
        return path

    def clear(self):
        self._paths.clear()

    def __len__(self):
        return len(self._paths)

    def __contains__(self, key):
        return key in self._paths

# -*- coding: utf-8 -*-
"""
Geodesy - Great-circle length, spherical polygon area, and extents.

Vertex sequences are (lon, lat) pairs in WGS84 decimal degrees, as
accepted from the host map. Length sums haversine distances on a sphere
of mean Earth radius; area uses the spherical ring-area formula of
Chamberlain & Duquette on the WGS84 equatorial radius. Both match the
conventions of common web-map measuring tools.

Dependencies
------------
numpy

Author
------
GMTK Contributors

License
-------
MIT License
Copyright (c) 2024 geoint.org
See LICENSE file for full text.

Created
-------
2026-10-19

Modified
--------
2026-10-19
"""

# Standard library
from typing import Sequence, Tuple

# Third-party
import numpy as np

EARTH_MEAN_RADIUS = 6371008.8
EARTH_EQUATORIAL_RADIUS = 6378137.0

BBox = Tuple[float, float, float, float]


def _as_lonlat(vertices: Sequence) -> np.ndarray:
    """Coerce a vertex sequence to an (N, 2) float array of (lon, lat)."""
    arr = np.asarray([tuple(v) for v in vertices], dtype=np.float64)
    if arr.ndim != 2 or arr.shape[1] < 2:
        raise ValueError(
            f"Expected a sequence of (lon, lat) pairs, got shape {arr.shape}"
        )
    return arr[:, :2]


def haversine_distance(a: Sequence[float], b: Sequence[float]) -> float:
    """Great-circle distance in meters between two (lon, lat) points."""
    return path_length([a, b])


def path_length(vertices: Sequence) -> float:
    """Great-circle length of a polyline in meters.

    Parameters
    ----------
    vertices : Sequence
        Ordered (lon, lat) pairs.

    Returns
    -------
    float
        Sum of segment lengths. 0.0 for fewer than two vertices.
    """
    if len(vertices) < 2:
        return 0.0
    rad = np.radians(_as_lonlat(vertices))
    lon1, lat1 = rad[:-1, 0], rad[:-1, 1]
    lon2, lat2 = rad[1:, 0], rad[1:, 1]
    h = (
        np.sin((lat2 - lat1) / 2.0) ** 2
        + np.cos(lat1) * np.cos(lat2) * np.sin((lon2 - lon1) / 2.0) ** 2
    )
    h = np.clip(h, 0.0, 1.0)
    segments = 2.0 * EARTH_MEAN_RADIUS * np.arctan2(np.sqrt(h), np.sqrt(1.0 - h))
    return float(segments.sum())


def ring_area(vertices: Sequence) -> float:
    """Spherical area of a polygon ring in square meters.

    The ring is closed implicitly back to the first vertex; a trailing
    duplicate of the first vertex is tolerated.

    Parameters
    ----------
    vertices : Sequence
        Ring (lon, lat) pairs, either orientation.

    Returns
    -------
    float
        Unsigned area. 0.0 for fewer than three distinct vertices.
    """
    ring = _as_lonlat(vertices) if len(vertices) else np.empty((0, 2))
    if len(ring) > 1 and np.array_equal(ring[0], ring[-1]):
        ring = ring[:-1]
    if len(ring) < 3:
        return 0.0
    lon = np.radians(ring[:, 0])
    lat = np.radians(ring[:, 1])
    # Each vertex weighted by the longitude span of its neighbours
    total = np.sum((np.roll(lon, -1) - np.roll(lon, 1)) * np.sin(lat))
    return float(abs(total) * EARTH_EQUATORIAL_RADIUS ** 2 / 2.0)


def bounding_box(vertices: Sequence) -> BBox:
    """Axis-aligned extent of a vertex set.

    Returns
    -------
    Tuple[float, float, float, float]
        (min_lon, min_lat, max_lon, max_lat).
    """
    arr = _as_lonlat(vertices)
    return (
        float(arr[:, 0].min()),
        float(arr[:, 1].min()),
        float(arr[:, 0].max()),
        float(arr[:, 1].max()),
    )


def point_in_ring(point: Sequence[float], vertices: Sequence) -> bool:
    """Even-odd ray casting test of a (lon, lat) point against a ring."""
    ring = _as_lonlat(vertices)
    x, y = float(point[0]), float(point[1])
    xi, yi = ring[:, 0], ring[:, 1]
    xj, yj = np.roll(xi, 1), np.roll(yi, 1)
    with np.errstate(divide='ignore', invalid='ignore'):
        crosses = ((yi > y) != (yj > y)) & (
            x < (xj - xi) * (y - yi) / (yj - yi) + xi
        )
    return bool(np.count_nonzero(crosses) % 2)


def interior_point(vertices: Sequence) -> Tuple[float, float]:
    """A label anchor inside a polygon ring.

    Uses the vertex centroid when it falls inside the ring, otherwise
    the first vertex.
    """
    ring = _as_lonlat(vertices)
    centroid = ring.mean(axis=0)
    if point_in_ring(centroid, ring):
        return float(centroid[0]), float(centroid[1])
    return float(ring[0, 0]), float(ring[0, 1])

# -*- coding: utf-8 -*-
"""
UTM Projection - WGS84 geographic <-> Universal Transverse Mercator.

Thin wrappers over pyproj transformers for the WGS 84 / UTM zone CRSs
(EPSG:326zz north, EPSG:327zz south). Transformers are cached per
zone and hemisphere. ``always_xy`` is set so coordinates are ordered
(lon, lat) and (easting, northing) regardless of EPSG axis order.

Dependencies
------------
pyproj

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
import math
from functools import lru_cache
from typing import Optional, Tuple

# Third-party
from pyproj import Transformer
from pyproj.exceptions import ProjError

_WGS84 = "EPSG:4326"


def utm_epsg(zone: int, hemisphere: str = "N") -> int:
    """EPSG code of the WGS 84 / UTM CRS for a zone and hemisphere.

    Raises
    ------
    ValueError
        If the zone is outside 1-60 or the hemisphere is not N/S.
    """
    if not 1 <= int(zone) <= 60:
        raise ValueError(f"UTM zone must be 1-60, got {zone!r}")
    hemisphere = hemisphere.upper()
    if hemisphere not in ("N", "S"):
        raise ValueError(f"Hemisphere must be 'N' or 'S', got {hemisphere!r}")
    return (32600 if hemisphere == "N" else 32700) + int(zone)


@lru_cache(maxsize=128)
def _forward(zone: int, hemisphere: str) -> Transformer:
    return Transformer.from_crs(
        _WGS84, f"EPSG:{utm_epsg(zone, hemisphere)}", always_xy=True,
    )


@lru_cache(maxsize=128)
def _inverse(zone: int, hemisphere: str) -> Transformer:
    return Transformer.from_crs(
        f"EPSG:{utm_epsg(zone, hemisphere)}", _WGS84, always_xy=True,
    )


def utm_zone_for(lon: float, lat: float) -> int:
    """Standard UTM zone number for a point.

    Applies the Norway (32V) and Svalbard (31X-37X) exceptions.
    """
    zone = int((lon + 180.0) // 6.0) + 1
    if zone > 60:
        zone = 60
    if zone < 1:
        zone = 1
    if 56.0 <= lat < 64.0 and 3.0 <= lon < 12.0:
        zone = 32
    if 72.0 <= lat < 84.0:
        if 0.0 <= lon < 9.0:
            zone = 31
        elif 9.0 <= lon < 21.0:
            zone = 33
        elif 21.0 <= lon < 33.0:
            zone = 35
        elif 33.0 <= lon < 42.0:
            zone = 37
    return zone


def lonlat_to_utm(
    lon: float,
    lat: float,
    zone: Optional[int] = None,
    hemisphere: Optional[str] = None,
) -> Tuple[float, float, int, str]:
    """Project a geographic point to UTM.

    Parameters
    ----------
    lon, lat : float
        WGS84 decimal degrees.
    zone : Optional[int]
        Force a zone. Defaults to the zone the point falls in.
    hemisphere : Optional[str]
        Force 'N' or 'S'. Defaults to the point's hemisphere.

    Returns
    -------
    Tuple[float, float, int, str]
        (easting, northing, zone, hemisphere).

    Raises
    ------
    ValueError
        If the projection yields a non-finite result.
    """
    if zone is None:
        zone = utm_zone_for(lon, lat)
    if hemisphere is None:
        hemisphere = "N" if lat >= 0 else "S"
    hemisphere = hemisphere.upper()
    try:
        easting, northing = _forward(int(zone), hemisphere).transform(lon, lat)
    except ProjError as e:
        raise ValueError(f"Cannot project ({lon}, {lat}): {e}") from e
    if not (math.isfinite(easting) and math.isfinite(northing)):
        raise ValueError(f"Cannot project ({lon}, {lat}) to UTM zone {zone}")
    return easting, northing, int(zone), hemisphere


def utm_to_lonlat(
    zone: int,
    hemisphere: str,
    easting: float,
    northing: float,
) -> Tuple[float, float]:
    """Inverse-project a UTM position to (lon, lat).

    Raises
    ------
    ValueError
        If the zone or hemisphere is invalid or the result is
        non-finite.
    """
    try:
        lon, lat = _inverse(int(zone), hemisphere.upper()).transform(easting, northing)
    except ProjError as e:
        raise ValueError(f"Cannot unproject {easting}, {northing}: {e}") from e
    if not (math.isfinite(lon) and math.isfinite(lat)):
        raise ValueError(
            f"Cannot unproject {easting}, {northing} from UTM zone {zone}"
        )
    return lon, lat

# -*- coding: utf-8 -*-
"""
MGRS Grid - Military Grid Reference System encode/decode.

MGRS references are built on UTM: grid zone designator (zone number
plus 8-degree latitude band), a two-letter 100 km square identifier
using the WGS84 "AA" lettering scheme, and an even number of digits
split between easting and northing within the square. Only the UTM
portion of the grid (80S to 84N) is supported; polar UPS references
are rejected.

Dependencies
------------
pyproj (via gmtk.core.utm)

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
import re
from typing import Tuple

# GMTK internal
from gmtk.core.utm import lonlat_to_utm, utm_to_lonlat, utm_zone_for

LATITUDE_BANDS = "CDEFGHJKLMNPQRSTUVWX"
_ROW_LETTERS = "ABCDEFGHJKLMNPQRSTUV"
_COLUMN_SETS = ("ABCDEFGH", "JKLMNPQR", "STUVWXYZ")
_SQUARE = 100_000
_ROW_CYCLE = 2_000_000

_MGRS_RE = re.compile(
    r"^(\d{1,2})([C-HJ-NP-X])([A-HJ-NP-Z])([A-HJ-NP-V])(\d*)$"
)


def latitude_band(lat: float) -> str:
    """Latitude band letter for ``lat`` (X extends to 84N).

    Raises
    ------
    ValueError
        Outside the 80S-84N UTM band range.
    """
    if not -80.0 <= lat <= 84.0:
        raise ValueError(f"Latitude {lat} is outside the MGRS UTM bands")
    index = min(int((lat + 80.0) // 8.0), len(LATITUDE_BANDS) - 1)
    return LATITUDE_BANDS[index]


def _column_letters(zone: int) -> str:
    return _COLUMN_SETS[(zone - 1) % 3]


def _row_offset(zone: int) -> int:
    # Even zones start their row lettering at 'F'
    return 5 if zone % 2 == 0 else 0


def to_mgrs(lon: float, lat: float, precision: int = 5) -> str:
    """Encode a geographic point as an MGRS string.

    Parameters
    ----------
    lon, lat : float
        WGS84 decimal degrees.
    precision : int
        Digits per axis, 0-5 (5 = 1 m, 0 = 100 km square only).

    Returns
    -------
    str
        e.g. '47PPR6125821327'.

    Raises
    ------
    ValueError
        If the point is outside the UTM bands or precision is invalid.
    """
    if not 0 <= precision <= 5:
        raise ValueError(f"MGRS precision must be 0-5, got {precision!r}")
    if not (math.isfinite(lon) and math.isfinite(lat)):
        raise ValueError("MGRS requires finite coordinates")
    band = latitude_band(lat)
    zone = utm_zone_for(lon, lat)
    easting, northing, zone, _ = lonlat_to_utm(lon, lat, zone=zone)

    column = int(easting // _SQUARE)
    columns = _column_letters(zone)
    if not 1 <= column <= len(columns):
        raise ValueError(f"Easting {easting:.1f} is outside zone {zone}")
    row = (int(northing // _SQUARE) + _row_offset(zone)) % len(_ROW_LETTERS)
    square = columns[column - 1] + _ROW_LETTERS[row]

    digits = ""
    if precision:
        e = f"{int(easting % _SQUARE):05d}"[:precision]
        n = f"{int(northing % _SQUARE):05d}"[:precision]
        digits = e + n
    return f"{zone:02d}{band}{square}{digits}"


def from_mgrs(text: str) -> Tuple[float, float]:
    """Decode an MGRS string to the (lon, lat) centre of its cell.

    Whitespace is ignored and letters are case-insensitive.

    Parameters
    ----------
    text : str
        MGRS reference, e.g. '47P PR 61258 21327'.

    Returns
    -------
    Tuple[float, float]
        (lon, lat) in WGS84 decimal degrees.

    Raises
    ------
    ValueError
        If the string is not a valid UTM-based MGRS reference.
    """
    compact = re.sub(r"\s+", "", text or "").upper()
    match = _MGRS_RE.match(compact)
    if match is None:
        raise ValueError(f"Not an MGRS reference: {text!r}")
    zone = int(match.group(1))
    band, col_letter, row_letter, digits = match.group(2, 3, 4, 5)
    if not 1 <= zone <= 60:
        raise ValueError(f"MGRS zone must be 1-60, got {zone}")
    if len(digits) % 2 or len(digits) > 10:
        raise ValueError(f"MGRS digits must be an even count up to 10: {text!r}")

    columns = _column_letters(zone)
    if col_letter not in columns:
        raise ValueError(
            f"Column letter {col_letter!r} is not used in zone {zone}"
        )
    easting = (columns.index(col_letter) + 1) * _SQUARE
    row = (_ROW_LETTERS.index(row_letter) - _row_offset(zone)) % len(_ROW_LETTERS)
    northing = row * _SQUARE

    precision = len(digits) // 2
    if precision:
        scale = 10 ** (5 - precision)
        easting += int(digits[:precision]) * scale
        northing += int(digits[precision:]) * scale
        half_cell = scale / 2.0
    else:
        half_cell = _SQUARE / 2.0
    easting += half_cell
    northing += half_cell

    hemisphere = "N" if band >= "N" else "S"
    floor = _band_floor(zone, band, hemisphere)
    while northing < floor:
        northing += _ROW_CYCLE
    lon, lat = utm_to_lonlat(zone, hemisphere, easting, northing)
    return lon, lat


def _band_floor(zone: int, band: str, hemisphere: str) -> float:
    """Lowest northing a reference in ``band`` can have.

    Taken at the central meridian and at the zone edge (parallels curve
    in opposite directions in the two hemispheres), then widened by one
    100 km square.
    """
    south_lat = -80.0 + 8.0 * LATITUDE_BANDS.index(band)
    central = zone * 6.0 - 183.0
    lowest = min(
        lonlat_to_utm(central, south_lat, zone=zone, hemisphere=hemisphere)[1],
        lonlat_to_utm(central + 3.0, south_lat, zone=zone, hemisphere=hemisphere)[1],
    )
    return math.floor(lowest / _SQUARE) * _SQUARE - _SQUARE

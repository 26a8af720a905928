# -*- coding: utf-8 -*-
"""
Coordinate Codec - Free-text coordinate parsing and display formatting.

Parses user-entered coordinates in MGRS, decimal degrees (including
degree-minute and degree-minute-second forms) and UTM into a canonical
WGS84 ``Coordinate``, and formats coordinates back into any of those
systems for cursor readouts and map grid labels.

Parsing never raises: each per-format parser returns ``None`` when its
grammar or range check fails, and ``parse_coordinate`` tries them in the
fixed order MGRS, decimal degrees, UTM, returning a ``ParseError`` only
when every format has been rejected. Formatting never raises either;
invalid input formats to an empty string.

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
import logging
import math
import re
from dataclasses import dataclass
from enum import Enum
from typing import Callable, List, Optional, Tuple, Union

# GMTK internal
from gmtk.core.config import GmtkConfig
from gmtk.core.mgrs import from_mgrs, to_mgrs
from gmtk.core.utm import lonlat_to_utm, utm_to_lonlat

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Coordinate:
    """A WGS84 position in decimal degrees.

    Attributes
    ----------
    lon : float
        Longitude in [-180, 180].
    lat : float
        Latitude in [-90, 90].
    """

    lon: float
    lat: float

    def __iter__(self):
        yield self.lon
        yield self.lat

    @property
    def is_valid(self) -> bool:
        """Whether both components are finite and in range."""
        return (
            math.isfinite(self.lon) and math.isfinite(self.lat)
            and -180.0 <= self.lon <= 180.0
            and -90.0 <= self.lat <= 90.0
        )

    def to_geojson(self) -> dict:
        """GeoJSON Point geometry."""
        return {'type': 'Point', 'coordinates': [self.lon, self.lat]}

    @classmethod
    def from_geojson(cls, geometry: dict) -> 'Coordinate':
        """Build from a GeoJSON Point geometry."""
        if geometry.get('type') != 'Point':
            raise ValueError(f"Expected a Point geometry, got {geometry.get('type')!r}")
        lon, lat = geometry['coordinates'][:2]
        return cls(float(lon), float(lat))


class CoordinateFormat(Enum):
    """Coordinate notations understood by the codec."""

    DECIMAL_DEGREE = "DD"
    UTM = "UTM"
    MGRS = "MGRS"


class ParseErrorKind(Enum):
    """Reasons a coordinate string was rejected."""

    UNRECOGNIZED = "unrecognized"


@dataclass(frozen=True)
class ParseError:
    """Returned by ``parse_coordinate`` when no format matched.

    Attributes
    ----------
    text : str
        The input that could not be interpreted.
    kind : ParseErrorKind
    """

    text: str
    kind: ParseErrorKind = ParseErrorKind.UNRECOGNIZED

    @property
    def message(self) -> str:
        return "could not interpret coordinate"

    def __str__(self) -> str:
        return f"{self.message}: {self.text!r}"


ParseResult = Union[Coordinate, ParseError]


# ---------------------------------------------------------------------------
# Decimal degrees
# ---------------------------------------------------------------------------

_DD_NUM = r"-?\d+(?:\.\d+)?"
_DM_PART = r"(\d+)°\s*(\d+(?:\.\d+)?)'"
_DMS_PART = r"(\d{1,3})°\s*(\d{1,2})'\s*(\d+(?:\.\d+)?)\""

_DD_RE = re.compile(rf"^({_DD_NUM})\s*(?:,|\s+)\s*({_DD_NUM})$")
_DM_RE = re.compile(
    rf"^{_DM_PART}\s*([NS])?\s+{_DM_PART}\s*([EW])?$", re.IGNORECASE,
)
_DMS_RE = re.compile(
    rf"^{_DMS_PART}\s*([NS])?\s+{_DMS_PART}\s*([EW])?$", re.IGNORECASE,
)


def _signed(magnitude: float, hemisphere: Optional[str], negative: str) -> float:
    if hemisphere and hemisphere.upper() == negative:
        return -magnitude
    return magnitude


def parse_decimal_degree(text: str) -> Optional[Coordinate]:
    """Parse 'lat,lon', 'lat lon', D°M' or D°M'S\" pairs.

    Latitude comes first. Hemisphere letters are optional; S and W
    negate the magnitude. Results outside [-90, 90] x [-180, 180] are
    rejected.

    Returns
    -------
    Optional[Coordinate]
    """
    value = text.strip()
    lat: Optional[float] = None
    lon: Optional[float] = None

    match = _DD_RE.match(value)
    if match:
        lat = float(match.group(1))
        lon = float(match.group(2))
    elif _DM_RE.match(value):
        g = _DM_RE.match(value).groups()
        lat = _signed(float(g[0]) + float(g[1]) / 60.0, g[2], "S")
        lon = _signed(float(g[3]) + float(g[4]) / 60.0, g[5], "W")
    elif _DMS_RE.match(value):
        g = _DMS_RE.match(value).groups()
        lat = _signed(
            float(g[0]) + float(g[1]) / 60.0 + float(g[2]) / 3600.0, g[3], "S",
        )
        lon = _signed(
            float(g[4]) + float(g[5]) / 60.0 + float(g[6]) / 3600.0, g[7], "W",
        )

    if lat is None or lon is None:
        return None
    coord = Coordinate(lon, lat)
    if not coord.is_valid:
        return None
    return coord


# ---------------------------------------------------------------------------
# UTM
# ---------------------------------------------------------------------------

_UTM_ZONED_RE = re.compile(
    r"^(\d{1,2})([NS])[:\s]+(\d+(?:\.\d+)?)(?:\s*,\s*|\s+)(\d+(?:\.\d+)?)$",
    re.IGNORECASE,
)
_UTM_BARE_RE = re.compile(
    r"^(-?\d+(?:\.\d+)?)(?:\s*,\s*|\s+)(-?\d+(?:\.\d+)?)$"
)


def parse_utm(
    text: str,
    default_zone: int = 47,
    default_hemisphere: str = "N",
) -> Optional[Coordinate]:
    """Parse '<zone><N|S>: <easting> <northing>' or '<easting> <northing>'.

    Zoneless input uses ``default_zone`` / ``default_hemisphere``.

    Returns
    -------
    Optional[Coordinate]
    """
    value = text.strip()
    zone, hemisphere = default_zone, default_hemisphere
    match = _UTM_ZONED_RE.match(value)
    if match:
        zone = int(match.group(1))
        hemisphere = match.group(2).upper()
        easting = float(match.group(3))
        northing = float(match.group(4))
    else:
        match = _UTM_BARE_RE.match(value)
        if match is None:
            return None
        easting = float(match.group(1))
        northing = float(match.group(2))

    try:
        lon, lat = utm_to_lonlat(zone, hemisphere, easting, northing)
    except ValueError as e:
        logger.debug("UTM rejected %r: %s", text, e)
        return None
    coord = Coordinate(lon, lat)
    return coord if coord.is_valid else None


# ---------------------------------------------------------------------------
# MGRS
# ---------------------------------------------------------------------------

def parse_mgrs(text: str) -> Optional[Coordinate]:
    """Parse an MGRS reference (whitespace ignored).

    Returns
    -------
    Optional[Coordinate]
        Centre of the referenced grid cell.
    """
    try:
        lon, lat = from_mgrs(text)
    except ValueError as e:
        logger.debug("MGRS rejected %r: %s", text, e)
        return None
    coord = Coordinate(lon, lat)
    return coord if coord.is_valid else None


# ---------------------------------------------------------------------------
# Dispatch
# ---------------------------------------------------------------------------

def _parsers(
    default_zone: int,
    default_hemisphere: str,
) -> List[Tuple[CoordinateFormat, Callable[[str], Optional[Coordinate]]]]:
    """Ordered trial table: MGRS, then decimal degrees, then UTM."""
    return [
        (CoordinateFormat.MGRS, parse_mgrs),
        (CoordinateFormat.DECIMAL_DEGREE, parse_decimal_degree),
        (CoordinateFormat.UTM,
         lambda t: parse_utm(t, default_zone, default_hemisphere)),
    ]


def parse_coordinate(
    text: str,
    default_zone: int = 47,
    default_hemisphere: str = "N",
) -> ParseResult:
    """Interpret free-text coordinates.

    Parameters
    ----------
    text : str
        User input in MGRS, decimal degrees (DD / DM / DMS) or UTM.
    default_zone : int
        UTM zone for easting/northing input without a zone.
    default_hemisphere : str
        UTM hemisphere for input without a zone.

    Returns
    -------
    Coordinate or ParseError
        The first format that parses and range-checks wins.
    """
    if not isinstance(text, str) or not text.strip():
        return ParseError(text if isinstance(text, str) else repr(text))
    for fmt, parser in _parsers(default_zone, default_hemisphere):
        coord = parser(text)
        if coord is not None:
            logger.debug("Parsed %r as %s: %s", text, fmt.value, coord)
            return coord
    return ParseError(text)


def parse_coordinate_as(
    text: str,
    fmt: Union[str, CoordinateFormat],
    default_zone: int = 47,
    default_hemisphere: str = "N",
) -> ParseResult:
    """Interpret ``text`` in a single, caller-chosen format."""
    fmt = CoordinateFormat(fmt)
    if isinstance(text, str) and text.strip():
        for candidate, parser in _parsers(default_zone, default_hemisphere):
            if candidate is fmt:
                coord = parser(text)
                if coord is not None:
                    return coord
    return ParseError(text if isinstance(text, str) else repr(text))


# ---------------------------------------------------------------------------
# Formatting
# ---------------------------------------------------------------------------

def format_coordinate(
    coord: Union[Coordinate, Tuple[float, float]],
    fmt: Union[str, CoordinateFormat],
    precision: int = 6,
    zone: Optional[int] = None,
    mgrs_precision: int = 5,
) -> str:
    """Format a coordinate for display.

    Parameters
    ----------
    coord : Coordinate or (lon, lat)
    fmt : str or CoordinateFormat
        Target notation.
    precision : int
        Decimal places for DD and UTM output.
    zone : Optional[int]
        Force a UTM zone; defaults to the zone the point falls in.
    mgrs_precision : int
        Digits per axis for MGRS output.

    Returns
    -------
    str
        DD: 'lat, lon'. UTM: 'easting, northing'. MGRS: grid string.
        Empty string for invalid input.
    """
    try:
        fmt = CoordinateFormat(fmt)
        values = list(coord)
        lon, lat = float(values[0]), float(values[1])
        if not Coordinate(lon, lat).is_valid:
            return ""
        if fmt is CoordinateFormat.DECIMAL_DEGREE:
            return f"{lat:.{precision}f}, {lon:.{precision}f}"
        if fmt is CoordinateFormat.UTM:
            easting, northing, _, _ = lonlat_to_utm(lon, lat, zone=zone)
            return f"{easting:.{precision}f}, {northing:.{precision}f}"
        return to_mgrs(lon, lat, mgrs_precision)
    except (TypeError, ValueError, IndexError) as e:
        logger.debug("Cannot format %r as %s: %s", coord, fmt, e)
        return ""


class CoordinateSystem(Enum):
    """Display systems offered by the cursor readout and grid labels."""

    DD = "DD"
    UTM47 = "UTM47"
    UTM48 = "UTM48"
    MGRS = "MGRS"

    @property
    def label(self) -> str:
        return _SYSTEM_LABELS[self]


_SYSTEM_LABELS = {
    CoordinateSystem.DD: "GCS",
    CoordinateSystem.UTM47: "WGS 1984 UTM 47",
    CoordinateSystem.UTM48: "WGS 1984 UTM 48",
    CoordinateSystem.MGRS: "MGRS",
}


def format_for_system(
    coord: Union[Coordinate, Tuple[float, float]],
    system: Union[str, CoordinateSystem],
) -> str:
    """Format for one of the fixed display systems (GCS, UTM 47/48, MGRS)."""
    try:
        system = CoordinateSystem(system)
    except ValueError:
        return ""
    if system is CoordinateSystem.DD:
        return format_coordinate(coord, CoordinateFormat.DECIMAL_DEGREE)
    if system is CoordinateSystem.MGRS:
        return format_coordinate(coord, CoordinateFormat.MGRS)
    zone = 47 if system is CoordinateSystem.UTM47 else 48
    return format_coordinate(coord, CoordinateFormat.UTM, zone=zone)


class CoordinateCodec:
    """Parse and format coordinates with configured regional defaults.

    Parameters
    ----------
    config : Optional[GmtkConfig]
        Supplies the default UTM zone / hemisphere and MGRS precision.
    """

    def __init__(self, config: Optional[GmtkConfig] = None) -> None:
        self._config = config or GmtkConfig()

    def parse(self, text: str) -> ParseResult:
        return parse_coordinate(
            text,
            default_zone=self._config.default_utm_zone,
            default_hemisphere=self._config.default_hemisphere,
        )

    def format(
        self,
        coord: Union[Coordinate, Tuple[float, float]],
        fmt: Union[str, CoordinateFormat],
        precision: int = 6,
        zone: Optional[int] = None,
    ) -> str:
        return format_coordinate(
            coord, fmt, precision=precision, zone=zone,
            mgrs_precision=self._config.mgrs_precision,
        )

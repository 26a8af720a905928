# -*- coding: utf-8 -*-
"""
Measurement Engine - Interactive length and area measurement.

A drawing state machine driven by map pointer events::

    IDLE --start_drawing(mode)--> DRAWING(mode, vertices)
    DRAWING --add_vertex--> DRAWING
    DRAWING --finish--> IDLE  (+ MeasurementFeature when enough vertices)
    DRAWING --cancel--> IDLE

Finished measurements keep their value in SI base units (meters or
square meters) and a display string in the active unit. Changing the
unit only reformats the stored values; geometry is never re-measured.

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
import uuid
from enum import Enum
from typing import Dict, List, Optional, Sequence, Tuple, Union

# GMTK internal
from gmtk.core.config import GmtkConfig
from gmtk.core.coordinates import Coordinate
from gmtk.core.geodesy import (
    BBox,
    bounding_box,
    interior_point,
    path_length,
    ring_area,
)
from gmtk.core.units import (
    AreaUnit,
    LengthUnit,
    abbreviation,
    area_unit,
    convert_area,
    convert_length,
    length_unit,
)

logger = logging.getLogger(__name__)

SQM_PER_RAI = 1600.0
SQM_PER_NGAN = 400.0
SQM_PER_WAH = 4.0


class MeasurementMode(Enum):
    """What is being measured."""

    LENGTH = "length"
    AREA = "area"

    @property
    def min_vertices(self) -> int:
        return 2 if self is MeasurementMode.LENGTH else 3


class DrawingState(Enum):
    """Engine state."""

    IDLE = "idle"
    DRAWING = "drawing"


def format_number(value: float, decimals: int = 2) -> str:
    """Group thousands and keep at most ``decimals`` fraction digits.

    Trailing zeros are dropped: 1234.5 -> '1,234.5', 2.0 -> '2'.
    """
    text = f"{value:,.{decimals}f}"
    if '.' in text:
        text = text.rstrip('0').rstrip('.')
    if text in ('-0', ''):
        text = '0'
    return text


def sqm_to_rai_ngan_wah(sqm: float, decimals: int = 2) -> str:
    """Thai land-area breakdown of a square meter value.

    1 rai = 1600 sqm, 1 ngan = 400 sqm, 1 square wah = 4 sqm.

    >>> sqm_to_rai_ngan_wah(2000)
    '1 rai 1 ngan 0 wah'
    """
    rai = math.floor(sqm / SQM_PER_RAI)
    remainder = sqm % SQM_PER_RAI
    ngan = math.floor(remainder / SQM_PER_NGAN)
    wah = (remainder % SQM_PER_NGAN) / SQM_PER_WAH
    return (
        f"{format_number(rai, 0)} rai {ngan} ngan "
        f"{format_number(wah, decimals)} wah"
    )


def display_value(
    value: float,
    mode: MeasurementMode,
    unit: Union[str, LengthUnit, AreaUnit],
    decimals: int = 2,
) -> str:
    """Display string for an SI value in ``unit``.

    Parameters
    ----------
    value : float
        Meters for LENGTH, square meters for AREA.
    mode : MeasurementMode
    unit : str, LengthUnit or AreaUnit
        Must match the mode.
    decimals : int
        Maximum fraction digits.

    Returns
    -------
    str
        E.g. '1.08 km', '2.5 ha' or '1 rai 1 ngan 0 wah'.
    """
    if mode is MeasurementMode.LENGTH:
        unit = length_unit(unit)
        converted = convert_length(value, unit)
    else:
        unit = area_unit(unit)
        if unit is AreaUnit.RAI:
            return sqm_to_rai_ngan_wah(value, decimals)
        converted = convert_area(value, unit)
    return f"{format_number(converted, decimals)} {abbreviation(unit)}"


def _vertex(coord: Union[Coordinate, Sequence[float]]) -> Tuple[float, float]:
    lon, lat = tuple(coord)[:2]
    return float(lon), float(lat)


def _line_geometry(vertices: Sequence[Tuple[float, float]]) -> dict:
    return {'type': 'LineString', 'coordinates': [list(v) for v in vertices]}


def _polygon_geometry(vertices: Sequence[Tuple[float, float]]) -> dict:
    ring = [list(v) for v in vertices]
    ring.append(list(vertices[0]))
    return {'type': 'Polygon', 'coordinates': [ring]}


def _feature(geometry: dict, properties: Optional[dict] = None) -> dict:
    return {'type': 'Feature', 'geometry': geometry, 'properties': properties or {}}


def _collection(features: List[dict]) -> dict:
    return {'type': 'FeatureCollection', 'features': features}


class MeasurementFeature:
    """A finished measurement.

    Parameters
    ----------
    id : str
    mode : MeasurementMode
    vertices : List[Tuple[float, float]]
        (lon, lat) vertices; the area ring is stored open.
    value : float
        Meters or square meters.
    display : str
        Formatted value in the active unit.
    label_position : Tuple[float, float]
        Where the host draws the display string.
    """

    def __init__(
        self,
        id: str,
        mode: MeasurementMode,
        vertices: List[Tuple[float, float]],
        value: float,
        display: str,
        label_position: Tuple[float, float],
    ) -> None:
        self.id = id
        self.mode = mode
        self.vertices = vertices
        self.value = value
        self.display = display
        self.label_position = label_position

    def geometry(self) -> dict:
        if self.mode is MeasurementMode.LENGTH:
            return _line_geometry(self.vertices)
        return _polygon_geometry(self.vertices)

    def to_geojson(self) -> dict:
        """GeoJSON Feature with id, mode, value and display properties."""
        return _feature(self.geometry(), {
            'id': self.id,
            'mode': self.mode.value,
            'value': self.value,
            'display': self.display,
            'labelPosition': list(self.label_position),
        })

    def __repr__(self) -> str:
        return (
            f"MeasurementFeature(id={self.id!r}, mode={self.mode.value}, "
            f"value={self.value:.3f}, display={self.display!r})"
        )


class MeasurementEngine:
    """Length / area drawing state machine with a result set.

    Parameters
    ----------
    length_unit : str or LengthUnit
        Initial length display unit. Defaults to the configured unit.
    area_unit : str or AreaUnit
        Initial area display unit. Defaults to the configured unit.
    config : Optional[GmtkConfig]
        Supplies default units and display decimals.
    """

    def __init__(
        self,
        length_unit: Union[str, LengthUnit, None] = None,
        area_unit: Union[str, AreaUnit, None] = None,
        config: Optional[GmtkConfig] = None,
    ) -> None:
        config = config or GmtkConfig()
        self._decimals = config.display_decimals
        self._length_unit = _coerce_length(
            length_unit if length_unit is not None else config.default_length_unit
        )
        self._area_unit = _coerce_area(
            area_unit if area_unit is not None else config.default_area_unit
        )
        self._state = DrawingState.IDLE
        self._mode: Optional[MeasurementMode] = None
        self._vertices: List[Tuple[float, float]] = []
        self._preview: Optional[Tuple[float, float]] = None
        self._features: Dict[str, MeasurementFeature] = {}

    # --- State ---

    @property
    def state(self) -> DrawingState:
        return self._state

    @property
    def mode(self) -> Optional[MeasurementMode]:
        """Mode of the drawing in progress, or None when idle."""
        return self._mode

    @property
    def vertices(self) -> List[Tuple[float, float]]:
        """Committed vertices of the drawing in progress."""
        return list(self._vertices)

    @property
    def length_unit(self) -> LengthUnit:
        return self._length_unit

    @property
    def area_unit(self) -> AreaUnit:
        return self._area_unit

    @property
    def features(self) -> List[MeasurementFeature]:
        """Finished measurements in creation order."""
        return list(self._features.values())

    def get(self, feature_id: str) -> Optional[MeasurementFeature]:
        return self._features.get(feature_id)

    # --- Drawing ---

    def start_drawing(self, mode: Union[str, MeasurementMode]) -> None:
        """Begin a new drawing. Restarting while drawing drops the vertices."""
        mode = MeasurementMode(mode)
        if self._state is DrawingState.DRAWING:
            logger.debug("Restarting drawing, dropping %d vertices", len(self._vertices))
        self._state = DrawingState.DRAWING
        self._mode = mode
        self._vertices = []
        self._preview = None
        logger.debug("Drawing started: %s", mode.value)

    def add_vertex(self, coord: Union[Coordinate, Sequence[float]]) -> bool:
        """Append a vertex. Returns False (and does nothing) when idle."""
        if self._state is not DrawingState.DRAWING:
            return False
        self._vertices.append(_vertex(coord))
        self._preview = None
        return True

    def preview_vertex(self, coord: Optional[Union[Coordinate, Sequence[float]]]) -> None:
        """Set the ephemeral cursor point; None clears it."""
        if self._state is not DrawingState.DRAWING:
            return
        self._preview = _vertex(coord) if coord is not None else None

    def _preview_vertices(self) -> List[Tuple[float, float]]:
        points = list(self._vertices)
        if self._preview is not None:
            points.append(self._preview)
        return points

    def preview_geometry(self) -> dict:
        """In-progress drawing as a GeoJSON FeatureCollection.

        A LineString for length (and for an area with only two points),
        a closed Polygon for an area with three or more points. Empty
        when idle or with fewer than two points.
        """
        if self._state is not DrawingState.DRAWING:
            return _collection([])
        points = self._preview_vertices()
        if len(points) < 2:
            return _collection([])
        if self._mode is MeasurementMode.AREA and len(points) >= 3:
            geometry = _polygon_geometry(points)
        else:
            geometry = _line_geometry(points)
        properties = {}
        display = self.preview_display()
        if display is not None:
            properties['display'] = display
        return _collection([_feature(geometry, properties)])

    def preview_display(self) -> Optional[str]:
        """Live value of the in-progress drawing including the cursor point."""
        if self._state is not DrawingState.DRAWING:
            return None
        points = self._preview_vertices()
        if len(points) < self._mode.min_vertices:
            return None
        return self._display(self._mode, self._measure(self._mode, points))

    def finish(self) -> Optional[MeasurementFeature]:
        """Finish the drawing and return to IDLE.

        Returns
        -------
        Optional[MeasurementFeature]
            The stored measurement, or None when the drawing had too few
            vertices (or none was in progress) and was discarded.
        """
        if self._state is not DrawingState.DRAWING:
            return None
        mode, vertices = self._mode, self._vertices
        self._reset()

        if len(vertices) < mode.min_vertices:
            logger.debug(
                "Discarding %s drawing with %d vertices", mode.value, len(vertices),
            )
            return None

        value = self._measure(mode, vertices)
        if mode is MeasurementMode.LENGTH:
            label_position = vertices[-1]
        else:
            label_position = interior_point(vertices)
        feature = MeasurementFeature(
            id=uuid.uuid4().hex,
            mode=mode,
            vertices=vertices,
            value=value,
            display=self._display(mode, value),
            label_position=label_position,
        )
        self._features[feature.id] = feature
        logger.debug("Measurement %s: %s", feature.id, feature.display)
        return feature

    def cancel(self) -> None:
        """Discard the drawing in progress."""
        if self._state is DrawingState.DRAWING:
            logger.debug("Drawing cancelled")
        self._reset()

    stop_drawing = cancel

    def _reset(self) -> None:
        self._state = DrawingState.IDLE
        self._mode = None
        self._vertices = []
        self._preview = None

    # --- Results ---

    def set_unit(
        self,
        length_unit: Union[str, LengthUnit, None] = None,
        area_unit: Union[str, AreaUnit, None] = None,
    ) -> None:
        """Change display units and reformat the stored measurements.

        Only features of the changed mode are reformatted, from their
        stored values.

        Raises
        ------
        ValueError
            If a unit is unknown. Neither unit changes in that case.
        """
        new_length = None if length_unit is None else _coerce_length(length_unit)
        new_area = None if area_unit is None else _coerce_area(area_unit)

        changed = set()
        if new_length is not None:
            self._length_unit = new_length
            changed.add(MeasurementMode.LENGTH)
        if new_area is not None:
            self._area_unit = new_area
            changed.add(MeasurementMode.AREA)
        for feature in self._features.values():
            if feature.mode in changed:
                feature.display = self._display(feature.mode, feature.value)

    def remove(self, feature_id: str) -> bool:
        """Delete a finished measurement. Returns False if unknown."""
        removed = self._features.pop(feature_id, None) is not None
        if removed:
            logger.debug("Removed measurement %s", feature_id)
        return removed

    def clear(self) -> None:
        """Delete every finished measurement."""
        self._features.clear()

    def result_collection(self) -> dict:
        """Finished measurements as a GeoJSON FeatureCollection."""
        return _collection([f.to_geojson() for f in self._features.values()])

    @staticmethod
    def zoom_extent(
        target: Union[MeasurementFeature, dict, Coordinate],
    ) -> BBox:
        """Bounding box (min_lon, min_lat, max_lon, max_lat) to frame.

        Parameters
        ----------
        target : MeasurementFeature, GeoJSON geometry / Feature, or
            Coordinate. A Point yields a degenerate box.

        Raises
        ------
        ValueError
            If the geometry type is not Point, LineString or Polygon.
        """
        if isinstance(target, MeasurementFeature):
            return bounding_box(target.vertices)
        if isinstance(target, Coordinate):
            return (target.lon, target.lat, target.lon, target.lat)
        geometry = target.get('geometry', target) if target.get('type') == 'Feature' else target
        kind = geometry.get('type')
        coords = geometry.get('coordinates')
        if kind == 'Point':
            lon, lat = coords[:2]
            return (lon, lat, lon, lat)
        if kind == 'LineString':
            return bounding_box(coords)
        if kind == 'Polygon':
            return bounding_box(coords[0])
        raise ValueError(f"Cannot compute extent of geometry type {kind!r}")

    # --- Helpers ---

    @staticmethod
    def _measure(mode: MeasurementMode, vertices: Sequence) -> float:
        if mode is MeasurementMode.LENGTH:
            return path_length(vertices)
        return ring_area(vertices)

    def _display(self, mode: MeasurementMode, value: float) -> str:
        unit = self._length_unit if mode is MeasurementMode.LENGTH else self._area_unit
        return display_value(value, mode, unit, self._decimals)


def _coerce_length(unit: Union[str, LengthUnit]) -> LengthUnit:
    return length_unit(unit)


def _coerce_area(unit: Union[str, AreaUnit]) -> AreaUnit:
    return area_unit(unit)

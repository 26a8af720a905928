# -*- coding: utf-8 -*-
"""
Map Grid Labels - Edge labels for the interior grid lines of a map print.

A printed map is divided into ``cols`` x ``rows`` cells; each interior
column line is labelled along the bottom edge and each interior row
line along the left edge, in the selected coordinate system. Every
label comes in a short on-screen form and a longer export form.

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
from typing import List, Tuple, Union

# GMTK internal
from gmtk.core.coordinates import CoordinateSystem, format_for_system

GRID_COLS = 4
GRID_ROWS = 3


class GridLabel:
    """One grid-line label.

    Parameters
    ----------
    key : str
        'col<i>' or 'row<i>'.
    percent : float
        Position of the line along the edge, 0-100.
    label : str
        Short on-screen text.
    export_label : str
        Full-precision text for exported prints.
    """

    def __init__(
        self,
        key: str,
        percent: float,
        label: str,
        export_label: str,
    ) -> None:
        self.key = key
        self.percent = percent
        self.label = label
        self.export_label = export_label

    def to_dict(self) -> dict:
        return {
            'key': self.key,
            'percent': self.percent,
            'value': self.label,
            'exportValue': self.export_label,
        }

    def __repr__(self) -> str:
        return f"GridLabel({self.key!r}, {self.percent:.1f}%, {self.export_label!r})"


def _split(text: str, index: int) -> str:
    parts = text.split(',')
    return parts[index].strip() if len(parts) > index else ''


def _labels(
    coord_string: str,
    system: CoordinateSystem,
    axis: int,
    degrees: float,
) -> Tuple[str, str]:
    """Short and export text for one line.

    ``axis`` selects the component of a 'lat, lon' / 'easting, northing'
    string: 1 for column lines (lon / easting is read from the DD
    second or UTM first slot), 0 for row lines.
    """
    if system is CoordinateSystem.DD:
        label = f"{degrees:.4f}"
        export = _split(coord_string, axis)
    elif system is CoordinateSystem.MGRS:
        label = export = coord_string
    else:
        utm_index = 0 if axis == 1 else 1
        export = _split(coord_string, utm_index)
        label = export.split('.')[0]
    return label or f"{degrees:.4f}", export or f"{degrees:.5f}"


def grid_labels(
    bounds: Tuple[float, float, float, float],
    system: Union[str, CoordinateSystem] = CoordinateSystem.DD,
    cols: int = GRID_COLS,
    rows: int = GRID_ROWS,
) -> Tuple[List[GridLabel], List[GridLabel]]:
    """Compute labels for the interior grid lines of a map extent.

    Parameters
    ----------
    bounds : Tuple[float, float, float, float]
        (xmin, ymin, xmax, ymax) in decimal degrees.
    system : str or CoordinateSystem
        Label coordinate system.
    cols, rows : int
        Number of grid cells across and down.

    Returns
    -------
    Tuple[List[GridLabel], List[GridLabel]]
        (column labels, row labels). Column lines are labelled at the
        bottom edge (ymin), row lines at the left edge (xmin).
    """
    system = CoordinateSystem(system)
    xmin, ymin, xmax, ymax = bounds

    columns = []
    for index in range(cols - 1):
        fraction = (index + 1) / cols
        lon = xmin + fraction * (xmax - xmin)
        text = format_for_system((lon, ymin), system)
        label, export = _labels(text, system, 1, lon)
        columns.append(GridLabel(f"col{index}", fraction * 100, label, export))

    row_labels = []
    for index in range(rows - 1):
        fraction = (index + 1) / rows
        lat = ymin + fraction * (ymax - ymin)
        text = format_for_system((xmin, lat), system)
        label, export = _labels(text, system, 0, lat)
        row_labels.append(GridLabel(f"row{index}", fraction * 100, label, export))

    return columns, row_labels

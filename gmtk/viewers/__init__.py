# -*- coding: utf-8 -*-
"""
Viewers Module - Qt adapters between a host map widget and GMTK.

Components
----------
- ``map_bridge`` - Pointer events to MeasurementEngine, GeoJSON out
  (MapEventBridge)
- ``coordinate_bar`` - Throttled cursor coordinate status bar
  (CoordinateBar)

Both fall back to stubs raising ``ImportError`` when PyQt6 is not
installed.

Dependencies
------------
PyQt6 (optional)

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

from gmtk.viewers.coordinate_bar import CoordinateBar
from gmtk.viewers.map_bridge import MapEventBridge

__all__ = ['CoordinateBar', 'MapEventBridge']

# -*- coding: utf-8 -*-
"""
Core Module - Non-GUI coordinate, symbology and measurement logic.

Contains unit conversion, geodesic math, UTM / MGRS projection helpers,
the coordinate codec, map grid labelling, SIDC composition, the
annotation composer, and the measurement state machine.

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

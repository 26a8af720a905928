# -*- coding: utf-8 -*-
"""
GMTK - GEOINT Map Tools Kit.

Coordinate and symbology engine behind the map tools of a GEOINT
console: free-text coordinate parsing and grid-label formatting across
decimal degrees, UTM and MGRS; APP-6 / MIL-STD-2525 symbol
identification code composition; and an interactive length / area
measurement state machine. Rendering is left to the host map.

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

__version__ = "0.1.0"


def parse(text, **kwargs):
    """Parse free-text coordinates.

    Re-exported from ``gmtk.core.coordinates.parse_coordinate``.
    See :func:`gmtk.core.coordinates.parse_coordinate` for full
    documentation.
    """
    from gmtk.core.coordinates import parse_coordinate
    return parse_coordinate(text, **kwargs)


def compose(base_code, fields):
    """Compose a 20-character SIDC.

    Re-exported from ``gmtk.core.sidc.compose_sidc``.
    """
    from gmtk.core.sidc import compose_sidc
    return compose_sidc(base_code, fields)


__all__: list = ["parse", "compose"]

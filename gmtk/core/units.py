# -*- coding: utf-8 -*-
"""
Unit Conversion - Length and area unit tables for the measurement tool.

All measured values are carried in SI base units (meters, square
meters). This module converts base values into display units and back.
No rounding is applied here; display formatting decides precision.

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
from enum import Enum
from typing import Dict, Union


class LengthUnit(Enum):
    """Supported length units. Base unit is the meter."""

    METER = "meter"
    KM = "km"
    FOOT = "foot"
    YARD = "yard"
    MILE = "mile"
    NAUTICAL_MILE = "nauticmile"


class AreaUnit(Enum):
    """Supported area units. Base unit is the square meter.

    ``RAI`` is the traditional Thai land unit. Measurement display
    renders it as a rai / ngan / wah breakdown rather than through the
    linear factor below.
    """

    SQM = "sqm"
    SQKM = "sqkm"
    HECTARE = "hectare"
    ACRE = "acre"
    SQMILE = "sqmile"
    SQNAUTICAL_MILE = "sqnauticmile"
    RAI = "rai"


# Base units per one display unit
_METERS_PER_UNIT: Dict[LengthUnit, float] = {
    LengthUnit.METER: 1.0,
    LengthUnit.KM: 1000.0,
    LengthUnit.FOOT: 0.3048,
    LengthUnit.YARD: 0.9144,
    LengthUnit.MILE: 1609.344,
    LengthUnit.NAUTICAL_MILE: 1852.0,
}

_SQM_PER_UNIT: Dict[AreaUnit, float] = {
    AreaUnit.SQM: 1.0,
    AreaUnit.SQKM: 1e6,
    AreaUnit.HECTARE: 1e4,
    AreaUnit.ACRE: 4046.8564224,
    AreaUnit.SQMILE: 2_589_988.110336,
    AreaUnit.SQNAUTICAL_MILE: 3_429_904.0,
    AreaUnit.RAI: 1600.0,
}

ABBREVIATIONS: Dict[Union[LengthUnit, AreaUnit], str] = {
    LengthUnit.METER: "m",
    LengthUnit.KM: "km",
    LengthUnit.FOOT: "ft",
    LengthUnit.YARD: "yd",
    LengthUnit.MILE: "mi",
    LengthUnit.NAUTICAL_MILE: "NM",
    AreaUnit.SQM: "m²",
    AreaUnit.SQKM: "km²",
    AreaUnit.HECTARE: "ha",
    AreaUnit.ACRE: "ac",
    AreaUnit.SQMILE: "mi²",
    AreaUnit.SQNAUTICAL_MILE: "NM²",
    AreaUnit.RAI: "rai",
}


def length_unit(unit: Union[str, LengthUnit]) -> LengthUnit:
    """Coerce a unit code to a LengthUnit.

    Raises
    ------
    ValueError
        If the code is not a known length unit.
    """
    if isinstance(unit, LengthUnit):
        return unit
    return LengthUnit(unit)


def area_unit(unit: Union[str, AreaUnit]) -> AreaUnit:
    """Coerce a unit code to an AreaUnit.

    Raises
    ------
    ValueError
        If the code is not a known area unit.
    """
    if isinstance(unit, AreaUnit):
        return unit
    return AreaUnit(unit)


def convert_length(meters: float, unit: Union[str, LengthUnit]) -> float:
    """Convert a length in meters to ``unit``.

    Parameters
    ----------
    meters : float
        Length in meters.
    unit : str or LengthUnit
        Target unit code (e.g. 'km', 'nauticmile').

    Returns
    -------
    float
    """
    return meters / _METERS_PER_UNIT[length_unit(unit)]


def convert_area(sqm: float, unit: Union[str, AreaUnit]) -> float:
    """Convert an area in square meters to ``unit``.

    Parameters
    ----------
    sqm : float
        Area in square meters.
    unit : str or AreaUnit
        Target unit code (e.g. 'hectare', 'acre').

    Returns
    -------
    float
    """
    return sqm / _SQM_PER_UNIT[area_unit(unit)]


def to_base_length(value: float, unit: Union[str, LengthUnit]) -> float:
    """Convert a length expressed in ``unit`` back to meters."""
    return value * _METERS_PER_UNIT[length_unit(unit)]


def to_base_area(value: float, unit: Union[str, AreaUnit]) -> float:
    """Convert an area expressed in ``unit`` back to square meters."""
    return value * _SQM_PER_UNIT[area_unit(unit)]


def convert(
    value: float,
    from_unit: Union[str, LengthUnit, AreaUnit],
    to_unit: Union[str, LengthUnit, AreaUnit],
) -> float:
    """Convert between two units of the same kind.

    Parameters
    ----------
    value : float
        Value expressed in ``from_unit``.
    from_unit, to_unit : str, LengthUnit or AreaUnit
        Unit codes. Both must be length units or both area units.

    Returns
    -------
    float

    Raises
    ------
    ValueError
        If the units are unknown or of different kinds.
    """
    src = _any_unit(from_unit)
    dst = _any_unit(to_unit)
    if isinstance(src, LengthUnit) and isinstance(dst, LengthUnit):
        return convert_length(to_base_length(value, src), dst)
    if isinstance(src, AreaUnit) and isinstance(dst, AreaUnit):
        return convert_area(to_base_area(value, src), dst)
    raise ValueError(
        f"Cannot convert between {src.value!r} and {dst.value!r}"
    )


def abbreviation(unit: Union[str, LengthUnit, AreaUnit]) -> str:
    """Short display label for a unit (e.g. 'km', 'ha')."""
    return ABBREVIATIONS[_any_unit(unit)]


def _any_unit(unit: Union[str, LengthUnit, AreaUnit]) -> Union[LengthUnit, AreaUnit]:
    if isinstance(unit, (LengthUnit, AreaUnit)):
        return unit
    try:
        return LengthUnit(unit)
    except ValueError:
        pass
    try:
        return AreaUnit(unit)
    except ValueError:
        raise ValueError(f"Unknown unit: {unit!r}") from None

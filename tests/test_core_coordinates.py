# -*- coding: utf-8 -*-
"""
Tests for gmtk.core.coordinates — CoordinateCodec parsing and formatting
across decimal degrees, UTM and MGRS.

Author
------
GMTK Contributors

Created
-------
2026-10-19
"""

import math

import pytest

from gmtk.core.config import GmtkConfig
from gmtk.core.coordinates import (
    Coordinate,
    CoordinateCodec,
    CoordinateFormat,
    CoordinateSystem,
    ParseError,
    ParseErrorKind,
    format_coordinate,
    format_for_system,
    parse_coordinate,
    parse_coordinate_as,
    parse_decimal_degree,
    parse_mgrs,
    parse_utm,
)
from gmtk.core.utm import lonlat_to_utm, utm_zone_for


BANGKOK = Coordinate(100.5231, 13.7497)


def _utm_distance(a: Coordinate, b: Coordinate) -> float:
    """Planar distance in meters between two points, in a's UTM zone."""
    ea, na, zone, hem = lonlat_to_utm(a.lon, a.lat)
    eb, nb, _, _ = lonlat_to_utm(b.lon, b.lat, zone=zone, hemisphere=hem)
    return math.hypot(ea - eb, na - nb)


class TestCoordinate:
    def test_iter(self):
        lon, lat = BANGKOK
        assert (lon, lat) == (100.5231, 13.7497)

    def test_is_valid(self):
        assert BANGKOK.is_valid
        assert not Coordinate(181.0, 0.0).is_valid
        assert not Coordinate(0.0, float('nan')).is_valid

    def test_geojson_roundtrip(self):
        geometry = BANGKOK.to_geojson()
        assert geometry == {'type': 'Point', 'coordinates': [100.5231, 13.7497]}
        assert Coordinate.from_geojson(geometry) == BANGKOK

    def test_from_geojson_rejects_non_point(self):
        with pytest.raises(ValueError):
            Coordinate.from_geojson({'type': 'LineString', 'coordinates': []})


class TestDecimalDegree:
    def test_comma_pair(self):
        assert parse_decimal_degree("13.7497, 100.5231") == BANGKOK

    def test_space_pair(self):
        assert parse_decimal_degree("13.7497 100.5231") == BANGKOK

    def test_negative(self):
        c = parse_decimal_degree("-33.86,151.2")
        assert (c.lat, c.lon) == (-33.86, 151.2)

    def test_degree_minute(self):
        c = parse_decimal_degree("13°45'N 100°30'E")
        assert c.lat == pytest.approx(13.75)
        assert c.lon == pytest.approx(100.5)

    def test_degree_minute_second(self):
        c = parse_decimal_degree("13°44'59.0\"N 100°31'23.0\"E")
        assert c.lat == pytest.approx(13.749722, abs=1e-6)
        assert c.lon == pytest.approx(100.523056, abs=1e-6)

    def test_south_west_negate(self):
        c = parse_decimal_degree("33°52'10\"S 151°12'30\"W")
        assert c.lat < 0
        assert c.lon < 0

    def test_hemisphere_optional(self):
        c = parse_decimal_degree("13°45' 100°30'")
        assert c.lat == pytest.approx(13.75)
        assert c.lon == pytest.approx(100.5)

    def test_lowercase_hemisphere(self):
        c = parse_decimal_degree("13°45's 100°30'w")
        assert c.lat == pytest.approx(-13.75)
        assert c.lon == pytest.approx(-100.5)

    def test_out_of_range_rejected(self):
        assert parse_decimal_degree("95.0, 100.0") is None
        assert parse_decimal_degree("10.0, 190.0") is None

    def test_garbage(self):
        assert parse_decimal_degree("hello world") is None


class TestUtm:
    def test_zoned(self):
        e, n, _, _ = lonlat_to_utm(BANGKOK.lon, BANGKOK.lat, zone=47)
        c = parse_utm(f"47N: {e:.3f} {n:.3f}")
        assert c.lon == pytest.approx(BANGKOK.lon, abs=1e-6)
        assert c.lat == pytest.approx(BANGKOK.lat, abs=1e-6)

    def test_zoned_whitespace_and_comma(self):
        e, n, _, _ = lonlat_to_utm(BANGKOK.lon, BANGKOK.lat, zone=47)
        c = parse_utm(f"47n {e:.3f}, {n:.3f}")
        assert c.lat == pytest.approx(BANGKOK.lat, abs=1e-6)

    def test_zoneless_defaults_to_47n(self):
        e, n, _, _ = lonlat_to_utm(BANGKOK.lon, BANGKOK.lat, zone=47)
        c = parse_utm(f"{e:.3f} {n:.3f}")
        assert c.lon == pytest.approx(BANGKOK.lon, abs=1e-6)

    def test_zoneless_custom_default(self):
        e, n, _, _ = lonlat_to_utm(105.0, 13.0, zone=48)
        c = parse_utm(f"{e} {n}", default_zone=48)
        assert c.lon == pytest.approx(105.0, abs=1e-6)

    def test_southern_hemisphere(self):
        e, n, zone, hem = lonlat_to_utm(151.2, -33.86)
        assert hem == "S"
        c = parse_utm(f"{zone}S: {e} {n}")
        assert c.lat == pytest.approx(-33.86, abs=1e-6)

    def test_invalid_zone(self):
        assert parse_utm("61N: 500000 1500000") is None

    def test_not_utm(self):
        assert parse_utm("47PPR6125821327") is None


class TestMgrs:
    def test_parse(self):
        text = format_coordinate(BANGKOK, CoordinateFormat.MGRS)
        c = parse_mgrs(text)
        assert _utm_distance(c, BANGKOK) <= 1.0

    def test_parse_whitespace(self):
        text = format_coordinate(BANGKOK, CoordinateFormat.MGRS)
        spaced = f"{text[:3]} {text[3:5]} {text[5:10]} {text[10:]}"
        assert parse_mgrs(spaced) == parse_mgrs(text)

    def test_invalid(self):
        assert parse_mgrs("47PIO1234512345") is None
        assert parse_mgrs("13.7, 100.5") is None


class TestParseCoordinate:
    def test_dd(self):
        assert parse_coordinate("13.7497,100.5231") == BANGKOK

    def test_mgrs_first(self):
        text = format_coordinate(BANGKOK, CoordinateFormat.MGRS)
        c = parse_coordinate(text)
        assert isinstance(c, Coordinate)
        assert _utm_distance(c, BANGKOK) <= 1.0

    def test_out_of_range_dd_falls_through_to_utm(self):
        c = parse_coordinate("662000 1520000")
        assert isinstance(c, Coordinate)
        assert utm_zone_for(c.lon, c.lat) == 47

    def test_unrecognized(self):
        result = parse_coordinate("not a coordinate")
        assert isinstance(result, ParseError)
        assert result.kind is ParseErrorKind.UNRECOGNIZED
        assert result.message == "could not interpret coordinate"
        assert result.text == "not a coordinate"

    def test_empty(self):
        assert isinstance(parse_coordinate(""), ParseError)
        assert isinstance(parse_coordinate("   "), ParseError)

    def test_non_string_never_raises(self):
        assert isinstance(parse_coordinate(None), ParseError)

    def test_parse_as_single_format(self):
        assert parse_coordinate_as("13.7497 100.5231", "DD") == BANGKOK
        # Same text is not valid as MGRS
        assert isinstance(
            parse_coordinate_as("13.7497 100.5231", CoordinateFormat.MGRS),
            ParseError,
        )

    def test_codec_uses_config_defaults(self):
        e, n, _, _ = lonlat_to_utm(105.0, 13.0, zone=48)
        codec = CoordinateCodec(GmtkConfig(default_utm_zone=48))
        c = codec.parse(f"{e:.3f} {n:.3f}")
        assert c.lon == pytest.approx(105.0, abs=1e-5)


class TestFormatCoordinate:
    def test_dd(self):
        assert format_coordinate(BANGKOK, "DD") == "13.749700, 100.523100"

    def test_dd_precision(self):
        assert format_coordinate(BANGKOK, "DD", precision=4) == "13.7497, 100.5231"

    def test_accepts_tuple(self):
        assert format_coordinate((100.5231, 13.7497), "DD", precision=2) == "13.75, 100.52"

    def test_utm(self):
        e, n, _, _ = lonlat_to_utm(BANGKOK.lon, BANGKOK.lat)
        assert format_coordinate(BANGKOK, "UTM", precision=2) == f"{e:.2f}, {n:.2f}"

    def test_utm_forced_zone(self):
        e48, n48, _, _ = lonlat_to_utm(BANGKOK.lon, BANGKOK.lat, zone=48)
        text = format_coordinate(BANGKOK, CoordinateFormat.UTM, precision=0, zone=48)
        assert text == f"{e48:.0f}, {n48:.0f}"

    def test_mgrs(self):
        text = format_coordinate(BANGKOK, "MGRS")
        assert text.startswith("47PPR")
        assert len(text) == 15

    def test_invalid_inputs_are_empty(self):
        assert format_coordinate((float('nan'), 0.0), "DD") == ""
        assert format_coordinate((200.0, 0.0), "UTM") == ""
        assert format_coordinate((0.0, 88.0), "MGRS") == ""
        assert format_coordinate(("a", "b"), "DD") == ""
        assert format_coordinate((1.0,), "DD") == ""
        assert format_coordinate(BANGKOK, "XYZ") == ""

    def test_stable(self):
        assert format_coordinate(BANGKOK, "UTM") == format_coordinate(BANGKOK, "UTM")


class TestRoundTrips:
    @pytest.mark.parametrize('lon, lat', [
        (100.5231, 13.7497),
        (-73.9857, 40.7484),
        (151.2093, -33.8688),
        (0.0, 0.0),
        (-179.5, -89.9),
    ])
    def test_dd_roundtrip(self, lon, lat):
        c = parse_coordinate(format_coordinate((lon, lat), "DD"))
        assert c.lon == pytest.approx(lon, abs=1e-4)
        assert c.lat == pytest.approx(lat, abs=1e-4)

    @pytest.mark.parametrize('easting, northing', [
        (662000.0, 1520000.0),
        (500000.0, 1000000.0),
        (300123.4, 2000456.7),
    ])
    def test_utm_roundtrip(self, easting, northing):
        c = parse_coordinate(f"47N: {easting} {northing}")
        text = format_coordinate(c, "UTM", zone=47)
        e, n = (float(p) for p in text.split(','))
        assert e == pytest.approx(easting, abs=1.0)
        assert n == pytest.approx(northing, abs=1.0)

    @pytest.mark.parametrize('lon, lat', [
        (100.5231, 13.7497),
        (-73.9857, 40.7484),
        (151.2093, -33.8688),
        (10.75, 59.91),
        (2.35, 48.85),
        (-58.38, -34.60),
    ])
    def test_mgrs_roundtrip(self, lon, lat):
        c = parse_coordinate(format_coordinate((lon, lat), "MGRS"))
        assert isinstance(c, Coordinate)
        assert _utm_distance(Coordinate(lon, lat), c) <= 1.0

    def test_dms_to_utm_and_back(self):
        c = parse_coordinate("13°44'59.0\"N 100°31'23.0\"E")
        assert c.lon == pytest.approx(100.5231, abs=1e-4)
        assert c.lat == pytest.approx(13.7497, abs=1e-4)

        utm_text = format_coordinate(c, "UTM", zone=47)
        back = parse_coordinate(utm_text)
        assert isinstance(back, Coordinate)
        assert _utm_distance(c, back) <= 1.0


class TestCoordinateSystems:
    def test_labels(self):
        assert [s.label for s in CoordinateSystem] == [
            "GCS", "WGS 1984 UTM 47", "WGS 1984 UTM 48", "MGRS",
        ]

    def test_format_for_system(self):
        assert format_for_system(BANGKOK, "DD") == "13.749700, 100.523100"
        assert format_for_system(BANGKOK, CoordinateSystem.UTM48) == format_coordinate(
            BANGKOK, "UTM", zone=48,
        )
        assert format_for_system(BANGKOK, "MGRS").startswith("47P")

    def test_unknown_system(self):
        assert format_for_system(BANGKOK, "UTM49") == ""

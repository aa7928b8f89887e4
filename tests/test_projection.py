"""Tests for gridsquare.projection and gridsquare.helmert."""

import math

import pytest

from gridsquare.geometry import haversine_km
from gridsquare.helmert import osgb36_to_wgs84, wgs84_to_osgb36
from gridsquare.projection import (
    grid_to_lat_lon,
    grid_to_osgb36,
    lat_lon_to_grid,
    osgb36_to_grid,
)

# Worked example from the OS guide to coordinate systems in Great Britain
_OS_EASTING = 651409.903
_OS_NORTHING = 313177.270
_OS_LAT = 52 + 39 / 60 + 27.2531 / 3600
_OS_LON = 1 + 43 / 60 + 4.5177 / 3600


class TestTransverseMercator:
    def test_grid_to_osgb36_worked_example(self):
        lat, lon = grid_to_osgb36(_OS_EASTING, _OS_NORTHING)
        assert math.degrees(lat) == pytest.approx(_OS_LAT, abs=1e-6)
        assert math.degrees(lon) == pytest.approx(_OS_LON, abs=1e-6)

    def test_osgb36_to_grid_worked_example(self):
        easting, northing = osgb36_to_grid(
            math.radians(_OS_LAT), math.radians(_OS_LON)
        )
        assert easting == pytest.approx(_OS_EASTING, abs=0.05)
        assert northing == pytest.approx(_OS_NORTHING, abs=0.05)

    def test_true_origin_on_central_meridian(self):
        # 2°W lies on the central meridian, so easting is exactly E0
        easting, _ = osgb36_to_grid(math.radians(52.0), math.radians(-2.0))
        assert easting == pytest.approx(400000.0, abs=1e-6)


class TestHelmert:
    def test_round_trip_is_stable(self):
        lat, lon = math.radians(51.5), math.radians(-0.1)
        back = wgs84_to_osgb36(*osgb36_to_wgs84(lat, lon))
        assert back[0] == pytest.approx(lat, abs=1e-8)
        assert back[1] == pytest.approx(lon, abs=1e-8)

    def test_datum_shift_in_london_is_about_a_hundred_metres(self):
        lat, lon = math.radians(51.5), math.radians(-0.1)
        wlat, wlon = osgb36_to_wgs84(lat, lon)
        shift_km = haversine_km(
            math.degrees(lat), math.degrees(lon),
            math.degrees(wlat), math.degrees(wlon),
        )
        assert 0.05 < shift_km < 0.2


class TestGridToLatLon:
    def test_central_london(self):
        point = grid_to_lat_lon(530000, 180000)
        assert 51.50 < point.lat < 51.52
        assert -0.14 < point.lon < -0.11

    def test_out_of_range_input_is_deterministic(self):
        a = grid_to_lat_lon(-100000, 2000000)
        b = grid_to_lat_lon(-100000, 2000000)
        assert a == b
        assert math.isfinite(a.lat) and math.isfinite(a.lon)


class TestLatLonToGrid:
    def test_returns_whole_metres(self):
        grid = lat_lon_to_grid(51.5074, -0.1278)
        assert isinstance(grid.easting, int)
        assert isinstance(grid.northing, int)

    def test_central_london_is_in_tq(self):
        grid = lat_lon_to_grid(51.5074, -0.1278)
        assert 500000 <= grid.easting < 600000
        assert 100000 <= grid.northing < 200000


class TestRoundTrip:
    @pytest.mark.parametrize(
        ("lat", "lon"),
        [
            (51.5074, -0.1278),   # London
            (55.9533, -3.1883),   # Edinburgh
            (60.1546, -1.1494),   # Lerwick
            (50.0657, -5.7132),   # Land's End
            (58.2090, -6.3890),   # Stornoway
            (52.6309, 1.2974),    # Norwich
            (49.9145, -6.3100),   # Isles of Scilly
            (57.0, -7.5),
            (53.0, 1.9),
        ],
    )
    def test_lat_lon_round_trip_within_a_metre(self, lat: float, lon: float):
        grid = lat_lon_to_grid(lat, lon)
        back = grid_to_lat_lon(grid.easting, grid.northing)
        assert haversine_km(lat, lon, back.lat, back.lon) * 1000 < 1.0

    @pytest.mark.parametrize(
        ("easting", "northing"),
        [(530000, 180000), (325000, 673000), (100000, 900000), (651410, 313177)],
    )
    def test_grid_round_trip_within_a_metre(self, easting: int, northing: int):
        point = grid_to_lat_lon(easting, northing)
        grid = lat_lon_to_grid(point.lat, point.lon)
        assert abs(grid.easting - easting) <= 1
        assert abs(grid.northing - northing) <= 1

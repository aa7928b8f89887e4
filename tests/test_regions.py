"""Tests for gridsquare.regions module."""

import pytest

from gridsquare.exceptions import UnknownRegion
from gridsquare.geometry import is_point_in_polygon
from gridsquare.regions import REGIONS, get_region


class TestGetRegion:
    @pytest.mark.parametrize("region_id", sorted(REGIONS))
    def test_known_regions(self, region_id: str):
        assert get_region(region_id).id == region_id

    def test_case_and_whitespace_tolerant(self):
        assert get_region("  Greater-London ").id == "greater-london"

    def test_unknown_raises(self):
        with pytest.raises(UnknownRegion) as exc_info:
            get_region("atlantis")
        assert exc_info.value.region_id == "atlantis"
        assert "greater-london" in exc_info.value.known


class TestRegionData:
    def test_uk_is_a_bounding_box(self):
        assert get_region("united-kingdom").is_polygon is False

    def test_london_regions_are_polygons(self):
        for region_id in ("greater-london", "central-london", "city-of-london"):
            assert get_region(region_id).is_polygon is True

    def test_city_inside_greater_london(self):
        city = get_region("city-of-london").boundary
        greater = get_region("greater-london").boundary
        for easting, northing in city:
            assert is_point_in_polygon(easting, northing, greater)

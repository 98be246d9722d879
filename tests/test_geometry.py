import math

import pytest
from hypothesis import given, strategies as st

from glidestats.geometry import EARTH_RADIUS_KM, haversine_distance

valid_lat = st.floats(-85.0, 85.0)
valid_lon = st.floats(-180.0, 180.0)


class TestHaversineDistance:
    """Test great circle distance calculation."""

    def test_one_hundredth_degree_of_longitude_at_equator(self):
        distance = haversine_distance(0.0, 0.0, 0.0, 0.01)
        expected = EARTH_RADIUS_KM * math.radians(0.01)
        assert distance == pytest.approx(expected, rel=1e-9)
        assert round(distance, 1) == 1.1

    def test_one_degree_of_latitude(self):
        distance = haversine_distance(45.0, 7.0, 46.0, 7.0)
        assert distance == pytest.approx(111.195, abs=1e-3)

    def test_known_city_pair(self):
        # Munich to Innsbruck, roughly 98 km apart
        distance = haversine_distance(48.1374, 11.5755, 47.2692, 11.4041)
        assert 96.0 < distance < 98.0

    def test_identical_points(self):
        assert haversine_distance(47.5, 8.25, 47.5, 8.25) == 0.0

    def test_antipodal_points(self):
        distance = haversine_distance(0.0, 0.0, 0.0, 180.0)
        assert distance == pytest.approx(math.pi * EARTH_RADIUS_KM)

    def test_custom_radius(self):
        distance = haversine_distance(0.0, 0.0, 0.0, 1.0, earth_radius=1.0)
        assert distance == pytest.approx(math.radians(1.0))


class TestHaversineProperties:

    @given(valid_lat, valid_lon)
    def test_distance_to_self_is_zero(self, lat, lon):
        assert haversine_distance(lat, lon, lat, lon) == 0.0

    @given(valid_lat, valid_lon, valid_lat, valid_lon)
    def test_distance_is_non_negative_and_bounded(self, lat1, lon1, lat2, lon2):
        distance = haversine_distance(lat1, lon1, lat2, lon2)
        assert 0.0 <= distance <= math.pi * EARTH_RADIUS_KM + 1e-6

    @given(valid_lat, valid_lon, valid_lat, valid_lon)
    def test_distance_is_symmetric(self, lat1, lon1, lat2, lon2):
        d12 = haversine_distance(lat1, lon1, lat2, lon2)
        d21 = haversine_distance(lat2, lon2, lat1, lon1)
        assert abs(d12 - d21) < 1e-9

"""Tests for reprojection between Web Mercator and WGS84."""

import math

import pytest

from geosketch.geometry import MapPoint, Polyline, SpatialReference
from geosketch.geometry import geographic_to_mercator, mercator_to_geographic
from geosketch.geometry.projection import MAX_LATITUDE


EARTH_RADIUS = 6378137.0

WGS84 = SpatialReference.WGS84
WEB_MERCATOR = SpatialReference.WEB_MERCATOR


def spherical_mercator(lon, lat):
    return (EARTH_RADIUS*math.radians(lon),
            EARTH_RADIUS*math.log(math.tan(math.pi/4 + math.radians(lat)/2)))


class TestCoordinates:

    def test_origin(self):
        assert geographic_to_mercator(0.0, 0.0) == pytest.approx((0.0, 0.0), abs=1e-6)
        assert mercator_to_geographic(0.0, 0.0) == pytest.approx((0.0, 0.0), abs=1e-9)

    def test_antimeridian(self):
        (x, _) = geographic_to_mercator(180.0, 0.0)
        assert x == pytest.approx(20037508.342789244)

    def test_matches_spherical_mercator(self):
        assert geographic_to_mercator(106.63, 10.82) == pytest.approx(spherical_mercator(106.63, 10.82))

    def test_round_trip(self):
        (x, y) = geographic_to_mercator(-122.4194, 37.7749)
        assert mercator_to_geographic(x, y) == pytest.approx((-122.4194, 37.7749))

    def test_missing_values_pass_through(self):
        assert geographic_to_mercator(None, 10.0) == (None, 10.0)
        assert mercator_to_geographic(5.0, None) == (5.0, None)

    def test_pole_is_clamped(self):
        (_, y) = geographic_to_mercator(0.0, 90.0)
        assert math.isfinite(y)
        assert y == pytest.approx(spherical_mercator(0.0, MAX_LATITUDE)[1])


class TestReprojector:

    def test_point_to_display(self, reprojector):
        point = reprojector.to_display(MapPoint(106.63, 10.82, WGS84))
        assert point.spatial_reference is WEB_MERCATOR
        assert (point.x, point.y) == pytest.approx(spherical_mercator(106.63, 10.82))

    def test_point_to_geographic(self, reprojector):
        point = reprojector.to_geographic(MapPoint(*spherical_mercator(2.35, 48.85)))
        assert point.spatial_reference is WGS84
        assert (point.x, point.y) == pytest.approx((2.35, 48.85))

    def test_already_projected_is_unchanged(self, reprojector):
        geographic = MapPoint(1.0, 2.0, WGS84)
        display = MapPoint(1.0, 2.0, WEB_MERCATOR)
        assert reprojector.to_geographic(geographic) is geographic
        assert reprojector.to_display(display) is display

    def test_input_is_not_modified(self, reprojector):
        point = MapPoint(10.0, 20.0, WGS84)
        reprojector.to_display(point)
        assert point == MapPoint(10.0, 20.0, WGS84)

    def test_polyline_is_reprojected_per_coordinate(self, reprojector):
        paths = [[(0.0, 0.0), (10.0, 10.0)], [(-20.0, 45.0)], []]
        polyline = reprojector.to_display(Polyline(paths, WGS84))
        assert polyline.spatial_reference is WEB_MERCATOR
        assert [len(path) for path in polyline.paths] == [2, 1, 0]
        for (path, projected) in zip(paths, polyline.paths):
            for (point, xy) in zip(path, projected):
                assert xy == pytest.approx(spherical_mercator(*point), abs=1e-6)

    def test_polyline_round_trip(self, reprojector):
        polyline = Polyline([[(106.6, 10.8), (106.7, 10.9), (106.8, 10.7)]], WGS84)
        back = reprojector.to_geographic(reprojector.to_display(polyline))
        for (point, original) in zip(back.paths[0], polyline.paths[0]):
            assert point == pytest.approx(original)

    def test_missing_spatial_reference(self, reprojector):
        with pytest.raises(ValueError):
            reprojector.to_geographic(MapPoint(1.0, 2.0, spatial_reference=None))

    def test_unsupported_geometry(self, reprojector):
        class Polygon:
            geom_type = 'Polygon'
            spatial_reference = WEB_MERCATOR
        with pytest.raises(ValueError):
            reprojector.to_geographic(Polygon())

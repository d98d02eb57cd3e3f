"""Tests for a sketching session, as driven by a user interface."""

import json
import os

import pytest

from geosketch import SketchSession
from geosketch.geometry import MapPoint, geographic_to_mercator
from geosketch.session import COPIED_ALERT, INVALID_JSON_ALERT, NO_CLIPBOARD_ALERT
from geosketch.session import zoom_value


EMPTY_COLLECTION = {'type': 'FeatureCollection', 'features': []}

POINT_TEXT = ('{"type":"FeatureCollection","features":[{"type":"Feature",'
              '"geometry":{"type":"Point","coordinates":[106.63,10.82]}}]}')


def coordinates(feature):
    return feature['geometry']['coordinates']


class TestExport:

    def test_initial_text_is_empty_collection(self, session):
        assert json.loads(session.text) == EMPTY_COLLECTION

    def test_sketch_edits_refresh_text(self, session):
        graphic = session.sketch.place_point(*geographic_to_mercator(1.0, 2.0))
        [feature] = json.loads(session.text)['features']
        assert coordinates(feature) == pytest.approx([1.0, 2.0])
        session.sketch.update(graphic, MapPoint(*geographic_to_mercator(3.0, 4.0)))
        assert coordinates(json.loads(session.text)['features'][0]) == pytest.approx([3.0, 4.0])
        session.sketch.delete([graphic])
        assert json.loads(session.text) == EMPTY_COLLECTION

    def test_export_features(self, session):
        session.sketch.place_point(0, 0)
        assert session.export_features()['features'][0]['geometry']['type'] == 'Point'

    def test_clear_all(self, session):
        session.sketch.place_point(0, 0)
        session.clear_all()
        assert len(session.layer) == 0
        assert json.loads(session.text) == EMPTY_COLLECTION


class TestLoad:

    def test_point(self, session):
        result = session.load(POINT_TEXT)
        assert result.created == 1 and result.skipped == 0
        assert len(session.layer) == 1
        [feature] = json.loads(session.text)['features']
        assert feature['type'] == 'Feature'
        assert feature['properties'] == {}
        assert feature['geometry']['type'] == 'Point'
        assert coordinates(feature) == pytest.approx([106.63, 10.82])

    def test_loads_current_text(self, session):
        session.text = POINT_TEXT
        assert session.load().created == 1

    def test_invalid_json(self, session, alerts):
        session.load(POINT_TEXT)
        graphics = session.layer.graphics
        session.text = '{not json'
        assert session.load() is None
        assert alerts == [INVALID_JSON_ALERT]
        assert session.layer.graphics == graphics
        assert session.text == '{not json'

    def test_empty_features_clear_graphics(self, session):
        session.load(POINT_TEXT)
        result = session.load('{"type": "FeatureCollection", "features": []}')
        assert (result.created, result.skipped) == (0, 0)
        assert len(session.layer) == 0
        assert json.loads(session.text) == EMPTY_COLLECTION

    def test_view_frames_imported_graphics(self, session):
        line = {'type': 'Feature', 'properties': {},
                'geometry': {'type': 'LineString', 'coordinates': [[0, 0], [10, 10]]}}
        session.load(json.dumps({'type': 'FeatureCollection', 'features': [line]}))
        centre = geographic_to_mercator(5, 0)[0], (geographic_to_mercator(0, 10)[1])/2
        assert session.view.center.coords[0] == pytest.approx(centre)
        extent = session.view.extent
        assert extent.width >= 1.2*geographic_to_mercator(10, 0)[0] - 1e-3

    def test_no_graphics_no_camera_change(self, session):
        centre = session.view.center
        zoom = session.view.zoom
        session.load('{"features": [{"type": "Feature", "geometry": null}]}')
        assert session.view.center == centre
        assert session.view.zoom == zoom

    def test_round_trip(self, session, alerts, clipboard):
        sketch = session.sketch
        sketch.place_point(*geographic_to_mercator(106.6, 10.8))
        sketch.create('polyline')
        for (lon, lat) in [(106.6, 10.8), (106.7, 10.9)]:
            sketch.add_vertex(*geographic_to_mercator(lon, lat))
        sketch.new_path()
        for (lon, lat) in [(106.5, 10.7), (106.4, 10.6), (106.3, 10.7)]:
            sketch.add_vertex(*geographic_to_mercator(lon, lat))
        graphic = sketch.complete()
        graphic.set_attribute('name', 'track')
        session.refresh_export()
        exported = json.loads(session.text)

        other = SketchSession(alert=alerts.append, clipboard=clipboard)
        other.load(session.text)
        reexported = json.loads(other.text)
        other.close()

        assert len(other.layer) == 3
        assert [f['geometry']['type'] for f in reexported['features']] == ['Point', 'LineString', 'LineString']
        assert [f['properties'] for f in reexported['features']] == [{}, {'name': 'track'}, {'name': 'track'}]
        for (feature, original) in zip(reexported['features'], exported['features']):
            if feature['geometry']['type'] == 'Point':
                assert coordinates(feature) == pytest.approx(coordinates(original))
            else:
                for (position, expected) in zip(coordinates(feature), coordinates(original)):
                    assert position == pytest.approx(expected)


class TestClickMode:

    def test_clicks_add_points(self, session):
        session.click_mode = True
        assert session.click_mode
        session.view.click(*geographic_to_mercator(106.63, 10.82))
        [graphic] = session.layer.graphics
        assert graphic.attributes['lon'] == pytest.approx(106.63)
        assert graphic.attributes['lat'] == pytest.approx(10.82)
        [feature] = json.loads(session.text)['features']
        assert feature['properties'] == pytest.approx({'lon': 106.63, 'lat': 10.82})

    def test_disabled(self, session):
        session.click_mode = True
        session.click_mode = False
        session.view.click(0, 0)
        assert len(session.layer) == 0


class TestClipboard:

    def test_copy(self, session, alerts, clipboard):
        assert session.copy_to_clipboard()
        assert clipboard.text == session.text
        assert alerts == [COPIED_ALERT]

    def test_unavailable(self, alerts):
        session = SketchSession(alert=alerts.append)
        assert not session.copy_to_clipboard()
        assert alerts == [NO_CLIPBOARD_ALERT]
        session.close()


def test_download(session, tmp_path):
    session.load(POINT_TEXT)
    path = session.download(str(tmp_path))
    assert os.path.basename(path).startswith('features-')
    assert path.endswith('.geojson')
    with open(path) as fp:
        assert fp.read() == session.text


class TestZoomConstraints:

    def test_min_greater_than_max_is_ignored(self, session):
        constraints = session.view.constraints
        zoom = session.view.zoom
        assert not session.apply_zoom_constraints(5, 3, 4)
        assert session.view.constraints == constraints
        assert session.view.zoom == zoom

    def test_non_numeric_limits_are_ignored(self, session):
        constraints = session.view.constraints
        assert not session.apply_zoom_constraints('', '10', '4')
        assert not session.apply_zoom_constraints('2', 'ten', '4')
        assert session.view.constraints == constraints

    def test_blank_start_is_midpoint(self, session):
        assert session.apply_zoom_constraints('2', '10', '')
        assert session.view.zoom == 6
        assert (session.view.constraints.min_zoom, session.view.constraints.max_zoom) == (2, 10)

    def test_non_numeric_start_is_midpoint(self, session):
        assert session.apply_zoom_constraints(2, 10, 'abc')
        assert session.view.zoom == 6

    def test_start_is_clamped(self, session):
        session.apply_zoom_constraints(3, 8, 12)
        assert session.view.zoom == 8
        session.apply_zoom_constraints(3, 8, 1)
        assert session.view.zoom == 3

    def test_zoom_value(self):
        assert zoom_value(' 7 ') == 7.0
        assert zoom_value(4) == 4.0
        assert zoom_value(None) is None
        assert zoom_value('nan') is None
        assert zoom_value(True) is None


class TestOptions:

    def test_defaults(self, session):
        assert session.options['extentMargin'] == 1.2
        assert session.view.zoom == 4
        assert session.view.constraints.min_zoom == 2
        assert session.view.constraints.max_zoom == 10

    def test_invalid_zoom(self):
        with pytest.raises(ValueError):
            SketchSession({'minZoom': 5, 'maxZoom': 3})
        with pytest.raises(ValueError):
            SketchSession({'initialZoom': 12})

    def test_indent(self):
        session = SketchSession({'indent': 4})
        assert session.text.startswith('{\n    "type"')
        session.close()

    def test_discard_properties(self):
        session = SketchSession({'restoreProperties': False})
        session.load('{"features": [{"type": "Feature", "properties": {"a": 1},'
                     ' "geometry": {"type": "Point", "coordinates": [1, 2]}}]}')
        assert json.loads(session.text)['features'][0]['properties'] == {}
        session.close()

    def test_close_stops_refresh(self, session):
        session.close()
        session.sketch.place_point(0, 0)
        assert json.loads(session.text) == EMPTY_COLLECTION

    def test_log_file(self, tmp_path, alerts):
        log_file = tmp_path / 'session.log.json'
        session = SketchSession({'logFile': str(log_file), 'silent': True}, alert=alerts.append)
        session.load('{not json')
        session.close()
        assert log_file.exists()
        assert alerts == [INVALID_JSON_ALERT]


def test_non_standard_json_is_invalid(session, alerts):
    session.load(POINT_TEXT)
    text = session.text
    assert session.load('NaN') is None
    assert alerts == [INVALID_JSON_ALERT]
    assert len(session.layer) == 1
    assert session.text == text


def test_default_session_is_quiet(capsys):
    session = SketchSession()
    session.sketch.place_point(0, 0)
    session.load('{not json')
    session.close()
    captured = capsys.readouterr()
    assert captured.out == ''
    assert captured.err == ''

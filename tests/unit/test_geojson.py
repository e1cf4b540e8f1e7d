"""Unit tests for GeoJSON geometry validation."""

import pytest

from sqlpostgis.classifier import (
    check_geojson_geometry,
    dump_geojson,
    normalize_geojson_geometry,
)
from sqlpostgis.common.exceptions import InvalidGeoJSON

SQUARE = [[0, 0], [0, 1], [1, 1], [1, 0], [0, 0]]


class TestNormalizeGeojsonGeometry:
    """Invalid input yields None, valid input is reduced to geometry members."""

    @pytest.mark.parametrize(
        "value",
        [
            {},
            {"type": "point", "coordinates": []},
            {"type": "Point", "coordinates": "select *"},
            {"type": "Point", "coordinates": ["a", "b"]},
            {"type": "Point", "coordinates": [1]},
            {"type": "Point", "coordinates": [1, 2, 3, 4]},
            {"type": "LineString", "coordinates": [[0, 0], [1, 1, 1, 1, 1]]},
            {"type": "Point", "coordinates": [True, 1]},
            {"type": "Point", "coordinates": ["1", "2"]},
            {"type": "Point", "coordinates": [float("nan"), 1]},
            {"type": "LineString", "coordinates": [[0, 0]]},
            {"type": "Polygon", "coordinates": [[[0, 0], [0, 1], [1, 1], [1, 0]]]},
            {"type": "Polygon", "coordinates": [[[0, 0], [0, 1], [1, 1], [0, 0.5]]]},
            {"type": "Feature", "geometry": {"type": "Point", "coordinates": [0, 0]}},
            {"type": "GeometryCollection", "geometries": [{"type": "Point"}]},
            "not json",
            None,
            [0, 0],
        ],
    )
    def test_filters_invalid(self, value):
        assert normalize_geojson_geometry(value) is None

    def test_cleans_additional_properties(self):
        value = {"type": "Point", "coordinates": [0, 0], "extra": "foo"}
        assert normalize_geojson_geometry(value) == {"type": "Point", "coordinates": [0, 0]}

    def test_keeps_crs(self):
        crs = {"type": "name", "properties": {"name": "EPSG:4326"}}
        value = {"type": "Point", "coordinates": [1, 2], "crs": crs, "bbox": [1, 2, 1, 2]}
        assert normalize_geojson_geometry(value) == {
            "type": "Point",
            "coordinates": [1, 2],
            "crs": crs,
        }

    def test_polygon(self):
        value = {"type": "Polygon", "coordinates": [SQUARE]}
        assert normalize_geojson_geometry(value) == value

    def test_multi_geometries(self):
        assert normalize_geojson_geometry(
            {"type": "MultiPoint", "coordinates": [[0, 0], [1.5, 2.5]]}
        ) == {"type": "MultiPoint", "coordinates": [[0, 0], [1.5, 2.5]]}
        assert normalize_geojson_geometry(
            {"type": "MultiLineString", "coordinates": [[[0, 0], [1, 1]]]}
        ) is not None
        assert normalize_geojson_geometry(
            {"type": "MultiPolygon", "coordinates": [[SQUARE]]}
        ) is not None

    def test_geometry_collection(self):
        value = {
            "type": "GeometryCollection",
            "geometries": [
                {"type": "Point", "coordinates": [0, 0], "id": 1},
                {"type": "LineString", "coordinates": [[0, 0], [1, 1]]},
            ],
        }
        assert normalize_geojson_geometry(value) == {
            "type": "GeometryCollection",
            "geometries": [
                {"type": "Point", "coordinates": [0, 0]},
                {"type": "LineString", "coordinates": [[0, 0], [1, 1]]},
            ],
        }

    def test_three_dimensional_positions(self):
        value = {"type": "Point", "coordinates": [1, 2, 3]}
        assert normalize_geojson_geometry(value) == value

    def test_json_text(self):
        assert normalize_geojson_geometry('{"type":"Point","coordinates":[1,2]}') == {
            "type": "Point",
            "coordinates": [1, 2],
        }


class TestCheckGeojsonGeometry:
    """Invalid input raises InvalidGeoJSON with structural errors."""

    def test_raises_with_errors(self):
        with pytest.raises(InvalidGeoJSON) as exc_info:
            check_geojson_geometry({"type": "Point", "coordinates": "DROP TABLE points;"})
        errors = exc_info.value.errors
        assert errors
        assert all("loc" in error and "msg" in error for error in errors)
        assert exc_info.value.details["errors"] == errors

    def test_unclosed_ring_message(self):
        with pytest.raises(InvalidGeoJSON) as exc_info:
            check_geojson_geometry(
                {"type": "Polygon", "coordinates": [[[0, 0], [0, 1], [1, 1], [1, 0], [2, 2]]]}
            )
        assert any("same position" in error["msg"] for error in exc_info.value.errors)

    def test_invalid_json_keeps_cause(self):
        with pytest.raises(InvalidGeoJSON) as exc_info:
            check_geojson_geometry("{")
        assert isinstance(exc_info.value.cause, ValueError)

    def test_returns_normalized(self):
        assert check_geojson_geometry({"type": "Point", "coordinates": [-48.23456, 20.12345]}) == {
            "type": "Point",
            "coordinates": [-48.23456, 20.12345],
        }


def test_dump_geojson_is_compact():
    assert dump_geojson({"type": "Point", "coordinates": [1, 2]}) == '{"type":"Point","coordinates":[1,2]}'

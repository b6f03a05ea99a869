from __future__ import annotations

from layers.geojson import features_to_collection


def test_polygon_is_closed_and_written_as_feature_collection():
    fc, skipped = features_to_collection(
        [
            {
                "type": "Feature",
                "id": "p1",
                "geometry": {
                    "type": "Polygon",
                    "coordinates": [[[2e6, 5e6], [2e6, 6e6], [2e6, 7e6], [0e6, 5e6]]],
                },
                "properties": {"name": "demo"},
            }
        ]
    )
    assert skipped == []
    assert fc["type"] == "FeatureCollection"
    [feature] = fc["features"]
    assert feature["id"] == "p1"
    assert feature["properties"] == {"name": "demo"}
    assert feature["geometry"]["type"] == "Polygon"
    ring = feature["geometry"]["coordinates"][0]
    assert tuple(ring[0]) == tuple(ring[-1])


def test_feature_without_geometry_is_kept():
    fc, skipped = features_to_collection([{"type": "Feature", "geometry": None}])
    assert skipped == []
    assert fc["features"] == [{"type": "Feature", "geometry": None, "properties": None}]


def test_unreadable_geometry_is_skipped():
    fc, skipped = features_to_collection(
        [
            {"type": "Feature", "id": "bad", "geometry": {"type": "Blob", "coordinates": []}},
            {"type": "Feature", "geometry": {"type": "Point", "coordinates": [1.0, 2.0]}},
        ]
    )
    assert skipped == ["bad"]
    assert [f["geometry"]["type"] for f in fc["features"]] == ["Point"]


def test_empty_properties_are_kept_as_given():
    fc, _ = features_to_collection(
        [
            {"type": "Feature", "geometry": None, "properties": {}},
            {"type": "Feature", "geometry": None},
        ]
    )
    assert [f["properties"] for f in fc["features"]] == [{}, None]

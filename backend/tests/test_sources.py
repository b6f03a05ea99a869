from __future__ import annotations

import pytest
from pydantic import ValidationError

from layers.sources import (
    MapLayer,
    MapState,
    OSMSource,
    TileWMSSource,
    UnsupportedSource,
    VectorSource,
    WMTSSource,
)


def test_source_variant_is_resolved_from_type():
    state = MapState.model_validate(
        {
            "view": {"units": "m", "resolution": 10, "center": [0, 0]},
            "layers": [
                {"source": {"type": "OSM"}},
                {"source": {"type": "TileWMS", "urls": ["http://x/wms"]}},
                {
                    "source": {
                        "type": "WMTS",
                        "layer": "sgmc2",
                        "matrixSet": "GoogleMapsCompatible",
                    }
                },
                {"source": {"type": "Vector"}},
            ],
        }
    )
    kinds = [type(layer.source) for layer in state.layers]
    assert kinds == [OSMSource, TileWMSSource, WMTSSource, VectorSource]
    assert state.view.projection == "EPSG:3857"


def test_unknown_source_type_is_kept_as_unsupported():
    layer = MapLayer.model_validate(
        {"source": {"type": "BingMaps", "key": "abc"}, "opacity": 0.3}
    )
    assert isinstance(layer.source, UnsupportedSource)
    assert layer.source.type == "BingMaps"


def test_vector_source_accepts_feature_collection():
    src = VectorSource.model_validate(
        {
            "type": "Vector",
            "geojson": {
                "type": "FeatureCollection",
                "features": [{"type": "Feature", "geometry": None}],
            },
        }
    )
    assert len(src.features) == 1


def test_opacity_is_bounded():
    with pytest.raises(ValidationError):
        MapLayer.model_validate({"source": {"type": "OSM"}, "opacity": 1.5})

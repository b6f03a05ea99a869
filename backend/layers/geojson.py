from __future__ import annotations

from typing import Any, Iterable

from shapely.errors import GeometryTypeError, ShapelyError
from shapely.geometry import mapping, shape


def features_to_collection(
    features: Iterable[dict[str, Any]],
) -> tuple[dict[str, Any], list[str]]:
    """
    Normalize GeoJSON-like features into a FeatureCollection.

    Geometries are round-tripped through shapely so the print service only ever sees
    well-formed GeoJSON. Coordinates are left in the map projection.

    Returns the collection and the ids (or positions) of features that were skipped
    because their geometry could not be parsed.
    """
    out: list[dict[str, Any]] = []
    skipped: list[str] = []
    for i, feature in enumerate(features):
        f = feature or {}
        fid = f.get("id")
        geom = f.get("geometry")

        geometry: dict[str, Any] | None = None
        if geom:
            try:
                geometry = dict(mapping(shape(geom)))
            except (GeometryTypeError, ShapelyError, KeyError, TypeError, ValueError):
                skipped.append(str(fid) if fid is not None else f"#{i}")
                continue

        row: dict[str, Any] = {
            "type": "Feature",
            "geometry": geometry,
            "properties": f.get("properties"),
        }
        if fid is not None:
            row["id"] = fid
        out.append(row)

    return {"type": "FeatureCollection", "features": out}, skipped

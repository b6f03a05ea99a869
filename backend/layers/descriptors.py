from __future__ import annotations

from typing import Any, Literal, Union

from pydantic import BaseModel, Field

from printspec.diagnostics import Diagnostic

OSM_TILE_URL = "https://{a-c}.tile.openstreetmap.org/{z}/{x}/{y}.png"
OSM_ATTRIBUTION = "© OpenStreetMap (www.openstreetmap.org)"


class _Descriptor(BaseModel):
    # Findings made while translating; never part of the serialized document.
    diagnostics: list[Diagnostic] = Field(default_factory=list, exclude=True)


class WmsLayer(_Descriptor):
    type: Literal["WMS"] = "WMS"
    url: str
    opacity: float
    attribution: str = ""
    layer: str | None = None
    tiled: bool


class WmtsTileGrid(BaseModel):
    resolutions: list[float] | None = None
    extent: list[float] | None = None
    # Always 0..N-1, parallel to `resolutions`.
    matrixIds: list[int] | None = None


class WmtsLayer(_Descriptor):
    type: Literal["WMTS"] = "WMTS"
    requestEncoding: str
    url: str
    layer: str
    projection: str | None = None
    matrixSet: str
    tileGrid: WmtsTileGrid
    format: str
    opacity: float
    attribution: str = ""


class XyzLayer(_Descriptor):
    type: Literal["XYZ"] = "XYZ"
    url: str
    opacity: float
    attribution: str = ""
    tiled: bool = True


class GeoJsonLayer(_Descriptor):
    type: Literal["GeoJSON"] = "GeoJSON"
    geojson: dict[str, Any]
    style: dict[str, Any] | None = None
    attribution: str = ""


LayerDescriptor = Union[WmsLayer, WmtsLayer, XyzLayer, GeoJsonLayer]

from __future__ import annotations

import math
from typing import Annotated, Any, Literal, Union

from pydantic import (
    BaseModel,
    ConfigDict,
    Discriminator,
    Field,
    Tag,
    field_validator,
    model_validator,
)


class TileGridModel(BaseModel):
    resolutions: list[float] | None = None
    extent: list[float] | None = None
    # Native tile-matrix identifiers as the source knows them (often strings).
    matrixIds: list[str | int] | None = None


class TileWMSSource(BaseModel):
    type: Literal["TileWMS"] = "TileWMS"
    urls: list[str] | None = None
    params: dict[str, Any] | None = None
    attributions: str | None = None


class ImageWMSSource(BaseModel):
    type: Literal["ImageWMS"] = "ImageWMS"
    url: str | None = None
    params: dict[str, Any] | None = None
    attributions: str | None = None


class WMTSSource(BaseModel):
    type: Literal["WMTS"] = "WMTS"
    urls: list[str] | None = None
    layer: str
    matrixSet: str
    format: str = "image/jpeg"
    requestEncoding: Literal["KVP", "REST"] = "KVP"
    projection: str | None = None
    tileGrid: TileGridModel | None = None
    attributions: str | None = None


class OSMSource(BaseModel):
    """
    The public OpenStreetMap tile basemap.

    Any url/attribution configured here is ignored when printing; the print service
    always gets the canonical tile template.
    """

    type: Literal["OSM"] = "OSM"
    url: str | None = None
    attributions: str | None = None


class VectorSource(BaseModel):
    type: Literal["Vector"] = "Vector"
    # GeoJSON features in the map projection.
    features: list[dict[str, Any]] = Field(default_factory=list)

    @model_validator(mode="before")
    @classmethod
    def _accept_feature_collection(cls, data: Any) -> Any:
        # Also accept {"geojson": {"type": "FeatureCollection", "features": [...]}}.
        if isinstance(data, dict) and "features" not in data:
            fc = data.get("geojson")
            if isinstance(fc, dict):
                data = {**data, "features": fc.get("features") or []}
                data.pop("geojson", None)
        return data


class UnsupportedSource(BaseModel):
    """
    Any source kind the printer knows nothing about. Kept so that ingestion never fails
    on an unknown layer; translation drops it.
    """

    model_config = ConfigDict(extra="allow")

    type: str


_SOURCE_TAGS = {"TileWMS", "ImageWMS", "WMTS", "OSM", "Vector"}


def _source_tag(value: Any) -> str:
    if isinstance(value, dict):
        kind = value.get("type")
    else:
        kind = getattr(value, "type", None)
    return kind if kind in _SOURCE_TAGS else "unsupported"


SourceVariant = Annotated[
    Union[
        Annotated[TileWMSSource, Tag("TileWMS")],
        Annotated[ImageWMSSource, Tag("ImageWMS")],
        Annotated[WMTSSource, Tag("WMTS")],
        Annotated[OSMSource, Tag("OSM")],
        Annotated[VectorSource, Tag("Vector")],
        Annotated[UnsupportedSource, Tag("unsupported")],
    ],
    Discriminator(_source_tag),
]


class MapLayer(BaseModel):
    name: str | None = None
    opacity: float = Field(default=1.0, ge=0.0, le=1.0)
    source: SourceVariant
    # Native style: a dict, a list of dicts, or a per-feature style function.
    # Only consulted for vector sources.
    style: Any = None


class ViewState(BaseModel):
    projection: str = "EPSG:3857"
    units: str | None = None
    # Native units per pixel; numeric strings are accepted, blank means absent.
    resolution: float | None = None
    center: tuple[float, float] | None = None

    @field_validator("resolution", mode="before")
    @classmethod
    def _parse_resolution(cls, value: Any) -> Any:
        if isinstance(value, str):
            s = value.strip()
            if not s:
                return None
            try:
                value = float(s)
            except ValueError as e:
                raise ValueError(f"resolution is not a number: {value!r}") from e
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            if not math.isfinite(value):
                raise ValueError(f"resolution must be finite: {value!r}")
        return value


class MapState(BaseModel):
    """
    Read-only snapshot of an interactive map: its view and its ordered layer stack
    (bottom-most first).
    """

    view: ViewState
    layers: list[MapLayer] = Field(default_factory=list)

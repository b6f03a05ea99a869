from __future__ import annotations

from typing import Annotated, Any, Union

from pydantic import BaseModel, Field

from layers.descriptors import GeoJsonLayer, WmsLayer, WmtsLayer, XyzLayer
from printspec.config import Position, ScaleBarConfig
from printspec.diagnostics import Diagnostic

SpecLayer = Annotated[
    Union[WmsLayer, WmtsLayer, XyzLayer, GeoJsonLayer], Field(discriminator="type")
]


class PrintSpec(BaseModel):
    """
    The document handed to the print service.

    `diagnostics` collects what came up while translating layers; it is for the
    caller and is not part of `to_document()`.
    """

    layers: list[SpecLayer]
    size: list[Any]  # [width, height, unit]
    center: list[float]  # [lon, lat]
    dpi: int
    scale: float
    scaleBar: ScaleBarConfig | None = None
    projection: str
    northArrow: Position | None = None
    attributions: Position | None = None
    diagnostics: list[Diagnostic] = Field(default_factory=list, exclude=True)

    def to_document(self) -> dict[str, Any]:
        return self.model_dump(mode="json", exclude_none=True)

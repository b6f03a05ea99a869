from __future__ import annotations

from loguru import logger

from layers.descriptors import (
    OSM_ATTRIBUTION,
    OSM_TILE_URL,
    GeoJsonLayer,
    LayerDescriptor,
    WmsLayer,
    WmtsLayer,
    WmtsTileGrid,
    XyzLayer,
)
from layers.geojson import features_to_collection
from layers.sources import (
    ImageWMSSource,
    MapLayer,
    OSMSource,
    TileWMSSource,
    VectorSource,
    WMTSSource,
)
from printspec.diagnostics import Diagnostic, report
from printspec.errors import StyleTranslationFailure
from styles.types import StyleTranslator


async def translate_layer(
    layer: MapLayer,
    *,
    style_translator: StyleTranslator,
    propagate_attributions: bool = False,
) -> LayerDescriptor | None:
    """
    Translate one map layer into a print-service layer descriptor.

    Returns None for sources the print service has no counterpart for. The only
    suspension point is the style translation of vector layers; if the translator
    raises, `StyleTranslationFailure` propagates.

    Attribution text is left empty for WMS/WMTS layers unless `propagate_attributions`
    is set, in which case the source's own attribution is copied.
    """
    source = layer.source
    opacity = layer.opacity

    if isinstance(source, TileWMSSource):
        return WmsLayer(
            url=(source.urls or [""])[0] or "",
            opacity=opacity,
            attribution=_attribution(source.attributions, propagate_attributions),
            layer=_wms_layer_name(source.params),
            tiled=True,
        )

    if isinstance(source, ImageWMSSource):
        return WmsLayer(
            url=source.url or "",
            opacity=opacity,
            attribution=_attribution(source.attributions, propagate_attributions),
            layer=_wms_layer_name(source.params),
            tiled=False,
        )

    if isinstance(source, WMTSSource):
        return _translate_wmts(source, opacity, propagate_attributions)

    if isinstance(source, OSMSource):
        # Always the canonical template, whatever the source was configured with.
        return XyzLayer(
            url=OSM_TILE_URL,
            opacity=opacity,
            attribution=OSM_ATTRIBUTION,
            tiled=True,
        )

    if isinstance(source, VectorSource):
        return await _translate_vector(layer, source, style_translator)

    logger.debug(f"Skipping layer {layer.name!r}: unsupported source {source.type!r}")
    return None


def _attribution(text: str | None, propagate: bool) -> str:
    return (text or "") if propagate else ""


def _wms_layer_name(params: dict | None) -> str | None:
    value = (params or {}).get("LAYERS")
    return None if value is None else str(value)


def _translate_wmts(
    source: WMTSSource, opacity: float, propagate_attributions: bool
) -> WmtsLayer:
    diagnostics: list[Diagnostic] = []
    grid = source.tileGrid
    resolutions = list(grid.resolutions) if grid and grid.resolutions is not None else None

    # Matrix ids are emitted as 0..N-1. Sources whose own identifiers differ from that
    # will print with a misaligned grid, so say so.
    matrix_ids = list(range(len(resolutions))) if resolutions is not None else None
    native_ids = grid.matrixIds if grid else None
    if native_ids and matrix_ids is not None:
        if [str(m) for m in native_ids] != [str(i) for i in matrix_ids]:
            report(
                diagnostics,
                "warning",
                f"WMTS layer {source.layer!r} uses non-sequential matrix ids; "
                "printing with 0..N-1",
                details=[str(m) for m in native_ids],
            )

    return WmtsLayer(
        requestEncoding=source.requestEncoding,
        url=(source.urls or [""])[0] or "",
        layer=source.layer,
        projection=source.projection,
        matrixSet=source.matrixSet,
        tileGrid=WmtsTileGrid(
            resolutions=resolutions,
            extent=list(grid.extent) if grid and grid.extent is not None else None,
            matrixIds=matrix_ids,
        ),
        format=source.format,
        opacity=opacity,
        attribution=_attribution(source.attributions, propagate_attributions),
        diagnostics=diagnostics,
    )


async def _translate_vector(
    layer: MapLayer, source: VectorSource, style_translator: StyleTranslator
) -> GeoJsonLayer:
    diagnostics: list[Diagnostic] = []
    geojson, skipped = features_to_collection(source.features)
    if skipped:
        report(
            diagnostics,
            "warning",
            f"Skipped {len(skipped)} feature(s) with unreadable geometry",
            details=skipped,
        )

    native_style = layer.style
    style = None
    if callable(native_style):
        # Per-feature style functions can not be expressed as a single print style.
        report(
            diagnostics,
            "warning",
            f"Layer {layer.name!r} uses a style function; printing without a style",
        )
    elif native_style:
        try:
            translated = await style_translator.read_style(native_style)
        except Exception as e:
            raise StyleTranslationFailure(
                f"Style translation failed for layer {layer.name!r}: {e}"
            ) from e

        if translated.errors:
            report(diagnostics, "error", "Style translation errors", details=translated.errors)
        if translated.warnings:
            report(
                diagnostics, "warning", "Style translation warnings", details=translated.warnings
            )
        if translated.unsupported_properties:
            report(
                diagnostics,
                "warning",
                "Detected unsupported style properties",
                details=translated.unsupported_properties,
            )
        style = translated.output

    return GeoJsonLayer(
        geojson=geojson,
        style=style,
        attribution="",
        diagnostics=diagnostics,
    )

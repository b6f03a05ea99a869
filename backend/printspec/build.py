from __future__ import annotations

import asyncio
import math
from dataclasses import replace

from loguru import logger

from geo.proj import to_lon_lat
from geo.scale import compute_scale
from layers.sources import MapState, ViewState
from layers.translate import translate_layer
from printspec.config import PrintConfig, get_print_config
from printspec.diagnostics import Diagnostic
from printspec.errors import IncompleteViewState, SpecAssemblyFailed
from printspec.types import PrintSpec
from styles.simple import SimpleStyleTranslator
from styles.types import StyleTranslator


def _check_view(view: ViewState) -> None:
    # 0 is a (degenerate) resolution; only a missing one is fatal.
    if not view.units or view.center is None or view.resolution is None:
        logger.warning(
            f"Incomplete map view: units={view.units!r} "
            f"resolution={view.resolution!r} center={view.center!r}"
        )
        raise IncompleteViewState("Can not determine unit / resolution from map")


async def build_spec(
    map_state: MapState,
    *,
    config: PrintConfig | None = None,
    style_translator: StyleTranslator | None = None,
) -> PrintSpec:
    """
    Build a print spec from a map snapshot.

    - View problems (`IncompleteViewState`, `InvalidUnitKind`, `UnknownProjection`)
      are raised before any layer is looked at.
    - Layers are translated concurrently. If any translation fails the whole build
      fails with `SpecAssemblyFailed`; there is no partial spec.
    - Unsupported layers are dropped; the remaining layers keep their map order.
    """
    cfg = config or get_print_config()
    translator = style_translator or SimpleStyleTranslator()
    view = map_state.view

    _check_view(view)
    scale = compute_scale(view.resolution, view.units)
    if not math.isfinite(scale):
        logger.warning(f"Unusable map resolution: {view.resolution!r}")
        raise IncompleteViewState(f"Can not derive a scale from resolution {view.resolution!r}")
    lon, lat = to_lon_lat(view.center, view.projection)

    tasks = [
        asyncio.ensure_future(
            translate_layer(
                layer,
                style_translator=translator,
                propagate_attributions=cfg.propagateAttributions,
            )
        )
        for layer in map_state.layers
    ]
    try:
        translated = await asyncio.gather(*tasks)
    except Exception as e:
        # Stop the remaining translations and collect their outcomes so that a second
        # failure is not left unretrieved.
        for t in tasks:
            t.cancel()
        await asyncio.gather(*tasks, return_exceptions=True)
        logger.exception(f"Failed to translate map layers: {e}")
        raise SpecAssemblyFailed("Failed to build print spec") from e

    layers = []
    diagnostics: list[Diagnostic] = []
    for index, descriptor in enumerate(translated):
        if descriptor is None:
            continue
        layers.append(descriptor)
        diagnostics.extend(replace(d, layer=index) for d in descriptor.diagnostics)

    logger.info(
        f"Built print spec: {len(layers)}/{len(map_state.layers)} layers, "
        f"scale 1:{scale:.0f}, {len(diagnostics)} diagnostic(s)"
    )

    return PrintSpec(
        layers=layers,
        size=cfg.size.as_list(),
        center=[lon, lat],
        dpi=cfg.dpi,
        scale=scale,
        scaleBar=cfg.scaleBar,
        projection=view.projection,
        northArrow=cfg.northArrow,
        attributions=cfg.attributions,
        diagnostics=diagnostics,
    )

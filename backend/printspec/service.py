from __future__ import annotations

from typing import Any, Protocol

from loguru import logger

from layers.sources import MapState
from printspec.build import build_spec
from printspec.config import PrintConfig
from styles.types import StyleTranslator


class PrintService(Protocol):
    """
    Renders a print spec document into an image (PNG, PDF, ... as the service sees fit).
    """

    async def print(self, spec: dict[str, Any]) -> bytes: ...


async def export_map(
    map_state: MapState,
    printer: PrintService,
    *,
    config: PrintConfig | None = None,
    style_translator: StyleTranslator | None = None,
) -> bytes:
    spec = await build_spec(map_state, config=config, style_translator=style_translator)
    image = await printer.print(spec.to_document())
    logger.info(f"Printed map: {len(image)} bytes")
    return image

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path
from typing import Literal

import yaml
from pydantic import BaseModel, Field

Position = Literal["top-left", "top-right", "bottom-left", "bottom-right"]


class PageSize(BaseModel):
    width: float = Field(default=400.0, gt=0.0)
    height: float = Field(default=240.0, gt=0.0)
    unit: Literal["mm", "px"] = "mm"

    def as_list(self) -> list:
        return [self.width, self.height, self.unit]


class ScaleBarConfig(BaseModel):
    position: Position = "bottom-left"
    units: Literal["metric", "imperial"] = "metric"


class PrintConfig(BaseModel):
    """
    Page layout and decorations of a printed map.

    Defaults:
    - 400 x 240 mm page at 120 dpi
    - metric scale bar bottom-left, north arrow top-right, attributions bottom-right
    - WMS/WMTS attribution text is not copied from the sources (`propagateAttributions`)

    Set `scaleBar`/`northArrow`/`attributions` to null to leave the decoration out.
    """

    size: PageSize = Field(default_factory=PageSize)
    dpi: int = Field(default=120, ge=1)
    scaleBar: ScaleBarConfig | None = Field(default_factory=ScaleBarConfig)
    northArrow: Position | None = "top-right"
    attributions: Position | None = "bottom-right"
    propagateAttributions: bool = False


def print_config_path() -> Path | None:
    raw = (os.getenv("MAPPRINT_PRINT_CONFIG") or "").strip()
    return Path(raw) if raw else None


def load_print_config(path: Path | None = None) -> PrintConfig:
    """
    Read a PrintConfig from YAML. Missing keys fall back to the defaults; a missing
    file means all defaults.

    `MAPPRINT_PRINT_DPI` overrides the configured DPI.
    """
    data: dict = {}
    p = path or print_config_path()
    if p is not None and p.exists():
        raw = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
        if not isinstance(raw, dict):
            raise ValueError(f"Invalid print config yaml root: {p}")
        data = raw

    dpi = (os.getenv("MAPPRINT_PRINT_DPI") or "").strip()
    if dpi:
        data = {**data, "dpi": int(dpi)}

    return PrintConfig.model_validate(data)


@lru_cache(maxsize=1)
def get_print_config() -> PrintConfig:
    return load_print_config()


def clear_print_config_cache() -> None:
    """
    Forget the cached config; the next `get_print_config()` re-reads YAML and env.
    """
    get_print_config.cache_clear()

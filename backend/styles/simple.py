from __future__ import annotations

import math
import re
from typing import Any

from styles.types import StyleTranslation

_RGB_RE = re.compile(
    r"^rgba?\(\s*([\d.]+)\s*,\s*([\d.]+)\s*,\s*([\d.]+)\s*(?:,\s*([\d.]+)\s*)?\)$"
)
_HEX_RE = re.compile(r"^#([0-9a-fA-F]{3}|[0-9a-fA-F]{6}|[0-9a-fA-F]{8})$")

_STYLE_KEYS = {"fill", "stroke", "image", "text"}
_FILL_KEYS = {"color"}
_STROKE_KEYS = {"color", "width", "lineDash", "lineCap", "lineJoin"}
_CIRCLE_KEYS = {"radius", "fill", "stroke"}
_ICON_KEYS = {"src", "opacity", "rotation"}
_TEXT_KEYS = {"text", "font", "fill", "stroke", "offsetX", "offsetY"}


class SimpleStyleTranslator:
    """
    Translates OpenLayers-shaped style dicts into GeoStyler-shaped style objects.

    Input (one dict, or a list of them):
        {
            "fill": {"color": "rgba(255, 0, 0, 0.5)"},
            "stroke": {"color": "#0000ff", "width": 2, "lineDash": [4, 2]},
            "image": {"circle": {"radius": 5, "fill": {...}, "stroke": {...}}},
            "text": {"text": "label", "font": "12px sans-serif", ...},
        }

    Output:
        {"name": "", "rules": [{"name": "", "symbolizers": [...]}]}

    Only a single uniform style is produced; there is no rule filtering or scale
    dependency.
    """

    def __init__(self, name: str = ""):
        self.name = name

    async def read_style(self, native_style: Any) -> StyleTranslation:
        return self.translate(native_style)

    def translate(self, native_style: Any) -> StyleTranslation:
        styles = native_style if isinstance(native_style, list) else [native_style]

        errors: list[str] = []
        warnings: list[str] = []
        unsupported: dict[str, dict[str, str]] = {}
        symbolizers: list[dict[str, Any]] = []

        for style in styles:
            if not isinstance(style, dict):
                errors.append(f"Unsupported style type: {type(style).__name__}")
                continue
            ctx = _Context(warnings=warnings, unsupported=unsupported)
            symbolizers.extend(_style_symbolizers(style, ctx))

        if not symbolizers:
            return StyleTranslation(
                output=None,
                errors=errors,
                warnings=warnings,
                unsupported_properties=unsupported,
            )

        output = {
            "name": self.name,
            "rules": [{"name": self.name, "symbolizers": symbolizers}],
        }
        return StyleTranslation(
            output=output,
            errors=errors,
            warnings=warnings,
            unsupported_properties=unsupported,
        )


class _Context:
    def __init__(self, *, warnings: list[str], unsupported: dict[str, dict[str, str]]):
        self.warnings = warnings
        self.unsupported = unsupported

    def flag_unknown(self, kind: str, props: dict[str, Any], known: set[str]) -> None:
        for key in props:
            if key not in known:
                self.unsupported.setdefault(kind, {})[key] = "none"

    def color(self, value: Any) -> tuple[str | None, float | None]:
        if value is None:
            return None, None
        parsed = _split_color(value)
        if parsed is None:
            self.warnings.append(f"Could not parse color {value!r}; passing it through")
            return str(value), None
        return parsed


def _style_symbolizers(style: dict[str, Any], ctx: _Context) -> list[dict[str, Any]]:
    ctx.flag_unknown("Style", style, _STYLE_KEYS)

    out: list[dict[str, Any]] = []
    fill = style.get("fill") or None
    stroke = style.get("stroke") or None

    if fill is not None:
        out.append(_fill_symbolizer(fill, stroke, ctx))
    elif stroke is not None:
        out.append(_line_symbolizer(stroke, ctx))

    image = style.get("image") or None
    if image is not None:
        sym = _image_symbolizer(image, ctx)
        if sym is not None:
            out.append(sym)

    text = style.get("text") or None
    if text is not None:
        out.append(_text_symbolizer(text, ctx))

    return out


def _fill_symbolizer(
    fill: dict[str, Any], stroke: dict[str, Any] | None, ctx: _Context
) -> dict[str, Any]:
    ctx.flag_unknown("Fill", fill, _FILL_KEYS)
    color, opacity = ctx.color(fill.get("color"))
    sym: dict[str, Any] = {"kind": "Fill", "color": color, "fillOpacity": opacity}
    if stroke is not None:
        ctx.flag_unknown("Fill", stroke, _STROKE_KEYS)
        outline_color, outline_opacity = ctx.color(stroke.get("color"))
        sym.update(
            {
                "outlineColor": outline_color,
                "outlineOpacity": outline_opacity,
                "outlineWidth": stroke.get("width"),
                "outlineDasharray": stroke.get("lineDash"),
            }
        )
    return _drop_none(sym)


def _line_symbolizer(stroke: dict[str, Any], ctx: _Context) -> dict[str, Any]:
    ctx.flag_unknown("Line", stroke, _STROKE_KEYS)
    color, opacity = ctx.color(stroke.get("color"))
    return _drop_none(
        {
            "kind": "Line",
            "color": color,
            "opacity": opacity,
            "width": stroke.get("width"),
            "dasharray": stroke.get("lineDash"),
            "cap": stroke.get("lineCap"),
            "join": stroke.get("lineJoin"),
        }
    )


def _image_symbolizer(image: dict[str, Any], ctx: _Context) -> dict[str, Any] | None:
    if "circle" in image:
        circle = image.get("circle") or {}
        ctx.flag_unknown("Mark", circle, _CIRCLE_KEYS)
        fill = circle.get("fill") or {}
        stroke = circle.get("stroke") or {}
        color, fill_opacity = ctx.color(fill.get("color"))
        stroke_color, stroke_opacity = ctx.color(stroke.get("color"))
        return _drop_none(
            {
                "kind": "Mark",
                "wellKnownName": "circle",
                "radius": circle.get("radius"),
                "color": color,
                "fillOpacity": fill_opacity,
                "strokeColor": stroke_color,
                "strokeOpacity": stroke_opacity,
                "strokeWidth": stroke.get("width"),
            }
        )

    if "icon" in image:
        icon = image.get("icon") or {}
        ctx.flag_unknown("Icon", icon, _ICON_KEYS)
        rotation = icon.get("rotation")
        return _drop_none(
            {
                "kind": "Icon",
                "image": icon.get("src"),
                "opacity": icon.get("opacity"),
                # radians -> degrees
                "rotate": math.degrees(rotation) if rotation is not None else None,
            }
        )

    for key in image:
        ctx.unsupported.setdefault("Image", {})[key] = "none"
    return None


def _text_symbolizer(text: dict[str, Any], ctx: _Context) -> dict[str, Any]:
    ctx.flag_unknown("Text", text, _TEXT_KEYS)
    fill = text.get("fill") or {}
    stroke = text.get("stroke") or {}
    color, opacity = ctx.color(fill.get("color"))
    halo_color, _ = ctx.color(stroke.get("color"))
    font = text.get("font")
    offset = None
    if text.get("offsetX") is not None or text.get("offsetY") is not None:
        offset = [text.get("offsetX") or 0, text.get("offsetY") or 0]
    return _drop_none(
        {
            "kind": "Text",
            "label": text.get("text"),
            "font": [font] if font else None,
            "color": color,
            "opacity": opacity,
            "haloColor": halo_color,
            "haloWidth": stroke.get("width"),
            "offset": offset,
        }
    )


def _split_color(value: Any) -> tuple[str, float | None] | None:
    """
    Color -> ("#rrggbb", opacity). Opacity is None when the color carries no alpha.
    """
    if isinstance(value, (list, tuple)):
        if len(value) not in (3, 4):
            return None
        try:
            r, g, b = (int(round(float(c))) for c in value[:3])
            alpha = float(value[3]) if len(value) == 4 else None
        except (TypeError, ValueError):
            return None
        return _hex(r, g, b), alpha

    if not isinstance(value, str):
        return None

    s = value.strip()
    m = _HEX_RE.match(s)
    if m:
        digits = m.group(1)
        if len(digits) == 3:
            digits = "".join(ch * 2 for ch in digits)
        alpha = None
        if len(digits) == 8:
            alpha = round(int(digits[6:8], 16) / 255.0, 3)
            digits = digits[:6]
        return f"#{digits.lower()}", alpha

    m = _RGB_RE.match(s)
    if m:
        r, g, b = (int(round(float(c))) for c in m.groups()[:3])
        alpha = float(m.group(4)) if m.group(4) is not None else None
        return _hex(r, g, b), alpha

    return None


def _hex(r: int, g: int, b: int) -> str:
    r, g, b = (max(0, min(255, c)) for c in (r, g, b))
    return f"#{r:02x}{g:02x}{b:02x}"


def _drop_none(d: dict[str, Any]) -> dict[str, Any]:
    return {k: v for k, v in d.items() if v is not None}

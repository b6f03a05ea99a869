from __future__ import annotations

import asyncio

import pytest

from styles.simple import SimpleStyleTranslator


def _symbolizers(style):
    out = SimpleStyleTranslator().translate(style)
    return out, out.output["rules"][0]["symbolizers"] if out.output else []


def test_stroke_only_is_a_line():
    out, syms = _symbolizers(
        {"stroke": {"color": "rgba(0, 128, 255, 0.5)", "width": 3, "lineDash": [4, 2]}}
    )
    assert syms == [
        {
            "kind": "Line",
            "color": "#0080ff",
            "opacity": 0.5,
            "width": 3,
            "dasharray": [4, 2],
        }
    ]
    assert out.errors == [] and out.warnings == []


def test_fill_carries_outline_from_stroke():
    _, syms = _symbolizers({"fill": {"color": [255, 0, 0, 0.25]}, "stroke": {"color": "#00f"}})
    assert syms == [
        {
            "kind": "Fill",
            "color": "#ff0000",
            "fillOpacity": 0.25,
            "outlineColor": "#0000ff",
        }
    ]


def test_circle_and_text():
    _, syms = _symbolizers(
        {
            "image": {
                "circle": {
                    "radius": 5,
                    "fill": {"color": "#112233"},
                    "stroke": {"color": "#ffffff", "width": 1},
                }
            },
            "text": {"text": "Prague", "font": "12px sans-serif", "fill": {"color": "#000"}},
        }
    )
    assert syms[0] == {
        "kind": "Mark",
        "wellKnownName": "circle",
        "radius": 5,
        "color": "#112233",
        "strokeColor": "#ffffff",
        "strokeWidth": 1,
    }
    assert syms[1] == {
        "kind": "Text",
        "label": "Prague",
        "font": ["12px sans-serif"],
        "color": "#000000",
    }


def test_icon_rotation_is_converted_to_degrees():
    _, syms = _symbolizers({"image": {"icon": {"src": "pin.png", "rotation": 3.141592653589793}}})
    assert syms[0]["kind"] == "Icon"
    assert syms[0]["image"] == "pin.png"
    assert syms[0]["rotate"] == pytest.approx(180.0)


def test_unknown_properties_are_reported():
    out, syms = _symbolizers(
        {"stroke": {"color": "#000", "miterLimit": 4}, "zIndex": 3, "image": {"regularShape": {}}}
    )
    assert [s["kind"] for s in syms] == ["Line"]
    assert out.unsupported_properties == {
        "Style": {"zIndex": "none"},
        "Line": {"miterLimit": "none"},
        "Image": {"regularShape": "none"},
    }


def test_unparseable_color_is_passed_through_with_warning():
    out, syms = _symbolizers({"stroke": {"color": "cornflowerblue"}})
    assert syms[0]["color"] == "cornflowerblue"
    assert len(out.warnings) == 1


def test_non_dict_style_is_an_error():
    out = asyncio.run(SimpleStyleTranslator().read_style("red"))
    assert out.output is None
    assert out.errors == ["Unsupported style type: str"]


def test_style_list_is_merged_into_one_rule():
    out, syms = _symbolizers(
        [{"stroke": {"color": "#000", "width": 4}}, {"stroke": {"color": "#fff", "width": 2}}]
    )
    assert [s["width"] for s in syms] == [4, 2]
    assert len(out.output["rules"]) == 1

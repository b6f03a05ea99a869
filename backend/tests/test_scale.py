from __future__ import annotations

import math

import pytest

from geo.scale import compute_scale
from geo.units import METERS_PER_UNIT, Units
from printspec.errors import InvalidUnitKind


def test_scale_for_one_meter_per_pixel():
    # 1 m/px at 0.28mm pixels -> ~1:3571
    assert compute_scale(1.0, "m") == pytest.approx(39.37 * 25.4 / 0.28)
    assert compute_scale(1.0, Units.m) == pytest.approx(3571.4214, rel=1e-6)


@pytest.mark.parametrize("units", [u.value for u in Units])
def test_scale_is_linear_in_resolution(units):
    r = 12.345
    assert compute_scale(2 * r, units) == pytest.approx(2 * compute_scale(r, units))


@pytest.mark.parametrize("units", list(Units))
def test_zero_resolution_gives_zero_scale(units):
    assert compute_scale(0, units) == 0.0


def test_degrees_use_sphere_meters_per_degree():
    assert METERS_PER_UNIT[Units.degrees] == pytest.approx(111194.8743, rel=1e-9)
    assert compute_scale(0.001, "degrees") == pytest.approx(
        0.001 * 111194.8743 * 39.37 * 25.4 / 0.28, rel=1e-9
    )


def test_numeric_string_resolution_is_parsed():
    assert compute_scale("2.5", "m") == pytest.approx(compute_scale(2.5, "m"))


def test_missing_resolution_is_nan():
    assert math.isnan(compute_scale(None, "m"))


def test_unknown_units_raise():
    with pytest.raises(InvalidUnitKind):
        compute_scale(1.0, "furlongs")

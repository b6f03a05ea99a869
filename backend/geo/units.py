from __future__ import annotations

import math
from enum import Enum

from printspec.errors import InvalidUnitKind


class Units(str, Enum):
    radians = "radians"
    degrees = "degrees"
    ft = "ft"
    m = "m"
    us_ft = "us-ft"


# Sphere radius used by the web-mapping libraries for angular units.
_EARTH_RADIUS_M = 6370997.0

METERS_PER_UNIT: dict[Units, float] = {
    Units.radians: _EARTH_RADIUS_M / (2.0 * math.pi),
    Units.degrees: (2.0 * math.pi * _EARTH_RADIUS_M) / 360.0,
    Units.ft: 0.3048,
    Units.m: 1.0,
    Units.us_ft: 1200.0 / 3937.0,
}


def parse_units(units: Units | str) -> Units:
    try:
        return Units(units)
    except ValueError as e:
        raise InvalidUnitKind(units) from e


def meters_per_unit(units: Units | str) -> float:
    return METERS_PER_UNIT[parse_units(units)]

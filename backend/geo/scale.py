from __future__ import annotations

import math

from geo.units import Units, meters_per_unit

# Standardized rendering pixel size of 0.28mm, i.e. ~90.7 dpi.
ASSUMED_SCREEN_DPI = 25.4 / 0.28
INCHES_PER_METER = 39.37


def compute_scale(resolution: float | str | None, units: Units | str) -> float:
    """
    Map resolution (native units per pixel) -> scale denominator.

    Notes:
    - DPI is fixed at the standardized rendering pixel size; it is not the print DPI.
    - `resolution` may be a numeric string.
    - A missing resolution yields NaN and 0 yields 0.0. Callers that need a usable
      scale must check for a resolution themselves.
    - Unknown `units` raise `InvalidUnitKind`.
    """
    mpu = meters_per_unit(units)
    if resolution is None or resolution == "":
        return math.nan
    return float(resolution) * mpu * INCHES_PER_METER * ASSUMED_SCREEN_DPI

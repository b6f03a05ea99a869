from __future__ import annotations

from functools import lru_cache

from pyproj import Transformer
from pyproj.exceptions import CRSError

from printspec.errors import UnknownProjection

LONLAT = "EPSG:4326"


@lru_cache(maxsize=16)
def transformer_to_lonlat(projection: str) -> Transformer:
    # always_xy keeps (x, y) / (lon, lat) ordering regardless of CRS axis order.
    return Transformer.from_crs(projection, LONLAT, always_xy=True)


def to_lon_lat(coordinate: tuple[float, float], projection: str) -> tuple[float, float]:
    """
    Reproject a single coordinate from `projection` to lon/lat degrees.
    """
    code = (projection or "").strip()
    try:
        t = transformer_to_lonlat(code)
    except CRSError as e:
        raise UnknownProjection(projection) from e
    x, y = coordinate
    lon, lat = t.transform(float(x), float(y))
    return float(lon), float(lat)

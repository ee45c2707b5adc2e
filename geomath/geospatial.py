"""Geospatial points and great-circle math on a spherical earth.

Distances use the haversine formula and intermediate points use spherical
interpolation, both as described at
http://www.movable-type.co.uk/scripts/latlong.html. The *diameter* argument
is the sphere scale in metres; the default matches PostGIS.
"""
import logging
import math
import operator
import re
from itertools import pairwise

import numpy as np

from .constants import (
    DEFAULT_EARTH_DIAMETER_M, MIN_EARTH_DIAMETER_M,
    LATITUDE_RANGE, LONGITUDE_RANGE, MACHINE_EPSILON,
)
from .errors import InvalidArgument, RangeError
from .numeric import to_radians, to_degrees
from .types import Point, Path

log = logging.getLogger(__name__)

_INTERNAL_RE = re.compile(r"\((?P<lat>[^,]*),(?P<lon>[^)]*)\)")
_GIS_PREFIX = "POINT("
_GIS_RE = re.compile(r"POINT\((?P<lon>[^ ]*) (?P<lat>[^)]*)\)")

# ============================================================
# Validation
# ============================================================
def _check_latitude(lat: float) -> float:
    lat = float(lat)
    if not LATITUDE_RANGE[0] <= lat <= LATITUDE_RANGE[1]:
        raise RangeError(f"latitude must be in the range [-90,90]: lat={lat}")
    return lat

def _check_longitude(lon: float) -> float:
    lon = float(lon)
    if not LONGITUDE_RANGE[0] <= lon <= LONGITUDE_RANGE[1]:
        raise RangeError(f"longitude must be in the range [-180,180]: lon={lon}")
    return lon

def _check_diameter(diameter: float) -> None:
    if not diameter > MIN_EARTH_DIAMETER_M:
        raise InvalidArgument(f"diameter must exceed {MIN_EARTH_DIAMETER_M} m: diameter={diameter}")

def _check_fraction(fraction: float) -> None:
    if not 0.0 <= fraction <= 1.0:
        raise InvalidArgument(f"fractional distance must be in the range [0,1]: fraction={fraction}")

def _fmt(v: float) -> str:
    """Shortest text that reads back to the same double; 40.0 prints as '40'."""
    return np.format_float_positional(v, trim="-")

def _parse_float(text: str, source: str) -> float:
    try:
        return float(text)
    except ValueError as err:
        raise InvalidArgument(f"could not parse {source!r} as a GeoPoint") from err

def _normalize_longitude(lon: float) -> float:
    return ((lon + 540.0) % 360.0) - 180.0

# ============================================================
# Geospatial Point
# ============================================================
class GeoPoint(Point):
    """A latitude/longitude pair in decimal degrees.

    Stored as a 2D double precision point with longitude on axis 0 and
    latitude on axis 1. Every constructor and mutator rejects values outside
    -90 <= lat <= 90, -180 <= lon <= 180 with RangeError before storing them.
    """

    __slots__ = ()

    def __init__(self, lat: float = 0.0, lon: float = 0.0):
        lat = _check_latitude(lat); lon = _check_longitude(lon)
        super().__init__(lon, lat, dtype=np.float64)

    @classmethod
    def origin(cls, dim: int = 2, dtype=np.float64) -> "GeoPoint":
        if dim != 2:
            raise InvalidArgument(f"geospatial points are 2D: dim={dim}")
        return cls()

    @classmethod
    def parse(cls, text: str) -> "GeoPoint":
        """Read "(lat,lon)" or the GIS form "POINT(lon lat)".

        Malformed text raises InvalidArgument; numbers out of range raise RangeError.
        """
        if not text:
            raise InvalidArgument("cannot parse an empty string as a GeoPoint")
        if text.startswith(_GIS_PREFIX):
            m = _GIS_RE.fullmatch(text)
        else:
            m = _INTERNAL_RE.fullmatch(text)
        if m is None:
            raise InvalidArgument(f"could not parse {text!r} as a GeoPoint")
        lat = _parse_float(m["lat"], text)
        lon = _parse_float(m["lon"], text)
        return cls(lat, lon)

    @property
    def latitude(self) -> float:
        return self._values[1].item()

    @latitude.setter
    def latitude(self, lat: float) -> None:
        self._values[1] = _check_latitude(lat)

    @property
    def longitude(self) -> float:
        return self._values[0].item()

    @longitude.setter
    def longitude(self, lon: float) -> None:
        self._values[0] = _check_longitude(lon)

    def __setitem__(self, i, value):
        i = operator.index(i)
        if not -2 <= i < 2:
            raise IndexError(f"GeoPoint index out of range: {i}")
        if i % 2 == 0:
            self.longitude = value
        else:
            self.latitude = value

    def copy(self) -> "GeoPoint":
        return GeoPoint(self.latitude, self.longitude)

    def __str__(self) -> str:
        return f"({_fmt(self.latitude)},{_fmt(self.longitude)})"

    def __repr__(self) -> str:
        return f"GeoPoint(lat={self.latitude!r}, lon={self.longitude!r})"

    def gis(self) -> str:
        """GIS well-known text, e.g. 'POINT(110 40)', suitable for PostGIS."""
        return f"{_GIS_PREFIX}{_fmt(self.longitude)} {_fmt(self.latitude)})"

    def dms(self) -> str:
        """Degrees-minutes-seconds form, e.g. '40° 0' 0"N, 110° 0' 0"E'."""
        return f"{_to_dms(self.latitude, 'N', 'S')}, {_to_dms(self.longitude, 'E', 'W')}"

def _to_dms(val: float, positive: str, negative: str) -> str:
    direction = positive if val >= 0.0 else negative
    val = abs(val)
    d = int(val); m = int((val-d)*60); sc = (val-d-m/60)*3600
    return f"{d}° {m}' {_fmt(sc)}\"{direction}"

# ============================================================
# Point Computations
# ============================================================
def distance(p1: GeoPoint, p2: GeoPoint, diameter: float = DEFAULT_EARTH_DIAMETER_M) -> float:
    """Great-circle distance in metres between two points (haversine)."""
    _check_diameter(diameter)
    phi1 = to_radians(p1.latitude); phi2 = to_radians(p2.latitude)
    d_phi = to_radians(p2.latitude - p1.latitude)
    d_lambda = to_radians(p2.longitude - p1.longitude)

    a = math.sin(d_phi/2)**2 + math.cos(phi1)*math.cos(phi2)*math.sin(d_lambda/2)**2
    a = min(a, 1.0)
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1-a))
    d = diameter * c
    if d > diameter * math.pi:
        raise AssertionError(f"great-circle distance {d} exceeds half a circumference")
    return d

def are_close(p1: GeoPoint, p2: GeoPoint, epsilon: float = 1.0,
              diameter: float = DEFAULT_EARTH_DIAMETER_M) -> bool:
    """True if the points are no more than *epsilon* metres apart."""
    if not epsilon > 0.0:
        raise InvalidArgument(f"epsilon must be positive: epsilon={epsilon}")
    return distance(p1, p2, diameter) <= epsilon

def intermediate_point(p1: GeoPoint, p2: GeoPoint, fraction: float,
                       diameter: float = DEFAULT_EARTH_DIAMETER_M) -> GeoPoint:
    """Point at *fraction* of the great-circle distance from p1 to p2.

    fraction must be in [0,1]; 0 gives p1 and 1 gives p2.
    """
    _check_fraction(fraction)
    _check_diameter(diameter)

    # Coincident points make sin(delta) vanish; every intermediate point is p1.
    if are_close(p1, p2, MACHINE_EPSILON * 2, diameter):
        return p1.copy()

    f = fraction
    delta = distance(p1, p2, diameter) / diameter
    phi1 = to_radians(p1.latitude); lambda1 = to_radians(p1.longitude)
    phi2 = to_radians(p2.latitude); lambda2 = to_radians(p2.longitude)

    A = math.sin((1-f)*delta) / math.sin(delta)
    B = math.sin(f*delta) / math.sin(delta)
    x = A*math.cos(phi1)*math.cos(lambda1) + B*math.cos(phi2)*math.cos(lambda2)
    y = A*math.cos(phi1)*math.sin(lambda1) + B*math.cos(phi2)*math.sin(lambda2)
    z = A*math.sin(phi1) + B*math.sin(phi2)
    phi_i = math.atan2(z, math.sqrt(x**2 + y**2))
    lambda_i = math.atan2(y, x)
    lat = min(LATITUDE_RANGE[1], max(LATITUDE_RANGE[0], to_degrees(phi_i)))  # rounding at the poles
    return GeoPoint(lat, _normalize_longitude(to_degrees(lambda_i)))

# ============================================================
# Path Computations
# ============================================================
def path_length(path: Path, diameter: float = DEFAULT_EARTH_DIAMETER_M) -> float:
    """Length in metres along an ordered sequence of points; 0 for fewer than two."""
    return sum((distance(p, q, diameter) for p, q in pairwise(path)), 0.0)

def path_intermediate_point(path: Path, fraction: float,
                            diameter: float = DEFAULT_EARTH_DIAMETER_M) -> GeoPoint:
    """Point at *fraction* of the whole path's length.

    0 gives the first point and 1 gives the last. A single-point path gives
    that point for any fraction. An empty path raises InvalidArgument.
    """
    _check_fraction(fraction)
    if len(path) == 0:
        raise InvalidArgument("cannot determine an intermediate point on an empty path")

    if len(path) == 1 or fraction == 0.0:
        return path[0].copy()
    if fraction == 1.0:
        return path[-1].copy()

    remaining = path_length(path, diameter) * fraction
    n_segs = len(path) - 1
    for i, (prev, p) in enumerate(pairwise(path), start=1):
        dist = distance(prev, p, diameter)
        remaining -= dist
        if remaining == 0.0:
            return p.copy()
        # The last segment absorbs any rounding left over from the walk.
        if remaining < 0.0 or i == n_segs:
            if dist == 0.0:
                return p.copy()
            local = min(1.0, max(0.0, (remaining + dist) / dist))
            log.debug("fraction %r lands on segment %d/%d at local fraction %r",
                      fraction, i, n_segs, local)
            return intermediate_point(prev, p, local, diameter)

    raise AssertionError("path walk ended without locating the intermediate point")

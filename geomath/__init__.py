"""Fixed-dimension points, line geometry, geospatial math and Brent minimization."""

from .errors import InvalidArgument, RangeError, GeometryError, NoIntersection, NoConvergence
from .types import Point, Line, Path
from .numeric import close_to, machine_epsilon, to_radians, to_degrees, gcd
from .vector import as_vector, vsum, dot_product, norm, point_distance, points_close
from .geometry import (
    length as line_length, midpoint,
    distance as line_distance, intersection,
)
from .geospatial import (
    GeoPoint,
    distance as geo_distance, are_close as geo_close,
    intermediate_point, path_length, path_intermediate_point,
)
from .minimum import minimize, maximize

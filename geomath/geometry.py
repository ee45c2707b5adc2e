"""Line geometry: length, midpoint, point-to-line distance and 2D intersection."""
from .errors import InvalidArgument, NoIntersection
from .numeric import close_to
from .types import Point, Line
from .vector import as_vector, dot_product, norm

# ============================================================
# Segment Measures
# ============================================================
def length(line: Line, dtype=None) -> float:
    """Distance between the line's endpoints."""
    a = as_vector(line.a, dtype); b = as_vector(line.b, dtype)
    if a.size != b.size:
        raise InvalidArgument(f"line endpoints differ in dimension: {a.size} != {b.size}")
    return norm(b - a)

def midpoint(line: Line, dtype=None) -> Point:
    """Element-wise average of the endpoints, computed in *dtype*."""
    a = as_vector(line.a, dtype); b = as_vector(line.b, dtype)
    if a.size != b.size:
        raise InvalidArgument(f"line endpoints differ in dimension: {a.size} != {b.size}")
    return Point((a + b) / 2)

# ============================================================
# Point-Line Distance
# ============================================================
def distance(first, second, dtype=None) -> float:
    """Perpendicular distance between a point and the infinite line through a line's endpoints.

    Arguments may come in either order. The foot of the perpendicular may
    lie outside the segment [a, b].
    """
    if isinstance(first, Line) and isinstance(second, Point):
        line, p = first, second
    elif isinstance(first, Point) and isinstance(second, Line):
        p, line = first, second
    else:
        raise InvalidArgument(
            f"distance needs one Line and one Point, got {type(first).__name__} and {type(second).__name__}")

    a = as_vector(line.a, dtype); pv = as_vector(p, dtype)
    if pv.size != line.dimension:
        raise InvalidArgument(f"dimension mismatch: point {pv.size}, line {line.dimension}")
    pa = pv - a
    ba = as_vector(line.b, dtype) - a
    ba2 = dot_product(ba, ba)
    if ba2 == 0:
        return norm(pa)  # degenerate line collapses to a point
    t = dot_product(pa, ba) / ba2
    return norm(pa - t * ba)

# ============================================================
# Line Intersection
# ============================================================
def intersection(l1: Line, l2: Line, dtype=None) -> Point:
    """Intersection of two infinite 2D lines (O'Rourke's determinant form).

    Raises NoIntersection if the lines are parallel. Coincident lines count
    as parallel. Callers wanting segment intersection must range-check the
    result themselves.
    """
    if l1.dimension != 2 or l2.dimension != 2:
        raise InvalidArgument(f"intersection is only defined in 2D: got {l1.dimension}D and {l2.dimension}D")
    a = as_vector(l1.a, dtype); b = as_vector(l1.b, dtype)
    c = as_vector(l2.a, dtype); d = as_vector(l2.b, dtype)

    denom = a[0]*(d[1]-c[1]) + b[0]*(c[1]-d[1]) + d[0]*(b[1]-a[1]) + c[0]*(a[1]-b[1])
    if close_to(denom, 0):
        raise NoIntersection(f"the lines do not intersect: denom={denom}")
    s = (a[0]*(d[1]-c[1]) + c[0]*(a[1]-d[1]) + d[0]*(c[1]-a[1])) / denom
    return Point(a + s*(b-a))

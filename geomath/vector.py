"""Vector algebra over coordinate tuples.

Every function takes an optional numpy *dtype* naming the precision the
computation is carried out in. None means "same as the input"; callers that
pass integer or single-precision points usually want ``np.float64`` here.
"""
import numpy as np

from .errors import InvalidArgument
from .numeric import machine_epsilon


def as_vector(v, dtype=None) -> np.ndarray:
    """Coerce a Point, array or sequence into a flat numpy array of *dtype*."""
    arr = np.asarray(v, dtype=dtype)
    if arr.ndim != 1:
        raise InvalidArgument(f"expected a flat vector, got shape {arr.shape}")
    return arr

def _pair(v1, v2, dtype):
    a1 = as_vector(v1, dtype); a2 = as_vector(v2, dtype)
    if a1.size != a2.size:
        raise InvalidArgument(f"dimension mismatch: {a1.size} != {a2.size}")
    return a1, a2

def vsum(v, dtype=None):
    """Sum of the elements of *v*."""
    return as_vector(v, dtype).sum(dtype=dtype).item()

def dot_product(v1, v2, dtype=None):
    """Dot product of two vectors of equal dimension."""
    a1, a2 = _pair(v1, v2, dtype)
    return np.dot(a1, a2).item()

def norm(v, dtype=None) -> float:
    """Euclidean norm: sqrt(v . v)."""
    return float(np.sqrt(dot_product(v, v, dtype)))

def point_distance(p1, p2, dtype=None) -> float:
    """Euclidean distance between two points."""
    a1, a2 = _pair(p1, p2, dtype)
    return norm(a2 - a1)

def points_close(p1, p2, epsilon=None, dtype=None) -> bool:
    """True if the points are strictly less than *epsilon* apart.

    The default epsilon is the machine epsilon of the compute dtype. Integer
    dtypes have no epsilon, so their points are close only when equal.
    """
    a1, a2 = _pair(p1, p2, dtype)
    if epsilon is None:
        epsilon = machine_epsilon(a1, a2)
    d = point_distance(a1, a2)
    return d == 0 if epsilon == 0 else d < epsilon

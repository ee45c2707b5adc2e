"""Small numeric helpers: approximate equality, angle conversion and binary GCD."""
import operator

import numpy as np

from .errors import InvalidArgument


# ============================================================
# Approximate Equality
# ============================================================
def machine_epsilon(*values) -> float:
    """Machine epsilon of the dtype the given values promote to; 0 for integers."""
    dt = np.result_type(*values)
    if np.issubdtype(dt, np.inexact):
        return float(np.finfo(dt).eps)
    return 0.0

def close_to(x, y, epsilon=None) -> bool:
    """True if x and y are within *epsilon* of each other.

    With no epsilon the machine epsilon of the operands' type is used,
    so integers must match exactly.
    """
    if epsilon is None:
        epsilon = machine_epsilon(x, y)
    return bool(abs(x - y) <= epsilon)

# ============================================================
# Angle Conversion
# ============================================================
def to_radians(deg):
    """Degrees to radians. Works element-wise on arrays."""
    return np.radians(deg) if isinstance(deg, np.ndarray) else deg * np.pi / 180.0

def to_degrees(rad):
    """Radians to degrees. Works element-wise on arrays."""
    return np.degrees(rad) if isinstance(rad, np.ndarray) else rad * 180.0 / np.pi

# ============================================================
# Binary GCD
# ============================================================
def gcd(u: int, v: int) -> int:
    """Greatest common divisor of two non-negative integers (Knuth, algorithm B)."""
    u = operator.index(u); v = operator.index(v)
    if u < 0 or v < 0:
        raise InvalidArgument(f"gcd requires non-negative integers: u={u}, v={v}")
    if u == 0 or v == 0:
        return u | v

    # B1: factor out the common power of two
    k = 0
    while not (u & 1) and not (v & 1):
        k += 1; u >>= 1; v >>= 1

    # B2..B6: t carries the signed difference, negative when v was larger
    t = -v if u & 1 else u
    while t != 0:
        while not (t & 1):
            t >>= 1
        if t > 0:
            u = t
        else:
            v = -t
        t = u - v
    return u << k

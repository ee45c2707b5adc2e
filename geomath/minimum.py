"""Bracketed scalar minimization by Brent's method.

Follows the description and sample code in Numerical Recipes (Fortran),
with the tolerance taken as a fixed absolute tolerance on x rather than a
fraction of the x values.
"""
import logging
import math
from typing import Callable

from .constants import BRENT_CGOLD, BRENT_ITMAX, MACHINE_EPSILON
from .errors import InvalidArgument, NoConvergence

log = logging.getLogger(__name__)


def minimize(
    fn: Callable[[float], float], ax: float, bx: float, cx: float,
    tol: float = MACHINE_EPSILON, fbx: float | None = None,
) -> tuple[float, float]:
    """Locate a minimum of *fn* inside the bracketing triple ax < bx < cx.

    Returns (xmin, fmin). If fn(bx) is already known it may be passed as
    *fbx* to save an evaluation. Exceptions raised by *fn* propagate unchanged.

    Raises InvalidArgument if the triple is not strictly increasing and
    NoConvergence if the iteration budget runs out.
    """
    if not (ax < bx < cx):
        raise InvalidArgument(f"ax, bx and cx must be in increasing order: ax={ax}, bx={bx}, cx={cx}")
    if not tol > 0:
        raise InvalidArgument(f"tolerance must be positive: tol={tol}")

    a, b = ax, cx
    x = w = v = bx
    fx = fn(x) if fbx is None else fbx
    fw = fv = fx
    d = e = 0.0
    tol2 = 2.0 * tol

    for it in range(BRENT_ITMAX):
        xm = 0.5 * (a + b)
        if abs(x - xm) <= tol2 - 0.5 * (b - a):
            log.debug("brent converged after %d iterations: x=%r f=%r", it, x, fx)
            return x, fx

        golden = True
        if abs(e) > tol:
            # Parabola through (x, fx), (w, fw), (v, fv)
            r = (x - w) * (fx - fv)
            q = (x - v) * (fx - fw)
            p = (x - v) * q - (x - w) * r
            q = 2.0 * (q - r)
            if q > 0.0:
                p = -p
            q = abs(q)
            if not (abs(p) >= abs(0.5 * q * e) or p <= q * (a - x) or p >= q * (b - x)):
                golden = False
                e = d
                d = p / q
                u = x + d
                if u - a < tol2 or b - u < tol2:
                    d = math.copysign(tol, xm - x)
        if golden:
            e = (a - x) if x >= xm else (b - x)
            d = BRENT_CGOLD * e

        u = x + d if abs(d) >= tol else x + math.copysign(tol, d)
        fu = fn(u)

        if fu <= fx:
            if u >= x:
                a = x
            else:
                b = x
            v, fv = w, fw
            w, fw = x, fx
            x, fx = u, fu
        else:
            if u < x:
                a = u
            else:
                b = u
            if fu <= fw or w == x:
                v, fv = w, fw
                w, fw = u, fu
            elif fu <= fv or v == x or v == w:
                v, fv = u, fu

    log.debug("brent gave up after %d iterations: bracket=[%r, %r] x=%r", BRENT_ITMAX, a, b, x)
    raise NoConvergence(f"no convergence after {BRENT_ITMAX} iterations: bracket=[{a}, {b}], x={x}")


def maximize(
    fn: Callable[[float], float], ax: float, bx: float, cx: float,
    tol: float = MACHINE_EPSILON, fbx: float | None = None,
) -> tuple[float, float]:
    """Locate a maximum of *fn* by minimizing its negation. Returns (xmax, fmax)."""
    x, fx = minimize(lambda t: -fn(t), ax, bx, cx, tol, None if fbx is None else -fbx)
    return x, -fx

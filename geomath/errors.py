"""Exception types raised across geomath."""

# ============================================================
# Argument Errors
# ============================================================
class InvalidArgument(ValueError):
    """Raised when a caller violates a precondition before any computation starts."""

class RangeError(ValueError):
    """Raised for well-formed values outside their valid numeric range."""

# ============================================================
# Geometry Errors
# ============================================================
class GeometryError(ValueError):
    """Raised for impossible geometry operations."""

class NoIntersection(GeometryError):
    """Raised when two lines are parallel or coincident."""

    def __init__(self, message: str = "the lines do not intersect"):
        super().__init__(message)

# ============================================================
# Numerical Errors
# ============================================================
class NoConvergence(RuntimeError):
    """Raised when an iterative algorithm exhausts its iteration budget."""

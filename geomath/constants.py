"""Named numeric constants for the geometry, geospatial and minimization code.

Distances in metres, angles in degrees unless noted.
"""
import math

import numpy as np

# Earth model (metres)
DEFAULT_EARTH_DIAMETER_M = 6370986.0   # PostGIS default
MIN_EARTH_DIAMETER_M = 6370000.0       # anything smaller is rejected

# Valid geospatial ranges (degrees, inclusive)
LATITUDE_RANGE = (-90.0, 90.0)
LONGITUDE_RANGE = (-180.0, 180.0)

# Floating point
MACHINE_EPSILON = float(np.finfo(np.float64).eps)

# Brent's method
BRENT_ITMAX = 100
BRENT_CGOLD = 1.0 - (math.sqrt(5.0) - 1.0) / 2.0   # golden ratio complement

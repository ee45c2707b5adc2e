"""Shared type definitions: fixed-dimension points, lines and paths."""
from typing import NamedTuple, Sequence, TYPE_CHECKING

import numpy as np

from .errors import InvalidArgument

if TYPE_CHECKING:
    from .geospatial import GeoPoint


class Point:
    """A fixed-dimension coordinate tuple backed by a 1-D numpy array.

    The dimension is fixed at construction; individual values may be
    reassigned. *dtype* defaults to whatever numpy infers from the values.
    """

    __slots__ = ("_values",)

    def __init__(self, *values, dtype=None):
        if len(values) == 1 and np.ndim(values[0]) == 1:
            values = values[0]
        arr = np.array(values, dtype=dtype)
        if arr.ndim != 1 or arr.size == 0:
            raise InvalidArgument(f"a point needs a flat, non-empty set of values, got shape {arr.shape}")
        self._values = arr

    @classmethod
    def origin(cls, dim: int, dtype=float) -> "Point":
        """The all-zero point of dimension *dim*."""
        if dim < 1:
            raise InvalidArgument(f"dimension must be positive: dim={dim}")
        return cls(np.zeros(dim, dtype=dtype))

    @property
    def dimension(self) -> int:
        return self._values.size

    @property
    def dtype(self) -> np.dtype:
        return self._values.dtype

    @property
    def values(self) -> np.ndarray:
        """Read-only view of the underlying values."""
        view = self._values.view()
        view.flags.writeable = False
        return view

    def astype(self, dtype) -> "Point":
        return Point(self._values.astype(dtype))

    def copy(self) -> "Point":
        return Point(self._values)

    def __len__(self) -> int:
        return self._values.size

    def __iter__(self):
        return (v.item() for v in self._values)

    def __getitem__(self, i):
        v = self._values[i]
        return v.item() if v.ndim == 0 else tuple(v.tolist())

    def __setitem__(self, i, value):
        target = self._values[i]
        value = np.asarray(value)
        if value.ndim > np.ndim(target) or (value.ndim and value.shape != np.shape(target)):
            raise InvalidArgument(f"cannot assign shape {value.shape} into shape {np.shape(target)}")
        self._values[i] = value

    def __array__(self, dtype=None, copy=None):
        return self._values.astype(dtype) if dtype is not None else self._values.copy()

    def __eq__(self, other) -> bool:
        if not isinstance(other, Point):
            return NotImplemented
        return self.dimension == other.dimension and bool(np.array_equal(self._values, other._values))

    def __ne__(self, other) -> bool:
        eq = self.__eq__(other)
        return eq if eq is NotImplemented else not eq

    __hash__ = None

    def __repr__(self) -> str:
        return f"Point({', '.join(repr(v) for v in self)})"

    # --- arithmetic: results are always plain Points ---

    def _operand(self, other):
        if isinstance(other, Point):
            if other.dimension != self.dimension:
                raise InvalidArgument(f"dimension mismatch: {self.dimension} != {other.dimension}")
            return other._values
        if np.ndim(other) != 0:
            return NotImplemented
        return other

    def __add__(self, other):
        o = self._operand(other)
        return NotImplemented if o is NotImplemented else Point(self._values + o)

    __radd__ = __add__

    def __sub__(self, other):
        o = self._operand(other)
        return NotImplemented if o is NotImplemented else Point(self._values - o)

    def __rsub__(self, other):
        o = self._operand(other)
        return NotImplemented if o is NotImplemented else Point(o - self._values)

    def __mul__(self, k):
        if np.ndim(k) != 0 or isinstance(k, Point):
            return NotImplemented
        return Point(self._values * k)

    __rmul__ = __mul__

    def __truediv__(self, k):
        if np.ndim(k) != 0 or isinstance(k, Point):
            return NotImplemented
        return Point(self._values / k)

    def __neg__(self) -> "Point":
        return Point(-self._values)


class Line(NamedTuple):
    """A line through two points; endpoints are ordered."""
    a: Point; b: Point

    @classmethod
    def origin(cls, dim: int, dtype=float) -> "Line":
        """Zero-length line from the origin to itself."""
        return cls(Point.origin(dim, dtype), Point.origin(dim, dtype))

    @property
    def dimension(self) -> int:
        if self.a.dimension != self.b.dimension:
            raise InvalidArgument(f"line endpoints differ in dimension: {self.a.dimension} != {self.b.dimension}")
        return self.a.dimension

Path = Sequence["GeoPoint"]

"""
Pure Python 3D vector math.

This module provides Vec3, a lightweight mutable 3D vector class.
For 3-element vectors, pure Python is considerably faster than numpy arrays
due to avoiding array creation overhead, so the frustum and ray hot paths
stay on plain floats and only convert to numpy at the edges.

Vec3 supports arithmetic operators (+, -, *, /), indexing, exact equality
and a handful of in-place helpers (set, copy_from) so callers can reuse
pre-allocated output vectors.
"""
import math

import numpy as np

# Below this magnitude a vector is treated as zero when normalizing
NORMALIZE_EPSILON = 1e-10


class Vec3:
    """
    A lightweight 3D vector class that supports arithmetic operators.

    Stores components directly as attributes for fast access.
    Supports indexing like a tuple/list for compatibility.
    """
    __slots__ = ('x', 'y', 'z')

    def __init__(self, x=0.0, y=0.0, z=0.0):
        # Using try/except is faster than isinstance checks for the common case
        try:
            self.x = float(x)
            self.y = float(y)
            self.z = float(z)
        except TypeError:
            # x is a sequence (tuple, list, array, Vec3)
            self.x = float(x[0])
            self.y = float(x[1])
            self.z = float(x[2])

    def __getitem__(self, i):
        if i == 0: return self.x
        if i == 1: return self.y
        if i == 2: return self.z
        raise IndexError(f"Vec3 index {i} out of range")

    def __iter__(self):
        yield self.x
        yield self.y
        yield self.z

    def __len__(self):
        return 3

    def __repr__(self):
        return f"Vec3({self.x}, {self.y}, {self.z})"

    def __eq__(self, other):
        try:
            return self.x == other[0] and self.y == other[1] and self.z == other[2]
        except (TypeError, IndexError):
            return NotImplemented

    # Mutable, so not usable as a dict key
    __hash__ = None

    def __add__(self, other):
        # Try direct attribute access first (fast path for Vec3)
        try:
            return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)
        except AttributeError:
            return Vec3(self.x + other[0], self.y + other[1], self.z + other[2])

    def __radd__(self, other):
        return Vec3(self.x + other[0], self.y + other[1], self.z + other[2])

    def __sub__(self, other):
        try:
            return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)
        except AttributeError:
            return Vec3(self.x - other[0], self.y - other[1], self.z - other[2])

    def __rsub__(self, other):
        return Vec3(other[0] - self.x, other[1] - self.y, other[2] - self.z)

    def __mul__(self, scalar):
        return Vec3(self.x * scalar, self.y * scalar, self.z * scalar)

    def __rmul__(self, scalar):
        return Vec3(self.x * scalar, self.y * scalar, self.z * scalar)

    def __truediv__(self, scalar):
        return Vec3(self.x / scalar, self.y / scalar, self.z / scalar)

    def __neg__(self):
        return Vec3(-self.x, -self.y, -self.z)

    def __abs__(self):
        """Component-wise absolute value."""
        return Vec3(abs(self.x), abs(self.y), abs(self.z))

    def set(self, x, y, z):
        """Overwrite all components in place. Returns self."""
        self.x = float(x)
        self.y = float(y)
        self.z = float(z)
        return self

    def copy_from(self, other):
        """Overwrite this vector with the components of another. Returns self."""
        self.x = float(other[0])
        self.y = float(other[1])
        self.z = float(other[2])
        return self

    def clone(self):
        """Independent copy of this vector."""
        return Vec3(self.x, self.y, self.z)

    def add_scaled(self, other, s):
        """Return self + other * s."""
        return Vec3(self.x + other[0] * s, self.y + other[1] * s, self.z + other[2] * s)

    def dot(self, other):
        """Dot product."""
        return self.x * other[0] + self.y * other[1] + self.z * other[2]

    def cross(self, other):
        """Cross product."""
        return Vec3(
            self.y * other[2] - self.z * other[1],
            self.z * other[0] - self.x * other[2],
            self.x * other[1] - self.y * other[0]
        )

    def length_sq(self):
        """Squared length (avoids sqrt)."""
        return self.x * self.x + self.y * self.y + self.z * self.z

    def length(self):
        """Vector length/magnitude."""
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def normalized(self):
        """Return normalized copy. A zero vector stays zero."""
        mag = self.length()
        if mag < NORMALIZE_EPSILON:
            return Vec3(0.0, 0.0, 0.0)
        inv_mag = 1.0 / mag
        return Vec3(self.x * inv_mag, self.y * inv_mag, self.z * inv_mag)

    def to_tuple(self):
        """Convert to tuple."""
        return (self.x, self.y, self.z)

    def to_list(self):
        """Convert to list."""
        return [self.x, self.y, self.z]

    def to_array(self):
        """Convert to a float64 numpy array of shape (3,)."""
        return np.array((self.x, self.y, self.z), dtype=np.float64)

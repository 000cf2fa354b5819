"""
Box3 - An axis-aligned bounding box defined by its min and max corners.
"""

import numpy as np

from .vec3 import Vec3


class Box3:
    """
    Axis-aligned box with inclusive min/max corners.

    The default box is inverted (min = +inf, max = -inf) so that it is empty
    and acts as the identity for union/expand.
    """
    __slots__ = ('min', 'max')

    def __init__(self, min_corner=None, max_corner=None):
        # Corners are taken as given, no reordering
        self.min = Vec3(min_corner) if min_corner is not None else Vec3(np.inf, np.inf, np.inf)
        self.max = Vec3(max_corner) if max_corner is not None else Vec3(-np.inf, -np.inf, -np.inf)

    def __repr__(self):
        return f"Box3(min={self.min!r}, max={self.max!r})"

    def __eq__(self, other):
        if not isinstance(other, Box3):
            return NotImplemented
        return self.equals(other)

    __hash__ = None

    @staticmethod
    def from_points(points) -> 'Box3':
        """Smallest box containing every point of an (N, 3) array-like."""
        pts = np.asarray(points, dtype=np.float64).reshape(-1, 3)
        if len(pts) == 0:
            return Box3()
        return Box3(pts.min(axis=0), pts.max(axis=0))

    def copy(self, other: 'Box3') -> 'Box3':
        """Overwrite this box with the corners of another. Returns self."""
        self.min.copy_from(other.min)
        self.max.copy_from(other.max)
        return self

    def clone(self) -> 'Box3':
        return Box3(self.min, self.max)

    def is_empty(self) -> bool:
        """A box is empty when any max component is below its min component."""
        return self.max.x < self.min.x or self.max.y < self.min.y or self.max.z < self.min.z

    def union(self, other: 'Box3') -> 'Box3':
        """Grow this box in place to also enclose another box. Returns self."""
        self.min.set(min(self.min.x, other.min.x), min(self.min.y, other.min.y), min(self.min.z, other.min.z))
        self.max.set(max(self.max.x, other.max.x), max(self.max.y, other.max.y), max(self.max.z, other.max.z))
        return self

    def expand_by_point(self, point) -> 'Box3':
        """Grow this box in place to include a point. Returns self."""
        px, py, pz = point[0], point[1], point[2]
        self.min.set(min(self.min.x, px), min(self.min.y, py), min(self.min.z, pz))
        self.max.set(max(self.max.x, px), max(self.max.y, py), max(self.max.z, pz))
        return self

    def contains_point(self, point, tolerance: float = 0.0) -> bool:
        """Whether a point lies inside the box (boundary inclusive)."""
        return (
            self.min.x - tolerance <= point[0] <= self.max.x + tolerance and
            self.min.y - tolerance <= point[1] <= self.max.y + tolerance and
            self.min.z - tolerance <= point[2] <= self.max.z + tolerance
        )

    def center(self) -> Vec3:
        """Midpoint of the box. Zero vector for an empty box."""
        if self.is_empty():
            return Vec3(0.0, 0.0, 0.0)
        return (self.min + self.max) * 0.5

    def size(self) -> Vec3:
        """Extent along each axis. Zero vector for an empty box."""
        if self.is_empty():
            return Vec3(0.0, 0.0, 0.0)
        return self.max - self.min

    def equals(self, other: 'Box3') -> bool:
        return self.min == other.min and self.max == other.max

    def to_array(self) -> np.ndarray:
        """Corners as a (2, 3) float64 array: [min, max]."""
        return np.array([self.min.to_tuple(), self.max.to_tuple()], dtype=np.float64)

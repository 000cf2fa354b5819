"""
ConeFrustum - a right circular cone truncated by two planes perpendicular to its axis.

The two end caps may have different radii; either may be zero, in which case
the frustum degenerates into a cone with its apex on that cap.

    axis ^          radius1
         |      +-----+-----+    <- top = base + axis * height
         |     /      |      \\
         |    /       |       \\
         |   +--------+--------+ <- base
                   radius0
"""

import warnings
from typing import Optional

from conefrustum.mathutils.vec3 import Vec3
from conefrustum.mathutils.box3 import Box3
from conefrustum.profiling import profile


class ConeFrustum(object):
    """
    A finite right circular truncated cone.

    Attributes:
        base: Centre of the radius0 end cap.
        axis: Unit vector from the radius0 cap toward the radius1 cap.
        height: Axial distance from base to the radius1 cap.
        radius0: Radius of the cap at base.
        radius1: Radius of the cap at base + axis * height.

    Omitted arguments default to base at the origin, a +Y axis, height 1 and
    zero radii. An explicit 0 is kept as 0. Vectors are copied on construction
    and the axis is normalized (a zero axis stays zero).
    """

    def __init__(self, base=None, axis=None, height: Optional[float] = None,
                 radius0: Optional[float] = None, radius1: Optional[float] = None):
        self.base = Vec3(base) if base is not None else Vec3(0.0, 0.0, 0.0)
        self.axis = Vec3(axis).normalized() if axis is not None else Vec3(0.0, 1.0, 0.0)

        self.height = float(height) if height is not None else 1.0
        self.radius0 = float(radius0) if radius0 is not None else 0.0
        self.radius1 = float(radius1) if radius1 is not None else 0.0

    @staticmethod
    def from_capsule(center0, radius0: float, center1, radius1: float) -> 'ConeFrustum':
        """
        Build the frustum spanning two spheres' centres.

        The axis runs from center0 to center1 and the height is their distance.
        Coincident centres give a zero axis and zero height (an empty frustum).
        """
        center0 = Vec3(center0)
        axis = Vec3(center1) - center0
        height = axis.length()
        if height == 0.0:
            warnings.warn(
                f"Capsule centres coincide at {center0}; frustum axis is undefined",
                RuntimeWarning,
                stacklevel=2,
            )
        return ConeFrustum(center0, axis, height, radius0, radius1)

    def copy(self, frustum: 'ConeFrustum') -> 'ConeFrustum':
        """Overwrite this frustum with a deep copy of another. Returns self."""
        self.base = frustum.base.clone()
        self.axis = frustum.axis.clone()
        self.height = frustum.height
        self.radius0 = frustum.radius0
        self.radius1 = frustum.radius1
        return self

    def clone(self) -> 'ConeFrustum':
        return ConeFrustum().copy(self)

    def empty(self) -> bool:
        """True for zero height or zero radii at both ends."""
        return self.height == 0 or (self.radius0 == 0 and self.radius1 == 0)

    @property
    def top(self) -> Vec3:
        """Centre of the radius1 end cap."""
        return self.base.add_scaled(self.axis, self.height)

    def radius_at(self, d: float) -> float:
        """Lateral radius at axial coordinate d (linear between the caps)."""
        return self.radius0 + (self.radius1 - self.radius0) * d / self.height

    @profile("frustum_bounding_box")
    def bounding_box(self, target: Optional[Box3] = None) -> Box3:
        """
        Conservative axis-aligned bounds of the two end caps.

        Each cap contributes a box centred on the cap with half-extents
        radius * |axis| per component, and the result is their union. This is
        exact for coordinate-aligned axes and a loose bound otherwise.

        Args:
            target: Optional box overwritten with the result.

        Returns:
            The bounding box (target itself when given).
        """
        abs_axis = abs(self.axis)

        c0 = self.base
        d0 = abs_axis * self.radius0
        box = Box3(c0 - d0, c0 + d0)

        c1 = self.top
        d1 = abs_axis * self.radius1
        box.union(Box3(c1 - d1, c1 + d1))

        if target is not None:
            return target.copy(box)
        return box

    def equals(self, frustum: 'ConeFrustum') -> bool:
        """Exact field-by-field equality (no tolerance)."""
        return (self.base == frustum.base and
                self.axis == frustum.axis and
                self.height == frustum.height and
                self.radius0 == frustum.radius0 and
                self.radius1 == frustum.radius1)

    def __eq__(self, other):
        if not isinstance(other, ConeFrustum):
            return NotImplemented
        return self.equals(other)

    __hash__ = None

    def __repr__(self):
        return (f"ConeFrustum(base={self.base!r}, axis={self.axis!r}, height={self.height}, "
                f"radius0={self.radius0}, radius1={self.radius1})")

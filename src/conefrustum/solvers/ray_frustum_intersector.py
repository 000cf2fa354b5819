"""
Ray / cone frustum intersection.

Finds the nearest forward point where a ray meets the lateral surface of a
ConeFrustum. The flat end caps are not intersected; the infinite cone is
clipped to the axial span [0, height] instead.

Derivation:
    With D = origin - base and a point P = D + t * V on the ray (relative to
    base), its axial coordinate is d = P.A and the cone radius there is
    radius0 + deltaR * d / height. Requiring |P|^2 - d^2 == radius(d)^2 gives

        c2 * t^2 + 2 * c1 * t + c0 = 0

    where, with r = 1 + (deltaR / height)^2 and R = radius0 * deltaR / height,

        c0 = radius0^2 + 2 R (D.A) + r (D.A)^2 - D.D
        c1 = R (V.A) + r (D.A)(V.A) - V.D
        c2 = r (V.A)^2 - V.V
"""

import math
from dataclasses import dataclass
from typing import Optional, TYPE_CHECKING

from conefrustum.mathutils.vec3 import Vec3
from conefrustum.profiling import profile

if TYPE_CHECKING:
    from conefrustum.cone_frustum import ConeFrustum
    from conefrustum.mathutils.frustum_ray import Ray


@dataclass(frozen=True)
class RayFrustumHit:
    """An accepted intersection between a ray and a frustum's lateral surface.

    Attributes:
        t: Ray parameter, in units of the ray direction's length.
        point: World-space hit position.
        axial: Axial coordinate of the hit, within [0, frustum.height].
    """
    t: float
    point: Vec3
    axial: float


class RayFrustumIntersector:
    """Solves ray / cone frustum lateral surface intersections."""

    @staticmethod
    def _axial(frustum: 'ConeFrustum', D: Vec3, direction: Vec3, t: float):
        """Base-relative point at t and its axial coordinate."""
        u = D.add_scaled(direction, t)
        return u, frustum.axis.dot(u)

    @staticmethod
    @profile("ray_frustum_intersect")
    def solve(ray: 'Ray', frustum: 'ConeFrustum') -> Optional[RayFrustumHit]:
        """
        Find the nearest valid intersection of a ray with a frustum's lateral surface.

        Only t >= 0 is considered and the hit must lie between the two cap
        planes. Empty frustums never intersect.

        Args:
            ray: Ray with origin and (non-zero) direction.
            frustum: The frustum to test.

        Returns:
            RayFrustumHit, or None when the ray misses.
        """
        if frustum.empty():
            return None

        height = frustum.height
        axis = frustum.axis
        direction = ray.direction

        delta_r = frustum.radius1 - frustum.radius0
        r = 1 + (delta_r / height) ** 2
        R = frustum.radius0 * delta_r / height

        D = ray.origin - frustum.base
        DdA = D.dot(axis)
        DdD = D.dot(D)
        VdA = direction.dot(axis)
        VdD = direction.dot(D)
        VdV = direction.dot(direction)

        c0 = frustum.radius0 * frustum.radius0 + 2 * R * DdA + r * DdA * DdA - DdD
        c1 = R * VdA + r * DdA * VdA - VdD
        c2 = r * VdA * VdA - VdV

        best = None

        if c2 != 0:
            discr = c1 * c1 - c2 * c0

            if discr < 0:
                return None

            elif discr == 0:
                t = -c1 / c2
                u, d = RayFrustumIntersector._axial(frustum, D, direction, t)
                if t >= 0 and 0 <= d <= height:
                    best = (t, u, d)

            else:
                root = math.sqrt(discr)

                t0 = (-c1 - root) / c2
                u, d = RayFrustumIntersector._axial(frustum, D, direction, t0)
                if t0 >= 0 and 0 <= d <= height:
                    best = (t0, u, d)

                # The two roots are not ordered when c2 < 0, so t1 only
                # replaces t0 when it is nearer
                t1 = (-c1 + root) / c2
                u, d = RayFrustumIntersector._axial(frustum, D, direction, t1)
                if t1 >= 0 and (best is None or t0 > t1) and 0 <= d <= height:
                    best = (t1, u, d)

        elif c1 != 0:
            t = -2 * c0 / c1
            u, d = RayFrustumIntersector._axial(frustum, D, direction, t)
            if t >= 0 and 0 <= d <= height:
                best = (t, u, d)

        if best is None:
            return None

        t, u, d = best
        return RayFrustumHit(t=t, point=frustum.base + u, axial=d)


def intersect_ray_cone_frustum(ray: 'Ray', frustum: 'ConeFrustum', target: Optional[Vec3] = None) -> Optional[Vec3]:
    """
    Nearest point where a ray meets a frustum's lateral surface.

    Args:
        ray: Ray with origin and direction.
        frustum: The frustum to test.
        target: Optional vector overwritten with the hit point.

    Returns:
        The hit point (target itself when given), or None on a miss. target
        is left untouched on a miss.
    """
    hit = RayFrustumIntersector.solve(ray, frustum)
    if hit is None:
        return None
    if target is not None:
        return target.copy_from(hit.point)
    return hit.point

"""
Ray - A half-line with an origin and a direction.
"""

from dataclasses import dataclass
from typing import Optional, TYPE_CHECKING

from .vec3 import Vec3
from conefrustum.solvers.ray_frustum_intersector import intersect_ray_cone_frustum

if TYPE_CHECKING:
    from conefrustum.cone_frustum import ConeFrustum


@dataclass
class Ray:
    """A ray with origin and direction.

    The direction does not have to be normalized; ray parameters are
    expressed in units of the direction's own length.
    """
    origin: Vec3
    direction: Vec3

    def __post_init__(self):
        self.origin = Vec3(self.origin)
        self.direction = Vec3(self.direction)

    def point_at_t(self, t: float) -> Vec3:
        """Get the point origin + direction * t."""
        return self.origin.add_scaled(self.direction, t)

    def project_point(self, point) -> float:
        """Project a point onto the ray's line and return its t-value."""
        return self.direction.dot(Vec3(point) - self.origin) / self.direction.length_sq()

    def intersects_cone_frustum(self, frustum: 'ConeFrustum', target: Optional[Vec3] = None) -> Optional[Vec3]:
        """Nearest forward hit on the frustum's lateral surface, or None.

        See conefrustum.solvers.ray_frustum_intersector for details.
        """
        return intersect_ray_cone_frustum(self, frustum, target)

    @staticmethod
    def from_points(start, end, tolerance: float = 1e-6) -> Optional['Ray']:
        """Create a unit-direction Ray from start toward end. Returns None if points are too close."""
        start = Vec3(start)
        direction = Vec3(end) - start
        length = direction.length()
        if length < tolerance:
            return None
        return Ray(origin=start, direction=direction / length)

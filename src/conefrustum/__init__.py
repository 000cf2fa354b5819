"""conefrustum - Cone frustum primitive with exact ray intersection."""

__version__ = "0.1.0"

from conefrustum.mathutils.vec3 import Vec3
from conefrustum.mathutils.box3 import Box3
from conefrustum.cone_frustum import ConeFrustum
from conefrustum.solvers import RayFrustumIntersector, RayFrustumHit, intersect_ray_cone_frustum
from conefrustum.mathutils.frustum_ray import Ray


__all__ = [
    'Vec3',
    'Box3',
    'Ray',
    'ConeFrustum',
    'RayFrustumIntersector',
    'RayFrustumHit',
    'intersect_ray_cone_frustum',
]

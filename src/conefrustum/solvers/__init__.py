"""
Solvers for frustum geometry queries.
"""

from .ray_frustum_intersector import (
    RayFrustumIntersector,
    RayFrustumHit,
    intersect_ray_cone_frustum,
)

__all__ = [
    'RayFrustumIntersector',
    'RayFrustumHit',
    'intersect_ray_cone_frustum',
]

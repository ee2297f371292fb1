"""Geometry kinds and their object-space intersection math.

Each kind works in its own unit space; ``rt_core.shapes.Shape`` handles the
transform to and from world space.

Example:
    >>> from rt_core.geometry import Sphere
    >>> from rt_core.rays import Ray
    >>> from rt_core.tuples import point, vector
    >>> Sphere().local_intersect(Ray(point(0.0, 0.0, -5.0), vector(0.0, 0.0, 1.0)))
    [4.0, 6.0]
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Protocol

import numpy as np

from rt_core.rays import Ray
from rt_core.tuples import EPSILON, Tuple4, point, vector


class Geometry(Protocol):
    def local_intersect(self, ray: Ray) -> List[float]: ...

    def local_normal_at(self, object_point: Tuple4) -> Tuple4: ...


@dataclass(frozen=True)
class Sphere:
    """Unit sphere centred on the object-space origin."""

    def local_intersect(self, ray: Ray) -> List[float]:
        sphere_to_ray = ray.origin - point(0.0, 0.0, 0.0)
        a = float(np.dot(ray.direction, ray.direction))
        b = 2.0 * float(np.dot(ray.direction, sphere_to_ray))
        c = float(np.dot(sphere_to_ray, sphere_to_ray)) - 1.0
        discriminant = b * b - 4.0 * a * c
        if discriminant < 0.0:
            return []
        root = np.sqrt(discriminant)
        # both roots are kept, even behind the origin
        return [float((-b - root) / (2.0 * a)), float((-b + root) / (2.0 * a))]

    def local_normal_at(self, object_point: Tuple4) -> Tuple4:
        return object_point - point(0.0, 0.0, 0.0)


@dataclass(frozen=True)
class Plane:
    """The xz plane (y = 0) of object space."""

    def local_intersect(self, ray: Ray) -> List[float]:
        if abs(ray.direction[1]) < EPSILON:
            # parallel or coplanar
            return []
        return [float(-ray.origin[1] / ray.direction[1])]

    def local_normal_at(self, object_point: Tuple4) -> Tuple4:
        return vector(0.0, 1.0, 0.0)


@dataclass
class TestGeometry:
    """Records the object-space ray it was asked to intersect."""

    __test__ = False

    saved_ray: Optional[Ray] = None

    def local_intersect(self, ray: Ray) -> List[float]:
        self.saved_ray = ray
        return []

    def local_normal_at(self, object_point: Tuple4) -> Tuple4:
        return vector(object_point[0], object_point[1], object_point[2])

"""Transformed, shaded shapes wrapping an object-space geometry kind.

Example:
    >>> import numpy as np
    >>> from rt_core.matrix import translation
    >>> from rt_core.shapes import sphere
    >>> from rt_core.tuples import point, vector
    >>> s = sphere().with_transform(translation(0.0, 1.0, 0.0))
    >>> np.allclose(s.normal_at(point(0.0, 1.70711, -0.70711)), vector(0.0, 0.70711, -0.70711), atol=1e-5)
    True
"""

from __future__ import annotations

import copy
from dataclasses import replace
from typing import List

from rt_core.geometry import Geometry, Plane, Sphere, TestGeometry
from rt_core.intersections import Intersection
from rt_core.materials import Material
from rt_core.matrix import Matrix, identity
from rt_core.optics import GLASS
from rt_core.patterns import Pattern
from rt_core.rays import Ray
from rt_core.tuples import Tuple4, normalize


class Shape:
    """A geometry kind placed in the world by ``transform`` and shaded by ``material``.

    The inverse transform is cached; every assignment of ``transform``
    recomputes it before the new pair is stored.
    """

    def __init__(self, geometry: Geometry, transform: Matrix | None = None, material: Material | None = None) -> None:
        self.geometry = geometry
        self.material = material if material is not None else Material()
        self.set_transform(transform if transform is not None else identity())

    @property
    def transform(self) -> Matrix:
        return self._transform

    @transform.setter
    def transform(self, m: Matrix) -> None:
        self.set_transform(m)

    @property
    def transform_inverse(self) -> Matrix:
        return self._transform_inverse

    def __repr__(self) -> str:
        return f"Shape({type(self.geometry).__name__}, transform={self._transform!r})"

    def set_transform(self, m: Matrix) -> None:
        inverse = m.inverse()
        self._transform, self._transform_inverse = m, inverse

    def set_material(self, material: Material) -> None:
        self.material = material

    def _copy(self) -> "Shape":
        out = copy.copy(self)
        out.geometry = copy.copy(self.geometry)
        return out

    def with_transform(self, m: Matrix) -> "Shape":
        out = self._copy()
        out.set_transform(m)
        return out

    def with_material(self, material: Material) -> "Shape":
        out = self._copy()
        out.set_material(material)
        return out

    def with_pattern(self, pattern: Pattern) -> "Shape":
        return self.with_material(replace(self.material, pattern=pattern))

    def intersects(self, ray: Ray) -> List[Intersection]:
        """World-space ray hits, in the order the geometry reports them."""

        local_ray = ray.transform(self._transform_inverse)
        return [Intersection(t, self) for t in self.geometry.local_intersect(local_ray)]

    def normal_at(self, world_point: Tuple4) -> Tuple4:
        object_point = self._transform_inverse @ world_point
        object_normal = self.geometry.local_normal_at(object_point)
        world_normal = self._transform_inverse.transpose() @ object_normal
        world_normal[3] = 0.0
        return normalize(world_normal)


def sphere() -> Shape:
    return Shape(Sphere())


def plane() -> Shape:
    return Shape(Plane())


def glass_sphere() -> Shape:
    return Shape(Sphere(), material=Material(transparency=1.0, refractive_index=GLASS))


def test_shape() -> Shape:
    return Shape(TestGeometry())


test_shape.__test__ = False  # type: ignore[attr-defined]

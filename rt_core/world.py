"""Scene container and recursive Whitted shading.

Example:
    >>> import numpy as np
    >>> from rt_core.rays import Ray
    >>> from rt_core.tuples import color, point, vector
    >>> from rt_core.world import default_world
    >>> c = default_world().color_at(Ray(point(0.0, 0.0, -5.0), vector(0.0, 0.0, 1.0)))
    >>> np.allclose(c, color(0.38066, 0.47583, 0.2855), atol=1e-5)
    True
"""

from __future__ import annotations

from typing import TYPE_CHECKING, List, Optional, Sequence

from rt_core.intersections import Computations, Intersection, hit, prepare_computations, schlick, sort_intersections
from rt_core.lights import PointLight
from rt_core.materials import Material
from rt_core.matrix import scaling
from rt_core.optics import refracted_direction
from rt_core.rays import Ray
from rt_core.shapes import Shape, sphere
from rt_core.tuples import Color, Tuple4, color, magnitude, normalize, point

if TYPE_CHECKING:
    from rt_core.camera import Camera
    from rt_core.canvas import Canvas

MAX_DEPTH = 10


class World:
    """Shapes and lights of one scene; read-only while rendering.

    fresnel_blend: when True, hits on materials that are both reflective and
    transparent weight the two contributions by the Schlick reflectance
    instead of adding them.
    """

    def __init__(
        self,
        shapes: Optional[Sequence[Shape]] = None,
        lights: Optional[Sequence[PointLight]] = None,
        fresnel_blend: bool = False,
    ) -> None:
        self.shapes: List[Shape] = list(shapes) if shapes else []
        self.lights: List[PointLight] = list(lights) if lights else []
        self.fresnel_blend = fresnel_blend

    def add(self, shape: Shape) -> None:
        self.shapes.append(shape)

    def intersects(self, ray: Ray) -> List[Intersection]:
        xs: List[Intersection] = []
        for s in self.shapes:
            xs.extend(s.intersects(ray))
        return sort_intersections(xs)

    def is_shadowed(self, p: Tuple4, light: Optional[PointLight] = None) -> bool:
        """True when something lies between ``p`` and the light (first light by default)."""

        if light is None:
            if not self.lights:
                raise ValueError("is_shadowed needs a light: the world has none")
            light = self.lights[0]
        to_light = light.position - p
        distance = magnitude(to_light)
        h = hit(self.intersects(Ray(p, normalize(to_light))))
        return h is not None and h.t < distance

    def shade_hit(self, comps: Computations, remaining: int = MAX_DEPTH) -> Color:
        material = comps.shape.material
        surface = color(0.0, 0.0, 0.0)
        for light in self.lights:
            surface = surface + material.lighting(
                light,
                comps.shape,
                comps.over_point,
                comps.eye_v,
                comps.normal_v,
                self.is_shadowed(comps.over_point, light),
            )
        reflected = self.reflected_color(comps, remaining)
        refracted = self.refracted_color(comps, remaining)
        if self.fresnel_blend and material.reflective > 0.0 and material.transparency > 0.0:
            reflectance = schlick(comps)
            return surface + reflected * reflectance + refracted * (1.0 - reflectance)
        return surface + reflected + refracted

    def reflected_color(self, comps: Computations, remaining: int = MAX_DEPTH) -> Color:
        reflective = comps.shape.material.reflective
        if remaining <= 0 or reflective == 0.0:
            return color(0.0, 0.0, 0.0)
        c = self.color_at(Ray(comps.over_point, comps.reflect_v), remaining - 1)
        return c * reflective

    def refracted_color(self, comps: Computations, remaining: int = MAX_DEPTH) -> Color:
        transparency = comps.shape.material.transparency
        if remaining <= 0 or transparency == 0.0:
            return color(0.0, 0.0, 0.0)
        direction = refracted_direction(comps.eye_v, comps.normal_v, comps.n1, comps.n2)
        if direction is None:
            # total internal reflection
            return color(0.0, 0.0, 0.0)
        c = self.color_at(Ray(comps.under_point, direction), remaining - 1)
        return c * transparency

    def color_at(self, ray: Ray, remaining: int = MAX_DEPTH) -> Color:
        if remaining < 0:
            raise ValueError("remaining must be >= 0")
        xs = self.intersects(ray)
        h = hit(xs)
        if h is None:
            return color(0.0, 0.0, 0.0)
        return self.shade_hit(prepare_computations(h, ray, xs), remaining)

    def render(self, camera: "Camera", remaining: int = MAX_DEPTH) -> "Canvas":
        return camera.render(self, remaining)


def default_world() -> World:
    """Two concentric spheres lit from the upper left."""

    outer = sphere()
    outer.set_material(Material(color=color(0.8, 1.0, 0.6), diffuse=0.7, specular=0.2))
    inner = sphere()
    inner.set_transform(scaling(0.5, 0.5, 0.5))
    light = PointLight(point(-10.0, 10.0, -10.0), color(1.0, 1.0, 1.0))
    return World([outer, inner], [light])

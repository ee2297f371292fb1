"""Common scene helpers."""

from __future__ import annotations

from typing import List

import numpy as np

from rt_core.camera import Camera
from rt_core.lights import PointLight
from rt_core.materials import Material
from rt_core.matrix import identity, translation, view_transform
from rt_core.shapes import Shape, sphere
from rt_core.tuples import Color, color, point, vector


def default_camera(width: int, height: int, fov: float = np.pi / 3) -> Camera:
    cam = Camera(width, height, fov)
    cam.set_transform(view_transform(point(0.0, 1.5, -5.0), point(0.0, 1.0, 0.0), vector(0.0, 1.0, 0.0)))
    return cam


def default_light() -> PointLight:
    return PointLight(point(-10.0, 10.0, -10.0), color(1.0, 1.0, 1.0))


def matte(c: Color, diffuse: float = 0.7, specular: float = 0.3, **kwargs) -> Material:
    return Material(color=c, diffuse=diffuse, specular=specular, **kwargs)


def sphere_trio() -> List[Shape]:
    """Left, middle and right spheres resting on the y = 0 floor."""

    middle = sphere().with_transform(translation(-0.5, 1.0, 0.5)).with_material(matte(color(0.1, 1.0, 0.5)))
    right = (
        sphere()
        .with_transform(identity().scale(0.5, 0.5, 0.5).translate(1.5, 0.5, -0.5))
        .with_material(matte(color(0.5, 1.0, 0.1)))
    )
    left = (
        sphere()
        .with_transform(identity().scale(0.33, 0.33, 0.33).translate(-1.5, 0.33, -0.75))
        .with_material(matte(color(1.0, 0.8, 0.1)))
    )
    return [left, middle, right]

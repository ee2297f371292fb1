"""Mirror floor under the sphere trio, with gradient and stripe patterns."""

from __future__ import annotations

from dataclasses import replace

import numpy as np

from rt_core.materials import Material
from rt_core.matrix import identity, rotation_y
from rt_core.patterns import gradient_pattern, stripe_pattern
from rt_core.shapes import plane
from rt_core.tuples import color
from rt_core.world import World
from scenes.common import default_camera, default_light, sphere_trio


def build_world(floor_reflective: float = 1.0) -> World:
    floor = plane().with_material(Material(ambient=0.0, specular=0.0, shininess=20.0, reflective=floor_reflective))
    backdrop = (
        plane()
        .with_transform(identity().rotate_x(np.pi / 2).translate(0.0, 0.0, 5.0))
        .with_pattern(stripe_pattern(color(0.0, 1.0, 0.0), color(0.0, 0.0, 1.0)).with_transform(rotation_y(np.pi / 2)))
    )
    left, middle, right = sphere_trio()
    right = right.with_material(
        replace(
            right.material,
            pattern=gradient_pattern(color(0.6, 0.6, 1.0), color(1.0, 0.5, 0.5)).with_transform(
                identity().scale(0.5, 0.5, 0.5).rotate_x(np.pi / 2)
            ),
        )
    )
    return World([left, middle, right, floor, backdrop], [default_light()])


def build_camera(width: int, height: int):
    return default_camera(width, height)


def build_sweep_params():
    return [
        {"case_id": "mirror", "width": 100, "height": 50, "floor_reflective": 1.0},
        {"case_id": "satin", "width": 100, "height": 50, "floor_reflective": 0.3},
    ]


def run_case(params):
    cam = build_camera(params["width"], params["height"])
    world = build_world(params.get("floor_reflective", 1.0))
    return cam, cam.render(world, params.get("max_depth", 10))

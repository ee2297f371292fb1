"""Sphere trio on a plain floor in front of a striped backdrop."""

from __future__ import annotations

import numpy as np

from rt_core.matrix import identity, rotation_y
from rt_core.patterns import stripe_pattern
from rt_core.shapes import plane
from rt_core.tuples import color
from rt_core.world import World
from scenes.common import default_camera, default_light, sphere_trio


def build_world(backdrop_z: float = 5.0) -> World:
    floor = plane()
    backdrop = (
        plane()
        .with_transform(identity().rotate_x(np.pi / 2).translate(0.0, 0.0, backdrop_z))
        .with_pattern(stripe_pattern(color(0.0, 1.0, 0.0), color(0.0, 0.0, 1.0)).with_transform(rotation_y(np.pi / 2)))
    )
    return World(sphere_trio() + [floor, backdrop], [default_light()])


def build_camera(width: int, height: int):
    return default_camera(width, height)


def build_sweep_params():
    return [{"case_id": "stripes", "width": 100, "height": 50, "backdrop_z": 5.0}]


def run_case(params):
    cam = build_camera(params["width"], params["height"])
    world = build_world(params.get("backdrop_z", 5.0))
    return cam, cam.render(world, params.get("max_depth", 10))

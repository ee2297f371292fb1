"""Three spheres in a room whose floor and walls are flattened spheres."""

from __future__ import annotations

import numpy as np

from rt_core.materials import Material
from rt_core.matrix import identity, scaling
from rt_core.shapes import sphere
from rt_core.tuples import color
from rt_core.world import World
from scenes.common import default_camera, default_light, sphere_trio


def build_world(wall_angle: float = np.pi / 4) -> World:
    wall_material = Material(color=color(1.0, 0.9, 0.9), specular=0.0)
    floor = sphere().with_transform(scaling(10.0, 0.01, 10.0)).with_material(wall_material)
    left_wall = sphere().with_transform(
        identity().scale(10.0, 0.01, 10.0).rotate_x(np.pi / 2).rotate_y(-wall_angle).translate(0.0, 0.0, 5.0)
    ).with_material(wall_material)
    right_wall = sphere().with_transform(
        identity().scale(10.0, 0.01, 10.0).rotate_x(np.pi / 2).rotate_y(wall_angle).translate(0.0, 0.0, 5.0)
    ).with_material(wall_material)
    return World(sphere_trio() + [left_wall, floor, right_wall], [default_light()])


def build_camera(width: int, height: int):
    return default_camera(width, height)


def build_sweep_params():
    return [{"case_id": "three_spheres", "width": 100, "height": 50, "wall_angle": float(np.pi / 4)}]


def run_case(params):
    cam = build_camera(params["width"], params["height"])
    world = build_world(params.get("wall_angle", np.pi / 4))
    return cam, cam.render(world, params.get("max_depth", 10))

"""Glass sphere with an air bubble over a checkered floor."""

from __future__ import annotations

import numpy as np

from rt_core import optics
from rt_core.materials import Material
from rt_core.matrix import identity, scaling
from rt_core.patterns import checker_pattern, ring_pattern
from rt_core.shapes import glass_sphere, plane, sphere
from rt_core.tuples import color
from rt_core.world import World
from scenes.common import default_camera, default_light


def build_world(refractive_index: float = optics.GLASS, fresnel_blend: bool = True) -> World:
    floor = plane().with_material(
        Material(
            pattern=checker_pattern(color(0.15, 0.15, 0.15), color(0.85, 0.85, 0.85)),
            specular=0.0,
            reflective=0.1,
        )
    )
    backdrop = (
        plane()
        .with_transform(identity().rotate_x(np.pi / 2).translate(0.0, 0.0, 6.0))
        .with_pattern(ring_pattern(color(0.9, 0.6, 0.3), color(0.3, 0.2, 0.1)).with_transform(scaling(0.5, 0.5, 0.5)))
    )
    ball = glass_sphere().with_transform(identity().translate(0.0, 1.0, 0.0)).with_material(
        Material(
            color=color(0.1, 0.1, 0.1),
            ambient=0.0,
            diffuse=0.1,
            specular=1.0,
            shininess=300.0,
            reflective=0.9,
            transparency=0.9,
            refractive_index=refractive_index,
        )
    )
    bubble = (
        glass_sphere()
        .with_transform(identity().scale(0.5, 0.5, 0.5).translate(0.0, 1.0, 0.0))
        .with_material(Material(color=color(0.1, 0.1, 0.1), ambient=0.0, diffuse=0.0, transparency=1.0, reflective=0.9, refractive_index=optics.AIR))
    )
    accent = sphere().with_transform(identity().scale(0.4, 0.4, 0.4).translate(1.6, 0.4, 1.5)).with_material(
        Material(color=color(0.9, 0.2, 0.2), diffuse=0.7, specular=0.3)
    )
    return World([floor, backdrop, ball, bubble, accent], [default_light()], fresnel_blend=fresnel_blend)


def build_camera(width: int, height: int):
    return default_camera(width, height)


def build_sweep_params():
    return [
        {"case_id": "glass", "width": 100, "height": 50, "refractive_index": optics.GLASS, "fresnel_blend": True},
        {"case_id": "diamond_additive", "width": 100, "height": 50, "refractive_index": optics.DIAMOND, "fresnel_blend": False},
    ]


def run_case(params):
    cam = build_camera(params["width"], params["height"])
    world = build_world(params.get("refractive_index", optics.GLASS), params.get("fresnel_blend", True))
    return cam, cam.render(world, params.get("max_depth", 10))

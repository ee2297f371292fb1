"""Pinhole camera: pixel-to-ray mapping and the render loop.

Example:
    >>> import numpy as np
    >>> from rt_core.camera import Camera
    >>> from rt_core.tuples import vector
    >>> cam = Camera(201, 101, np.pi / 2)
    >>> np.allclose(cam.ray_for_pixel(100, 50).direction, vector(0.0, 0.0, -1.0))
    True
"""

from __future__ import annotations

import logging
import math

from rt_core.canvas import Canvas
from rt_core.matrix import Matrix, identity
from rt_core.rays import Ray
from rt_core.tuples import normalize, point
from rt_core.world import MAX_DEPTH, World

logger = logging.getLogger(__name__)


class Camera:
    """Maps a ``hsize`` x ``vsize`` raster onto a canvas one unit in front of the eye.

    The eye sits at the origin of camera space looking down -z; ``transform``
    is the world-to-camera (view) matrix.
    """

    def __init__(self, hsize: int, vsize: int, field_of_view: float, transform: Matrix | None = None) -> None:
        if hsize < 1 or vsize < 1:
            raise ValueError(f"Camera requires hsize and vsize >= 1, got {hsize}x{vsize}")
        self.hsize = int(hsize)
        self.vsize = int(vsize)
        self.field_of_view = float(field_of_view)

        half_view = math.tan(self.field_of_view / 2.0)
        aspect = self.hsize / self.vsize
        if aspect >= 1.0:
            self.half_width = half_view
            self.half_height = half_view / aspect
        else:
            self.half_width = half_view * aspect
            self.half_height = half_view
        self.pixel_size = (self.half_width * 2.0) / self.hsize

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

    def set_transform(self, m: Matrix) -> None:
        inverse = m.inverse()
        self._transform, self._transform_inverse = m, inverse

    def ray_for_pixel(self, px: int, py: int) -> Ray:
        """World-space ray through the centre of pixel (px, py)."""

        x_offset = (px + 0.5) * self.pixel_size
        y_offset = (py + 0.5) * self.pixel_size
        # +x is to the left when looking down -z
        world_x = self.half_width - x_offset
        world_y = self.half_height - y_offset
        pixel = self._transform_inverse @ point(world_x, world_y, -1.0)
        origin = self._transform_inverse @ point(0.0, 0.0, 0.0)
        direction = pixel - origin
        direction[3] = 0.0
        return Ray(origin, normalize(direction))

    def render(self, world: World, remaining: int = MAX_DEPTH) -> Canvas:
        image = Canvas(self.hsize, self.vsize)
        logger.info("rendering %dx%d frame, %d shapes, %d lights, depth %d", self.hsize, self.vsize, len(world.shapes), len(world.lights), remaining)
        for y in range(self.vsize):
            for x in range(self.hsize):
                image.write_pixel(x, y, world.color_at(self.ray_for_pixel(x, y), remaining))
            logger.debug("row %d/%d done", y + 1, self.vsize)
        logger.info("render finished")
        return image

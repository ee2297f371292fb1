"""Linear RGB pixel buffer."""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray

from rt_core.tuples import Color


class Canvas:
    """``height`` x ``width`` grid of float colors, origin at the top-left."""

    def __init__(self, width: int, height: int) -> None:
        if width < 1 or height < 1:
            raise ValueError(f"Canvas requires width and height >= 1, got {width}x{height}")
        self.width = int(width)
        self.height = int(height)
        self.pixels: NDArray[np.float64] = np.zeros((self.height, self.width, 3), dtype=np.float64)

    @classmethod
    def from_array(cls, pixels: NDArray) -> "Canvas":
        data = np.asarray(pixels, dtype=np.float64)
        if data.ndim != 3 or data.shape[2] != 3:
            raise ValueError(f"Expected an (H, W, 3) array, got shape {data.shape}")
        canvas = cls(data.shape[1], data.shape[0])
        canvas.pixels[...] = data
        return canvas

    def _check(self, x: int, y: int) -> None:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"Pixel ({x}, {y}) outside {self.width}x{self.height} canvas")

    def write_pixel(self, x: int, y: int, c: Color) -> None:
        self._check(x, y)
        self.pixels[y, x] = c

    def pixel_at(self, x: int, y: int) -> Color:
        self._check(x, y)
        return self.pixels[y, x].copy()

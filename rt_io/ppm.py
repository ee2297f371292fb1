"""Plain-text PPM (P3) encoder.

Layout: ``P3``, ``<width> <height>``, ``255``, then one ``R G B`` line per
pixel in row-major order from the top-left, then a blank line.

Example:
    >>> from rt_core.canvas import Canvas
    >>> from rt_io.ppm import canvas_to_ppm
    >>> canvas_to_ppm(Canvas(1, 1)).splitlines()
    ['P3', '1 1', '255', '0 0 0', '']
"""

from __future__ import annotations

import math
from pathlib import Path
from typing import List

import numpy as np

from rt_core.canvas import Canvas

MAX_COLOR_VALUE = 255


def _channel(value: float, clamp: bool) -> int:
    if not math.isfinite(value):
        # NaN or inf from degenerate numerics
        return 0
    v = float(np.clip(value, 0.0, 1.0)) if clamp else float(value)
    return int(math.floor(v * MAX_COLOR_VALUE))


def canvas_to_ppm(canvas: Canvas, clamp: bool = True) -> str:
    """Encode ``canvas``; with ``clamp=False`` out-of-range channels are written as-is.

    NaN and infinite channels are written as 0 in both modes.
    """

    lines: List[str] = ["P3", f"{canvas.width} {canvas.height}", str(MAX_COLOR_VALUE)]
    for y in range(canvas.height):
        for x in range(canvas.width):
            r, g, b = canvas.pixels[y, x]
            lines.append(f"{_channel(r, clamp)} {_channel(g, clamp)} {_channel(b, clamp)}")
    return "\n".join(lines) + "\n\n"


def save_ppm(canvas: Canvas, filepath: str | Path, clamp: bool = True) -> str:
    out = Path(filepath)
    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_text(canvas_to_ppm(canvas, clamp=clamp), encoding="ascii")
    return str(out)

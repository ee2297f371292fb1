"""Point light sources."""

from __future__ import annotations

from dataclasses import dataclass

from rt_core.tuples import Color, Tuple4


@dataclass(frozen=True)
class PointLight:
    position: Tuple4
    intensity: Color

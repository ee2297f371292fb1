"""Procedural color patterns sampled in their own transformed space.

A world point is taken into the shape's object space and then into the
pattern's space before the pattern function is evaluated.

Example:
    >>> import numpy as np
    >>> from rt_core.patterns import stripe_pattern
    >>> from rt_core.tuples import BLACK, WHITE, point
    >>> p = stripe_pattern(WHITE, BLACK)
    >>> np.allclose(p.color_at(point(-0.1, 0.0, 0.0)), BLACK)
    True
"""

from __future__ import annotations

import math

import numpy as np

from rt_core.matrix import Matrix, identity
from rt_core.tuples import BLACK, WHITE, Color, Tuple4, color

PATTERN_KINDS = ("stripe", "gradient", "ring", "checker", "test")


class Pattern:
    """Two-color pattern of a given kind.

    kind: "stripe", "gradient", "ring", "checker" or "test".
    a, b: the two colors the pattern alternates or blends between.
    """

    def __init__(self, kind: str, a: Color = WHITE, b: Color = BLACK, transform: Matrix | None = None) -> None:
        if kind.lower() not in PATTERN_KINDS:
            raise ValueError(f"Unsupported pattern kind: {kind}")
        self.kind = kind.lower()
        self.a = np.array(a, dtype=float)
        self.b = np.array(b, dtype=float)
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

    def with_transform(self, m: Matrix) -> "Pattern":
        return Pattern(self.kind, self.a, self.b, m)

    def __repr__(self) -> str:
        return f"Pattern({self.kind!r}, a={self.a.tolist()}, b={self.b.tolist()})"

    def color_at(self, p: Tuple4) -> Color:
        """Color at a point already expressed in pattern space."""

        x, y, z = float(p[0]), float(p[1]), float(p[2])
        if self.kind == "stripe":
            return (self.a if math.floor(x) % 2 == 0 else self.b).copy()
        if self.kind == "gradient":
            return self.a + (self.b - self.a) * (x - math.floor(x))
        if self.kind == "ring":
            return (self.a if math.floor(math.sqrt(x * x + z * z)) % 2 == 0 else self.b).copy()
        if self.kind == "checker":
            return (self.a if (math.floor(x) + math.floor(y) + math.floor(z)) % 2 == 0 else self.b).copy()
        return color(x, y, z)

    def pattern_at_shape(self, shape, world_point: Tuple4) -> Color:
        object_point = shape.transform_inverse @ world_point
        return self.color_at(self.transform_inverse @ object_point)


def stripe_pattern(a: Color, b: Color) -> Pattern:
    return Pattern("stripe", a, b)


def gradient_pattern(a: Color, b: Color) -> Pattern:
    return Pattern("gradient", a, b)


def ring_pattern(a: Color, b: Color) -> Pattern:
    return Pattern("ring", a, b)


def checker_pattern(a: Color, b: Color) -> Pattern:
    return Pattern("checker", a, b)


def test_pattern() -> Pattern:
    """Pattern that returns its pattern-space coordinates as a color."""

    return Pattern("test")


test_pattern.__test__ = False  # type: ignore[attr-defined]

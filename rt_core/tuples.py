"""Homogeneous point/vector tuples and RGB colors.

Points carry ``w = 1`` and vectors ``w = 0``; both are plain ``(4,)`` float
arrays so that matrices apply to them with ``@``.

Example:
    >>> import numpy as np
    >>> from rt_core.tuples import reflect, vector
    >>> np.allclose(reflect(vector(1.0, -1.0, 0.0), vector(0.0, 1.0, 0.0)), vector(1.0, 1.0, 0.0))
    True
"""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray

EPSILON = 1e-5

Tuple4 = NDArray[np.float64]
Color = NDArray[np.float64]


def point(x: float, y: float, z: float) -> Tuple4:
    return np.array([x, y, z, 1.0], dtype=float)


def vector(x: float, y: float, z: float) -> Tuple4:
    return np.array([x, y, z, 0.0], dtype=float)


def color(r: float, g: float, b: float) -> Color:
    return np.array([r, g, b], dtype=float)


BLACK = color(0.0, 0.0, 0.0)
WHITE = color(1.0, 1.0, 1.0)
# shared constants are read-only; callers get fresh arrays from color()
BLACK.setflags(write=False)
WHITE.setflags(write=False)


def is_point(t: Tuple4) -> bool:
    return abs(t[3] - 1.0) < EPSILON


def is_vector(t: Tuple4) -> bool:
    return abs(t[3]) < EPSILON


def equal(a: NDArray, b: NDArray) -> bool:
    """Component-wise equality within ``EPSILON``."""

    return bool(np.all(np.abs(np.asarray(a, dtype=float) - np.asarray(b, dtype=float)) < EPSILON))


def dot(a: Tuple4, b: Tuple4) -> float:
    assert is_vector(a) and is_vector(b), "dot() expects two vectors"
    return float(np.dot(a, b))


def cross(a: Tuple4, b: Tuple4) -> Tuple4:
    """Right-handed cross product of two vectors."""

    assert is_vector(a) and is_vector(b), "cross() expects two vectors"
    return vector(
        a[1] * b[2] - a[2] * b[1],
        a[2] * b[0] - a[0] * b[2],
        a[0] * b[1] - a[1] * b[0],
    )


def magnitude(v: Tuple4) -> float:
    assert is_vector(v), "magnitude() expects a vector"
    return float(np.sqrt(np.dot(v, v)))


def normalize(v: Tuple4) -> Tuple4:
    # zero-length input yields NaN components
    m = magnitude(v)
    with np.errstate(divide="ignore", invalid="ignore"):
        return v / m


def reflect(incoming: Tuple4, normal: Tuple4) -> Tuple4:
    """Mirror ``incoming`` about ``normal``: in - n * 2 * (in . n)."""

    return incoming - normal * 2.0 * dot(incoming, normal)

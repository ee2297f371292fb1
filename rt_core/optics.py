"""Snell refraction and Schlick reflectance helpers.

Example:
    >>> from rt_core.optics import schlick
    >>> from rt_core.tuples import vector
    >>> n = vector(0.0, 1.0, 0.0)
    >>> round(schlick(n, n, 1.0, 1.5), 5)
    0.04
"""

from __future__ import annotations

from typing import Optional

import numpy as np

from rt_core.tuples import Tuple4, dot

VACUUM = 1.0
AIR = 1.00029
WATER = 1.333
GLASS = 1.5
DIAMOND = 2.417


def sin2_transmitted(n_ratio: float, cos_i: float) -> float:
    """sin^2 of the transmitted angle; values above 1 mean total internal reflection."""

    return n_ratio * n_ratio * (1.0 - cos_i * cos_i)


def refracted_direction(eye_v: Tuple4, normal_v: Tuple4, n1: float, n2: float) -> Optional[Tuple4]:
    """Transmitted direction across a boundary from index ``n1`` into ``n2``.

    Returns None under total internal reflection.
    """

    n_ratio = n1 / n2
    cos_i = dot(eye_v, normal_v)
    sin2_t = sin2_transmitted(n_ratio, cos_i)
    if sin2_t > 1.0:
        return None
    cos_t = float(np.sqrt(1.0 - sin2_t))
    return normal_v * (n_ratio * cos_i - cos_t) - eye_v * n_ratio


def schlick(eye_v: Tuple4, normal_v: Tuple4, n1: float, n2: float) -> float:
    """Schlick approximation of the Fresnel reflectance."""

    cos = dot(eye_v, normal_v)
    if n1 > n2:
        sin2_t = sin2_transmitted(n1 / n2, cos)
        if sin2_t > 1.0:
            return 1.0
        cos = float(np.sqrt(1.0 - sin2_t))
    r0 = ((n1 - n2) / (n1 + n2)) ** 2
    return r0 + (1.0 - r0) * (1.0 - cos) ** 5

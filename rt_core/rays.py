"""Ray container and parametric helpers.

Example:
    >>> import numpy as np
    >>> from rt_core.rays import Ray
    >>> from rt_core.tuples import point, vector
    >>> r = Ray(point(2.0, 3.0, 4.0), vector(1.0, 0.0, 0.0))
    >>> np.allclose(r.position(2.5), point(4.5, 3.0, 4.0))
    True
"""

from __future__ import annotations

from dataclasses import dataclass

from rt_core.matrix import Matrix
from rt_core.tuples import Tuple4


@dataclass(frozen=True)
class Ray:
    origin: Tuple4
    direction: Tuple4

    def position(self, t: float) -> Tuple4:
        """Point reached after travelling ``t`` units of ``direction``."""

        return self.origin + self.direction * t

    def transform(self, m: Matrix) -> "Ray":
        return Ray(m @ self.origin, m @ self.direction)

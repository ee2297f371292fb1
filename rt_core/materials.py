"""Surface materials and the Phong lighting model.

Example:
    >>> import numpy as np
    >>> from rt_core.lights import PointLight
    >>> from rt_core.materials import Material
    >>> from rt_core.tuples import color, point, vector
    >>> light = PointLight(point(0.0, 0.0, -10.0), color(1.0, 1.0, 1.0))
    >>> c = Material().lighting(light, None, point(0, 0, 0), vector(0, 0, -1), vector(0, 0, -1))
    >>> np.allclose(c, color(1.9, 1.9, 1.9))
    True
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

import numpy as np

from rt_core.lights import PointLight
from rt_core.patterns import Pattern
from rt_core.tuples import BLACK, Color, Tuple4, color, dot, normalize, reflect


@dataclass(frozen=True, eq=False)
class Material:
    """Phong reflectance parameters plus reflection/refraction terms.

    reflective: fraction of reflected light, 0 (matte) to 1 (mirror).
    transparency: fraction of transmitted light, 0 (opaque) to 1.
    refractive_index: index of the medium inside the surface (>= 1.0).
    """

    color: Color = field(default_factory=lambda: color(1.0, 1.0, 1.0))
    ambient: float = 0.1
    diffuse: float = 0.9
    specular: float = 0.9
    shininess: float = 200.0
    pattern: Optional[Pattern] = None
    reflective: float = 0.0
    transparency: float = 0.0
    refractive_index: float = 1.0

    def lighting(
        self,
        light: PointLight,
        shape,
        point: Tuple4,
        eye_v: Tuple4,
        normal_v: Tuple4,
        in_shadow: bool = False,
    ) -> Color:
        """Local Phong color of ``point`` under a single light."""

        if self.pattern is None:
            base = self.color
        elif shape is None:
            base = self.pattern.color_at(self.pattern.transform_inverse @ point)
        else:
            base = self.pattern.pattern_at_shape(shape, point)
        effective_color = base * light.intensity
        ambient = effective_color * self.ambient
        if in_shadow:
            return ambient

        light_v = normalize(light.position - point)
        light_dot_normal = dot(light_v, normal_v)
        if light_dot_normal < 0.0:
            # light is behind the surface
            return ambient

        diffuse = effective_color * self.diffuse * light_dot_normal
        reflect_dot_eye = dot(reflect(-light_v, normal_v), eye_v)
        if reflect_dot_eye <= 0.0:
            specular = BLACK
        else:
            specular = light.intensity * self.specular * np.power(reflect_dot_eye, self.shininess)
        return ambient + diffuse + specular

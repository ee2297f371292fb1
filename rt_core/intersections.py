"""Intersection records, hit selection and per-hit shading state.

Example:
    >>> from rt_core.intersections import Intersection, hit
    >>> xs = [Intersection(t, None) for t in (5.0, 7.0, -3.0, 2.0)]
    >>> hit(xs).t
    2.0
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, List, Optional, Sequence

from rt_core import optics
from rt_core.rays import Ray
from rt_core.tuples import EPSILON, Tuple4, dot, reflect

if TYPE_CHECKING:
    from rt_core.shapes import Shape


@dataclass(frozen=True, eq=False)
class Intersection:
    t: float
    shape: "Shape"


@dataclass(frozen=True, eq=False)
class Computations:
    t: float
    shape: "Shape"
    point: Tuple4
    eye_v: Tuple4
    normal_v: Tuple4
    inside: bool
    over_point: Tuple4
    under_point: Tuple4
    reflect_v: Tuple4
    n1: float
    n2: float


def sort_intersections(xs: Sequence[Intersection]) -> List[Intersection]:
    return sorted(xs, key=lambda i: i.t)


def hit(xs: Sequence[Intersection]) -> Optional[Intersection]:
    """Intersection with the smallest strictly positive t, or None."""

    best: Optional[Intersection] = None
    for i in sort_intersections(xs):
        if i.t > 0.0:
            best = i
            break
    return best


def _refractive_indices(target: Intersection, xs: Sequence[Intersection]) -> tuple[float, float]:
    # stack of shapes the ray is currently inside
    containers: List["Shape"] = []
    n1 = n2 = 1.0
    for i in xs:
        if i is target:
            n1 = containers[-1].material.refractive_index if containers else 1.0
        for k, s in enumerate(containers):
            if s is i.shape:
                del containers[k]
                break
        else:
            containers.append(i.shape)
        if i is target:
            n2 = containers[-1].material.refractive_index if containers else 1.0
            break
    return n1, n2


def prepare_computations(target: Intersection, ray: Ray, xs: Sequence[Intersection] | None = None) -> Computations:
    """Shading state for ``target``; ``xs`` is the sorted list it came from."""

    point = ray.position(target.t)
    eye_v = -ray.direction
    normal_v = target.shape.normal_at(point)
    inside = dot(normal_v, eye_v) < 0.0
    if inside:
        normal_v = -normal_v
    n1, n2 = _refractive_indices(target, xs if xs is not None else [target])
    return Computations(
        t=target.t,
        shape=target.shape,
        point=point,
        eye_v=eye_v,
        normal_v=normal_v,
        inside=inside,
        over_point=point + normal_v * EPSILON,
        under_point=point - normal_v * EPSILON,
        reflect_v=reflect(ray.direction, normal_v),
        n1=n1,
        n2=n2,
    )


def schlick(comps: Computations) -> float:
    return optics.schlick(comps.eye_v, comps.normal_v, comps.n1, comps.n2)

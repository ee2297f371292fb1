from dataclasses import replace

import numpy as np
import pytest

from rt_core.intersections import Intersection, hit, prepare_computations, schlick, sort_intersections
from rt_core.matrix import scaling, translation
from rt_core.optics import refracted_direction, sin2_transmitted
from rt_core.rays import Ray
from rt_core.shapes import glass_sphere, plane, sphere
from rt_core.tuples import EPSILON, point, vector

SQ2 = np.sqrt(2) / 2


def test_hit_picks_lowest_positive_t():
    s = sphere()
    i1, i2 = Intersection(1, s), Intersection(2, s)
    assert hit([i2, i1]) is i1
    i1, i2 = Intersection(-1, s), Intersection(1, s)
    assert hit([i2, i1]) is i2
    assert hit([Intersection(-2, s), Intersection(-1, s)]) is None
    i4 = Intersection(2, s)
    assert hit([Intersection(5, s), Intersection(7, s), Intersection(-3, s), i4]) is i4


def test_zero_t_is_not_a_hit():
    s = sphere()
    assert hit([Intersection(0.0, s)]) is None


def test_sort_intersections_by_t():
    s = sphere()
    xs = sort_intersections([Intersection(t, s) for t in (3.0, -1.0, 2.0)])
    assert [i.t for i in xs] == [-1.0, 2.0, 3.0]


def test_computations_outside_hit():
    r = Ray(point(0, 0, -5), vector(0, 0, 1))
    s = sphere()
    comps = prepare_computations(Intersection(4, s), r)
    assert comps.t == 4 and comps.shape is s
    assert np.allclose(comps.point, point(0, 0, -1))
    assert np.allclose(comps.eye_v, vector(0, 0, -1))
    assert np.allclose(comps.normal_v, vector(0, 0, -1))
    assert comps.inside is False


def test_computations_inside_hit_flips_normal():
    r = Ray(point(0, 0, 0), vector(0, 0, 1))
    comps = prepare_computations(Intersection(1, sphere()), r)
    assert np.allclose(comps.point, point(0, 0, 1))
    assert np.allclose(comps.eye_v, vector(0, 0, -1))
    assert comps.inside is True
    assert np.allclose(comps.normal_v, vector(0, 0, -1))


def test_over_point_sits_above_surface():
    r = Ray(point(0, 0, -5), vector(0, 0, 1))
    s = sphere().with_transform(translation(0, 0, 1))
    comps = prepare_computations(Intersection(5, s), r)
    assert comps.over_point[2] < -EPSILON / 2
    assert comps.point[2] > comps.over_point[2]


def test_under_point_sits_below_surface():
    r = Ray(point(0, 0, -5), vector(0, 0, 1))
    s = glass_sphere().with_transform(translation(0, 0, 1))
    i = Intersection(5, s)
    comps = prepare_computations(i, r, [i])
    assert comps.under_point[2] > EPSILON / 2
    assert comps.point[2] < comps.under_point[2]


def test_reflection_vector():
    r = Ray(point(0, 1, -1), vector(0, -SQ2, SQ2))
    comps = prepare_computations(Intersection(np.sqrt(2), plane()), r)
    assert np.allclose(comps.reflect_v, vector(0, SQ2, SQ2))


def _glass(transform, index):
    s = glass_sphere().with_transform(transform)
    s.set_material(replace(s.material, refractive_index=index))
    return s


def test_refractive_indices_through_nested_spheres():
    a = _glass(scaling(2, 2, 2), 1.5)
    b = _glass(translation(0, 0, -0.25), 2.0)
    c = _glass(translation(0, 0, 0.25), 2.5)
    r = Ray(point(0, 0, -4), vector(0, 0, 1))
    xs = [
        Intersection(2, a),
        Intersection(2.75, b),
        Intersection(3.25, c),
        Intersection(4.75, b),
        Intersection(5.25, c),
        Intersection(6, a),
    ]
    expected = [(1.0, 1.5), (1.5, 2.0), (2.0, 2.5), (2.5, 2.5), (2.5, 1.5), (1.5, 1.0)]
    for index, (n1, n2) in enumerate(expected):
        comps = prepare_computations(xs[index], r, xs)
        assert (comps.n1, comps.n2) == (n1, n2)


def test_touching_spheres_of_equal_index_do_not_bend():
    a, b = glass_sphere(), glass_sphere()
    r = Ray(point(0, 0, -5), vector(0, 0, 1))
    xs = [Intersection(4, a), Intersection(4, b), Intersection(6, b), Intersection(6, a)]
    comps = prepare_computations(xs[1], r, xs)
    assert (comps.n1, comps.n2) == (1.5, 1.5)


def test_schlick_under_total_internal_reflection():
    s = glass_sphere()
    r = Ray(point(0, 0, SQ2), vector(0, 1, 0))
    xs = [Intersection(-SQ2, s), Intersection(SQ2, s)]
    comps = prepare_computations(xs[1], r, xs)
    assert schlick(comps) == pytest.approx(1.0)


def test_schlick_perpendicular_view():
    s = glass_sphere()
    r = Ray(point(0, 0, 0), vector(0, 1, 0))
    xs = [Intersection(-1, s), Intersection(1, s)]
    comps = prepare_computations(xs[1], r, xs)
    assert schlick(comps) == pytest.approx(0.04)


def test_schlick_small_angle_into_denser_medium():
    s = glass_sphere()
    r = Ray(point(0, 0.99, -2), vector(0, 0, 1))
    xs = [Intersection(1.8589, s)]
    comps = prepare_computations(xs[0], r, xs)
    assert schlick(comps) == pytest.approx(0.48873, abs=1e-4)


def test_refracted_direction_straight_through():
    n = vector(0, 0, -1)
    d = refracted_direction(vector(0, 0, -1), n, 1.0, 1.5)
    assert np.allclose(d, vector(0, 0, 1))


def test_refracted_direction_none_past_critical_angle():
    assert sin2_transmitted(1.5, SQ2) > 1.0
    assert refracted_direction(vector(0, SQ2, -SQ2), vector(0, 0, -1), 1.5, 1.0) is None

import numpy as np
import pytest

from rt_core.matrix import identity, scaling, translation
from rt_core.patterns import (
    Pattern,
    checker_pattern,
    gradient_pattern,
    ring_pattern,
    stripe_pattern,
    test_pattern,
)
from rt_core.shapes import sphere
from rt_core.tuples import BLACK, WHITE, color, point


def test_stripe_alternates_in_x_only():
    p = stripe_pattern(WHITE, BLACK)
    assert np.allclose(p.a, WHITE) and np.allclose(p.b, BLACK)
    for y in (0, 1, 2):
        assert np.allclose(p.color_at(point(0, y, 0)), WHITE)
    for z in (0, 1, 2):
        assert np.allclose(p.color_at(point(0, 0, z)), WHITE)
    assert np.allclose(p.color_at(point(0.9, 0, 0)), WHITE)
    assert np.allclose(p.color_at(point(1, 0, 0)), BLACK)
    assert np.allclose(p.color_at(point(-0.1, 0, 0)), BLACK)
    assert np.allclose(p.color_at(point(-1, 0, 0)), BLACK)
    assert np.allclose(p.color_at(point(-1.1, 0, 0)), WHITE)


def test_pattern_default_transform_and_assignment():
    p = test_pattern()
    assert p.transform == identity()
    p.transform = translation(1, 2, 3)
    assert p.transform == translation(1, 2, 3)
    assert p.transform_inverse == translation(-1, -2, -3)


def test_pattern_sampled_through_object_and_pattern_space():
    shape = sphere().with_transform(scaling(2, 2, 2))
    assert np.allclose(test_pattern().pattern_at_shape(shape, point(2, 3, 4)), color(1, 1.5, 2))

    pattern = test_pattern().with_transform(scaling(2, 2, 2))
    assert np.allclose(pattern.pattern_at_shape(sphere(), point(2, 3, 4)), color(1, 1.5, 2))

    pattern = test_pattern().with_transform(translation(0.5, 1, 1.5))
    assert np.allclose(pattern.pattern_at_shape(shape, point(2.5, 3, 3.5)), color(0.75, 0.5, 0.25))


def test_stripe_with_both_transforms():
    shape = sphere().with_transform(scaling(2, 2, 2))
    p = stripe_pattern(WHITE, BLACK)
    assert np.allclose(p.pattern_at_shape(shape, point(1.5, 0, 0)), WHITE)
    p = p.with_transform(translation(0.5, 0, 0))
    assert np.allclose(p.pattern_at_shape(shape, point(2.5, 0, 0)), WHITE)


def test_gradient_interpolates_linearly():
    p = gradient_pattern(WHITE, BLACK)
    assert np.allclose(p.color_at(point(0, 0, 0)), WHITE)
    assert np.allclose(p.color_at(point(0.25, 0, 0)), color(0.75, 0.75, 0.75))
    assert np.allclose(p.color_at(point(0.5, 0, 0)), color(0.5, 0.5, 0.5))
    assert np.allclose(p.color_at(point(0.75, 0, 0)), color(0.25, 0.25, 0.25))


def test_ring_extends_in_x_and_z():
    p = ring_pattern(WHITE, BLACK)
    assert np.allclose(p.color_at(point(0, 0, 0)), WHITE)
    assert np.allclose(p.color_at(point(1, 0, 0)), BLACK)
    assert np.allclose(p.color_at(point(0, 0, 1)), BLACK)
    assert np.allclose(p.color_at(point(0.708, 0, 0.708)), BLACK)


def test_checkers_repeat_in_each_dimension():
    p = checker_pattern(WHITE, BLACK)
    for axis in range(3):
        coords = [0.0, 0.0, 0.0]
        assert np.allclose(p.color_at(point(*coords)), WHITE)
        coords[axis] = 0.99
        assert np.allclose(p.color_at(point(*coords)), WHITE)
        coords[axis] = 1.01
        assert np.allclose(p.color_at(point(*coords)), BLACK)


def test_unknown_pattern_kind_is_rejected():
    with pytest.raises(ValueError, match="Unsupported pattern kind"):
        Pattern("marble")


@pytest.mark.parametrize("factory", [stripe_pattern, ring_pattern, checker_pattern])
def test_sampled_colors_are_independent_of_the_pattern(factory):
    p = factory(color(0.2, 0.4, 0.6), color(0.1, 0.1, 0.1))
    sample = p.color_at(point(0, 0, 0))
    sample *= 0.0
    assert np.allclose(p.a, color(0.2, 0.4, 0.6))
    assert np.allclose(p.color_at(point(0, 0, 0)), color(0.2, 0.4, 0.6))

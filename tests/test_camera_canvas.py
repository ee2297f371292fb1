import logging

import numpy as np
import pytest

from rt_core.camera import Camera
from rt_core.canvas import Canvas
from rt_core.matrix import identity, rotation_y, translation, view_transform
from rt_core.tuples import color, point, vector
from rt_core.world import default_world

SQ2 = np.sqrt(2) / 2


def test_canvas_starts_black():
    c = Canvas(10, 20)
    assert c.width == 10 and c.height == 20
    assert c.pixels.shape == (20, 10, 3)
    assert np.all(c.pixels == 0.0)


def test_write_and_read_pixel():
    c = Canvas(10, 20)
    red = color(1, 0, 0)
    c.write_pixel(2, 3, red)
    assert np.allclose(c.pixel_at(2, 3), red)
    assert np.allclose(c.pixels[3, 2], red)


def test_pixel_at_returns_a_copy():
    c = Canvas(2, 2)
    px = c.pixel_at(0, 0)
    px[0] = 5.0
    assert c.pixel_at(0, 0)[0] == 0.0


@pytest.mark.parametrize("x, y", [(-1, 0), (0, -1), (10, 0), (0, 20)])
def test_out_of_range_pixels_raise(x, y):
    c = Canvas(10, 20)
    with pytest.raises(IndexError):
        c.write_pixel(x, y, color(1, 1, 1))
    with pytest.raises(IndexError):
        c.pixel_at(x, y)


def test_canvas_rejects_empty_size():
    with pytest.raises(ValueError):
        Canvas(0, 5)


def test_canvas_from_array_checks_shape():
    c = Canvas.from_array(np.ones((2, 3, 3)))
    assert (c.width, c.height) == (3, 2)
    with pytest.raises(ValueError):
        Canvas.from_array(np.ones((2, 3)))


def test_camera_defaults():
    c = Camera(160, 120, np.pi / 2)
    assert (c.hsize, c.vsize) == (160, 120)
    assert c.field_of_view == pytest.approx(np.pi / 2)
    assert c.transform == identity()


def test_pixel_size_for_landscape_and_portrait():
    assert Camera(200, 125, np.pi / 2).pixel_size == pytest.approx(0.01)
    assert Camera(125, 200, np.pi / 2).pixel_size == pytest.approx(0.01)


def test_ray_through_canvas_center_and_corner():
    c = Camera(201, 101, np.pi / 2)
    r = c.ray_for_pixel(100, 50)
    assert np.allclose(r.origin, point(0, 0, 0))
    assert np.allclose(r.direction, vector(0, 0, -1))
    r = c.ray_for_pixel(0, 0)
    assert np.allclose(r.origin, point(0, 0, 0))
    assert np.allclose(r.direction, vector(0.66519, 0.33259, -0.66851), atol=1e-5)


def test_ray_when_camera_is_transformed():
    c = Camera(201, 101, np.pi / 2)
    c.transform = rotation_y(np.pi / 4) @ translation(0, -2, 5)
    r = c.ray_for_pixel(100, 50)
    assert np.allclose(r.origin, point(0, 2, -5))
    assert np.allclose(r.direction, vector(SQ2, 0, -SQ2))


def test_render_default_world(caplog):
    w = default_world()
    c = Camera(11, 11, np.pi / 2)
    c.set_transform(view_transform(point(0, 0, -5), point(0, 0, 0), vector(0, 1, 0)))
    with caplog.at_level(logging.INFO, logger="rt_core.camera"):
        image = w.render(c)
    assert (image.width, image.height) == (11, 11)
    assert np.allclose(image.pixel_at(5, 5), color(0.38066, 0.47583, 0.2855), atol=1e-5)
    assert any("render finished" in rec.getMessage() for rec in caplog.records)

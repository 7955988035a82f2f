import copy
import math

import pytest

from utils.utils_shape import Shape2D
from utils.utils_vector import Vector2D


def _box() -> Shape2D:
    return Shape2D("Box", [Vector2D(-1, -1), Vector2D(1, -1), Vector2D(1, 1), Vector2D(-1, 1)])


def test_initial_transform_is_identity():
    shape = _box()

    assert [(v.x, v.y) for v in shape.world_vertices] == [(-1, -1), (1, -1), (1, 1), (-1, 1)]
    b_min, b_max = shape.bounds
    assert (b_min.x, b_min.y, b_max.x, b_max.y) == (-1, -1, 1, 1)


def test_update_transform_applies_rotate_scale_translate():
    shape = _box()

    shape.update_transform(math.pi / 2, 2.0, 3.0, Vector2D(10, 5))

    for local, world in zip(shape.local_vertices, shape.world_vertices):
        expected = local.rotate_scale_translate(math.pi / 2, 2.0, 3.0, 10, 5)
        assert (world.x, world.y) == (expected.x, expected.y)

    b_min, b_max = shape.bounds
    assert (b_min.x, b_min.y) == pytest.approx((8.0, 2.0))
    assert (b_max.x, b_max.y) == pytest.approx((12.0, 8.0))


def test_local_vertices_are_not_modified():
    shape = _box()

    shape.update_transform(1.0, 5.0, 5.0, Vector2D(3, 3))

    assert [(v.x, v.y) for v in shape.local_vertices] == [(-1, -1), (1, -1), (1, 1), (-1, 1)]


def test_centroid():
    shape = _box()
    shape.update_transform(0.4, 1.0, 1.0, Vector2D(2, -3))

    c = shape.centroid()

    assert (c.x, c.y) == pytest.approx((2.0, -3.0))


def test_empty_shape_collapses_to_position():
    shape = Shape2D("Empty", [])
    position = Vector2D(4, 5)

    shape.update_transform(0.0, 1.0, 1.0, position)

    assert shape.bounds == (position, position)
    assert shape.centroid() is position
    assert "Empty" in repr(shape)


def test_shape_deepcopy_is_independent():
    shape = _box()
    shape.update_transform(0.3, 2.0, 1.0, Vector2D(1, 1))

    clone = copy.deepcopy(shape)
    clone.update_transform(0.0, 1.0, 1.0, Vector2D(0, 0))

    assert [(v.x, v.y) for v in clone.local_vertices] == [(v.x, v.y) for v in shape.local_vertices]
    assert shape.position.x == 1.0
    assert clone.position.x == 0.0

import math

from pacmaze.geometry import DECISION_ORDER, Direction, Vec2, near_center, tile_center, tile_of


def test_vec2_arithmetic():
    a = Vec2(3, 4)
    b = Vec2(1, 1)
    assert a + b == Vec2(4, 5)
    assert a - b == Vec2(2, 3)
    assert a * 2 == Vec2(6, 8)
    assert a.dist(Vec2(0, 0)) == 5
    assert a.dist_sq(Vec2(0, 0)) == 25


def test_vec2_equality_is_approximate():
    assert Vec2(1.0, 2.0) == Vec2(1.0004, 1.9996)
    assert Vec2(1.0, 2.0) != Vec2(1.01, 2.0)


def test_vec2_is_finite():
    assert Vec2(0, 0).is_finite()
    assert not Vec2(math.nan, 0).is_finite()
    assert not Vec2(0, math.inf).is_finite()


def test_direction_opposites():
    for d in DECISION_ORDER:
        assert d.opposite.opposite is d
        assert d.opposite.dx == -d.dx and d.opposite.dy == -d.dy
    assert Direction.UNSET.opposite is Direction.UNSET


def test_direction_axes():
    assert Direction.LEFT.is_horizontal and not Direction.LEFT.is_vertical
    assert Direction.UP.is_vertical and not Direction.UP.is_horizontal
    assert Direction.DOWN.vector == Vec2(0, 1)


def test_decision_order():
    assert DECISION_ORDER == (Direction.RIGHT, Direction.LEFT, Direction.DOWN, Direction.UP)


def test_tile_of_floors_negative_coordinates():
    assert tile_of(39.9, 20.0, 20) == (1, 1)
    assert tile_of(-0.1, 5, 20) == (-1, 0)


def test_tile_center():
    assert tile_center(0, 0, 20) == Vec2(10, 10)
    assert tile_center(4, 1, 20) == Vec2(90, 30)


def test_near_center_threshold_is_strict():
    assert near_center(Vec2(93.9, 30), 20, 0.2)
    assert not near_center(Vec2(94, 30), 20, 0.2)
    assert not near_center(Vec2(90, 25), 20, 0.2)

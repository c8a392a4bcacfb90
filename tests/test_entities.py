import pytest

from invaders.entities import (
    Bullet,
    Key,
    Point,
)


def test_point_moved_returns_shifted_point():
    p = Point(5, 7)
    assert p.moved(2, -3) == Point(7, 4)


def test_point_moved_leaves_original_unchanged():
    p = Point(1, 1)
    p.moved(4, 4)
    assert p == Point(1, 1)


def test_point_moved_round_trip():
    p = Point(10, 20)
    assert p.moved(3, 9).moved(-3, -9) == p


@pytest.mark.parametrize(
    "char, key",
    [("w", Key.UP), ("s", Key.DOWN), ("a", Key.LEFT), ("d", Key.RIGHT), ("p", Key.SHOT)],
)
def test_key_from_char_maps_controls(char, key):
    assert Key.from_char(char) is key


@pytest.mark.parametrize("char", ["x", "W", "", "y"])
def test_key_from_char_unknown_is_none(char):
    assert Key.from_char(char) is None


def test_bullet_starts_idle():
    b = Bullet()
    assert b.active is False
    assert b.pos == Point(0, 0)


def test_bullet_fire_and_clear():
    b = Bullet()
    b.fire(Point(3, 4))
    assert b.active is True
    assert b.pos == Point(3, 4)
    b.clear()
    assert b.active is False


def test_bullet_fire_again_moves_to_new_position():
    b = Bullet()
    b.fire(Point(1, 2))
    b.clear()
    b.fire(Point(8, 9))
    assert b.active is True
    assert b.pos == Point(8, 9)
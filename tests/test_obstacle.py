from types import SimpleNamespace

import pytest

from dinorun.obstacle import Obstacle


def box(x, y, w, h):
    return SimpleNamespace(x=x, y=y, width=w, height=h)


def test_update_moves_left_only():
    o = Obstacle(100, 50, 10, 20, "img")
    o.update(speed=0.5, game_speed=2, dt=16, scale_ratio=1.5)
    assert o.x == pytest.approx(100 - 0.5 * 2 * 16 * 1.5)
    assert o.y == 50
    assert (o.width, o.height) == (10, 20)


def test_draw_delegates_to_renderer(renderer):
    Obstacle(3, 4, 5, 6, "cactus").draw(renderer)
    assert renderer.calls == [("image", "cactus", 3, 4, 5, 6)]


def test_overlap_collides():
    o = Obstacle(100, 100, 50, 75, None)
    assert o.collides_with(box(110, 110, 40, 40))


def test_near_miss_forgiven_by_tolerance():
    o = Obstacle(100, 100, 50, 75, None)
    # Raw boxes overlap by 5px horizontally; shrunk width 50/1.25 = 40 leaves a gap
    assert not o.collides_with(box(145, 100, 40, 40))
    assert o.collides_with(box(145, 100, 40, 40), adjust_by=1.0)


@pytest.mark.parametrize(
    "other",
    [
        box(0, 100, 20, 20),  # left of obstacle
        box(300, 100, 20, 20),  # right
        box(100, 0, 20, 20),  # above
        box(100, 400, 20, 20),  # below
    ],
)
def test_disjoint_on_either_axis_never_collides(other):
    o = Obstacle(100, 100, 50, 75, None)
    assert not o.collides_with(other)


@pytest.mark.parametrize(
    "a,b",
    [
        ((0, 0, 50, 50), (30, 30, 50, 50)),
        ((0, 0, 50, 50), (45, 0, 50, 50)),
        ((10, 80, 20, 90), (0, 100, 100, 10)),
        ((0, 0, 10, 10), (200, 200, 10, 10)),
    ],
)
def test_collision_is_symmetric(a, b):
    oa = Obstacle(*a, None)
    ob = Obstacle(*b, None)
    assert oa.collides_with(ob) == ob.collides_with(oa)


def test_tolerance_below_one_rejected():
    with pytest.raises(ValueError):
        Obstacle(0, 0, 1, 1, None).collides_with(box(0, 0, 1, 1), adjust_by=0.5)


def test_off_screen_only_past_full_width():
    o = Obstacle(-50, 0, 50, 10, None)
    assert not o.is_off_screen
    o.x = -50.01
    assert o.is_off_screen

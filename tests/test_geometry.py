import pytest

from lizardmeme.geometry import (
    Circle,
    Rect,
    Vector2,
    check_collision_circle_rec,
    check_collision_recs,
)


def test_overlapping_rects_collide():
    assert check_collision_recs(Rect(0, 0, 10, 10), Rect(5, 5, 10, 10)) is True


def test_disjoint_rects_do_not_collide():
    assert check_collision_recs(Rect(0, 0, 10, 10), Rect(20, 20, 5, 5)) is False


def test_touching_rect_edges_do_not_collide():
    assert check_collision_recs(Rect(0, 0, 10, 10), Rect(10, 0, 10, 10)) is False


@pytest.mark.parametrize(
    "a, b",
    [
        (Rect(0, 0, 10, 10), Rect(5, 5, 10, 10)),
        (Rect(0, 0, 10, 10), Rect(30, 0, 10, 10)),
        (Rect(-5, -5, 3, 3), Rect(-4, -4, 1, 1)),
    ],
)
def test_rect_collision_is_symmetric(a, b):
    assert check_collision_recs(a, b) == check_collision_recs(b, a)


def test_circle_center_inside_rect_collides():
    assert check_collision_circle_rec(Vector2(5, 5), 1, Rect(0, 0, 10, 10)) is True


def test_circle_far_away_does_not_collide():
    assert check_collision_circle_rec(Vector2(100, 100), 5, Rect(0, 0, 10, 10)) is False


def test_circle_beside_edge_collides():
    assert check_collision_circle_rec(Vector2(14, 5), 5, Rect(0, 0, 10, 10)) is True


def test_circle_near_corner_outside_radius_does_not_collide():
    # Inside the bounding square but beyond the corner by more than the radius.
    assert check_collision_circle_rec(Vector2(14, 14), 5, Rect(0, 0, 10, 10)) is False


def test_circle_near_corner_within_radius_collides():
    assert check_collision_circle_rec(Vector2(13, 13), 5, Rect(0, 0, 10, 10)) is True


def test_circle_dataclass_holds_values():
    circle = Circle(Vector2(1, 2), 3)
    assert (circle.center.x, circle.center.y, circle.radius) == (1, 2, 3)
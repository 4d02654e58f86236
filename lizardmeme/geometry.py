"""Plain 2D shapes and the collision tests between them."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(slots=True)
class Vector2:
    """A point or displacement in screen coordinates."""

    x: float = 0.0
    y: float = 0.0


@dataclass(slots=True)
class Rect:
    """An axis-aligned rectangle given by its top-left corner and size."""

    x: float
    y: float
    width: float
    height: float


@dataclass(slots=True)
class Circle:
    """A circle given by its centre and radius."""

    center: Vector2 = field(default_factory=Vector2)
    radius: float = 0.0


def check_collision_recs(a: Rect, b: Rect) -> bool:
    """Return True when two rectangles overlap; touching edges do not count."""
    return (
        a.x < b.x + b.width
        and a.x + a.width > b.x
        and a.y < b.y + b.height
        and a.y + a.height > b.y
    )


def check_collision_circle_rec(center: Vector2, radius: float, rec: Rect) -> bool:
    """Return True when a circle and a rectangle overlap or touch."""
    half_w = rec.width / 2.0
    half_h = rec.height / 2.0
    dx = abs(center.x - (rec.x + half_w))
    dy = abs(center.y - (rec.y + half_h))

    if dx > half_w + radius or dy > half_h + radius:
        return False
    if dx <= half_w or dy <= half_h:
        return True
    corner_sq = (dx - half_w) ** 2 + (dy - half_h) ** 2
    return corner_sq <= radius * radius
"""Obstacles and pickups that scroll across the screen."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from enum import Enum, auto
from typing import Any, Union

from .definitions import (
    ENTITY_OFFSCREEN_MARGIN,
    ENTITY_SPAWN_HEIGHT_OFFSET,
    FIRST_SPAWN_TIME,
    LIZARD_HITBOX_OFFSET,
    LIZARD_HITBOX_X,
    LIZARD_HITBOX_Y,
    LIZARD_SCALE,
    LIZARD_SPEED,
    MAX_ENTITIES,
    OBJECT_SPAWN_RATE_MIN,
    SAW_HITBOX_OFFSET,
    SAW_HITBOX_RADIUS,
    SAW_SCALE,
    SAW_SPEED,
)
from .geometry import Circle, Rect, Vector2, check_collision_circle_rec, check_collision_recs
from .randomizer import Randomizer


class EntityType(Enum):
    SAW = auto()
    LIZARD = auto()


class CollisionType(Enum):
    NO_COLLISION = auto()
    DEATH_COLLISION = auto()
    SCORE_COLLISION = auto()


_SPEEDS = {EntityType.SAW: SAW_SPEED, EntityType.LIZARD: LIZARD_SPEED}


@dataclass
class Entity:
    """A saw blade or lizard moving leftwards."""

    entity_type: EntityType
    position: Vector2
    sprite: Any
    hitbox: Union[Rect, Circle]
    scale: float
    rotation: float = 0.0

    def _shift_left(self, distance: float) -> None:
        self.position.x -= distance
        if isinstance(self.hitbox, Circle):
            self.hitbox.center.x -= distance
        else:
            self.hitbox.x -= distance

    def _hits(self, box: Rect) -> bool:
        if isinstance(self.hitbox, Circle):
            return check_collision_circle_rec(self.hitbox.center, self.hitbox.radius, box)
        return check_collision_recs(self.hitbox, box)


class EntityManager:
    """Spawns, moves and collides the scrolling entities."""

    def __init__(self, randomizer: Randomizer | None = None) -> None:
        self.randomizer = randomizer if randomizer is not None else Randomizer()
        self.entities: list[Entity] = []
        self.spawn_timer = OBJECT_SPAWN_RATE_MIN
        self.next_spawn_time = FIRST_SPAWN_TIME

    def __len__(self) -> int:
        return len(self.entities)

    def __iter__(self) -> Iterator[Entity]:
        return iter(self.entities)

    def update(self, sprites: Any, delta_time: float, screen_width: int, screen_height: int) -> None:
        """Advance the spawn timer and spawn a lizard or saw when it runs out.

        ``sprites`` is any object with ``lizard`` and ``saw`` attributes.
        """
        self.spawn_timer += delta_time
        if self.spawn_timer < self.next_spawn_time:
            return
        if self.randomizer.random_num(2) == 1:
            self.spawn(EntityType.LIZARD, sprites.lizard, screen_width, screen_height)
        else:
            self.spawn(EntityType.SAW, sprites.saw, screen_width, screen_height)
        self.spawn_timer = 0.0
        self.next_spawn_time = self.randomizer.random_spawn_time()

    def spawn(
        self, entity_type: EntityType, sprite: Any, screen_width: int, screen_height: int
    ) -> Entity | None:
        """Add an entity at the right edge; return it, or None when full."""
        if len(self.entities) >= MAX_ENTITIES:
            return None
        x = float(screen_width)
        y = float(self.randomizer.random_num(screen_height - ENTITY_SPAWN_HEIGHT_OFFSET))
        hitbox: Union[Rect, Circle]
        if entity_type is EntityType.SAW:
            hitbox = Circle(
                Vector2(x + SAW_HITBOX_OFFSET, y + SAW_HITBOX_OFFSET), float(SAW_HITBOX_RADIUS)
            )
            scale = SAW_SCALE
        else:
            hitbox = Rect(
                x + LIZARD_HITBOX_OFFSET,
                y + LIZARD_HITBOX_OFFSET,
                float(LIZARD_HITBOX_X),
                float(LIZARD_HITBOX_Y),
            )
            scale = LIZARD_SCALE
        entity = Entity(entity_type, Vector2(x, y), sprite, hitbox, scale)
        self.entities.append(entity)
        return entity

    def update_entities(self, delta_time: float, screen_width: int) -> None:
        """Move every entity left and drop those that left the screen."""
        for entity in self.entities:
            entity._shift_left(_SPEEDS[entity.entity_type] * delta_time)
        self.entities = [
            e for e in self.entities if e.position.x + ENTITY_OFFSCREEN_MARGIN >= 0
        ]

    def check_collisions(self, player_hitboxes: Iterable[Rect]) -> CollisionType:
        """Remove the first entity touching the player and report its kind."""
        boxes = list(player_hitboxes)
        for index, entity in enumerate(self.entities):
            if any(entity._hits(box) for box in boxes):
                del self.entities[index]
                if entity.entity_type is EntityType.SAW:
                    return CollisionType.DEATH_COLLISION
                return CollisionType.SCORE_COLLISION
        return CollisionType.NO_COLLISION

    def remove(self, index: int) -> None:
        """Remove the entity at ``index``; indices outside the list are ignored."""
        if 0 <= index < len(self.entities):
            del self.entities[index]
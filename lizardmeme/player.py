"""The player-controlled character: movement, hitboxes and animation."""

from __future__ import annotations

from .definitions import (
    PLAYER_ANIMATION_FRAMES,
    PLAYER_FRAME_TIME,
    PLAYER_HEADBOX_HEIGHT,
    PLAYER_HEADBOX_WIDTH,
    PLAYER_HEADBOX_X_OFFSET,
    PLAYER_HEADBOX_Y_OFFSET,
    PLAYER_HITBOX_HEIGHT,
    PLAYER_HITBOX_WIDTH,
    PLAYER_HITBOX_X_OFFSET,
    PLAYER_HITBOX_Y_OFFSET,
    PLAYER_LOWER_TAILBOX_HEIGHT,
    PLAYER_LOWER_TAILBOX_WIDTH,
    PLAYER_LOWER_TAILBOX_X_OFFSET,
    PLAYER_LOWER_TAILBOX_Y_OFFSET,
    PLAYER_SPAWN_X,
    PLAYER_SPAWN_Y,
    PLAYER_SPRITE_HEIGHT,
    PLAYER_SPRITE_SCALE,
    PLAYER_SPRITE_WIDTH,
    PLAYER_TAILBOX_HEIGHT,
    PLAYER_TAILBOX_WIDTH,
    PLAYER_TAILBOX_X_OFFSET,
    PLAYER_TAILBOX_Y_OFFSET,
)
from .geometry import Rect, Vector2


def _box(x_offset: float, y_offset: float, width: float, height: float) -> Rect:
    return Rect(PLAYER_SPAWN_X + x_offset, PLAYER_SPAWN_Y + y_offset, float(width), float(height))


class Player:
    """The lizard the player steers; its hitboxes follow its position and facing."""

    def __init__(self, frame_width: int, frame_height: int) -> None:
        self.frame_width = frame_width
        self.frame_height = frame_height
        self.position = Vector2(PLAYER_SPAWN_X, PLAYER_SPAWN_Y)
        self.velocity = Vector2()
        self.hitbox = _box(PLAYER_HITBOX_X_OFFSET, PLAYER_HITBOX_Y_OFFSET,
                           PLAYER_HITBOX_WIDTH, PLAYER_HITBOX_HEIGHT)
        self.headbox = _box(PLAYER_HEADBOX_X_OFFSET, PLAYER_HEADBOX_Y_OFFSET,
                            PLAYER_HEADBOX_WIDTH, PLAYER_HEADBOX_HEIGHT)
        self.tailbox = _box(PLAYER_TAILBOX_X_OFFSET, PLAYER_TAILBOX_Y_OFFSET,
                            PLAYER_TAILBOX_WIDTH, PLAYER_TAILBOX_HEIGHT)
        self.lower_tailbox = _box(PLAYER_LOWER_TAILBOX_X_OFFSET, PLAYER_LOWER_TAILBOX_Y_OFFSET,
                                  PLAYER_LOWER_TAILBOX_WIDTH, PLAYER_LOWER_TAILBOX_HEIGHT)
        self.is_animating = False
        self.current_frame = 0
        self.animation_timer = 0.0
        self.frame_time = PLAYER_FRAME_TIME
        self.facing_left = False
        self.update_hitboxes()

    @property
    def hitboxes(self) -> tuple[Rect, Rect, Rect, Rect]:
        """All collision boxes: body, head, tail and lower tail."""
        return (self.hitbox, self.headbox, self.tailbox, self.lower_tailbox)

    @property
    def sprite_width(self) -> float:
        """Width of the drawn sprite on screen."""
        return self.frame_width * PLAYER_SPRITE_SCALE * 2.0

    def update(self, velocity: Vector2, delta_time: float, screen_width: int, screen_height: int) -> None:
        """Move, keep on screen, advance the animation and refresh hitboxes."""
        self.velocity = velocity
        if velocity.x < 0:
            self.facing_left = True
        elif velocity.x > 0:
            self.facing_left = False

        self.position.x += velocity.x * delta_time
        self.position.y += velocity.y * delta_time

        max_y = screen_height - PLAYER_SPRITE_HEIGHT
        if self.position.y < 0:
            self.position.y = 0.0
        elif self.position.y > max_y:
            self.position.y = float(max_y)

        max_x = screen_width - PLAYER_SPRITE_WIDTH
        if self.position.x < 0:
            self.position.x = 0.0
        elif self.position.x > max_x:
            self.position.x = float(max_x)

        if self.is_animating:
            self.animation_timer += delta_time
            if self.animation_timer >= self.frame_time:
                self.current_frame += 1
                self.animation_timer = 0.0
                if self.current_frame >= PLAYER_ANIMATION_FRAMES:
                    self.is_animating = False
                    self.current_frame = 0

        self.update_hitboxes()

    def update_hitboxes(self) -> None:
        """Place the hitboxes relative to the position, mirrored when facing left."""
        layout = (
            (self.hitbox, PLAYER_HITBOX_X_OFFSET, PLAYER_HITBOX_Y_OFFSET),
            (self.headbox, PLAYER_HEADBOX_X_OFFSET, PLAYER_HEADBOX_Y_OFFSET),
            (self.tailbox, PLAYER_TAILBOX_X_OFFSET, PLAYER_TAILBOX_Y_OFFSET),
            (self.lower_tailbox, PLAYER_LOWER_TAILBOX_X_OFFSET, PLAYER_LOWER_TAILBOX_Y_OFFSET),
        )
        sprite_width = self.sprite_width
        for box, x_offset, y_offset in layout:
            if self.facing_left:
                box.x = self.position.x + sprite_width - (x_offset + box.width)
            else:
                box.x = self.position.x + x_offset
            box.y = self.position.y + y_offset

    def play_animation(self) -> None:
        """Start the animation from its first frame."""
        self.is_animating = True
        self.current_frame = 0
        self.animation_timer = 0.0
"""Turning held keys into a player velocity."""

from __future__ import annotations

from typing import Any

import pygame

from .definitions import PLAYER_SPEED
from .geometry import Vector2


def player_velocity(pressed: Any) -> Vector2:
    """Return the velocity for the held keys.

    ``pressed`` is indexed by pygame key constants, as the result of
    ``pygame.key.get_pressed()`` is. Down wins over up and right over left.
    """
    velocity = Vector2(0.0, 0.0)
    if pressed[pygame.K_w] or pressed[pygame.K_UP]:
        velocity.y = -PLAYER_SPEED
    if pressed[pygame.K_s] or pressed[pygame.K_DOWN]:
        velocity.y = PLAYER_SPEED
    if pressed[pygame.K_a] or pressed[pygame.K_LEFT]:
        velocity.x = -PLAYER_SPEED
    if pressed[pygame.K_d] or pressed[pygame.K_RIGHT]:
        velocity.x = PLAYER_SPEED
    return velocity
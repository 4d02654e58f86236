from collections import defaultdict

import pygame
import pytest

from lizardmeme.controls import player_velocity
from lizardmeme.definitions import PLAYER_SPEED
from lizardmeme.geometry import Vector2


def _keys(*held):
    pressed = defaultdict(bool)
    for key in held:
        pressed[key] = True
    return pressed


def test_no_keys_no_motion():
    assert player_velocity(_keys()) == Vector2(0.0, 0.0)


@pytest.mark.parametrize(
    "key, expected",
    [
        (pygame.K_w, Vector2(0.0, -PLAYER_SPEED)),
        (pygame.K_UP, Vector2(0.0, -PLAYER_SPEED)),
        (pygame.K_s, Vector2(0.0, PLAYER_SPEED)),
        (pygame.K_DOWN, Vector2(0.0, PLAYER_SPEED)),
        (pygame.K_a, Vector2(-PLAYER_SPEED, 0.0)),
        (pygame.K_LEFT, Vector2(-PLAYER_SPEED, 0.0)),
        (pygame.K_d, Vector2(PLAYER_SPEED, 0.0)),
        (pygame.K_RIGHT, Vector2(PLAYER_SPEED, 0.0)),
    ],
)
def test_single_keys(key, expected):
    assert player_velocity(_keys(key)) == expected


def test_down_overrides_up_and_right_overrides_left():
    velocity = player_velocity(_keys(pygame.K_w, pygame.K_s, pygame.K_a, pygame.K_d))
    assert velocity == Vector2(PLAYER_SPEED, PLAYER_SPEED)


def test_diagonal():
    velocity = player_velocity(_keys(pygame.K_UP, pygame.K_LEFT))
    assert velocity == Vector2(-PLAYER_SPEED, -PLAYER_SPEED)
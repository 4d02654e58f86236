"""Loading the game's images and drawing entities and the player."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import pygame

from .definitions import DEBUG_MODE, PLAYER_SHEET_FRAMES, PLAYER_SPRITE_SCALE
from .entities import Entity, EntityManager
from .geometry import Circle, Rect
from .player import Player

RAYWHITE = (245, 245, 245)
WHITE = (255, 255, 255)
BLACK = (0, 0, 0)
RED = (230, 41, 55)
BLUE = (0, 121, 241)
GREEN = (0, 228, 48)
PINK = (255, 109, 194)

PLAYER_SHEET_FILE = "playerAnimationSpritesheet.png"
LIZARD_FILE = "lizardEmoji.png"
SAW_FILE = "circular_saw_blade.png"


def _load_image(path: Path) -> pygame.Surface:
    if not path.is_file():
        raise FileNotFoundError(f"image not found: {path}")
    return pygame.image.load(str(path))


@dataclass
class Sprites:
    """The images the game draws."""

    player_sheet: pygame.Surface
    lizard: pygame.Surface
    saw: pygame.Surface

    @classmethod
    def load(cls, res_dir: str | Path = "res") -> "Sprites":
        """Load the player sheet, lizard and saw images from ``res_dir``."""
        base = Path(res_dir)
        return cls(
            player_sheet=_load_image(base / PLAYER_SHEET_FILE),
            lizard=_load_image(base / LIZARD_FILE),
            saw=_load_image(base / SAW_FILE),
        )


def player_frame_size(sheet: pygame.Surface) -> tuple[int, int]:
    """Return the size of one animation frame of the player sheet."""
    return sheet.get_width() // PLAYER_SHEET_FRAMES, sheet.get_height()


def _to_pygame_rect(rect: Rect) -> pygame.Rect:
    return pygame.Rect(int(rect.x), int(rect.y), int(rect.width), int(rect.height))


def _draw_entity(surface: pygame.Surface, entity: Entity) -> None:
    if isinstance(entity.sprite, pygame.Surface):
        image = pygame.transform.rotozoom(entity.sprite, -entity.rotation, entity.scale)
        surface.blit(image, (int(entity.position.x), int(entity.position.y)))
    if isinstance(entity.hitbox, Circle):
        center = (int(entity.hitbox.center.x), int(entity.hitbox.center.y))
        pygame.draw.circle(surface, GREEN, center, int(entity.hitbox.radius), width=1)
    else:
        pygame.draw.rect(surface, BLUE, _to_pygame_rect(entity.hitbox), width=2)


def draw_entities(surface: pygame.Surface, manager: EntityManager) -> None:
    """Draw every entity's sprite followed by its hitbox outline."""
    for entity in manager:
        _draw_entity(surface, entity)


def draw_player(surface: pygame.Surface, player: Player, sheet: pygame.Surface) -> None:
    """Draw the player's current frame, mirrored when facing left, and its hitboxes."""
    frame_w, frame_h = player.frame_width, player.frame_height
    if frame_w > 0 and frame_h > 0:
        frame = (player.current_frame if player.is_animating else 0) % PLAYER_SHEET_FRAMES
        source = pygame.Rect(frame * frame_w, 0, frame_w, frame_h).clip(sheet.get_rect())
        if source.width > 0 and source.height > 0:
            image = sheet.subsurface(source)
            if player.facing_left:
                image = pygame.transform.flip(image, True, False)
            size = (
                max(1, int(frame_w * PLAYER_SPRITE_SCALE * 2.0)),
                max(1, int(frame_h * PLAYER_SPRITE_SCALE * 2.0)),
            )
            image = pygame.transform.scale(image, size)
            surface.blit(image, (int(player.position.x), int(player.position.y)))

    if DEBUG_MODE:
        pygame.draw.rect(surface, BLUE, _to_pygame_rect(player.hitbox), width=2)
        pygame.draw.rect(surface, GREEN, _to_pygame_rect(player.headbox), width=2)
        pygame.draw.rect(surface, PINK, _to_pygame_rect(player.tailbox), width=2)
        pygame.draw.rect(surface, GREEN, _to_pygame_rect(player.lower_tailbox), width=2)
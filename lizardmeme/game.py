"""The game state, one simulation step, and the window loop."""

from __future__ import annotations

import argparse
from collections.abc import Callable, Sequence
from typing import Any

import pygame

from .definitions import SCREEN_HEIGHT, SCREEN_WIDTH
from .entities import CollisionType, EntityManager
from .geometry import Rect, Vector2
from .player import Player
from .randomizer import Randomizer

TARGET_FPS = 60


class Game:
    """Player, entities, score and pause state on the fixed virtual screen."""

    def __init__(
        self,
        sprites: Any,
        frame_width: int,
        frame_height: int,
        randomizer: Randomizer | None = None,
        on_score: Callable[[], Any] | None = None,
    ) -> None:
        self.sprites = sprites
        self.randomizer = randomizer if randomizer is not None else Randomizer()
        self.on_score = on_score
        self.manager = EntityManager(self.randomizer)
        self.player = Player(frame_width, frame_height)
        self.score = 0
        self.paused = False
        self.screen_width = SCREEN_WIDTH
        self.screen_height = SCREEN_HEIGHT

    def toggle_pause(self) -> bool:
        """Flip the pause state and return the new one."""
        self.paused = not self.paused
        return self.paused

    def step(self, velocity: Vector2, delta_time: float) -> CollisionType:
        """Advance the world by ``delta_time`` unless paused; return the collision."""
        if self.paused:
            return CollisionType.NO_COLLISION
        self.player.update(velocity, delta_time, self.screen_width, self.screen_height)
        self.manager.update(self.sprites, delta_time, self.screen_width, self.screen_height)
        self.manager.update_entities(delta_time, self.screen_width)
        collision = self.manager.check_collisions(self.player.hitboxes)
        if collision is CollisionType.SCORE_COLLISION:
            self.score += 1
            if self.on_score is not None:
                self.on_score()
            self.player.play_animation()
        return collision


def compute_viewport(window_width: int, window_height: int) -> Rect:
    """Return where the virtual screen goes in the window, scaled and centred."""
    scale = min(window_width / SCREEN_WIDTH, window_height / SCREEN_HEIGHT)
    offset_x = (window_width - int(SCREEN_WIDTH * scale)) // 2
    offset_y = (window_height - int(SCREEN_HEIGHT * scale)) // 2
    return Rect(float(offset_x), float(offset_y), SCREEN_WIDTH * scale, SCREEN_HEIGHT * scale)


def main(argv: Sequence[str] | None = None) -> int:
    """Open the window and run the game until it is closed."""
    from .controls import player_velocity
    from .graphics import BLACK, RAYWHITE, RED, Sprites, draw_entities, draw_player, player_frame_size
    from .sound import ScoreSounds

    parser = argparse.ArgumentParser(prog="lizardmeme", description="Dodge saws, catch lizards.")
    parser.add_argument("--res", default="res", help="directory holding images and sounds")
    args = parser.parse_args(argv)

    pygame.init()
    try:
        window = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT), pygame.RESIZABLE)
        pygame.display.set_caption("Lizard Meme")
        clock = pygame.time.Clock()
        target = pygame.Surface((SCREEN_WIDTH, SCREEN_HEIGHT))

        randomizer = Randomizer()
        sounds = ScoreSounds.load(args.res, randomizer)
        sprites = Sprites.load(args.res)
        frame_width, frame_height = player_frame_size(sprites.player_sheet)
        game = Game(sprites, frame_width, frame_height, randomizer, sounds.play)
        font = pygame.font.Font(None, 60)

        running = True
        while running:
            delta_time = clock.tick(TARGET_FPS) / 1000.0
            space_pressed = False
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_ESCAPE:
                        running = False
                    elif event.key == pygame.K_SPACE:
                        space_pressed = True
            if not running:
                break

            if space_pressed:
                game.toggle_pause()
            if not game.paused:
                game.step(player_velocity(pygame.key.get_pressed()), delta_time)

            target.fill(RED)
            draw_entities(target, game.manager)
            draw_player(target, game.player, sprites.player_sheet)
            text = font.render(str(game.score), True, RAYWHITE)
            target.blit(text, (SCREEN_WIDTH // 2, 30))
            if space_pressed:
                sounds.play()
                game.player.play_animation()

            window.fill(BLACK)
            dest = compute_viewport(*window.get_size())
            size = (max(1, int(dest.width)), max(1, int(dest.height)))
            window.blit(pygame.transform.smoothscale(target, size), (int(dest.x), int(dest.y)))
            pygame.display.flip()
    finally:
        pygame.quit()
    return 0
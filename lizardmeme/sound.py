"""The sounds played when the player scores."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path
from typing import Any

import pygame

from .randomizer import Randomizer

SCORE_SOUND_FILES = ("lizard.wav", "lizardUpShift.wav", "lizardDownShift.wav")


class ScoreSounds:
    """A set of score sounds, one of which is picked at random each time."""

    def __init__(self, sounds: Sequence[Any], randomizer: Randomizer | None = None) -> None:
        if not sounds:
            raise ValueError("at least one sound is required")
        self.sounds = list(sounds)
        self.randomizer = randomizer if randomizer is not None else Randomizer()

    @classmethod
    def load(cls, res_dir: str | Path = "res", randomizer: Randomizer | None = None) -> "ScoreSounds":
        """Open the audio device if needed and load the score sounds."""
        paths = [Path(res_dir) / name for name in SCORE_SOUND_FILES]
        for path in paths:
            if not path.is_file():
                raise FileNotFoundError(f"sound not found: {path}")
        if not pygame.mixer.get_init():
            pygame.mixer.init()
        return cls([pygame.mixer.Sound(str(path)) for path in paths], randomizer)

    def play(self) -> Any:
        """Play one sound chosen at random and return it."""
        sound = self.sounds[self.randomizer.random_num(len(self.sounds)) - 1]
        sound.play()
        return sound
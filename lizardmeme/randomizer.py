"""Random choices used for spawning and sound selection."""

from __future__ import annotations

import random

from .definitions import OBJECT_SPAWN_RATE_MAX, OBJECT_SPAWN_RATE_MIN


class Randomizer:
    """A seeded source of the game's random numbers."""

    def __init__(self, seed: int | None = None) -> None:
        self._rng = random.Random(seed)

    def random_num(self, maximum: int) -> int:
        """Return a whole number from 1 to ``maximum`` inclusive."""
        if maximum <= 0:
            raise ValueError(f"maximum must be positive, got {maximum}")
        return self._rng.randint(1, maximum)

    def random_spawn_time(self) -> float:
        """Return a spawn delay in seconds, in steps of a tenth of a second."""
        low = int(OBJECT_SPAWN_RATE_MIN * 10)
        high = int(OBJECT_SPAWN_RATE_MAX * 10)
        return self._rng.randint(low, high) / 10.0
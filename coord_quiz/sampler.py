from __future__ import annotations

import random
from typing import Dict, Protocol

from .models import Coordinate, Difficulty, DifficultyProfile, Quadrant


DIFFICULTY_PROFILES: Dict[Difficulty, DifficultyProfile] = {
    Difficulty.EASY: DifficultyProfile(range=5, min_coord=0, max_coord=5),
    Difficulty.MEDIUM: DifficultyProfile(range=6, min_coord=-6, max_coord=6),
    Difficulty.HARD: DifficultyProfile(range=10, min_coord=-10, max_coord=10),
}


class RandomSource(Protocol):
    """Anything that draws uniform integers from a closed range (`random.Random` does)."""

    def randint(self, a: int, b: int) -> int: ...


def get_profile(difficulty: Difficulty | str) -> DifficultyProfile:
    return DIFFICULTY_PROFILES[Difficulty(difficulty)]


def sample_coordinate(profile: DifficultyProfile, rng: RandomSource) -> Coordinate:
    """
    Draw x then y uniformly from [min_coord, max_coord].

    The origin is never returned: if both draws are zero, only x is redrawn
    from [1, max_coord].
    """
    x = rng.randint(profile.min_coord, profile.max_coord)
    y = rng.randint(profile.min_coord, profile.max_coord)
    if x == 0 and y == 0:
        x = rng.randint(1, profile.max_coord)
    return Coordinate(x=x, y=y)


def classify_quadrant(x: int, y: int) -> Quadrant:
    if x > 0 and y > 0:
        return Quadrant.I
    if x < 0 and y > 0:
        return Quadrant.II
    if x < 0 and y < 0:
        return Quadrant.III
    if x > 0 and y < 0:
        return Quadrant.IV
    return Quadrant.AXIS


class CoordinateSampler:
    """Seedable wrapper around `sample_coordinate`."""

    def __init__(self, seed: int | None = None, rng: RandomSource | None = None) -> None:
        self._rng = rng if rng is not None else random.Random(seed)

    @property
    def rng(self) -> RandomSource:
        return self._rng

    def sample(self, profile: DifficultyProfile) -> Coordinate:
        return sample_coordinate(profile, self._rng)

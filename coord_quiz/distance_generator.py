from __future__ import annotations

import logging
import math
from decimal import ROUND_HALF_UP, Decimal

from .models import Coordinate, DifficultyProfile, DistanceProblem
from .point_generator import MAX_ATTEMPTS, format_point
from .sampler import CoordinateSampler, RandomSource

logger = logging.getLogger(__name__)

# One-unit moves tried, in order, when the pair never separates.
_NUDGES = ((1, 0), (-1, 0), (0, 1), (0, -1))


def round_half_away(value: float, decimals: int = 2) -> float:
    """Round to `decimals` places with halves going away from zero (2.345 -> 2.35)."""
    quantum = Decimal(1).scaleb(-decimals)
    return float(Decimal(repr(value)).quantize(quantum, rounding=ROUND_HALF_UP))


def euclidean_distance(x1: int, y1: int, x2: int, y2: int) -> float:
    return round_half_away(math.sqrt((x2 - x1) ** 2 + (y2 - y1) ** 2), 2)


class DistanceGenerator:
    """Generate two-point distance problems."""

    def __init__(self, seed: int | None = None, rng: RandomSource | None = None) -> None:
        self._sampler = CoordinateSampler(seed=seed, rng=rng)

    def _distinct_pair(self, profile: DifficultyProfile) -> tuple[Coordinate, Coordinate]:
        for _ in range(MAX_ATTEMPTS):
            p1 = self._sampler.sample(profile)
            p2 = self._sampler.sample(profile)
            if p1 != p2:
                return p1, p2

        logger.warning(
            "no distinct point pair after %d draws for %s; nudging second point",
            MAX_ATTEMPTS,
            profile,
        )
        for dx, dy in _NUDGES:
            x2, y2 = p2.x + dx, p2.y + dy
            lo, hi = profile.min_coord, profile.max_coord
            if lo <= x2 <= hi and lo <= y2 <= hi and (x2, y2) != (0, 0):
                return p1, Coordinate(x=x2, y=y2)
        raise ValueError(f"profile {profile} has room for only one point besides the origin")

    def generate(self, profile: DifficultyProfile) -> DistanceProblem:
        p1, p2 = self._distinct_pair(profile)
        return DistanceProblem(
            x1=p1.x,
            y1=p1.y,
            x2=p2.x,
            y2=p2.y,
            distance=euclidean_distance(p1.x, p1.y, p2.x, p2.y),
            range=profile.range,
            display=f"{format_point(p1.x, p1.y)} to {format_point(p2.x, p2.y)}",
        )

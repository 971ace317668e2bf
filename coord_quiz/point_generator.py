from __future__ import annotations

import logging

from .models import (
    Coordinate,
    DifficultyProfile,
    FindQuadrantProblem,
    IdentifyPointProblem,
    PlotPointProblem,
)
from .sampler import CoordinateSampler, RandomSource, classify_quadrant

logger = logging.getLogger(__name__)

# Upper bound on rejection-sampling draws per problem.
MAX_ATTEMPTS = 1000


def format_point(x: int, y: int) -> str:
    return f"({x}, {y})"


class PointGenerator:
    """Generate single-point problems: plot, identify and find-the-quadrant."""

    def __init__(self, seed: int | None = None, rng: RandomSource | None = None) -> None:
        self._sampler = CoordinateSampler(seed=seed, rng=rng)
        self._rng = self._sampler.rng

    def _off_axis_point(self, profile: DifficultyProfile) -> Coordinate:
        for _ in range(MAX_ATTEMPTS):
            point = self._sampler.sample(profile)
            if point.x != 0 and point.y != 0:
                return point

        # Force whichever component sits on an axis off it.
        logger.warning(
            "no off-axis point after %d draws for %s; forcing nonzero components",
            MAX_ATTEMPTS,
            profile,
        )
        x, y = point.x, point.y
        if x == 0:
            x = self._rng.randint(1, profile.max_coord)
        if y == 0:
            y = self._rng.randint(1, profile.max_coord)
        return Coordinate(x=x, y=y)

    def generate_plot_point(self, profile: DifficultyProfile) -> PlotPointProblem:
        point = self._sampler.sample(profile)
        return PlotPointProblem(
            target_x=point.x,
            target_y=point.y,
            range=profile.range,
            display=format_point(point.x, point.y),
        )

    def generate_identify_point(self, profile: DifficultyProfile) -> IdentifyPointProblem:
        point = self._sampler.sample(profile)
        return IdentifyPointProblem(
            point_x=point.x,
            point_y=point.y,
            range=profile.range,
            display=format_point(point.x, point.y),
        )

    def generate_find_quadrant(self, profile: DifficultyProfile) -> FindQuadrantProblem:
        point = self._off_axis_point(profile)
        quadrant = classify_quadrant(point.x, point.y)
        return FindQuadrantProblem(
            point_x=point.x,
            point_y=point.y,
            quadrant=quadrant,
            range=profile.range,
            display=format_point(point.x, point.y),
        )

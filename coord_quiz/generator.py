from __future__ import annotations

import logging
from typing import Iterable, List, Sequence

from .distance_generator import DistanceGenerator
from .evaluator import grade_batch
from .models import BatchResult, Difficulty, Problem, ProblemKind, UserAnswer
from .point_generator import PointGenerator
from .sampler import get_profile

logger = logging.getLogger(__name__)


class CoordinateQuizGenerator:
    """
    High-level API to generate coordinate-plane problems.

    Usage:

    ```python
    gen = CoordinateQuizGenerator(seed=42)
    problem = gen.generate_one(kind=ProblemKind.DISTANCE, difficulty=Difficulty.HARD)
    # problem.display  -> "(3, -4) to (-2, 7)"
    # problem.distance -> 12.08
    ```
    """

    def __init__(self, seed: int | None = None) -> None:
        # use different seeds derived from base seed so results are reproducible
        point_seed = None if seed is None else seed + 1
        distance_seed = None if seed is None else seed + 2

        self._points = PointGenerator(seed=point_seed)
        self._distances = DistanceGenerator(seed=distance_seed)

    def generate_one(self, kind: ProblemKind | str, difficulty: Difficulty | str) -> Problem:
        profile = get_profile(difficulty)
        try:
            kind = ProblemKind(kind)
        except ValueError:
            raise ValueError(f"Unsupported problem kind: {kind}") from None

        if kind == ProblemKind.PLOT_POINT:
            return self._points.generate_plot_point(profile)
        if kind == ProblemKind.IDENTIFY_POINT:
            return self._points.generate_identify_point(profile)
        if kind == ProblemKind.FIND_QUADRANT:
            return self._points.generate_find_quadrant(profile)
        return self._distances.generate(profile)

    def generate_batch(
        self,
        kind: ProblemKind | str,
        difficulty: Difficulty | str,
        n: int,
    ) -> List[Problem]:
        """
        Generate `n` independent problems of one kind.

        Duplicates are allowed; each problem is sampled on its own.
        """
        if n <= 0:
            return []
        logger.debug("generating %d %s problems at %s", n, kind, difficulty)
        return [self.generate_one(kind=kind, difficulty=difficulty) for _ in range(n)]

    def generate_mixed(
        self,
        plan: Iterable[tuple[ProblemKind | str, Difficulty | str, int]],
    ) -> List[Problem]:
        """
        Generate a mixed list of problems.

        Example:
            plan = [
                (ProblemKind.PLOT_POINT, Difficulty.EASY, 3),
                (ProblemKind.DISTANCE, Difficulty.HARD, 2),
            ]
        """
        problems: List[Problem] = []
        for kind, difficulty, n in plan:
            problems.extend(self.generate_batch(kind, difficulty, n))
        return problems


class QuizSession:
    """
    One learner's working set: a mode, a difficulty and the current batch.

    Generating replaces the whole batch; answers for the old batch are
    dropped with it. Changing mode or difficulty regenerates immediately.
    """

    def __init__(
        self,
        mode: ProblemKind | str = ProblemKind.PLOT_POINT,
        difficulty: Difficulty | str = Difficulty.MEDIUM,
        count: int = 6,
        seed: int | None = None,
    ) -> None:
        if count <= 0:
            raise ValueError(f"count must be positive, got {count}")
        self.mode = ProblemKind(mode)
        self.difficulty = Difficulty(difficulty)
        self.count = count
        self._generator = CoordinateQuizGenerator(seed=seed)
        self._problems: List[Problem] = []

    @property
    def problems(self) -> Sequence[Problem]:
        return tuple(self._problems)

    def generate(self) -> Sequence[Problem]:
        self._problems = self._generator.generate_batch(self.mode, self.difficulty, self.count)
        return self.problems

    def set_mode(self, mode: ProblemKind | str) -> Sequence[Problem]:
        self.mode = ProblemKind(mode)
        return self.generate()

    def set_difficulty(self, difficulty: Difficulty | str) -> Sequence[Problem]:
        self.difficulty = Difficulty(difficulty)
        return self.generate()

    def grade(self, answers: Iterable[UserAnswer | None]) -> BatchResult:
        return grade_batch(self._problems, answers)

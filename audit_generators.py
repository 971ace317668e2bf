"""
Audit the rule-based problem generators.

This script:
- generates a large seeded sample for every difficulty
- reports the quadrant distribution of find-quadrant problems
- reports how often plot/identify points land on an axis
- reports the distance range and any invariant violations.

Usage:
    python audit_generators.py
"""

from __future__ import annotations

from collections import Counter
from typing import Dict

from coord_quiz import CoordinateQuizGenerator, Difficulty, ProblemKind, Quadrant
from coord_quiz.distance_generator import euclidean_distance


def build_report(n_samples: int = 2000, seed: int = 999) -> Dict[str, dict]:
    """Per-difficulty counts; `violations` must stay at zero."""
    gen = CoordinateQuizGenerator(seed=seed)
    report: Dict[str, dict] = {}

    for difficulty in Difficulty:
        quadrants: Counter[str] = Counter()
        axis_points = 0
        violations = 0
        distances: list[float] = []

        for p in gen.generate_batch(ProblemKind.PLOT_POINT, difficulty, n_samples):
            if (p.target_x, p.target_y) == (0, 0):
                violations += 1
            if p.target_x == 0 or p.target_y == 0:
                axis_points += 1

        for p in gen.generate_batch(ProblemKind.FIND_QUADRANT, difficulty, n_samples):
            quadrants[p.quadrant.value] += 1
            if p.quadrant is Quadrant.AXIS:
                violations += 1

        for p in gen.generate_batch(ProblemKind.DISTANCE, difficulty, n_samples):
            distances.append(p.distance)
            if (p.x1, p.y1) == (p.x2, p.y2):
                violations += 1
            if p.distance != euclidean_distance(p.x1, p.y1, p.x2, p.y2):
                violations += 1

        report[difficulty.value] = {
            "quadrants": dict(quadrants),
            "axis_share": axis_points / n_samples,
            "min_distance": min(distances),
            "max_distance": max(distances),
            "violations": violations,
        }

    return report


def print_report(n_samples: int = 2000) -> None:
    print(f"[audit] generating {n_samples} samples per mode and difficulty...")
    report = build_report(n_samples=n_samples)
    labels = [q.value for q in Quadrant if q is not Quadrant.AXIS]
    for difficulty, stats in report.items():
        print(f"[audit:{difficulty}] points on an axis: {stats['axis_share']:.3f}")
        print(
            f"[audit:{difficulty}] distance range:    "
            f"{stats['min_distance']:.2f} .. {stats['max_distance']:.2f}"
        )
        header = "      " + " ".join(f"{l:>5}" for l in labels)
        print(f"[audit:{difficulty}] quadrant counts:")
        print(header)
        row_str = " ".join(f"{stats['quadrants'].get(l, 0):5d}" for l in labels)
        print(f"       {row_str}")
        print(f"[audit:{difficulty}] invariant violations: {stats['violations']}")
        print()


if __name__ == "__main__":
    print_report()

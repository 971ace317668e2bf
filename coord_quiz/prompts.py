from __future__ import annotations

from .models import (
    DistanceProblem,
    FindQuadrantProblem,
    IdentifyPointProblem,
    PlotPointProblem,
    Problem,
    Quadrant,
)
from .sampler import classify_quadrant


# ---------- Feedback messages ----------

PLOT_MISSING = "Click on the grid to plot your answer!"
COORDINATES_MISSING = "Enter both x and y values"
COORDINATES_UNPARSABLE = "Coordinates must be numbers"
QUADRANT_MISSING = "Select a quadrant!"
QUADRANT_UNKNOWN = "Choose one of the quadrants I, II, III or IV"
NUMBER_MISSING = "Enter a number"
NUMBER_UNPARSABLE = "That is not a number"


def prompt_text(problem: Problem) -> str:
    """Question shown above a problem. Identify-point never reveals the point."""
    if isinstance(problem, PlotPointProblem):
        return f"Click on the grid to plot the point {problem.display}"
    if isinstance(problem, IdentifyPointProblem):
        return "What are the coordinates of the point shown on the grid?"
    if isinstance(problem, FindQuadrantProblem):
        return f"Which quadrant is the point {problem.display} in?"
    if isinstance(problem, DistanceProblem):
        return f"Find the distance between {problem.display}"
    return "Solve the problem"


def hint_text(problem: Problem) -> str:
    if isinstance(problem, PlotPointProblem):
        x_dir = "right" if problem.target_x >= 0 else "left"
        y_dir = "up" if problem.target_y >= 0 else "down"
        return (
            f"Start at origin (0,0). Go {x_dir} {abs(problem.target_x)}, "
            f"then {y_dir} {abs(problem.target_y)}."
        )

    if isinstance(problem, IdentifyPointProblem):
        quadrant = classify_quadrant(problem.point_x, problem.point_y)
        if quadrant is Quadrant.AXIS:
            return "The point is on an axis. Read coordinates from the grid."
        return f"The point is in Quadrant {quadrant.value}. Count units from each axis."

    if isinstance(problem, FindQuadrantProblem):
        x_sign = "+" if problem.point_x > 0 else "−"
        y_sign = "+" if problem.point_y > 0 else "−"
        return f"x is {x_sign} and y is {y_sign}. Which quadrant has ({x_sign}, {y_sign})?"

    if isinstance(problem, DistanceProblem):
        dx = problem.x2 - problem.x1
        dy = problem.y2 - problem.y1
        return f"d = √(({dx})² + ({dy})²) = √({dx * dx} + {dy * dy}) = √{dx * dx + dy * dy}"

    raise ValueError(f"Unsupported problem: {problem!r}")


def correct_feedback(problem: Problem) -> str:
    if isinstance(problem, PlotPointProblem):
        return "Perfect placement!"
    if isinstance(problem, IdentifyPointProblem):
        return f"Correct! The point is {problem.canonical_answer}"
    if isinstance(problem, FindQuadrantProblem):
        return f"Correct! {problem.display} is in Quadrant {problem.quadrant.value}"
    return f"Correct! Distance ≈ {problem.canonical_answer}"


def wrong_feedback(problem: Problem, submitted: str | None = None) -> str:
    if isinstance(problem, PlotPointProblem):
        return f"Not quite. You plotted {submitted}, the answer is {problem.canonical_answer}"
    if isinstance(problem, IdentifyPointProblem):
        return f"Not quite. The answer is {problem.canonical_answer}"
    if isinstance(problem, FindQuadrantProblem):
        return f"Not quite. The answer is Quadrant {problem.quadrant.value}"
    return f"Not quite. The distance is {problem.canonical_answer}"


def summary_text(correct: int, total: int) -> str:
    if correct == total:
        return f"Perfect! All {total} answers are correct!"
    if correct > 0:
        return f"{correct}/{total} correct. Keep going!"
    return "Not quite. Review the hints and try again!"

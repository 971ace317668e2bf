from __future__ import annotations

import math
from typing import Iterable, List, Optional, Sequence, Tuple

from .models import (
    AnswerError,
    BatchResult,
    CoordinateAnswer,
    DistanceAnswer,
    DistanceProblem,
    FindQuadrantProblem,
    IdentifyPointProblem,
    PlotAnswer,
    PlotPointProblem,
    Problem,
    Quadrant,
    QuadrantAnswer,
    UserAnswer,
    Verdict,
)
from .prompts import (
    COORDINATES_MISSING,
    COORDINATES_UNPARSABLE,
    NUMBER_MISSING,
    NUMBER_UNPARSABLE,
    PLOT_MISSING,
    QUADRANT_MISSING,
    QUADRANT_UNKNOWN,
    correct_feedback,
    summary_text,
    wrong_feedback,
)

# General-purpose closeness used for numeric comparisons.
DEFAULT_TOLERANCE = 0.01
# Distance answers only: ten times DEFAULT_TOLERANCE. Keep the two separate.
DISTANCE_TOLERANCE = 0.1

_SELECTABLE_QUADRANTS = {Quadrant.I, Quadrant.II, Quadrant.III, Quadrant.IV}


def approx_equal(a: float, b: float, tolerance: float = DEFAULT_TOLERANCE) -> bool:
    return abs(a - b) < tolerance


def parse_number(text: str | None) -> Tuple[Optional[float], Optional[AnswerError]]:
    """
    Parse a free-text numeric answer.

    Returns (value, None) on success, (None, MISSING) for empty input and
    (None, UNPARSABLE) for anything that is not a finite number.
    """
    if text is None:
        return None, AnswerError.MISSING
    stripped = str(text).strip()
    if not stripped:
        return None, AnswerError.MISSING
    try:
        value = float(stripped)
    except ValueError:
        return None, AnswerError.UNPARSABLE
    if not math.isfinite(value):
        return None, AnswerError.UNPARSABLE
    return value, None


def _format_number(value: float) -> str:
    if value == int(value):
        return str(int(value))
    return str(value)


# ---------- Per-kind evaluators ----------


def evaluate_plot_point(problem: PlotPointProblem, answer: PlotAnswer) -> Verdict:
    canonical = problem.canonical_answer
    if answer.x is None or answer.y is None:
        return Verdict(
            correct=False,
            canonical_answer=canonical,
            error=AnswerError.MISSING,
            feedback=PLOT_MISSING,
        )

    if answer.x == problem.target_x and answer.y == problem.target_y:
        return Verdict(correct=True, canonical_answer=canonical, feedback=correct_feedback(problem))

    submitted = f"({answer.x}, {answer.y})"
    return Verdict(
        correct=False,
        canonical_answer=canonical,
        error=AnswerError.WRONG,
        feedback=wrong_feedback(problem, submitted),
    )


def evaluate_identify_point(problem: IdentifyPointProblem, answer: CoordinateAnswer) -> Verdict:
    canonical = problem.canonical_answer
    ux, x_err = parse_number(answer.x_text)
    uy, y_err = parse_number(answer.y_text)

    if x_err or y_err:
        errors = {"x": x_err, "y": y_err}
        missing = [axis for axis, err in errors.items() if err is AnswerError.MISSING]
        unparsable = [axis for axis, err in errors.items() if err is AnswerError.UNPARSABLE]
        error = AnswerError.MISSING if missing else AnswerError.UNPARSABLE
        return Verdict(
            correct=False,
            canonical_answer=canonical,
            error=error,
            feedback=COORDINATES_MISSING if missing else COORDINATES_UNPARSABLE,
            marks={
                "x": None if x_err else ux == problem.point_x,
                "y": None if y_err else uy == problem.point_y,
            },
            missing_fields=missing,
            unparsable_fields=unparsable,
        )

    # 3.0 == 3, so float parsing still matches integer targets exactly.
    x_correct = ux == problem.point_x
    y_correct = uy == problem.point_y
    marks = {"x": x_correct, "y": y_correct}
    if x_correct and y_correct:
        return Verdict(
            correct=True,
            canonical_answer=canonical,
            feedback=correct_feedback(problem),
            marks=marks,
        )
    return Verdict(
        correct=False,
        canonical_answer=canonical,
        error=AnswerError.WRONG,
        feedback=wrong_feedback(problem),
        marks=marks,
    )


def evaluate_find_quadrant(problem: FindQuadrantProblem, answer: QuadrantAnswer) -> Verdict:
    canonical = problem.canonical_answer
    selection = answer.selection
    if selection is None or (isinstance(selection, str) and not selection.strip()):
        return Verdict(
            correct=False,
            canonical_answer=canonical,
            error=AnswerError.MISSING,
            feedback=QUADRANT_MISSING,
        )

    try:
        chosen = Quadrant(selection.strip() if isinstance(selection, str) else selection)
    except ValueError:
        chosen = None
    if chosen not in _SELECTABLE_QUADRANTS:
        return Verdict(
            correct=False,
            canonical_answer=canonical,
            error=AnswerError.UNPARSABLE,
            feedback=QUADRANT_UNKNOWN,
        )

    if chosen == problem.quadrant:
        return Verdict(correct=True, canonical_answer=canonical, feedback=correct_feedback(problem))
    return Verdict(
        correct=False,
        canonical_answer=canonical,
        error=AnswerError.WRONG,
        feedback=wrong_feedback(problem),
    )


def evaluate_distance(problem: DistanceProblem, answer: DistanceAnswer) -> Verdict:
    canonical = problem.canonical_answer
    value, err = parse_number(answer.text)
    if err is not None:
        return Verdict(
            correct=False,
            canonical_answer=canonical,
            error=err,
            feedback=NUMBER_MISSING if err is AnswerError.MISSING else NUMBER_UNPARSABLE,
        )

    # Compare against the distance stored at generation time.
    if approx_equal(value, problem.distance, DISTANCE_TOLERANCE):
        return Verdict(correct=True, canonical_answer=canonical, feedback=correct_feedback(problem))
    return Verdict(
        correct=False,
        canonical_answer=canonical,
        error=AnswerError.WRONG,
        feedback=wrong_feedback(problem, _format_number(value)),
    )


_EVALUATORS = (
    (PlotPointProblem, PlotAnswer, evaluate_plot_point),
    (IdentifyPointProblem, CoordinateAnswer, evaluate_identify_point),
    (FindQuadrantProblem, QuadrantAnswer, evaluate_find_quadrant),
    (DistanceProblem, DistanceAnswer, evaluate_distance),
)


def empty_answer_for(problem: Problem) -> UserAnswer:
    """The answer a learner who touched nothing would submit."""
    for problem_cls, answer_cls, _ in _EVALUATORS:
        if isinstance(problem, problem_cls):
            return answer_cls()
    raise ValueError(f"Unsupported problem: {problem!r}")


def evaluate(problem: Problem, answer: UserAnswer | None) -> Verdict:
    """
    Grade one problem. `None` stands for "no answer given".

    Raises TypeError when the answer shape does not belong to the problem kind.
    """
    if answer is None:
        answer = empty_answer_for(problem)
    for problem_cls, answer_cls, fn in _EVALUATORS:
        if isinstance(problem, problem_cls):
            if not isinstance(answer, answer_cls):
                raise TypeError(
                    f"{problem.kind.value} expects {answer_cls.__name__}, got {type(answer).__name__}"
                )
            return fn(problem, answer)
    raise ValueError(f"Unsupported problem: {problem!r}")


def grade_batch(
    problems: Sequence[Problem],
    answers: Iterable[UserAnswer | None],
) -> BatchResult:
    """
    Grade every problem independently against its answer.

    Answers pair up with problems by position; problems past the end of
    `answers` are graded as unanswered.
    """
    answer_list = list(answers)
    verdicts: List[Verdict] = []
    for idx, problem in enumerate(problems):
        answer = answer_list[idx] if idx < len(answer_list) else None
        verdicts.append(evaluate(problem, answer))

    correct = sum(1 for v in verdicts if v.correct)
    total = len(verdicts)
    return BatchResult(
        correct=correct,
        total=total,
        verdicts=verdicts,
        summary=summary_text(correct, total),
    )

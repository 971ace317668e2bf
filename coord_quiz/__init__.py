from .models import (
    AnswerError,
    BatchResult,
    CoordinateAnswer,
    Difficulty,
    DistanceAnswer,
    PlotAnswer,
    ProblemKind,
    Quadrant,
    QuadrantAnswer,
    Verdict,
    problem_from_record,
    problem_to_record,
)
from .evaluator import evaluate, grade_batch
from .generator import CoordinateQuizGenerator, QuizSession

__all__ = [
    "AnswerError",
    "BatchResult",
    "CoordinateAnswer",
    "CoordinateQuizGenerator",
    "Difficulty",
    "DistanceAnswer",
    "PlotAnswer",
    "ProblemKind",
    "Quadrant",
    "QuadrantAnswer",
    "QuizSession",
    "Verdict",
    "evaluate",
    "grade_batch",
    "problem_from_record",
    "problem_to_record",
]

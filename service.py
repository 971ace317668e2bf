from __future__ import annotations

import logging
import os
from typing import Any, Dict, List, Optional

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, Field

from coord_quiz import (
    CoordinateAnswer,
    CoordinateQuizGenerator,
    Difficulty,
    DistanceAnswer,
    PlotAnswer,
    ProblemKind,
    QuadrantAnswer,
    grade_batch,
    problem_from_record,
    problem_to_record,
)
from coord_quiz.prompts import hint_text, prompt_text

DEFAULT_COUNT = int(os.getenv("COORD_QUIZ_DEFAULT_COUNT", "6"))
MAX_COUNT = int(os.getenv("COORD_QUIZ_MAX_COUNT", "50"))
LOG_LEVEL = os.getenv("COORD_QUIZ_LOG_LEVEL", "INFO")

logger = logging.getLogger("coord-quiz")
logging.basicConfig(level=LOG_LEVEL)

app = FastAPI(title="Coordinate Plane Practice Service")
generator = CoordinateQuizGenerator()


class GenerateRequest(BaseModel):
    mode: ProblemKind
    difficulty: Difficulty = Difficulty.MEDIUM
    n: int = Field(default=DEFAULT_COUNT, ge=1, le=MAX_COUNT)
    # fixed seed gives a reproducible batch; omitted uses the shared generator
    seed: Optional[int] = None


class ProblemOut(BaseModel):
    record: Dict[str, Any]
    prompt: str


class GenerateResponse(BaseModel):
    mode: str
    difficulty: str
    problems: List[ProblemOut]


class AnswerIn(BaseModel):
    """Union of every answer field; each mode reads only its own."""

    plot_x: Optional[int] = None
    plot_y: Optional[int] = None
    x: Optional[str] = None
    y: Optional[str] = None
    quadrant: Optional[str] = None
    distance: Optional[str] = None


class GradeItem(BaseModel):
    problem: Dict[str, Any]
    answer: AnswerIn = Field(default_factory=AnswerIn)


class GradeRequest(BaseModel):
    items: List[GradeItem]


class VerdictOut(BaseModel):
    correct: bool
    canonical_answer: str
    error: Optional[str] = None
    feedback: str = ""
    marks: Dict[str, Optional[bool]] = Field(default_factory=dict)
    missing_fields: List[str] = Field(default_factory=list)
    unparsable_fields: List[str] = Field(default_factory=list)


class GradeResponse(BaseModel):
    total: int
    correct: int
    score: float
    summary: str
    results: List[VerdictOut]


class HintRequest(BaseModel):
    problem: Dict[str, Any]


def _load_problem(record: Dict[str, Any]):
    try:
        return problem_from_record(record)
    except (ValueError, TypeError) as e:
        raise HTTPException(status_code=422, detail=f"invalid problem record: {e}")


def _to_user_answer(kind: ProblemKind, answer: AnswerIn):
    if kind == ProblemKind.PLOT_POINT:
        return PlotAnswer(x=answer.plot_x, y=answer.plot_y)
    if kind == ProblemKind.IDENTIFY_POINT:
        return CoordinateAnswer(x_text=answer.x, y_text=answer.y)
    if kind == ProblemKind.FIND_QUADRANT:
        return QuadrantAnswer(selection=answer.quadrant)
    return DistanceAnswer(text=answer.distance)


@app.post("/generate", response_model=GenerateResponse)
def generate_problems(body: GenerateRequest) -> GenerateResponse:
    gen = generator if body.seed is None else CoordinateQuizGenerator(seed=body.seed)
    problems = gen.generate_batch(kind=body.mode, difficulty=body.difficulty, n=body.n)
    logger.info("generated %d %s problems (%s)", len(problems), body.mode.value, body.difficulty.value)
    return GenerateResponse(
        mode=body.mode.value,
        difficulty=body.difficulty.value,
        problems=[ProblemOut(record=problem_to_record(p), prompt=prompt_text(p)) for p in problems],
    )


@app.post("/grade", response_model=GradeResponse)
def grade_answers(body: GradeRequest) -> GradeResponse:
    problems = [_load_problem(item.problem) for item in body.items]
    answers = [_to_user_answer(p.kind, item.answer) for p, item in zip(problems, body.items)]
    result = grade_batch(problems, answers)
    return GradeResponse(
        total=result.total,
        correct=result.correct,
        score=result.score,
        summary=result.summary,
        results=[
            VerdictOut(
                correct=v.correct,
                canonical_answer=v.canonical_answer,
                error=v.error.value if v.error else None,
                feedback=v.feedback,
                marks=v.marks,
                missing_fields=v.missing_fields,
                unparsable_fields=v.unparsable_fields,
            )
            for v in result.verdicts
        ],
    )


@app.post("/hint")
def get_hint(body: HintRequest) -> dict:
    problem = _load_problem(body.problem)
    return {"hint": hint_text(problem)}


@app.get("/health")
def health() -> dict:
    return {"status": "ok"}

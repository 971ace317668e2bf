from __future__ import annotations

from dataclasses import asdict, dataclass, field, fields
from enum import Enum
from typing import Any, Dict, Union


class Difficulty(str, Enum):
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"


class ProblemKind(str, Enum):
    PLOT_POINT = "plot-point"
    IDENTIFY_POINT = "identify-point"
    FIND_QUADRANT = "find-quadrant"
    DISTANCE = "distance"


class Quadrant(str, Enum):
    I = "I"
    II = "II"
    III = "III"
    IV = "IV"
    AXIS = "Axis"


class AnswerError(str, Enum):
    MISSING = "missing"
    UNPARSABLE = "unparsable"
    WRONG = "wrong"


@dataclass(frozen=True)
class DifficultyProfile:
    """
    Coordinate bounds for one difficulty tier.

    - `range`: half-width of the displayed grid (axes run from -range to range)
    - `min_coord` / `max_coord`: inclusive bounds for generated coordinates
    """

    range: int
    min_coord: int
    max_coord: int

    def __post_init__(self) -> None:
        if self.range <= 0:
            raise ValueError(f"range must be positive, got {self.range}")
        if self.min_coord > self.max_coord:
            raise ValueError(
                f"min_coord ({self.min_coord}) is greater than max_coord ({self.max_coord})"
            )
        if self.range < max(abs(self.min_coord), abs(self.max_coord)):
            raise ValueError(f"range {self.range} does not cover [{self.min_coord}, {self.max_coord}]")


@dataclass(frozen=True)
class Coordinate:
    x: int
    y: int


# ---------- Problems ----------


@dataclass(frozen=True)
class PlotPointProblem:
    """Learner clicks the grid to place (target_x, target_y)."""

    target_x: int
    target_y: int
    range: int
    display: str
    kind: ProblemKind = field(default=ProblemKind.PLOT_POINT, init=False)

    @property
    def canonical_answer(self) -> str:
        return f"({self.target_x}, {self.target_y})"


@dataclass(frozen=True)
class IdentifyPointProblem:
    """A point is pre-drawn; the learner types its coordinates."""

    point_x: int
    point_y: int
    range: int
    display: str
    kind: ProblemKind = field(default=ProblemKind.IDENTIFY_POINT, init=False)

    @property
    def canonical_answer(self) -> str:
        return f"({self.point_x}, {self.point_y})"


@dataclass(frozen=True)
class FindQuadrantProblem:
    point_x: int
    point_y: int
    quadrant: Quadrant
    range: int
    display: str
    kind: ProblemKind = field(default=ProblemKind.FIND_QUADRANT, init=False)

    @property
    def canonical_answer(self) -> str:
        return self.quadrant.value


@dataclass(frozen=True)
class DistanceProblem:
    x1: int
    y1: int
    x2: int
    y2: int
    distance: float
    range: int
    display: str
    kind: ProblemKind = field(default=ProblemKind.DISTANCE, init=False)

    @property
    def canonical_answer(self) -> str:
        return f"{self.distance:g}"


Problem = Union[PlotPointProblem, IdentifyPointProblem, FindQuadrantProblem, DistanceProblem]

_PROBLEM_CLASSES: Dict[ProblemKind, type] = {
    ProblemKind.PLOT_POINT: PlotPointProblem,
    ProblemKind.IDENTIFY_POINT: IdentifyPointProblem,
    ProblemKind.FIND_QUADRANT: FindQuadrantProblem,
    ProblemKind.DISTANCE: DistanceProblem,
}


def problem_to_record(problem: Problem) -> Dict[str, Any]:
    """Flatten a problem into a dict of primitives (enums become their values)."""
    record = asdict(problem)
    for key, value in record.items():
        if isinstance(value, Enum):
            record[key] = value.value
    return record


def problem_from_record(record: Dict[str, Any]) -> Problem:
    """
    Rebuild a problem from `problem_to_record` output.

    Raises ValueError for an unknown kind, missing or mistyped fields, an
    on-axis find-quadrant point or coincident distance points.
    """
    try:
        kind = ProblemKind(record.get("kind"))
    except ValueError:
        raise ValueError(f"Unsupported problem kind: {record.get('kind')!r}") from None

    cls = _PROBLEM_CLASSES[kind]
    names = [f.name for f in fields(cls) if f.init]
    missing = [name for name in names if name not in record]
    if missing:
        raise ValueError(f"{kind.value} record is missing fields: {missing}")

    kwargs = {name: record[name] for name in names}
    for name, value in kwargs.items():
        if name in ("display", "quadrant"):
            if not isinstance(value, str):
                raise ValueError(f"{kind.value} field {name!r} must be a string, got {value!r}")
        elif name == "distance":
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise ValueError(f"{kind.value} field 'distance' must be a number, got {value!r}")
        elif isinstance(value, bool) or not isinstance(value, int):
            raise ValueError(f"{kind.value} field {name!r} must be an integer, got {value!r}")

    if kwargs["range"] <= 0:
        raise ValueError(f"{kind.value} range must be positive, got {kwargs['range']}")

    if cls is FindQuadrantProblem:
        try:
            kwargs["quadrant"] = Quadrant(kwargs["quadrant"])
        except ValueError:
            raise ValueError(f"Unknown quadrant: {kwargs['quadrant']!r}") from None
        if kwargs["quadrant"] is Quadrant.AXIS or kwargs["point_x"] == 0 or kwargs["point_y"] == 0:
            raise ValueError("find-quadrant point must lie inside a quadrant")
    if cls is DistanceProblem:
        kwargs["distance"] = float(kwargs["distance"])
        if (kwargs["x1"], kwargs["y1"]) == (kwargs["x2"], kwargs["y2"]):
            raise ValueError("distance record has coincident points")
    return cls(**kwargs)


# ---------- User answers ----------


@dataclass(frozen=True)
class PlotAnswer:
    """A grid click, already snapped to integers and clamped to the grid."""

    x: int | None = None
    y: int | None = None

    @classmethod
    def from_click(cls, transform, cx: float, cy: float) -> "PlotAnswer":
        point = transform.snap(cx, cy)
        return cls(x=point.x, y=point.y)


@dataclass(frozen=True)
class CoordinateAnswer:
    x_text: str | None = None
    y_text: str | None = None


@dataclass(frozen=True)
class QuadrantAnswer:
    selection: Quadrant | str | None = None


@dataclass(frozen=True)
class DistanceAnswer:
    text: str | None = None


UserAnswer = Union[PlotAnswer, CoordinateAnswer, QuadrantAnswer, DistanceAnswer]


# ---------- Grading results ----------


@dataclass
class Verdict:
    """
    Outcome of grading one problem.

    - `correct`: overall pass/fail
    - `canonical_answer`: the stored answer in display form
    - `error`: why it failed (None when correct)
    - `feedback`: text the UI shows under the problem
    - `marks`: per-field marks (identify-point only); None means "not parsed"
    """

    correct: bool
    canonical_answer: str
    error: AnswerError | None = None
    feedback: str = ""
    marks: Dict[str, bool | None] = field(default_factory=dict)
    missing_fields: list[str] = field(default_factory=list)
    unparsable_fields: list[str] = field(default_factory=list)


@dataclass
class BatchResult:
    correct: int
    total: int
    verdicts: list[Verdict]
    summary: str

    @property
    def score(self) -> float:
        if self.total == 0:
            return 0.0
        return self.correct / self.total

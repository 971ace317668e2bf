import pytest

from coord_quiz import (
    AnswerError,
    CoordinateAnswer,
    DistanceAnswer,
    PlotAnswer,
    Quadrant,
    QuadrantAnswer,
    evaluate,
    grade_batch,
)
from coord_quiz.evaluator import DEFAULT_TOLERANCE, DISTANCE_TOLERANCE, approx_equal, parse_number
from coord_quiz.models import (
    DistanceProblem,
    FindQuadrantProblem,
    IdentifyPointProblem,
    PlotPointProblem,
)

PLOT = PlotPointProblem(target_x=2, target_y=-3, range=6, display="(2, -3)")
IDENTIFY = IdentifyPointProblem(point_x=3, point_y=-2, range=6, display="(3, -2)")
QUADRANT = FindQuadrantProblem(point_x=-4, point_y=1, quadrant=Quadrant.II, range=6, display="(-4, 1)")
DISTANCE = DistanceProblem(x1=0, y1=0, x2=3, y2=4, distance=5.0, range=6, display="(0, 0) to (3, 4)")


# ---------- parse_number ----------


def test_parse_number():
    assert parse_number(" 3 ") == (3.0, None)
    assert parse_number("-2.5") == (-2.5, None)
    assert parse_number("") == (None, AnswerError.MISSING)
    assert parse_number("   ") == (None, AnswerError.MISSING)
    assert parse_number(None) == (None, AnswerError.MISSING)
    assert parse_number("abc") == (None, AnswerError.UNPARSABLE)
    assert parse_number("nan") == (None, AnswerError.UNPARSABLE)


def test_tolerances_stay_distinct():
    assert DEFAULT_TOLERANCE == 0.01
    assert DISTANCE_TOLERANCE == 0.1
    assert approx_equal(1.0, 1.005)
    assert not approx_equal(1.0, 1.05)


# ---------- plot-point ----------


def test_plot_point_exact_match():
    v = evaluate(PLOT, PlotAnswer(x=2, y=-3))
    assert v.correct is True
    assert v.error is None
    assert v.canonical_answer == "(2, -3)"


def test_plot_point_wrong():
    v = evaluate(PLOT, PlotAnswer(x=-3, y=2))
    assert v.correct is False
    assert v.error is AnswerError.WRONG
    assert v.canonical_answer == "(2, -3)"
    assert "(-3, 2)" in v.feedback


def test_plot_point_no_click():
    v = evaluate(PLOT, PlotAnswer())
    assert v.correct is False
    assert v.error is AnswerError.MISSING
    assert "Click on the grid" in v.feedback


# ---------- identify-point ----------


def test_identify_both_correct():
    v = evaluate(IDENTIFY, CoordinateAnswer("3", "-2"))
    assert v.correct is True
    assert v.marks == {"x": True, "y": True}


def test_identify_float_text_matches_integer():
    v = evaluate(IDENTIFY, CoordinateAnswer("3.0", " -2 "))
    assert v.correct is True


def test_identify_y_wrong():
    v = evaluate(IDENTIFY, CoordinateAnswer("3", "2"))
    assert v.correct is False
    assert v.error is AnswerError.WRONG
    assert v.marks == {"x": True, "y": False}
    assert v.canonical_answer == "(3, -2)"


def test_identify_missing_x():
    v = evaluate(IDENTIFY, CoordinateAnswer("", "-2"))
    assert v.correct is False
    assert v.error is AnswerError.MISSING
    assert v.missing_fields == ["x"]
    assert v.unparsable_fields == []
    assert v.marks["x"] is None


def test_identify_unparsable_both():
    v = evaluate(IDENTIFY, CoordinateAnswer("three", "two"))
    assert v.error is AnswerError.UNPARSABLE
    assert v.unparsable_fields == ["x", "y"]


def test_identify_missing_wins_over_unparsable():
    v = evaluate(IDENTIFY, CoordinateAnswer("x", None))
    assert v.error is AnswerError.MISSING
    assert v.missing_fields == ["y"]
    assert v.unparsable_fields == ["x"]


# ---------- find-quadrant ----------


def test_quadrant_correct():
    assert evaluate(QUADRANT, QuadrantAnswer(Quadrant.II)).correct is True
    assert evaluate(QUADRANT, QuadrantAnswer("II")).correct is True


def test_quadrant_wrong():
    v = evaluate(QUADRANT, QuadrantAnswer("III"))
    assert v.correct is False
    assert v.error is AnswerError.WRONG
    assert v.canonical_answer == "II"


def test_quadrant_none_selected():
    v = evaluate(QUADRANT, QuadrantAnswer(None))
    assert v.error is AnswerError.MISSING
    assert v.feedback == "Select a quadrant!"


def test_quadrant_unknown_label():
    assert evaluate(QUADRANT, QuadrantAnswer("V")).error is AnswerError.UNPARSABLE
    assert evaluate(QUADRANT, QuadrantAnswer("Axis")).error is AnswerError.UNPARSABLE


# ---------- distance ----------


def test_distance_within_tolerance():
    assert evaluate(DISTANCE, DistanceAnswer("5.05")).correct is True
    assert evaluate(DISTANCE, DistanceAnswer("5")).correct is True


def test_distance_outside_tolerance():
    v = evaluate(DISTANCE, DistanceAnswer("5.2"))
    assert v.correct is False
    assert v.error is AnswerError.WRONG
    assert v.canonical_answer == "5"


def test_distance_uses_stored_value():
    # graded against the stored distance, not a recomputation from the points
    odd = DistanceProblem(x1=0, y1=0, x2=3, y2=4, distance=7.0, range=6, display="(0, 0) to (3, 4)")
    assert evaluate(odd, DistanceAnswer("7")).correct is True
    assert evaluate(odd, DistanceAnswer("5")).correct is False


def test_distance_missing_and_unparsable():
    assert evaluate(DISTANCE, DistanceAnswer("")).error is AnswerError.MISSING
    assert evaluate(DISTANCE, DistanceAnswer("five")).error is AnswerError.UNPARSABLE


# ---------- dispatch / batch ----------


def test_mismatched_answer_type():
    with pytest.raises(TypeError):
        evaluate(PLOT, DistanceAnswer("5"))


def test_none_answer_is_missing():
    for problem in (PLOT, IDENTIFY, QUADRANT, DISTANCE):
        assert evaluate(problem, None).error is AnswerError.MISSING


def test_grade_batch_counts():
    result = grade_batch(
        [PLOT, IDENTIFY, QUADRANT, DISTANCE],
        [PlotAnswer(2, -3), CoordinateAnswer("3", "2"), QuadrantAnswer("II")],
    )
    assert result.total == 4
    assert result.correct == 2
    assert result.score == 0.5
    assert result.verdicts[3].error is AnswerError.MISSING
    assert result.summary == "2/4 correct. Keep going!"


def test_grade_batch_perfect_and_zero():
    perfect = grade_batch([PLOT, DISTANCE], [PlotAnswer(2, -3), DistanceAnswer("5.0")])
    assert perfect.summary == "Perfect! All 2 answers are correct!"
    zero = grade_batch([PLOT], [PlotAnswer(0, 0)])
    assert zero.correct == 0
    assert zero.summary.startswith("Not quite")


def test_grade_batch_order_independent():
    problems = [PLOT, IDENTIFY, QUADRANT, DISTANCE]
    answers = [PlotAnswer(2, -3), CoordinateAnswer("3", "-2"), QuadrantAnswer("I"), DistanceAnswer("9")]
    forward = grade_batch(problems, answers)
    backward = grade_batch(problems[::-1], answers[::-1])
    assert [v.correct for v in forward.verdicts] == [v.correct for v in backward.verdicts][::-1]


def test_grade_empty_batch():
    result = grade_batch([], [])
    assert result.total == 0 and result.score == 0.0
    assert result.summary == "Perfect! All 0 answers are correct!"

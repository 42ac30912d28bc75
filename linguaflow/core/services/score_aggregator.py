"""
Score aggregation for a lesson attempt.

Only auto-gradable exercises (every kind except text answers) contribute.
When there is nothing to auto-grade, or the gradable exercises carry no
points, the score is NOTHING_TO_GRADE_SCORE. That value is a policy meaning
"full credit pending review", not a measurement; LessonAttemptResult
carries awaiting_review so callers can render it as such.
"""
from typing import List, Sequence, Tuple

from linguaflow.core.consts import NOTHING_TO_GRADE_SCORE
from linguaflow.core.entities.exercise import Exercise
from linguaflow.core.entities.lesson_attempt import LessonAttemptResult
from linguaflow.core.entities.submitted_answer import SubmittedAnswer
from linguaflow.core.services.grader import is_gradable, needs_review

AnswerPair = Tuple[Exercise, SubmittedAnswer]


def round_half_up_percent(part: int, whole: int) -> int:
    """round(100 * part / whole) with halves rounded up, in integers."""
    return (200 * part + whole) // (2 * whole)


def _gradable_pairs(pairs: Sequence[AnswerPair]) -> List[AnswerPair]:
    return [pair for pair in pairs if is_gradable(pair[0])]


def _gradable_points(pairs: Sequence[AnswerPair]) -> Tuple[int, int]:
    gradable = _gradable_pairs(pairs)
    total_points = sum(exercise.points for exercise, _ in gradable)
    earned_points = sum(
        exercise.points for exercise, answer in gradable if answer.is_correct
    )
    return earned_points, total_points


def aggregate_score(pairs: Sequence[AnswerPair]) -> int:
    earned_points, total_points = _gradable_points(pairs)
    if total_points == 0:
        return NOTHING_TO_GRADE_SCORE
    return round_half_up_percent(earned_points, total_points)


def is_awaiting_review(pairs: Sequence[AnswerPair]) -> bool:
    _, total_points = _gradable_points(pairs)
    if total_points == 0:
        return True
    return any(needs_review(exercise) for exercise, _ in pairs)


def build_attempt_result(pairs: Sequence[AnswerPair]) -> LessonAttemptResult:
    return LessonAttemptResult(
        answers=[answer for _, answer in pairs],
        score=aggregate_score(pairs),
        awaiting_review=is_awaiting_review(pairs),
    )

"""
Exercise grading.

grade() is pure and never raises for a registered exercise kind. Text
answers come back as True because they are provisionally accepted until a
tutor reviews them; use needs_review() to tell that apart from a real
verdict before showing it to a learner.
"""
import logging
from datetime import datetime, timezone
from typing import List, Mapping, Optional, Sequence

from linguaflow.core.entities.exercise import Exercise
from linguaflow.core.entities.submitted_answer import SubmittedAnswer
from linguaflow.core.factories import ExerciseTypeFactory

logger = logging.getLogger(__name__)


def grade(exercise: Exercise, raw_answer: Optional[str]) -> bool:
    handler = ExerciseTypeFactory.get_handler(exercise.kind)
    return handler.grade(exercise, raw_answer or '')


def needs_review(exercise: Exercise) -> bool:
    return ExerciseTypeFactory.get_handler(exercise.kind).needs_review()


def is_gradable(exercise: Exercise) -> bool:
    return ExerciseTypeFactory.get_handler(exercise.kind).is_gradable()


def grade_answer(
    exercise: Exercise,
    raw_answer: Optional[str],
    student_id: Optional[str] = None,
    submitted_at: Optional[datetime] = None,
) -> SubmittedAnswer:
    value = raw_answer or ''
    return SubmittedAnswer(
        exercise_id=exercise.exercise_id,
        student_id=student_id,
        value=value,
        is_correct=grade(exercise, value),
        needs_grading=needs_review(exercise),
        submitted_at=submitted_at or datetime.now(timezone.utc),
    )


def grade_attempt(
    exercises: Sequence[Exercise],
    raw_answers: Mapping[str, Optional[str]],
    student_id: Optional[str] = None,
) -> List[SubmittedAnswer]:
    """
    Grades every exercise of an attempt, in exercise order. Exercises the
    learner skipped are graded as an empty answer.
    """
    unknown_ids = set(raw_answers) - {e.exercise_id for e in exercises}
    if unknown_ids:
        logger.warning(
            f'Ignoring answers for exercises outside the attempt: '
            f'{sorted(unknown_ids)}'
        )

    submitted_at = datetime.now(timezone.utc)
    answers: List[SubmittedAnswer] = []
    for exercise in exercises:
        answers.append(
            grade_answer(
                exercise,
                raw_answers.get(exercise.exercise_id),
                student_id=student_id,
                submitted_at=submitted_at,
            )
        )
    return answers


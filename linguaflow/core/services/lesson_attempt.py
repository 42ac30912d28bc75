import logging
from datetime import datetime, timezone
from typing import List, Mapping, Optional

from linguaflow.core.consts import (
    MAX_SCORE,
    MIN_SCORE,
    PASSING_TUTOR_SCORE,
)
from linguaflow.core.entities.lesson_attempt import LessonAttemptResult
from linguaflow.core.entities.pending_grading import PendingGrading
from linguaflow.core.entities.submitted_answer import SubmittedAnswer
from linguaflow.core.errors import (
    AnswerNotFoundError,
    InvalidGradeError,
    LessonNotFoundError,
)
from linguaflow.core.repositories.answer import AnswerRepository
from linguaflow.core.repositories.exercise import ExerciseRepository
from linguaflow.core.repositories.lesson import LessonRepository
from linguaflow.core.services.grader import grade_attempt
from linguaflow.core.services.score_aggregator import build_attempt_result
from linguaflow.core.services.student_lessons import StudentLessonService
from linguaflow.metrics import ATTEMPT_METRICS

logger = logging.getLogger(__name__)


class LessonAttemptService:
    def __init__(
        self,
        exercise_repository: ExerciseRepository,
        answer_repository: AnswerRepository,
        lesson_repository: LessonRepository,
        student_lesson_service: StudentLessonService,
    ):
        self.exercise_repository = exercise_repository
        self.answer_repository = answer_repository
        self.lesson_repository = lesson_repository
        self.student_lesson_service = student_lesson_service

    async def submit_attempt(
        self,
        student_id: str,
        lesson_id: str,
        raw_answers: Mapping[str, Optional[str]],
        time_spent: int = 0,
    ) -> LessonAttemptResult:
        """
        Grades a full exercise set, stores the answers and completes the
        student's assignment with the aggregated score.
        """
        assignment = await self.student_lesson_service.get_assignment(
            student_id, lesson_id
        )

        exercises = await self.exercise_repository.get_by_lesson(lesson_id)
        if not exercises:
            lesson = await self.lesson_repository.get_by_id(lesson_id)
            if lesson is None:
                raise LessonNotFoundError(f'Lesson {lesson_id} not found')
        exercises = sorted(exercises, key=lambda e: e.order_number)

        answers = grade_attempt(exercises, raw_answers, student_id)
        result = build_attempt_result(list(zip(exercises, answers)))
        logger.debug(f'Attempt of {student_id} on {lesson_id}: {result}')

        if answers:
            saved_answers = await self.answer_repository.create_many(answers)
            result = result.model_copy(update={'answers': saved_answers})

        await self.student_lesson_service.complete_assignment(
            assignment, result.score, time_spent
        )

        for exercise, answer in zip(exercises, answers):
            ATTEMPT_METRICS['exercises_graded'].labels(
                kind=exercise.kind.value,
                is_correct=str(answer.is_correct).lower(),
            ).inc()
        review_label = str(result.awaiting_review).lower()
        ATTEMPT_METRICS['submitted'].labels(
            awaiting_review=review_label
        ).inc()
        ATTEMPT_METRICS['score'].labels(
            awaiting_review=review_label
        ).observe(result.score)

        return result

    async def grade_text_answer(
        self,
        answer_id: str,
        tutor_id: str,
        score: int,
        feedback: Optional[str] = None,
    ) -> SubmittedAnswer:
        if not MIN_SCORE <= score <= MAX_SCORE:
            raise InvalidGradeError(
                f'Score must be between {MIN_SCORE} and {MAX_SCORE}, '
                f'got {score}'
            )

        answer = await self.answer_repository.get_by_id(answer_id)
        if answer is None:
            raise AnswerNotFoundError(f'Answer {answer_id} not found')
        if not answer.needs_grading:
            raise InvalidGradeError(
                f'Answer {answer_id} is not waiting for a tutor grade'
            )

        graded = await self.answer_repository.update(
            answer_id,
            {
                'tutor_score': score,
                'tutor_feedback': feedback,
                'graded_by': tutor_id,
                'graded_at': datetime.now(timezone.utc),
                'needs_grading': False,
                'is_correct': score >= PASSING_TUTOR_SCORE,
            },
        )
        ATTEMPT_METRICS['manual_grades'].inc()
        logger.info(f'Answer {answer_id} graded {score} by tutor {tutor_id}')
        return graded

    async def get_pending_gradings(
        self, tutor_id: str
    ) -> List[PendingGrading]:
        return await self.answer_repository.get_pending_for_tutor(tutor_id)

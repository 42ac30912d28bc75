from typing import Annotated

from fastapi import Depends, Request

from linguaflow.backend.client import BackendClient
from linguaflow.backend.repositories.answer import RestAnswerRepository
from linguaflow.backend.repositories.assignment import (
    RestAssignmentRepository,
)
from linguaflow.backend.repositories.exercise import RestExerciseRepository
from linguaflow.backend.repositories.lesson import RestLessonRepository
from linguaflow.backend.repositories.user import RestUserRepository
from linguaflow.core.services.lesson_attempt import LessonAttemptService
from linguaflow.core.services.lesson_lock import LessonLockService
from linguaflow.core.services.student_lessons import StudentLessonService


async def get_backend_client(request: Request) -> BackendClient:
    if not hasattr(request.app.state, 'backend_client'):
        raise RuntimeError('BackendClient not initialized in app.state')
    return request.app.state.backend_client


def get_student_lesson_service(
    client: Annotated[BackendClient, Depends(get_backend_client)],
) -> StudentLessonService:
    return StudentLessonService(
        assignment_repository=RestAssignmentRepository(client),
        lesson_repository=RestLessonRepository(client),
        user_repository=RestUserRepository(client),
    )


def get_lesson_attempt_service(
    client: Annotated[BackendClient, Depends(get_backend_client)],
    student_lesson_service: Annotated[
        StudentLessonService, Depends(get_student_lesson_service)
    ],
) -> LessonAttemptService:
    return LessonAttemptService(
        exercise_repository=RestExerciseRepository(client),
        answer_repository=RestAnswerRepository(client),
        lesson_repository=RestLessonRepository(client),
        student_lesson_service=student_lesson_service,
    )


def get_lesson_lock_service(
    client: Annotated[BackendClient, Depends(get_backend_client)],
) -> LessonLockService:
    return LessonLockService(
        assignment_repository=RestAssignmentRepository(client),
        lesson_repository=RestLessonRepository(client),
    )

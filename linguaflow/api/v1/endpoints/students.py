import logging
from typing import Annotated, List, Optional

from fastapi import APIRouter, Body, Depends, Path, Query

from linguaflow.api.dependencies import (
    get_lesson_attempt_service,
    get_student_lesson_service,
)
from linguaflow.api.errors import BadGatewayError, NotFoundError
from linguaflow.api.schemas.attempt import (
    AttemptResultSchema,
    AttemptSubmissionSchema,
)
from linguaflow.api.schemas.progress import ProgressUpdateSchema
from linguaflow.core.entities.lesson_assignment import LessonAssignment
from linguaflow.core.entities.reconciled_assignment import (
    ReconciledAssignmentView,
)
from linguaflow.core.entities.student_stats import (
    OrphanCleanupResult,
    StudentLessonStats,
)
from linguaflow.core.errors import (
    AssignmentNotFoundError,
    BackendError,
    LessonNotFoundError,
)
from linguaflow.core.services.lesson_attempt import LessonAttemptService
from linguaflow.core.services.student_lessons import StudentLessonService

logger = logging.getLogger(__name__)
router = APIRouter()

StudentId = Annotated[str, Path(description='Student ID', min_length=1)]
LessonId = Annotated[str, Path(description='Lesson ID', min_length=1)]


@router.get(
    '/{student_id}/lessons',
    response_model=List[ReconciledAssignmentView],
    summary='Lessons assigned to a student',
    description=(
        'Assignments merged with their lesson and tutor. Lessons or tutors '
        'that no longer exist are filled with placeholders and flagged, '
        'never dropped.'
    ),
)
async def get_student_lessons(
    service: Annotated[
        StudentLessonService, Depends(get_student_lesson_service)
    ],
    student_id: StudentId,
    q: Annotated[Optional[str], Query(description='Search text')] = None,
) -> List[ReconciledAssignmentView]:
    try:
        if q:
            return await service.search_student_lessons(student_id, q)
        return await service.get_student_lessons(student_id)
    except BackendError as e:
        raise BadGatewayError(str(e)) from e


@router.get('/{student_id}/lessons/stats', response_model=StudentLessonStats)
async def get_student_lesson_stats(
    service: Annotated[
        StudentLessonService, Depends(get_student_lesson_service)
    ],
    student_id: StudentId,
) -> StudentLessonStats:
    try:
        return await service.get_stats(student_id)
    except BackendError as e:
        raise BadGatewayError(str(e)) from e


@router.post(
    '/{student_id}/lessons/{lesson_id}/start',
    response_model=LessonAssignment,
)
async def start_lesson(
    service: Annotated[
        StudentLessonService, Depends(get_student_lesson_service)
    ],
    student_id: StudentId,
    lesson_id: LessonId,
) -> LessonAssignment:
    try:
        return await service.start_lesson(student_id, lesson_id)
    except AssignmentNotFoundError as e:
        raise NotFoundError(str(e)) from e
    except BackendError as e:
        raise BadGatewayError(str(e)) from e


@router.patch(
    '/{student_id}/lessons/{lesson_id}/progress',
    response_model=LessonAssignment,
)
async def update_lesson_progress(
    service: Annotated[
        StudentLessonService, Depends(get_student_lesson_service)
    ],
    student_id: StudentId,
    lesson_id: LessonId,
    update: Annotated[ProgressUpdateSchema, Body()],
) -> LessonAssignment:
    try:
        return await service.update_progress(
            student_id,
            lesson_id,
            progress=update.progress,
            time_spent=update.time_spent,
        )
    except AssignmentNotFoundError as e:
        raise NotFoundError(str(e)) from e
    except BackendError as e:
        raise BadGatewayError(str(e)) from e


@router.post(
    '/{student_id}/lessons/{lesson_id}/attempts',
    response_model=AttemptResultSchema,
    summary='Submit a full exercise set',
)
async def submit_lesson_attempt(
    service: Annotated[
        LessonAttemptService, Depends(get_lesson_attempt_service)
    ],
    student_id: StudentId,
    lesson_id: LessonId,
    submission: Annotated[AttemptSubmissionSchema, Body()],
) -> AttemptResultSchema:
    try:
        result = await service.submit_attempt(
            student_id,
            lesson_id,
            raw_answers=submission.answers,
            time_spent=submission.time_spent,
        )
    except (AssignmentNotFoundError, LessonNotFoundError) as e:
        raise NotFoundError(str(e)) from e
    except BackendError as e:
        raise BadGatewayError(str(e)) from e

    logger.debug(f'{result=}')
    return AttemptResultSchema(
        score=result.score,
        awaiting_review=result.awaiting_review,
        answers=result.answers,
    )


@router.post(
    '/{student_id}/assignments/cleanup-orphaned',
    response_model=OrphanCleanupResult,
    summary='Delete assignments whose lesson no longer exists',
)
async def cleanup_orphaned_assignments(
    service: Annotated[
        StudentLessonService, Depends(get_student_lesson_service)
    ],
    student_id: StudentId,
) -> OrphanCleanupResult:
    try:
        return await service.cleanup_orphaned_assignments(student_id)
    except BackendError as e:
        raise BadGatewayError(str(e)) from e

from typing import Annotated, List

from fastapi import APIRouter, Depends, Path

from linguaflow.api.dependencies import get_lesson_attempt_service
from linguaflow.api.errors import BadGatewayError
from linguaflow.core.entities.pending_grading import PendingGrading
from linguaflow.core.errors import BackendError
from linguaflow.core.services.lesson_attempt import LessonAttemptService

router = APIRouter()


@router.get(
    '/{tutor_id}/pending-gradings', response_model=List[PendingGrading]
)
async def get_pending_gradings(
    service: Annotated[
        LessonAttemptService, Depends(get_lesson_attempt_service)
    ],
    tutor_id: Annotated[str, Path(description='Tutor ID', min_length=1)],
) -> List[PendingGrading]:
    try:
        return await service.get_pending_gradings(tutor_id)
    except BackendError as e:
        raise BadGatewayError(str(e)) from e

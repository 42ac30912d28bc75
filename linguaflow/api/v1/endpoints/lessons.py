from typing import Annotated

from fastapi import APIRouter, Depends, Path

from linguaflow.api.dependencies import get_lesson_lock_service
from linguaflow.api.errors import BadGatewayError, NotFoundError
from linguaflow.core.entities.lesson_lock_status import LessonLockStatus
from linguaflow.core.errors import BackendError, LessonNotFoundError
from linguaflow.core.services.lesson_lock import LessonLockService

router = APIRouter()


@router.get('/{lesson_id}/lock-status', response_model=LessonLockStatus)
async def get_lesson_lock_status(
    service: Annotated[LessonLockService, Depends(get_lesson_lock_service)],
    lesson_id: Annotated[str, Path(description='Lesson ID', min_length=1)],
) -> LessonLockStatus:
    try:
        return await service.get_lock_status(lesson_id)
    except LessonNotFoundError as e:
        raise NotFoundError(str(e)) from e
    except BackendError as e:
        raise BadGatewayError(str(e)) from e

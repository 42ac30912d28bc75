import logging
from typing import Annotated

from fastapi import APIRouter, Body, Depends, Path

from linguaflow.api.dependencies import get_lesson_attempt_service
from linguaflow.api.errors import (
    BadGatewayError,
    BadRequestError,
    NotFoundError,
)
from linguaflow.api.schemas.grading import GradeSubmissionSchema
from linguaflow.core.entities.submitted_answer import SubmittedAnswer
from linguaflow.core.errors import (
    AnswerNotFoundError,
    BackendError,
    InvalidGradeError,
)
from linguaflow.core.services.lesson_attempt import LessonAttemptService

logger = logging.getLogger(__name__)
router = APIRouter()


@router.post(
    '/{answer_id}/grade',
    response_model=SubmittedAnswer,
    summary='Tutor grade for a text answer',
)
async def grade_answer(
    service: Annotated[
        LessonAttemptService, Depends(get_lesson_attempt_service)
    ],
    answer_id: Annotated[str, Path(description='Answer ID', min_length=1)],
    grading: Annotated[GradeSubmissionSchema, Body()],
) -> SubmittedAnswer:
    try:
        return await service.grade_text_answer(
            answer_id,
            tutor_id=grading.tutor_id,
            score=grading.score,
            feedback=grading.feedback,
        )
    except AnswerNotFoundError as e:
        raise NotFoundError(str(e)) from e
    except InvalidGradeError as e:
        logger.warning(f'Rejected grade for answer {answer_id}: {e}')
        raise BadRequestError(str(e)) from e
    except BackendError as e:
        raise BadGatewayError(str(e)) from e

from typing import List

from pydantic import BaseModel, Field

from linguaflow.core.consts import MAX_SCORE, MIN_SCORE
from linguaflow.core.entities.submitted_answer import SubmittedAnswer


class LessonAttemptResult(BaseModel):
    answers: List[SubmittedAnswer] = Field(
        default_factory=list, description='Answers in exercise order'
    )
    score: int = Field(ge=MIN_SCORE, le=MAX_SCORE)
    awaiting_review: bool = Field(
        default=False,
        description=(
            'True when part of the attempt waits for a tutor, or when the '
            'score is full credit only because nothing was auto-gradable'
        ),
    )

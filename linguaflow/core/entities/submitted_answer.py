from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, Field, field_validator

from linguaflow.core.consts import MAX_SCORE, MIN_SCORE


class SubmittedAnswer(BaseModel):
    answer_id: Optional[str] = Field(default=None)
    exercise_id: str = Field()
    student_id: Optional[str] = Field(default=None)
    value: str = Field(default='', description='Raw learner input')
    is_correct: bool = Field(
        description=(
            'Grader verdict. For text answers this is a provisional True '
            'pending tutor review, see needs_grading.'
        )
    )
    needs_grading: bool = Field(default=False)
    submitted_at: Optional[datetime] = Field(default=None)
    tutor_score: Optional[int] = Field(
        default=None, ge=MIN_SCORE, le=MAX_SCORE
    )
    tutor_feedback: Optional[str] = Field(default=None)
    graded_by: Optional[str] = Field(default=None)
    graded_at: Optional[datetime] = Field(default=None)

    @field_validator('value', mode='before')
    @classmethod
    def none_to_empty_string(cls, value: Any) -> Any:
        return '' if value is None else value

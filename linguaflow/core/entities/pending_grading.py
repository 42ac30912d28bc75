from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, Field, field_validator


class PendingGrading(BaseModel):
    answer_id: str
    student_id: str
    exercise_id: str
    answer: str = Field(default='')
    submitted_at: Optional[datetime] = None
    student_first_name: str = Field(default='')
    student_last_name: str = Field(default='')
    student_email: str = Field(default='')
    question: str = Field(default='')
    sample_answer: Optional[str] = None
    max_points: int = Field(default=0)
    word_limit: Optional[int] = None
    lesson_id: str
    lesson_title: str = Field(default='')
    tutor_id: str

    @field_validator(
        'answer',
        'student_first_name',
        'student_last_name',
        'student_email',
        'question',
        'lesson_title',
        mode='before',
    )
    @classmethod
    def none_to_empty_string(cls, value: Any) -> Any:
        return '' if value is None else value

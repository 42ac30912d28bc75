from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, Field, field_validator

from linguaflow.core.consts import (
    MAX_PROGRESS,
    MAX_SCORE,
    MIN_PROGRESS,
    MIN_SCORE,
)
from linguaflow.core.enums import AssignmentStatus


class LessonAssignment(BaseModel):
    assignment_id: str = Field(description='Assignment ID')
    student_id: str = Field()
    lesson_id: str = Field()
    status: AssignmentStatus = Field(default=AssignmentStatus.ASSIGNED)
    assigned_at: Optional[datetime] = Field(default=None)
    started_at: Optional[datetime] = Field(default=None)
    completed_at: Optional[datetime] = Field(default=None)
    score: Optional[int] = Field(default=None, ge=MIN_SCORE, le=MAX_SCORE)
    progress: int = Field(default=0, ge=MIN_PROGRESS, le=MAX_PROGRESS)
    time_spent: int = Field(default=0, ge=0, description='Minutes')
    updated_at: Optional[datetime] = Field(default=None)

    @field_validator('progress', 'time_spent', mode='before')
    @classmethod
    def none_to_zero(cls, value: Any) -> Any:
        return 0 if value is None else value

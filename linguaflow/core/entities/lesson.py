from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from linguaflow.core.enums import LessonStatus


class Lesson(BaseModel):
    lesson_id: str = Field(description='Lesson ID')
    tutor_id: str = Field(description='Author of the lesson')
    title: str = Field(default='')
    description: Optional[str] = Field(default=None)
    content: str = Field(default='')
    created_at: Optional[datetime] = Field(default=None)
    status: LessonStatus = Field(default=LessonStatus.PUBLISHED)

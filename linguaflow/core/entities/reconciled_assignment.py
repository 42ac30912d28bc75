from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from linguaflow.core.enums import AssignmentStatus


class TutorView(BaseModel):
    first_name: str
    last_name: str
    email: str

    @property
    def full_name(self) -> str:
        return f'{self.first_name} {self.last_name}'.strip()


class LessonView(BaseModel):
    lesson_id: str
    title: str
    description: Optional[str] = None
    content: str
    created_at: Optional[datetime] = None
    tutor_id: str
    tutor: TutorView


class ReconciledAssignmentView(BaseModel):
    assignment_id: str
    student_id: str
    lesson_id: str
    status: AssignmentStatus
    assigned_at: Optional[datetime] = None
    started_at: Optional[datetime] = None
    completed_at: Optional[datetime] = None
    score: Optional[int] = None
    progress: int = 0
    time_spent: int = 0
    updated_at: Optional[datetime] = None
    lesson: LessonView
    is_orphaned: bool = Field(
        default=False, description='Referenced lesson no longer exists'
    )
    tutor_missing: bool = Field(
        default=False, description='Lesson tutor no longer exists'
    )

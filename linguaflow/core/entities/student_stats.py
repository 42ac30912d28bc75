from typing import List

from pydantic import BaseModel, Field

from linguaflow.core.enums import StudentLevel


class StudentLessonStats(BaseModel):
    total_lessons: int = 0
    completed_lessons: int = 0
    in_progress_lessons: int = 0
    assigned_lessons: int = 0
    average_score: int = 0
    total_study_time: int = Field(default=0, description='Minutes')
    average_progress: int = 0
    current_streak: int = Field(default=0, description='Days')
    longest_streak: int = Field(default=0, description='Days')
    level: StudentLevel = StudentLevel.BEGINNER


class OrphanCleanupResult(BaseModel):
    removed_count: int = 0
    kept_count: int = 0
    removed_assignment_ids: List[str] = Field(default_factory=list)

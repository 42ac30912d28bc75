from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional, Sequence

from linguaflow.core.entities.lesson_assignment import LessonAssignment


class AssignmentRepository(ABC):
    @abstractmethod
    async def get_by_student(self, student_id: str) -> List[LessonAssignment]:
        """Assignments of a student, most recently assigned first."""
        raise NotImplementedError

    @abstractmethod
    async def get_for_student_lesson(
        self, student_id: str, lesson_id: str
    ) -> Optional[LessonAssignment]:
        raise NotImplementedError

    @abstractmethod
    async def get_by_lesson(self, lesson_id: str) -> List[LessonAssignment]:
        raise NotImplementedError

    @abstractmethod
    async def update(
        self, assignment_id: str, values: Dict[str, Any]
    ) -> LessonAssignment:
        raise NotImplementedError

    @abstractmethod
    async def delete_many(self, assignment_ids: Sequence[str]) -> None:
        raise NotImplementedError

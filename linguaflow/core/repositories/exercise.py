from abc import ABC, abstractmethod
from typing import List

from linguaflow.core.entities.exercise import Exercise


class ExerciseRepository(ABC):
    @abstractmethod
    async def get_by_lesson(self, lesson_id: str) -> List[Exercise]:
        """Exercises of a lesson ordered by order_number."""
        raise NotImplementedError

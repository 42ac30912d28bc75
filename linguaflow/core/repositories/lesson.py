from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

from linguaflow.core.entities.lesson import Lesson


class LessonRepository(ABC):
    @abstractmethod
    async def get_by_ids(self, lesson_ids: Sequence[str]) -> List[Lesson]:
        """Returns the subset of the requested lessons that still exist."""
        raise NotImplementedError

    @abstractmethod
    async def get_by_id(self, lesson_id: str) -> Optional[Lesson]:
        raise NotImplementedError

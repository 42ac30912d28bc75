from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional, Sequence

from linguaflow.core.entities.pending_grading import PendingGrading
from linguaflow.core.entities.submitted_answer import SubmittedAnswer


class AnswerRepository(ABC):
    @abstractmethod
    async def create_many(
        self, answers: Sequence[SubmittedAnswer]
    ) -> List[SubmittedAnswer]:
        raise NotImplementedError

    @abstractmethod
    async def get_by_id(self, answer_id: str) -> Optional[SubmittedAnswer]:
        raise NotImplementedError

    @abstractmethod
    async def update(
        self, answer_id: str, values: Dict[str, Any]
    ) -> SubmittedAnswer:
        raise NotImplementedError

    @abstractmethod
    async def get_pending_for_tutor(
        self, tutor_id: str
    ) -> List[PendingGrading]:
        raise NotImplementedError

import logging
from typing import Any, Dict, List, Optional, Sequence

from linguaflow.backend.client import BackendClient, eq
from linguaflow.core.entities.pending_grading import PendingGrading
from linguaflow.core.entities.submitted_answer import SubmittedAnswer
from linguaflow.core.errors import AnswerNotFoundError
from linguaflow.core.repositories.answer import AnswerRepository

logger = logging.getLogger(__name__)

TABLE = 'student_exercise_answers'
PENDING_GRADINGS_RPC = 'get_tutor_pending_gradings'
DEFAULT_MAX_POINTS = 5
PENDING_GRADING_ID_COLUMNS = (
    'answer_id',
    'exercise_id',
    'student_id',
    'lesson_id',
    'tutor_id',
)


def _to_entity(row: Dict[str, Any]) -> SubmittedAnswer:
    return SubmittedAnswer(
        answer_id=str(row['id']),
        exercise_id=str(row['exercise_id']),
        student_id=row.get('student_id'),
        value=row.get('answer'),
        is_correct=bool(row.get('is_correct')),
        needs_grading=bool(row.get('needs_grading')),
        submitted_at=row.get('submitted_at'),
        tutor_score=row.get('tutor_score'),
        tutor_feedback=row.get('tutor_feedback'),
        graded_by=row.get('graded_by'),
        graded_at=row.get('graded_at'),
    )


def _to_row(answer: SubmittedAnswer) -> Dict[str, Any]:
    return {
        'student_id': answer.student_id,
        'exercise_id': answer.exercise_id,
        'answer': answer.value,
        'is_correct': answer.is_correct,
        'needs_grading': answer.needs_grading,
        'submitted_at': answer.submitted_at,
    }


class RestAnswerRepository(AnswerRepository):
    def __init__(self, client: BackendClient):
        self.client = client

    async def create_many(
        self, answers: Sequence[SubmittedAnswer]
    ) -> List[SubmittedAnswer]:
        rows = await self.client.insert(
            TABLE, [_to_row(answer) for answer in answers]
        )
        return [_to_entity(row) for row in rows]

    async def get_by_id(self, answer_id: str) -> Optional[SubmittedAnswer]:
        rows = await self.client.select(
            TABLE, filters={'id': eq(answer_id)}, limit=1
        )
        return _to_entity(rows[0]) if rows else None

    async def update(
        self, answer_id: str, values: Dict[str, Any]
    ) -> SubmittedAnswer:
        rows = await self.client.update(TABLE, {'id': eq(answer_id)}, values)
        if not rows:
            raise AnswerNotFoundError(f'Answer {answer_id} not found')
        return _to_entity(rows[0])

    async def get_pending_for_tutor(
        self, tutor_id: str
    ) -> List[PendingGrading]:
        rows = await self.client.rpc(
            PENDING_GRADINGS_RPC, {'p_tutor_id': tutor_id}
        )
        pendings: List[PendingGrading] = []
        for row in rows or []:
            if not row or not all(
                row.get(key) for key in PENDING_GRADING_ID_COLUMNS
            ):
                logger.warning(f'Skipping incomplete pending grading: {row}')
                continue
            if row.get('max_points') is None:
                row = {**row, 'max_points': DEFAULT_MAX_POINTS}
            pendings.append(PendingGrading.model_validate(row))
        return pendings

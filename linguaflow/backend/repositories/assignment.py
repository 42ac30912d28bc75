from typing import Any, Dict, List, Optional, Sequence

from linguaflow.backend.client import BackendClient, eq, in_
from linguaflow.core.entities.lesson_assignment import LessonAssignment
from linguaflow.core.errors import AssignmentNotFoundError
from linguaflow.core.repositories.assignment import AssignmentRepository

TABLE = 'student_lessons'


def _to_entity(row: Dict[str, Any]) -> LessonAssignment:
    return LessonAssignment(
        assignment_id=str(row['id']),
        student_id=str(row['student_id']),
        lesson_id=str(row['lesson_id']),
        status=row.get('status') or 'assigned',
        assigned_at=row.get('assigned_at'),
        started_at=row.get('started_at'),
        completed_at=row.get('completed_at'),
        score=row.get('score'),
        progress=row.get('progress'),
        time_spent=row.get('time_spent'),
        updated_at=row.get('updated_at'),
    )


class RestAssignmentRepository(AssignmentRepository):
    def __init__(self, client: BackendClient):
        self.client = client

    async def get_by_student(self, student_id: str) -> List[LessonAssignment]:
        rows = await self.client.select(
            TABLE,
            filters={'student_id': eq(student_id)},
            order='assigned_at.desc',
        )
        return [_to_entity(row) for row in rows]

    async def get_for_student_lesson(
        self, student_id: str, lesson_id: str
    ) -> Optional[LessonAssignment]:
        rows = await self.client.select(
            TABLE,
            filters={
                'student_id': eq(student_id),
                'lesson_id': eq(lesson_id),
            },
            limit=1,
        )
        return _to_entity(rows[0]) if rows else None

    async def get_by_lesson(self, lesson_id: str) -> List[LessonAssignment]:
        rows = await self.client.select(
            TABLE, filters={'lesson_id': eq(lesson_id)}
        )
        return [_to_entity(row) for row in rows]

    async def update(
        self, assignment_id: str, values: Dict[str, Any]
    ) -> LessonAssignment:
        rows = await self.client.update(
            TABLE, {'id': eq(assignment_id)}, values
        )
        if not rows:
            raise AssignmentNotFoundError(
                f'Assignment {assignment_id} not found'
            )
        return _to_entity(rows[0])

    async def delete_many(self, assignment_ids: Sequence[str]) -> None:
        if not assignment_ids:
            return
        await self.client.delete(TABLE, {'id': in_(assignment_ids)})

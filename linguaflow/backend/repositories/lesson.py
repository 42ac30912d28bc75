from typing import Any, Dict, List, Optional, Sequence

from linguaflow.backend.client import BackendClient, eq
from linguaflow.core.entities.lesson import Lesson
from linguaflow.core.repositories.lesson import LessonRepository

TABLE = 'lessons'


def _to_entity(row: Dict[str, Any]) -> Lesson:
    return Lesson(
        lesson_id=str(row['id']),
        tutor_id=str(row['tutor_id']),
        title=row.get('title') or '',
        description=row.get('description'),
        content=row.get('content') or '',
        created_at=row.get('created_at'),
        status=row.get('status') or 'published',
    )


class RestLessonRepository(LessonRepository):
    def __init__(self, client: BackendClient):
        self.client = client

    async def get_by_ids(self, lesson_ids: Sequence[str]) -> List[Lesson]:
        rows = await self.client.select_in(TABLE, 'id', lesson_ids)
        return [_to_entity(row) for row in rows]

    async def get_by_id(self, lesson_id: str) -> Optional[Lesson]:
        rows = await self.client.select(
            TABLE, filters={'id': eq(lesson_id)}, limit=1
        )
        return _to_entity(rows[0]) if rows else None

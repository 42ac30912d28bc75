import logging
from typing import Any, Dict, List

from linguaflow.backend.client import BackendClient, eq
from linguaflow.core.entities.exercise import Exercise
from linguaflow.core.repositories.exercise import ExerciseRepository
from linguaflow.core.value_objects.exercise import create_exercise_data

logger = logging.getLogger(__name__)

TABLE = 'lesson_exercises'


def _to_entity(row: Dict[str, Any]) -> Exercise:
    kind = row['exercise_type']
    optional_fields = {
        field: row[field]
        for field in ('difficulty_level', 'estimated_duration_minutes')
        if row.get(field) is not None
    }
    return Exercise(
        exercise_id=str(row['id']),
        lesson_id=str(row['lesson_id']),
        kind=kind,
        prompt=row.get('question'),
        expected_answer=row.get('correct_answer'),
        data=create_exercise_data(
            kind, row.get('options'), word_limit=row.get('word_limit')
        ),
        points=row.get('points'),
        explanation=row.get('explanation'),
        order_number=row.get('order_number') or 0,
        **optional_fields,
    )


class RestExerciseRepository(ExerciseRepository):
    def __init__(self, client: BackendClient):
        self.client = client

    async def get_by_lesson(self, lesson_id: str) -> List[Exercise]:
        rows = await self.client.select(
            TABLE,
            filters={'lesson_id': eq(lesson_id)},
            order='order_number.asc',
        )
        logger.debug(f'Loaded {len(rows)} exercises for lesson {lesson_id}')
        return [_to_entity(row) for row in rows]

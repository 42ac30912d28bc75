from typing import Sequence

from linguaflow.core.entities.lesson_assignment import LessonAssignment
from linguaflow.core.entities.lesson_lock_status import LessonLockStatus
from linguaflow.core.enums import AssignmentStatus, LockReason
from linguaflow.core.errors import LessonNotFoundError
from linguaflow.core.repositories.assignment import AssignmentRepository
from linguaflow.core.repositories.lesson import LessonRepository
from linguaflow.core.services.score_aggregator import round_half_up_percent


def compute_lock_status(
    assignments: Sequence[LessonAssignment],
) -> LessonLockStatus:
    """A lesson locks for editing once every assigned student finished it."""
    total_assigned = len(assignments)
    total_completed = sum(
        1 for a in assignments if a.status == AssignmentStatus.COMPLETED
    )
    completion_rate = (
        round_half_up_percent(total_completed, total_assigned)
        if total_assigned
        else 0
    )
    is_locked = total_assigned > 0 and total_completed == total_assigned

    return LessonLockStatus(
        is_locked=is_locked,
        lock_reason=LockReason.ALL_STUDENTS_COMPLETED if is_locked else None,
        can_edit=not is_locked,
        can_delete=not is_locked,
        total_assigned=total_assigned,
        total_completed=total_completed,
        completion_rate=completion_rate,
    )


class LessonLockService:
    def __init__(
        self,
        assignment_repository: AssignmentRepository,
        lesson_repository: LessonRepository,
    ):
        self.assignment_repository = assignment_repository
        self.lesson_repository = lesson_repository

    async def get_lock_status(self, lesson_id: str) -> LessonLockStatus:
        lesson = await self.lesson_repository.get_by_id(lesson_id)
        if lesson is None:
            raise LessonNotFoundError(f'Lesson {lesson_id} not found')
        assignments = await self.assignment_repository.get_by_lesson(
            lesson_id
        )
        return compute_lock_status(assignments)

import logging
from datetime import date, datetime, timezone
from typing import Any, Dict, Iterable, List, Optional, Sequence, Tuple

from linguaflow.core.consts import (
    MAX_PROGRESS,
    MAX_SCORE,
    MIN_PROGRESS,
    MIN_SCORE,
)
from linguaflow.core.entities.lesson_assignment import LessonAssignment
from linguaflow.core.entities.reconciled_assignment import (
    ReconciledAssignmentView,
)
from linguaflow.core.entities.student_stats import (
    OrphanCleanupResult,
    StudentLessonStats,
)
from linguaflow.core.enums import AssignmentStatus, StudentLevel
from linguaflow.core.errors import AssignmentNotFoundError
from linguaflow.core.repositories.assignment import AssignmentRepository
from linguaflow.core.repositories.lesson import LessonRepository
from linguaflow.core.repositories.user import UserRepository
from linguaflow.core.services.assignment_reconciler import (
    find_orphaned_assignments,
    reconcile_assignments,
    referenced_lesson_ids,
    referenced_tutor_ids,
)
from linguaflow.metrics import ASSIGNMENT_METRICS

logger = logging.getLogger(__name__)


def _clamp(value: int, lower: int, upper: int) -> int:
    return max(lower, min(upper, value))


def _round_half_up_mean(values: Sequence[int]) -> int:
    if not values:
        return 0
    return (2 * sum(values) + len(values)) // (2 * len(values))


def calculate_streaks(
    completion_dates: Iterable[date], today: date
) -> Tuple[int, int]:
    """
    Returns (current, longest) runs of consecutive calendar days with at
    least one completed lesson. The current run only counts while its
    latest day is today or yesterday.
    """
    days = sorted(set(completion_dates), reverse=True)
    if not days:
        return 0, 0

    longest = run = 1
    for newer, older in zip(days, days[1:]):
        run = run + 1 if (newer - older).days == 1 else 1
        longest = max(longest, run)

    current = 0
    if (today - days[0]).days <= 1:
        current = 1
        for newer, older in zip(days, days[1:]):
            if (newer - older).days != 1:
                break
            current += 1

    return current, longest


def determine_level(
    average_score: int, completed_lessons: int, total_lessons: int
) -> StudentLevel:
    if completed_lessons == 0:
        return StudentLevel.BEGINNER
    completion_rate = (
        100 * completed_lessons / total_lessons if total_lessons else 0
    )
    if completed_lessons >= 10 and average_score >= 85:
        return StudentLevel.ADVANCED
    if completed_lessons >= 5 and average_score >= 70:
        return StudentLevel.INTERMEDIATE
    if completion_rate >= 50 and average_score >= 60:
        return StudentLevel.INTERMEDIATE
    return StudentLevel.BEGINNER


def calculate_student_stats(
    assignments: Sequence[LessonAssignment], today: Optional[date] = None
) -> StudentLessonStats:
    today = today or datetime.now(timezone.utc).date()
    by_status = {status: 0 for status in AssignmentStatus}
    for assignment in assignments:
        by_status[assignment.status] += 1

    completed = [
        a for a in assignments if a.status == AssignmentStatus.COMPLETED
    ]
    average_score = _round_half_up_mean(
        [a.score for a in completed if a.score is not None]
    )
    current_streak, longest_streak = calculate_streaks(
        (a.completed_at.date() for a in completed if a.completed_at),
        today,
    )

    return StudentLessonStats(
        total_lessons=len(assignments),
        completed_lessons=by_status[AssignmentStatus.COMPLETED],
        in_progress_lessons=by_status[AssignmentStatus.IN_PROGRESS],
        assigned_lessons=by_status[AssignmentStatus.ASSIGNED],
        average_score=average_score,
        total_study_time=sum(a.time_spent for a in assignments),
        average_progress=_round_half_up_mean(
            [a.progress for a in assignments]
        ),
        current_streak=current_streak,
        longest_streak=longest_streak,
        level=determine_level(
            average_score, len(completed), len(assignments)
        ),
    )


def _matches(view: ReconciledAssignmentView, search_term: str) -> bool:
    haystacks = [
        view.lesson.title,
        view.lesson.description or '',
        view.lesson.tutor.full_name,
    ]
    return any(search_term in text.lower() for text in haystacks)


class StudentLessonService:
    def __init__(
        self,
        assignment_repository: AssignmentRepository,
        lesson_repository: LessonRepository,
        user_repository: UserRepository,
    ):
        self.assignment_repository = assignment_repository
        self.lesson_repository = lesson_repository
        self.user_repository = user_repository

    async def get_student_lessons(
        self, student_id: str
    ) -> List[ReconciledAssignmentView]:
        assignments = await self.assignment_repository.get_by_student(
            student_id
        )
        logger.debug(
            f'Found {len(assignments)} assignments for student {student_id}'
        )
        if not assignments:
            return []

        lessons = await self.lesson_repository.get_by_ids(
            referenced_lesson_ids(assignments)
        )
        tutors = await self.user_repository.get_by_ids(
            referenced_tutor_ids(lessons)
        )
        views = reconcile_assignments(assignments, lessons, tutors)

        orphaned = sum(1 for v in views if v.is_orphaned)
        tutor_missing = sum(
            1 for v in views if v.tutor_missing and not v.is_orphaned
        )
        if orphaned:
            ASSIGNMENT_METRICS['orphaned_seen'].inc(orphaned)
            logger.warning(
                f'Student {student_id} has {orphaned} assignments '
                f'referencing missing lessons'
            )
        if tutor_missing:
            ASSIGNMENT_METRICS['tutor_missing_seen'].inc(tutor_missing)
            logger.warning(
                f'Student {student_id} has {tutor_missing} assignments '
                f'whose lesson tutor is missing'
            )
        return views

    async def search_student_lessons(
        self, student_id: str, query: str
    ) -> List[ReconciledAssignmentView]:
        views = await self.get_student_lessons(student_id)
        search_term = query.strip().lower()
        if not search_term:
            return views
        return [view for view in views if _matches(view, search_term)]

    async def get_stats(
        self, student_id: str, today: Optional[date] = None
    ) -> StudentLessonStats:
        assignments = await self.assignment_repository.get_by_student(
            student_id
        )
        return calculate_student_stats(assignments, today)

    async def get_assignment(
        self, student_id: str, lesson_id: str
    ) -> LessonAssignment:
        assignment = await self.assignment_repository.get_for_student_lesson(
            student_id, lesson_id
        )
        if assignment is None:
            raise AssignmentNotFoundError(
                f'Lesson {lesson_id} is not assigned to student {student_id}'
            )
        return assignment

    async def start_lesson(
        self, student_id: str, lesson_id: str
    ) -> LessonAssignment:
        assignment = await self.get_assignment(student_id, lesson_id)
        if assignment.status == AssignmentStatus.COMPLETED:
            logger.info(
                f'Lesson {lesson_id} already completed by student '
                f'{student_id}, not restarting'
            )
            return assignment

        now = datetime.now(timezone.utc)
        return await self.assignment_repository.update(
            assignment.assignment_id,
            {
                'status': AssignmentStatus.IN_PROGRESS,
                'started_at': now,
                'updated_at': now,
            },
        )

    async def update_progress(
        self,
        student_id: str,
        lesson_id: str,
        progress: int,
        time_spent: Optional[int] = None,
    ) -> LessonAssignment:
        assignment = await self.get_assignment(student_id, lesson_id)
        now = datetime.now(timezone.utc)
        clamped = _clamp(progress, MIN_PROGRESS, MAX_PROGRESS)
        values: Dict[str, Any] = {'progress': clamped, 'updated_at': now}
        if time_spent is not None:
            values['time_spent'] = max(0, time_spent)
        if clamped > 0 and assignment.status == AssignmentStatus.ASSIGNED:
            values['status'] = AssignmentStatus.IN_PROGRESS
            values['started_at'] = now

        return await self.assignment_repository.update(
            assignment.assignment_id, values
        )

    async def complete_assignment(
        self, assignment: LessonAssignment, score: int, time_spent: int
    ) -> LessonAssignment:
        now = datetime.now(timezone.utc)
        completed = await self.assignment_repository.update(
            assignment.assignment_id,
            {
                'status': AssignmentStatus.COMPLETED,
                'score': _clamp(score, MIN_SCORE, MAX_SCORE),
                'progress': MAX_PROGRESS,
                'time_spent': max(0, time_spent),
                'completed_at': now,
                'updated_at': now,
            },
        )
        logger.info(
            f'Student {assignment.student_id} completed lesson '
            f'{assignment.lesson_id} with score {completed.score}'
        )
        return completed

    async def complete_lesson(
        self, student_id: str, lesson_id: str, score: int, time_spent: int
    ) -> LessonAssignment:
        assignment = await self.get_assignment(student_id, lesson_id)
        return await self.complete_assignment(assignment, score, time_spent)

    async def cleanup_orphaned_assignments(
        self, student_id: str
    ) -> OrphanCleanupResult:
        """
        Deletes the student's assignments whose lesson no longer exists.
        Never called implicitly by get_student_lessons().
        """
        assignments = await self.assignment_repository.get_by_student(
            student_id
        )
        if not assignments:
            return OrphanCleanupResult()

        lessons = await self.lesson_repository.get_by_ids(
            referenced_lesson_ids(assignments)
        )
        orphaned = find_orphaned_assignments(
            assignments, [lesson.lesson_id for lesson in lessons]
        )
        if not orphaned:
            return OrphanCleanupResult(kept_count=len(assignments))

        orphaned_ids = [a.assignment_id for a in orphaned]
        for assignment in orphaned:
            logger.info(
                f'Removing assignment {assignment.assignment_id} -> '
                f'lesson {assignment.lesson_id} '
                f'(assigned {assignment.assigned_at})'
            )
        await self.assignment_repository.delete_many(orphaned_ids)
        ASSIGNMENT_METRICS['orphaned_removed'].inc(len(orphaned_ids))

        return OrphanCleanupResult(
            removed_count=len(orphaned_ids),
            kept_count=len(assignments) - len(orphaned_ids),
            removed_assignment_ids=orphaned_ids,
        )

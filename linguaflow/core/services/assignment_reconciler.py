"""
Joins a learner's assignments with the lesson and tutor records that still
exist.

Dangling references are a data-quality fact, not an error: every
assignment yields exactly one view, in input order, with placeholder
lesson or tutor data where the record is gone. Removing orphaned
assignments is a separate, explicit operation.
"""
from typing import Dict, Iterable, List, Optional, Sequence

from linguaflow.core.consts import (
    UNKNOWN_LESSON_CONTENT,
    UNKNOWN_LESSON_TITLE,
    UNKNOWN_TUTOR_EMAIL,
    UNKNOWN_TUTOR_FIRST_NAME,
    UNKNOWN_TUTOR_ID,
    UNKNOWN_TUTOR_LAST_NAME,
)
from linguaflow.core.entities.lesson import Lesson
from linguaflow.core.entities.lesson_assignment import LessonAssignment
from linguaflow.core.entities.reconciled_assignment import (
    LessonView,
    ReconciledAssignmentView,
    TutorView,
)
from linguaflow.core.entities.user import User

PLACEHOLDER_TUTOR = TutorView(
    first_name=UNKNOWN_TUTOR_FIRST_NAME,
    last_name=UNKNOWN_TUTOR_LAST_NAME,
    email=UNKNOWN_TUTOR_EMAIL,
)


def _unique(ids: Iterable[str]) -> List[str]:
    return list(dict.fromkeys(ids))


def referenced_lesson_ids(
    assignments: Sequence[LessonAssignment],
) -> List[str]:
    return _unique(a.lesson_id for a in assignments)


def referenced_tutor_ids(lessons: Sequence[Lesson]) -> List[str]:
    return _unique(lesson.tutor_id for lesson in lessons)


def find_orphaned_assignments(
    assignments: Sequence[LessonAssignment],
    existing_lesson_ids: Iterable[str],
) -> List[LessonAssignment]:
    existing = set(existing_lesson_ids)
    return [a for a in assignments if a.lesson_id not in existing]


def _tutor_view(tutor: Optional[User]) -> TutorView:
    if tutor is None:
        return PLACEHOLDER_TUTOR.model_copy()
    return TutorView(
        first_name=tutor.first_name or UNKNOWN_TUTOR_FIRST_NAME,
        last_name=tutor.last_name or UNKNOWN_TUTOR_LAST_NAME,
        email=tutor.email or UNKNOWN_TUTOR_EMAIL,
    )


def _lesson_view(
    assignment: LessonAssignment,
    lesson: Optional[Lesson],
    tutor: Optional[User],
) -> LessonView:
    if lesson is None:
        return LessonView(
            lesson_id=assignment.lesson_id,
            title=UNKNOWN_LESSON_TITLE,
            description=None,
            content=UNKNOWN_LESSON_CONTENT,
            created_at=assignment.assigned_at,
            tutor_id=UNKNOWN_TUTOR_ID,
            tutor=PLACEHOLDER_TUTOR.model_copy(),
        )
    return LessonView(
        lesson_id=lesson.lesson_id,
        title=lesson.title or UNKNOWN_LESSON_TITLE,
        description=lesson.description,
        content=lesson.content or UNKNOWN_LESSON_CONTENT,
        created_at=lesson.created_at or assignment.assigned_at,
        tutor_id=lesson.tutor_id,
        tutor=_tutor_view(tutor),
    )


def reconcile_assignments(
    assignments: Sequence[LessonAssignment],
    lessons: Sequence[Lesson],
    tutors: Sequence[User],
) -> List[ReconciledAssignmentView]:
    lessons_by_id: Dict[str, Lesson] = {
        lesson.lesson_id: lesson for lesson in lessons
    }
    tutors_by_id: Dict[str, User] = {t.user_id: t for t in tutors}

    views: List[ReconciledAssignmentView] = []
    for assignment in assignments:
        lesson = lessons_by_id.get(assignment.lesson_id)
        tutor = tutors_by_id.get(lesson.tutor_id) if lesson else None
        views.append(
            ReconciledAssignmentView(
                **assignment.model_dump(),
                lesson=_lesson_view(assignment, lesson, tutor),
                is_orphaned=lesson is None,
                tutor_missing=tutor is None,
            )
        )
    return views

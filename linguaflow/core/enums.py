from enum import Enum


class ExerciseKind(str, Enum):
    MULTIPLE_CHOICE = 'multiple_choice'
    FLASHCARD = 'flashcard'
    TEXT_ANSWER = 'text_answer'


class ExerciseDifficulty(str, Enum):
    BEGINNER = 'beginner'
    INTERMEDIATE = 'intermediate'
    ADVANCED = 'advanced'


class AssignmentStatus(str, Enum):
    ASSIGNED = 'assigned'
    IN_PROGRESS = 'in_progress'
    COMPLETED = 'completed'


class LessonStatus(str, Enum):
    DRAFT = 'draft'
    PUBLISHED = 'published'


class StudentLevel(str, Enum):
    BEGINNER = 'Beginner'
    INTERMEDIATE = 'Intermediate'
    ADVANCED = 'Advanced'


class LockReason(str, Enum):
    ALL_STUDENTS_COMPLETED = 'all_students_completed'

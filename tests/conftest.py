from datetime import datetime, timezone

import pytest

from linguaflow.core.entities.exercise import Exercise
from linguaflow.core.entities.lesson import Lesson
from linguaflow.core.entities.lesson_assignment import LessonAssignment
from linguaflow.core.entities.user import User
from linguaflow.core.enums import AssignmentStatus, ExerciseKind
from linguaflow.core.value_objects.exercise import (
    Flashcard,
    FlashcardExerciseData,
    MultipleChoiceExerciseData,
    TextAnswerExerciseData,
)


@pytest.fixture
def multiple_choice_exercise() -> Exercise:
    return Exercise(
        exercise_id='E1',
        lesson_id='L1',
        kind=ExerciseKind.MULTIPLE_CHOICE,
        prompt='Which article goes with "Haus"?',
        expected_answer='B',
        data=MultipleChoiceExerciseData(options=['der', 'das', 'die']),
        points=10,
        order_number=1,
    )


@pytest.fixture
def flashcard_exercise() -> Exercise:
    return Exercise(
        exercise_id='E2',
        lesson_id='L1',
        kind=ExerciseKind.FLASHCARD,
        prompt='Review the vocabulary',
        data=FlashcardExerciseData(
            cards=[
                Flashcard(front='der Hund', back='the dog'),
                Flashcard(front='die Katze', back='the cat'),
            ]
        ),
        order_number=2,
    )


@pytest.fixture
def text_answer_exercise() -> Exercise:
    return Exercise(
        exercise_id='E3',
        lesson_id='L1',
        kind=ExerciseKind.TEXT_ANSWER,
        prompt='Describe your weekend',
        expected_answer='Am Wochenende habe ich...',
        data=TextAnswerExerciseData(word_limit=100),
        points=5,
        order_number=3,
    )


@pytest.fixture
def tutor() -> User:
    return User(
        user_id='T1',
        first_name='Anna',
        last_name='Nowak',
        email='anna@example.com',
    )


@pytest.fixture
def lesson(tutor: User) -> Lesson:
    return Lesson(
        lesson_id='L1',
        tutor_id=tutor.user_id,
        title='German articles',
        description='der, die, das',
        content='<p>Articles</p>',
        created_at=datetime(2026, 9, 1, tzinfo=timezone.utc),
    )


@pytest.fixture
def make_assignment():
    def _make(
        assignment_id: str = 'A1', lesson_id: str = 'L1', **kwargs
    ) -> LessonAssignment:
        kwargs.setdefault('student_id', 'S1')
        kwargs.setdefault('status', AssignmentStatus.ASSIGNED)
        kwargs.setdefault(
            'assigned_at', datetime(2026, 10, 1, tzinfo=timezone.utc)
        )
        return LessonAssignment(
            assignment_id=assignment_id, lesson_id=lesson_id, **kwargs
        )

    return _make


@pytest.fixture
def assignment(make_assignment) -> LessonAssignment:
    return make_assignment()

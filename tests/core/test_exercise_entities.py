import pytest
from pydantic import ValidationError

from linguaflow.core.entities.exercise import Exercise
from linguaflow.core.enums import ExerciseKind
from linguaflow.core.value_objects.exercise import (
    FlashcardExerciseData,
    MultipleChoiceExerciseData,
    TextAnswerExerciseData,
    create_exercise_data,
)


@pytest.mark.parametrize(
    'kind, data_class',
    [
        (ExerciseKind.MULTIPLE_CHOICE, MultipleChoiceExerciseData),
        (ExerciseKind.FLASHCARD, FlashcardExerciseData),
        (ExerciseKind.TEXT_ANSWER, TextAnswerExerciseData),
    ],
)
def test_missing_data_is_built_from_kind(kind, data_class):
    exercise = Exercise(exercise_id='E1', kind=kind)
    assert isinstance(exercise.data, data_class)


def test_data_must_match_kind():
    with pytest.raises(ValidationError):
        Exercise(
            exercise_id='E1',
            kind=ExerciseKind.MULTIPLE_CHOICE,
            data=FlashcardExerciseData(),
        )


def test_data_is_parsed_by_discriminator():
    exercise = Exercise.model_validate(
        {
            'exercise_id': 'E1',
            'kind': 'multiple_choice',
            'data': {
                'type': 'MultipleChoiceExerciseData',
                'options': ['a', 'b'],
            },
        }
    )
    assert exercise.data.options == ['a', 'b']


def test_null_columns_are_normalized():
    exercise = Exercise(
        exercise_id='E1',
        kind=ExerciseKind.TEXT_ANSWER,
        prompt=None,
        expected_answer=None,
        points=None,
    )
    assert exercise.prompt == ''
    assert exercise.expected_answer == ''
    assert exercise.points == 0


def test_negative_points_are_rejected():
    with pytest.raises(ValidationError):
        Exercise(
            exercise_id='E1', kind=ExerciseKind.MULTIPLE_CHOICE, points=-1
        )


def test_create_exercise_data_decodes_json_options():
    data = create_exercise_data(
        'flashcard', '[{"front": "der Hund", "back": "the dog"}]'
    )
    assert isinstance(data, FlashcardExerciseData)
    assert data.cards[0].front == 'der Hund'
    assert data.cards[0].back == 'the dog'


def test_create_exercise_data_accepts_lists():
    data = create_exercise_data(ExerciseKind.MULTIPLE_CHOICE, ['a', 1])
    assert data.options == ['a', '1']


def test_create_exercise_data_ignores_broken_json():
    data = create_exercise_data('multiple_choice', '[not json')
    assert data.options == []


def test_create_exercise_data_for_text_answer():
    assert create_exercise_data('text_answer', word_limit=150).word_limit == (
        150
    )
    assert create_exercise_data('text_answer').word_limit is None


def test_create_exercise_data_rejects_unknown_kind():
    with pytest.raises(ValueError):
        create_exercise_data('essay')

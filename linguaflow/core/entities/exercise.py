from typing import Any, Optional

from pydantic import BaseModel, Field, field_validator, model_validator

from linguaflow.core.consts import (
    DEFAULT_DURATION_MINUTES,
    MAX_DURATION_MINUTES,
    MIN_DURATION_MINUTES,
)
from linguaflow.core.enums import ExerciseDifficulty, ExerciseKind
from linguaflow.core.value_objects.exercise import (
    EXERCISE_DATA_BY_KIND,
    AnyExerciseData,
    create_exercise_data,
)


class Exercise(BaseModel):
    exercise_id: str = Field(description='Exercise ID')
    lesson_id: Optional[str] = Field(
        default=None, description='Lesson the exercise belongs to'
    )
    kind: ExerciseKind = Field(description='Kind of exercise')
    prompt: str = Field(default='', description='Question text')
    expected_answer: str = Field(
        default='',
        description=(
            'Option letter for multiple choice, sample answer for text '
            'answers, unused for flashcards'
        ),
    )
    data: AnyExerciseData = Field(description='Kind specific payload')
    points: int = Field(default=0, ge=0, description='Weight in the score')
    explanation: Optional[str] = Field(
        default=None, description='Rationale shown after grading'
    )
    order_number: int = Field(default=0, description='Position in lesson')
    difficulty_level: ExerciseDifficulty = Field(
        default=ExerciseDifficulty.BEGINNER
    )
    estimated_duration_minutes: int = Field(
        default=DEFAULT_DURATION_MINUTES,
        ge=MIN_DURATION_MINUTES,
        le=MAX_DURATION_MINUTES,
    )

    @model_validator(mode='before')
    @classmethod
    def build_missing_data(cls, values: Any) -> Any:
        if (
            isinstance(values, dict)
            and values.get('data') is None
            and values.get('kind') is not None
        ):
            values = {**values, 'data': create_exercise_data(values['kind'])}
        return values

    @field_validator('expected_answer', 'prompt', mode='before')
    @classmethod
    def none_to_empty_string(cls, value: Any) -> Any:
        return '' if value is None else value

    @field_validator('points', mode='before')
    @classmethod
    def none_to_zero_points(cls, value: Any) -> Any:
        return 0 if value is None else value

    @model_validator(mode='after')
    def check_data_matches_kind(self) -> 'Exercise':
        expected_data = EXERCISE_DATA_BY_KIND[self.kind]
        if not isinstance(self.data, expected_data):
            raise ValueError(
                f'Exercise of kind "{self.kind.value}" '
                f'cannot carry {self.data.type}'
            )
        return self

    def __str__(self):
        return (
            f'Exercise(exercise_id={self.exercise_id}, '
            f'kind={self.kind.value}, '
            f'points={self.points}, '
            f'prompt={self.prompt})'
        )

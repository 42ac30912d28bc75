from linguaflow.core.entities.exercise import Exercise
from linguaflow.core.enums import ExerciseKind
from linguaflow.core.interfaces.exercise_type import ExerciseType


class MultipleChoiceExerciseType(ExerciseType):
    def grade(self, exercise: Exercise, raw_answer: str) -> bool:
        # Exact, case-sensitive match on the option letter.
        return raw_answer.strip() == exercise.expected_answer.strip()

    def get_exercise_kind(self) -> ExerciseKind:
        return ExerciseKind.MULTIPLE_CHOICE

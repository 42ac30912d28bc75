from linguaflow.core.entities.exercise import Exercise
from linguaflow.core.enums import ExerciseKind
from linguaflow.core.interfaces.exercise_type import ExerciseType


class TextAnswerExerciseType(ExerciseType):
    def grade(self, exercise: Exercise, raw_answer: str) -> bool:
        """
        Free text is provisionally accepted. The True returned here only
        schedules the answer for tutor review; it must not be shown to the
        learner as "graded" or "correct".
        """
        return True

    def get_exercise_kind(self) -> ExerciseKind:
        return ExerciseKind.TEXT_ANSWER

    def needs_review(self) -> bool:
        return True

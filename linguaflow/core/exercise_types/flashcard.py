from linguaflow.core.entities.exercise import Exercise
from linguaflow.core.enums import ExerciseKind
from linguaflow.core.interfaces.exercise_type import ExerciseType


class FlashcardExerciseType(ExerciseType):
    def grade(self, exercise: Exercise, raw_answer: str) -> bool:
        """
        A flashcard set counts as done once the learner wrote any summary.
        This measures engagement, the cards themselves are not checked.
        """
        return len(raw_answer.strip()) > 0

    def get_exercise_kind(self) -> ExerciseKind:
        return ExerciseKind.FLASHCARD

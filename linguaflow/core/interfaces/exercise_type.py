from abc import ABC, abstractmethod

from linguaflow.core.entities.exercise import Exercise
from linguaflow.core.enums import ExerciseKind


class ExerciseType(ABC):
    @abstractmethod
    def grade(self, exercise: Exercise, raw_answer: str) -> bool:
        pass

    @abstractmethod
    def get_exercise_kind(self) -> ExerciseKind:
        pass

    def needs_review(self) -> bool:
        """Whether a tutor has to confirm the verdict of grade()."""
        return False

    def is_gradable(self) -> bool:
        return not self.needs_review()

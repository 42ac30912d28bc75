from linguaflow.core.enums import ExerciseKind
from linguaflow.core.exercise_types.flashcard import FlashcardExerciseType
from linguaflow.core.exercise_types.multiple_choice import (
    MultipleChoiceExerciseType,
)
from linguaflow.core.exercise_types.text_answer import TextAnswerExerciseType
from linguaflow.core.factories.exercise_factory import ExerciseTypeFactory

# Register exercise types
ExerciseTypeFactory.register_exercise_type(
    kind=ExerciseKind.MULTIPLE_CHOICE.value,
    handler=MultipleChoiceExerciseType,
)
ExerciseTypeFactory.register_exercise_type(
    kind=ExerciseKind.FLASHCARD.value,
    handler=FlashcardExerciseType,
)
ExerciseTypeFactory.register_exercise_type(
    kind=ExerciseKind.TEXT_ANSWER.value,
    handler=TextAnswerExerciseType,
)

__all__ = ['ExerciseTypeFactory']

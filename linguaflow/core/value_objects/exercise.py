from __future__ import annotations

import json
import logging
from typing import Annotated, Any, Dict, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from linguaflow.core.enums import ExerciseKind

logger = logging.getLogger(__name__)


class ExerciseData(BaseModel):
    model_config = ConfigDict(
        populate_by_name=True,
    )


class MultipleChoiceExerciseData(ExerciseData):
    type: Literal['MultipleChoiceExerciseData'] = Field(
        default='MultipleChoiceExerciseData',
        description='Type of exercise data',
    )
    options: List[str] = Field(
        default_factory=list, description='Ordered answer options'
    )


class Flashcard(BaseModel):
    front: str = Field(description='Front side of the card')
    back: str = Field(description='Back side of the card')


class FlashcardExerciseData(ExerciseData):
    type: Literal['FlashcardExerciseData'] = Field(
        default='FlashcardExerciseData',
        description='Type of exercise data',
    )
    cards: List[Flashcard] = Field(
        default_factory=list, description='Cards to review'
    )


class TextAnswerExerciseData(ExerciseData):
    type: Literal['TextAnswerExerciseData'] = Field(
        default='TextAnswerExerciseData',
        description='Type of exercise data',
    )
    word_limit: Optional[int] = Field(
        default=None, ge=1, description='Maximum number of words'
    )


AnyExerciseData = Annotated[
    Union[
        MultipleChoiceExerciseData,
        FlashcardExerciseData,
        TextAnswerExerciseData,
    ],
    Field(discriminator='type'),
]

EXERCISE_DATA_BY_KIND: Dict[ExerciseKind, type] = {
    ExerciseKind.MULTIPLE_CHOICE: MultipleChoiceExerciseData,
    ExerciseKind.FLASHCARD: FlashcardExerciseData,
    ExerciseKind.TEXT_ANSWER: TextAnswerExerciseData,
}


def _decode_options(raw_options: Any) -> Any:
    if not isinstance(raw_options, str):
        return raw_options
    try:
        return json.loads(raw_options)
    except json.JSONDecodeError:
        logger.warning(f'Could not decode exercise options: {raw_options!r}')
        return None


def create_exercise_data(
    kind: Union[ExerciseKind, str],
    raw_options: Any = None,
    word_limit: Optional[int] = None,
) -> ExerciseData:
    """
    Builds the data payload matching the exercise kind from the options
    column as the hosted backend stores it: a list, a JSON-encoded list,
    or nothing at all.
    """
    exercise_kind = ExerciseKind(kind)
    options = _decode_options(raw_options)
    if not isinstance(options, list):
        options = []

    if exercise_kind == ExerciseKind.MULTIPLE_CHOICE:
        return MultipleChoiceExerciseData(
            options=[str(option) for option in options]
        )
    if exercise_kind == ExerciseKind.FLASHCARD:
        cards = [
            Flashcard(
                front=str(card.get('front', '')),
                back=str(card.get('back', '')),
            )
            for card in options
            if isinstance(card, dict)
        ]
        return FlashcardExerciseData(cards=cards)
    return TextAnswerExerciseData(word_limit=word_limit or None)

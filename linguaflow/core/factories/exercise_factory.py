from typing import Dict, Type, Union

from linguaflow.core.enums import ExerciseKind
from linguaflow.core.interfaces.exercise_type import ExerciseType


class ExerciseTypeFactory:
    _exercise_types: Dict[str, Type[ExerciseType]] = {}

    @classmethod
    def register_exercise_type(
        cls, kind: str, handler: Type[ExerciseType]
    ) -> None:
        cls._exercise_types[kind] = handler

    @classmethod
    def get_handler(cls, kind: Union[ExerciseKind, str]) -> ExerciseType:
        key = kind.value if isinstance(kind, ExerciseKind) else kind
        if key not in cls._exercise_types:
            raise ValueError(f'Unknown exercise kind: {key}')

        return cls._exercise_types[key]()

    @classmethod
    def registered_kinds(cls) -> set:
        return set(cls._exercise_types)

from typing import Optional

from pydantic import BaseModel, Field

from linguaflow.core.consts import MAX_SCORE, MIN_SCORE


class GradeSubmissionSchema(BaseModel):
    tutor_id: str = Field(description='Tutor assigning the grade')
    score: int = Field(ge=MIN_SCORE, le=MAX_SCORE)
    feedback: Optional[str] = Field(default=None)

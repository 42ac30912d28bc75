from typing import Dict, List, Optional

from pydantic import BaseModel, Field

from linguaflow.core.entities.submitted_answer import SubmittedAnswer


class AttemptSubmissionSchema(BaseModel):
    answers: Dict[str, Optional[str]] = Field(
        default_factory=dict,
        description='Raw answers keyed by exercise ID',
    )
    time_spent: int = Field(default=0, ge=0, description='Minutes')


class AttemptResultSchema(BaseModel):
    score: int = Field(description='Aggregated score, 0-100')
    awaiting_review: bool = Field(
        description=(
            'Score is provisional: text answers wait for a tutor, or '
            'nothing in the attempt could be auto-graded'
        )
    )
    answers: List[SubmittedAnswer] = Field(default_factory=list)

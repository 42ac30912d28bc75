from typing import Optional

from pydantic import BaseModel, Field


class ProgressUpdateSchema(BaseModel):
    progress: int = Field(description='Progress percent, clamped to 0-100')
    time_spent: Optional[int] = Field(default=None, description='Minutes')

from typing import Optional

from pydantic import BaseModel, Field


class User(BaseModel):
    user_id: str = Field(description='User ID')
    first_name: str = Field(default='')
    last_name: str = Field(default='')
    email: Optional[str] = Field(default='')

    @property
    def full_name(self) -> str:
        return f'{self.first_name} {self.last_name}'.strip()

from abc import ABC, abstractmethod
from typing import List, Sequence

from linguaflow.core.entities.user import User


class UserRepository(ABC):
    @abstractmethod
    async def get_by_ids(self, user_ids: Sequence[str]) -> List[User]:
        """Returns the subset of the requested users that still exist."""
        raise NotImplementedError

from typing import List, Sequence

from linguaflow.backend.client import BackendClient
from linguaflow.core.entities.user import User
from linguaflow.core.repositories.user import UserRepository

TABLE = 'users'
COLUMNS = 'id,first_name,last_name,email'


class RestUserRepository(UserRepository):
    def __init__(self, client: BackendClient):
        self.client = client

    async def get_by_ids(self, user_ids: Sequence[str]) -> List[User]:
        rows = await self.client.select_in(
            TABLE, 'id', user_ids, columns=COLUMNS
        )
        return [
            User(
                user_id=str(row['id']),
                first_name=row.get('first_name') or '',
                last_name=row.get('last_name') or '',
                email=row.get('email') or '',
            )
            for row in rows
        ]

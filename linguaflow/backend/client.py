import logging
from typing import Any, Dict, Iterable, List, Optional

import httpx
from pydantic_core import to_jsonable_python

from linguaflow.config import settings
from linguaflow.core.errors import BackendError

logger = logging.getLogger(__name__)

REST_PREFIX = '/rest/v1'


def eq(value: Any) -> str:
    return f'eq.{value}'


def in_(values: Iterable[Any]) -> str:
    quoted = ','.join(
        '"{}"'.format(str(v).replace('"', '\\"')) for v in values
    )
    return f'in.({quoted})'


class BackendClient:
    """
    Async client for the hosted backend's PostgREST-style REST API.

    Bulk lookups by id return whatever subset of the rows still exists;
    callers must not treat a shorter result as an error.
    """

    def __init__(
        self,
        http_client: httpx.AsyncClient,
        base_url: str = settings.backend_url,
        api_key: str = settings.backend_api_key,
        timeout: float = settings.backend_timeout_seconds,
    ):
        if not base_url:
            logger.error('BACKEND_URL is not set for BackendClient')
            raise ValueError('BACKEND_URL is not set for BackendClient')
        self.http_client = http_client
        self.base_url = base_url.rstrip('/')
        self.api_key = api_key
        self.timeout = timeout

    def _headers(self, prefer: Optional[str] = None) -> Dict[str, str]:
        headers = {
            'apikey': self.api_key,
            'Authorization': f'Bearer {self.api_key}',
            'Accept': 'application/json',
        }
        if prefer:
            headers['Prefer'] = prefer
        return headers

    async def _request(
        self,
        method: str,
        path: str,
        params: Optional[Dict[str, str]] = None,
        payload: Any = None,
        prefer: Optional[str] = None,
    ) -> Any:
        url = f'{self.base_url}{REST_PREFIX}/{path}'
        try:
            response = await self.http_client.request(
                method,
                url,
                params=params,
                json=(
                    to_jsonable_python(payload)
                    if payload is not None
                    else None
                ),
                headers=self._headers(prefer),
                timeout=self.timeout,
            )
        except httpx.HTTPError as e:
            logger.error(f'Backend request {method} {path} failed: {e}')
            raise BackendError(
                f'Backend request {method} {path} failed: {e}'
            ) from e

        if response.is_error:
            logger.error(
                f'Backend returned {response.status_code} for '
                f'{method} {path}: {response.text}'
            )
            raise BackendError(
                f'Backend returned {response.status_code} for '
                f'{method} {path}',
                status_code=response.status_code,
                body=response.text,
            )

        if not response.content:
            return []
        return response.json()

    async def select(
        self,
        table: str,
        filters: Optional[Dict[str, str]] = None,
        columns: str = '*',
        order: Optional[str] = None,
        limit: Optional[int] = None,
    ) -> List[Dict[str, Any]]:
        params: Dict[str, str] = {'select': columns, **(filters or {})}
        if order:
            params['order'] = order
        if limit is not None:
            params['limit'] = str(limit)
        return await self._request('GET', table, params=params)

    async def select_in(
        self,
        table: str,
        column: str,
        values: Iterable[Any],
        columns: str = '*',
    ) -> List[Dict[str, Any]]:
        values = list(values)
        if not values:
            return []
        return await self.select(
            table, filters={column: in_(values)}, columns=columns
        )

    async def insert(
        self, table: str, rows: List[Dict[str, Any]]
    ) -> List[Dict[str, Any]]:
        if not rows:
            return []
        return await self._request(
            'POST', table, payload=rows, prefer='return=representation'
        )

    async def update(
        self, table: str, filters: Dict[str, str], values: Dict[str, Any]
    ) -> List[Dict[str, Any]]:
        return await self._request(
            'PATCH',
            table,
            params=filters,
            payload=values,
            prefer='return=representation',
        )

    async def delete(self, table: str, filters: Dict[str, str]) -> None:
        await self._request('DELETE', table, params=filters)

    async def rpc(self, function: str, params: Dict[str, Any]) -> Any:
        return await self._request('POST', f'rpc/{function}', payload=params)

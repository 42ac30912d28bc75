import json
from typing import Any, AsyncGenerator, Callable, List

import httpx
import pytest
import pytest_asyncio

from linguaflow.backend.client import BackendClient


class FakeBackend:
    """Records requests and answers them from a queue of responses."""

    def __init__(self):
        self.requests: List[httpx.Request] = []
        self.responses: List[Any] = []

    def respond_with(self, *responses: Any) -> None:
        self.responses.extend(responses)

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        response = self.responses.pop(0) if self.responses else []
        if isinstance(response, Exception):
            raise response
        if isinstance(response, httpx.Response):
            return response
        return httpx.Response(200, json=response)

    @property
    def last_request(self) -> httpx.Request:
        return self.requests[-1]

    def last_payload(self) -> Any:
        return json.loads(self.last_request.content)


@pytest.fixture
def fake_backend() -> FakeBackend:
    return FakeBackend()


@pytest_asyncio.fixture
async def backend_client(
    fake_backend: FakeBackend,
) -> AsyncGenerator[BackendClient, None]:
    async with httpx.AsyncClient(
        transport=httpx.MockTransport(fake_backend.handler)
    ) as http_client:
        yield BackendClient(
            http_client=http_client,
            base_url='http://backend.test/',
            api_key='test-key',
        )


@pytest.fixture
def make_repository(backend_client: BackendClient) -> Callable:
    def _make(repository_class):
        return repository_class(backend_client)

    return _make

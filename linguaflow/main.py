import logging
from contextlib import asynccontextmanager
from typing import Any, AsyncGenerator

import httpx
from fastapi import FastAPI
from prometheus_fastapi_instrumentator import Instrumentator

from linguaflow.api.v1.api import api_router
from linguaflow.backend.client import BackendClient
from linguaflow.config import settings
from linguaflow.logging_config import configure_logging
from linguaflow.sentry_sdk import sentry_init

configure_logging()

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, Any]:
    if not settings.debug:
        sentry_init()

    app.state.http_client = httpx.AsyncClient()
    app.state.backend_client = BackendClient(
        http_client=app.state.http_client
    )

    logger.info('Application startup complete.')
    yield

    logger.info('Application shutdown initiated.')
    if hasattr(app.state, 'http_client') and app.state.http_client:
        await app.state.http_client.aclose()

    logger.info('Application shutdown complete.')


app = FastAPI(title='LinguaFlow API', lifespan=lifespan)

Instrumentator().instrument(app).expose(app)

app.include_router(api_router, prefix='/api/v1')


if __name__ == '__main__':
    import uvicorn

    uvicorn.run('linguaflow.main:app', reload=True)

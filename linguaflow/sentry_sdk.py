import logging

import sentry_sdk
from fastapi import HTTPException
from sentry_sdk.integrations.asyncio import AsyncioIntegration
from sentry_sdk.integrations.fastapi import FastApiIntegration
from sentry_sdk.integrations.httpx import HttpxIntegration
from sentry_sdk.integrations.logging import LoggingIntegration

from linguaflow.config import settings

logger = logging.getLogger(__name__)


def _drop_client_errors(event, hint):
    # 4xx responses are expected outcomes (unknown lesson, bad grade)
    exc_info = hint.get('exc_info')
    if exc_info and isinstance(exc_info[1], HTTPException):
        if exc_info[1].status_code < 500:
            return None
    return event


def sentry_init():
    if not settings.sentry_dsn:
        logger.info('Sentry is disabled')
        return

    logger.info(f'Sentry is enabled for {settings.sentry_environment}')
    sentry_sdk.init(
        dsn=settings.sentry_dsn,
        integrations=[
            LoggingIntegration(event_level=logging.ERROR),
            FastApiIntegration(),
            HttpxIntegration(),
            AsyncioIntegration(),
        ],
        traces_sample_rate=settings.sentry_traces_sample_rate,
        environment=settings.sentry_environment,
        before_send=_drop_client_errors,
        send_default_pii=False,
    )

from typing import AsyncGenerator
from unittest.mock import AsyncMock, create_autospec

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from linguaflow.api.dependencies import (
    get_lesson_attempt_service,
    get_lesson_lock_service,
    get_student_lesson_service,
)
from linguaflow.core.services.lesson_attempt import LessonAttemptService
from linguaflow.core.services.lesson_lock import LessonLockService
from linguaflow.core.services.student_lessons import StudentLessonService
from linguaflow.main import app


@pytest.fixture
def mock_student_lesson_service() -> StudentLessonService:
    service = create_autospec(StudentLessonService, instance=True)
    service.get_student_lessons = AsyncMock()
    service.search_student_lessons = AsyncMock()
    service.get_stats = AsyncMock()
    service.start_lesson = AsyncMock()
    service.update_progress = AsyncMock()
    service.cleanup_orphaned_assignments = AsyncMock()
    return service


@pytest.fixture
def mock_lesson_attempt_service() -> LessonAttemptService:
    service = create_autospec(LessonAttemptService, instance=True)
    service.submit_attempt = AsyncMock()
    service.grade_text_answer = AsyncMock()
    service.get_pending_gradings = AsyncMock()
    return service


@pytest.fixture
def mock_lesson_lock_service() -> LessonLockService:
    service = create_autospec(LessonLockService, instance=True)
    service.get_lock_status = AsyncMock()
    return service


@pytest_asyncio.fixture
async def async_client(
    mock_student_lesson_service,
    mock_lesson_attempt_service,
    mock_lesson_lock_service,
) -> AsyncGenerator[AsyncClient, None]:
    app.dependency_overrides[get_student_lesson_service] = (
        lambda: mock_student_lesson_service
    )
    app.dependency_overrides[get_lesson_attempt_service] = (
        lambda: mock_lesson_attempt_service
    )
    app.dependency_overrides[get_lesson_lock_service] = (
        lambda: mock_lesson_lock_service
    )
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url='http://test'
    ) as ac:
        yield ac
    app.dependency_overrides.clear()

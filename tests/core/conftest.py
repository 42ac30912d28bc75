from unittest.mock import AsyncMock

import pytest

from linguaflow.core.services.student_lessons import StudentLessonService


@pytest.fixture
def mock_assignment_repository() -> AsyncMock:
    return AsyncMock()


@pytest.fixture
def mock_lesson_repository() -> AsyncMock:
    return AsyncMock()


@pytest.fixture
def mock_user_repository() -> AsyncMock:
    return AsyncMock()


@pytest.fixture
def mock_exercise_repository() -> AsyncMock:
    return AsyncMock()


@pytest.fixture
def mock_answer_repository() -> AsyncMock:
    return AsyncMock()


@pytest.fixture
def student_lesson_service(
    mock_assignment_repository: AsyncMock,
    mock_lesson_repository: AsyncMock,
    mock_user_repository: AsyncMock,
) -> StudentLessonService:
    return StudentLessonService(
        assignment_repository=mock_assignment_repository,
        lesson_repository=mock_lesson_repository,
        user_repository=mock_user_repository,
    )


@pytest.fixture
def apply_update():
    """Side effect for repository.update() echoing the patched entity."""

    def _factory(entity):
        def _update(entity_id, values):
            return entity.model_copy(update=values)

        return _update

    return _factory

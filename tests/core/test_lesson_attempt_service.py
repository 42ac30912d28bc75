from unittest.mock import AsyncMock

import pytest

from linguaflow.core.entities.pending_grading import PendingGrading
from linguaflow.core.entities.submitted_answer import SubmittedAnswer
from linguaflow.core.enums import AssignmentStatus
from linguaflow.core.errors import (
    AnswerNotFoundError,
    AssignmentNotFoundError,
    InvalidGradeError,
    LessonNotFoundError,
)
from linguaflow.core.services.lesson_attempt import LessonAttemptService

pytestmark = pytest.mark.asyncio


@pytest.fixture
def lesson_attempt_service(
    mock_exercise_repository: AsyncMock,
    mock_answer_repository: AsyncMock,
    mock_lesson_repository: AsyncMock,
    student_lesson_service,
) -> LessonAttemptService:
    return LessonAttemptService(
        exercise_repository=mock_exercise_repository,
        answer_repository=mock_answer_repository,
        lesson_repository=mock_lesson_repository,
        student_lesson_service=student_lesson_service,
    )


@pytest.fixture
def stored_answers(mock_answer_repository: AsyncMock):
    async def _create_many(answers):
        return [
            answer.model_copy(update={'answer_id': f'ANS{index}'})
            for index, answer in enumerate(answers, start=1)
        ]

    mock_answer_repository.create_many.side_effect = _create_many
    return mock_answer_repository


@pytest.fixture
def pending_answer() -> SubmittedAnswer:
    return SubmittedAnswer(
        answer_id='ANS3',
        exercise_id='E3',
        student_id='S1',
        value='Ich war im Kino.',
        is_correct=True,
        needs_grading=True,
    )


async def test_submit_attempt_grades_stores_and_completes(
    lesson_attempt_service: LessonAttemptService,
    mock_exercise_repository: AsyncMock,
    mock_assignment_repository: AsyncMock,
    stored_answers: AsyncMock,
    multiple_choice_exercise,
    flashcard_exercise,
    text_answer_exercise,
    assignment,
    apply_update,
):
    mock_exercise_repository.get_by_lesson.return_value = [
        text_answer_exercise,
        flashcard_exercise,
        multiple_choice_exercise,
    ]
    mock_assignment_repository.get_for_student_lesson.return_value = (
        assignment
    )
    mock_assignment_repository.update.side_effect = apply_update(assignment)

    result = await lesson_attempt_service.submit_attempt(
        'S1',
        'L1',
        {'E1': 'B', 'E2': 'done', 'E3': 'my essay'},
        time_spent=12,
    )

    assert result.score == 100
    assert result.awaiting_review is True
    assert [a.exercise_id for a in result.answers] == ['E1', 'E2', 'E3']
    assert [a.answer_id for a in result.answers] == ['ANS1', 'ANS2', 'ANS3']
    assert result.answers[2].needs_grading is True

    assignment_id, values = mock_assignment_repository.update.call_args.args
    assert assignment_id == 'A1'
    assert values['status'] == AssignmentStatus.COMPLETED
    assert values['score'] == 100
    assert values['time_spent'] == 12


async def test_submit_attempt_with_wrong_answer(
    lesson_attempt_service: LessonAttemptService,
    mock_exercise_repository: AsyncMock,
    mock_assignment_repository: AsyncMock,
    stored_answers: AsyncMock,
    multiple_choice_exercise,
    assignment,
    apply_update,
):
    mock_exercise_repository.get_by_lesson.return_value = [
        multiple_choice_exercise
    ]
    mock_assignment_repository.get_for_student_lesson.return_value = (
        assignment
    )
    mock_assignment_repository.update.side_effect = apply_update(assignment)

    result = await lesson_attempt_service.submit_attempt('S1', 'L1', {})

    assert result.score == 0
    assert result.awaiting_review is False
    assert result.answers[0].value == ''


async def test_submit_attempt_for_lesson_without_exercises(
    lesson_attempt_service: LessonAttemptService,
    mock_exercise_repository: AsyncMock,
    mock_assignment_repository: AsyncMock,
    mock_lesson_repository: AsyncMock,
    mock_answer_repository: AsyncMock,
    assignment,
    lesson,
    apply_update,
):
    mock_exercise_repository.get_by_lesson.return_value = []
    mock_lesson_repository.get_by_id.return_value = lesson
    mock_assignment_repository.get_for_student_lesson.return_value = (
        assignment
    )
    mock_assignment_repository.update.side_effect = apply_update(assignment)

    result = await lesson_attempt_service.submit_attempt('S1', 'L1', {})

    assert result.score == 100
    assert result.awaiting_review is True
    assert result.answers == []
    mock_answer_repository.create_many.assert_not_awaited()


async def test_submit_attempt_for_missing_lesson(
    lesson_attempt_service: LessonAttemptService,
    mock_exercise_repository: AsyncMock,
    mock_assignment_repository: AsyncMock,
    mock_lesson_repository: AsyncMock,
    assignment,
):
    mock_exercise_repository.get_by_lesson.return_value = []
    mock_lesson_repository.get_by_id.return_value = None
    mock_assignment_repository.get_for_student_lesson.return_value = (
        assignment
    )

    with pytest.raises(LessonNotFoundError):
        await lesson_attempt_service.submit_attempt('S1', 'L9', {})
    mock_assignment_repository.update.assert_not_awaited()


async def test_submit_attempt_without_assignment(
    lesson_attempt_service: LessonAttemptService,
    mock_assignment_repository: AsyncMock,
    mock_exercise_repository: AsyncMock,
):
    mock_assignment_repository.get_for_student_lesson.return_value = None

    with pytest.raises(AssignmentNotFoundError):
        await lesson_attempt_service.submit_attempt('S1', 'L1', {})
    mock_exercise_repository.get_by_lesson.assert_not_awaited()


async def test_grade_text_answer(
    lesson_attempt_service: LessonAttemptService,
    mock_answer_repository: AsyncMock,
    pending_answer: SubmittedAnswer,
    apply_update,
):
    mock_answer_repository.get_by_id.return_value = pending_answer
    mock_answer_repository.update.side_effect = apply_update(pending_answer)

    graded = await lesson_attempt_service.grade_text_answer(
        'ANS3', 'T1', 85, feedback='Gut gemacht'
    )

    assert graded.tutor_score == 85
    assert graded.tutor_feedback == 'Gut gemacht'
    assert graded.graded_by == 'T1'
    assert graded.graded_at is not None
    assert graded.needs_grading is False
    assert graded.is_correct is True


@pytest.mark.parametrize(
    'score, expected_correct',
    [(0, False), (20, False), (49, False), (50, True)],
)
async def test_tutor_score_replaces_provisional_verdict(
    lesson_attempt_service: LessonAttemptService,
    mock_answer_repository: AsyncMock,
    pending_answer: SubmittedAnswer,
    apply_update,
    score,
    expected_correct,
):
    mock_answer_repository.get_by_id.return_value = pending_answer
    mock_answer_repository.update.side_effect = apply_update(pending_answer)

    graded = await lesson_attempt_service.grade_text_answer(
        'ANS3', 'T1', score
    )

    _, values = mock_answer_repository.update.call_args.args
    assert values['is_correct'] is expected_correct
    assert graded.is_correct is expected_correct
    assert graded.tutor_score == score


@pytest.mark.parametrize('score', [-1, 101])
async def test_grade_text_answer_rejects_out_of_range_score(
    lesson_attempt_service: LessonAttemptService,
    mock_answer_repository: AsyncMock,
    score,
):
    with pytest.raises(InvalidGradeError):
        await lesson_attempt_service.grade_text_answer('ANS3', 'T1', score)
    mock_answer_repository.update.assert_not_awaited()


async def test_grade_text_answer_not_found(
    lesson_attempt_service: LessonAttemptService,
    mock_answer_repository: AsyncMock,
):
    mock_answer_repository.get_by_id.return_value = None

    with pytest.raises(AnswerNotFoundError):
        await lesson_attempt_service.grade_text_answer('ANS3', 'T1', 50)


async def test_grade_text_answer_already_graded(
    lesson_attempt_service: LessonAttemptService,
    mock_answer_repository: AsyncMock,
    pending_answer: SubmittedAnswer,
):
    mock_answer_repository.get_by_id.return_value = pending_answer.model_copy(
        update={'needs_grading': False}
    )

    with pytest.raises(InvalidGradeError):
        await lesson_attempt_service.grade_text_answer('ANS3', 'T1', 50)
    mock_answer_repository.update.assert_not_awaited()


async def test_get_pending_gradings(
    lesson_attempt_service: LessonAttemptService,
    mock_answer_repository: AsyncMock,
):
    pending = PendingGrading(
        answer_id='ANS3',
        student_id='S1',
        exercise_id='E3',
        lesson_id='L1',
        tutor_id='T1',
    )
    mock_answer_repository.get_pending_for_tutor.return_value = [pending]

    assert await lesson_attempt_service.get_pending_gradings('T1') == [
        pending
    ]
    mock_answer_repository.get_pending_for_tutor.assert_awaited_once_with(
        'T1'
    )

from typing import Optional


class LinguaFlowError(Exception):
    pass


class LessonNotFoundError(LinguaFlowError):
    pass


class AssignmentNotFoundError(LinguaFlowError):
    pass


class AnswerNotFoundError(LinguaFlowError):
    pass


class InvalidGradeError(LinguaFlowError):
    pass


class BackendError(LinguaFlowError):
    """Raised when the hosted backend rejects or fails a request."""

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        body: Optional[str] = None,
    ):
        super().__init__(message)
        self.status_code = status_code
        self.body = body

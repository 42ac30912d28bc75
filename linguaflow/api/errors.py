from fastapi import HTTPException, status


class NotFoundError(HTTPException):  # type: ignore
    def __init__(self, detail: str = 'Not Found'):
        super().__init__(status_code=status.HTTP_404_NOT_FOUND, detail=detail)


class BadRequestError(HTTPException):  # type: ignore
    def __init__(self, detail: str = 'Bad Request'):
        super().__init__(
            status_code=status.HTTP_400_BAD_REQUEST, detail=detail
        )


class BadGatewayError(HTTPException):  # type: ignore
    def __init__(self, detail: str = 'Hosted backend unavailable'):
        super().__init__(
            status_code=status.HTTP_502_BAD_GATEWAY, detail=detail
        )

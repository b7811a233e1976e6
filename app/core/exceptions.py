from enum import Enum

from fastapi import Request
from fastapi.responses import JSONResponse

from app.core.logging import get_logger

logger = get_logger(__name__)

SERVER_ERROR_SUBJECT = "Server Error"
CLIENT_ERROR_SUBJECT = "Error"


class ErrorCode(str, Enum):
    """에러 코드 열거형"""

    MISSING_FILE = "MISSING_FILE"
    INVALID_DIFF = "INVALID_DIFF"
    API_KEY_MISSING = "API_KEY_MISSING"
    INSTRUCTIONS_LOAD_FAILED = "INSTRUCTIONS_LOAD_FAILED"
    GENERATION_FAILED = "GENERATION_FAILED"


class CustomException(Exception):
    """subject/description 형태로 응답되는 예외"""

    def __init__(
        self,
        status_code: int,
        error_code: ErrorCode | str,
        subject: str,
        description: str,
    ):
        self.status_code = status_code
        self.error_code = error_code
        self.subject = subject
        self.description = description
        super().__init__(description)


class MissingFileError(CustomException):
    def __init__(self):
        super().__init__(
            status_code=400,
            error_code=ErrorCode.MISSING_FILE,
            subject=CLIENT_ERROR_SUBJECT,
            description="No file provided.",
        )


class InvalidDiffError(CustomException):
    def __init__(self):
        super().__init__(
            status_code=400,
            error_code=ErrorCode.INVALID_DIFF,
            subject=CLIENT_ERROR_SUBJECT,
            description='Invalid diff format. Please upload a git diff starting with "diff --git".',
        )


class ApiKeyMissingError(CustomException):
    def __init__(self):
        super().__init__(
            status_code=500,
            error_code=ErrorCode.API_KEY_MISSING,
            subject=SERVER_ERROR_SUBJECT,
            description="Internal: API key not configured.",
        )


class InstructionsLoadError(CustomException):
    def __init__(self):
        super().__init__(
            status_code=500,
            error_code=ErrorCode.INSTRUCTIONS_LOAD_FAILED,
            subject=SERVER_ERROR_SUBJECT,
            description="Internal: failed to load system instructions.",
        )


class GenerationError(CustomException):
    def __init__(self, detail: str | None = None):
        super().__init__(
            status_code=500,
            error_code=ErrorCode.GENERATION_FAILED,
            subject=SERVER_ERROR_SUBJECT,
            description=detail or "An internal error occurred.",
        )


def register_exception_handlers(app):
    @app.exception_handler(CustomException)
    async def custom_exception_handler(request: Request, exc: CustomException):
        log = logger.warning if exc.status_code < 500 else logger.error
        log(
            "요청 처리 실패",
            error_code=exc.error_code.value if isinstance(exc.error_code, ErrorCode) else exc.error_code,
            status_code=exc.status_code,
            description=exc.description,
        )

        return JSONResponse(
            status_code=exc.status_code,
            content={
                "subject": exc.subject,
                "description": exc.description,
            },
        )

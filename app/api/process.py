from fastapi import APIRouter, Request
from starlette.datastructures import UploadFile
from starlette.exceptions import HTTPException
from starlette.formparsers import MultiPartException

from app.api.schemas import ProcessResponse
from app.core.config import settings
from app.core.context import get_request_id
from app.core.exceptions import (
    ApiKeyMissingError,
    CustomException,
    GenerationError,
    InvalidDiffError,
    MissingFileError,
)
from app.core.logging import get_logger
from app.domain.commit.schemas import DiffSubmission
from app.domain.commit.service import generate_commit_suggestion
from app.domain.commit.validators import decode_diff, is_git_diff

router = APIRouter(tags=["commit"])
logger = get_logger(__name__)

FILE_FIELD = "file"


async def _read_submission(request: Request) -> DiffSubmission:
    """multipart 요청에서 diff 파일을 읽고 형식 검증"""
    try:
        form = await request.form()
    except (HTTPException, MultiPartException) as e:
        logger.warning("multipart 파싱 실패", error=str(e))
        raise MissingFileError() from e

    try:
        upload = form.get(FILE_FIELD)
        if not isinstance(upload, UploadFile):
            raise MissingFileError()

        content = await upload.read()
        submission = DiffSubmission(
            filename=upload.filename,
            content_type=upload.content_type,
            text=decode_diff(content),
        )
    finally:
        await form.close()

    request.state.diff_filename = submission.filename
    request.state.diff_chars = submission.size

    if not is_git_diff(submission.text):
        logger.warning(
            "diff 형식 아님",
            filename=submission.filename,
            content_type=submission.content_type,
        )
        raise InvalidDiffError()

    return submission


@router.post("/process", response_model=ProcessResponse)
async def process_diff(request: Request) -> ProcessResponse:
    if not settings.llm_api_key:
        logger.error("API 키 미설정", provider=settings.llm_provider)
        raise ApiKeyMissingError()

    try:
        submission = await _read_submission(request)
        suggestion = await generate_commit_suggestion(submission, session_id=get_request_id())
    except CustomException:
        raise
    except Exception as e:
        logger.exception("diff 처리 중 예외 발생", error=str(e))
        raise GenerationError(str(e)) from e

    return ProcessResponse(subject=suggestion.subject, description=suggestion.description)

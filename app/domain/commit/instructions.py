import asyncio
from pathlib import Path

from app.core.config import settings
from app.core.exceptions import InstructionsLoadError
from app.core.logging import get_logger

logger = get_logger(__name__)

PROMPT_SEPARATOR = "\n\nDiff:\n"


async def load_instructions(path: Path | None = None) -> str:
    """시스템 지시문 파일을 요청 시점에 읽어 반환"""
    if path is None:
        path = settings.instructions_path

    try:
        return await asyncio.to_thread(path.read_text, encoding="utf-8")
    except OSError as e:
        logger.error("시스템 지시문 로드 실패", path=str(path), error=str(e))
        raise InstructionsLoadError() from e


def build_prompt(instructions: str, diff_text: str) -> str:
    """지시문과 diff 원문을 하나의 프롬프트로 결합"""
    return f"{instructions}{PROMPT_SEPARATOR}{diff_text}"

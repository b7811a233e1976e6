import json
import re

from app.core.logging import get_logger
from app.domain.commit.schemas import CommitSuggestion

logger = get_logger(__name__)

CODE_FENCE_PATTERN = re.compile(r"^```[a-zA-Z0-9_-]*[ \t]*\n?(.*?)\n?```$", re.DOTALL)

PARSE_ERROR_SUBJECT = "Error processing response"
PARSE_ERROR_DESCRIPTION = "Model did not return valid JSON."
MISSING_SUBJECT = "No subject returned"
MISSING_DESCRIPTION = "No description returned"


def strip_code_fence(text: str) -> str:
    """```json ... ``` 형태로 감싼 응답에서 펜스 제거"""
    stripped = text.strip()
    match = CODE_FENCE_PATTERN.match(stripped)
    if match:
        return match.group(1).strip()
    return stripped


def _field(data: dict, key: str, placeholder: str) -> str:
    value = data.get(key)
    if value is None:
        logger.warning("LLM 응답 필드 누락", field=key)
        return placeholder
    return value if isinstance(value, str) else str(value)


def parse_commit_suggestion(raw: str) -> CommitSuggestion:
    """LLM 응답 원문을 CommitSuggestion으로 변환

    JSON이 아니거나 null이면 고정 fallback, 객체가 아니면 필드별 placeholder 반환.
    예외를 던지지 않음
    """
    try:
        data = json.loads(strip_code_fence(raw))
    except (json.JSONDecodeError, RecursionError) as e:
        logger.warning("LLM 응답 JSON 파싱 실패", error=str(e), preview=raw[:200])
        return CommitSuggestion(subject=PARSE_ERROR_SUBJECT, description=PARSE_ERROR_DESCRIPTION)

    if data is None:
        logger.warning("LLM 응답이 null")
        return CommitSuggestion(subject=PARSE_ERROR_SUBJECT, description=PARSE_ERROR_DESCRIPTION)

    if not isinstance(data, dict):
        logger.warning("LLM 응답이 JSON 객체가 아님", type=type(data).__name__)
        return CommitSuggestion(subject=MISSING_SUBJECT, description=MISSING_DESCRIPTION)

    return CommitSuggestion(
        subject=_field(data, "subject", MISSING_SUBJECT),
        description=_field(data, "description", MISSING_DESCRIPTION),
    )

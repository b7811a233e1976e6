from app.core.logging import get_logger
from app.domain.commit.instructions import build_prompt, load_instructions
from app.domain.commit.parsers import PARSE_ERROR_SUBJECT, parse_commit_suggestion
from app.domain.commit.schemas import CommitSuggestion, DiffSubmission
from app.infra.llm.client import generate_json_text

logger = get_logger(__name__)


async def generate_commit_suggestion(
    submission: DiffSubmission,
    session_id: str | None = None,
) -> CommitSuggestion:
    """diff 한 건으로 커밋 메시지 생성

    지시문 로드 -> 프롬프트 결합 -> LLM 1회 호출 -> 응답 파싱
    """
    instructions = await load_instructions()
    prompt = build_prompt(instructions, submission.text)

    logger.info(
        "커밋 메시지 생성 시작",
        filename=submission.filename,
        diff_chars=submission.size,
        prompt_chars=len(prompt),
    )

    raw = await generate_json_text(prompt, session_id=session_id)
    suggestion = parse_commit_suggestion(raw)

    logger.info(
        "커밋 메시지 생성 완료",
        fallback=suggestion.subject == PARSE_ERROR_SUBJECT,
        subject_chars=len(suggestion.subject),
    )
    return suggestion

import os
import time

from langchain_core.messages import BaseMessage, HumanMessage
from langfuse.langchain import CallbackHandler

from app.core.config import settings
from app.core.logging import get_logger
from app.infra.llm.factory import get_llm_client

logger = get_logger(__name__)

if settings.langfuse_public_key:
    os.environ["LANGFUSE_PUBLIC_KEY"] = settings.langfuse_public_key
if settings.langfuse_secret_key:
    os.environ["LANGFUSE_SECRET_KEY"] = settings.langfuse_secret_key
if settings.langfuse_base_url:
    os.environ["LANGFUSE_HOST"] = settings.langfuse_base_url


def get_langfuse_handler() -> CallbackHandler | None:
    """Langfuse 콜백 핸들러 반환"""
    if not settings.langfuse_public_key or not settings.langfuse_secret_key:
        return None

    return CallbackHandler()


def extract_text(message: BaseMessage) -> str:
    """응답 메시지에서 텍스트 추출

    Gemini는 content를 파트 리스트로 반환하기도 함
    """
    content = message.content
    if isinstance(content, str):
        return content

    parts = []
    for part in content:
        if isinstance(part, str):
            parts.append(part)
        elif isinstance(part, dict) and part.get("type", "text") == "text":
            parts.append(part.get("text", ""))
    return "".join(parts)


async def generate_json_text(prompt: str, session_id: str | None = None) -> str:
    """프롬프트를 한 번 호출하고 JSON 응답 원문 반환"""
    client = get_llm_client()
    model_name = client.get_model_name()

    langfuse_handler = get_langfuse_handler()
    config = {
        "callbacks": [langfuse_handler] if langfuse_handler else [],
        "metadata": {
            "langfuse_session_id": session_id,
            "langfuse_tags": ["commit", "generate"],
        },
    }

    logger.debug("LLM 호출 시작", model=model_name, prompt_chars=len(prompt))
    start_time = time.perf_counter()

    result = await client.get_json_model().ainvoke([HumanMessage(content=prompt)], config=config)

    text = extract_text(result)
    logger.info(
        "LLM 호출 완료",
        model=model_name,
        response_chars=len(text),
        duration_ms=round((time.perf_counter() - start_time) * 1000, 2),
    )
    return text

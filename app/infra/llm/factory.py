from typing import Literal

from app.core.config import settings
from app.core.logging import get_logger
from app.infra.llm.base import BaseLLMClient
from app.infra.llm.gemini_client import GeminiClient
from app.infra.llm.openai_client import OpenAIClient

logger = get_logger(__name__)

LLMProvider = Literal["gemini", "openai"]

_client: BaseLLMClient | None = None


def get_llm_client() -> BaseLLMClient:
    """커밋 메시지 생성용 LLM 클라이언트 반환"""
    global _client

    if _client is not None:
        return _client

    provider = settings.llm_provider

    if provider == "gemini":
        _client = GeminiClient()
        logger.info("Gemini 클라이언트 초기화", model=settings.gemini_model)
    elif provider == "openai":
        _client = OpenAIClient()
        logger.info("OpenAI 클라이언트 초기화", model=settings.openai_model)
    else:
        raise ValueError(f"지원하지 않는 LLM 프로바이더: {provider}")

    return _client


def reset_clients() -> None:
    """클라이언트 캐시 초기화 - 테스트용"""
    global _client
    _client = None

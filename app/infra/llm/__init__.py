from app.infra.llm.base import BaseLLMClient
from app.infra.llm.client import generate_json_text
from app.infra.llm.factory import get_llm_client, reset_clients
from app.infra.llm.gemini_client import GeminiClient
from app.infra.llm.openai_client import OpenAIClient

__all__ = [
    "BaseLLMClient",
    "GeminiClient",
    "OpenAIClient",
    "get_llm_client",
    "reset_clients",
    "generate_json_text",
]

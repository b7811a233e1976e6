from langchain_core.language_models import BaseChatModel
from langchain_core.runnables import Runnable
from langchain_google_genai import ChatGoogleGenerativeAI

from app.core.config import settings
from app.core.exceptions import ApiKeyMissingError
from app.infra.llm.base import BaseLLMClient


class GeminiClient(BaseLLMClient):
    """Gemini 클라이언트 - 기본 프로바이더"""

    def __init__(self):
        if not settings.gemini_api_key:
            raise ApiKeyMissingError()

        self._model = ChatGoogleGenerativeAI(
            model=settings.gemini_model,
            google_api_key=settings.gemini_api_key,
            timeout=settings.gemini_timeout,
            temperature=settings.llm_temperature,
            response_mime_type="application/json",
        )

    def get_chat_model(self) -> BaseChatModel:
        """LangChain ChatGoogleGenerativeAI 모델 반환"""
        return self._model

    def get_model_name(self) -> str:
        """사용 중인 모델 이름 반환"""
        return settings.gemini_model

    def get_json_model(self) -> Runnable:
        """response_mime_type이 생성 시 지정되어 있으므로 모델 그대로 반환"""
        return self._model

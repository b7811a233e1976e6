from langchain_core.language_models import BaseChatModel
from langchain_core.runnables import Runnable
from langchain_openai import ChatOpenAI

from app.core.config import settings
from app.core.exceptions import ApiKeyMissingError
from app.infra.llm.base import BaseLLMClient


class OpenAIClient(BaseLLMClient):
    """OpenAI API 클라이언트 - 대체 프로바이더"""

    def __init__(self):
        if not settings.openai_api_key:
            raise ApiKeyMissingError()

        self._model = ChatOpenAI(
            model=settings.openai_model,
            api_key=settings.openai_api_key,
            timeout=settings.openai_timeout,
            temperature=settings.llm_temperature,
        )

    def get_chat_model(self) -> BaseChatModel:
        """LangChain ChatOpenAI 모델 반환"""
        return self._model

    def get_model_name(self) -> str:
        """사용 중인 모델 이름 반환"""
        return settings.openai_model

    def get_json_model(self) -> Runnable:
        return self._model.bind(response_format={"type": "json_object"})

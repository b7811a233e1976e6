from abc import ABC, abstractmethod

from langchain_core.language_models import BaseChatModel
from langchain_core.runnables import Runnable


class BaseLLMClient(ABC):
    """LLM 클라이언트 추상 클래스"""

    @abstractmethod
    def get_chat_model(self) -> BaseChatModel:
        """LangChain 호환 채팅 모델 반환"""
        pass

    @abstractmethod
    def get_model_name(self) -> str:
        """사용 중인 모델 이름 반환"""
        pass

    @abstractmethod
    def get_json_model(self) -> Runnable:
        """JSON 형식 응답을 요청하는 모델 반환"""
        pass

"""diff 처리 API 스키마."""

from pydantic import BaseModel


class ProcessResponse(BaseModel):
    """커밋 메시지 응답. 성공/실패 모두 같은 형태."""

    subject: str
    description: str

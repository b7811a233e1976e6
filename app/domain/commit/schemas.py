"""커밋 메시지 생성 도메인 스키마"""

from pydantic import BaseModel, Field


class DiffSubmission(BaseModel):
    """업로드된 diff 파일"""

    filename: str | None = None
    content_type: str | None = None
    text: str

    @property
    def size(self) -> int:
        return len(self.text)


class CommitSuggestion(BaseModel):
    """생성된 커밋 메시지"""

    subject: str = Field(description="커밋 제목 한 줄")
    description: str = Field(description="커밋 본문")

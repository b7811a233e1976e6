from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_INSTRUCTIONS_PATH = (
    Path(__file__).resolve().parent.parent / "domain" / "commit" / "prompts" / "system_instructions.txt"
)


class Settings(BaseSettings):
    """애플리케이션 설정"""

    environment: str = "development"

    # LLM 프로바이더 선택: "gemini" 또는 "openai"
    llm_provider: str = "gemini"

    # Gemini 설정 - 기본 프로바이더
    gemini_api_key: str = ""
    gemini_model: str = "gemini-2.0-flash"
    gemini_timeout: float = 120.0

    # OpenAI 설정 - 대체 프로바이더
    openai_api_key: str = ""
    openai_model: str = "gpt-4o-mini"
    openai_timeout: float = 120.0

    llm_temperature: float = 0.2

    # 시스템 지시문 파일 경로
    instructions_path: Path = DEFAULT_INSTRUCTIONS_PATH

    # 로깅 설정
    log_level: str = "INFO"

    # CORS 설정
    cors_allowed_origins: str = ""

    # Langfuse 설정
    langfuse_public_key: str = ""
    langfuse_secret_key: str = ""
    langfuse_base_url: str = "https://cloud.langfuse.com"

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    @property
    def is_production(self) -> bool:
        return self.environment.lower() == "production"

    @property
    def llm_api_key(self) -> str:
        """선택된 프로바이더의 API 키 반환"""
        if self.llm_provider == "openai":
            return self.openai_api_key
        return self.gemini_api_key

    @property
    def cors_origins(self) -> list[str]:
        return [origin.strip() for origin in self.cors_allowed_origins.split(",") if origin.strip()]

    def validate_for_production(self) -> list[str]:
        """프로덕션 환경에서 필수 설정 검증 후 누락된 항목 반환"""
        errors = []
        if self.llm_provider not in ("gemini", "openai"):
            errors.append("LLM_PROVIDER")
        if not self.llm_api_key:
            errors.append("OPENAI_API_KEY" if self.llm_provider == "openai" else "GEMINI_API_KEY")
        if not self.instructions_path.is_file():
            errors.append("INSTRUCTIONS_PATH")
        return errors


settings = Settings()

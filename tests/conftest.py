"""테스트 공통 fixture"""

from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from httpx import ASGITransport, AsyncClient

from app.core.config import settings
from app.infra.llm.factory import reset_clients
from app.main import app

SAMPLE_DIFF = """diff --git a/app/utils.py b/app/utils.py
index 83db48f..bf269f4 100644
--- a/app/utils.py
+++ b/app/utils.py
@@ -1,4 +1,6 @@
 def parse(value):
-    return int(value)
+    if value is None:
+        return 0
+    return int(value)
"""


@pytest.fixture(autouse=True)
def llm_settings(monkeypatch):
    """LLM 설정을 테스트용 값으로 고정"""
    monkeypatch.setattr(settings, "llm_provider", "gemini")
    monkeypatch.setattr(settings, "gemini_api_key", "test-gemini-key")
    monkeypatch.setattr(settings, "openai_api_key", "")
    monkeypatch.setattr(settings, "langfuse_public_key", "")
    monkeypatch.setattr(settings, "langfuse_secret_key", "")
    monkeypatch.setattr(settings, "instructions_path", settings.instructions_path)
    reset_clients()
    yield settings
    reset_clients()


@pytest.fixture
def sample_diff() -> str:
    """테스트용 git diff"""
    return SAMPLE_DIFF


@pytest.fixture
def diff_upload(sample_diff) -> dict:
    """multipart 업로드용 diff 파일"""
    return {"file": ("change.diff", sample_diff.encode("utf-8"), "text/x-diff")}


@pytest.fixture
def async_client():
    """비동기 HTTP 클라이언트"""
    transport = ASGITransport(app=app)
    return AsyncClient(transport=transport, base_url="http://test")


@pytest.fixture
def mock_generate_json_text():
    """LLM 호출 mock"""
    with patch(
        "app.domain.commit.service.generate_json_text", new_callable=AsyncMock
    ) as mock:
        yield mock


@pytest.fixture
def mock_load_instructions():
    """시스템 지시문 로드 mock"""
    with patch(
        "app.domain.commit.service.load_instructions",
        new_callable=AsyncMock,
        return_value="Write a commit message as JSON.",
    ) as mock:
        yield mock


@pytest.fixture
def mock_llm_client():
    """LLM 클라이언트 mock"""
    with patch("app.infra.llm.client.get_llm_client") as mock_get:
        mock_client = MagicMock()
        mock_client.get_model_name.return_value = "test-model"
        mock_get.return_value = mock_client
        yield mock_client

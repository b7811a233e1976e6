"""LLM 응답 파서 테스트"""

import pytest

from app.domain.commit.parsers import (
    MISSING_DESCRIPTION,
    MISSING_SUBJECT,
    PARSE_ERROR_DESCRIPTION,
    PARSE_ERROR_SUBJECT,
    parse_commit_suggestion,
    strip_code_fence,
)


class TestStripCodeFence:
    """strip_code_fence 함수 테스트"""

    @pytest.mark.parametrize(
        "raw,expected",
        [
            ('{"a": 1}', '{"a": 1}'),
            ('  {"a": 1}\n', '{"a": 1}'),
            ('```json\n{"a": 1}\n```', '{"a": 1}'),
            ('```\n{"a": 1}\n```', '{"a": 1}'),
            ('```JSON\n{"a": 1}\n```\n', '{"a": 1}'),
            ('```{"a": 1}```', '{"a": 1}'),
        ],
        ids=["bare", "whitespace", "json_fence", "plain_fence", "upper_lang", "inline_fence"],
    )
    def test_strip(self, raw, expected):
        """펜스와 공백 제거"""
        assert strip_code_fence(raw) == expected

    def test_unclosed_fence_left_alone(self):
        """닫히지 않은 펜스는 그대로"""
        raw = '```json\n{"a": 1}'

        assert strip_code_fence(raw) == raw


class TestParseCommitSuggestion:
    """parse_commit_suggestion 함수 테스트"""

    def test_valid_json(self):
        """정상 JSON 파싱"""
        result = parse_commit_suggestion('{"subject": "Fix bug", "description": "Details"}')

        assert result.subject == "Fix bug"
        assert result.description == "Details"

    def test_extra_fields_ignored(self):
        """추가 필드는 무시"""
        result = parse_commit_suggestion(
            '{"subject": "Fix bug", "description": "Details", "type": "fix"}'
        )

        assert result.model_dump() == {"subject": "Fix bug", "description": "Details"}

    @pytest.mark.parametrize(
        "raw",
        ["not json", "", "null", "[" * 200000, '{"subject": ' + "{" * 200000],
        ids=["text", "empty", "null", "deep_array", "deep_object"],
    )
    def test_fallback_on_invalid(self, raw):
        """파싱 불가 또는 null이면 fallback"""
        result = parse_commit_suggestion(raw)

        assert result.subject == PARSE_ERROR_SUBJECT
        assert result.description == PARSE_ERROR_DESCRIPTION

    @pytest.mark.parametrize(
        "raw",
        ["42", '"text"', "[1, 2]", "true"],
        ids=["number", "string", "array", "boolean"],
    )
    def test_non_object_uses_placeholders(self, raw):
        """객체가 아닌 JSON은 필드별 placeholder"""
        result = parse_commit_suggestion(raw)

        assert result.subject == MISSING_SUBJECT
        assert result.description == MISSING_DESCRIPTION

    @pytest.mark.parametrize(
        "raw,expected",
        [
            ("{}", (MISSING_SUBJECT, MISSING_DESCRIPTION)),
            ('{"subject": "S"}', ("S", MISSING_DESCRIPTION)),
            ('{"description": "D"}', (MISSING_SUBJECT, "D")),
            ('{"subject": null, "description": "D"}', (MISSING_SUBJECT, "D")),
        ],
        ids=["both_missing", "no_description", "no_subject", "null_subject"],
    )
    def test_missing_fields(self, raw, expected):
        """누락 필드별 placeholder"""
        result = parse_commit_suggestion(raw)

        assert (result.subject, result.description) == expected

    def test_empty_string_kept(self):
        """빈 문자열은 누락으로 보지 않음"""
        result = parse_commit_suggestion('{"subject": "", "description": ""}')

        assert result.subject == ""
        assert result.description == ""

    def test_non_string_values_converted(self):
        """문자열이 아닌 값은 str 변환"""
        result = parse_commit_suggestion('{"subject": 123, "description": true}')

        assert result.subject == "123"
        assert result.description == "True"

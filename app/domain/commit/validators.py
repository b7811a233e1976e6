import re

DIFF_HEADER_PATTERN = re.compile(r"^diff --git ", re.IGNORECASE)


def decode_diff(content: bytes) -> str:
    """업로드 바이트를 UTF-8 텍스트로 디코딩 (BOM 제거, 잘못된 바이트는 치환)"""
    return content.decode("utf-8-sig", errors="replace")


def first_meaningful_line(text: str) -> str | None:
    """공백이 아닌 첫 줄 반환"""
    for line in text.split("\n"):
        if line.strip():
            return line
    return None


def is_git_diff(text: str) -> bool:
    """첫 유효 줄이 'diff --git '으로 시작하는지 확인"""
    line = first_meaningful_line(text)
    return line is not None and DIFF_HEADER_PATTERN.match(line) is not None

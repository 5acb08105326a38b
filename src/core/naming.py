"""
저장 파일명 정책.

포맷: <unix-millis>_<원본 basename><원본 확장자>
예: 1700000000000_profile.png

규칙:
- 원본 파일명은 마지막 경로 요소만 사용 (/, \\ 모두 구분자)
- 같은 밀리초에 같은 이름이 오면 충돌 → 나중 쓰기가 이김 (허용된 약점)
"""

import time
import unicodedata
from pathlib import PurePosixPath

from src.domain.constants import FALLBACK_BASENAME


def current_millis() -> int:
    """현재 Unix 시각 (밀리초)."""
    return time.time_ns() // 1_000_000


def split_original_name(original: str) -> tuple[str, str]:
    """
    원본 파일명을 (basename, 확장자)로 분리.

    Args:
        original: 클라이언트가 보낸 파일명 (경로 포함 가능)

    Returns:
        (basename, ext) - ext는 점 포함 (".png"), 없으면 ""
    """
    cleaned = _strip_control_chars(original).replace("\\", "/")
    name = PurePosixPath(cleaned).name if cleaned else ""

    if name in ("", ".", ".."):
        return FALLBACK_BASENAME, ""

    # ".bashrc" 처럼 점으로 시작하는 이름은 확장자 없음
    dot = name.rfind(".")
    if dot <= 0:
        return name, ""

    base, ext = name[:dot], name[dot:]
    return base, ext


def build_storage_filename(original: str, now_ms: int | None = None) -> str:
    """
    저장 파일명 생성.

    Args:
        original: 원본 파일명
        now_ms: 타임스탬프 (테스트용, 기본값 현재 시각)

    Returns:
        <now_ms>_<base><ext>
    """
    if now_ms is None:
        now_ms = current_millis()

    base, ext = split_original_name(original)
    return f"{now_ms}_{base}{ext}"


def _strip_control_chars(value: str) -> str:
    """NUL, 개행 등 제어 문자(Cc)만 제거. NBSP, U+3000, ZWJ는 유지."""
    return "".join(c for c in value if unicodedata.category(c) != "Cc")

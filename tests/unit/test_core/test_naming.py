"""
test_naming.py - 저장 파일명 정책 테스트

DoD:
- 포맷: <millis>_<base><ext>
- 경로 요소 제거 (uploads 밖으로 못 나감)
- 빈 이름/점 이름 → file
"""

import re
from unittest.mock import patch

from src.core.naming import (
    build_storage_filename,
    current_millis,
    split_original_name,
)

# =============================================================================
# split_original_name 테스트
# =============================================================================


class TestSplitOriginalName:
    """split_original_name 함수 테스트."""

    def test_simple_name(self):
        assert split_original_name("photo.png") == ("photo", ".png")

    def test_multiple_dots_last_is_extension(self):
        """마지막 점 기준으로 확장자 분리."""
        assert split_original_name("archive.tar.gz") == ("archive.tar", ".gz")

    def test_no_extension(self):
        assert split_original_name("README") == ("README", "")

    def test_leading_dot_is_not_extension(self):
        """.bashrc 는 확장자 없는 이름."""
        assert split_original_name(".bashrc") == (".bashrc", "")

    def test_trailing_dot(self):
        assert split_original_name("name.") == ("name", ".")

    def test_posix_path_stripped(self):
        """경로 순회 시도 → 마지막 요소만."""
        assert split_original_name("../../etc/passwd") == ("passwd", "")

    def test_windows_path_stripped(self):
        assert split_original_name("C:\\Users\\me\\avatar.jpg") == ("avatar", ".jpg")

    def test_empty_name_falls_back(self):
        assert split_original_name("") == ("file", "")

    def test_dot_names_fall_back(self):
        assert split_original_name(".") == ("file", "")
        assert split_original_name("..") == ("file", "")
        assert split_original_name("a/..") == ("file", "")

    def test_control_characters_removed(self):
        assert split_original_name("bad\x00name\n.png") == ("badname", ".png")

    def test_unicode_preserved(self):
        """한글 파일명 유지."""
        assert split_original_name("결제증빙.jpg") == ("결제증빙", ".jpg")

    def test_spaces_preserved(self):
        assert split_original_name("my photo.png") == ("my photo", ".png")

    def test_unicode_spaces_preserved(self):
        """NBSP, 전각 공백(U+3000)은 제어 문자가 아님."""
        assert split_original_name("결제\u3000증빙.jpg") == ("결제\u3000증빙", ".jpg")
        assert split_original_name("a\u00a0b.png") == ("a\u00a0b", ".png")

    def test_emoji_zwj_sequence_preserved(self):
        family = "\U0001F468\u200d\U0001F469\u200d\U0001F467"

        assert split_original_name(f"{family}.png") == (family, ".png")

    def test_delete_char_removed(self):
        assert split_original_name("a\x7fb.png") == ("ab", ".png")


# =============================================================================
# build_storage_filename 테스트
# =============================================================================


class TestBuildStorageFilename:
    """build_storage_filename 함수 테스트."""

    def test_format_with_explicit_timestamp(self):
        assert build_storage_filename("me.png", now_ms=1700000000123) == "1700000000123_me.png"

    def test_uses_current_millis_by_default(self):
        with patch("src.core.naming.current_millis", return_value=42):
            assert build_storage_filename("qr.png") == "42_qr.png"

    def test_default_timestamp_format(self):
        """기본 타임스탬프는 13자리 밀리초."""
        filename = build_storage_filename("clip.mp4")

        assert re.match(r"^\d{13}_clip\.mp4$", filename)

    def test_path_never_in_result(self):
        filename = build_storage_filename("../../secret.txt", now_ms=1)

        assert "/" not in filename
        assert filename == "1_secret.txt"

    def test_different_millis_different_names(self):
        """같은 원본 이름이라도 밀리초가 다르면 다른 이름."""
        a = build_storage_filename("same.png", now_ms=1000)
        b = build_storage_filename("same.png", now_ms=1001)

        assert a != b

    def test_same_millis_same_name(self):
        """같은 밀리초 + 같은 이름 → 충돌 (허용된 약점)."""
        a = build_storage_filename("same.png", now_ms=1000)
        b = build_storage_filename("same.png", now_ms=1000)

        assert a == b


class TestCurrentMillis:
    """current_millis 함수 테스트."""

    def test_monotonic_enough(self):
        first = current_millis()
        second = current_millis()

        assert second >= first

    def test_millisecond_scale(self):
        with patch("src.core.naming.time.time_ns", return_value=1_700_000_000_123_456_789):
            assert current_millis() == 1_700_000_000_123

"""
Data schemas for the upload server.

규칙:
- 응답 키는 모바일 앱 계약 그대로 camelCase (filePath, fullPath, mimeType)
- 선택 키는 null 대신 생략
- StoredFile은 생성 후 변경 금지 (frozen)
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Any

from src.domain.constants import MiB, UPLOADS_URL_PREFIX

# =============================================================================
# Category
# =============================================================================

@dataclass(frozen=True)
class UploadCategory:
    """
    업로드 카테고리 기술자.

    핸들러 하나가 이 값으로 파라미터화되어 카테고리별로 등록됨.
    """
    name: str  # 라우트 세그먼트 (avatar)
    directory: str  # 저장 폴더 (avatars)
    label: str  # 로그 표시명 (Avatar)
    max_size: int | None = None  # bytes, None = 제한 없음
    include_full_path: bool = True
    include_mime_type: bool = False

    @classmethod
    def from_dict(cls, name: str, data: dict[str, Any]) -> "UploadCategory":
        """설정 dict → UploadCategory. max_size_mb는 MiB 단위."""
        max_size_mb = data.get("max_size_mb")
        if max_size_mb is not None:
            if isinstance(max_size_mb, bool) or not isinstance(max_size_mb, (int, float)):
                raise ValueError(f"categories.{name}.max_size_mb must be a number")
            if max_size_mb <= 0:
                raise ValueError(f"categories.{name}.max_size_mb must be positive")

        directory = str(data.get("directory", name))
        if directory in ("", ".", "..") or "/" in directory or "\\" in directory:
            raise ValueError(f"categories.{name}.directory must be a single folder name")

        return cls(
            name=name,
            directory=directory,
            label=str(data.get("label", name)),
            max_size=int(max_size_mb * MiB) if max_size_mb is not None else None,
            include_full_path=bool(data.get("include_full_path", True)),
            include_mime_type=bool(data.get("include_mime_type", False)),
        )

    def url_path(self, filename: str) -> str:
        """공개 URL 경로 (/uploads/<directory>/<filename>)."""
        return f"{UPLOADS_URL_PREFIX}/{self.directory}/{filename}"


# =============================================================================
# Stored File
# =============================================================================

@dataclass(frozen=True)
class StoredFile:
    """디스크에 저장된 업로드 파일."""
    category: UploadCategory
    original_filename: str
    filename: str  # 저장 파일명 (<millis>_<base><ext>)
    path: Path
    size: int
    mime_type: str | None = None

    @property
    def file_path(self) -> str:
        return self.category.url_path(self.filename)


# =============================================================================
# Upload Response
# =============================================================================

@dataclass
class UploadResponse:
    """업로드 결과 응답."""
    file_path: str
    filename: str
    success: bool = True
    full_path: str | None = None
    mime_type: str | None = None

    @classmethod
    def from_stored(cls, stored: StoredFile, base_url: str) -> "UploadResponse":
        """
        StoredFile → 응답.

        Args:
            stored: 저장 결과
            base_url: fullPath 접두어 (예: http://10.0.0.5:3000)

        Returns:
            카테고리 설정에 따라 fullPath 또는 mimeType이 채워진 응답
        """
        category = stored.category
        return cls(
            file_path=stored.file_path,
            filename=stored.filename,
            full_path=f"{base_url}{stored.file_path}" if category.include_full_path else None,
            mime_type=stored.mime_type if category.include_mime_type else None,
        )

    def to_dict(self) -> dict[str, Any]:
        """JSON 직렬화용."""
        data: dict[str, Any] = {
            "success": self.success,
            "filePath": self.file_path,
            "filename": self.filename,
        }
        if self.full_path is not None:
            data["fullPath"] = self.full_path
        if self.mime_type is not None:
            data["mimeType"] = self.mime_type
        return data

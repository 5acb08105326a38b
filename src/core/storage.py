"""
업로드 저장소: uploads/<category>/ 디렉터리 관리.

동작:
- 시작 시 카테고리 폴더 생성 (재귀, 이미 있으면 무시)
- 저장: temp 파일에 청크 복사 → os.replace (중간 상태 없음)
- 크기 제한 초과/쓰기 실패 시 temp 파일 삭제, 아무것도 남기지 않음
- 조회: uploads 루트 밖으로 나가는 경로, symlink 거부

동시성:
- 락 없음. 같은 저장 파일명이 동시에 오면 마지막 replace가 이김
"""

import logging
import os
import tempfile
from collections.abc import Iterable
from pathlib import Path
from typing import BinaryIO

from src.core.naming import build_storage_filename
from src.domain.constants import DEFAULT_CHUNK_SIZE
from src.domain.errors import ErrorCodes, UploadRejectError
from src.domain.schemas import StoredFile, UploadCategory

logger = logging.getLogger(__name__)

TEMP_PREFIX = ".upload-"
TEMP_SUFFIX = ".tmp"


class UploadStorage:
    """
    카테고리별 업로드 저장소.

    Usage:
        storage = UploadStorage(Path("uploads"), categories)
        storage.ensure_directories()
        stored = storage.save(category, "me.png", fileobj)
    """

    def __init__(
        self,
        root: Path,
        categories: Iterable[UploadCategory],
        chunk_size: int = DEFAULT_CHUNK_SIZE,
    ):
        self.root = Path(root)
        self.categories = {c.name: c for c in categories}
        self.chunk_size = chunk_size

    def category_dir(self, category: UploadCategory) -> Path:
        """카테고리 저장 폴더."""
        return self.root / category.directory

    def ensure_directories(self) -> dict[str, Path]:
        """
        모든 카테고리 폴더 생성.

        Returns:
            {카테고리 이름: 폴더 경로}
        """
        created = {}
        for category in self.categories.values():
            path = self.category_dir(category)
            path.mkdir(parents=True, exist_ok=True)
            created[category.name] = path.resolve()
        return created

    def save(
        self,
        category: UploadCategory,
        original_filename: str,
        source: BinaryIO,
        mime_type: str | None = None,
        now_ms: int | None = None,
    ) -> StoredFile:
        """
        업로드 파일 저장.

        Args:
            category: 업로드 카테고리
            original_filename: 클라이언트가 보낸 파일명
            source: 읽기 가능한 바이너리 스트림
            mime_type: 클라이언트가 선언한 MIME 타입
            now_ms: 파일명 타임스탬프 (테스트용)

        Returns:
            StoredFile

        Raises:
            UploadRejectError: PAYLOAD_TOO_LARGE, STORAGE_IO_FAILED
        """
        filename = build_storage_filename(original_filename, now_ms)
        dir_path = self.category_dir(category)
        target = dir_path / filename

        temp_path: Path | None = None
        try:
            dir_path.mkdir(parents=True, exist_ok=True)
            with tempfile.NamedTemporaryFile(
                mode="wb",
                dir=dir_path,
                prefix=TEMP_PREFIX,
                suffix=TEMP_SUFFIX,
                delete=False,
            ) as f:
                temp_path = Path(f.name)
                size = self._copy_limited(source, f, category)
                f.flush()
                try:
                    os.fsync(f.fileno())
                except OSError as e:
                    logger.warning(f"File fsync failed for {target}: {e}")

            os.replace(temp_path, target)
            temp_path = None

        except OSError as e:
            logger.error(f"Failed to store {category.name} upload {filename}: {e}", exc_info=True)
            raise UploadRejectError(
                ErrorCodes.STORAGE_IO_FAILED,
                category=category.name,
                filename=filename,
            ) from e

        finally:
            if temp_path is not None:
                _discard(temp_path)

        return StoredFile(
            category=category,
            original_filename=original_filename,
            filename=filename,
            path=target,
            size=size,
            mime_type=mime_type,
        )

    def resolve(self, directory: str, filename: str) -> Path:
        """
        정적 파일 경로 조회.

        Args:
            directory: 카테고리 폴더 이름 (avatars)
            filename: 저장 파일명

        Returns:
            실제 파일 경로

        Raises:
            UploadRejectError: FILE_NOT_FOUND (없음, 폴더 아님, 루트 밖, symlink)
        """
        known = {c.directory for c in self.categories.values()}
        if directory not in known or filename.startswith(TEMP_PREFIX):
            raise UploadRejectError(ErrorCodes.FILE_NOT_FOUND, path=f"{directory}/{filename}")

        dir_path = self.root / directory
        file_path = dir_path / filename

        try:
            resolved = file_path.resolve(strict=True)
            resolved.relative_to(dir_path.resolve())
        except (ValueError, OSError):
            raise UploadRejectError(ErrorCodes.FILE_NOT_FOUND, path=f"{directory}/{filename}")

        if file_path.is_symlink() or not resolved.is_file():
            raise UploadRejectError(ErrorCodes.FILE_NOT_FOUND, path=f"{directory}/{filename}")

        return resolved

    def _copy_limited(self, source: BinaryIO, dest: BinaryIO, category: UploadCategory) -> int:
        """청크 단위 복사. max_size 초과 시 즉시 중단."""
        size = 0
        while True:
            chunk = source.read(self.chunk_size)
            if not chunk:
                break
            size += len(chunk)
            if category.max_size is not None and size > category.max_size:
                raise UploadRejectError(
                    ErrorCodes.PAYLOAD_TOO_LARGE,
                    category=category.name,
                    limit=category.max_size,
                )
            dest.write(chunk)
        return size


def _discard(path: Path) -> None:
    """temp 파일 정리 (실패해도 경고만)."""
    try:
        path.unlink(missing_ok=True)
    except OSError as e:
        logger.warning(f"Failed to remove temp file {path}: {e}")

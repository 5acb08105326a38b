"""
Logging: 로거 설정, 업로드/시작 로그.

규칙:
- 모듈별 logger = logging.getLogger(__name__)
- 업로드 성공 로그는 사람이 읽는 한 줄: "<label> uploaded: <filePath>"
"""

import logging
from collections.abc import Mapping
from pathlib import Path

from src.domain.schemas import StoredFile

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"

# 애플리케이션 로거 루트 (src.*)
APP_LOGGER_NAME = "src"

logger = logging.getLogger(__name__)


def configure_logging(level: str = "INFO") -> logging.Logger:
    """
    애플리케이션 로거 설정.

    uvicorn 로거와 별개로 src.* 로거에 스트림 핸들러 1개를 붙임.
    여러 번 호출해도 핸들러가 중복되지 않음.

    Args:
        level: 로그 레벨 이름 (DEBUG, INFO, ...)

    Returns:
        설정된 애플리케이션 루트 로거
    """
    app_logger = logging.getLogger(APP_LOGGER_NAME)
    app_logger.setLevel(level.upper())

    if not any(getattr(h, "_upload_server", False) for h in app_logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handler._upload_server = True  # type: ignore[attr-defined]
        app_logger.addHandler(handler)

    return app_logger


def format_upload_line(stored: StoredFile) -> str:
    """업로드 성공 로그 문자열."""
    return f"{stored.category.label} uploaded: {stored.file_path}"


def log_upload(stored: StoredFile) -> None:
    """업로드 성공 기록."""
    logger.info(format_upload_line(stored))
    logger.debug(
        f"{stored.category.name}: original={stored.original_filename!r} "
        f"size={stored.size} mime={stored.mime_type}"
    )


def log_startup(base_url: str, directories: Mapping[str, Path], labels: Mapping[str, str]) -> None:
    """
    시작 로그: 서버 URL + 카테고리별 저장 폴더.

    Args:
        base_url: 공개 URL (예: http://127.0.0.1:3000)
        directories: {카테고리 이름: 폴더 경로}
        labels: {카테고리 이름: 표시명}
    """
    logger.info(f"Upload server running at {base_url}")
    for name, path in directories.items():
        logger.info(f"{labels.get(name, name)} saved to: {path}")

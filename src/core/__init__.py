"""
Core layer: 저장소 핵심 모듈.

역할:
- 저장 파일명 정책, 디스크 저장/조회, 로그
"""

from .logging import configure_logging, log_startup, log_upload
from .naming import build_storage_filename, current_millis, split_original_name
from .storage import UploadStorage

__all__ = [
    # naming
    "build_storage_filename",
    "current_millis",
    "split_original_name",
    # storage
    "UploadStorage",
    # logging
    "configure_logging",
    "log_startup",
    "log_upload",
]

"""
FastAPI Routes.

업로드 API + 정적 파일 + 헬스 체크
"""

from . import files, health, uploads

__all__ = ["files", "health", "uploads"]

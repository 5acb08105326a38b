"""
Domain Constants: 업로드 서버 전역 상수.

포트, URL 접두어, 카테고리 정의 등 시스템 전반에서 사용되는 값들.
설정 파일(default.yaml)에서 오버라이드 가능한 값은 DEFAULT_ 접두어.
"""

# =============================================================================
# Server Defaults (서버 기본값)
# =============================================================================

DEFAULT_BIND_HOST = "0.0.0.0"
DEFAULT_PORT = 3000
DEFAULT_PUBLIC_HOST = "127.0.0.1"
DEFAULT_PUBLIC_SCHEME = "http"
DEFAULT_CORS_ORIGINS = ("*",)
DEFAULT_LOG_LEVEL = "INFO"

HEALTH_STATUS_MESSAGE = "Server is running"

# =============================================================================
# Storage Layout (저장소 구조)
# =============================================================================
# uploads/
# ├── avatars/
# ├── qrcodes/
# ├── proofs/
# └── chat/

DEFAULT_UPLOADS_DIR = "uploads"
UPLOADS_URL_PREFIX = "/uploads"
UPLOAD_API_PREFIX = "/api/upload"
UPLOAD_FIELD_NAME = "file"

# 디스크 복사 단위 (1 MiB)
DEFAULT_CHUNK_SIZE = 1024 * 1024

# Content-Length 사전 검사 시 multipart 경계/헤더 여유분
MULTIPART_OVERHEAD_BYTES = 64 * 1024

# 원본 파일명을 못 쓰는 경우 대체 이름
FALLBACK_BASENAME = "file"

# =============================================================================
# Upload Categories (업로드 카테고리)
# =============================================================================
# name: 라우트 세그먼트 (/api/upload/<name>)
# directory: uploads/ 아래 하위 폴더
# label: 로그 표시명

MiB = 1024 * 1024
CHAT_MAX_SIZE_MB = 50

DEFAULT_CATEGORIES = {
    "avatar": {
        "directory": "avatars",
        "label": "Avatar",
        "max_size_mb": None,
        "include_full_path": True,
        "include_mime_type": False,
    },
    "qrcode": {
        "directory": "qrcodes",
        "label": "QR Code",
        "max_size_mb": None,
        "include_full_path": True,
        "include_mime_type": False,
    },
    "proof": {
        "directory": "proofs",
        "label": "Proof of Payment",
        "max_size_mb": None,
        "include_full_path": True,
        "include_mime_type": False,
    },
    "chat": {
        "directory": "chat",
        "label": "Chat media",
        "max_size_mb": CHAT_MAX_SIZE_MB,
        "include_full_path": False,
        "include_mime_type": True,
    },
}

# =============================================================================
# MIME Types
# =============================================================================

MIME_TYPES = {
    ".jpg": "image/jpeg",
    ".jpeg": "image/jpeg",
    ".png": "image/png",
    ".gif": "image/gif",
    ".webp": "image/webp",
    ".heic": "image/heic",
    ".bmp": "image/bmp",
    ".svg": "image/svg+xml",
    ".mp4": "video/mp4",
    ".mov": "video/quicktime",
    ".webm": "video/webm",
    ".3gp": "video/3gpp",
    ".mp3": "audio/mpeg",
    ".m4a": "audio/mp4",
    ".aac": "audio/aac",
    ".ogg": "audio/ogg",
    ".wav": "audio/wav",
    ".pdf": "application/pdf",
    ".txt": "text/plain",
    ".json": "application/json",
    ".zip": "application/zip",
}


def get_mime_type(filename: str) -> str:
    """
    파일명에서 MIME 타입 추출.

    Args:
        filename: 파일명 (확장자 포함)

    Returns:
        MIME 타입 문자열 (알 수 없으면 octet-stream)
    """
    import os

    ext = os.path.splitext(filename)[1].lower()
    return MIME_TYPES.get(ext, "application/octet-stream")

"""
Error definitions for the upload server.

규칙:
- 조용한 실패 금지 → UploadRejectError로 명시적 실패
- 모든 실패는 요청 경계에서 HTTP 상태 + JSON 본문으로 변환
- 요청 하나의 실패가 리스너를 죽이면 안 됨
"""

from typing import Any


class UploadRejectError(Exception):
    """
    요청을 거절해야 할 때 발생하는 에러.

    사용 예:
    - multipart 본문에 file 파트 없음
    - 카테고리 크기 제한 초과
    - 요청한 정적 파일 없음
    - 디스크 쓰기 실패

    Usage:
        raise UploadRejectError("PAYLOAD_TOO_LARGE", category="chat", limit=52428800)
    """

    def __init__(self, code: str, message: str | None = None, **context: Any) -> None:
        self.code = code
        self.message = message or ERROR_MESSAGES.get(code, code)
        self.context = context
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        ctx_str = ", ".join(f"{k}={v!r}" for k, v in self.context.items())
        return f"[{self.code}] {ctx_str}" if ctx_str else f"[{self.code}]"

    @property
    def status_code(self) -> int:
        """HTTP 상태 코드 (정의되지 않은 코드는 500)."""
        return HTTP_STATUS.get(self.code, 500)

    def to_dict(self) -> dict[str, Any]:
        """로그 직렬화용."""
        return {
            "code": self.code,
            **self.context,
        }

    def to_response(self) -> dict[str, str]:
        """클라이언트 응답 본문."""
        return {"error": self.message, "code": self.code}


# =============================================================================
# Error Codes
# =============================================================================

class ErrorCodes:
    """에러 코드 상수. 새 코드 추가 시 HTTP_STATUS, ERROR_MESSAGES에도 추가."""

    # === Upload ===
    MISSING_FILE = "MISSING_FILE"
    UNEXPECTED_FILE = "UNEXPECTED_FILE"  # file 파트 2개 이상
    PAYLOAD_TOO_LARGE = "PAYLOAD_TOO_LARGE"

    # === Static ===
    FILE_NOT_FOUND = "FILE_NOT_FOUND"

    # === Storage ===
    STORAGE_IO_FAILED = "STORAGE_IO_FAILED"


HTTP_STATUS = {
    ErrorCodes.MISSING_FILE: 400,
    ErrorCodes.UNEXPECTED_FILE: 400,
    ErrorCodes.PAYLOAD_TOO_LARGE: 413,
    ErrorCodes.FILE_NOT_FOUND: 404,
    ErrorCodes.STORAGE_IO_FAILED: 500,
}

ERROR_MESSAGES = {
    ErrorCodes.MISSING_FILE: "No file uploaded",
    ErrorCodes.UNEXPECTED_FILE: "Only one file may be uploaded",
    ErrorCodes.PAYLOAD_TOO_LARGE: "File too large",
    ErrorCodes.FILE_NOT_FOUND: "File not found",
    ErrorCodes.STORAGE_IO_FAILED: "Failed to store file",
}

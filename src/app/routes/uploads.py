"""
Upload Routes: 카테고리별 파일 업로드.

- POST /api/upload/avatar → uploads/avatars/
- POST /api/upload/qrcode → uploads/qrcodes/
- POST /api/upload/proof → uploads/proofs/
- POST /api/upload/chat → uploads/chat/ (기본 50 MiB 제한)

핸들러는 하나. UploadCategory로 파라미터화해서 카테고리마다 등록한다.

## file 파트를 직접 파싱하는 이유

`File(...)`로 받으면 누락 시 FastAPI가 422를 돌려준다.
모바일 앱 계약은 400 `{"error": "No file uploaded"}` 이므로
request.form()에서 직접 꺼내 UploadRejectError로 변환한다.
"""

from collections.abc import Awaitable, Callable, Iterable
from typing import Any

from fastapi import APIRouter, Request
from starlette.concurrency import run_in_threadpool
from starlette.datastructures import FormData, UploadFile
from starlette.exceptions import HTTPException

from src.app.config import ServerSettings
from src.core.logging import log_upload
from src.core.storage import UploadStorage
from src.domain.constants import (
    MULTIPART_OVERHEAD_BYTES,
    UPLOAD_FIELD_NAME,
    get_mime_type,
)
from src.domain.errors import ErrorCodes, UploadRejectError
from src.domain.schemas import UploadCategory, UploadResponse

UploadHandler = Callable[[Request], Awaitable[dict[str, Any]]]


def build_api_router(categories: Iterable[UploadCategory]) -> APIRouter:
    """
    카테고리마다 POST /<name> 라우트 등록.

    Args:
        categories: 업로드 카테고리 목록

    Returns:
        /api/upload 아래에 include할 APIRouter
    """
    api_router = APIRouter()
    for category in categories:
        api_router.add_api_route(
            f"/{category.name}",
            make_upload_handler(category),
            methods=["POST"],
            name=f"upload_{category.name}",
            summary=f"{category.label} upload",
        )
    return api_router


def make_upload_handler(category: UploadCategory) -> UploadHandler:
    """카테고리 하나에 대한 업로드 핸들러 생성."""

    async def upload(request: Request) -> dict[str, Any]:
        check_content_length(request, category)

        storage: UploadStorage = request.app.state.storage
        settings: ServerSettings = request.app.state.settings

        form = await read_form(request, category)
        try:
            parts = form.getlist(UPLOAD_FIELD_NAME)
            if len(parts) > 1:
                raise UploadRejectError(
                    ErrorCodes.UNEXPECTED_FILE,
                    category=category.name,
                    parts=len(parts),
                )

            upload_file = parts[0] if parts else None
            if not isinstance(upload_file, UploadFile) or not upload_file.filename:
                raise UploadRejectError(ErrorCodes.MISSING_FILE, category=category.name)

            # 디스크 복사는 스레드풀에서
            stored = await run_in_threadpool(
                storage.save,
                category,
                upload_file.filename,
                upload_file.file,
                upload_file.content_type or get_mime_type(upload_file.filename),
            )
        finally:
            await form.close()

        log_upload(stored)
        return UploadResponse.from_stored(stored, settings.base_url).to_dict()

    upload.__name__ = f"upload_{category.name}"
    return upload


async def read_form(request: Request, category: UploadCategory) -> FormData:
    """
    본문 파싱.

    깨진 multipart(경계 누락 등)나 Starlette 폼 제한 초과는 Starlette가
    HTTPException(400)으로 올리므로 MISSING_FILE로 바꿔 {error, code} 계약을 유지한다.
    """
    try:
        return await request.form()
    except HTTPException as e:
        raise UploadRejectError(
            ErrorCodes.MISSING_FILE,
            category=category.name,
            reason=str(e.detail),
        ) from e


def check_content_length(request: Request, category: UploadCategory) -> None:
    """
    Content-Length 사전 검사.

    본문을 받기 전에 명백히 큰 요청을 거절한다.
    multipart 경계/헤더 여유분을 더한 값과 비교하므로 경계 근처 판정은
    저장 단계의 실제 바이트 수 검사에 맡긴다.
    """
    if category.max_size is None:
        return

    raw = request.headers.get("content-length")
    if raw is None or not raw.isdigit():
        return

    if int(raw) > category.max_size + MULTIPART_OVERHEAD_BYTES:
        raise UploadRejectError(
            ErrorCodes.PAYLOAD_TOO_LARGE,
            category=category.name,
            limit=category.max_size,
            content_length=int(raw),
        )

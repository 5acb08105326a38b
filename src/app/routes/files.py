"""
File Routes: 저장된 업로드 파일 제공.

- GET /uploads/{directory}/{filename} → 파일 바이트

폴더 목록 라우트는 없음 (디렉터리 리스팅 비활성).
"""

from fastapi import APIRouter, Request
from fastapi.responses import FileResponse

from src.core.storage import UploadStorage
from src.domain.constants import get_mime_type

router = APIRouter()


@router.api_route("/{directory}/{filename}", methods=["GET", "HEAD"])
async def serve_file(
    request: Request,
    directory: str,
    filename: str,
) -> FileResponse:
    """저장된 파일 제공. 없거나 경로가 uploads 밖이면 404."""
    storage: UploadStorage = request.app.state.storage
    path = storage.resolve(directory, filename)

    return FileResponse(
        path=path,
        media_type=get_mime_type(filename),
    )

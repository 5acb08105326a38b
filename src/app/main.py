"""
FastAPI 애플리케이션 진입점.

실행:
- 개발: uv run uvicorn src.app.main:app --reload --port 3000
- 프로덕션: uv run upload-server (설정의 host/port로 바인딩)
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from typing import Any

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from src.app.config import ServerSettings, load_config
from src.app.routes import files, health, uploads
from src.core.logging import configure_logging, log_startup
from src.core.storage import UploadStorage
from src.domain.constants import UPLOAD_API_PREFIX, UPLOADS_URL_PREFIX
from src.domain.errors import UploadRejectError

logger = logging.getLogger(__name__)


# =============================================================================
# Lifespan
# =============================================================================


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    애플리케이션 생명주기 관리.

    시작 시: 카테고리 폴더 생성, 저장 경로 로그
    종료 시: 정리할 리소스 없음
    """
    # Startup
    settings: ServerSettings = app.state.settings
    storage: UploadStorage = app.state.storage

    directories = storage.ensure_directories()
    log_startup(
        settings.base_url,
        directories,
        {c.name: c.label for c in settings.categories},
    )

    yield

    # Shutdown
    logger.info("Upload server stopped")


# =============================================================================
# Exception Handlers
# =============================================================================


async def handle_upload_reject(request: Request, exc: UploadRejectError) -> JSONResponse:
    """UploadRejectError → JSON 응답 {error, code}."""
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc}")
    else:
        logger.warning(f"{request.method} {request.url.path} rejected: {exc}")

    return JSONResponse(status_code=exc.status_code, content=exc.to_response())


# =============================================================================
# App Factory
# =============================================================================


def create_app(config: dict[str, Any] | None = None) -> FastAPI:
    """
    FastAPI 앱 생성.

    Args:
        config: 설정 dict (None이면 load_config()로 로드)

    Returns:
        라우트/미들웨어가 등록된 FastAPI 앱
    """
    settings = ServerSettings.from_dict(load_config() if config is None else config)
    configure_logging(settings.log_level)

    app = FastAPI(
        title="Upload Server",
        description="모바일 앱용 파일 업로드 서버 (아바타, QR 코드, 결제 증빙, 채팅 미디어)",
        version="0.1.0",
        lifespan=lifespan,
    )

    app.state.settings = settings
    app.state.storage = UploadStorage(
        settings.uploads_dir,
        settings.categories,
        chunk_size=settings.chunk_size,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(UploadRejectError, handle_upload_reject)

    # Routes
    app.include_router(
        uploads.build_api_router(settings.categories),
        prefix=UPLOAD_API_PREFIX,
        tags=["Upload API"],
    )
    app.include_router(files.router, prefix=UPLOADS_URL_PREFIX, tags=["Files"])
    app.include_router(health.api_router, prefix="/api", tags=["Health"])

    return app


# =============================================================================
# App Instance
# =============================================================================

app = create_app()


# =============================================================================
# CLI Entry Point
# =============================================================================


def run() -> None:
    """설정된 host/port로 uvicorn 실행."""
    import uvicorn

    settings: ServerSettings = app.state.settings
    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()

"""Health Routes: 서버 상태 확인."""

from typing import Any

from fastapi import APIRouter, Request

from src.app.config import ServerSettings
from src.domain.constants import HEALTH_STATUS_MESSAGE

api_router = APIRouter()


@api_router.get("/health")
async def health(request: Request) -> dict[str, Any]:
    """헬스 체크."""
    settings: ServerSettings = request.app.state.settings
    return {
        "status": HEALTH_STATUS_MESSAGE,
        "ip": settings.public_host,
        "port": settings.port,
    }

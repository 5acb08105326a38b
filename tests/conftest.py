"""
Pytest fixtures for the upload server tests.

구성:
- uploads 루트는 항상 tmp_path 아래 (프로젝트 uploads/ 오염 금지)
- client fixture는 lifespan을 실행 (카테고리 폴더 생성 포함)
"""

from collections.abc import Generator
from pathlib import Path

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from src.app.config import ServerSettings
from src.app.main import create_app

# =============================================================================
# Path Fixtures
# =============================================================================

@pytest.fixture
def project_root() -> Path:
    """프로젝트 루트 경로."""
    return Path(__file__).parent.parent


@pytest.fixture
def uploads_root(tmp_path: Path) -> Path:
    """테스트용 uploads 루트 (아직 생성 안 됨)."""
    return tmp_path / "uploads"


# =============================================================================
# Config Fixtures
# =============================================================================

@pytest.fixture
def test_config(uploads_root: Path) -> dict:
    """테스트용 설정."""
    return {
        "server": {
            "host": "127.0.0.1",
            "port": 3000,
            "public_host": "10.0.0.5",
        },
        "storage": {
            "uploads_dir": str(uploads_root),
            "chunk_size_kb": 4,
        },
        "categories": {
            "chat": {"max_size_mb": 50},
        },
        "logging": {"level": "DEBUG"},
    }


@pytest.fixture
def settings(test_config: dict) -> ServerSettings:
    return ServerSettings.from_dict(test_config)


# =============================================================================
# App Fixtures
# =============================================================================

@pytest.fixture
def app(test_config: dict) -> FastAPI:
    """테스트용 FastAPI 앱."""
    return create_app(test_config)


@pytest.fixture
def client(app: FastAPI) -> Generator[TestClient, None, None]:
    """테스트 클라이언트 (lifespan 포함)."""
    with TestClient(app) as client:
        yield client


@pytest.fixture
def png_bytes() -> bytes:
    """PNG 시그니처로 시작하는 가짜 이미지."""
    return b"\x89PNG\r\n\x1a\n" + bytes(range(256)) * 4

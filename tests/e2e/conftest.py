"""
E2E 테스트용 라이브 서버.

- uvicorn을 백그라운드 스레드에서 실행
- uploads 루트는 세션 tmp 폴더
- 환경 변수 E2E_PORT로 포트 변경 가능
"""

import asyncio
import os
import threading
import time
from collections.abc import Generator
from pathlib import Path

import httpx
import pytest
import uvicorn

from src.app.main import create_app

HOST = "127.0.0.1"
PORT = int(os.getenv("E2E_PORT", "8765"))


@pytest.fixture(scope="session")
def e2e_uploads_root(tmp_path_factory: pytest.TempPathFactory) -> Path:
    return tmp_path_factory.mktemp("e2e") / "uploads"


@pytest.fixture(scope="session")
def live_server(e2e_uploads_root: Path) -> Generator[str, None, None]:
    """
    FastAPI 앱을 백그라운드에서 실행하는 fixture.

    Returns:
        서버 URL (예: "http://127.0.0.1:8765")
    """
    app = create_app(
        {
            "server": {"host": HOST, "port": PORT, "public_host": HOST},
            "storage": {"uploads_dir": str(e2e_uploads_root)},
            "categories": {"chat": {"max_size_mb": 0.05}},
            "logging": {"level": "WARNING"},
        }
    )

    config = uvicorn.Config(app, host=HOST, port=PORT, log_level="error")
    server = uvicorn.Server(config)

    def run_server() -> None:
        asyncio.run(server.serve())

    thread = threading.Thread(target=run_server, daemon=True)
    thread.start()

    # 서버가 준비될 때까지 대기
    base_url = f"http://{HOST}:{PORT}"
    for _ in range(50):
        try:
            response = httpx.get(f"{base_url}/api/health", timeout=1.0)
            if response.status_code == 200:
                break
        except httpx.TransportError:
            time.sleep(0.1)
    else:
        raise RuntimeError("Failed to start test server")

    yield base_url

    # 서버 종료
    server.should_exit = True
    thread.join(timeout=5)

"""
설정 로드: default.yaml → ServerSettings.

우선순위:
1. 명시적 경로 인자
2. 환경 변수 UPLOAD_SERVER_CONFIG
3. 프로젝트 루트의 default.yaml
파일이 없으면 전부 기본값.
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from src.domain.constants import (
    DEFAULT_BIND_HOST,
    DEFAULT_CATEGORIES,
    DEFAULT_CHUNK_SIZE,
    DEFAULT_CORS_ORIGINS,
    DEFAULT_LOG_LEVEL,
    DEFAULT_PORT,
    DEFAULT_PUBLIC_HOST,
    DEFAULT_PUBLIC_SCHEME,
    DEFAULT_UPLOADS_DIR,
)
from src.domain.schemas import UploadCategory

PROJECT_ROOT = Path(__file__).parent.parent.parent
CONFIG_ENV_VAR = "UPLOAD_SERVER_CONFIG"


def load_config(config_path: Path | None = None) -> dict:
    """설정 파일 로드."""
    if config_path is None:
        env_path = os.getenv(CONFIG_ENV_VAR)
        config_path = Path(env_path) if env_path else PROJECT_ROOT / "default.yaml"

    if not config_path.exists():
        return {}

    with open(config_path, encoding="utf-8") as f:
        data: dict[Any, Any] | None = yaml.safe_load(f)
        return data or {}


@dataclass
class ServerSettings:
    """서버 설정 (시작 시 1회 생성, 이후 불변)."""
    host: str = DEFAULT_BIND_HOST
    port: int = DEFAULT_PORT
    public_host: str = DEFAULT_PUBLIC_HOST
    public_scheme: str = DEFAULT_PUBLIC_SCHEME
    cors_origins: list[str] = field(default_factory=lambda: list(DEFAULT_CORS_ORIGINS))
    uploads_dir: Path = PROJECT_ROOT / DEFAULT_UPLOADS_DIR
    chunk_size: int = DEFAULT_CHUNK_SIZE
    log_level: str = DEFAULT_LOG_LEVEL
    categories: list[UploadCategory] = field(default_factory=list)

    @property
    def base_url(self) -> str:
        """fullPath 접두어."""
        return f"{self.public_scheme}://{self.public_host}:{self.port}"

    @classmethod
    def from_dict(cls, config: dict[str, Any], root: Path = PROJECT_ROOT) -> "ServerSettings":
        """
        설정 dict → ServerSettings.

        Args:
            config: load_config() 결과
            root: 상대 경로 uploads_dir의 기준 폴더

        Returns:
            ServerSettings

        Raises:
            ValueError: 잘못된 포트, 크기, 카테고리 설정
        """
        server = config.get("server") or {}
        storage = config.get("storage") or {}
        logging_cfg = config.get("logging") or {}

        port = server.get("port", DEFAULT_PORT)
        if isinstance(port, bool) or not isinstance(port, int) or not 1 <= port <= 65535:
            raise ValueError(f"server.port must be an integer in 1-65535, got {port!r}")

        uploads_dir = Path(storage.get("uploads_dir", DEFAULT_UPLOADS_DIR))
        if not uploads_dir.is_absolute():
            uploads_dir = root / uploads_dir

        chunk_size_kb = storage.get("chunk_size_kb")
        chunk_size = DEFAULT_CHUNK_SIZE
        if chunk_size_kb is not None:
            if isinstance(chunk_size_kb, bool) or not isinstance(chunk_size_kb, int) or chunk_size_kb <= 0:
                raise ValueError(f"storage.chunk_size_kb must be a positive integer, got {chunk_size_kb!r}")
            chunk_size = chunk_size_kb * 1024

        cors_origins = server.get("cors_origins", list(DEFAULT_CORS_ORIGINS))
        if isinstance(cors_origins, str):
            cors_origins = [cors_origins]

        return cls(
            host=str(server.get("host", DEFAULT_BIND_HOST)),
            port=port,
            public_host=str(server.get("public_host", DEFAULT_PUBLIC_HOST)),
            public_scheme=str(server.get("public_scheme", DEFAULT_PUBLIC_SCHEME)),
            cors_origins=[str(o) for o in cors_origins],
            uploads_dir=uploads_dir,
            chunk_size=chunk_size,
            log_level=str(logging_cfg.get("level", DEFAULT_LOG_LEVEL)).upper(),
            categories=_build_categories(config.get("categories") or {}),
        )


def _build_categories(overrides: dict[str, Any]) -> list[UploadCategory]:
    """
    기본 카테고리 4종에 설정 오버라이드 병합.

    알 수 없는 카테고리 이름은 거부 (라우트는 4개 고정).
    """
    unknown = set(overrides) - set(DEFAULT_CATEGORIES)
    if unknown:
        raise ValueError(f"Unknown upload categories: {sorted(unknown)}")

    categories = []
    for name, defaults in DEFAULT_CATEGORIES.items():
        merged = {**defaults, **(overrides.get(name) or {})}
        categories.append(UploadCategory.from_dict(name, merged))
    return categories

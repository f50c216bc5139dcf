from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

_RECORDED_DIR = Path(__file__).resolve().parent / "backend" / "recorded"


class Settings(BaseSettings):
    """Runtime configuration for the map client and the local replay API."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="URBANVITALITY_",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    api_url: str = "http://127.0.0.1:5000"
    request_timeout: float = 20.0

    replay_dir: Path = _RECORDED_DIR
    replay_port: int = 5000

    server_name: str = "0.0.0.0"
    server_port: int = 7860

    log_level: str = "INFO"


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()

"""
Settings for the web API and the terminal form (pydantic-settings).

Values come from WALL_AREA_* environment variables or a .env file in the
project root.
"""
from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

PROJECT_ROOT = Path(__file__).resolve().parents[1]


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="WALL_AREA_",
        env_file=PROJECT_ROOT / ".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    app_name: str = "Wall Area Calculator"
    log_level: str = Field(default="INFO", description="Logging level")

    api_host: str = Field(default="127.0.0.1", description="API host")
    api_port: int = Field(default=8000, ge=1, le=65535, description="API port")
    reload: bool = False
    allowed_origins: str = Field(default="*", description="Allowed CORS origins (comma-separated)")

    # off: total opening width is not compared with total wall length
    check_opening_widths: bool = False

    history_dir: Path = Field(default=PROJECT_ROOT / "data" / "history")

    @property
    def origins(self) -> list[str]:
        return [o.strip() for o in self.allowed_origins.split(",") if o.strip()]


@lru_cache()
def get_settings() -> Settings:
    return Settings()

from __future__ import annotations

from pathlib import Path
from typing import Any, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_BASE_URL = "https://newsapi.org/v2/"
DEFAULT_TIMEOUT_SECONDS = 10.0


class Settings(BaseSettings):
    """运行时配置模型，从环境变量或 .env 加载。

    环境变量统一使用 ``NEWSAPI_`` 前缀，例如 ``NEWSAPI_API_KEY``、
    ``NEWSAPI_BASE_URL``。
    """

    api_key: Optional[str] = None
    base_url: str = DEFAULT_BASE_URL
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS
    log_level: str = "INFO"

    model_config = SettingsConfigDict(env_file=".env", env_prefix="NEWSAPI_", extra="ignore")

    @classmethod
    def load(cls, env_file: Optional[str | Path] = None, overrides: Optional[dict[str, Any]] = None) -> "Settings":
        """Load settings, allowing an optional .env override and programmatic overrides."""
        kwargs: dict[str, Any] = {}
        if env_file:
            kwargs["_env_file"] = env_file
        if overrides:
            kwargs.update(overrides)
        return cls(**kwargs)

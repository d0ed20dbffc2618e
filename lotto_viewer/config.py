"""Environment-based configuration."""

from __future__ import annotations

import os
from dataclasses import dataclass


DEFAULT_ANALYSIS_API_URL = "http://localhost:3000/lotto/analyze"


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError:
        return default


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def resolve_analysis_api_url() -> str:
    """Resolve the analysis endpoint.

    Device-specific hosts differ per target, e.g.:
      - local browser / iOS simulator: http://localhost:3000/lotto/analyze
      - Android emulator: http://10.0.2.2:3000/lotto/analyze
      - LAN device: http://192.168.x.x:3000/lotto/analyze
    """

    explicit = (os.getenv("ANALYSIS_API_URL") or "").strip()
    return explicit or DEFAULT_ANALYSIS_API_URL


@dataclass(frozen=True)
class BaseConfig:
    """Base configuration shared by all environments."""

    APP_ENV: str = os.getenv("APP_ENV", "development")
    SECRET_KEY: str = os.getenv("SECRET_KEY", "dev-secret")
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    ANALYSIS_API_URL: str = resolve_analysis_api_url()
    ANALYSIS_API_TIMEOUT: float = _env_float("ANALYSIS_API_TIMEOUT", 30.0)
    # 0 keeps the single-request behaviour; the user retries manually.
    ANALYSIS_API_RETRIES: int = _env_int("ANALYSIS_API_RETRIES", 0)


@dataclass(frozen=True)
class DevelopmentConfig(BaseConfig):
    """Development configuration."""

    DEBUG: bool = True


@dataclass(frozen=True)
class ProductionConfig(BaseConfig):
    """Production configuration."""

    DEBUG: bool = False


def get_config() -> type[BaseConfig]:
    """Resolve configuration class based on APP_ENV."""

    env = os.getenv("APP_ENV", "development").lower().strip()
    if env == "production":
        return ProductionConfig
    return DevelopmentConfig

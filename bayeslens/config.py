"""
BayesLens Configuration.

Pydantic Settings v2 — loads from .env, environment variables.
"""

from typing import List, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # ── Application ──────────────────────────────────────────────────────
    app_name: str = "BayesLens"
    app_version: str = "1.0.0"
    environment: str = Field(default="development", alias="BAYESLENS_ENVIRONMENT")
    debug: bool = Field(default=False, alias="BAYESLENS_DEBUG")

    # ── Logging ──────────────────────────────────────────────────────────
    log_level: str = Field(default="INFO", alias="BAYESLENS_LOG_LEVEL")
    log_format: str = Field(default="console", alias="BAYESLENS_LOG_FORMAT")  # console | json

    # ── API ───────────────────────────────────────────────────────────────
    api_host: str = Field(default="0.0.0.0", alias="BAYESLENS_API_HOST")
    api_port: int = Field(default=8010, alias="BAYESLENS_API_PORT")
    api_prefix: str = "/api/v1"
    allowed_origins: List[str] = Field(
        default=["http://localhost:5173"],
        alias="BAYESLENS_CORS_ORIGINS",
    )

    # ── Engine ────────────────────────────────────────────────────────────
    default_log_base: float = Field(default=2.0, alias="BAYESLENS_LOG_BASE")
    default_point_count: int = Field(default=11, alias="BAYESLENS_POINT_COUNT")
    eval_point_count: int = Field(default=201, alias="BAYESLENS_EVAL_POINT_COUNT")
    max_point_count: int = Field(default=5000, alias="BAYESLENS_MAX_POINT_COUNT")
    domain_min: float = Field(default=0.0, alias="BAYESLENS_DOMAIN_MIN")
    domain_max: float = Field(default=1.0, alias="BAYESLENS_DOMAIN_MAX")

    # ── Samplers ──────────────────────────────────────────────────────────
    # None → OS entropy; set for reproducible random presets
    sampler_seed: Optional[int] = Field(default=None, alias="BAYESLENS_SAMPLER_SEED")

    @property
    def default_domain(self) -> tuple[float, float]:
        return (self.domain_min, self.domain_max)


settings = Settings()

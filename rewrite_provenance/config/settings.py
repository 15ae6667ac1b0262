# rewrite_provenance/config/settings.py

from functools import lru_cache
from typing import Literal, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # --- Application ---
    app_name: str = "rewrite-provenance"
    environment: Literal["dev", "test", "prod"] = "dev"

    # --- Database ---
    database_url: str = "postgresql+asyncpg://localhost:5432/rewrite_provenance"

    # --- Audit record ---
    audit_record_type: str = Field("Provenance", min_length=1)
    reason_code_system: str = Field(
        "http://terminology.hl7.org/CodeSystem/v3-ActReason", min_length=1
    )
    reason_code: str = Field("PATADMIN", min_length=1)
    persist_timeout_seconds: Optional[float] = Field(None, gt=0)

    # --- Observability ---
    enable_metrics: bool = True
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"


@lru_cache
def get_settings() -> AppSettings:
    return AppSettings()

"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - All settings overridable from environment variables (case-insensitive)
    - get_settings() is cached (lru_cache) — single instance per process

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support (ADR: developer UX)
    - Defaults provided for every setting: works out-of-the-box in a cluster
"""

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    service_name: str = "ibmvpccluster-webhook"

    # Server
    host: str = "0.0.0.0"
    port: int = 9443

    # Admission
    admission_review_versions: list[str] = [
        "admission.k8s.io/v1",
        "admission.k8s.io/v1beta1",
    ]

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"

    @field_validator("log_format")
    @classmethod
    def check_log_format(cls, v: str) -> str:
        v = v.lower()
        if v not in ("json", "text"):
            raise ValueError("log_format must be 'json' or 'text'")
        return v


@lru_cache
def get_settings() -> Settings:
    return Settings()

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Service settings.

    Notes:
    - Defaults run the service against a local SQLite file with no setup.
    - Every field can be overridden with an `APP_`-prefixed env var.
    """

    model_config = SettingsConfigDict(env_prefix="APP_", extra="ignore")

    db_url: str | None = None
    log_level: str = "INFO"
    api_prefix: str = ""

    # 500 bodies carry the database's own message unless this is turned off.
    expose_store_errors: bool = True
    # Update/delete of an id that matches no row answers 404 instead of 200.
    report_missing_as_not_found: bool = False

    def resolved_db_url(self) -> str:
        if self.db_url:
            return self.db_url

        repo_root = Path(__file__).resolve().parents[1]
        db_path = repo_root / "employees.db"
        return f"sqlite:///{db_path}"


@lru_cache
def get_settings() -> Settings:
    return Settings()

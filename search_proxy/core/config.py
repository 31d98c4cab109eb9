from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    app_name: str = Field(default="Playground Search Proxy", alias="APP_NAME")
    app_env: Literal["dev", "staging", "prod"] = Field(default="dev", alias="APP_ENV")
    app_host: str = Field(default="0.0.0.0", alias="APP_HOST")
    app_port: int = Field(default=8000, alias="APP_PORT")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    upstream_base_url: str = Field(default="https://playground.com", alias="UPSTREAM_BASE_URL")
    # Next.js build ids rotate with every upstream deployment.
    upstream_build_id: str = Field(default="", alias="UPSTREAM_BUILD_ID")
    upstream_search_url_template: str = Field(default="", alias="UPSTREAM_SEARCH_URL_TEMPLATE")
    upstream_timeout_seconds: float = Field(default=12, alias="UPSTREAM_TIMEOUT_SECONDS")
    upstream_user_agent: str = Field(default="PlaygroundSearchProxy/1.0", alias="UPSTREAM_USER_AGENT")

    metrics_port: int = Field(default=0, alias="METRICS_PORT")

    @property
    def upstream_search_url(self) -> str:
        override = self.upstream_search_url_template.strip()
        if override:
            return override
        base = self.upstream_base_url.rstrip("/")
        build_id = self.upstream_build_id.strip()
        return f"{base}/_next/data/{build_id}/search.json?q={{query}}"

    def missing_settings(self) -> list[str]:
        missing: list[str] = []
        if not self.upstream_search_url_template.strip() and not self.upstream_build_id.strip():
            missing.append("UPSTREAM_BUILD_ID")
        return missing


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()


settings = get_settings()

from typing import Literal

from pydantic import Field
from pydantic import SecretStr
from pydantic_settings import BaseSettings
from pydantic_settings import SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    Values are read from process environment and optionally from `.env`.
    """

    github_login: str = Field(default="mrshyspy", min_length=1)
    github_token: SecretStr | None = None
    github_graphql_url: str = "https://api.github.com/graphql"
    github_timeout_seconds: float | None = 20.0
    database_url: str = "sqlite+pysqlite:///./portfolio.db"
    default_theme: Literal["light", "dark"] = "light"
    log_level: str = "INFO"
    sentry_dsn: str | None = None
    environment: str = "development"
    release: str | None = None
    sentry_traces_sample_rate: float = 0.1
    rate_limit_per_minute: int = 30
    rate_limit_window_seconds: int = 60

    model_config = SettingsConfigDict(
        env_file=".env", extra="ignore", env_parse_none_str="none"
    )

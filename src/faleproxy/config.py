"""Application configuration.

Configuration is loaded from environment variables. For local development, you can provide a
`.env` file and set `FALEPROXY_ENV_FILE` to point to it.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from faleproxy.models.document import SubstitutionRule


class Settings(BaseSettings):
    """Faleproxy settings.

    All fields are environment-configurable. Prefix is `FALEPROXY_`.
    """

    model_config = SettingsConfigDict(
        env_prefix="FALEPROXY_",
        env_file=None,
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Core
    app_env: Literal["dev", "prod"] = Field(default="dev")
    log_level: str = Field(default="INFO")

    # Substitution
    find_word: str = Field(default="yale", min_length=1)
    replace_word: str = Field(default="fale", min_length=1)
    skip_tags: list[str] = Field(default_factory=lambda: ["script", "style"])
    content_scope: Literal["body", "document"] = Field(default="body")

    # Networking
    http_timeout_s: float = Field(default=10.0, gt=0.0)
    fetch_total_timeout_s: float = Field(default=30.0, gt=0.0)
    http_follow_redirects: bool = Field(default=True)
    http_user_agent: str = Field(
        default=(
            "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) "
            "AppleWebKit/537.36 (KHTML, like Gecko) "
            "Chrome/120.0.0.0 Safari/537.36"
        )
    )

    # API server
    api_host: str = Field(default="0.0.0.0")
    api_port: int = Field(default=3001, ge=1, le=65535)

    def substitution_rule(self) -> SubstitutionRule:
        """Build the find/replace rule configured for this process."""

        return SubstitutionRule(find=self.find_word, replace=self.replace_word)


def load_settings() -> Settings:
    """Load settings from env.

    Returns:
        Settings: Parsed settings.
    """

    env_file_override = os.getenv("FALEPROXY_ENV_FILE")
    if env_file_override:
        env_path = Path(env_file_override)
        return Settings(_env_file=env_path)

    default_env = Path.cwd() / ".env"
    if default_env.exists():
        return Settings(_env_file=default_env)

    return Settings()

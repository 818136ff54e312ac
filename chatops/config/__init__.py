"""Configuration management for the Docker ChatOps bot.

All settings are read from environment variables (or a ``.env`` file in the
working directory) once at startup.

Usage:
    from chatops.config import get_settings

    settings = get_settings()

    # Grouped access
    settings.telegram.allowed_chat_ids
    settings.docker.timeout

    # Flat access
    settings.telegram_bot_token
    settings.docker_timeout
"""

from functools import lru_cache
from typing import Annotated

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

# Import grouped configurations
from .docker import DockerConfig
from .logging import LoggingConfig
from .telegram import TelegramConfig, parse_chat_ids


class Settings(BaseSettings):
    """Application settings with environment variable support.

    Fields are flat so that each maps to one environment variable; the
    ``telegram``, ``docker`` and ``logging`` properties expose them grouped.
    """

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", case_sensitive=False, extra="ignore")

    # Telegram Configuration
    telegram_bot_token: str = Field(default="", description="Bot token issued by @BotFather")
    allowed_chat_ids: Annotated[frozenset[int], NoDecode] = Field(
        default_factory=frozenset,
        description="Comma-separated chat ids allowed to issue commands (empty = nobody)",
    )
    announce_startup: bool = Field(default=True, description="Message every allowed chat when the bot starts")
    menu_ttl_seconds: int = Field(
        default=300,
        ge=10,
        le=86400,
        description="Seconds a container selection keyboard stays answerable",
    )

    # Docker Configuration
    docker_base_url: str | None = Field(default=None, description="Docker daemon URL (unset = DOCKER_HOST / default socket)")
    docker_timeout: int = Field(default=60, ge=1, le=3600, description="Deadline in seconds for each engine call")
    docker_log_tail: int = Field(default=30, ge=1, le=1000, description="Number of log lines returned by /logs")

    # Logging Configuration
    log_level: str = Field(default="INFO")
    log_format: str = Field(default="json")
    log_file: str | None = Field(default=None)
    log_max_size_mb: int = Field(default=100, ge=1)
    log_backup_count: int = Field(default=5, ge=1)
    enable_security_logs: bool = Field(default=True)

    # ========================================================================
    # VALIDATORS
    # ========================================================================

    @field_validator("telegram_bot_token", mode="before")
    @classmethod
    def strip_token(cls, v):
        """Strip surrounding whitespace from the bot token."""
        return v.strip() if isinstance(v, str) else v

    @field_validator("allowed_chat_ids", mode="before")
    @classmethod
    def parse_allowed_chat_ids(cls, v):
        """Parse comma-separated chat ids into a frozenset."""
        return parse_chat_ids(v)

    @field_validator("log_format")
    @classmethod
    def validate_log_format(cls, v):
        """Only JSON and console renderers are available."""
        if v.lower() not in ("json", "console"):
            raise ValueError("log_format must be 'json' or 'console'")
        return v.lower()

    # ========================================================================
    # GROUPED CONFIG ACCESS
    # ========================================================================

    @property
    def telegram(self) -> TelegramConfig:
        """Access Telegram configuration group."""
        return TelegramConfig(
            telegram_bot_token=self.telegram_bot_token,
            allowed_chat_ids=self.allowed_chat_ids,
            announce_startup=self.announce_startup,
            menu_ttl_seconds=self.menu_ttl_seconds,
        )

    @property
    def docker(self) -> DockerConfig:
        """Access Docker configuration group."""
        return DockerConfig(
            docker_base_url=self.docker_base_url,
            docker_timeout=self.docker_timeout,
            docker_log_tail=self.docker_log_tail,
        )

    @property
    def logging(self) -> LoggingConfig:
        """Access logging configuration group."""
        return LoggingConfig(
            log_level=self.log_level,
            log_format=self.log_format,
            log_file=self.log_file,
            log_max_size_mb=self.log_max_size_mb,
            log_backup_count=self.log_backup_count,
            enable_security_logs=self.enable_security_logs,
        )


@lru_cache()
def get_settings() -> Settings:
    """Load settings once per process."""
    return Settings()


__all__ = [
    "Settings",
    "get_settings",
    "parse_chat_ids",
    # Grouped configs
    "TelegramConfig",
    "DockerConfig",
    "LoggingConfig",
]

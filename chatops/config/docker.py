"""Docker configuration."""

from pydantic import Field
from pydantic_settings import BaseSettings


class DockerConfig(BaseSettings):
    """Docker engine connection settings."""

    base_url: str | None = Field(default=None, alias="docker_base_url")
    timeout: int = Field(default=60, ge=1, le=3600, alias="docker_timeout")
    log_tail: int = Field(default=30, ge=1, le=1000, alias="docker_log_tail")

    class Config:
        env_prefix = ""
        extra = "ignore"

"""Configuration validation utilities."""

import re
from typing import Any, Dict, List, Optional

import structlog
from docker.errors import DockerException

from ..config import Settings, get_settings
from ..services.container.client import DockerClientFactory

logger = structlog.get_logger(__name__)

TOKEN_PATTERN = re.compile(r"^\d+:[A-Za-z0-9_-]+$")
DOCKER_PING_TIMEOUT = 5


class ConfigValidator:
    """Validates configuration and Docker connectivity at startup.

    Errors stop the bot; warnings are logged and startup continues.
    """

    def __init__(self, settings: Optional[Settings] = None, check_docker: bool = True):
        self.settings = settings or get_settings()
        self.check_docker = check_docker
        self.errors: List[str] = []
        self.warnings: List[str] = []

    def validate_all(self) -> bool:
        """Validate all configuration settings and the Docker daemon."""
        self.errors.clear()
        self.warnings.clear()

        self._validate_telegram_config()
        if self.check_docker:
            self._validate_docker_connection()

        for warning in self.warnings:
            logger.warning(f"Configuration warning: {warning}")

        if self.errors:
            for error in self.errors:
                logger.error(f"Configuration error: {error}")
            return False

        return True

    def _validate_telegram_config(self):
        """Validate the bot token and allow-list."""
        token = self.settings.telegram_bot_token
        if not token:
            self.errors.append("TELEGRAM_BOT_TOKEN is empty")
        elif not TOKEN_PATTERN.match(token):
            self.warnings.append("TELEGRAM_BOT_TOKEN does not look like a bot token")

        if not self.settings.allowed_chat_ids:
            self.warnings.append("ALLOWED_CHAT_IDS is empty - no chat will be able to issue commands")

    def _validate_docker_connection(self):
        """Ping the Docker daemon; an unreachable daemon is only a warning."""
        factory = DockerClientFactory(self.settings.docker)
        try:
            with factory.connect(timeout=DOCKER_PING_TIMEOUT) as client:
                client.ping()
        except DockerException as e:
            self.warnings.append(f"Docker connection error: {e}")
        except Exception as e:
            self.warnings.append(f"Docker validation error: {e}")


def validate_configuration(settings: Optional[Settings] = None) -> bool:
    """Validate application configuration."""
    validator = ConfigValidator(settings)
    return validator.validate_all()


def get_configuration_summary(settings: Optional[Settings] = None) -> Dict[str, Any]:
    """Get a summary of current configuration for the startup log."""
    settings = settings or get_settings()
    return {
        "allowed_chats": len(settings.allowed_chat_ids),
        "announce_startup": settings.announce_startup,
        "menu_ttl_seconds": settings.menu_ttl_seconds,
        "docker_base_url": settings.docker_base_url or "environment",
        "docker_timeout": settings.docker_timeout,
        "log_level": settings.log_level,
    }

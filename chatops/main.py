"""Entry point for the Docker ChatOps bot."""

# Standard library imports
import sys

# Third-party imports
import structlog
from pydantic import ValidationError
from telegram import Update

# Local application imports
from ._version import __version__
from .bot import build_application
from .config import LoggingConfig, get_settings
from .utils import setup_logging
from .utils.config_validator import get_configuration_summary, validate_configuration

logger = structlog.get_logger()


def main() -> None:
    """Load configuration, validate it and poll Telegram until interrupted."""
    try:
        settings = get_settings()
    except ValidationError as e:
        # Settings could not be built, so log with defaults
        setup_logging(LoggingConfig())
        logger.error("Invalid configuration - shutting down", errors=e.errors(include_url=False))
        sys.exit(1)

    setup_logging(settings.logging)
    logger.info("Starting docker-chatops", version=__version__)

    if not validate_configuration(settings):
        logger.error("Configuration validation failed - shutting down")
        sys.exit(1)

    logger.info("Configuration loaded", **get_configuration_summary(settings))

    application = build_application(settings)
    # run_polling installs SIGINT/SIGTERM handlers and shuts down cleanly
    application.run_polling(allowed_updates=Update.ALL_TYPES)
    logger.info("docker-chatops stopped")


if __name__ == "__main__":
    main()

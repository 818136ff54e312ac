"""Service wiring for the Docker ChatOps bot."""

# Standard library imports
from functools import lru_cache

# Third-party imports
import structlog

# Local application imports
from ..config import get_settings
from ..services import (
    ChatAuthorizer,
    CommandDispatcher,
    ContainerManager,
    DockerClientFactory,
    SelectionMenuRegistry,
)

logger = structlog.get_logger(__name__)


@lru_cache()
def get_authorizer() -> ChatAuthorizer:
    """Get the allow-list authorizer."""
    return ChatAuthorizer(get_settings().allowed_chat_ids)


@lru_cache()
def get_container_manager() -> ContainerManager:
    """Get the Docker engine operations service."""
    return ContainerManager(client_factory=DockerClientFactory(get_settings().docker))


@lru_cache()
def get_menu_registry() -> SelectionMenuRegistry:
    """Get the per-chat selection menu registry."""
    return SelectionMenuRegistry(ttl_seconds=get_settings().menu_ttl_seconds)


@lru_cache()
def get_dispatcher() -> CommandDispatcher:
    """Get the command dispatcher wired to the shared services."""
    dispatcher = CommandDispatcher(
        authorizer=get_authorizer(),
        container_manager=get_container_manager(),
        menus=get_menu_registry(),
    )
    logger.info("Command dispatcher ready", commands=list(dispatcher.commands))
    return dispatcher

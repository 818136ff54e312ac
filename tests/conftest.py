"""Pytest configuration and shared fixtures."""

import os
from datetime import datetime, timedelta
from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from docker import APIClient, DockerClient

# Set test environment before importing config
os.environ["TELEGRAM_BOT_TOKEN"] = "123456:TEST-token_for_testing"
os.environ["ALLOWED_CHAT_IDS"] = "100,200"
os.environ["ANNOUNCE_STARTUP"] = "false"
os.environ["LOG_FORMAT"] = "console"

from chatops.config import DockerConfig, Settings
from chatops.services.auth import ChatAuthorizer
from chatops.services.container import ContainerManager, DockerClientFactory
from chatops.services.dispatcher import CommandDispatcher
from chatops.services.menu import SelectionMenuRegistry

AUTHORIZED_CHAT = 100
OTHER_AUTHORIZED_CHAT = 200


class FakeClock:
    """Manually advanced clock for menu expiry tests."""

    def __init__(self, start: datetime = datetime(2024, 1, 1, 12, 0, 0)):
        self.now = start

    def __call__(self) -> datetime:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += timedelta(seconds=seconds)


@pytest.fixture
def settings():
    """Settings built from explicit values, ignoring any .env file."""
    return Settings(
        _env_file=None,
        telegram_bot_token="123456:TEST-token_for_testing",
        allowed_chat_ids="100,200",
        announce_startup=True,
        menu_ttl_seconds=300,
    )


@pytest.fixture
def docker_config():
    """Docker settings with the default deadline."""
    return DockerConfig(docker_timeout=60, docker_log_tail=30)


@pytest.fixture
def mock_docker():
    """Mock Docker client for testing."""
    mock_client = MagicMock(spec=DockerClient)
    mock_client.api = MagicMock(spec=APIClient)

    mock_client.api.containers.return_value = []
    mock_client.api.images.return_value = []
    mock_client.api.logs.return_value = b"line 1\nline 2\n"
    mock_client.api.restart.return_value = None
    mock_client.version.return_value = {"Version": "24.0.7", "ApiVersion": "1.43"}

    return mock_client


@pytest.fixture
def client_factory(docker_config, mock_docker):
    """DockerClientFactory that hands out the mock client."""
    factory = DockerClientFactory(docker_config)
    with patch.object(factory, "create_client", return_value=mock_docker):
        yield factory


@pytest.fixture
def container_manager(client_factory, docker_config):
    """ContainerManager backed by the mock Docker client."""
    return ContainerManager(client_factory=client_factory, config=docker_config)


@pytest.fixture
def mock_container_manager():
    """Fully mocked engine operations."""
    manager = AsyncMock(spec=ContainerManager)
    manager.list_containers.return_value = "*Containers:*\n\n"
    manager.list_container_names.return_value = ["a", "b"]
    manager.tail_logs.return_value = "hello\n"
    manager.restart_container.return_value = "Container restarted."
    manager.list_images.return_value = "There are 0 untagged images."
    manager.get_engine_version.return_value = "24.0.7"
    return manager


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def menus(clock):
    return SelectionMenuRegistry(ttl_seconds=300, clock=clock)


@pytest.fixture
def authorizer():
    return ChatAuthorizer({AUTHORIZED_CHAT, OTHER_AUTHORIZED_CHAT})


@pytest.fixture
def dispatcher(authorizer, mock_container_manager, menus):
    """CommandDispatcher with a mocked engine."""
    return CommandDispatcher(
        authorizer=authorizer,
        container_manager=mock_container_manager,
        menus=menus,
        bot_version="v1.1.3",
    )

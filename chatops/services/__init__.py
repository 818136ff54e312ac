"""Services module for the Docker ChatOps bot."""

from .auth import ChatAuthorizer
from .container import ContainerManager, DockerClientFactory
from .dispatcher import CommandDispatcher
from .menu import SelectionMenuRegistry

__all__ = [
    "ChatAuthorizer",
    "CommandDispatcher",
    "ContainerManager",
    "DockerClientFactory",
    "SelectionMenuRegistry",
]

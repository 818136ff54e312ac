"""Container engine services.

- client.py: short-lived Docker client factory
- manager.py: the engine operations behind the chat commands
"""

from .client import DockerClientFactory
from .manager import ContainerManager

__all__ = ["ContainerManager", "DockerClientFactory"]

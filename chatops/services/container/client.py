"""Docker client factory."""

from contextlib import contextmanager
from typing import Iterator, Optional

import docker
import structlog

from ...config import DockerConfig, get_settings

logger = structlog.get_logger(__name__)


class DockerClientFactory:
    """Creates short-lived Docker clients.

    Every engine operation gets its own client which is closed as soon as
    the operation returns, so a daemon restart never leaves a stale
    connection behind.
    """

    def __init__(self, config: Optional[DockerConfig] = None):
        self.config = config or get_settings().docker

    def create_client(self, timeout: Optional[float] = None) -> docker.DockerClient:
        """Create a client for the configured daemon.

        Without ``DOCKER_BASE_URL`` the standard ``DOCKER_HOST`` /
        ``DOCKER_TLS_VERIFY`` environment is honoured, like the docker CLI.
        """
        timeout = timeout or self.config.timeout
        if self.config.base_url:
            return docker.DockerClient(base_url=self.config.base_url, timeout=timeout)
        return docker.from_env(timeout=timeout)

    @contextmanager
    def connect(self, timeout: Optional[float] = None) -> Iterator[docker.DockerClient]:
        """Yield a fresh client and close it afterwards."""
        client = self.create_client(timeout=timeout)
        try:
            yield client
        finally:
            try:
                client.close()
            except Exception as e:
                logger.warning("Error closing Docker client", error=str(e))

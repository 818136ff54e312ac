"""Docker engine operations used by the chat commands."""

import asyncio
from typing import Any, Callable, Dict, List, Optional, TypeVar

import docker
import structlog

from ...config import DockerConfig, get_settings
from ...models.errors import EngineError, EngineTimeoutError
from ...utils.error_handlers import handle_docker_error
from ...utils.formatting import format_containers, format_images
from .client import DockerClientFactory

logger = structlog.get_logger(__name__)

T = TypeVar("T")

RESTARTED_MESSAGE = "Container restarted."


class ContainerManager:
    """Runs single-shot Docker engine calls with a deadline.

    The Docker SDK is blocking, so each call runs in the default executor
    and is bounded by ``asyncio.wait_for``. Nothing is retried: a failure
    or an overrun is raised as an ``EngineError`` carrying the engine's
    message.

    ``wait_for`` cannot stop the worker thread of a timed-out call; it runs
    on until the SDK returns. The client is opened with the same deadline
    as its HTTP timeout so that thread is freed shortly after the chat has
    been told about the timeout.
    """

    def __init__(
        self,
        client_factory: Optional[DockerClientFactory] = None,
        config: Optional[DockerConfig] = None,
    ):
        self.config = config or (client_factory.config if client_factory else get_settings().docker)
        self._client_factory = client_factory or DockerClientFactory(self.config)

    async def _run(
        self,
        operation: str,
        call: Callable[[docker.DockerClient], T],
        deadline: Optional[float] = None,
    ) -> T:
        """Open a client, run ``call`` with it in a worker thread, close it."""
        timeout = deadline or self.config.timeout

        def _execute() -> T:
            with self._client_factory.connect(timeout=timeout) as client:
                return call(client)

        loop = asyncio.get_running_loop()
        try:
            return await asyncio.wait_for(loop.run_in_executor(None, _execute), timeout=timeout)
        except asyncio.TimeoutError:
            logger.error("Docker call timed out", operation=operation, timeout=timeout)
            raise EngineTimeoutError(operation, timeout)
        except EngineError:
            raise
        except Exception as e:
            logger.error("Docker call failed", operation=operation, error=str(e))
            raise handle_docker_error(e, operation=operation, timeout=timeout) from e

    async def _list_raw_containers(self, deadline: Optional[float] = None) -> List[Dict[str, Any]]:
        return await self._run(
            "list containers",
            lambda client: client.api.containers(all=True),
            deadline,
        )

    async def list_containers(self, deadline: Optional[float] = None) -> str:
        """All containers, running and stopped, rendered for chat."""
        containers = await self._list_raw_containers(deadline)
        return format_containers(containers)

    async def list_container_names(self, deadline: Optional[float] = None) -> List[str]:
        """Names of all containers in engine listing order.

        A container can report several names; each one is returned.
        """
        containers = await self._list_raw_containers(deadline)
        names = []
        for container in containers:
            names.extend(container.get("Names") or [])
        return names

    async def tail_logs(
        self,
        container_name: str,
        lines: Optional[int] = None,
        deadline: Optional[float] = None,
    ) -> str:
        """Last lines of combined stdout and stderr of a container."""
        tail = lines or self.config.log_tail

        def _logs(client: docker.DockerClient) -> bytes:
            return client.api.logs(container_name, stdout=True, stderr=True, tail=tail)

        output = await self._run(f"logs {container_name}", _logs, deadline)
        if isinstance(output, bytes):
            output = output.decode("utf-8", errors="replace")
        return output

    async def restart_container(self, container_name: str, deadline: Optional[float] = None) -> str:
        """Restart a container, giving it the SDK default 10 seconds to stop."""
        await self._run(
            f"restart {container_name}",
            lambda client: client.api.restart(container_name),
            deadline,
        )
        logger.info("Container restarted", container=container_name)
        return RESTARTED_MESSAGE

    async def list_images(self, deadline: Optional[float] = None) -> str:
        """All images rendered for chat: tags and size, plus untagged count."""
        images = await self._run(
            "list images",
            lambda client: client.api.images(all=True),
            deadline,
        )
        return format_images(images)

    async def get_engine_version(self, deadline: Optional[float] = None) -> str:
        """Version string reported by the Docker daemon."""
        version = await self._run(
            "engine version",
            lambda client: client.version(),
            deadline,
        )
        return str(version.get("Version", "unknown"))

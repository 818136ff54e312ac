"""Translation of Docker SDK failures into ChatOps exceptions."""

from typing import Optional

import requests
from docker.errors import APIError, DockerException, ImageNotFound, NotFound

from ..models.errors import (
    ContainerNotFoundError,
    EngineConflictError,
    EngineError,
    EngineTimeoutError,
    EngineUnavailableError,
)


def docker_error_message(error: Exception) -> str:
    """Return the engine's own description of an error.

    API errors carry the daemon's explanation (``No such container: web``);
    everything else falls back to the exception text.
    """
    if isinstance(error, APIError) and error.explanation:
        explanation = error.explanation
        if isinstance(explanation, bytes):
            explanation = explanation.decode("utf-8", errors="replace")
        return str(explanation)
    return str(error) or error.__class__.__name__


def handle_docker_error(
    error: Exception,
    operation: str = "container operation",
    timeout: Optional[float] = None,
) -> EngineError:
    """Convert Docker errors to the matching EngineError subclass."""
    if isinstance(error, EngineError):
        return error

    message = docker_error_message(error)

    if isinstance(error, (NotFound, ImageNotFound)):
        return ContainerNotFoundError(message, operation=operation)
    elif isinstance(error, APIError):
        if error.status_code == 409:
            return EngineConflictError(message, operation=operation)
        return EngineError(message, operation=operation)
    elif isinstance(error, requests.exceptions.Timeout):
        if timeout is not None:
            return EngineTimeoutError(operation, timeout)
        return EngineError(message, operation=operation)
    elif isinstance(error, (requests.exceptions.ConnectionError, DockerException)):
        return EngineUnavailableError(message, operation=operation)
    else:
        return EngineError(message, operation=operation)

"""Error models and exception classes for the Docker ChatOps bot."""

from enum import Enum
from typing import Optional


class ErrorType(str, Enum):
    """Error type enumeration."""

    RESOURCE_NOT_FOUND = "resource_not_found"
    RESOURCE_CONFLICT = "resource_conflict"
    TIMEOUT = "timeout"
    SERVICE_UNAVAILABLE = "service_unavailable"
    ENGINE = "engine"


# Custom Exception Classes


class ChatOpsException(Exception):
    """Base exception for the ChatOps bot."""

    def __init__(self, message: str, error_type: ErrorType = ErrorType.ENGINE):
        self.message = message
        self.error_type = error_type
        super().__init__(message)

    def __str__(self) -> str:
        return self.message


class EngineError(ChatOpsException):
    """A container engine call failed.

    The message is what gets sent back to the chat, so it carries the
    engine's own error text unchanged.
    """

    def __init__(
        self,
        message: str,
        error_type: ErrorType = ErrorType.ENGINE,
        operation: Optional[str] = None,
    ):
        self.operation = operation
        super().__init__(message=message, error_type=error_type)


class EngineUnavailableError(EngineError):
    """The Docker daemon could not be reached."""

    def __init__(self, message: str = "Docker engine is unavailable", **kwargs):
        super().__init__(message=message, error_type=ErrorType.SERVICE_UNAVAILABLE, **kwargs)


class ContainerNotFoundError(EngineError):
    """The named container (or image) does not exist."""

    def __init__(self, message: str, **kwargs):
        super().__init__(message=message, error_type=ErrorType.RESOURCE_NOT_FOUND, **kwargs)


class EngineConflictError(EngineError):
    """The engine refused the call because of the object's current state."""

    def __init__(self, message: str, **kwargs):
        super().__init__(message=message, error_type=ErrorType.RESOURCE_CONFLICT, **kwargs)


class EngineTimeoutError(EngineError):
    """An engine call did not finish before its deadline."""

    def __init__(self, operation: str, timeout: float):
        self.timeout = timeout
        super().__init__(
            message=f"{operation} timed out after {timeout:g} seconds",
            error_type=ErrorType.TIMEOUT,
            operation=operation,
        )

"""Data models for the Docker ChatOps bot."""

from .errors import (
    ErrorType,
    ChatOpsException,
    EngineError,
    EngineUnavailableError,
    ContainerNotFoundError,
    EngineConflictError,
    EngineTimeoutError,
)
from .menu import FlowKind, PendingSelection
from .reply import Reply

__all__ = [
    # Errors
    "ErrorType",
    "ChatOpsException",
    "EngineError",
    "EngineUnavailableError",
    "ContainerNotFoundError",
    "EngineConflictError",
    "EngineTimeoutError",
    # Menus
    "FlowKind",
    "PendingSelection",
    # Replies
    "Reply",
]

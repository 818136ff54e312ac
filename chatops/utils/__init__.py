"""Utility modules for the Docker ChatOps bot."""

from .logging import setup_logging
from .security import SecurityAudit

__all__ = [
    "setup_logging",
    "SecurityAudit",
]

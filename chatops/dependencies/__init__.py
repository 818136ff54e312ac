"""Dependency wiring for the Docker ChatOps bot."""

from .services import (
    get_authorizer,
    get_container_manager,
    get_dispatcher,
    get_menu_registry,
)

__all__ = [
    "get_authorizer",
    "get_container_manager",
    "get_dispatcher",
    "get_menu_registry",
]

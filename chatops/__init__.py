"""Telegram front end for a Docker engine."""

from ._version import __version__

__all__ = ["__version__"]

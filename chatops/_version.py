"""Version information."""

__version__ = "1.1.3"

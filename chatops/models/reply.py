"""Outgoing chat reply model."""

from dataclasses import dataclass
from typing import List, Optional


@dataclass(frozen=True)
class Reply:
    """Text to send back to a chat, optionally with a reply keyboard.

    ``keyboard`` is a list of rows of button labels; the transport layer
    turns it into a one-time, selective reply keyboard.
    """

    text: str
    keyboard: Optional[List[List[str]]] = None

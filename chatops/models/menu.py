"""Container selection menu models.

A menu is opened by ``/logs`` or ``/restart`` and answered by the next text
reply from the same chat. Menus are held per chat and flow kind, so two chats
(or the two flows of one chat) can have menus open without interfering.
"""

from dataclasses import dataclass, field
from datetime import datetime, timedelta
from enum import Enum
from typing import List, Optional, Tuple


class FlowKind(str, Enum):
    """Which action a selection menu triggers."""

    LOGS = "logs"
    RESTART = "restart"

    @property
    def action(self) -> str:
        """Button prefix shown to the user, e.g. ``Logs`` or ``Restart``."""
        return self.value.capitalize()

    @property
    def cancel_label(self) -> str:
        return f"Cancel {self.action}"

    def button_label(self, container_name: str) -> str:
        return f"{self.action} {container_name}"


@dataclass
class PendingSelection:
    """A selection menu waiting for an answer in one chat."""

    chat_id: int
    kind: FlowKind
    buttons: Tuple[str, ...]
    created_at: datetime = field(default_factory=datetime.utcnow)
    expires_at: Optional[datetime] = None

    @classmethod
    def build(
        cls,
        chat_id: int,
        kind: FlowKind,
        container_names: List[str],
        ttl_seconds: Optional[int] = None,
        now: Optional[datetime] = None,
    ) -> "PendingSelection":
        """Create a menu with one button per container name."""
        created_at = now or datetime.utcnow()
        expires_at = created_at + timedelta(seconds=ttl_seconds) if ttl_seconds else None
        return cls(
            chat_id=chat_id,
            kind=kind,
            buttons=tuple(kind.button_label(name) for name in container_names),
            created_at=created_at,
            expires_at=expires_at,
        )

    @property
    def cancel_label(self) -> str:
        return self.kind.cancel_label

    @property
    def keyboard(self) -> List[List[str]]:
        """Rows of button labels, one container per row and cancel last."""
        return [[label] for label in self.buttons] + [[self.cancel_label]]

    def is_expired(self, now: Optional[datetime] = None) -> bool:
        if self.expires_at is None:
            return False
        return (now or datetime.utcnow()) >= self.expires_at

    def is_cancel(self, text: str) -> bool:
        return text == self.cancel_label

    def resolve(self, text: str) -> Optional[str]:
        """Return the container name for a button label, or None.

        The name is everything after the first space of the label.
        """
        if text not in self.buttons:
            return None
        return text.split(" ", 1)[1]

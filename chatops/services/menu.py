"""Per-chat container selection menus."""

from datetime import datetime
from typing import Callable, Dict, List, Optional, Tuple

import structlog

from ..models.menu import FlowKind, PendingSelection

logger = structlog.get_logger(__name__)

MenuKey = Tuple[int, FlowKind]


class SelectionMenuRegistry:
    """Holds at most one open selection menu per chat and flow kind.

    All access happens on the bot's event loop, so the mapping needs no
    locking. Reopening a flow replaces that chat's earlier menu of the same
    kind; a logs menu and a restart menu can be open side by side, and
    other chats are not affected.
    """

    def __init__(
        self,
        ttl_seconds: Optional[int] = None,
        clock: Callable[[], datetime] = datetime.utcnow,
    ):
        self.ttl_seconds = ttl_seconds
        self._clock = clock
        self._pending: Dict[MenuKey, PendingSelection] = {}

    def open(self, chat_id: int, kind: FlowKind, container_names: List[str]) -> PendingSelection:
        """Register a new menu for a chat and return it."""
        menu = PendingSelection.build(
            chat_id=chat_id,
            kind=kind,
            container_names=container_names,
            ttl_seconds=self.ttl_seconds,
            now=self._clock(),
        )
        if (chat_id, kind) in self._pending:
            logger.debug("Replacing open selection menu", chat_id=chat_id, kind=kind.value)
        self._pending[(chat_id, kind)] = menu
        return menu

    def get(self, chat_id: int, kind: FlowKind) -> Optional[PendingSelection]:
        """The chat's open menu of ``kind``, or None if there is none or it expired."""
        menu = self._pending.get((chat_id, kind))
        if menu is None:
            return None
        if menu.is_expired(self._clock()):
            logger.info("Selection menu expired", chat_id=chat_id, kind=kind.value)
            del self._pending[(chat_id, kind)]
            return None
        return menu

    def open_menus(self, chat_id: int) -> List[PendingSelection]:
        """Every live menu of a chat, in flow-kind order."""
        menus = (self.get(chat_id, kind) for kind in FlowKind)
        return [menu for menu in menus if menu is not None]

    def close(self, chat_id: int, kind: FlowKind) -> Optional[PendingSelection]:
        """Remove and return the chat's menu of ``kind``."""
        return self._pending.pop((chat_id, kind), None)

    def purge_expired(self) -> int:
        """Drop every expired menu. Returns how many were dropped."""
        now = self._clock()
        expired = [key for key, menu in self._pending.items() if menu.is_expired(now)]
        for key in expired:
            del self._pending[key]
        return len(expired)

    def __len__(self) -> int:
        return len(self._pending)

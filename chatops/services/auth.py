"""Chat authorization service.

Every command and every menu answer passes through ``authorize`` before
anything else happens. A denied chat gets no reply at all; the attempt is
only written to the security log.
"""

from typing import Iterable, Optional

import structlog

from ..utils.security import SecurityAudit

logger = structlog.get_logger(__name__)


class ChatAuthorizer:
    """Static allow-list of chat ids.

    An empty allow-list authorizes nobody.
    """

    def __init__(self, allowed_chat_ids: Iterable[int]):
        self._allowed_chat_ids = frozenset(allowed_chat_ids)
        if not self._allowed_chat_ids:
            logger.warning("Allow-list is empty, every chat will be denied")

    @property
    def allowed_chat_ids(self) -> frozenset:
        return self._allowed_chat_ids

    def authorize(self, chat_id: Optional[int], command: Optional[str] = None) -> bool:
        """Return True if ``chat_id`` may issue commands.

        Denial has no side effect beyond an audit log entry.
        """
        if chat_id is not None and chat_id in self._allowed_chat_ids:
            return True
        SecurityAudit.log_unauthorized_access(chat_id, command)
        return False

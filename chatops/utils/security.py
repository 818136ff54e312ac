"""Security audit logging for the Docker ChatOps bot."""

from datetime import datetime
from typing import Any, Dict, Optional

from .logging import get_security_logger


class SecurityAudit:
    """Security audit logging and monitoring."""

    @staticmethod
    def log_security_event(
        event_type: str, details: Dict[str, Any], severity: str = "info"
    ):
        """Log security-related events."""
        logger = get_security_logger()
        log_data = {
            "event_type": event_type,
            "severity": severity,
            "timestamp": datetime.utcnow().isoformat(),
            **details,
        }

        if severity == "critical":
            logger.critical("Security event", **log_data)
        elif severity == "warning":
            logger.warning("Security event", **log_data)
        else:
            logger.info("Security event", **log_data)

    @staticmethod
    def log_inbound_message(chat_id: Optional[int], user_id: Optional[int], text: Optional[str]):
        """Record every inbound message before it is dispatched."""
        SecurityAudit.log_security_event(
            "inbound_message",
            {"chat_id": chat_id, "user_id": user_id, "text": text},
        )

    @staticmethod
    def log_unauthorized_access(chat_id: Optional[int], command: Optional[str]):
        """Log a request from a chat that is not on the allow-list."""
        SecurityAudit.log_security_event(
            "unauthorized_access",
            {"chat_id": chat_id, "command": command},
            severity="warning",
        )

    @staticmethod
    def log_command(chat_id: int, command: str, target: Optional[str] = None, success: bool = True):
        """Log a dispatched command and whether the engine call succeeded."""
        SecurityAudit.log_security_event(
            "command",
            {"chat_id": chat_id, "command": command, "target": target, "success": success},
            severity="info" if success else "warning",
        )

"""Unit tests for security audit logging."""

from unittest.mock import patch

from chatops.utils.security import SecurityAudit


class TestSecurityAudit:
    """Tests for SecurityAudit."""

    def test_log_security_event_info(self):
        """Test info events."""
        with patch("chatops.utils.security.get_security_logger") as mock_get_logger:
            SecurityAudit.log_security_event("test_event", {"chat_id": 1})

        mock_get_logger.return_value.info.assert_called_once()
        kwargs = mock_get_logger.return_value.info.call_args.kwargs
        assert kwargs["event_type"] == "test_event"
        assert kwargs["chat_id"] == 1
        assert "timestamp" in kwargs

    def test_log_security_event_severities(self):
        """Test warning and critical events use their log levels."""
        with patch("chatops.utils.security.get_security_logger") as mock_get_logger:
            SecurityAudit.log_security_event("a", {}, severity="warning")
            SecurityAudit.log_security_event("b", {}, severity="critical")

        mock_get_logger.return_value.warning.assert_called_once()
        mock_get_logger.return_value.critical.assert_called_once()

    def test_inbound_message(self):
        """Test inbound messages are recorded with chat, user and text."""
        with patch.object(SecurityAudit, "log_security_event") as mock_log:
            SecurityAudit.log_inbound_message(100, 42, "/ps")

        mock_log.assert_called_once_with("inbound_message", {"chat_id": 100, "user_id": 42, "text": "/ps"})

    def test_unauthorized_access_is_warning(self):
        """Test denied requests are logged as warnings."""
        with patch.object(SecurityAudit, "log_security_event") as mock_log:
            SecurityAudit.log_unauthorized_access(999, "/restart")

        assert mock_log.call_args.kwargs["severity"] == "warning"

    def test_failed_command_is_warning(self):
        """Test a failed engine call is logged as a warning."""
        with patch.object(SecurityAudit, "log_security_event") as mock_log:
            SecurityAudit.log_command(100, "/restart", target="web", success=False)

        args = mock_log.call_args
        assert args.args[1]["target"] == "web"
        assert args.kwargs["severity"] == "warning"

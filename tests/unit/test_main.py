"""Unit tests for the entry point."""

from unittest.mock import MagicMock, patch

import pytest
from pydantic import ValidationError

from chatops import main as main_module
from chatops.config import Settings


@pytest.fixture
def patched(settings):
    with patch.object(main_module, "get_settings", return_value=settings) as get_settings, patch.object(
        main_module, "setup_logging"
    ) as setup_logging, patch.object(
        main_module, "validate_configuration", return_value=True
    ) as validate, patch.object(
        main_module, "build_application"
    ) as build:
        yield MagicMock(get_settings=get_settings, setup_logging=setup_logging, validate=validate, build=build)


class TestMain:
    """Tests for main()."""

    def test_starts_polling(self, patched, settings):
        """Test a valid configuration builds and runs the bot."""
        main_module.main()

        patched.setup_logging.assert_called_once()
        patched.validate.assert_called_once_with(settings)
        patched.build.assert_called_once_with(settings)
        patched.build.return_value.run_polling.assert_called_once()

    def test_validation_failure_exits(self, patched):
        """Test a failed validation stops before polling."""
        patched.validate.return_value = False

        with pytest.raises(SystemExit) as exc_info:
            main_module.main()

        assert exc_info.value.code == 1
        patched.build.assert_not_called()

    def test_invalid_settings_exit(self, patched):
        """Test unparsable settings exit with status 1."""
        try:
            Settings(_env_file=None, allowed_chat_ids="oops")
        except ValidationError as e:
            patched.get_settings.side_effect = e

        with pytest.raises(SystemExit) as exc_info:
            main_module.main()

        assert exc_info.value.code == 1
        patched.build.assert_not_called()

"""
Tests for the command line entry point.
"""

import argparse
import logging
from unittest.mock import MagicMock, patch

from issuehook.infrastructure.notification.discord.webhook_client import (
    WebhookResponse,
)
from issuehook.main import handle_test_command, setup_logging


class TestMain:
    """Tests for main module helpers."""

    def test_handle_test_command(self):
        notifier = MagicMock()
        notifier.notify_created.return_value = WebhookResponse(success=True, status_code=204)
        args = argparse.Namespace(
            issue_id='ABC-1', description='hello', project='Website', actor='Alice'
        )

        with patch('issuehook.container.container') as mock_container:
            mock_container.issue_notifier.return_value = notifier
            assert handle_test_command(args) is True

        notification = notifier.notify_created.call_args.args[0]
        assert notification.issue_id == 'ABC-1'
        assert notification.actor.name == 'Alice'

    def test_handle_test_command_failure(self):
        notifier = MagicMock()
        notifier.notify_created.return_value = WebhookResponse(
            success=False, error_message='Unknown Webhook'
        )
        args = argparse.Namespace(
            issue_id='ABC-1', description='hello', project=None, actor=None
        )

        with patch('issuehook.container.container') as mock_container:
            mock_container.issue_notifier.return_value = notifier
            assert handle_test_command(args) is False

    def test_handle_test_command_disabled(self, caplog):
        notifier = MagicMock()
        notifier.notify_created.return_value = WebhookResponse(success=True, skipped=True)
        args = argparse.Namespace(
            issue_id='ABC-1', description='hello', project=None, actor=None
        )

        with patch('issuehook.container.container') as mock_container, \
                caplog.at_level(logging.WARNING, logger='issuehook.main'):
            mock_container.issue_notifier.return_value = notifier
            assert handle_test_command(args) is False

        assert '测试通知未发送' in caplog.text
        assert '发送成功' not in caplog.text

    def test_setup_logging_creates_log_dir(self, tmp_path):
        root = logging.getLogger()
        saved = root.handlers[:]
        root.handlers.clear()
        try:
            setup_logging(str(tmp_path / 'logs'))
            assert (tmp_path / 'logs').is_dir()
            assert list((tmp_path / 'logs').glob('issuehook_*.log'))
        finally:
            for handler in root.handlers:
                handler.close()
            root.handlers[:] = saved

"""
Test configuration and fixtures for IssueHook tests.

This module provides:
- Pytest fixtures for common notification scenarios
- Mock objects for the Discord webhook client
"""

import sys
from pathlib import Path
from unittest.mock import MagicMock

import pytest

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from tests.fixtures.test_data import DISCORD_WEBHOOK_URL  # noqa: E402


# ==================== Notification Fixtures ====================

@pytest.fixture
def webhook_url() -> str:
    """Discord webhook URL used by tests."""
    return DISCORD_WEBHOOK_URL


@pytest.fixture
def issue_actor():
    """Sample actor."""
    from issuehook.core.interfaces.notifications import IssueActor

    return IssueActor(
        name='Alice',
        profile_url='https://tracker.example.com/users/alice'
    )


@pytest.fixture
def issue_notification(issue_actor):
    """Sample issue notification without changes."""
    from issuehook.core.interfaces.notifications import IssueNotification

    return IssueNotification(
        issue_id='ABC-1',
        summary='Login button does nothing',
        description='Clicking the login button has no effect.',
        url='https://tracker.example.com/issue/ABC-1',
        project='Website',
        actor=issue_actor,
        timestamp='2025-11-29T10:30:00+00:00'
    )


@pytest.fixture
def embed_builder():
    """IssueEmbedBuilder with fixed sender and site settings."""
    from issuehook.infrastructure.notification.discord.embed_builder import (
        IssueEmbedBuilder
    )

    return IssueEmbedBuilder(
        sender_name='Tracker',
        avatar_url='https://tracker.example.com/avatar.png',
        site_name='Acme Tracker'
    )


# ==================== Mock Fixtures ====================

@pytest.fixture
def mock_discord_webhook():
    """Mock Discord webhook client."""
    from issuehook.infrastructure.notification.discord.webhook_client import (
        WebhookResponse
    )

    mock = MagicMock()
    mock.post.return_value = WebhookResponse(success=True, status_code=204)
    return mock


@pytest.fixture
def mock_response():
    """Factory for mock requests.Response objects."""
    def _make(status_code: int = 204, text: str = ''):
        response = MagicMock()
        response.status_code = status_code
        response.text = text
        return response
    return _make

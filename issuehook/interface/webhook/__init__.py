"""
Webhook interface module.

Contains webhook handlers for processing inbound issue events.
"""

from issuehook.interface.webhook.handler import (
    create_webhook_blueprint,
    parse_issue_event,
    webhook_bp,
)

__all__ = [
    'webhook_bp',
    'create_webhook_blueprint',
    'parse_issue_event',
]

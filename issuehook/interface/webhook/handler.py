"""
Webhook handler module.

Accepts issue events that the tracker integration has already reduced to
primitive values and forwards them to the Discord notifier.
"""

import logging
from typing import Any

from flask import Blueprint, jsonify, request

from issuehook.core.exceptions import EventValidationError
from issuehook.core.interfaces.notifications import (
    IIssueNotifier,
    IssueActor,
    IssueChange,
    IssueNotification,
)

logger = logging.getLogger(__name__)

EVENT_TYPES = ('created', 'resolved', 'changed')


def get_issue_notifier() -> IIssueNotifier:
    """Return the application's issue notifier from the DI container."""
    from issuehook.container import container
    return container.issue_notifier()


def _get_str(
    data: dict[str, Any],
    key: str,
    field_name: str,
    required: bool = False
) -> str | None:
    """Read a string value, rejecting any other JSON type."""
    value = data.get(key)
    if value is None or value == '':
        if required:
            raise EventValidationError(f'Missing {field_name}', field_name=field_name)
        return value
    if not isinstance(value, str):
        raise EventValidationError(
            f'{field_name} must be a string, got {type(value).__name__}',
            field_name=field_name
        )
    return value


def parse_issue_event(data: dict[str, Any]) -> tuple[str, IssueNotification]:
    """
    Parse an inbound issue event.

    Args:
        data: Decoded JSON body.

    Returns:
        Tuple of (event_type, notification).

    Raises:
        EventValidationError: If a required field is missing or a field has
            the wrong type.
    """
    event_type = data.get('event_type')
    if event_type not in EVENT_TYPES:
        raise EventValidationError(
            f'Unknown event_type: {event_type!r}',
            field_name='event_type'
        )

    issue_id = _get_str(data, 'issue_id', 'issue_id', required=True)

    actor = None
    actor_data = data.get('actor')
    if actor_data is not None:
        if not isinstance(actor_data, dict):
            raise EventValidationError('Actor must be an object', field_name='actor')
        actor = IssueActor(
            name=_get_str(actor_data, 'name', 'actor.name', required=True),
            profile_url=_get_str(actor_data, 'profile_url', 'actor.profile_url'),
            avatar_url=_get_str(actor_data, 'avatar_url', 'actor.avatar_url')
        )

    changes_data = data.get('changes') or []
    if not isinstance(changes_data, list):
        raise EventValidationError('Changes must be a list', field_name='changes')

    changes = []
    for index, item in enumerate(changes_data):
        prefix = f'changes[{index}]'
        if not isinstance(item, dict):
            raise EventValidationError('Change must be an object', field_name=prefix)
        changes.append(IssueChange(
            kind=_get_str(item, 'kind', f'{prefix}.kind', required=True),
            title=_get_str(item, 'title', f'{prefix}.title'),
            old_value=item.get('old_value'),
            new_value=item.get('new_value')
        ))

    notification = IssueNotification(
        issue_id=issue_id,
        summary=_get_str(data, 'summary', 'summary'),
        description=_get_str(data, 'description', 'description'),
        url=_get_str(data, 'url', 'url'),
        project=_get_str(data, 'project', 'project'),
        actor=actor,
        changes=changes,
        timestamp=_get_str(data, 'timestamp', 'timestamp')
    )
    return event_type, notification


def create_webhook_blueprint(prefix: str = '/webhook') -> Blueprint:
    """
    Create a Flask Blueprint for webhook endpoints.

    Args:
        prefix: URL prefix for the blueprint.

    Returns:
        Configured Flask Blueprint.
    """
    bp = Blueprint('webhook', __name__, url_prefix=prefix)

    @bp.route('/issue', methods=['POST'])
    def handle_issue_webhook() -> tuple:
        """
        Handle an issue event.

        Delivery failures are reported in the response body; they never
        turn into an HTTP error. A send skipped because notifications are
        disabled reports delivered as false.

        Returns:
            JSON response with delivery status.
        """
        data = request.get_json(silent=True)
        if not data or not isinstance(data, dict):
            logger.warning('⚠️ Webhook received empty data')
            return jsonify({'error': 'No data provided'}), 400

        try:
            event_type, notification = parse_issue_event(data)
        except EventValidationError as e:
            logger.warning(f'⚠️ Issue 事件无效: {e}')
            return jsonify({'error': e.message, 'field': e.field_name}), 400

        logger.info('📨 收到 Issue 事件')
        logger.info(f'  事件类型: {event_type}')
        logger.info(f'  Issue: {notification.issue_id}')

        try:
            notifier = get_issue_notifier()
            if event_type == 'created':
                response = notifier.notify_created(notification)
            elif event_type == 'resolved':
                response = notifier.notify_resolved(notification)
            else:
                response = notifier.notify_changed(notification)
        except Exception as e:
            logger.error(f'❌ 处理 Issue 事件失败: {e}')
            return jsonify({'error': str(e)}), 500

        if response is None:
            return jsonify({
                'success': True,
                'delivered': False,
                'status_code': None
            }), 200

        return jsonify({
            'success': True,
            'delivered': response.delivered,
            'skipped': response.skipped,
            'status_code': response.status_code,
            'error': response.error_message
        }), 200

    @bp.route('/health', methods=['GET'])
    def webhook_health() -> tuple:
        """
        Health check endpoint for webhook service.

        Returns:
            JSON response with health status.
        """
        return jsonify({
            'status': 'healthy',
            'service': 'webhook'
        }), 200

    return bp


# Default blueprint instance
webhook_bp = create_webhook_blueprint()

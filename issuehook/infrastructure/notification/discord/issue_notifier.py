"""
Discord Issue 通知实现模块。

实现 IIssueNotifier 接口。
"""

import logging

from issuehook.core.interfaces.notifications import IIssueNotifier, IssueNotification

from .embed_builder import IssueEmbedBuilder
from .payload import Payload
from .webhook_client import DiscordWebhookClient, WebhookResponse

logger = logging.getLogger(__name__)


class DiscordIssueNotifier(IIssueNotifier):
    """
    Discord Issue 通知实现。

    通过 Discord Webhook 发送 Issue 新建、解决和字段变更通知。
    发送失败只记录日志，不影响触发通知的业务流程。

    Example:
        >>> notifier = DiscordIssueNotifier(
        ...     webhook_client,
        ...     webhook_url='https://discord.com/api/webhooks/xxx/yyy'
        ... )
        >>> notifier.notify_created(IssueNotification(issue_id='ABC-1'))
    """

    def __init__(
        self,
        webhook_client: DiscordWebhookClient,
        embed_builder: IssueEmbedBuilder | None = None,
        webhook_url: str | None = None
    ):
        """
        初始化 Issue 通知器。

        Args:
            webhook_client: Discord Webhook 客户端
            embed_builder: 消息构建器（可选）
            webhook_url: 目标 Webhook URL
        """
        self._client = webhook_client
        self._embed_builder = embed_builder or IssueEmbedBuilder()
        self._webhook_url = webhook_url

    def notify_created(self, notification: IssueNotification) -> WebhookResponse:
        """
        通知 Issue 已新建。

        Args:
            notification: Issue 通知数据
        """
        logger.info(f'🔔 [Notifier] 构建 Issue 新建通知: {notification.issue_id}')
        payload = self._embed_builder.build_created(notification)
        return self._send(payload, 'Issue 新建通知')

    def notify_resolved(self, notification: IssueNotification) -> WebhookResponse:
        """
        通知 Issue 已解决。

        Args:
            notification: Issue 通知数据
        """
        logger.info(f'🔔 [Notifier] 构建 Issue 解决通知: {notification.issue_id}')
        payload = self._embed_builder.build_resolved(notification)
        return self._send(payload, 'Issue 解决通知')

    def notify_changed(
        self,
        notification: IssueNotification
    ) -> WebhookResponse | None:
        """
        通知 Issue 字段变更。

        Args:
            notification: Issue 通知数据

        Returns:
            WebhookResponse，没有变更时返回 None
        """
        payload = self._embed_builder.build_changed(notification)
        if payload is None:
            return None

        logger.info(
            f'🔔 [Notifier] 构建 Issue 变更通知: {notification.issue_id}, '
            f'{notification.change_count} 项变更'
        )
        return self._send(payload, 'Issue 变更通知')

    def _send(self, payload: Payload, label: str) -> WebhookResponse:
        response = payload.send(self._webhook_url, client=self._client)

        if response.skipped:
            logger.info(f'🔕 [Notifier] Discord 通知已禁用，{label}未发送')
        elif response.success:
            logger.info(f'✅ [Notifier] {label}发送成功')
        else:
            logger.warning(f'⚠️ {label}发送失败: {response.error_message}')

        return response

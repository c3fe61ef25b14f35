"""
通知服务模块。

提供各种通知渠道的实现。
"""

from issuehook.infrastructure.notification.discord import (
    DiscordIssueNotifier,
    DiscordWebhookClient,
    IssueEmbedBuilder,
    Payload,
)

__all__ = [
    'DiscordWebhookClient',
    'DiscordIssueNotifier',
    'IssueEmbedBuilder',
    'Payload',
]

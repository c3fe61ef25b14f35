"""
基础设施层模块。

提供外部服务集成实现：
- 通知服务（Discord Webhook）
"""

from issuehook.infrastructure.notification.discord import (
    DiscordIssueNotifier,
    DiscordWebhookClient,
    IssueEmbedBuilder,
)

__all__ = [
    'DiscordWebhookClient',
    'IssueEmbedBuilder',
    'DiscordIssueNotifier',
]

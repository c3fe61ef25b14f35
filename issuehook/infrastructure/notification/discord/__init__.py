"""
Discord 通知模块。

提供 Discord Webhook 集成，包括：
- Embed / Payload 模型（消息结构与序列化）
- Webhook 客户端（HTTP 通信）
- Issue 通知构建器与通知器
"""

from issuehook.infrastructure.notification.discord.embed import (
    Author,
    Body,
    Embed,
    Field,
    Footer,
)
from issuehook.infrastructure.notification.discord.embed_builder import (
    EmbedColors,
    IssueEmbedBuilder,
)
from issuehook.infrastructure.notification.discord.issue_notifier import (
    DiscordIssueNotifier,
)
from issuehook.infrastructure.notification.discord.payload import Payload
from issuehook.infrastructure.notification.discord.webhook_client import (
    DEFAULT_TIMEOUT,
    DiscordWebhookClient,
    WebhookResponse,
)

__all__ = [
    'Author',
    'Body',
    'Embed',
    'Field',
    'Footer',
    'Payload',
    'DEFAULT_TIMEOUT',
    'DiscordWebhookClient',
    'WebhookResponse',
    'EmbedColors',
    'IssueEmbedBuilder',
    'DiscordIssueNotifier',
]

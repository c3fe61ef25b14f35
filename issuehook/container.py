"""
Dependency Injection Container module.

Contains the Container class for managing application dependencies.
"""

from dependency_injector import containers, providers

from issuehook.core.config import config

# Discord Notification Components
from issuehook.infrastructure.notification.discord.embed_builder import (
    EmbedColors,
    IssueEmbedBuilder,
)
from issuehook.infrastructure.notification.discord.issue_notifier import (
    DiscordIssueNotifier,
)
from issuehook.infrastructure.notification.discord.webhook_client import (
    DiscordWebhookClient,
)

# Services
from issuehook.services.change_describer import ChangeDescriber


class Container(containers.DeclarativeContainer):
    """
    依赖注入容器。

    服务层次结构:
    1. Services (变更描述)
    2. Notification Components (Webhook 客户端、构建器、通知器)
    """

    # ===== Services =====
    change_describer = providers.Singleton(ChangeDescriber)

    # ===== Notification Components =====
    discord_webhook = providers.Singleton(
        DiscordWebhookClient,
        timeout=config.discord.timeout,
        enabled=config.discord.enabled
    )

    embed_colors = providers.Singleton(
        EmbedColors,
        positive=config.colors.positive,
        negative=config.colors.negative,
        regular=config.colors.regular
    )

    embed_builder = providers.Singleton(
        IssueEmbedBuilder,
        sender_name=config.discord.sender_name,
        avatar_url=config.discord.avatar_url,
        site_name=config.tracker.site_name,
        colors=embed_colors,
        describer=change_describer
    )

    issue_notifier = providers.Singleton(
        DiscordIssueNotifier,
        webhook_client=discord_webhook,
        embed_builder=embed_builder,
        webhook_url=config.discord.webhook_url
    )


# 全局容器实例
container = Container()

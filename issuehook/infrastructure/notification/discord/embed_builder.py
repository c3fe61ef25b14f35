"""
Discord Embed 构建器模块。

根据 Issue 事件数据构建 Discord 消息。
"""

import logging
from dataclasses import dataclass

from issuehook.core.interfaces.notifications import IssueNotification
from issuehook.services.change_describer import ChangeDescriber

from .embed import Author, Body, Embed, Field, Footer
from .payload import Payload

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EmbedColors:
    """
    Embed 颜色（6 位十六进制，不带 #）。

    Attributes:
        positive: 已解决等正面事件
        negative: 新建等需要关注的事件
        regular: 普通字段变更
    """
    positive: str = '00FF00'
    negative: str = 'FF0000'
    regular: str = '3498DB'


class IssueEmbedBuilder:
    """
    Issue 通知消息构建器。

    每个构建方法都返回一个新的 Payload，包含一个 Embed。

    Example:
        >>> builder = IssueEmbedBuilder(sender_name='Tracker', site_name='Acme')
        >>> payload = builder.build_created(IssueNotification(issue_id='ABC-1'))
        >>> payload.embeds[0].body.title
        'Issue ABC-1 Created'
    """

    def __init__(
        self,
        sender_name: str | None = None,
        avatar_url: str | None = None,
        site_name: str | None = None,
        colors: EmbedColors | None = None,
        describer: ChangeDescriber | None = None
    ):
        """
        初始化构建器。

        Args:
            sender_name: Webhook 发送者名称
            avatar_url: Webhook 发送者头像
            site_name: 站点名称（显示在页脚项目名前）
            colors: Embed 颜色
            describer: 字段变更描述器（可选）
        """
        self._sender_name = sender_name
        self._avatar_url = avatar_url
        self._site_name = site_name
        self._colors = colors or EmbedColors()
        self._describer = describer or ChangeDescriber()

    def _base_payload(
        self,
        notification: IssueNotification,
        title: str,
        description: str | None,
        color: str
    ) -> tuple[Payload, Embed]:
        """
        创建基础消息结构：正文、作者和页脚。

        Returns:
            (Payload, Embed) 元组，Embed 已加入 Payload
        """
        body = Body(
            title=title,
            description=description,
            url=notification.url,
            color=color,
            timestamp=notification.timestamp
        )
        if not body.timestamp:
            body.set_date_to_now()

        embed = Embed(body=body)

        actor = notification.actor
        if actor:
            embed.author = Author(actor.name, actor.profile_url, actor.avatar_url)

        footer_text = ' '.join(
            part for part in (self._site_name, notification.project) if part
        )
        if footer_text:
            embed.footer = Footer(footer_text)

        payload = Payload(None, self._sender_name, self._avatar_url)
        payload.add_embed(embed)
        return payload, embed

    def build_created(self, notification: IssueNotification) -> Payload:
        """构建 Issue 新建通知。"""
        payload, _ = self._base_payload(
            notification,
            title=f'Issue {notification.issue_id} Created',
            description=notification.description or notification.summary,
            color=self._colors.negative
        )
        return payload

    def build_resolved(self, notification: IssueNotification) -> Payload:
        """构建 Issue 已解决通知。"""
        payload, _ = self._base_payload(
            notification,
            title=f'Issue {notification.issue_id} Resolved',
            description=notification.description or notification.summary,
            color=self._colors.positive
        )
        return payload

    def build_changed(self, notification: IssueNotification) -> Payload | None:
        """
        构建字段变更通知。

        单个变更时标题和描述直接来自该变更；多个变更时
        每个变更作为一个非行内字段。

        Args:
            notification: Issue 通知数据

        Returns:
            Payload，没有变更时返回 None
        """
        changes = [self._describer.describe(c) for c in notification.changes]
        if not changes:
            logger.debug(f'🔕 {notification.issue_id} 没有字段变更，跳过')
            return None

        if len(changes) == 1:
            change_title, change_description = changes[0]
            title = f'{change_title} In {notification.issue_id}'
            description = change_description
        else:
            title = f'{len(changes)} New Changes To {notification.issue_id}'
            description = None

        payload, embed = self._base_payload(
            notification,
            title=title,
            description=description,
            color=self._colors.regular
        )

        if len(changes) > 1:
            for change_title, change_description in changes:
                embed.add_field(Field(change_title, change_description, False))

        return payload

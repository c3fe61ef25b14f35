"""
Discord Webhook 消息模块。

提供 Webhook 顶层消息（Payload）的模型、序列化和发送。
"""

import json
import logging
from dataclasses import dataclass, field
from typing import Any

from .embed import Embed
from .webhook_client import DiscordWebhookClient, WebhookResponse

logger = logging.getLogger(__name__)


@dataclass
class Payload:
    """
    Discord Webhook 消息。

    Attributes:
        message: 普通文本内容（对应 ``content``）
        username: 发送者显示名称
        avatar_url: 发送者头像 URL
        embeds: Embed 列表

    Example:
        >>> payload = Payload(username='Bot')
        >>> payload.add_embed(Embed())
        >>> payload.send('https://discord.com/api/webhooks/xxx/yyy')
    """
    message: str | None = None
    username: str | None = None
    avatar_url: str | None = None
    embeds: list[Embed] = field(default_factory=list)

    def add_embed(self, embed: Embed) -> None:
        """追加一个 Embed。"""
        self.embeds.append(embed)

    def to_canonical_form(self) -> dict[str, Any]:
        """返回 Discord 格式的消息对象。"""
        return {
            'content': self.message,
            'username': self.username,
            'avatar_url': self.avatar_url,
            'embeds': [embed.to_canonical_form() for embed in self.embeds]
        }

    def serialize(self) -> str:
        """
        序列化为紧凑 JSON 文本。

        Raises:
            ValueError: 某个 Embed 的颜色不是合法的十六进制字符串
        """
        return json.dumps(
            self.to_canonical_form(),
            ensure_ascii=False,
            separators=(',', ':')
        )

    def send(
        self,
        webhook_url: str | None,
        client: DiscordWebhookClient | None = None
    ) -> WebhookResponse:
        """
        发送到 Discord Webhook。

        只尝试一次。失败会记录日志并体现在返回值中，不会抛出异常。

        Args:
            webhook_url: Webhook URL
            client: Webhook 客户端（可选，默认使用 2 秒超时的新实例）

        Returns:
            WebhookResponse: 响应结果
        """
        client = client or DiscordWebhookClient()

        try:
            body = self.serialize()
        except (TypeError, ValueError) as e:
            logger.error(f'❌ Discord 消息序列化失败: {e}')
            return WebhookResponse(
                success=False,
                error_message=f'Serialization failed: {e}'
            )

        return client.post(webhook_url, body)

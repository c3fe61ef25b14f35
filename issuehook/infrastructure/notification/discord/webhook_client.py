"""
Discord Webhook 客户端模块。

提供 Discord Webhook 的 HTTP 通信功能。
"""

import logging
from dataclasses import dataclass

import requests

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 2.0  # 秒


@dataclass
class WebhookResponse:
    """
    Webhook 响应数据类。

    Attributes:
        success: 请求是否成功
        status_code: HTTP 状态码
        error_message: 错误消息（失败时）
        skipped: 通知已禁用，未发出请求
    """
    success: bool
    status_code: int | None = None
    error_message: str | None = None
    skipped: bool = False

    @property
    def delivered(self) -> bool:
        """消息是否真正送达 Discord。"""
        return self.success and not self.skipped


class DiscordWebhookClient:
    """
    Discord Webhook 客户端。

    只负责 HTTP 通信，不包含消息格式化逻辑。

    每次调用只发送一次，不重试；任何失败都记录日志并通过
    WebhookResponse 返回，不会向调用方抛出异常。

    Example:
        >>> client = DiscordWebhookClient(timeout=2.0)
        >>> response = client.post(
        ...     'https://discord.com/api/webhooks/xxx/yyy',
        ...     '{"content":"Hello"}'
        ... )
        >>> response.success
        True
    """

    def __init__(self, timeout: float = DEFAULT_TIMEOUT, enabled: bool = True):
        """
        初始化客户端。

        Args:
            timeout: 请求超时时间（秒），默认 2 秒
            enabled: 是否启用通知
        """
        self._timeout = timeout
        self._enabled = enabled

    @property
    def timeout(self) -> float:
        return self._timeout

    def post(self, webhook_url: str | None, body: str) -> WebhookResponse:
        """
        发送已序列化的 JSON 文本到 Discord。

        Args:
            webhook_url: Webhook URL
            body: JSON 文本

        Returns:
            WebhookResponse: 响应结果
        """
        if not self._enabled:
            logger.debug('🔕 Discord 通知已禁用，跳过发送')
            return WebhookResponse(success=True, skipped=True)

        if not webhook_url:
            logger.warning('⚠️ 未配置 Discord Webhook URL，跳过发送')
            return WebhookResponse(
                success=False,
                error_message='Webhook URL not configured'
            )

        try:
            response = requests.post(
                webhook_url,
                data=body.encode('utf-8'),
                headers={'Content-Type': 'application/json'},
                timeout=self._timeout
            )
        except requests.Timeout:
            error_msg = f'Request timeout after {self._timeout}s'
            logger.error(f'⏱️ Discord Webhook 超时: {error_msg}')
            return WebhookResponse(success=False, error_message=error_msg)
        except requests.RequestException as e:
            logger.error(f'❌ Discord Webhook 请求失败: {e}')
            return WebhookResponse(success=False, error_message=str(e))
        except Exception as e:
            logger.exception(f'❌ Discord Webhook 未预期错误: {e}')
            return WebhookResponse(success=False, error_message=str(e))

        if 200 <= response.status_code < 300:
            logger.debug(f'✅ Discord 消息发送成功: {response.status_code}')
            return WebhookResponse(
                success=True,
                status_code=response.status_code
            )

        error_msg = (
            response.text[:200] if response.text
            else f'HTTP {response.status_code}'
        )
        logger.warning(
            f'⚠️ Discord 消息发送失败: {response.status_code}, {error_msg}'
        )
        return WebhookResponse(
            success=False,
            status_code=response.status_code,
            error_message=error_msg
        )

    def is_enabled(self) -> bool:
        """检查通知是否启用。"""
        return self._enabled

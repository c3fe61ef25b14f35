"""
接口层模块。

提供入站 Webhook 接口。
"""

from .webhook import create_webhook_blueprint, webhook_bp

__all__ = ['create_webhook_blueprint', 'webhook_bp']

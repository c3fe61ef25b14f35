"""
Configuration module.

Contains Pydantic-based configuration classes for the IssueHook application.
"""

import json
import os
import re
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic_settings import BaseSettings

from issuehook.core.exceptions import ConfigError

HEX_COLOR_PATTERN = re.compile(r'^[0-9A-Fa-f]{6}$')


class DiscordConfig(BaseModel):
    """Discord 通知配置"""

    enabled: bool = False
    webhook_url: Optional[str] = ''
    sender_name: str = 'IssueHook'
    avatar_url: Optional[str] = None
    timeout: float = Field(default=2.0, ge=0.1, le=60)  # 请求超时时间（秒）


class ColorConfig(BaseModel):
    """Embed 颜色配置（6 位十六进制，不带 #）"""

    model_config = ConfigDict(validate_assignment=True)

    positive: str = '00FF00'
    negative: str = 'FF0000'
    regular: str = '3498DB'

    @field_validator('positive', 'negative', 'regular')
    @classmethod
    def check_hex(cls, v: str) -> str:
        """校验十六进制颜色，去掉 # 前缀并统一为大写"""
        v = v.lstrip('#')
        if not HEX_COLOR_PATTERN.match(v):
            raise ValueError(f'invalid hex colour: {v!r}')
        return v.upper()


class TrackerConfig(BaseModel):
    """Issue tracker 站点配置"""

    base_url: str = ''
    site_name: str = 'Issue Tracker'


class WebhookConfig(BaseModel):
    """入站 Webhook 服务配置"""

    host: str = '0.0.0.0'
    port: int = Field(default=5680, ge=1, le=65535)


class AppConfig(BaseSettings):
    """主应用配置"""

    discord: DiscordConfig = Field(default_factory=DiscordConfig)
    colors: ColorConfig = Field(default_factory=ColorConfig)
    tracker: TrackerConfig = Field(default_factory=TrackerConfig)
    webhook: WebhookConfig = Field(default_factory=WebhookConfig)

    model_config = ConfigDict(
        env_prefix='ISSUEHOOK_',
        env_nested_delimiter='__'
    )

    def get(self, key: str, default=None):
        """获取配置值，支持点分隔的嵌套键"""
        value = self
        for k in key.split('.'):
            if not hasattr(value, k):
                return default
            value = getattr(value, k)
        return value

    @classmethod
    def load(cls, config_path: str = None) -> 'AppConfig':
        """加载配置，文件不存在时使用默认值（环境变量仍然生效）"""
        if config_path is None:
            config_path = os.getenv('CONFIG_PATH', 'config.json')

        if not os.path.exists(config_path):
            return cls()

        try:
            with open(config_path, 'r', encoding='utf-8') as f:
                config_data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise ConfigError(f'无法读取配置文件: {e}', config_path=config_path) from e

        return cls(**config_data)

    def save(self, config_path: str = None):
        """保存配置"""
        if config_path is None:
            config_path = os.getenv('CONFIG_PATH', 'config.json')

        with open(config_path, 'w', encoding='utf-8') as f:
            f.write(self.model_dump_json(indent=2))


# 全局配置实例
config = AppConfig.load()

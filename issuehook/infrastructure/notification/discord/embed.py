"""
Discord Embed 模型模块。

提供 Embed 及其组成部分（作者、正文、字段、页脚）的值对象，
以及转换为 Discord Webhook JSON 结构的规范形式。

参考:
    https://discord.com/developers/docs/resources/message#embed-object
"""

from dataclasses import dataclass, field
from typing import Any

from issuehook.core.utils.timezone_utils import utc_now_iso

DEFAULT_COLOR = 'FFFFFF'


@dataclass
class Author:
    """
    Embed 作者。

    Attributes:
        name: 作者名称
        url: 作者名称的链接
        icon_url: 作者图标 URL
    """
    name: str | None = None
    url: str | None = None
    icon_url: str | None = None

    def to_canonical_form(self) -> dict[str, Any]:
        """返回 Discord 格式的作者对象。"""
        return {
            'name': self.name,
            'url': self.url,
            'icon_url': self.icon_url
        }


@dataclass
class Field:
    """
    Embed 字段。

    注意 Discord 中字段内容的键名为 ``value``，这里沿用 ``description``。

    Attributes:
        name: 字段标题
        description: 字段标题下方的内容
        is_inline: 是否行内显示（None 等同于不行内）
    """
    name: str
    description: str
    is_inline: bool | None = None

    def to_canonical_form(self) -> dict[str, Any]:
        """返回 Discord 格式的字段对象。"""
        return {
            'name': self.name,
            'value': self.description,
            'inline': self.is_inline
        }


@dataclass
class Footer:
    """
    Embed 页脚。

    Attributes:
        text: 页脚文本
        icon_url: 页脚图标 URL
    """
    text: str | None = None
    icon_url: str | None = None

    def to_canonical_form(self) -> dict[str, Any]:
        """返回 Discord 格式的页脚对象。"""
        return {
            'text': self.text,
            'icon_url': self.icon_url
        }


@dataclass
class Body:
    """
    Embed 正文。

    颜色以十六进制字符串保存（不带 #），序列化时转换为十进制整数。
    颜色值不做校验，非法值在序列化时抛出 ValueError。

    Attributes:
        title: 标题
        description: 标题下方的描述
        url: 标题链接
        color: 十六进制颜色，默认 FFFFFF
        timestamp: ISO-8601 时间戳（显示在页脚旁）
    """
    title: str | None = None
    description: str | None = None
    url: str | None = None
    color: str = DEFAULT_COLOR
    timestamp: str | None = None

    @property
    def color_value(self) -> int:
        """返回十进制颜色值。"""
        return int(self.color, 16)

    def set_date_to_now(self) -> None:
        """将时间戳设置为当前 UTC 时间。"""
        self.timestamp = utc_now_iso()

    def to_canonical_form(self) -> dict[str, Any]:
        """
        返回 Discord 格式的正文字段。

        Raises:
            ValueError: 颜色不是合法的十六进制字符串
        """
        return {
            'title': self.title,
            'description': self.description,
            'url': self.url,
            'color': self.color_value,
            'timestamp': self.timestamp
        }


@dataclass
class Embed:
    """
    Discord Embed。

    正文字段平铺在 Embed 顶层，而作者、字段、图片、缩略图和页脚
    作为子对象嵌套，这是 Discord Webhook 的固定结构。

    Example:
        >>> embed = Embed(body=Body(title='Issue ABC-1 Created', color='FF0000'))
        >>> embed.author = Author('Alice')
        >>> embed.add_field(Field('Stage', 'In Progress'))
        >>> embed.to_canonical_form()['color']
        16711680
    """
    author: Author | None = None
    body: Body | None = None
    fields: list[Field] = field(default_factory=list)
    image_urls: list[str] = field(default_factory=list)
    thumbnail_url: str | None = None
    footer: Footer | None = None

    def add_field(self, embed_field: Field) -> None:
        """追加一个字段。"""
        self.fields.append(embed_field)

    def add_image_url(self, url: str) -> None:
        """追加一个图片 URL（Discord 只显示第一张）。"""
        self.image_urls.append(url)

    def to_canonical_form(self) -> dict[str, Any]:
        """
        返回 Discord 格式的 Embed 对象。

        没有图片或缩略图时省略 ``image`` / ``thumbnail`` 键。
        """
        obj = self.body.to_canonical_form() if self.body else {}

        obj['author'] = self.author.to_canonical_form() if self.author else None
        obj['fields'] = [f.to_canonical_form() for f in self.fields]
        if self.image_urls:
            obj['image'] = {'url': self.image_urls[0]}
        if self.thumbnail_url:
            obj['thumbnail'] = {'url': self.thumbnail_url}
        obj['footer'] = self.footer.to_canonical_form() if self.footer else None

        return obj

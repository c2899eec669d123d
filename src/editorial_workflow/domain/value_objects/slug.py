"""slug 值对象"""

from __future__ import annotations

import hashlib
import re
import unicodedata
from dataclasses import dataclass

from ...shared.constants import SLUG_MAX_LENGTH, SLUG_PATTERN
from ...shared.exceptions import InvalidValueError

_SLUG_RE = re.compile(SLUG_PATTERN)
_NON_ALNUM_RE = re.compile(r"[^a-z0-9]+")


@dataclass(frozen=True)
class ArticleSlug:
    """
    文章 slug

    小写字母、数字和单个连字符组成，不以连字符开头或结尾，
    长度不超过 SLUG_MAX_LENGTH。
    """

    value: str

    def __post_init__(self) -> None:
        if not self.value:
            raise InvalidValueError("slug 不能为空")
        if len(self.value) > SLUG_MAX_LENGTH:
            raise InvalidValueError(f"slug 不能超过{SLUG_MAX_LENGTH}个字符")
        if not _SLUG_RE.match(self.value):
            raise InvalidValueError(f"slug 格式无效: {self.value}（只允许小写字母、数字和连字符）")

    @classmethod
    def from_title(cls, title: str) -> ArticleSlug:
        """
        从标题生成 slug

        先做 NFKD 归一化并丢弃非 ASCII 字符，再把连续的非字母数字字符折叠为一个连字符。
        标题中没有任何 ASCII 字母数字时（例如纯中文标题），使用标题摘要生成 article-xxxxxxxx。
        """
        normalized = unicodedata.normalize("NFKD", title).encode("ascii", "ignore").decode("ascii")
        slug = _NON_ALNUM_RE.sub("-", normalized.lower()).strip("-")
        slug = slug[:SLUG_MAX_LENGTH].rstrip("-")

        if not slug:
            digest = hashlib.sha1(title.strip().encode("utf-8")).hexdigest()[:8]
            slug = f"article-{digest}"

        return cls(slug)

    def __str__(self) -> str:
        return self.value

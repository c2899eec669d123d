"""正文值对象"""

from __future__ import annotations

from dataclasses import dataclass

from ...shared.constants import CONTENT_MIN_LENGTH
from ...shared.exceptions import InvalidValueError


@dataclass(frozen=True)
class ArticleContent:
    """文章正文（去除首尾空白后至少 CONTENT_MIN_LENGTH 个字符）"""

    value: str

    def __post_init__(self) -> None:
        if len(self.value.strip()) < CONTENT_MIN_LENGTH:
            raise InvalidValueError(f"正文至少需要{CONTENT_MIN_LENGTH}个字符")

    @property
    def word_count(self) -> int:
        """字数（不含空白）"""
        return len("".join(self.value.split()))

    def __str__(self) -> str:
        return self.value

"""标题值对象"""

from __future__ import annotations

from dataclasses import dataclass

from ...shared.constants import TITLE_MAX_LENGTH, TITLE_MIN_LENGTH
from ...shared.exceptions import InvalidValueError


@dataclass(frozen=True)
class ArticleTitle:
    """
    文章标题

    去除首尾空白后长度必须在 [TITLE_MIN_LENGTH, TITLE_MAX_LENGTH] 之间。
    """

    value: str

    def __post_init__(self) -> None:
        trimmed = self.value.strip()
        if len(trimmed) < TITLE_MIN_LENGTH:
            raise InvalidValueError(f"标题至少需要{TITLE_MIN_LENGTH}个字符")
        if len(trimmed) > TITLE_MAX_LENGTH:
            raise InvalidValueError(f"标题不能超过{TITLE_MAX_LENGTH}个字符")
        object.__setattr__(self, "value", trimmed)

    def __str__(self) -> str:
        return self.value

"""编辑批注值对象"""

from __future__ import annotations

from dataclasses import dataclass

from ...shared.constants import EDITORIAL_COMMENT_MAX_LENGTH
from ...shared.exceptions import InvalidValueError


@dataclass(frozen=True)
class EditorialComment:
    """
    编辑批注

    可选地锚定到正文中的一段文字：selected_text / position_start / position_end
    三者要么同时提供，要么都不提供。批注与文章状态无关。
    """

    comment: str
    selected_text: str | None = None
    position_start: int | None = None
    position_end: int | None = None

    def __post_init__(self) -> None:
        if not self.comment.strip():
            raise InvalidValueError("批注内容不能为空")

        if len(self.comment) > EDITORIAL_COMMENT_MAX_LENGTH:
            raise InvalidValueError(f"批注内容不能超过{EDITORIAL_COMMENT_MAX_LENGTH}个字符")

        present = {
            self.selected_text is not None,
            self.position_start is not None,
            self.position_end is not None,
        }
        if len(present) > 1:
            raise InvalidValueError("选区信息必须全部提供或全部省略")

        if self.position_start is not None and self.position_end is not None:
            if self.position_start < 0 or self.position_end < 0:
                raise InvalidValueError("选区位置不能为负数")
            if self.position_end <= self.position_start:
                raise InvalidValueError("选区结束位置必须大于起始位置")

    @property
    def has_selection(self) -> bool:
        """是否锚定了选区"""
        return self.selected_text is not None

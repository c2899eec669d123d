"""编辑批注实体"""

from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import datetime
from typing import Any
from uuid import UUID

from ...shared.utils import isoformat
from ..value_objects import EditorialComment


@dataclass(frozen=True)
class EditorialCommentRecord:
    """
    审核人针对某篇文章留下的批注

    独立于文章保存和删除，不影响文章状态。
    """

    id: UUID
    article_id: UUID
    reviewer_id: UUID
    comment: EditorialComment
    created_at: datetime

    def with_comment(self, text: str) -> EditorialCommentRecord:
        """只替换批注内容，选区和创建时间保持不变"""
        return replace(self, comment=replace(self.comment, comment=text))

    def to_dict(self) -> dict[str, Any]:
        return {
            "commentId": str(self.id),
            "articleId": str(self.article_id),
            "reviewerId": str(self.reviewer_id),
            "comment": self.comment.comment,
            "selectedText": self.comment.selected_text,
            "positionStart": self.comment.position_start,
            "positionEnd": self.comment.position_end,
            "createdAt": isoformat(self.created_at),
        }

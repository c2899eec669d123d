"""添加编辑批注"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from pydantic import Field, model_validator

from ...domain.entities import EditorialCommentRecord
from ...domain.events import EditorialCommentAdded
from ...domain.value_objects import EditorialComment
from ...shared.constants import EDITORIAL_COMMENT_ENTITY
from ..pipeline import Gateway, GatewayRequest, GatewayResponse
from ..pipeline.constraints import CommentStr, RequestConstraints
from ._common import CommentProcessor


@dataclass(frozen=True)
class AddEditorialCommentRequest(GatewayRequest):
    """添加批注请求"""

    article_id: str
    reviewer_id: str
    comment: str
    selected_text: str | None = None
    position_start: int | None = None
    position_end: int | None = None

    uuid_fields = frozenset({"article_id", "reviewer_id"})


@dataclass(frozen=True)
class AddEditorialCommentResponse(GatewayResponse):
    """添加批注响应"""

    comment_id: UUID
    article_id: UUID
    reviewer_id: UUID
    comment: str
    created_at: datetime
    selected_text: str | None = None
    position_start: int | None = None
    position_end: int | None = None


class AddEditorialCommentConstraints(RequestConstraints):
    article_id: UUID
    reviewer_id: UUID
    comment: CommentStr
    selected_text: str | None = None
    position_start: int | None = Field(default=None, ge=0)
    position_end: int | None = Field(default=None, ge=0)

    @model_validator(mode="after")
    def check_selection(self) -> AddEditorialCommentConstraints:
        present = [
            self.selected_text is not None,
            self.position_start is not None,
            self.position_end is not None,
        ]
        if any(present) and not all(present):
            raise ValueError("selectedText、positionStart、positionEnd 必须全部提供或全部省略")
        if all(present) and self.position_end <= self.position_start:
            raise ValueError("positionEnd 必须大于 positionStart")
        return self


class AddEditorialCommentProcessor(CommentProcessor):
    """为已存在的文章添加批注，不影响文章状态"""

    def __call__(self, request: AddEditorialCommentRequest) -> AddEditorialCommentResponse:
        article = self._load(request.article_id)

        record = EditorialCommentRecord(
            id=self._id_generator(),
            article_id=article.id,
            reviewer_id=UUID(request.reviewer_id),
            comment=EditorialComment(
                comment=request.comment,
                selected_text=request.selected_text,
                position_start=request.position_start,
                position_end=request.position_end,
            ),
            created_at=self._clock(),
        )
        self._comments.save(record)

        self._publish(
            EditorialCommentAdded(
                comment_id=record.id,
                article_id=record.article_id,
                reviewer_id=record.reviewer_id,
            )
        )

        return AddEditorialCommentResponse(
            comment_id=record.id,
            article_id=record.article_id,
            reviewer_id=record.reviewer_id,
            comment=record.comment.comment,
            created_at=record.created_at,
            selected_text=record.comment.selected_text,
            position_start=record.comment.position_start,
            position_end=record.comment.position_end,
        )


class AddEditorialCommentGateway(Gateway):
    entity = EDITORIAL_COMMENT_ENTITY
    operation = "create"
    request_type = AddEditorialCommentRequest
    constraints = AddEditorialCommentConstraints

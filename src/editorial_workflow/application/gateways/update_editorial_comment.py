"""修改编辑批注"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any
from uuid import UUID

from ...domain.events import EditorialCommentUpdated
from ...shared.constants import EDITORIAL_COMMENT_ENTITY
from ...shared.exceptions import EditorialCommentNotFoundError
from ..pipeline import Gateway, GatewayRequest, GatewayResponse
from ..pipeline.constraints import CommentStr, RequestConstraints
from ._common import CommentProcessor


@dataclass(frozen=True)
class UpdateEditorialCommentRequest(GatewayRequest):
    comment_id: str
    comment: str

    uuid_fields = frozenset({"comment_id"})


@dataclass(frozen=True)
class UpdateEditorialCommentResponse(GatewayResponse):
    """修改后的批注视图"""

    comment: dict[str, Any] = field(default_factory=dict)

    def data(self) -> dict[str, Any]:
        return dict(self.comment)


class UpdateEditorialCommentConstraints(RequestConstraints):
    comment_id: UUID
    comment: CommentStr


class UpdateEditorialCommentProcessor(CommentProcessor):
    """只修改批注文字，选区保持不变"""

    def __call__(self, request: UpdateEditorialCommentRequest) -> UpdateEditorialCommentResponse:
        comment_id = UUID(request.comment_id)
        record = self._comments.find_by_id(comment_id)
        if record is None:
            raise EditorialCommentNotFoundError(comment_id)

        updated = record.with_comment(request.comment)
        self._comments.save(updated)
        self._publish(EditorialCommentUpdated(comment_id=updated.id, article_id=updated.article_id))

        return UpdateEditorialCommentResponse(comment=updated.to_dict())


class UpdateEditorialCommentGateway(Gateway):
    entity = EDITORIAL_COMMENT_ENTITY
    operation = "update"
    request_type = UpdateEditorialCommentRequest
    constraints = UpdateEditorialCommentConstraints

"""删除编辑批注"""

from __future__ import annotations

from dataclasses import dataclass
from uuid import UUID

from ...domain.events import EditorialCommentDeleted
from ...shared.constants import EDITORIAL_COMMENT_ENTITY
from ...shared.exceptions import EditorialCommentNotFoundError
from ..pipeline import Gateway, GatewayRequest, GatewayResponse
from ..pipeline.constraints import RequestConstraints
from ._common import CommentProcessor


@dataclass(frozen=True)
class DeleteEditorialCommentRequest(GatewayRequest):
    comment_id: str

    uuid_fields = frozenset({"comment_id"})


@dataclass(frozen=True)
class DeleteEditorialCommentResponse(GatewayResponse):
    comment_id: UUID
    deleted: bool = True


class DeleteEditorialCommentConstraints(RequestConstraints):
    comment_id: UUID


class DeleteEditorialCommentProcessor(CommentProcessor):
    def __call__(self, request: DeleteEditorialCommentRequest) -> DeleteEditorialCommentResponse:
        comment_id = UUID(request.comment_id)
        record = self._comments.find_by_id(comment_id)
        if record is None:
            raise EditorialCommentNotFoundError(comment_id)

        self._comments.remove(comment_id)
        self._publish(EditorialCommentDeleted(comment_id=record.id, article_id=record.article_id))

        return DeleteEditorialCommentResponse(comment_id=comment_id)


class DeleteEditorialCommentGateway(Gateway):
    entity = EDITORIAL_COMMENT_ENTITY
    operation = "delete"
    request_type = DeleteEditorialCommentRequest
    constraints = DeleteEditorialCommentConstraints

"""获取编辑批注"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any
from uuid import UUID

from ...shared.constants import EDITORIAL_COMMENT_ENTITY
from ...shared.exceptions import EditorialCommentNotFoundError
from ..pipeline import Gateway, GatewayRequest, GatewayResponse
from ..pipeline.constraints import RequestConstraints
from ._common import CommentProcessor


@dataclass(frozen=True)
class GetEditorialCommentRequest(GatewayRequest):
    comment_id: str

    uuid_fields = frozenset({"comment_id"})


@dataclass(frozen=True)
class GetEditorialCommentResponse(GatewayResponse):
    comment: dict[str, Any] = field(default_factory=dict)

    def data(self) -> dict[str, Any]:
        return dict(self.comment)


class GetEditorialCommentConstraints(RequestConstraints):
    comment_id: UUID


class GetEditorialCommentProcessor(CommentProcessor):
    def __call__(self, request: GetEditorialCommentRequest) -> GetEditorialCommentResponse:
        comment_id = UUID(request.comment_id)
        record = self._comments.find_by_id(comment_id)
        if record is None:
            raise EditorialCommentNotFoundError(comment_id)
        return GetEditorialCommentResponse(comment=record.to_dict())


class GetEditorialCommentGateway(Gateway):
    entity = EDITORIAL_COMMENT_ENTITY
    operation = "get"
    request_type = GetEditorialCommentRequest
    constraints = GetEditorialCommentConstraints

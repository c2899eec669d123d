"""文章的编辑批注列表"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any
from uuid import UUID

from ...shared.constants import EDITORIAL_COMMENT_ENTITY
from ..pipeline import Gateway, GatewayRequest, GatewayResponse
from ..pipeline.constraints import RequestConstraints
from ._common import CommentProcessor


@dataclass(frozen=True)
class ListEditorialCommentsRequest(GatewayRequest):
    article_id: str

    uuid_fields = frozenset({"article_id"})


@dataclass(frozen=True)
class ListEditorialCommentsResponse(GatewayResponse):
    article_id: UUID
    comments: list[dict[str, Any]] = field(default_factory=list)
    total: int = 0


class ListEditorialCommentsConstraints(RequestConstraints):
    article_id: UUID


class ListEditorialCommentsProcessor(CommentProcessor):
    def __call__(self, request: ListEditorialCommentsRequest) -> ListEditorialCommentsResponse:
        article = self._load(request.article_id)
        records = self._comments.find_by_article(article.id)
        return ListEditorialCommentsResponse(
            article_id=article.id,
            comments=[record.to_dict() for record in records],
            total=len(records),
        )


class ListEditorialCommentsGateway(Gateway):
    entity = EDITORIAL_COMMENT_ENTITY
    operation = "list"
    request_type = ListEditorialCommentsRequest
    constraints = ListEditorialCommentsConstraints

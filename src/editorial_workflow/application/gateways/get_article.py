"""获取文章"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any
from uuid import UUID

from ...shared.constants import ARTICLE_ENTITY
from ..pipeline import Gateway, GatewayRequest, GatewayResponse
from ..pipeline.constraints import RequestConstraints
from ._common import ArticleProcessor


@dataclass(frozen=True)
class GetArticleRequest(GatewayRequest):
    """获取文章请求"""

    article_id: str

    uuid_fields = frozenset({"article_id"})


@dataclass(frozen=True)
class GetArticleResponse(GatewayResponse):
    """文章完整视图"""

    article: dict[str, Any] = field(default_factory=dict)

    def data(self) -> dict[str, Any]:
        return dict(self.article)


class GetArticleConstraints(RequestConstraints):
    article_id: UUID


class GetArticleProcessor(ArticleProcessor):
    def __call__(self, request: GetArticleRequest) -> GetArticleResponse:
        article = self._load(request.article_id)
        return GetArticleResponse(article=article.to_dict())


class GetArticleGateway(Gateway):
    entity = ARTICLE_ENTITY
    operation = "get"
    request_type = GetArticleRequest
    constraints = GetArticleConstraints

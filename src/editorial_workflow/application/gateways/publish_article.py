"""发布文章"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from ...domain.events import ArticlePublished
from ...domain.value_objects import ArticleStatus
from ...shared.constants import ARTICLE_ENTITY
from ..pipeline import Gateway, GatewayRequest, GatewayResponse
from ..pipeline.constraints import RequestConstraints
from ._common import ArticleProcessor


@dataclass(frozen=True)
class PublishArticleRequest(GatewayRequest):
    """发布文章请求"""

    article_id: str

    uuid_fields = frozenset({"article_id"})


@dataclass(frozen=True)
class PublishArticleResponse(GatewayResponse):
    """发布文章响应"""

    article_id: UUID
    status: ArticleStatus
    published_at: datetime


class PublishArticleConstraints(RequestConstraints):
    article_id: UUID


class PublishArticleProcessor(ArticleProcessor):
    """
    approved → published

    已发布的文章抛出 ArticleAlreadyPublishedError（冲突），
    其他未通过审核的状态抛出 InvalidTransitionError。
    """

    def __call__(self, request: PublishArticleRequest) -> PublishArticleResponse:
        article = self._load(request.article_id)

        published = article.publish(self._clock())
        self._articles.save(published)

        self._publish(
            ArticlePublished(
                article_id=published.id,
                slug=published.slug,
                published_at=published.published_at,
            )
        )

        return PublishArticleResponse(
            article_id=published.id,
            status=published.status,
            published_at=published.published_at,
        )


class PublishArticleGateway(Gateway):
    entity = ARTICLE_ENTITY
    operation = "publish"
    request_type = PublishArticleRequest
    constraints = PublishArticleConstraints

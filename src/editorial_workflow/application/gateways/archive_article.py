"""归档文章"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from ...domain.events import ArticleArchived
from ...domain.value_objects import ArticleStatus
from ...shared.constants import ARTICLE_ENTITY
from ..pipeline import Gateway, GatewayRequest, GatewayResponse
from ..pipeline.constraints import RequestConstraints
from ._common import ArticleProcessor


@dataclass(frozen=True)
class ArchiveArticleRequest(GatewayRequest):
    """归档文章请求"""

    article_id: str

    uuid_fields = frozenset({"article_id"})


@dataclass(frozen=True)
class ArchiveArticleResponse(GatewayResponse):
    """归档文章响应"""

    article_id: UUID
    status: ArticleStatus
    archived_at: datetime


class ArchiveArticleConstraints(RequestConstraints):
    article_id: UUID


class ArchiveArticleProcessor(ArticleProcessor):
    """管理操作：任意未归档状态 → archived"""

    def __call__(self, request: ArchiveArticleRequest) -> ArchiveArticleResponse:
        article = self._load(request.article_id)

        archived = article.archive(self._clock())
        self._articles.save(archived)

        self._publish(
            ArticleArchived(
                article_id=archived.id,
                previous_status=article.status.value,
                archived_at=archived.updated_at,
            )
        )

        return ArchiveArticleResponse(
            article_id=archived.id,
            status=archived.status,
            archived_at=archived.updated_at,
        )


class ArchiveArticleGateway(Gateway):
    entity = ARTICLE_ENTITY
    operation = "archive"
    request_type = ArchiveArticleRequest
    constraints = ArchiveArticleConstraints

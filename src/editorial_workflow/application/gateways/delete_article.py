"""删除文章"""

from __future__ import annotations

from dataclasses import dataclass
from uuid import UUID

from loguru import logger

from ...domain.events import ArticleDeleted
from ...shared.constants import ARTICLE_ENTITY
from ..pipeline import Gateway, GatewayRequest, GatewayResponse
from ..pipeline.constraints import RequestConstraints
from ..ports.outbound import ArticleRepositoryPort, EditorialCommentRepositoryPort
from ._common import ArticleProcessor


@dataclass(frozen=True)
class DeleteArticleRequest(GatewayRequest):
    """删除文章请求"""

    article_id: str

    uuid_fields = frozenset({"article_id"})


@dataclass(frozen=True)
class DeleteArticleResponse(GatewayResponse):
    """删除文章响应"""

    article_id: UUID
    deleted: bool = True


class DeleteArticleConstraints(RequestConstraints):
    article_id: UUID


class DeleteArticleProcessor(ArticleProcessor):
    """删除文章及其全部编辑批注"""

    def __init__(
        self,
        articles: ArticleRepositoryPort,
        comments: EditorialCommentRepositoryPort | None = None,
        **kwargs,
    ):
        super().__init__(articles, **kwargs)
        self._comments = comments

    def __call__(self, request: DeleteArticleRequest) -> DeleteArticleResponse:
        article = self._load(request.article_id)

        # 先删文章：文章删除失败时批注保持原样
        self._articles.remove(article.id)

        if self._comments is not None:
            removed = self._comments.remove_by_article(article.id)
            if removed:
                logger.debug(f"已删除文章 {article.id} 的 {removed} 条批注")

        self._publish(ArticleDeleted(article_id=article.id, slug=article.slug))

        return DeleteArticleResponse(article_id=article.id)


class DeleteArticleGateway(Gateway):
    entity = ARTICLE_ENTITY
    operation = "delete"
    request_type = DeleteArticleRequest
    constraints = DeleteArticleConstraints

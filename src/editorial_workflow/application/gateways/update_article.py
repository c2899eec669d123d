"""更新文章"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from pydantic import model_validator

from ...domain.events import ArticleUpdated
from ...domain.value_objects import ArticleStatus
from ...shared.constants import ARTICLE_ENTITY
from ...shared.exceptions import ArticleAlreadyExistsError
from ..pipeline import Gateway, GatewayRequest, GatewayResponse
from ..pipeline.constraints import ContentStr, RequestConstraints, SlugStr, TitleStr
from ._common import ArticleProcessor


@dataclass(frozen=True)
class UpdateArticleRequest(GatewayRequest):
    """更新文章请求（省略的字段保持原值）"""

    article_id: str
    title: str | None = None
    content: str | None = None
    slug: str | None = None

    uuid_fields = frozenset({"article_id"})


@dataclass(frozen=True)
class UpdateArticleResponse(GatewayResponse):
    """更新后的文章"""

    article_id: UUID
    title: str
    content: str
    slug: str
    status: ArticleStatus
    updated_at: datetime


class UpdateArticleConstraints(RequestConstraints):
    article_id: UUID
    title: TitleStr | None = None
    content: ContentStr | None = None
    slug: SlugStr | None = None

    @model_validator(mode="after")
    def check_not_empty(self) -> UpdateArticleConstraints:
        if self.title is None and self.content is None and self.slug is None:
            raise ValueError("title、content、slug 至少需要提供一个")
        return self


class UpdateArticleProcessor(ArticleProcessor):
    """
    部分更新标题/正文/slug，不改变状态

    只改标题时 slug 随标题重新生成；已发布的文章抛出 ArticleNotEditableError；
    新 slug 被其他文章占用时抛出 ArticleAlreadyExistsError。
    """

    def __call__(self, request: UpdateArticleRequest) -> UpdateArticleResponse:
        article = self._load(request.article_id)
        now = self._clock()

        updated = article.update(now, title=request.title, content=request.content, slug=request.slug)

        if updated.slug != article.slug and self._articles.exists_by_slug(updated.slug, exclude_id=article.id):
            raise ArticleAlreadyExistsError(updated.slug)

        self._articles.save(updated)

        self._publish(
            ArticleUpdated(
                article_id=updated.id,
                title=updated.title,
                slug=updated.slug,
                updated_at=updated.updated_at,
            )
        )

        return UpdateArticleResponse(
            article_id=updated.id,
            title=updated.title,
            content=updated.content,
            slug=updated.slug,
            status=updated.status,
            updated_at=updated.updated_at,
        )


class UpdateArticleGateway(Gateway):
    entity = ARTICLE_ENTITY
    operation = "update"
    request_type = UpdateArticleRequest
    constraints = UpdateArticleConstraints

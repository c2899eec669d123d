"""自动保存"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from ...domain.events import ArticleAutoSaved
from ...domain.value_objects import ArticleStatus
from ...shared.constants import ARTICLE_ENTITY
from ...shared.exceptions import ArticleAlreadyExistsError
from ..pipeline import Gateway, GatewayRequest, GatewayResponse
from ..pipeline.constraints import ContentStr, RequestConstraints, SlugStr, TitleStr
from ._common import ArticleProcessor


@dataclass(frozen=True)
class AutoSaveArticleRequest(GatewayRequest):
    """自动保存请求（slug 省略时保留原值）"""

    article_id: str
    title: str
    content: str
    slug: str | None = None

    uuid_fields = frozenset({"article_id"})


@dataclass(frozen=True)
class AutoSaveArticleResponse(GatewayResponse):
    """自动保存响应"""

    article_id: UUID
    title: str
    content: str
    slug: str
    status: ArticleStatus
    auto_saved_at: datetime


class AutoSaveArticleConstraints(RequestConstraints):
    article_id: UUID
    title: TitleStr
    content: ContentStr
    slug: SlugStr | None = None


class AutoSaveArticleProcessor(ArticleProcessor):
    """
    更新标题/正文/slug，不改变状态

    已发布的文章抛出 ArticleNotEditableError；
    新 slug 被其他文章占用时抛出 ArticleAlreadyExistsError。
    """

    def __call__(self, request: AutoSaveArticleRequest) -> AutoSaveArticleResponse:
        article = self._load(request.article_id)
        now = self._clock()

        # 先做状态检查，已发布的文章不再检查 slug
        saved = article.auto_save(request.title, request.content, request.slug, now)

        if saved.slug != article.slug and self._articles.exists_by_slug(saved.slug, exclude_id=article.id):
            raise ArticleAlreadyExistsError(saved.slug)

        self._articles.save(saved)

        self._publish(ArticleAutoSaved(article_id=saved.id, title=saved.title, saved_at=now))

        return AutoSaveArticleResponse(
            article_id=saved.id,
            title=saved.title,
            content=saved.content,
            slug=saved.slug,
            status=saved.status,
            auto_saved_at=now,
        )


class AutoSaveArticleGateway(Gateway):
    entity = ARTICLE_ENTITY
    operation = "auto_save"
    request_type = AutoSaveArticleRequest
    constraints = AutoSaveArticleConstraints

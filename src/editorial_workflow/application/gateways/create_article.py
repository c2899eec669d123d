"""创建文章"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from pydantic import AwareDatetime

from ...domain.entities import Article
from ...domain.events import ArticleCreated
from ...domain.value_objects import ArticleSlug, ArticleStatus
from ...shared.constants import ARTICLE_ENTITY
from ...shared.exceptions import ArticleAlreadyExistsError
from ..pipeline import Gateway, GatewayRequest, GatewayResponse
from ..pipeline.constraints import ContentStr, CreatableStatus, RequestConstraints, SlugStr, TitleStr
from ._common import ArticleProcessor, optional_uuid, parse_datetime


@dataclass(frozen=True)
class CreateArticleRequest(GatewayRequest):
    """创建文章请求"""

    title: str
    content: str
    slug: str | None = None
    status: str = ArticleStatus.DRAFT.value
    created_at: str | None = None
    author_id: str | None = None

    uuid_fields = frozenset({"author_id"})


@dataclass(frozen=True)
class CreateArticleResponse(GatewayResponse):
    """创建文章响应"""

    article_id: UUID
    slug: str
    status: ArticleStatus
    created_at: datetime
    published_at: datetime | None = None


class CreateArticleConstraints(RequestConstraints):
    title: TitleStr
    content: ContentStr
    slug: SlugStr | None = None
    status: CreatableStatus = "draft"
    created_at: AwareDatetime | None = None
    author_id: UUID | None = None


class CreateArticleProcessor(ArticleProcessor):
    """
    创建文章

    slug 未提供时从标题生成；slug 已被占用时抛出 ArticleAlreadyExistsError。
    """

    def __call__(self, request: CreateArticleRequest) -> CreateArticleResponse:
        slug = request.slug or ArticleSlug.from_title(request.title).value
        if self._articles.exists_by_slug(slug):
            raise ArticleAlreadyExistsError(slug)

        created_at = parse_datetime(request.created_at) if request.created_at else self._clock()

        article = Article.create(
            article_id=self._id_generator(),
            title=request.title,
            content=request.content,
            slug=slug,
            status=ArticleStatus.from_string(request.status),
            created_at=created_at,
            author_id=optional_uuid(request.author_id),
        )
        self._articles.save(article)

        self._publish(
            ArticleCreated(
                article_id=article.id,
                title=article.title,
                slug=article.slug,
                status=article.status.value,
                author_id=article.author_id,
            )
        )

        return CreateArticleResponse(
            article_id=article.id,
            slug=article.slug,
            status=article.status,
            created_at=article.created_at,
            published_at=article.published_at,
        )


class CreateArticleGateway(Gateway):
    entity = ARTICLE_ENTITY
    operation = "create"
    request_type = CreateArticleRequest
    constraints = CreateArticleConstraints

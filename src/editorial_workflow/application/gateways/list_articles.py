"""文章列表（分页 + 过滤）"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any
from uuid import UUID

from pydantic import Field

from ...domain.value_objects import ArticleStatus
from ...shared.constants import ARTICLE_ENTITY, DEFAULT_PAGE_SIZE, MAX_PAGE_SIZE
from ..pipeline import Gateway, GatewayRequest, GatewayResponse
from ..pipeline.constraints import AnyStatus, RequestConstraints
from ._common import ArticleProcessor, optional_uuid


@dataclass(frozen=True)
class ListArticlesRequest(GatewayRequest):
    """文章列表请求"""

    page: int = 1
    limit: int = DEFAULT_PAGE_SIZE
    status: str | None = None
    author_id: str | None = None
    search: str | None = None

    uuid_fields = frozenset({"author_id"})


@dataclass(frozen=True)
class ListArticlesResponse(GatewayResponse):
    """文章列表响应"""

    articles: list[dict[str, Any]] = field(default_factory=list)
    total: int = 0
    page: int = 1
    limit: int = DEFAULT_PAGE_SIZE
    has_next_page: bool = False


class ListArticlesConstraints(RequestConstraints):
    page: int = Field(default=1, ge=1)
    limit: int = Field(default=DEFAULT_PAGE_SIZE, ge=1, le=MAX_PAGE_SIZE)
    status: AnyStatus | None = None
    author_id: UUID | None = None
    search: str | None = Field(default=None, max_length=200)


class ListArticlesProcessor(ArticleProcessor):
    """按创建时间倒序分页返回文章"""

    def __call__(self, request: ListArticlesRequest) -> ListArticlesResponse:
        status = ArticleStatus.from_string(request.status) if request.status else None
        author_id = optional_uuid(request.author_id)
        search = request.search.strip() if request.search and request.search.strip() else None
        offset = (request.page - 1) * request.limit

        articles = self._articles.find_by_criteria(
            status=status,
            author_id=author_id,
            search=search,
            limit=request.limit,
            offset=offset,
        )
        total = self._articles.count_by_criteria(status=status, author_id=author_id, search=search)

        return ListArticlesResponse(
            articles=[article.to_dict() for article in articles],
            total=total,
            page=request.page,
            limit=request.limit,
            has_next_page=offset + len(articles) < total,
        )


class ListArticlesGateway(Gateway):
    entity = ARTICLE_ENTITY
    operation = "list"
    request_type = ListArticlesRequest
    constraints = ListArticlesConstraints

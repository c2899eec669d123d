"""提交审核"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from ...domain.events import ArticleSubmittedForReview
from ...domain.value_objects import ArticleStatus
from ...shared.constants import ARTICLE_ENTITY
from ..pipeline import Gateway, GatewayRequest, GatewayResponse
from ..pipeline.constraints import RequestConstraints
from ._common import ArticleProcessor, optional_uuid


@dataclass(frozen=True)
class SubmitForReviewRequest(GatewayRequest):
    """提交审核请求"""

    article_id: str
    author_id: str | None = None

    uuid_fields = frozenset({"article_id", "author_id"})


@dataclass(frozen=True)
class SubmitForReviewResponse(GatewayResponse):
    """提交审核响应"""

    article_id: UUID
    status: ArticleStatus
    submitted_at: datetime


class SubmitForReviewConstraints(RequestConstraints):
    article_id: UUID
    author_id: UUID | None = None


class SubmitForReviewProcessor(ArticleProcessor):
    """draft | rejected → pending_review"""

    def __call__(self, request: SubmitForReviewRequest) -> SubmitForReviewResponse:
        article = self._load(request.article_id)

        submitted = article.submit_for_review(self._clock())
        self._articles.save(submitted)

        self._publish(
            ArticleSubmittedForReview(
                article_id=submitted.id,
                title=submitted.title,
                submitted_at=submitted.submitted_at,
                author_id=optional_uuid(request.author_id) or submitted.author_id,
            )
        )

        return SubmitForReviewResponse(
            article_id=submitted.id,
            status=submitted.status,
            submitted_at=submitted.submitted_at,
        )


class SubmitForReviewGateway(Gateway):
    entity = ARTICLE_ENTITY
    operation = "submit_for_review"
    request_type = SubmitForReviewRequest
    constraints = SubmitForReviewConstraints

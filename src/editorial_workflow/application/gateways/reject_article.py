"""审核驳回"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from ...domain.events import ArticleRejected
from ...domain.value_objects import ArticleStatus, ReviewDecision
from ...shared.constants import ARTICLE_ENTITY
from ..pipeline import Gateway, GatewayRequest, GatewayResponse
from ..pipeline.constraints import RequestConstraints, RequiredReasonStr
from ._common import ArticleProcessor


@dataclass(frozen=True)
class RejectArticleRequest(GatewayRequest):
    """审核驳回请求（理由必填）"""

    article_id: str
    reviewer_id: str
    reason: str

    uuid_fields = frozenset({"article_id", "reviewer_id"})


@dataclass(frozen=True)
class RejectArticleResponse(GatewayResponse):
    """审核驳回响应"""

    article_id: UUID
    status: ArticleStatus
    reviewer_id: UUID
    reviewed_at: datetime
    rejection_reason: str


class RejectArticleConstraints(RequestConstraints):
    article_id: UUID
    reviewer_id: UUID
    reason: RequiredReasonStr


class RejectArticleProcessor(ArticleProcessor):
    """pending_review → rejected"""

    def __call__(self, request: RejectArticleRequest) -> RejectArticleResponse:
        article = self._load(request.article_id)
        decision = ReviewDecision.reject(request.reason)
        reviewer_id = UUID(request.reviewer_id)

        rejected = article.reject(reviewer_id, decision, self._clock())
        self._articles.save(rejected)

        self._publish(
            ArticleRejected(
                article_id=rejected.id,
                reviewer_id=reviewer_id,
                reviewed_at=rejected.reviewed_at,
                reason=rejected.rejection_reason,
            )
        )

        return RejectArticleResponse(
            article_id=rejected.id,
            status=rejected.status,
            reviewer_id=reviewer_id,
            reviewed_at=rejected.reviewed_at,
            rejection_reason=rejected.rejection_reason,
        )


class RejectArticleGateway(Gateway):
    entity = ARTICLE_ENTITY
    operation = "reject"
    request_type = RejectArticleRequest
    constraints = RejectArticleConstraints

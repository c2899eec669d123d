"""审核通过"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from ...domain.events import ArticleApproved
from ...domain.value_objects import ArticleStatus, ReviewDecision
from ...shared.constants import ARTICLE_ENTITY
from ..pipeline import Gateway, GatewayRequest, GatewayResponse
from ..pipeline.constraints import ReasonStr, RequestConstraints
from ._common import ArticleProcessor


@dataclass(frozen=True)
class ApproveArticleRequest(GatewayRequest):
    """审核通过请求"""

    article_id: str
    reviewer_id: str
    reason: str | None = None

    uuid_fields = frozenset({"article_id", "reviewer_id"})


@dataclass(frozen=True)
class ApproveArticleResponse(GatewayResponse):
    """审核通过响应"""

    article_id: UUID
    status: ArticleStatus
    reviewer_id: UUID
    reviewed_at: datetime
    approval_reason: str | None = None


class ApproveArticleConstraints(RequestConstraints):
    article_id: UUID
    reviewer_id: UUID
    reason: ReasonStr | None = None


class ApproveArticleProcessor(ArticleProcessor):
    """pending_review → approved"""

    def __call__(self, request: ApproveArticleRequest) -> ApproveArticleResponse:
        article = self._load(request.article_id)
        decision = ReviewDecision.approve(request.reason)
        reviewer_id = UUID(request.reviewer_id)

        approved = article.approve(reviewer_id, decision, self._clock())
        self._articles.save(approved)

        self._publish(
            ArticleApproved(
                article_id=approved.id,
                reviewer_id=reviewer_id,
                reviewed_at=approved.reviewed_at,
                reason=approved.approval_reason,
            )
        )

        return ApproveArticleResponse(
            article_id=approved.id,
            status=approved.status,
            reviewer_id=reviewer_id,
            reviewed_at=approved.reviewed_at,
            approval_reason=approved.approval_reason,
        )


class ApproveArticleGateway(Gateway):
    entity = ARTICLE_ENTITY
    operation = "approve"
    request_type = ApproveArticleRequest
    constraints = ApproveArticleConstraints

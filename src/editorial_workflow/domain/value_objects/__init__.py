"""值对象"""

from .article_status import (
    TRANSITIONS,
    ArticleAction,
    ArticleStatus,
    Transition,
    allowed_sources,
    can_transition,
    next_status,
)
from .content import ArticleContent
from .editorial_comment import EditorialComment
from .review_decision import DecisionType, ReviewDecision
from .slug import ArticleSlug
from .title import ArticleTitle

__all__ = [
    "ArticleStatus",
    "ArticleAction",
    "Transition",
    "TRANSITIONS",
    "allowed_sources",
    "can_transition",
    "next_status",
    "ReviewDecision",
    "DecisionType",
    "EditorialComment",
    "ArticleTitle",
    "ArticleSlug",
    "ArticleContent",
]

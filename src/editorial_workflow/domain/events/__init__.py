"""领域事件"""

from .article_events import (
    ArticleApproved,
    ArticleArchived,
    ArticleAutoSaved,
    ArticleCreated,
    ArticleDeleted,
    ArticlePublished,
    ArticleRejected,
    ArticleSubmittedForReview,
    ArticleUpdated,
    DomainEvent,
    EditorialCommentAdded,
    EditorialCommentDeleted,
    EditorialCommentUpdated,
)

__all__ = [
    "DomainEvent",
    "ArticleCreated",
    "ArticleSubmittedForReview",
    "ArticleApproved",
    "ArticleRejected",
    "ArticlePublished",
    "ArticleArchived",
    "ArticleAutoSaved",
    "ArticleUpdated",
    "ArticleDeleted",
    "EditorialCommentAdded",
    "EditorialCommentUpdated",
    "EditorialCommentDeleted",
]

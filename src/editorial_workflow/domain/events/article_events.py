"""文章领域事件

处理器在持久化成功后通过 EventPublisherPort 发布这些事件。
"""

from dataclasses import dataclass, field
from datetime import datetime
from uuid import UUID

from ...shared.utils import utc_now


@dataclass(frozen=True)
class DomainEvent:
    """领域事件基类"""

    # 注意：该字段有默认值；为避免子类新增非默认字段时触发 dataclass 参数顺序限制，
    # 将其设为 init=False（由 default_factory 自动填充）。
    occurred_at: datetime = field(default_factory=utc_now, init=False)

    @property
    def name(self) -> str:
        return type(self).__name__


@dataclass(frozen=True)
class ArticleCreated(DomainEvent):
    """文章创建事件"""

    article_id: UUID
    title: str
    slug: str
    status: str
    author_id: UUID | None = None


@dataclass(frozen=True)
class ArticleSubmittedForReview(DomainEvent):
    """提交审核事件"""

    article_id: UUID
    title: str
    submitted_at: datetime
    author_id: UUID | None = None


@dataclass(frozen=True)
class ArticleApproved(DomainEvent):
    """审核通过事件"""

    article_id: UUID
    reviewer_id: UUID
    reviewed_at: datetime
    reason: str | None = None


@dataclass(frozen=True)
class ArticleRejected(DomainEvent):
    """审核驳回事件"""

    article_id: UUID
    reviewer_id: UUID
    reviewed_at: datetime
    reason: str


@dataclass(frozen=True)
class ArticlePublished(DomainEvent):
    """文章发布事件"""

    article_id: UUID
    slug: str
    published_at: datetime


@dataclass(frozen=True)
class ArticleArchived(DomainEvent):
    """文章归档事件"""

    article_id: UUID
    previous_status: str
    archived_at: datetime


@dataclass(frozen=True)
class ArticleAutoSaved(DomainEvent):
    """自动保存事件"""

    article_id: UUID
    title: str
    saved_at: datetime


@dataclass(frozen=True)
class ArticleDeleted(DomainEvent):
    """文章删除事件"""

    article_id: UUID
    slug: str


@dataclass(frozen=True)
class EditorialCommentAdded(DomainEvent):
    """批注添加事件"""

    comment_id: UUID
    article_id: UUID
    reviewer_id: UUID


@dataclass(frozen=True)
class EditorialCommentDeleted(DomainEvent):
    """批注删除事件"""

    comment_id: UUID
    article_id: UUID


@dataclass(frozen=True)
class ArticleUpdated(DomainEvent):
    """文章更新事件"""

    article_id: UUID
    title: str
    slug: str
    updated_at: datetime


@dataclass(frozen=True)
class EditorialCommentUpdated(DomainEvent):
    """批注修改事件"""

    comment_id: UUID
    article_id: UUID

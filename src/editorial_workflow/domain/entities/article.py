"""文章聚合根实体 - DDD核心"""

from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import datetime
from typing import Any
from uuid import UUID

from ...shared.exceptions import (
    ArticleAlreadyPublishedError,
    ArticleNotEditableError,
    InvalidValueError,
)
from ...shared.utils import isoformat
from ..value_objects import (
    ArticleAction,
    ArticleContent,
    ArticleSlug,
    ArticleStatus,
    ArticleTitle,
    ReviewDecision,
    next_status,
)

# 创建文章时允许的初始状态（导入已有内容时可以直接是 published / archived）
CREATABLE_STATUSES = frozenset({ArticleStatus.DRAFT, ArticleStatus.PUBLISHED, ArticleStatus.ARCHIVED})


@dataclass(frozen=True)
class Article:
    """
    文章聚合根

    聚合根是DDD中的核心概念，它是一个实体的边界，
    所有对聚合内部对象的访问都必须通过聚合根进行。

    Article 是不可变快照：每个状态流转方法都返回新的快照，
    状态只能通过这些方法改变。
    """

    id: UUID
    title: str
    content: str
    slug: str
    status: ArticleStatus
    created_at: datetime
    updated_at: datetime

    author_id: UUID | None = None
    reviewer_id: UUID | None = None
    submitted_at: datetime | None = None
    reviewed_at: datetime | None = None
    published_at: datetime | None = None
    approval_reason: str | None = None
    rejection_reason: str | None = None

    def __post_init__(self) -> None:
        # 字段规则由值对象负责，标题保存去除首尾空白后的值
        object.__setattr__(self, "title", ArticleTitle(self.title).value)
        ArticleContent(self.content)
        ArticleSlug(self.slug)

        if (self.published_at is not None) != (self.status is ArticleStatus.PUBLISHED):
            raise InvalidValueError("published_at 必须且只能在 published 状态下设置")

        if (self.reviewer_id is None) != (self.reviewed_at is None):
            raise InvalidValueError("reviewer_id 与 reviewed_at 必须同时设置")

        if self.status in (ArticleStatus.APPROVED, ArticleStatus.REJECTED) and self.reviewed_at is None:
            raise InvalidValueError(f"{self.status} 状态的文章必须记录审核信息")

        if self.updated_at < self.created_at:
            raise InvalidValueError("updated_at 不能早于 created_at")

    # ---------- 工厂方法 ----------

    @classmethod
    def create(
        cls,
        *,
        article_id: UUID,
        title: str,
        content: str,
        created_at: datetime,
        slug: str | None = None,
        status: ArticleStatus = ArticleStatus.DRAFT,
        author_id: UUID | None = None,
    ) -> Article:
        """
        创建文章

        未提供 slug 时从标题生成；以 published 状态创建时 published_at 取 created_at。
        """
        if status not in CREATABLE_STATUSES:
            raise InvalidValueError(f"不能以 {status} 状态创建文章")

        resolved_slug = slug if slug else ArticleSlug.from_title(title).value

        return cls(
            id=article_id,
            title=title,
            content=content,
            slug=resolved_slug,
            status=status,
            created_at=created_at,
            updated_at=created_at,
            author_id=author_id,
            published_at=created_at if status is ArticleStatus.PUBLISHED else None,
        )

    # ---------- 状态流转 ----------

    def submit_for_review(self, at: datetime) -> Article:
        """draft | rejected → pending_review"""
        return replace(
            self,
            status=next_status(self.status, ArticleAction.SUBMIT),
            submitted_at=at,
            updated_at=self._touch(at),
        )

    def approve(self, reviewer_id: UUID, decision: ReviewDecision, at: datetime) -> Article:
        """pending_review → approved"""
        if not decision.is_approved:
            raise InvalidValueError("approve 需要通过的审核结论")

        return replace(
            self,
            status=next_status(self.status, ArticleAction.APPROVE),
            reviewer_id=reviewer_id,
            reviewed_at=at,
            approval_reason=decision.reason,
            rejection_reason=None,
            updated_at=self._touch(at),
        )

    def reject(self, reviewer_id: UUID, decision: ReviewDecision, at: datetime) -> Article:
        """pending_review → rejected"""
        if not decision.is_rejected:
            raise InvalidValueError("reject 需要驳回的审核结论")

        return replace(
            self,
            status=next_status(self.status, ArticleAction.REJECT),
            reviewer_id=reviewer_id,
            reviewed_at=at,
            rejection_reason=decision.reason,
            approval_reason=None,
            updated_at=self._touch(at),
        )

    def publish(self, at: datetime) -> Article:
        """
        approved → published

        Raises:
            ArticleAlreadyPublishedError: 文章已发布
            InvalidTransitionError: 其他不允许发布的状态
        """
        if self.status is ArticleStatus.PUBLISHED:
            raise ArticleAlreadyPublishedError(self.id)

        return replace(
            self,
            status=next_status(self.status, ArticleAction.PUBLISH),
            published_at=at,
            updated_at=self._touch(at),
        )

    def archive(self, at: datetime) -> Article:
        """任意未归档状态 → archived"""
        return replace(
            self,
            status=next_status(self.status, ArticleAction.ARCHIVE),
            published_at=None,
            updated_at=self._touch(at),
        )

    def auto_save(self, title: str, content: str, slug: str | None, at: datetime) -> Article:
        """
        自动保存标题/正文/slug，不改变状态

        Raises:
            ArticleNotEditableError: 已发布的文章只能走审核流程修改
        """
        if self.status is ArticleStatus.PUBLISHED:
            raise ArticleNotEditableError(
                f"已发布的文章不能自动保存: {self.id}",
                details={"article_id": str(self.id), "status": self.status.value},
            )

        return replace(
            self,
            title=title,
            content=content,
            slug=slug or self.slug,
            updated_at=self._touch(at),
        )

    def update(
        self,
        at: datetime,
        *,
        title: str | None = None,
        content: str | None = None,
        slug: str | None = None,
    ) -> Article:
        """
        部分更新，None 表示保持原值，不改变状态

        提供了新标题但未提供 slug 时，slug 从新标题重新生成。

        Raises:
            ArticleNotEditableError: 已发布的文章只能走审核流程修改
        """
        if self.status is ArticleStatus.PUBLISHED:
            raise ArticleNotEditableError(
                f"已发布的文章不能直接修改: {self.id}",
                details={"article_id": str(self.id), "status": self.status.value},
            )

        if slug is None and title is not None:
            slug = ArticleSlug.from_title(title).value

        return replace(
            self,
            title=self.title if title is None else title,
            content=self.content if content is None else content,
            slug=self.slug if slug is None else slug,
            updated_at=self._touch(at),
        )

    # ---------- 辅助 ----------

    def _touch(self, at: datetime) -> datetime:
        # 注入的时钟可能与 created_at 不同源，保证 updated_at 不回退
        return max(at, self.created_at)

    @property
    def word_count(self) -> int:
        """计算字数"""
        return ArticleContent(self.content).word_count

    def to_dict(self) -> dict[str, Any]:
        """完整视图（camelCase，供响应和持久化使用）"""
        return {
            "articleId": str(self.id),
            "title": self.title,
            "content": self.content,
            "slug": self.slug,
            "status": self.status.value,
            "authorId": str(self.author_id) if self.author_id else None,
            "reviewerId": str(self.reviewer_id) if self.reviewer_id else None,
            "createdAt": isoformat(self.created_at),
            "updatedAt": isoformat(self.updated_at),
            "submittedAt": isoformat(self.submitted_at),
            "reviewedAt": isoformat(self.reviewed_at),
            "publishedAt": isoformat(self.published_at),
            "approvalReason": self.approval_reason,
            "rejectionReason": self.rejection_reason,
        }

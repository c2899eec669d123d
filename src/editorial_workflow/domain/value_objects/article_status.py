"""文章状态机

状态流转表以数据形式集中定义：每个动作对应一组允许的源状态和一个目标状态。
三个判定方法（可提交审核 / 可审核 / 可发布）都基于该表计算。

    draft | rejected --submit--> pending_review
    pending_review --approve--> approved
    pending_review --reject--> rejected
    approved --publish--> published
    除 archived 外的任意状态 --archive--> archived
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType

from ...shared.exceptions import InvalidTransitionError, InvalidValueError


class ArticleStatus(str, Enum):
    """文章状态（封闭枚举）"""

    DRAFT = "draft"
    PENDING_REVIEW = "pending_review"
    APPROVED = "approved"
    REJECTED = "rejected"
    PUBLISHED = "published"
    ARCHIVED = "archived"

    @classmethod
    def from_string(cls, value: str) -> ArticleStatus:
        """从字符串创建状态"""
        try:
            return cls(value)
        except ValueError:
            allowed = ", ".join(s.value for s in cls)
            raise InvalidValueError(f"未知的文章状态: {value}（可选: {allowed}）") from None

    def can_be_submitted_for_review(self) -> bool:
        """作者可以提交（或重新提交）审核"""
        return can_transition(self, ArticleAction.SUBMIT)

    def can_be_reviewed(self) -> bool:
        """审核人可以通过或驳回"""
        return can_transition(self, ArticleAction.APPROVE)

    def can_be_published(self) -> bool:
        """允许发布"""
        return can_transition(self, ArticleAction.PUBLISH)

    def __str__(self) -> str:
        return self.value


class ArticleAction(str, Enum):
    """状态流转动作"""

    SUBMIT = "submit"
    APPROVE = "approve"
    REJECT = "reject"
    PUBLISH = "publish"
    ARCHIVE = "archive"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Transition:
    """一条状态流转规则"""

    action: ArticleAction
    sources: frozenset[ArticleStatus]
    target: ArticleStatus


TRANSITIONS: Mapping[ArticleAction, Transition] = MappingProxyType(
    {
        ArticleAction.SUBMIT: Transition(
            ArticleAction.SUBMIT,
            frozenset({ArticleStatus.DRAFT, ArticleStatus.REJECTED}),
            ArticleStatus.PENDING_REVIEW,
        ),
        ArticleAction.APPROVE: Transition(
            ArticleAction.APPROVE,
            frozenset({ArticleStatus.PENDING_REVIEW}),
            ArticleStatus.APPROVED,
        ),
        ArticleAction.REJECT: Transition(
            ArticleAction.REJECT,
            frozenset({ArticleStatus.PENDING_REVIEW}),
            ArticleStatus.REJECTED,
        ),
        ArticleAction.PUBLISH: Transition(
            ArticleAction.PUBLISH,
            frozenset({ArticleStatus.APPROVED}),
            ArticleStatus.PUBLISHED,
        ),
        # 归档是管理操作，不受上面三个判定约束；已归档的文章不再接受任何流转
        ArticleAction.ARCHIVE: Transition(
            ArticleAction.ARCHIVE,
            frozenset(s for s in ArticleStatus if s is not ArticleStatus.ARCHIVED),
            ArticleStatus.ARCHIVED,
        ),
    }
)


def allowed_sources(action: ArticleAction) -> frozenset[ArticleStatus]:
    """允许执行该动作的源状态"""
    return TRANSITIONS[action].sources


def can_transition(status: ArticleStatus, action: ArticleAction) -> bool:
    """当前状态是否允许执行该动作"""
    return status in TRANSITIONS[action].sources


def next_status(status: ArticleStatus, action: ArticleAction) -> ArticleStatus:
    """
    计算流转后的状态

    Raises:
        InvalidTransitionError: 当前状态不允许该动作
    """
    transition = TRANSITIONS[action]
    if status not in transition.sources:
        raise InvalidTransitionError(
            current_status=status.value,
            action=action.value,
            allowed_statuses=sorted(s.value for s in transition.sources),
        )
    return transition.target

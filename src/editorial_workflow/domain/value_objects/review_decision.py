"""审核结论值对象"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

from ...shared.constants import REVIEW_REASON_MAX_LENGTH
from ...shared.exceptions import InvalidValueError


class DecisionType(str, Enum):
    """审核结论类型"""

    APPROVED = "approved"
    REJECTED = "rejected"


@dataclass(frozen=True)
class ReviewDecision:
    """
    审核结论

    每次审核动作创建一次，创建后不可变。
    驳回必须附带非空理由；通过的理由可选。
    """

    decision: DecisionType
    reason: str | None = None

    def __post_init__(self) -> None:
        if self.decision is DecisionType.REJECTED:
            if self.reason is None:
                raise InvalidValueError("驳回必须附带理由")
            if not self.reason.strip():
                raise InvalidValueError("驳回理由不能为空")

        if self.reason is not None and len(self.reason) > REVIEW_REASON_MAX_LENGTH:
            raise InvalidValueError(f"审核理由不能超过{REVIEW_REASON_MAX_LENGTH}个字符")

    @classmethod
    def approve(cls, reason: str | None = None) -> ReviewDecision:
        """通过（空白理由视为未提供）"""
        if reason is not None and not reason.strip():
            reason = None
        return cls(DecisionType.APPROVED, reason)

    @classmethod
    def reject(cls, reason: str | None) -> ReviewDecision:
        """驳回"""
        return cls(DecisionType.REJECTED, reason)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ReviewDecision:
        """从 {"decision": ..., "reason": ...} 创建"""
        decision = data.get("decision", "")
        reason = data.get("reason")
        if decision == DecisionType.APPROVED.value:
            return cls.approve(reason)
        if decision == DecisionType.REJECTED.value:
            return cls.reject(reason)
        raise InvalidValueError(f"无效的审核结论: {decision}")

    @property
    def is_approved(self) -> bool:
        return self.decision is DecisionType.APPROVED

    @property
    def is_rejected(self) -> bool:
        return self.decision is DecisionType.REJECTED

    def to_dict(self) -> dict[str, Any]:
        return {"decision": self.decision.value, "reason": self.reason}

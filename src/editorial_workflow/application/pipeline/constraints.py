"""声明式请求约束

每个操作用一个 pydantic 模型描述 request.data() 的约束；字段名是 snake_case，
通过 alias 对应 camelCase 的线上字段，错误位置也以线上字段名报告。
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Annotated, Literal

from pydantic import AfterValidator, BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from ...shared.constants import (
    CONTENT_MIN_LENGTH,
    EDITORIAL_COMMENT_MAX_LENGTH,
    REVIEW_REASON_MAX_LENGTH,
    SLUG_MAX_LENGTH,
    SLUG_PATTERN,
    TITLE_MAX_LENGTH,
    TITLE_MIN_LENGTH,
)


class RequestConstraints(BaseModel):
    """约束模型基类"""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
        frozen=True,
    )


def _not_blank(value: str) -> str:
    if not value.strip():
        raise ValueError("不能为空白")
    return value


def _trimmed_length(min_length: int, max_length: int | None = None) -> Callable[[str], str]:
    def check(value: str) -> str:
        length = len(value.strip())
        if length < min_length:
            raise ValueError(f"去除首尾空白后至少需要{min_length}个字符")
        if max_length is not None and length > max_length:
            raise ValueError(f"去除首尾空白后不能超过{max_length}个字符")
        return value

    return check


NonBlankStr = Annotated[str, AfterValidator(_not_blank)]

TitleStr = Annotated[
    str,
    AfterValidator(_not_blank),
    AfterValidator(_trimmed_length(TITLE_MIN_LENGTH, TITLE_MAX_LENGTH)),
]

ContentStr = Annotated[
    str,
    AfterValidator(_not_blank),
    AfterValidator(_trimmed_length(CONTENT_MIN_LENGTH)),
]

SlugStr = Annotated[str, Field(max_length=SLUG_MAX_LENGTH, pattern=SLUG_PATTERN)]

ReasonStr = Annotated[str, Field(max_length=REVIEW_REASON_MAX_LENGTH)]

RequiredReasonStr = Annotated[str, Field(max_length=REVIEW_REASON_MAX_LENGTH), AfterValidator(_not_blank)]

CommentStr = Annotated[str, Field(max_length=EDITORIAL_COMMENT_MAX_LENGTH), AfterValidator(_not_blank)]

CreatableStatus = Literal["draft", "published", "archived"]

AnyStatus = Literal["draft", "pending_review", "approved", "rejected", "published", "archived"]


__all__ = [
    "RequestConstraints",
    "NonBlankStr",
    "TitleStr",
    "ContentStr",
    "SlugStr",
    "ReasonStr",
    "RequiredReasonStr",
    "CommentStr",
    "CreatableStatus",
    "AnyStatus",
]

"""
领域层 - DDD核心

领域层包含：
- entities: 领域实体（文章聚合根、编辑批注）
- value_objects: 值对象（状态机、审核结论、批注、标题、slug、正文）
- events: 领域事件

依赖规则：领域层只依赖 shared，不依赖其他层
"""

from .entities import Article, EditorialCommentRecord
from .value_objects import (
    ArticleAction,
    ArticleContent,
    ArticleSlug,
    ArticleStatus,
    ArticleTitle,
    EditorialComment,
    ReviewDecision,
)

__all__ = [
    # Entities
    "Article",
    "EditorialCommentRecord",
    # Value Objects
    "ArticleStatus",
    "ArticleAction",
    "ReviewDecision",
    "EditorialComment",
    "ArticleTitle",
    "ArticleSlug",
    "ArticleContent",
]

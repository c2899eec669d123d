"""领域实体"""

from .article import CREATABLE_STATUSES, Article
from .editorial_comment import EditorialCommentRecord

__all__ = [
    "Article",
    "CREATABLE_STATUSES",
    "EditorialCommentRecord",
]

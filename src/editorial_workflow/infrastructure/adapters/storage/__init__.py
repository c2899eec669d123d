"""存储适配器"""

from .local_json import LocalJsonArticleRepository, LocalJsonEditorialCommentRepository
from .memory import InMemoryArticleRepository, InMemoryEditorialCommentRepository

__all__ = [
    "InMemoryArticleRepository",
    "InMemoryEditorialCommentRepository",
    "LocalJsonArticleRepository",
    "LocalJsonEditorialCommentRepository",
]

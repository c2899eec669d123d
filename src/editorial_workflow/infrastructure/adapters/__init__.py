"""基础设施适配器"""

from .event_bus import InMemoryEventBus
from .storage import (
    InMemoryArticleRepository,
    InMemoryEditorialCommentRepository,
    LocalJsonArticleRepository,
    LocalJsonEditorialCommentRepository,
)

__all__ = [
    "InMemoryEventBus",
    "InMemoryArticleRepository",
    "InMemoryEditorialCommentRepository",
    "LocalJsonArticleRepository",
    "LocalJsonEditorialCommentRepository",
]

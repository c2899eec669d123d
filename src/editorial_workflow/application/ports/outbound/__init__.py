"""出站端口 - 定义应用层依赖的外部服务接口"""

from .article_repository_port import ArticleRepositoryPort
from .comment_repository_port import EditorialCommentRepositoryPort
from .event_publisher_port import EventPublisherPort

__all__ = [
    "ArticleRepositoryPort",
    "EditorialCommentRepositoryPort",
    "EventPublisherPort",
]

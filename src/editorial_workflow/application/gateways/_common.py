"""处理器公共部分"""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime
from uuid import UUID, uuid4

from loguru import logger
from pydantic import AwareDatetime, TypeAdapter

from ...domain.entities import Article
from ...domain.events import DomainEvent
from ...shared.exceptions import ArticleNotFoundError
from ...shared.utils import utc_now
from ..pipeline import Processor
from ..ports.outbound import ArticleRepositoryPort, EditorialCommentRepositoryPort, EventPublisherPort

Clock = Callable[[], datetime]
IdGenerator = Callable[[], UUID]

_AWARE_DATETIME = TypeAdapter(AwareDatetime)


class ArticleProcessor(Processor):
    """
    文章相关处理器基类

    Args:
        articles: 文章仓储
        clock: 时钟（默认 UTC 当前时间）
        id_generator: 新标识生成器（默认 uuid4）
        event_publisher: 可选的领域事件发布器
    """

    def __init__(
        self,
        articles: ArticleRepositoryPort,
        *,
        clock: Clock = utc_now,
        id_generator: IdGenerator = uuid4,
        event_publisher: EventPublisherPort | None = None,
    ):
        self._articles = articles
        self._clock = clock
        self._id_generator = id_generator
        self._event_publisher = event_publisher

    def _load(self, article_id: str | UUID) -> Article:
        """按 id 加载文章，不存在时抛出 ArticleNotFoundError"""
        article_uuid = article_id if isinstance(article_id, UUID) else UUID(article_id)
        article = self._articles.find_by_id(article_uuid)
        if article is None:
            raise ArticleNotFoundError(article_uuid)
        return article

    def _publish(self, event: DomainEvent) -> None:
        """持久化成功后发布事件；发布失败只记录警告，不影响已完成的操作"""
        if self._event_publisher is None:
            return

        try:
            self._event_publisher.publish(event)
        except Exception as e:
            logger.warning(f"领域事件发布失败，忽略: {event.name}: {e}")


def optional_uuid(value: str | None) -> UUID | None:
    return UUID(value) if value else None


def parse_datetime(value: str) -> datetime:
    """解析 ISO-8601 时间（必须带时区），与约束模型使用同一套规则"""
    return _AWARE_DATETIME.validate_python(value)


class CommentProcessor(ArticleProcessor):
    """编辑批注相关处理器基类（同时需要文章仓储和批注仓储）"""

    def __init__(
        self,
        articles: ArticleRepositoryPort,
        comments: EditorialCommentRepositoryPort,
        **kwargs,
    ):
        super().__init__(articles, **kwargs)
        self._comments = comments

"""测试夹具和共享配置

提供测试中常用的夹具：
- 可控的时钟和标识生成器
- 示例 Article 实体
- 内存仓储、事件总线、使用内存存储的容器
- loguru 日志捕获
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import TYPE_CHECKING
from uuid import UUID

import pytest
from loguru import logger

from editorial_workflow.domain.entities import Article
from editorial_workflow.domain.value_objects import ArticleStatus
from editorial_workflow.infrastructure.adapters import (
    InMemoryArticleRepository,
    InMemoryEditorialCommentRepository,
    InMemoryEventBus,
)
from editorial_workflow.infrastructure.config import AppSettings, Container, StorageSettings
from editorial_workflow.shared.utils import clear_request_id

if TYPE_CHECKING:
    from collections.abc import Generator


T0 = datetime(2025, 7, 13, 17, 25, 51, tzinfo=timezone.utc)


class FixedClock:
    """可手动推进的时钟"""

    def __init__(self, start: datetime = T0):
        self.now = start

    def __call__(self) -> datetime:
        return self.now

    def advance(self, seconds: float = 1) -> datetime:
        self.now = self.now + timedelta(seconds=seconds)
        return self.now


class SequentialIds:
    """按顺序生成 UUID(int=1), UUID(int=2), ..."""

    def __init__(self):
        self.issued: list[UUID] = []

    def __call__(self) -> UUID:
        value = UUID(int=len(self.issued) + 1)
        self.issued.append(value)
        return value


# ============== 基础夹具 ==============


@pytest.fixture
def clock() -> FixedClock:
    return FixedClock()


@pytest.fixture
def ids() -> SequentialIds:
    return SequentialIds()


@pytest.fixture
def author_id() -> UUID:
    return UUID("11111111-1111-4111-8111-111111111111")


@pytest.fixture
def reviewer_id() -> UUID:
    return UUID("22222222-2222-4222-8222-222222222222")


@pytest.fixture
def draft_article(author_id: UUID) -> Article:
    """示例草稿文章"""
    return Article.create(
        article_id=UUID("33333333-3333-4333-8333-333333333333"),
        title="Valid Title Five",
        content="0123456789",
        slug="valid-title-five",
        created_at=T0,
        author_id=author_id,
    )


@pytest.fixture
def pending_article(draft_article: Article) -> Article:
    """待审核文章"""
    article = draft_article.submit_for_review(T0 + timedelta(minutes=1))
    assert article.status is ArticleStatus.PENDING_REVIEW
    return article


# ============== 适配器夹具 ==============


@pytest.fixture
def article_repository() -> InMemoryArticleRepository:
    return InMemoryArticleRepository()


@pytest.fixture
def comment_repository() -> InMemoryEditorialCommentRepository:
    return InMemoryEditorialCommentRepository()


@pytest.fixture
def event_bus() -> InMemoryEventBus:
    return InMemoryEventBus()


@pytest.fixture
def container(clock: FixedClock, ids: SequentialIds) -> Generator[Container, None, None]:
    """使用内存存储、固定时钟和顺序标识的容器"""
    settings = AppSettings(storage=StorageSettings(backend="memory"))
    c = Container(settings=settings, clock=clock, id_generator=ids)
    yield c
    c.close()


# ============== 日志夹具 ==============


@pytest.fixture
def log_records() -> Generator[list[dict], None, None]:
    """捕获 loguru 记录（record 字典）"""
    records: list[dict] = []
    handler_id = logger.add(lambda message: records.append(message.record), level="DEBUG", format="{message}")
    yield records
    logger.remove(handler_id)


@pytest.fixture(autouse=True)
def _reset_request_id() -> Generator[None, None, None]:
    yield
    clear_request_id()

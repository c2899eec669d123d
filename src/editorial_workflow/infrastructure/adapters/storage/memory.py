"""内存存储

进程内的仓储实现，用于测试和临时会话。线程安全，但不提供乐观并发控制（最后一次写入生效）。
"""

from __future__ import annotations

import threading
from collections.abc import Iterable
from uuid import UUID

from ....domain.entities import Article, EditorialCommentRecord
from ....domain.value_objects import ArticleStatus


def matches_criteria(
    article: Article,
    status: ArticleStatus | None = None,
    author_id: UUID | None = None,
    search: str | None = None,
) -> bool:
    """文章是否满足查询条件（search 对标题和正文做不区分大小写的子串匹配）"""
    if status is not None and article.status is not status:
        return False
    if author_id is not None and article.author_id != author_id:
        return False
    if search:
        needle = search.casefold()
        if needle not in article.title.casefold() and needle not in article.content.casefold():
            return False
    return True


def newest_first(articles: Iterable[Article]) -> list[Article]:
    """按创建时间倒序（相同时间按 id 保证顺序稳定）"""
    return sorted(articles, key=lambda a: (a.created_at, str(a.id)), reverse=True)


class InMemoryArticleRepository:
    """内存文章仓储"""

    def __init__(self, articles: Iterable[Article] = ()):
        self._lock = threading.Lock()
        self._articles: dict[UUID, Article] = {article.id: article for article in articles}

    def find_by_id(self, article_id: UUID) -> Article | None:
        with self._lock:
            return self._articles.get(article_id)

    def save(self, article: Article) -> None:
        with self._lock:
            self._articles[article.id] = article

    def exists_by_slug(self, slug: str, exclude_id: UUID | None = None) -> bool:
        with self._lock:
            return any(a.slug == slug and a.id != exclude_id for a in self._articles.values())

    def remove(self, article_id: UUID) -> None:
        with self._lock:
            self._articles.pop(article_id, None)

    def find_by_criteria(
        self,
        status: ArticleStatus | None = None,
        author_id: UUID | None = None,
        search: str | None = None,
        limit: int = 20,
        offset: int = 0,
    ) -> list[Article]:
        with self._lock:
            matched = [a for a in self._articles.values() if matches_criteria(a, status, author_id, search)]
        return newest_first(matched)[offset : offset + limit]

    def count_by_criteria(
        self,
        status: ArticleStatus | None = None,
        author_id: UUID | None = None,
        search: str | None = None,
    ) -> int:
        with self._lock:
            return sum(1 for a in self._articles.values() if matches_criteria(a, status, author_id, search))

    def __len__(self) -> int:
        return len(self._articles)


class InMemoryEditorialCommentRepository:
    """内存批注仓储"""

    def __init__(self):
        self._lock = threading.Lock()
        self._comments: dict[UUID, EditorialCommentRecord] = {}

    def save(self, comment: EditorialCommentRecord) -> None:
        with self._lock:
            self._comments[comment.id] = comment

    def find_by_id(self, comment_id: UUID) -> EditorialCommentRecord | None:
        with self._lock:
            return self._comments.get(comment_id)

    def find_by_article(self, article_id: UUID) -> list[EditorialCommentRecord]:
        with self._lock:
            records = [c for c in self._comments.values() if c.article_id == article_id]
        return sorted(records, key=lambda c: c.created_at)

    def remove(self, comment_id: UUID) -> None:
        with self._lock:
            self._comments.pop(comment_id, None)

    def remove_by_article(self, article_id: UUID) -> int:
        with self._lock:
            to_delete = [cid for cid, c in self._comments.items() if c.article_id == article_id]
            for cid in to_delete:
                del self._comments[cid]
        return len(to_delete)

    def __len__(self) -> int:
        return len(self._comments)

"""本地 JSON 存储

每篇文章 / 每条批注一个 JSON 文件，写入采用临时文件 + os.replace 的原子替换：

    <data_dir>/articles/<id>.json
    <data_dir>/articles/index.json      slug → id
    <data_dir>/comments/<id>.json

存储位置：默认写入平台标准数据目录（见 infrastructure.config.paths）。
"""

from __future__ import annotations

import json
import os
from collections.abc import Iterator
from datetime import datetime
from pathlib import Path
from typing import Any
from uuid import UUID

from loguru import logger

from ....domain.entities import Article, EditorialCommentRecord
from ....domain.value_objects import ArticleStatus, EditorialComment
from ....shared.exceptions import StorageReadError, StorageWriteError
from .memory import matches_criteria, newest_first

_INDEX_FILE = "index.json"


def _atomic_write(path: Path, data: Any) -> None:
    tmp_path = path.with_name(f".{path.name}.tmp")
    # 原子写入：先写临时文件，再用 os.replace 覆盖
    tmp_path.write_text(json.dumps(data, ensure_ascii=False, indent=2), encoding="utf-8")
    os.replace(tmp_path, path)


def _read_json(path: Path) -> Any:
    return json.loads(path.read_text(encoding="utf-8"))


def _iso(value: datetime | None) -> str | None:
    return value.isoformat() if value else None


def _dt(value: str | None) -> datetime | None:
    return datetime.fromisoformat(value) if value else None


def _uuid(value: str | None) -> UUID | None:
    return UUID(value) if value else None


class LocalJsonArticleRepository:
    """本地 JSON 文章仓储"""

    def __init__(self, data_dir: str | Path):
        self._dir = Path(data_dir) / "articles"
        self._dir.mkdir(parents=True, exist_ok=True)

        self._index_path = self._dir / _INDEX_FILE
        self._index: dict[str, str] = self._load_index()

    def find_by_id(self, article_id: UUID) -> Article | None:
        path = self._path(article_id)
        if not path.exists():
            return None

        try:
            return self._dict_to_article(_read_json(path))
        except Exception as e:
            raise StorageReadError(f"读取文章失败 {article_id}: {e}", cause=e) from e

    def save(self, article: Article) -> None:
        try:
            _atomic_write(self._path(article.id), self._article_to_dict(article))

            # slug 可能在自动保存时变化，先清理该文章旧的索引项
            for slug in [s for s, aid in self._index.items() if aid == str(article.id)]:
                self._index.pop(slug, None)
            self._index[article.slug] = str(article.id)
            self._persist_index()
        except Exception as e:
            raise StorageWriteError(f"保存文章失败 {article.id}: {e}", cause=e) from e

    def exists_by_slug(self, slug: str, exclude_id: UUID | None = None) -> bool:
        owner = self._index.get(slug)
        if owner is None:
            return False
        return exclude_id is None or owner != str(exclude_id)

    def remove(self, article_id: UUID) -> None:
        path = self._path(article_id)
        if not path.exists():
            return

        try:
            path.unlink()

            # 清理 index
            for slug in [s for s, aid in self._index.items() if aid == str(article_id)]:
                self._index.pop(slug, None)
            self._persist_index()
        except Exception as e:
            raise StorageWriteError(f"删除文章失败 {article_id}: {e}", cause=e) from e

    def find_by_criteria(
        self,
        status: ArticleStatus | None = None,
        author_id: UUID | None = None,
        search: str | None = None,
        limit: int = 20,
        offset: int = 0,
    ) -> list[Article]:
        matched = [a for a in self._iter_articles() if matches_criteria(a, status, author_id, search)]
        return newest_first(matched)[offset : offset + limit]

    def count_by_criteria(
        self,
        status: ArticleStatus | None = None,
        author_id: UUID | None = None,
        search: str | None = None,
    ) -> int:
        return sum(1 for a in self._iter_articles() if matches_criteria(a, status, author_id, search))

    # ---------------- internal ----------------

    def _path(self, article_id: UUID) -> Path:
        return self._dir / f"{article_id}.json"

    def _iter_articles(self) -> Iterator[Article]:
        for path in self._dir.glob("*.json"):
            if path.name == _INDEX_FILE:
                continue
            try:
                yield self._dict_to_article(_read_json(path))
            except Exception as e:
                logger.warning(f"跳过无法读取的文章文件 {path.name}: {e}")

    def _load_index(self) -> dict[str, str]:
        if not self._index_path.exists():
            return {}
        try:
            data = _read_json(self._index_path)
        except Exception as e:
            logger.warning(f"slug 索引损坏，将重建: {e}")
            return self._rebuild_index()

        if isinstance(data, dict) and all(isinstance(k, str) and isinstance(v, str) for k, v in data.items()):
            return data

        return self._rebuild_index()

    def _rebuild_index(self) -> dict[str, str]:
        index = {article.slug: str(article.id) for article in self._iter_articles()}
        self._index = index
        self._persist_index()
        return index

    def _persist_index(self) -> None:
        _atomic_write(self._index_path, self._index)

    @staticmethod
    def _article_to_dict(article: Article) -> dict[str, Any]:
        return {
            "id": str(article.id),
            "title": article.title,
            "content": article.content,
            "slug": article.slug,
            "status": article.status.value,
            "author_id": str(article.author_id) if article.author_id else None,
            "reviewer_id": str(article.reviewer_id) if article.reviewer_id else None,
            "created_at": _iso(article.created_at),
            "updated_at": _iso(article.updated_at),
            "submitted_at": _iso(article.submitted_at),
            "reviewed_at": _iso(article.reviewed_at),
            "published_at": _iso(article.published_at),
            "approval_reason": article.approval_reason,
            "rejection_reason": article.rejection_reason,
        }

    @staticmethod
    def _dict_to_article(data: dict[str, Any]) -> Article:
        return Article(
            id=UUID(data["id"]),
            title=data["title"],
            content=data["content"],
            slug=data["slug"],
            status=ArticleStatus.from_string(data["status"]),
            created_at=_dt(data["created_at"]),
            updated_at=_dt(data["updated_at"]),
            author_id=_uuid(data.get("author_id")),
            reviewer_id=_uuid(data.get("reviewer_id")),
            submitted_at=_dt(data.get("submitted_at")),
            reviewed_at=_dt(data.get("reviewed_at")),
            published_at=_dt(data.get("published_at")),
            approval_reason=data.get("approval_reason"),
            rejection_reason=data.get("rejection_reason"),
        )


class LocalJsonEditorialCommentRepository:
    """本地 JSON 批注仓储"""

    def __init__(self, data_dir: str | Path):
        self._dir = Path(data_dir) / "comments"
        self._dir.mkdir(parents=True, exist_ok=True)

    def save(self, comment: EditorialCommentRecord) -> None:
        try:
            _atomic_write(self._path(comment.id), self._comment_to_dict(comment))
        except Exception as e:
            raise StorageWriteError(f"保存批注失败 {comment.id}: {e}", cause=e) from e

    def find_by_id(self, comment_id: UUID) -> EditorialCommentRecord | None:
        path = self._path(comment_id)
        if not path.exists():
            return None

        try:
            return self._dict_to_comment(_read_json(path))
        except Exception as e:
            raise StorageReadError(f"读取批注失败 {comment_id}: {e}", cause=e) from e

    def find_by_article(self, article_id: UUID) -> list[EditorialCommentRecord]:
        records = [c for c in self._iter_comments() if c.article_id == article_id]
        return sorted(records, key=lambda c: c.created_at)

    def remove(self, comment_id: UUID) -> None:
        path = self._path(comment_id)
        if not path.exists():
            return

        try:
            path.unlink()
        except Exception as e:
            raise StorageWriteError(f"删除批注失败 {comment_id}: {e}", cause=e) from e

    def remove_by_article(self, article_id: UUID) -> int:
        removed = 0
        for record in self.find_by_article(article_id):
            self.remove(record.id)
            removed += 1
        return removed

    # ---------------- internal ----------------

    def _path(self, comment_id: UUID) -> Path:
        return self._dir / f"{comment_id}.json"

    def _iter_comments(self) -> Iterator[EditorialCommentRecord]:
        for path in self._dir.glob("*.json"):
            try:
                yield self._dict_to_comment(_read_json(path))
            except Exception as e:
                logger.warning(f"跳过无法读取的批注文件 {path.name}: {e}")

    @staticmethod
    def _comment_to_dict(record: EditorialCommentRecord) -> dict[str, Any]:
        return {
            "id": str(record.id),
            "article_id": str(record.article_id),
            "reviewer_id": str(record.reviewer_id),
            "comment": record.comment.comment,
            "selected_text": record.comment.selected_text,
            "position_start": record.comment.position_start,
            "position_end": record.comment.position_end,
            "created_at": _iso(record.created_at),
        }

    @staticmethod
    def _dict_to_comment(data: dict[str, Any]) -> EditorialCommentRecord:
        return EditorialCommentRecord(
            id=UUID(data["id"]),
            article_id=UUID(data["article_id"]),
            reviewer_id=UUID(data["reviewer_id"]),
            comment=EditorialComment(
                comment=data["comment"],
                selected_text=data.get("selected_text"),
                position_start=data.get("position_start"),
                position_end=data.get("position_end"),
            ),
            created_at=_dt(data["created_at"]),
        )

"""编辑批注仓储出站端口"""

from typing import Protocol, runtime_checkable
from uuid import UUID

from ....domain.entities import EditorialCommentRecord


@runtime_checkable
class EditorialCommentRepositoryPort(Protocol):
    """编辑批注仓储端口"""

    def save(self, comment: EditorialCommentRecord) -> None:
        """保存批注"""
        ...

    def find_by_id(self, comment_id: UUID) -> EditorialCommentRecord | None:
        """获取批注，不存在返回None"""
        ...

    def find_by_article(self, article_id: UUID) -> list[EditorialCommentRecord]:
        """获取文章的全部批注，按创建时间正序"""
        ...

    def remove(self, comment_id: UUID) -> None:
        """删除批注"""
        ...

    def remove_by_article(self, article_id: UUID) -> int:
        """
        删除文章的全部批注

        Returns:
            删除的数量
        """
        ...

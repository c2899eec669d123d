"""文章仓储出站端口 - 定义存储适配器必须实现的接口"""

from typing import Protocol, runtime_checkable
from uuid import UUID

from ....domain.entities import Article
from ....domain.value_objects import ArticleStatus


@runtime_checkable
class ArticleRepositoryPort(Protocol):
    """
    文章仓储端口

    仓储只保存文章当前的快照，最后一次写入生效。
    """

    def find_by_id(self, article_id: UUID) -> Article | None:
        """
        获取文章

        Args:
            article_id: 文章ID

        Returns:
            文章快照，不存在返回None
        """
        ...

    def save(self, article: Article) -> None:
        """
        保存文章快照（新增或覆盖）

        Raises:
            StorageError: 保存失败
        """
        ...

    def exists_by_slug(self, slug: str, exclude_id: UUID | None = None) -> bool:
        """
        slug 是否已被占用

        Args:
            slug: 待检查的 slug
            exclude_id: 忽略该文章（自动保存时排除自身）
        """
        ...

    def remove(self, article_id: UUID) -> None:
        """删除文章，不存在时不做任何事"""
        ...

    def find_by_criteria(
        self,
        status: ArticleStatus | None = None,
        author_id: UUID | None = None,
        search: str | None = None,
        limit: int = 20,
        offset: int = 0,
    ) -> list[Article]:
        """
        按条件查询文章，按创建时间倒序

        Args:
            status: 状态过滤
            author_id: 作者过滤
            search: 标题/正文关键字（不区分大小写）
            limit: 最大数量
            offset: 偏移量
        """
        ...

    def count_by_criteria(
        self,
        status: ArticleStatus | None = None,
        author_id: UUID | None = None,
        search: str | None = None,
    ) -> int:
        """统计满足条件的文章数量"""
        ...

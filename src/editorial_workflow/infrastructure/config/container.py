"""依赖注入容器 - 组装应用组件"""

from __future__ import annotations

import threading
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import datetime
from typing import TYPE_CHECKING
from uuid import UUID, uuid4

from loguru import logger

from ...application import gateways as gw
from ...shared.exceptions import ConfigError
from ...shared.utils import utc_now
from .settings import AppSettings, get_settings

if TYPE_CHECKING:
    from ...application.pipeline import Gateway
    from ...application.ports.outbound import ArticleRepositoryPort, EditorialCommentRepositoryPort
    from ..adapters import InMemoryEventBus


# 网关名称 → (网关类, 处理器类, 是否需要批注仓储)
GATEWAY_REGISTRY: dict[str, tuple[type[Gateway], type, bool]] = {
    "create": (gw.CreateArticleGateway, gw.CreateArticleProcessor, False),
    "submit": (gw.SubmitForReviewGateway, gw.SubmitForReviewProcessor, False),
    "approve": (gw.ApproveArticleGateway, gw.ApproveArticleProcessor, False),
    "reject": (gw.RejectArticleGateway, gw.RejectArticleProcessor, False),
    "publish": (gw.PublishArticleGateway, gw.PublishArticleProcessor, False),
    "autosave": (gw.AutoSaveArticleGateway, gw.AutoSaveArticleProcessor, False),
    "update": (gw.UpdateArticleGateway, gw.UpdateArticleProcessor, False),
    "archive": (gw.ArchiveArticleGateway, gw.ArchiveArticleProcessor, False),
    "get": (gw.GetArticleGateway, gw.GetArticleProcessor, False),
    "list": (gw.ListArticlesGateway, gw.ListArticlesProcessor, False),
    "delete": (gw.DeleteArticleGateway, gw.DeleteArticleProcessor, True),
    "comment.add": (gw.AddEditorialCommentGateway, gw.AddEditorialCommentProcessor, True),
    "comment.list": (gw.ListEditorialCommentsGateway, gw.ListEditorialCommentsProcessor, True),
    "comment.get": (gw.GetEditorialCommentGateway, gw.GetEditorialCommentProcessor, True),
    "comment.update": (gw.UpdateEditorialCommentGateway, gw.UpdateEditorialCommentProcessor, True),
    "comment.delete": (gw.DeleteEditorialCommentGateway, gw.DeleteEditorialCommentProcessor, True),
}


@dataclass
class Container:
    """
    依赖注入容器

    负责创建和管理仓储、事件总线和各操作网关。
    clock / id_generator 可替换，便于测试得到确定的时间和标识。
    """

    settings: AppSettings = field(default_factory=get_settings)
    clock: Callable[[], datetime] = utc_now
    id_generator: Callable[[], UUID] = uuid4

    # 线程安全锁（保护懒加载属性的初始化）
    _lock: threading.Lock = field(default_factory=threading.Lock, init=False, repr=False)

    # 适配器缓存
    _articles: ArticleRepositoryPort | None = field(default=None, init=False)
    _comments: EditorialCommentRepositoryPort | None = field(default=None, init=False)
    _event_bus: InMemoryEventBus | None = field(default=None, init=False)

    # 网关缓存
    _gateways: dict[str, Gateway] = field(default_factory=dict, init=False)

    @property
    def articles(self) -> ArticleRepositoryPort:
        """获取文章仓储"""
        if self._articles is None:
            with self._lock:
                if self._articles is None:
                    self._articles, self._comments = self._create_repositories()
        return self._articles

    @property
    def comments(self) -> EditorialCommentRepositoryPort:
        """获取批注仓储"""
        if self._comments is None:
            with self._lock:
                if self._comments is None:
                    self._articles, self._comments = self._create_repositories()
        return self._comments

    @property
    def event_bus(self) -> InMemoryEventBus:
        """获取事件总线"""
        if self._event_bus is None:
            with self._lock:
                if self._event_bus is None:
                    from ..adapters import InMemoryEventBus

                    self._event_bus = InMemoryEventBus()
        return self._event_bus

    def gateway(self, name: str) -> Gateway:
        """
        按名称获取网关

        Raises:
            ConfigError: 未知的网关名称
        """
        gateway = self._gateways.get(name)
        if gateway is not None:
            return gateway

        if name not in GATEWAY_REGISTRY:
            raise ConfigError(f"未知的网关: {name}（可选: {', '.join(GATEWAY_REGISTRY)}）")

        # 先在锁外解析依赖，避免属性内部再次获取锁
        articles, comments, event_bus = self.articles, self.comments, self.event_bus

        with self._lock:
            if name not in self._gateways:
                self._gateways[name] = self._create_gateway(name, articles, comments, event_bus)
        return self._gateways[name]

    @property
    def gateway_names(self) -> list[str]:
        return list(GATEWAY_REGISTRY)

    def close(self) -> None:
        """释放缓存的组件"""
        self._gateways.clear()
        self._articles = None
        self._comments = None
        self._event_bus = None
        logger.debug("容器资源已关闭")

    def _create_repositories(self) -> tuple[ArticleRepositoryPort, EditorialCommentRepositoryPort]:
        """根据配置创建文章和批注仓储（两者使用同一后端）"""
        backend = self.settings.storage.backend

        if backend == "memory":
            from ..adapters.storage import InMemoryArticleRepository, InMemoryEditorialCommentRepository

            logger.debug("使用内存存储")
            return InMemoryArticleRepository(), InMemoryEditorialCommentRepository()

        if backend == "json":
            from ..adapters.storage import LocalJsonArticleRepository, LocalJsonEditorialCommentRepository
            from .paths import get_storage_dir

            data_dir = self.settings.storage.data_dir or get_storage_dir()
            logger.debug(f"使用本地 JSON 存储: {data_dir}")
            return LocalJsonArticleRepository(data_dir), LocalJsonEditorialCommentRepository(data_dir)

        raise ConfigError(f"不支持的存储后端: {backend}")

    def _create_gateway(
        self,
        name: str,
        articles: ArticleRepositoryPort,
        comments: EditorialCommentRepositoryPort,
        event_bus: InMemoryEventBus,
    ) -> Gateway:
        gateway_cls, processor_cls, needs_comments = GATEWAY_REGISTRY[name]
        dependencies = (articles, comments) if needs_comments else (articles,)

        processor = processor_cls(
            *dependencies,
            clock=self.clock,
            id_generator=self.id_generator,
            event_publisher=event_bus,
        )
        gateway = gateway_cls(processor, context=self.settings.gateway.context)
        logger.debug(f"网关已创建: {gateway!r}")
        return gateway


# 全局容器实例
_container: Container | None = None


def get_container() -> Container:
    """获取全局容器实例"""
    global _container
    if _container is None:
        _container = Container()
    return _container


def reset_container() -> None:
    """重置容器（用于测试）"""
    global _container
    if _container is not None:
        _container.close()
    _container = None

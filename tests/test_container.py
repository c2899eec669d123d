"""依赖注入容器测试

测试 Container 类的依赖创建和管理功能。
"""

import pytest

from editorial_workflow.application.gateways import CreateArticleGateway, CreateArticleRequest
from editorial_workflow.infrastructure.adapters import (
    InMemoryArticleRepository,
    InMemoryEditorialCommentRepository,
    InMemoryEventBus,
    LocalJsonArticleRepository,
    LocalJsonEditorialCommentRepository,
)
from editorial_workflow.infrastructure.config import (
    GATEWAY_REGISTRY,
    AppSettings,
    Container,
    GatewaySettings,
    StorageSettings,
    get_container,
    reset_container,
)
from editorial_workflow.shared.constants import EVENT_HISTORY_LIMIT
from editorial_workflow.shared.exceptions import ConfigError


def _memory_container(**kwargs) -> Container:
    return Container(settings=AppSettings(storage=StorageSettings(backend="memory"), **kwargs))


class TestContainer:
    """Container 测试"""

    @pytest.fixture(autouse=True)
    def reset(self):
        """每个测试前后重置容器"""
        reset_container()
        yield
        reset_container()

    @pytest.mark.unit
    def test_repositories_lazy_loading(self) -> None:
        """测试仓储延迟加载"""
        container = _memory_container()
        assert container._articles is None

        articles = container.articles
        assert isinstance(articles, InMemoryArticleRepository)
        assert isinstance(container.comments, InMemoryEditorialCommentRepository)
        assert container.articles is articles  # 缓存

    @pytest.mark.unit
    def test_json_backend(self, tmp_path) -> None:
        """测试本地 JSON 存储后端"""
        settings = AppSettings(storage=StorageSettings(backend="json", data_dir=tmp_path))
        container = Container(settings=settings)

        assert isinstance(container.articles, LocalJsonArticleRepository)
        assert isinstance(container.comments, LocalJsonEditorialCommentRepository)
        assert (tmp_path / "articles").is_dir()

    @pytest.mark.unit
    def test_event_bus(self) -> None:
        container = _memory_container()
        assert isinstance(container.event_bus, InMemoryEventBus)
        assert container.event_bus is container.event_bus
        assert container.event_bus._history.maxlen == EVENT_HISTORY_LIMIT

    @pytest.mark.unit
    def test_gateway_cached(self) -> None:
        """测试网关缓存"""
        container = _memory_container()
        gateway = container.gateway("create")

        assert isinstance(gateway, CreateArticleGateway)
        assert container.gateway("create") is gateway

    @pytest.mark.unit
    def test_every_registered_gateway(self) -> None:
        container = _memory_container()
        for name in container.gateway_names:
            assert isinstance(container.gateway(name), GATEWAY_REGISTRY[name][0])

    @pytest.mark.unit
    def test_unknown_gateway(self) -> None:
        with pytest.raises(ConfigError, match="未知的网关"):
            _memory_container().gateway("unpublish")

    @pytest.mark.unit
    def test_context_from_settings(self) -> None:
        container = _memory_container(gateway=GatewaySettings(context="NewsContext"))
        assert container.gateway("publish").instrumentation.name == "NewsContext.Article.publish"

    @pytest.mark.unit
    def test_processors_share_adapters(self) -> None:
        """创建后可被其他网关读取，事件发布到同一事件总线"""
        container = _memory_container()
        container.gateway("create")(CreateArticleRequest(title="Valid Title Five", content="0123456789"))

        assert len(container.articles) == 1
        assert [e.name for e in container.event_bus.history] == ["ArticleCreated"]

    @pytest.mark.unit
    def test_close(self) -> None:
        container = _memory_container()
        container.gateway("create")
        container.close()

        assert container._gateways == {}
        assert container._articles is None

    @pytest.mark.unit
    def test_global_container(self) -> None:
        """测试全局容器单例"""
        first = get_container()
        assert get_container() is first

        reset_container()
        assert get_container() is not first

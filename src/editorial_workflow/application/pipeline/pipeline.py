"""网关流水线

- Middleware: 包裹型阶段，签名 (request, next_) -> response
- Processor: 终端阶段，签名 (request) -> response，唯一包含业务知识的阶段
- Pipeline: 构造时一次性组合调用链
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable, Sequence

from .contracts import GatewayRequest, GatewayResponse

Next = Callable[[GatewayRequest], GatewayResponse]


class Middleware(ABC):
    """包裹型阶段"""

    @abstractmethod
    def __call__(self, request: GatewayRequest, next_: Next) -> GatewayResponse:
        """处理请求，通过 next_ 调用剩余的链"""


class Processor(ABC):
    """终端阶段"""

    @abstractmethod
    def __call__(self, request: GatewayRequest) -> GatewayResponse:
        """执行用例并返回响应"""


def _link(middleware: Middleware, next_: Next) -> Next:
    def call(request: GatewayRequest) -> GatewayResponse:
        return middleware(request, next_)

    return call


class Pipeline:
    """按顺序组合的阶段链"""

    def __init__(self, middlewares: Sequence[Middleware], processor: Processor):
        self.middlewares = tuple(middlewares)
        self.processor = processor

        chain: Next = processor
        for middleware in reversed(self.middlewares):
            chain = _link(middleware, chain)
        self._chain = chain

    def __call__(self, request: GatewayRequest) -> GatewayResponse:
        return self._chain(request)

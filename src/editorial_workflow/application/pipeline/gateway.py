"""操作网关

每个操作一个 Gateway 子类，固定顺序 Logger → ErrorHandler → Validation → Processor。
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import ClassVar

from pydantic import BaseModel

from ...shared.constants import DEFAULT_BOUNDED_CONTEXT
from ...shared.exceptions import GatewayError, ValidationError
from .contracts import GatewayRequest, GatewayResponse
from .instrumentation import GatewayInstrumentation
from .middleware import ErrorHandlerMiddleware, LoggerMiddleware, ValidationMiddleware
from .pipeline import Middleware, Pipeline, Processor


class Gateway:
    """
    操作网关

    子类声明 entity / operation / request_type / constraints，
    构造函数负责按固定顺序组装流水线。

    Args:
        processor: 终端处理器
        context: 限界上下文名称
        instrumentation: 观测实现（默认基于 loguru）
        extra_middlewares: 插入到 Validation 与 Processor 之间的额外阶段
    """

    entity: ClassVar[str]
    operation: ClassVar[str]
    request_type: ClassVar[type[GatewayRequest]]
    constraints: ClassVar[type[BaseModel]]

    def __init__(
        self,
        processor: Processor,
        *,
        context: str = DEFAULT_BOUNDED_CONTEXT,
        instrumentation: GatewayInstrumentation | None = None,
        extra_middlewares: Sequence[Middleware] = (),
    ):
        self.context = context
        self.instrumentation = instrumentation or GatewayInstrumentation(context, self.entity, self.operation)
        self.pipeline = Pipeline(
            [
                LoggerMiddleware(self.instrumentation),
                ErrorHandlerMiddleware(self.instrumentation, context, self.entity, self.operation),
                ValidationMiddleware(self.constraints, self.request_type),
                *extra_middlewares,
            ],
            processor,
        )

    def __call__(self, request: GatewayRequest) -> GatewayResponse:
        """
        执行操作

        Raises:
            GatewayError: 任何阶段失败（原始异常为 cause）；
                request 不是 GatewayRequest 时 cause 为 ValidationError
        """
        if not isinstance(request, GatewayRequest):
            cause = ValidationError.for_field(
                "request",
                f"请求类型错误: 需要 {self.request_type.__name__}，实际为 {type(request).__name__}",
            )
            self.instrumentation.error(request, str(cause))
            raise GatewayError(self.context, self.entity, self.operation, cause) from cause

        return self.pipeline(request)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.instrumentation.name})"

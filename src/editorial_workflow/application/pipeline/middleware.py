"""网关中间件"""

from __future__ import annotations

from typing import Any

from loguru import logger
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from ...shared.exceptions import GatewayError, ValidationError, Violation
from ...shared.utils import clear_request_id, get_request_id, set_request_id
from .contracts import GatewayRequest, GatewayResponse
from .instrumentation import GatewayInstrumentation
from .pipeline import Middleware, Next


class LoggerMiddleware(Middleware):
    """
    最外层：记录开始与成功

    next_ 抛出异常时不记录成功，异常原样向外传播。
    当前没有 request_id 时为本次调用生成一个。
    """

    def __init__(self, instrumentation: GatewayInstrumentation):
        self._instrumentation = instrumentation

    def __call__(self, request: GatewayRequest, next_: Next) -> GatewayResponse:
        owns_request_id = get_request_id() is None
        if owns_request_id:
            set_request_id()

        try:
            self._instrumentation.start(request)
            response = next_(request)
            self._instrumentation.success(response)
            return response
        finally:
            if owns_request_id:
                clear_request_id()


class ErrorHandlerMiddleware(Middleware):
    """把任何失败统一包装为 GatewayError"""

    def __init__(self, instrumentation: GatewayInstrumentation, context: str, entity: str, operation: str):
        self._instrumentation = instrumentation
        self._context = context
        self._entity = entity
        self._operation = operation

    def __call__(self, request: GatewayRequest, next_: Next) -> GatewayResponse:
        try:
            return next_(request)
        except Exception as e:
            self._instrumentation.error(request, str(e))
            raise GatewayError(self._context, self._entity, self._operation, e) from e


class ValidationMiddleware(Middleware):
    """
    用声明式 pydantic 约束模型校验 request.data()

    所有违规一次性汇总为 ValidationError，校验失败时不调用 next_。
    """

    def __init__(self, constraints: type[BaseModel], request_type: type[GatewayRequest]):
        self._constraints = constraints
        self._request_type = request_type

    def __call__(self, request: GatewayRequest, next_: Next) -> GatewayResponse:
        if not isinstance(request, self._request_type):
            raise ValidationError.for_field(
                "request",
                f"请求类型错误: 需要 {self._request_type.__name__}，实际为 {type(request).__name__}",
            )

        try:
            self._constraints.model_validate(request.data())
        except PydanticValidationError as e:
            violations = [_to_violation(err) for err in e.errors()]
            logger.debug(f"请求校验失败: {len(violations)} 条违规")
            raise ValidationError(violations=violations) from e

        return next_(request)


def _to_violation(error: Any) -> Violation:
    field = ".".join(str(part) for part in error["loc"]) or "request"
    if error["type"] == "value_error":
        # 自定义校验器的消息，去掉 pydantic 的 "Value error, " 前缀
        message = str(error["ctx"]["error"])
    else:
        message = error["msg"]
    return Violation(field, message)

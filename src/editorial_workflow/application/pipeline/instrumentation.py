"""网关观测

基于 loguru 的结构化日志，事件名为 "<context>.<entity>.<operation>"。
"""

from __future__ import annotations

from typing import Any

from ...shared.utils import log_event
from .contracts import GatewayRequest, GatewayResponse


class GatewayInstrumentation:
    """记录网关调用的开始、成功与失败"""

    def __init__(self, context: str, entity: str, operation: str):
        self.name = f"{context}.{entity}.{operation}"

    def start(self, request: GatewayRequest) -> None:
        log_event(self.name, payload=_request_payload(request))

    def success(self, response: GatewayResponse) -> None:
        log_event(f"{self.name}.success", payload=_payload(response.data()))

    def error(self, request: Any, reason: str) -> None:
        log_event(
            f"{self.name}.error",
            level="ERROR",
            payload=_request_payload(request),
            reason=reason,
        )


def _request_payload(request: Any) -> dict[str, Any]:
    # 非 GatewayRequest 只记录类型名
    if isinstance(request, GatewayRequest):
        return _payload(request.data())
    return {"requestType": type(request).__name__}


def _payload(data: dict[str, Any]) -> dict[str, Any]:
    # 长文本字段只记录长度
    return {
        key: (f"<{len(value)} chars>" if isinstance(value, str) and len(value) > 200 else value)
        for key, value in data.items()
    }

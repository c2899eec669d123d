"""网关流水线核心"""

from .contracts import GatewayRequest, GatewayResponse, to_plain
from .gateway import Gateway
from .instrumentation import GatewayInstrumentation
from .middleware import ErrorHandlerMiddleware, LoggerMiddleware, ValidationMiddleware
from .pipeline import Middleware, Next, Pipeline, Processor

__all__ = [
    "GatewayRequest",
    "GatewayResponse",
    "to_plain",
    "Middleware",
    "Processor",
    "Next",
    "Pipeline",
    "Gateway",
    "GatewayInstrumentation",
    "LoggerMiddleware",
    "ErrorHandlerMiddleware",
    "ValidationMiddleware",
]

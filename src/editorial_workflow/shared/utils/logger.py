"""日志 - 基于Loguru

网关事件通过 log_event 记录，事件名和属性放在 record["extra"] 中，
stderr 可选择人类可读格式或 JSON；文件输出按大小轮转。
"""

import sys
from contextvars import ContextVar
from pathlib import Path
from typing import Any
from uuid import uuid4

from loguru import logger

_STDERR_FORMAT = "<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | <level>{message}</level> <dim>{extra}</dim>"
_FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | {message} | {extra}"

_request_id_var: ContextVar[str | None] = ContextVar("request_id", default=None)


def setup_logger(
    level: str = "WARNING",
    *,
    json_format: bool = False,
    log_file: Path | None = None,
    rotation: str = "10 MB",
    retention: str = "30 days",
) -> None:
    """
    配置日志输出

    Args:
        level: stderr 日志级别
        json_format: stderr 输出 JSON（每行一条 record）
        log_file: 日志文件路径，None 表示不写文件；文件始终记录 DEBUG 及以上
        rotation: 文件轮转策略，例如 "10 MB"
        retention: 旧文件保留时间，例如 "30 days"
    """
    logger.remove()

    if json_format:
        logger.add(sys.stderr, level=level, format="{message}", serialize=True)
    else:
        logger.add(sys.stderr, level=level, format=_STDERR_FORMAT, colorize=True)

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        logger.add(
            log_file,
            level="DEBUG",
            format=_FILE_FORMAT,
            rotation=rotation,
            retention=retention,
            encoding="utf-8",
            enqueue=True,
        )


def set_request_id(request_id: str | None = None) -> str:
    """设置当前调用的 request_id，省略时生成 8 位短 ID"""
    if request_id is None:
        request_id = uuid4().hex[:8]
    _request_id_var.set(request_id)
    return request_id


def get_request_id() -> str | None:
    return _request_id_var.get()


def clear_request_id() -> None:
    _request_id_var.set(None)


def log_event(event: str, level: str = "INFO", **attributes: Any) -> None:
    """
    记录结构化事件

    事件属性通过 bind 放入 record["extra"]，消息本身不做格式化，
    因此属性值中的花括号不会破坏日志。

    Examples:
        log_event("BlogContext.Article.create", payload={...})
        log_event("BlogContext.Article.publish.error", level="ERROR", reason="...")
    """
    request_id = get_request_id()
    if request_id:
        attributes["request_id"] = request_id

    logger.bind(event=event, **attributes).log(level.upper(), f"[{event}]")


__all__ = [
    "logger",
    "setup_logger",
    "set_request_id",
    "get_request_id",
    "clear_request_id",
    "log_event",
]

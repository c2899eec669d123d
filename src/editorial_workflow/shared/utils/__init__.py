"""共享工具"""

import re
from datetime import datetime, timezone
from uuid import UUID

from .logger import (
    clear_request_id,
    get_request_id,
    log_event,
    logger,
    set_request_id,
    setup_logger,
)

_CANONICAL_UUID = re.compile(r"[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}")


def utc_now() -> datetime:
    """返回当前 UTC 时间（带时区信息），替代 datetime.now() 的无时区调用"""
    return datetime.now(timezone.utc)


def is_valid_uuid(value: object) -> bool:
    """
    判断是否为合法的 UUID

    字符串只接受带连字符的 8-4-4-4-12 标准形式（大小写均可），
    不接受 32 位无连字符、花括号和 urn:uuid: 前缀等写法。
    """
    if isinstance(value, UUID):
        return True
    if not isinstance(value, str):
        return False
    return _CANONICAL_UUID.fullmatch(value) is not None


def isoformat(value: datetime | None) -> str | None:
    """datetime → ISO-8601 字符串，None 原样返回"""
    return value.isoformat() if value is not None else None


__all__ = [
    # Logger
    "logger",
    "setup_logger",
    "log_event",
    "set_request_id",
    "get_request_id",
    "clear_request_id",
    # Datetime
    "utc_now",
    "isoformat",
    # Identifiers
    "is_valid_uuid",
]

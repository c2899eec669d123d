"""网关请求/响应契约

每个操作定义一对不可变的 Request / Response（frozen dataclass）：
- Request 在构造时检查基本形态（必填字段、基础类型、UUID 格式），失败立即抛出 ValidationError
- Request.from_data() 从 camelCase 的线上格式构造，data() 返回同样格式的映射
- Response.data() 只输出可序列化的基础类型（UUID 转字符串，datetime 转 ISO-8601）
"""

from __future__ import annotations

import dataclasses
import types
from collections.abc import Mapping
from datetime import datetime
from enum import Enum
from functools import cache
from typing import Any, ClassVar, TypeVar, Union, get_args, get_origin, get_type_hints
from uuid import UUID

from pydantic.alias_generators import to_camel

from ...shared.exceptions import ValidationError, Violation
from ...shared.utils import is_valid_uuid

RequestT = TypeVar("RequestT", bound="GatewayRequest")


@dataclasses.dataclass(frozen=True)
class GatewayRequest:
    """
    网关请求基类

    子类用 dataclass 声明字段；uuid_fields 中列出的字段（Python 属性名）
    必须是合法的 UUID 字符串。
    """

    uuid_fields: ClassVar[frozenset[str]] = frozenset()

    def __post_init__(self) -> None:
        violations = []
        hints = _field_types(type(self))

        for f in dataclasses.fields(self):
            value = getattr(self, f.name)
            wire_name = to_camel(f.name)
            allowed, optional = hints[f.name]

            if value is None:
                if not optional:
                    violations.append(Violation(wire_name, "必填字段缺失"))
                continue

            if not _matches(value, allowed):
                expected = "/".join(t.__name__ for t in allowed)
                violations.append(Violation(wire_name, f"类型错误，应为 {expected}"))
                continue

            if f.name in self.uuid_fields and not is_valid_uuid(value):
                violations.append(Violation(wire_name, "必须是合法的 UUID"))

        if violations:
            raise ValidationError(violations=violations)

    @classmethod
    def from_data(cls: type[RequestT], data: Mapping[str, Any]) -> RequestT:
        """
        从 camelCase 映射构造请求

        未知字段被忽略；缺失的必填字段与形态错误一起汇总报告。
        """
        if not isinstance(data, Mapping):
            raise ValidationError.for_field("request", "请求体必须是对象")

        kwargs: dict[str, Any] = {}
        missing = []
        for f in dataclasses.fields(cls):
            wire_name = to_camel(f.name)
            if wire_name in data:
                kwargs[f.name] = data[wire_name]
            elif f.name in data:
                kwargs[f.name] = data[f.name]
            elif f.default is dataclasses.MISSING and f.default_factory is dataclasses.MISSING:
                missing.append(f.name)

        # 缺失的必填字段以 None 参与构造，由 __post_init__ 统一报告
        for name in missing:
            kwargs[name] = None

        return cls(**kwargs)

    def data(self) -> dict[str, Any]:
        """线上格式（camelCase）"""
        return {to_camel(f.name): getattr(self, f.name) for f in dataclasses.fields(self)}


@dataclasses.dataclass(frozen=True)
class GatewayResponse:
    """网关响应基类"""

    def data(self) -> dict[str, Any]:
        """线上格式（camelCase，仅包含可序列化的基础类型）"""
        return {to_camel(f.name): to_plain(getattr(self, f.name)) for f in dataclasses.fields(self)}


def to_plain(value: Any) -> Any:
    """转换为 JSON 可序列化的基础类型"""
    if isinstance(value, UUID):
        return str(value)
    if isinstance(value, datetime):
        return value.isoformat()
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, Mapping):
        return {k: to_plain(v) for k, v in value.items()}
    if isinstance(value, list | tuple):
        return [to_plain(v) for v in value]
    return value


@cache
def _field_types(cls: type) -> dict[str, tuple[tuple[type, ...], bool]]:
    """字段名 → (允许的类型, 是否可为 None)"""
    result = {}
    for name, hint in get_type_hints(cls).items():
        if get_origin(hint) is ClassVar:
            continue
        if get_origin(hint) in (Union, types.UnionType):
            args = get_args(hint)
            allowed = tuple(_runtime_type(a) for a in args if a is not type(None))
            result[name] = (allowed, type(None) in args)
        else:
            result[name] = ((_runtime_type(hint),), False)
    return result


def _runtime_type(hint: Any) -> type:
    return get_origin(hint) or hint


def _matches(value: Any, allowed: tuple[type, ...]) -> bool:
    # bool 是 int 的子类，这里不把 True/False 当作整数
    if isinstance(value, bool) and bool not in allowed:
        return False
    return isinstance(value, allowed)


__all__ = [
    "GatewayRequest",
    "GatewayResponse",
    "to_plain",
]

"""自定义异常类

包含：
- 错误类别枚举 (ErrorKind)，网关边界只按类别处理错误
- 错误码枚举 (ErrorCode)
- 分层异常类（领域层、应用层、基础设施层）
- 网关统一异常 (GatewayError)
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any


class ErrorKind(str, Enum):
    """错误类别

    传输层（HTTP/CLI）只需要检查类别即可映射为状态码或退出码。
    """

    VALIDATION = "validation"
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"
    INVALID_TRANSITION = "invalid_transition"
    INFRASTRUCTURE = "infrastructure"


class ErrorCode(Enum):
    """错误码枚举

    错误码范围：
    - 1xxx: 输入校验错误
    - 2xxx: 资源未找到
    - 3xxx: 资源冲突
    - 4xxx: 状态流转错误
    - 5xxx: 存储错误
    - 6xxx: 配置错误
    - 9xxx: 网关/未知错误
    """

    # 输入校验 1xxx
    INVALID_INPUT = (1001, "输入无效", ErrorKind.VALIDATION)
    INVALID_VALUE = (1002, "字段值无效", ErrorKind.VALIDATION)

    # 未找到 2xxx
    ARTICLE_NOT_FOUND = (2001, "文章未找到", ErrorKind.NOT_FOUND)
    COMMENT_NOT_FOUND = (2002, "批注未找到", ErrorKind.NOT_FOUND)

    # 冲突 3xxx
    ARTICLE_ALREADY_EXISTS = (3001, "文章已存在", ErrorKind.CONFLICT)
    ARTICLE_ALREADY_PUBLISHED = (3002, "文章已发布", ErrorKind.CONFLICT)

    # 状态流转 4xxx
    INVALID_TRANSITION = (4001, "非法的状态流转", ErrorKind.INVALID_TRANSITION)
    ARTICLE_NOT_EDITABLE = (4002, "文章当前状态不可编辑", ErrorKind.INVALID_TRANSITION)

    # 存储 5xxx
    STORAGE_ERROR = (5000, "存储操作失败", ErrorKind.INFRASTRUCTURE)
    STORAGE_READ_ERROR = (5001, "读取数据失败", ErrorKind.INFRASTRUCTURE)
    STORAGE_WRITE_ERROR = (5002, "写入数据失败", ErrorKind.INFRASTRUCTURE)

    # 配置 6xxx
    CONFIG_ERROR = (6000, "配置错误", ErrorKind.INFRASTRUCTURE)

    # 网关/未知 9xxx
    GATEWAY_ERROR = (9001, "网关处理失败", ErrorKind.INFRASTRUCTURE)
    UNKNOWN_ERROR = (9999, "未知错误", ErrorKind.INFRASTRUCTURE)

    def __init__(self, code: int, message: str, kind: ErrorKind):
        self._code = code
        self._message = message
        self._kind = kind

    @property
    def code(self) -> int:
        """错误码"""
        return self._code

    @property
    def message(self) -> str:
        """错误消息"""
        return self._message

    @property
    def kind(self) -> ErrorKind:
        """错误类别"""
        return self._kind

    def __str__(self) -> str:
        return f"[{self._code}] {self._message}"


class EditorialWorkflowError(Exception):
    """基础异常类

    所有自定义异常的基类，支持错误码和详细信息。
    """

    error_code: ErrorCode = ErrorCode.UNKNOWN_ERROR

    def __init__(
        self,
        message: str | None = None,
        *,
        error_code: ErrorCode | None = None,
        details: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ):
        self._error_code = error_code or self.error_code
        self._message = message or self._error_code.message
        self._details = details or {}
        self._cause = cause

        super().__init__(self._message)

    @property
    def code(self) -> int:
        """错误码"""
        return self._error_code.code

    @property
    def kind(self) -> ErrorKind:
        """错误类别"""
        return self._error_code.kind

    @property
    def user_message(self) -> str:
        """用户友好的错误消息"""
        return self._message

    @property
    def details(self) -> dict[str, Any]:
        """详细信息"""
        return self._details

    @property
    def cause(self) -> Exception | None:
        """原始异常"""
        return self._cause

    def to_dict(self) -> dict[str, Any]:
        """转换为字典（用于API响应或日志）"""
        return {
            "error_code": self._error_code.code,
            "error_type": self._error_code.name,
            "error_kind": self.kind.value,
            "message": self._message,
            "details": self._details,
        }

    def __str__(self) -> str:
        return f"[{self._error_code.code}] {self._message}"

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(code={self._error_code.code}, message={self._message!r})"


# ============ 领域层异常 ============


class DomainError(EditorialWorkflowError):
    """领域异常基类"""


class InvalidValueError(DomainError):
    """值对象/实体不变量校验失败"""

    error_code = ErrorCode.INVALID_VALUE


class ArticleNotFoundError(DomainError):
    """文章未找到异常"""

    error_code = ErrorCode.ARTICLE_NOT_FOUND

    def __init__(self, article_id: Any):
        super().__init__(f"文章未找到: {article_id}", details={"article_id": str(article_id)})


class EditorialCommentNotFoundError(DomainError):
    """批注未找到异常"""

    error_code = ErrorCode.COMMENT_NOT_FOUND

    def __init__(self, comment_id: Any):
        super().__init__(f"批注未找到: {comment_id}", details={"comment_id": str(comment_id)})


class ArticleAlreadyExistsError(DomainError):
    """slug 重复"""

    error_code = ErrorCode.ARTICLE_ALREADY_EXISTS

    def __init__(self, slug: str):
        super().__init__(f"slug 已被占用: {slug}", details={"slug": slug})


class ArticleAlreadyPublishedError(DomainError):
    """重复发布"""

    error_code = ErrorCode.ARTICLE_ALREADY_PUBLISHED

    def __init__(self, article_id: Any):
        super().__init__(f"文章已发布，不能重复发布: {article_id}", details={"article_id": str(article_id)})


class InvalidTransitionError(DomainError):
    """非法状态流转

    记录当前状态、请求的动作以及允许该动作的源状态。
    """

    error_code = ErrorCode.INVALID_TRANSITION

    def __init__(self, current_status: str, action: str, allowed_statuses: list[str]):
        self.current_status = current_status
        self.action = action
        self.allowed_statuses = allowed_statuses
        allowed = ", ".join(allowed_statuses) or "无"
        super().__init__(
            f"无法对状态为 {current_status} 的文章执行 {action}（允许的状态: {allowed}）",
            details={
                "current_status": current_status,
                "action": action,
                "allowed_statuses": allowed_statuses,
            },
        )


class ArticleNotEditableError(DomainError):
    """文章当前状态不允许直接修改内容"""

    error_code = ErrorCode.ARTICLE_NOT_EDITABLE


# ============ 应用层异常 ============


class ApplicationError(EditorialWorkflowError):
    """应用层异常基类"""


@dataclass(frozen=True)
class Violation:
    """单条校验违规"""

    field: str
    message: str

    def __str__(self) -> str:
        return f"{self.field}: {self.message}"


class ValidationError(ApplicationError):
    """验证异常

    汇总所有违反的规则，而不只是第一条。
    """

    error_code = ErrorCode.INVALID_INPUT

    def __init__(self, message: str | None = None, *, violations: list[Violation] | None = None):
        self.violations = list(violations or [])
        if message is None and self.violations:
            message = "请求参数校验失败: " + "; ".join(str(v) for v in self.violations)
        super().__init__(
            message,
            details={"violations": [{"field": v.field, "message": v.message} for v in self.violations]},
        )

    @classmethod
    def for_field(cls, field: str, message: str) -> ValidationError:
        """单字段校验失败"""
        return cls(violations=[Violation(field, message)])


# ============ 基础设施层异常 ============


class InfrastructureError(EditorialWorkflowError):
    """基础设施异常基类"""


class StorageError(InfrastructureError):
    """存储异常"""

    error_code = ErrorCode.STORAGE_ERROR


class StorageReadError(StorageError):
    """存储读取异常"""

    error_code = ErrorCode.STORAGE_READ_ERROR


class StorageWriteError(StorageError):
    """存储写入异常"""

    error_code = ErrorCode.STORAGE_WRITE_ERROR


class ConfigError(InfrastructureError):
    """配置异常"""

    error_code = ErrorCode.CONFIG_ERROR


# ============ 网关异常 ============


class GatewayError(EditorialWorkflowError):
    """网关统一异常

    网关边界上所有失败都会被包装为该类型，调用方只需处理一种错误形态。
    """

    error_code = ErrorCode.GATEWAY_ERROR

    def __init__(self, context: str, entity: str, operation: str, cause: Exception):
        self.context = context
        self.entity = entity
        self.operation = operation
        super().__init__(
            f"Error during {operation} process for {context} {entity}",
            details={"context": context, "entity": entity, "operation": operation},
            cause=cause,
        )

    @property
    def kind(self) -> ErrorKind:
        """错误类别取自原始异常"""
        if isinstance(self.cause, EditorialWorkflowError):
            return self.cause.kind
        return ErrorKind.INFRASTRUCTURE

    def to_dict(self) -> dict[str, Any]:
        data = super().to_dict()
        cause = self.cause
        data["cause"] = (
            cause.to_dict()
            if isinstance(cause, EditorialWorkflowError)
            else {"error_type": type(cause).__name__, "message": str(cause)}
        )
        return data


# ============ 工具函数 ============

_HTTP_STATUS_BY_KIND = {
    ErrorKind.VALIDATION: 422,
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.CONFLICT: 409,
    ErrorKind.INVALID_TRANSITION: 422,
    ErrorKind.INFRASTRUCTURE: 500,
}


def http_status_for(kind: ErrorKind) -> int:
    """错误类别 → HTTP 状态码（供传输层使用）"""
    return _HTTP_STATUS_BY_KIND[kind]


"""配置管理 - 基于Pydantic Settings

子配置是普通的 BaseModel，只通过 AppSettings 的前缀读取环境变量。

环境变量使用 EDITORIAL_ 前缀 + 双下划线嵌套，例如：
    EDITORIAL_LOG_LEVEL=DEBUG
    EDITORIAL_STORAGE__BACKEND=json
    EDITORIAL_STORAGE__DATA_DIR=/var/lib/editorial
"""

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from ...shared.constants import DEFAULT_BOUNDED_CONTEXT
from .paths import get_env_file_path


class StorageSettings(BaseModel):
    """存储配置"""

    backend: Literal["memory", "json"] = Field(
        default="json",
        description="存储后端 (memory: 进程内，json: 本地 JSON 文件)",
    )
    data_dir: Path | None = Field(
        default=None,
        description="JSON 存储目录，默认使用平台标准数据目录",
    )


class GatewaySettings(BaseModel):
    """网关配置"""

    context: str = Field(default=DEFAULT_BOUNDED_CONTEXT, description="限界上下文名称")


class LoggingSettings(BaseModel):
    """日志配置"""

    to_file: bool = Field(default=False, description="是否写入日志文件")
    log_dir: Path | None = Field(default=None, description="日志目录，默认使用平台标准日志目录")
    json_format: bool = Field(default=False, description="是否输出 JSON 结构化日志")
    rotation: str = Field(default="10 MB", description="日志文件轮转策略")
    retention: str = Field(default="30 days", description="日志保留时间")


class AppSettings(BaseSettings):
    """主应用配置"""

    model_config = SettingsConfigDict(
        env_prefix="EDITORIAL_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore",
    )

    # 基本设置
    debug: bool = Field(default=False, description="调试模式")
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="WARNING",
        description="日志级别",
    )

    # 子配置
    storage: StorageSettings = Field(default_factory=StorageSettings)
    gateway: GatewaySettings = Field(default_factory=GatewaySettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)


@lru_cache
def get_settings() -> AppSettings:
    """获取应用配置（单例）

    .env 优先从当前工作目录读取，其次是平台配置目录。
    """
    return AppSettings(_env_file=get_env_file_path())

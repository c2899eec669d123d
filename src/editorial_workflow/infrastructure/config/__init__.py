"""配置模块"""

from .container import GATEWAY_REGISTRY, Container, get_container, reset_container
from .paths import get_config_dir, get_data_dir, get_env_file_path, get_log_dir, get_storage_dir
from .settings import AppSettings, GatewaySettings, LoggingSettings, StorageSettings, get_settings

__all__ = [
    "AppSettings",
    "StorageSettings",
    "GatewaySettings",
    "LoggingSettings",
    "get_settings",
    "Container",
    "GATEWAY_REGISTRY",
    "get_container",
    "reset_container",
    "get_config_dir",
    "get_data_dir",
    "get_storage_dir",
    "get_log_dir",
    "get_env_file_path",
]

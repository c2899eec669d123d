"""跨平台路径管理

遵循各平台标准路径规范：
- Windows: AppData/Local, AppData/Roaming
- macOS: ~/Library/Application Support
- Linux: ~/.config, ~/.local/share (XDG规范)

使用 platformdirs 库实现跨平台支持。
"""

from __future__ import annotations

from pathlib import Path

import platformdirs

from ...shared.constants import DATA_DIR_NAME

# 应用标识
APP_NAME = "EditorialWorkflow"
APP_AUTHOR = "EditorialWorkflow"


def get_config_dir() -> Path:
    """获取配置目录

    Windows: C:/Users/<user>/AppData/Local/EditorialWorkflow
    macOS: ~/Library/Application Support/EditorialWorkflow
    Linux: ~/.config/EditorialWorkflow
    """
    config_dir = Path(platformdirs.user_config_dir(APP_NAME, APP_AUTHOR))
    config_dir.mkdir(parents=True, exist_ok=True)
    return config_dir


def get_data_dir() -> Path:
    """获取数据目录

    Windows: C:/Users/<user>/AppData/Local/EditorialWorkflow
    macOS: ~/Library/Application Support/EditorialWorkflow
    Linux: ~/.local/share/EditorialWorkflow
    """
    data_dir = Path(platformdirs.user_data_dir(APP_NAME, APP_AUTHOR))
    data_dir.mkdir(parents=True, exist_ok=True)
    return data_dir


def get_storage_dir() -> Path:
    """JSON 存储的默认目录"""
    storage_dir = get_data_dir() / DATA_DIR_NAME
    storage_dir.mkdir(parents=True, exist_ok=True)
    return storage_dir


def get_log_dir() -> Path:
    """获取日志目录"""
    log_dir = get_data_dir() / "logs"
    log_dir.mkdir(parents=True, exist_ok=True)
    return log_dir


def get_env_file_path() -> Path:
    """获取 .env 文件路径（项目目录或配置目录）"""
    # 优先使用当前工作目录
    cwd_env = Path.cwd() / ".env"
    if cwd_env.exists():
        return cwd_env

    # 其次使用配置目录
    return get_config_dir() / ".env"

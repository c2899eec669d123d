"""命令行界面 (Click + Rich)"""

from .app import cli, run_cli

__all__ = ["cli", "run_cli"]

"""编辑工作流 - 主入口点

    python -m editorial_workflow <command> [args]
"""

from .presentation.cli import run_cli


def main() -> None:
    """主入口函数"""
    run_cli()


if __name__ == "__main__":
    main()

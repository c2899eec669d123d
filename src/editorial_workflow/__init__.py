"""编辑工作流

文章从撰写、审核到发布的完整生命周期管理。

架构：
- 领域驱动设计 (DDD) + 六边形架构 (Hexagonal Architecture)
- 文章状态机：流转规则以数据表形式集中定义
- 操作网关：每个用例经过 Logger → ErrorHandler → Validation → Processor 流水线

使用方式：
    editorial create -t "Valid Title Five" -c "0123456789"
    editorial submit <ARTICLE_ID>
    python -m editorial_workflow list --status pending_review
"""

from .shared.constants import APP_NAME, VERSION

__version__ = VERSION
__app_name__ = APP_NAME

__all__ = ["__version__", "__app_name__"]

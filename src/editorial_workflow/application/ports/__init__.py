"""
应用层端口

Hexagonal Architecture中的端口定义：
- outbound: 出站端口，定义应用层依赖的仓储和事件发布接口

入站端口即各操作的 Gateway（见 application.gateways）。
"""

from .outbound import (
    ArticleRepositoryPort,
    EditorialCommentRepositoryPort,
    EventPublisherPort,
)

__all__ = [
    "ArticleRepositoryPort",
    "EditorialCommentRepositoryPort",
    "EventPublisherPort",
]

"""应用层

应用层负责用例编排，协调领域层和基础设施层。

包含：
- ports: 出站端口定义（仓储、事件发布）
- pipeline: 网关流水线核心（中间件、处理器、校验）
- gateways: 每个操作一个网关
"""

from . import gateways, pipeline, ports

__all__ = [
    "gateways",
    "pipeline",
    "ports",
]
